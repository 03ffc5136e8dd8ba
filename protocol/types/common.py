# MIT License
# Copyright (c) 2025 Hashborn

from enum import Enum

class ChainType(str, Enum):
    DEVELOPMENT = "Development"
    LOCAL = "Local"         # Local testnet, several validators on one machine
    LIVE = "Live"           # Public network, conservative peer discovery
    CUSTOM = "Custom"

class ProtocolError(Exception):
    pass

class DerivationError(ProtocolError):
    """Seed cannot be turned into a key on the derivation path."""
    pass

class MissingRuntimeError(ProtocolError):
    """Compiled runtime wasm is not available at genesis construction."""
    pass

class UnknownChainError(ProtocolError):
    pass
