# MIT License
# Copyright (c) 2025 Hashborn

from typing import Dict, Optional, Sequence
from ..types.common import ChainType

# Global Constants
TOKEN_SYMBOL = "MATH"
DECIMALS = 18

# SS58 address formats
SUBSTRATE_SS58_FORMAT = 42      # Generic format used inside genesis JSON
MAINNET_SS58_FORMAT = 39
TESTNET_SS58_FORMAT = 40

# Initial balance per endowed account. Production and test networks use
# different tokenomics; do not merge these.
PRODUCTION_ENDOWMENT = 1 << 56
TESTNET_ENDOWMENT = 1 << 60

MAX_BALANCE = (1 << 128) - 1
MAX_PARA_ID = (1 << 32) - 1

POLKADOT_TELEMETRY_URL = "wss://telemetry.polkadot.io/submit/"

# Sudo key of MathChain PC1. A fixed account, not derived from any seed.
PC1_ROOT_KEY = "0xbc86f5701ad432b63551a677dedfc17ba85d4bce2a608aa2fe26ba246b843909"

WELL_KNOWN_SEEDS = ("Alice", "Bob", "Charlie", "Dave", "Eve", "Ferdie")

class ProfileConfig:
    def __init__(self,
                 name: str,
                 chain_id: str,
                 chain_type: ChainType,
                 relay_chain: str,
                 endowment: int,
                 endowed_seeds: Sequence[str] = (),
                 # Exactly one root source
                 root_seed: Optional[str] = None,
                 root_literal: Optional[str] = None,
                 # Prepend the root to the endowed accounts
                 endow_root: bool = False,
                 boot_nodes: Sequence[str] = (),
                 telemetry_url: Optional[str] = None,
                 telemetry_verbosity: int = 0,
                 ss58_format: int = MAINNET_SS58_FORMAT,
                 protocol_id: Optional[str] = None):
        if (root_seed is None) == (root_literal is None):
            raise ValueError(f"Profile '{chain_id}' needs exactly one of root_seed / root_literal")
        if not 0 <= endowment <= MAX_BALANCE:
            raise ValueError(f"Endowment {endowment} does not fit in u128")

        self.name = name
        self.chain_id = chain_id
        self.chain_type = chain_type
        self.relay_chain = relay_chain
        self.endowment = endowment
        self.endowed_seeds = tuple(endowed_seeds)
        self.root_seed = root_seed
        self.root_literal = root_literal
        self.endow_root = endow_root
        self.boot_nodes = tuple(boot_nodes)
        self.telemetry_url = telemetry_url
        self.telemetry_verbosity = telemetry_verbosity
        self.ss58_format = ss58_format
        self.protocol_id = protocol_id

NETWORKS: Dict[str, ProfileConfig] = {
    "pc1": ProfileConfig(
        name="MathChain PC1",
        chain_id="MathChain PC1",
        chain_type=ChainType.LIVE,
        relay_chain="rococo",
        endowment=PRODUCTION_ENDOWMENT,
        root_literal=PC1_ROOT_KEY,
        endow_root=True,
        telemetry_url=POLKADOT_TELEMETRY_URL,
        telemetry_verbosity=0,
    ),
    "dev": ProfileConfig(
        name="Development",
        chain_id="dev",
        chain_type=ChainType.LOCAL,
        relay_chain="rococo-dev",
        endowment=TESTNET_ENDOWMENT,
        root_seed="Alice",
        endowed_seeds=["Alice", "Bob", "Alice//stash", "Bob//stash"],
    ),
    "local_testnet": ProfileConfig(
        name="Local Testnet",
        chain_id="local_testnet",
        chain_type=ChainType.LOCAL,
        relay_chain="rococo-local",
        endowment=TESTNET_ENDOWMENT,
        root_seed="Alice",
        endowed_seeds=list(WELL_KNOWN_SEEDS) + [f"{s}//stash" for s in WELL_KNOWN_SEEDS],
    ),
}

# Aliases accepted on the command line
CHAIN_ALIASES: Dict[str, str] = {
    "": "local_testnet",
    "local": "local_testnet",
    "development": "dev",
    "mathchain-pc1": "pc1",
}
