import re
from substrateinterface import Keypair, KeypairType # type: ignore
from ..types.common import DerivationError

# One or more '//hard' or '/soft' junctions, no password part
_PATH_RE = re.compile(r"^(//?[^/]+)+$")

def derivation_path(seed: str) -> str:
    """Hard derivation path for a seed, e.g. 'Alice' -> '//Alice'."""
    if not seed:
        raise DerivationError("Seed must be a non-empty string")
    path = f"//{seed}"
    if "///" in path:
        raise DerivationError(f"Password-protected paths are not supported: '{path}'")
    if not _PATH_RE.match(path):
        raise DerivationError(f"Malformed derivation path '{path}'")
    return path

def keypair_from_seed(seed: str) -> Keypair:
    """
    Derives the sr25519 keypair for a seed.

    A path without a phrase is applied to the well-known development root
    phrase, so '//Alice' gives the usual Alice account on every node.
    """
    path = derivation_path(seed)
    try:
        return Keypair.create_from_uri(path, crypto_type=KeypairType.SR25519)
    except ValueError as e:
        raise DerivationError(f"Cannot derive key at '{path}': {e}") from e

def derive_public_key(seed: str) -> bytes:
    """Returns the 32-byte sr25519 public key for a seed."""
    return keypair_from_seed(seed).public_key
