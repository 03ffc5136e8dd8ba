from substrateinterface.utils.ss58 import ss58_encode, ss58_decode # type: ignore
from .keys import derive_public_key
from ..config.params import SUBSTRATE_SS58_FORMAT

ACCOUNT_ID_LEN = 32

def to_account_id(pub_bytes: bytes) -> bytes:
    """sr25519 accounts are identified by the public key itself."""
    if len(pub_bytes) != ACCOUNT_ID_LEN:
        raise ValueError(f"Expected {ACCOUNT_ID_LEN}-byte public key, got {len(pub_bytes)}")
    return bytes(pub_bytes)

def account_id_from_seed(seed: str) -> bytes:
    return to_account_id(derive_public_key(seed))

def account_id_from_hex(literal: str) -> bytes:
    """Parses a hard-coded 32-byte account literal ('0x...' or bare hex)."""
    hex_str = literal[2:] if literal.startswith("0x") else literal
    try:
        raw = bytes.fromhex(hex_str)
    except ValueError:
        raise ValueError(f"Invalid hex account literal: {literal}")
    if len(raw) != ACCOUNT_ID_LEN:
        raise ValueError(f"Account literal must be {ACCOUNT_ID_LEN} bytes, got {len(raw)}")
    return raw

def ss58_address(account_id: bytes, ss58_format: int = SUBSTRATE_SS58_FORMAT) -> str:
    """Encodes AccountId as SS58 address string."""
    return ss58_encode(account_id, ss58_format=ss58_format)

def account_id_from_ss58(address: str) -> bytes:
    """Decodes SS58 address (any format) to AccountId bytes."""
    return account_id_from_hex(ss58_decode(address))
