import hashlib

def blake2_256(data: bytes) -> bytes:
    """Returns 32-byte BLAKE2b hash of bytes."""
    return hashlib.blake2b(data, digest_size=32).digest()

def blake2_256_hex(data: bytes) -> str:
    """Returns BLAKE2b-256 hash of bytes as 0x-prefixed hex string."""
    return "0x" + blake2_256(data).hex()
