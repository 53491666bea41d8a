"""
Hash Functions

SHA-256 helpers used for object hashing and address checksums, plus the
host chain's reversed-hex rendering of 256-bit hashes.
"""

import hashlib

ZERO_HASH = b"\x00" * 32


def sha256_bytes(input_bytes: bytes) -> bytes:
    """
    Compute SHA-256 hash of input bytes.

    Args:
        input_bytes: Input bytes to hash

    Returns:
        SHA-256 hash as bytes (32 bytes)
    """
    return hashlib.sha256(input_bytes).digest()


def hash256(input_bytes: bytes) -> bytes:
    """
    Double SHA-256, the host chain's serialization hash.

    Args:
        input_bytes: Input bytes to hash

    Returns:
        SHA-256(SHA-256(input)) as bytes (32 bytes)
    """
    return sha256_bytes(sha256_bytes(input_bytes))


def hash_to_hex(h: bytes) -> str:
    """
    Render a 256-bit hash the way the host chain prints uint256 values
    (byte-reversed hex).
    """
    return h[::-1].hex()
