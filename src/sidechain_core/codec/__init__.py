"""
Sidechain Binary Codec Module

Host-chain binary encoding for sidechain objects and the transactions
they carry.

Key components:
- writer.py: Binary writer with CompactSize/primitive encoding
- reader.py: Binary reader with CompactSize/primitive decoding
- hashes.py: SHA-256 and double SHA-256 helpers
"""

from .hashes import ZERO_HASH, hash256, hash_to_hex, sha256_bytes
from .reader import BinaryReader
from .writer import BinaryWriter

__all__ = [
    "BinaryReader",
    "BinaryWriter",
    "ZERO_HASH",
    "hash256",
    "hash_to_hex",
    "sha256_bytes",
]
