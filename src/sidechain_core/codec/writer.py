"""
Binary Writer

Implements the host chain's little-endian primitive encoding and the
CompactSize length prefix used for strings, scripts and vectors.
"""

import struct
from typing import List

from ..runtime.errors import EncodingError


class BinaryWriter:
    """
    Binary writer for host-chain serialization.

    Values are appended in call order; nothing is padded or reordered,
    so identical call sequences always yield identical bytes.
    """

    def __init__(self):
        """Initialize writer with empty byte buffer."""
        self._bb: List[int] = []

    def u8(self, v: int) -> None:
        """
        Write unsigned 8-bit integer.

        Args:
            v: Integer value to write (0-255)
        """
        if not 0 <= v <= 0xFF:
            raise EncodingError(f"u8 out of range: {v}")
        self._bb.append(v)

    def u16le(self, v: int) -> None:
        """Write unsigned 16-bit integer in little-endian format."""
        self._bb.extend(struct.pack('<H', v))

    def i32le(self, v: int) -> None:
        """
        Write signed 32-bit integer in little-endian format.

        Args:
            v: Integer value to write as 32-bit little-endian
        """
        try:
            packed = struct.pack('<i', v)
        except struct.error as e:
            raise EncodingError(f"i32 out of range: {v}", cause=e)
        self._bb.extend(packed)

    def u32le(self, v: int) -> None:
        """
        Write unsigned 32-bit integer in little-endian format.

        Args:
            v: Integer value to write as 32-bit little-endian
        """
        try:
            packed = struct.pack('<I', v)
        except struct.error as e:
            raise EncodingError(f"u32 out of range: {v}", cause=e)
        self._bb.extend(packed)

    def i64le(self, v: int) -> None:
        """
        Write signed 64-bit integer in little-endian format.

        Args:
            v: Integer value to write as 64-bit little-endian
        """
        try:
            packed = struct.pack('<q', v)
        except struct.error as e:
            raise EncodingError(f"i64 out of range: {v}", cause=e)
        self._bb.extend(packed)

    def u64le(self, v: int) -> None:
        """Write unsigned 64-bit integer in little-endian format."""
        self._bb.extend(struct.pack('<Q', v))

    def bytes(self, v: bytes) -> None:
        """
        Write raw bytes without length prefix.

        Args:
            v: Bytes to write directly
        """
        self._bb.extend(v)

    def hash256(self, v: bytes) -> None:
        """
        Write a 32-byte hash as stored (no length prefix).

        Args:
            v: Hash bytes, exactly 32 long
        """
        if len(v) != 32:
            raise EncodingError(f"hash must be 32 bytes, got {len(v)}")
        self.bytes(v)

    def compact_size(self, v: int) -> None:
        """
        Write a CompactSize unsigned integer.

        Values below 0xfd take one byte; larger values take a marker byte
        followed by a u16, u32 or u64.

        Args:
            v: Non-negative integer to encode
        """
        if v < 0:
            raise EncodingError(f"compact size cannot be negative: {v}")
        if v < 0xFD:
            self.u8(v)
        elif v <= 0xFFFF:
            self.u8(0xFD)
            self.u16le(v)
        elif v <= 0xFFFFFFFF:
            self.u8(0xFE)
            self.u32le(v)
        else:
            self.u8(0xFF)
            self.u64le(v)

    def var_bytes(self, v: bytes) -> None:
        """
        Write bytes with a CompactSize length prefix.

        Args:
            v: Bytes to write with length prefix
        """
        self.compact_size(len(v))
        self.bytes(v)

    def var_str(self, s: str) -> None:
        """
        Write a UTF-8 string with a CompactSize length prefix.

        Args:
            s: String to write
        """
        self.var_bytes(s.encode('utf-8'))

    def to_bytes(self) -> bytes:
        """
        Return accumulated bytes as immutable bytes object.

        Returns:
            Bytes containing all written data
        """
        return bytes(self._bb)
