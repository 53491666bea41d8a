"""
Binary Reader

Mirror of ``BinaryWriter``: decodes the host chain's little-endian
primitives and CompactSize-prefixed fields from a byte buffer.
"""

import builtins
import struct

from ..runtime.errors import DecodeError


class BinaryReader:
    """
    Binary reader for host-chain serialization.

    Every read that would run past the end of the buffer raises
    ``DecodeError`` and leaves the offset unchanged.
    """

    def __init__(self, buf: builtins.bytes):
        """
        Initialize reader with byte buffer.

        Args:
            buf: Byte buffer to read from
        """
        self._buf = bytes(buf)
        self._off = 0

    @property
    def eof(self) -> bool:
        """True if at end of buffer."""
        return self._off >= len(self._buf)

    @property
    def remaining(self) -> int:
        """Number of unread bytes."""
        return len(self._buf) - self._off

    def _take(self, n: int) -> builtins.bytes:
        if n < 0 or self._off + n > len(self._buf):
            raise DecodeError(f"Buffer underflow: need {n} bytes, have {self.remaining}",
                              details={"offset": self._off})
        out = self._buf[self._off : self._off + n]
        self._off += n
        return out

    def u8(self) -> int:
        """
        Read unsigned 8-bit integer.

        Returns:
            Unsigned 8-bit integer value
        """
        return self._take(1)[0]

    def u16le(self) -> int:
        """Read unsigned 16-bit integer in little-endian format."""
        return struct.unpack("<H", self._take(2))[0]

    def i32le(self) -> int:
        """
        Read signed 32-bit integer in little-endian format.

        Returns:
            Signed 32-bit integer value
        """
        return struct.unpack("<i", self._take(4))[0]

    def u32le(self) -> int:
        """
        Read unsigned 32-bit integer in little-endian format.

        Returns:
            Unsigned 32-bit integer value
        """
        return struct.unpack("<I", self._take(4))[0]

    def i64le(self) -> int:
        """
        Read signed 64-bit integer in little-endian format.

        Returns:
            Signed 64-bit integer value
        """
        return struct.unpack("<q", self._take(8))[0]

    def u64le(self) -> int:
        """Read unsigned 64-bit integer in little-endian format."""
        return struct.unpack("<Q", self._take(8))[0]

    def bytes(self, n: int) -> builtins.bytes:
        """
        Read n bytes from buffer.

        Args:
            n: Number of bytes to read

        Returns:
            Bytes of specified length
        """
        return self._take(n)

    def hash256(self) -> builtins.bytes:
        """Read a raw 32-byte hash."""
        return self._take(32)

    def compact_size(self) -> int:
        """
        Read a CompactSize unsigned integer.

        Non-canonical encodings (a wider form than the value needs) are
        rejected, as the host chain does.

        Returns:
            Decoded unsigned integer value
        """
        marker = self.u8()
        if marker < 0xFD:
            return marker
        if marker == 0xFD:
            v = self.u16le()
            minimum = 0xFD
        elif marker == 0xFE:
            v = self.u32le()
            minimum = 0x10000
        else:
            v = self.u64le()
            minimum = 0x100000000
        if v < minimum:
            raise DecodeError("non-canonical compact size", details={"value": v})
        return v

    def var_bytes(self) -> builtins.bytes:
        """
        Read bytes with a CompactSize length prefix.

        Returns:
            Bytes with length read from the prefix
        """
        n = self.compact_size()
        return self.bytes(n)

    def var_str(self) -> str:
        """
        Read a UTF-8 string with a CompactSize length prefix.

        Returns:
            Decoded string
        """
        b = self.var_bytes()
        try:
            return b.decode('utf-8')
        except UnicodeDecodeError as e:
            raise DecodeError("string is not valid UTF-8", cause=e)
