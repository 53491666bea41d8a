"""
Binary codec tests.

Covers the host-chain primitive encodings, CompactSize boundaries and the
reader's rejection of truncated or non-canonical input.
"""

import pytest

from sidechain_core.codec import BinaryReader, BinaryWriter, hash256, hash_to_hex, sha256_bytes
from sidechain_core.runtime.errors import DecodeError, EncodingError

from helpers.parity import assert_hex_equal


class TestCompactSize:
    """CompactSize length prefixes."""

    @pytest.mark.parametrize("value,expected_hex", [
        (0, "00"),
        (0xFC, "fc"),
        (0xFD, "fdfd00"),
        (0xFFFF, "fdffff"),
        (0x10000, "fe00000100"),
        (0xFFFFFFFF, "feffffffff"),
        (0x100000000, "ff0000000001000000"),
    ])
    def test_boundaries(self, value, expected_hex):
        w = BinaryWriter()
        w.compact_size(value)
        assert_hex_equal(w.to_bytes(), expected_hex, f"compact_size({value:#x})")
        assert BinaryReader(w.to_bytes()).compact_size() == value

    @pytest.mark.parametrize("encoded", [
        bytes.fromhex("fd1000"),
        bytes.fromhex("feffff0000"),
        bytes.fromhex("ffffffffff00000000"),
    ])
    def test_non_canonical_rejected(self, encoded):
        with pytest.raises(DecodeError):
            BinaryReader(encoded).compact_size()

    def test_negative_rejected(self):
        with pytest.raises(EncodingError):
            BinaryWriter().compact_size(-1)


class TestPrimitives:
    """Fixed-width little-endian integers."""

    def test_little_endian_layout(self):
        w = BinaryWriter()
        w.u8(0xAB)
        w.i32le(-2)
        w.u32le(0x01020304)
        w.i64le(-1)
        assert_hex_equal(w.to_bytes(), "ab feffffff 04030201 ffffffffffffffff", "primitives")

        r = BinaryReader(w.to_bytes())
        assert r.u8() == 0xAB
        assert r.i32le() == -2
        assert r.u32le() == 0x01020304
        assert r.i64le() == -1
        assert r.eof

    @pytest.mark.parametrize("method,value", [
        ("u8", 256),
        ("u8", -1),
        ("i32le", 1 << 31),
        ("u32le", -1),
        ("i64le", 1 << 63),
    ])
    def test_out_of_range_rejected(self, method, value):
        with pytest.raises(EncodingError):
            getattr(BinaryWriter(), method)(value)

    def test_var_str_utf8(self):
        w = BinaryWriter()
        w.var_str("dépôt")
        data = w.to_bytes()
        assert data[0] == len("dépôt".encode("utf-8"))
        assert BinaryReader(data).var_str() == "dépôt"

    def test_var_str_invalid_utf8(self):
        with pytest.raises(DecodeError):
            BinaryReader(b"\x01\xff").var_str()

    def test_hash_must_be_32_bytes(self):
        with pytest.raises(EncodingError):
            BinaryWriter().hash256(b"\x00" * 31)


class TestReaderUnderflow:
    """Reads past the end fail without moving the offset."""

    @pytest.mark.parametrize("method", ["u8", "i32le", "u32le", "i64le", "hash256"])
    def test_empty_buffer(self, method):
        r = BinaryReader(b"")
        with pytest.raises(DecodeError):
            getattr(r, method)()
        assert r.remaining == 0

    def test_length_prefix_longer_than_data(self):
        r = BinaryReader(b"\x05abc")
        with pytest.raises(DecodeError):
            r.var_bytes()


class TestHashes:
    """SHA-256 helpers."""

    def test_sha256_known_vector(self):
        assert sha256_bytes(b"abc").hex() == (
            "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
        )

    def test_hash256_is_double_sha256(self):
        assert hash256(b"abc") == sha256_bytes(sha256_bytes(b"abc"))

    def test_hash_hex_is_byte_reversed(self):
        h = bytes(range(32))
        assert hash_to_hex(h) == "1f1e1d1c1b1a191817161514131211100f0e0d0c0b0a09080706050403020100"

    def test_removed_hash_helpers_not_exported(self):
        import sidechain_core.codec as codec

        assert not hasattr(codec, "hex_to_hash")
        assert not hasattr(codec, "sha256_hex")
