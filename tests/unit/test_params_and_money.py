"""
Configuration model and money formatting.
"""

import pytest
from pydantic import ValidationError

from sidechain_core.address import parse_deposit_address
from sidechain_core.config import DEFAULT_PARAMS, OP_RETURN, SCRIPT_MAGIC, SidechainParams
from sidechain_core.money import COIN, INT64_MAX, INT64_MIN, format_money


@pytest.mark.unit
class TestSidechainParams:

    def test_defaults(self):
        assert DEFAULT_PARAMS.this_sidechain == 0
        assert DEFAULT_PARAMS.script_magic == SCRIPT_MAGIC
        assert DEFAULT_PARAMS.checksum_length == 6
        assert DEFAULT_PARAMS.script_header == bytes([OP_RETURN]) + b"\xac\xdc\xf6\x6f"

    def test_alias_and_field_names(self):
        assert SidechainParams(thisSidechain=4).this_sidechain == 4
        assert SidechainParams(this_sidechain=4).this_sidechain == 4

    @pytest.mark.parametrize("kwargs", [
        {"this_sidechain": 256},
        {"this_sidechain": -1},
        {"script_magic": b"\x01\x02\x03"},
        {"checksum_length": 0},
    ])
    def test_invalid(self, kwargs):
        with pytest.raises(ValidationError):
            SidechainParams(**kwargs)

    def test_deposit_address_uses_this_sidechain(self):
        params = SidechainParams(this_sidechain=7)
        address = params.deposit_address("abc")
        assert address.startswith("s7_abc_")
        assert parse_deposit_address(address) == ("abc", 7)

    def test_to_dict(self):
        assert SidechainParams(this_sidechain=2).to_dict() == {
            "thisSidechain": 2,
            "scriptMagic": "acdcf66f",
            "checksumLength": 6,
        }


@pytest.mark.unit
class TestFormatMoney:

    @pytest.mark.parametrize("amount,expected", [
        (0, "0.00"),
        (1, "0.00000001"),
        (150000, "0.0015"),
        (10_000_000, "0.10"),
        (COIN, "1.00"),
        (123_456_789, "1.23456789"),
        (21_000_000 * COIN, "21000000.00"),
        (-50_000_000, "-0.50"),
        (-1, "-0.00000001"),
        (INT64_MAX, "92233720368.54775807"),
        (INT64_MIN, "-92233720368.54775808"),
    ])
    def test_fixed_point(self, amount, expected):
        assert format_money(amount) == expected
