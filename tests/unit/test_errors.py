"""
Error model tests.
"""

import pytest

from sidechain_core.runtime.errors import (
    DecodeError,
    EncodingError,
    ErrorCode,
    InvalidAddressError,
    SidechainError,
    UnknownObjectError,
    UnmarshalError,
)


@pytest.mark.unit
class TestErrorModel:

    def test_hierarchy(self):
        assert issubclass(DecodeError, EncodingError)
        assert issubclass(UnmarshalError, EncodingError)
        for cls in (EncodingError, UnknownObjectError, InvalidAddressError):
            assert issubclass(cls, SidechainError)

    def test_codes(self):
        assert DecodeError("x").code == ErrorCode.INVALID_BINARY
        assert UnmarshalError("x").code == ErrorCode.UNMARSHAL_ERROR
        assert UnknownObjectError(7).code == ErrorCode.UNKNOWN_OBJECT
        assert InvalidAddressError().code == ErrorCode.INVALID_ADDRESS

    def test_str_includes_details_and_cause(self):
        cause = ValueError("bad byte")
        err = UnmarshalError("Malformed object", details={"offset": 3}, cause=cause)
        text = str(err)
        assert text.startswith("[UNMARSHAL_ERROR] Malformed object")
        assert "Details: {'offset': 3}" in text
        assert "Caused by: bad byte" in text

    def test_to_dict(self):
        err = UnknownObjectError(9)
        assert err.to_dict() == {
            "code": ErrorCode.UNKNOWN_OBJECT.value,
            "message": "Unrecognized sidechain object type: 9",
        }
