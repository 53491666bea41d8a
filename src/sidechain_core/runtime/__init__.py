"""Runtime helpers for the sidechain core"""

from .errors import (
    ErrorCode,
    SidechainError,
    EncodingError,
    DecodeError,
    UnmarshalError,
    UnknownObjectError,
    InvalidAddressError,
)

__all__ = [
    "ErrorCode",
    "SidechainError",
    "EncodingError",
    "DecodeError",
    "UnmarshalError",
    "UnknownObjectError",
    "InvalidAddressError",
]
