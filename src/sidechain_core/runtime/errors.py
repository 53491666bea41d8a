"""
Sidechain Error Model

This module provides the error types raised inside the sidechain core.
Public entry points translate them into a ``None``/``False`` result; the
strict helpers let them propagate to callers that want the reason.
"""

from __future__ import annotations
from typing import Optional, Dict, Any
from enum import IntEnum


class ErrorCode(IntEnum):
    """Sidechain core error codes."""

    # Success
    OK = 0

    # General errors (1-99)
    UNKNOWN = 1
    INTERNAL = 2

    # Encoding errors (100-199)
    ENCODING_ERROR = 100
    INVALID_BINARY = 102
    MARSHAL_ERROR = 103
    UNMARSHAL_ERROR = 104

    # Object errors (200-299)
    UNKNOWN_OBJECT = 200
    INVALID_SCRIPT = 201

    # Address errors (300-399)
    INVALID_ADDRESS = 300
    INVALID_SIDECHAIN = 301
    CHECKSUM_MISMATCH = 302


class SidechainError(Exception):
    """
    Base class for all sidechain core errors.

    Carries a code, optional details and the underlying cause.
    """

    def __init__(self, message: str, code: ErrorCode = ErrorCode.UNKNOWN,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        """
        Initialize a sidechain error.

        Args:
            message: Error message
            code: Error code
            details: Additional error details
            cause: Underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        parts = [f"[{self.code.name}] {self.message}"]
        if self.details:
            parts.append(f"Details: {self.details}")
        if self.cause:
            parts.append(f"Caused by: {self.cause}")
        return " | ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        result: Dict[str, Any] = {
            "code": self.code.value,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        if self.cause:
            result["cause"] = str(self.cause)
        return result


class EncodingError(SidechainError):
    """Encoding/decoding errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.ENCODING_ERROR,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class DecodeError(EncodingError):
    """Malformed or truncated binary input."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None,
                 cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INVALID_BINARY, details, cause)


class UnmarshalError(EncodingError):
    """A serialized sidechain object could not be rebuilt."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None,
                 cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.UNMARSHAL_ERROR, details, cause)


class UnknownObjectError(SidechainError):
    """Discriminator byte does not name a known object variant."""

    def __init__(self, sidechainop: int, details: Optional[Dict[str, Any]] = None):
        super().__init__(f"Unrecognized sidechain object type: {sidechainop}",
                         ErrorCode.UNKNOWN_OBJECT, details)
        self.sidechainop = sidechainop


class InvalidAddressError(SidechainError):
    """Deposit address failed structural, range or checksum validation."""

    def __init__(self, message: str = "Invalid deposit address",
                 code: ErrorCode = ErrorCode.INVALID_ADDRESS,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)
