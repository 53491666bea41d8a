"""
Deposit addresses.

Format: ``s<sidechain>_<destination>_<checksum>`` where the checksum is the
first six hex characters of SHA-256 over everything before it, trailing
``_`` included. Any structural, range or checksum problem makes the whole
address invalid; no partial result is returned.
"""

from __future__ import annotations
import logging
from typing import Any, Callable, Optional, Tuple

from pydantic import GetCoreSchemaHandler
from pydantic_core import CoreSchema, core_schema

from .codec.hashes import sha256_bytes
from .config import DEFAULT_PARAMS, MAX_SIDECHAIN, SidechainParams
from .runtime.errors import ErrorCode, InvalidAddressError

logger = logging.getLogger(__name__)

ADDRESS_PREFIX = "s"
DELIMITER = "_"

Digest = Callable[[bytes], bytes]


def deposit_checksum(unchecked: str, digest: Digest = sha256_bytes,
                     params: Optional[SidechainParams] = None) -> str:
    """
    Checksum for the unchecked part of an address.

    Args:
        unchecked: ``s<sidechain>_<destination>_``
        digest: Pure digest function (default SHA-256)
        params: Supplies the checksum length

    Returns:
        Leading hex characters of the digest
    """
    params = params or DEFAULT_PARAMS
    return digest(unchecked.encode("utf-8")).hex()[:params.checksum_length]


def generate_deposit_address(sidechain: int, destination: str, digest: Digest = sha256_bytes,
                             params: Optional[SidechainParams] = None) -> str:
    """
    Build a deposit address with its checksum.

    Args:
        sidechain: Sidechain number (0-255)
        destination: Destination on the sidechain
        digest: Pure digest function (default SHA-256)
        params: Supplies the checksum length

    Returns:
        ``s<sidechain>_<destination>_<checksum>``

    Raises:
        InvalidAddressError: If the sidechain is out of range or the
            destination is empty, which no parser would accept
    """
    if not 0 <= sidechain <= MAX_SIDECHAIN:
        raise InvalidAddressError(f"Sidechain number out of range: {sidechain}",
                                  ErrorCode.INVALID_SIDECHAIN)
    if not destination:
        raise InvalidAddressError("Deposit destination cannot be empty")

    unchecked = f"{ADDRESS_PREFIX}{sidechain}{DELIMITER}{destination}{DELIMITER}"
    return unchecked + deposit_checksum(unchecked, digest, params)


def parse_deposit_address(address: str, digest: Digest = sha256_bytes,
                          params: Optional[SidechainParams] = None) -> Optional[Tuple[str, int]]:
    """
    Validate a deposit address and split it into its parts.

    Args:
        address: Address string
        digest: Pure digest function (default SHA-256)
        params: Supplies the checksum length

    Returns:
        ``(destination, sidechain)``, or None if the address is invalid
    """
    params = params or DEFAULT_PARAMS

    if not address or not address.startswith(ADDRESS_PREFIX):
        logger.debug("Deposit address rejected: missing prefix")
        return None

    first = address.find(DELIMITER)
    last = address.rfind(DELIMITER)
    if first < 0 or last < 0:
        logger.debug("Deposit address rejected: missing delimiter")
        return None
    if first + 1 >= len(address) or last + 1 >= len(address):
        logger.debug("Deposit address rejected: delimiter at end")
        return None

    sidechain_str = address[len(ADDRESS_PREFIX):first]
    if not sidechain_str or any(c not in "0123456789" for c in sidechain_str):
        logger.debug(f"Deposit address rejected: sidechain {sidechain_str!r} is not a number")
        return None
    # 0-255 has at most three significant digits
    significant = sidechain_str.lstrip("0") or "0"
    if len(significant) > 3 or int(significant) > MAX_SIDECHAIN:
        logger.debug(f"Deposit address rejected: sidechain {significant[:10]!r} out of range")
        return None
    sidechain = int(significant)

    destination = address[first + 1:last]
    if not destination:
        logger.debug("Deposit address rejected: empty destination")
        return None

    unchecked = address[:last + 1]
    expected = deposit_checksum(unchecked, digest, params)
    if len(expected) != params.checksum_length:
        logger.debug("Deposit address rejected: digest too short for checksum")
        return None

    checksum = address[last + 1:]
    if len(checksum) != params.checksum_length:
        logger.debug(f"Deposit address rejected: checksum length {len(checksum)}")
        return None
    if checksum != expected:
        logger.debug("Deposit address rejected: checksum mismatch")
        return None

    return destination, sidechain


class DepositAddress:
    """Custom Pydantic type for validated deposit addresses."""

    def __init__(self, address: str):
        if not isinstance(address, str):
            raise InvalidAddressError("DepositAddress must be a string")
        parsed = parse_deposit_address(address)
        if parsed is None:
            raise InvalidAddressError(f"Invalid deposit address: {address!r}")
        self.address = address
        self.destination, self.sidechain = parsed

    @classmethod
    def generate(cls, sidechain: int, destination: str) -> DepositAddress:
        """Create an address for ``destination`` on ``sidechain``."""
        return cls(generate_deposit_address(sidechain, destination))

    @classmethod
    def parse(cls, address: str) -> Optional[DepositAddress]:
        """Like the constructor, but returns None for invalid input."""
        try:
            return cls(address)
        except InvalidAddressError:
            return None

    def __str__(self) -> str:
        return self.address

    def __repr__(self) -> str:
        return f"DepositAddress('{self.address}')"

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, DepositAddress):
            return self.address == other.address
        elif isinstance(other, str):
            return self.address == other
        return False

    def __hash__(self) -> int:
        return hash(self.address)

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source_type: Any,
        handler: GetCoreSchemaHandler,
    ) -> CoreSchema:
        """Return a Pydantic CoreSchema that validates the DepositAddress."""
        return core_schema.no_info_before_validator_function(
            cls._validate,
            core_schema.is_instance_schema(cls),
            serialization=core_schema.to_string_ser_schema(),
        )

    @classmethod
    def _validate(cls, value: Any) -> DepositAddress:
        """Validate and convert the input to a DepositAddress."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value)
            except InvalidAddressError as e:
                raise ValueError(e.message)
        raise ValueError(f"Invalid DepositAddress: {value!r}")
