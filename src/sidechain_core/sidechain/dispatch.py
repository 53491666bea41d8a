"""
Tag-driven dispatch over sidechain objects.

The discriminator byte selects the variant explicitly through
``OBJECT_TYPES``; an unknown tag is an ordinary, logged outcome that
yields a zero hash or ``None`` rather than an exception.

Script layout produced by ``to_script``::

    offset 0      OP_RETURN
    offset 1..4   magic AC DC F6 6F
    offset 5..    serialized object, discriminator first
"""

from __future__ import annotations
import logging
from typing import Callable, Dict, Optional, Type

from ..codec.hashes import ZERO_HASH, hash256
from ..config import DEFAULT_PARAMS, SidechainParams
from ..runtime.errors import SidechainError, UnknownObjectError, UnmarshalError
from .objects import (
    SidechainDeposit,
    SidechainObj,
    SidechainOp,
    SidechainWT,
    SidechainWTPrime,
)

logger = logging.getLogger(__name__)

# Object registry - maps discriminator values to variant classes
OBJECT_TYPES: Dict[int, Type[SidechainObj]] = {
    SidechainOp.WT: SidechainWT,
    SidechainOp.WTPRIME: SidechainWTPrime,
    SidechainOp.DEPOSIT: SidechainDeposit,
}


def lookup_object_type(sidechainop: int) -> Optional[Type[SidechainObj]]:
    """Return the variant class for a discriminator, or None."""
    return OBJECT_TYPES.get(sidechainop)


def _variant_of(obj: SidechainObj) -> Optional[Type[SidechainObj]]:
    cls = lookup_object_type(obj.sidechainop)
    if cls is None or not isinstance(obj, cls):
        return None
    return cls


def compute_hash(obj: SidechainObj, hasher: Callable[[bytes], bytes] = hash256) -> bytes:
    """
    Hash an object's serialization.

    Args:
        obj: Sidechain object
        hasher: Pure hash function over bytes (default double SHA-256)

    Returns:
        32-byte hash, or ``ZERO_HASH`` if the discriminator is unrecognized
    """
    if _variant_of(obj) is None:
        logger.warning(f"Cannot hash sidechain object with unrecognized type {obj.sidechainop}")
        return ZERO_HASH
    return hasher(obj.serialize())


def decode_object(data: bytes) -> SidechainObj:
    """
    Strict parse of a serialized object.

    Raises:
        UnmarshalError: If ``data`` is empty or malformed
        UnknownObjectError: If the first byte is not a known discriminator
    """
    if not data:
        raise UnmarshalError("Empty sidechain object payload")
    cls = lookup_object_type(data[0])
    if cls is None:
        raise UnknownObjectError(data[0])
    return cls.deserialize(data)


def parse_object(data: bytes) -> Optional[SidechainObj]:
    """
    Parse a serialized object, selecting the variant by its first byte.

    Args:
        data: Serialized object (discriminator first)

    Returns:
        A new object of the tagged variant, or None if ``data`` is empty,
        the tag is unknown or the payload is malformed
    """
    try:
        return decode_object(data)
    except SidechainError as e:
        logger.debug(f"Sidechain object not parsed: {e}")
        return None


def to_script(obj: SidechainObj, params: Optional[SidechainParams] = None) -> Optional[bytes]:
    """
    Embed an object in a data-carrier script.

    Args:
        obj: Sidechain object
        params: Sidechain parameters supplying the script magic

    Returns:
        Script bytes (header then serialization), or None if the
        discriminator is unrecognized
    """
    if _variant_of(obj) is None:
        logger.warning(f"Cannot script sidechain object with unrecognized type {obj.sidechainop}")
        return None
    params = params or DEFAULT_PARAMS
    return params.script_header + obj.serialize()


def is_sidechain_script(script: bytes, params: Optional[SidechainParams] = None) -> bool:
    """True if ``script`` starts with the sidechain object header."""
    params = params or DEFAULT_PARAMS
    return script[:len(params.script_header)] == params.script_header


def parse_script(script: bytes, params: Optional[SidechainParams] = None) -> Optional[SidechainObj]:
    """
    Recover the object embedded by ``to_script``.

    Returns:
        The embedded object, or None if the header is missing or the
        payload does not parse
    """
    params = params or DEFAULT_PARAMS
    if not is_sidechain_script(script, params):
        return None
    return parse_object(script[len(params.script_header):])
