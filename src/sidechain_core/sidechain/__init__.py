"""
Sidechain objects: withdrawal requests, withdrawal bundles and deposits,
their dispatch by discriminator and list helpers.
"""

from .objects import (
    SidechainObj,
    SidechainOp,
    SidechainWT,
    SidechainWTPrime,
    SidechainDeposit,
    WTStatus,
    WTPrimeStatus,
)
from .dispatch import (
    OBJECT_TYPES,
    compute_hash,
    decode_object,
    is_sidechain_script,
    lookup_object_type,
    parse_object,
    parse_script,
    to_script,
)
from .collections import select_unspent_wt, sort_wt_by_fee, sort_wtprime_by_height

__all__ = [
    "SidechainObj",
    "SidechainOp",
    "SidechainWT",
    "SidechainWTPrime",
    "SidechainDeposit",
    "WTStatus",
    "WTPrimeStatus",
    "OBJECT_TYPES",
    "compute_hash",
    "decode_object",
    "is_sidechain_script",
    "lookup_object_type",
    "parse_object",
    "parse_script",
    "to_script",
    "select_unspent_wt",
    "sort_wt_by_fee",
    "sort_wtprime_by_height",
]
