"""
Sidechain Core

On-chain data model for a drivechain-style sidechain: withdrawal requests,
withdrawal bundles and deposits, their embedding in data-carrier scripts,
and checksummed deposit addresses.
"""

from .codec import BinaryReader, BinaryWriter, ZERO_HASH, hash256, hash_to_hex, sha256_bytes
from .money import COIN, format_money
from .primitives import OutPoint, Transaction, TxIn, TxOut
from .sidechain import *
from .address import DepositAddress, deposit_checksum, generate_deposit_address, parse_deposit_address
from .config import DEFAULT_PARAMS, OP_RETURN, SCRIPT_MAGIC, SidechainParams
from .runtime.errors import (
    ErrorCode,
    SidechainError,
    EncodingError,
    DecodeError,
    UnmarshalError,
    UnknownObjectError,
    InvalidAddressError,
)

__version__ = "0.1.0"
__all__ = [
    # Codec
    "BinaryReader",
    "BinaryWriter",
    "ZERO_HASH",
    "hash256",
    "hash_to_hex",
    "sha256_bytes",

    # Money
    "COIN",
    "format_money",

    # Host-chain primitives
    "OutPoint",
    "Transaction",
    "TxIn",
    "TxOut",

    # Sidechain objects
    "SidechainObj",
    "SidechainOp",
    "SidechainWT",
    "SidechainWTPrime",
    "SidechainDeposit",
    "WTStatus",
    "WTPrimeStatus",
    "compute_hash",
    "decode_object",
    "parse_object",
    "to_script",
    "parse_script",
    "is_sidechain_script",
    "sort_wt_by_fee",
    "sort_wtprime_by_height",
    "select_unspent_wt",

    # Deposit addresses
    "DepositAddress",
    "deposit_checksum",
    "generate_deposit_address",
    "parse_deposit_address",

    # Configuration
    "DEFAULT_PARAMS",
    "OP_RETURN",
    "SCRIPT_MAGIC",
    "SidechainParams",

    # Errors
    "ErrorCode",
    "SidechainError",
    "EncodingError",
    "DecodeError",
    "UnmarshalError",
    "UnknownObjectError",
    "InvalidAddressError",
]
