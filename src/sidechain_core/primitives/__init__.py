"""Host-chain primitive types carried inside sidechain objects."""

from .transaction import (
    CURRENT_VERSION,
    NULL_INDEX,
    SEQUENCE_FINAL,
    OutPoint,
    Transaction,
    TxIn,
    TxOut,
)

__all__ = [
    "CURRENT_VERSION",
    "NULL_INDEX",
    "SEQUENCE_FINAL",
    "OutPoint",
    "Transaction",
    "TxIn",
    "TxOut",
]
