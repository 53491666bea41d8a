from .factories import mk_deposit, mk_hash, mk_transaction, mk_wt, mk_wtprime
from .parity import assert_hex_equal

__all__ = [
    "mk_deposit",
    "mk_hash",
    "mk_transaction",
    "mk_wt",
    "mk_wtprime",
    "assert_hex_equal",
]
