"""
Monetary amounts.

Amounts are integer base units (1 coin = 100,000,000 units) stored as
signed 64-bit values on the wire.
"""

COIN = 100_000_000

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1


def format_money(n: int) -> str:
    """
    Format an amount as fixed-point coins.

    Eight fractional digits are printed and trailing zeros trimmed, but
    never below two fractional digits. No exponent, no grouping, no
    locale: ``150000`` -> ``"0.0015"``, ``COIN`` -> ``"1.00"``.

    Args:
        n: Amount in base units

    Returns:
        Decimal string representation
    """
    quotient, remainder = divmod(abs(n), COIN)
    s = f"{quotient}.{remainder:08d}"
    # keep at least two fractional digits
    s = s.rstrip("0")
    whole, frac = s.split(".")
    s = f"{whole}.{frac.ljust(2, '0')}"
    if n < 0:
        s = "-" + s
    return s
