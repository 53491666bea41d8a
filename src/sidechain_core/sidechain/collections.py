"""
In-place helpers over lists of a single object variant.
"""

from typing import List

from .objects import SidechainWT, SidechainWTPrime, WTStatus


def sort_wt_by_fee(wts: List[SidechainWT]) -> None:
    """Sort withdrawals by mainchain fee, highest first. Equal fees keep their order."""
    wts.sort(key=lambda wt: wt.mainchain_fee, reverse=True)


def sort_wtprime_by_height(wtprimes: List[SidechainWTPrime]) -> None:
    """Sort withdrawal bundles by block height, most recent first. Stable."""
    wtprimes.sort(key=lambda wtprime: wtprime.height, reverse=True)


def select_unspent_wt(wts: List[SidechainWT]) -> None:
    """Drop every withdrawal whose status is not Unspent, keeping order."""
    wts[:] = [wt for wt in wts if wt.status == WTStatus.UNSPENT]
