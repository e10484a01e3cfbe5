"""Value types returned by pool operations."""

from dataclasses import dataclass
from typing import NamedTuple


@dataclass(frozen=True)
class SwapQuote:
    """A priced swap: (amount_in, reserve_in, reserve_out) -> amount_out.

    Quotes are never stored; they are recomputed on every call.
    """

    amount_in: int
    reserve_in: int
    reserve_out: int
    amount_out: int
    fee_percent: int


class Withdrawal(NamedTuple):
    """Assets paid out for burned shares."""

    base_amount: int
    second_amount: int


class Deposit(NamedTuple):
    """Shares issued for a deposit and the second asset actually pulled."""

    shares: int
    second_amount: int
