"""Constant-product pricing.

Swaps price against x * y = k with the fee taken from the input:

    amount_out = (in * m * res_out) / (res_in * 100 + in * m)

where m = 100 - fee_percent (99 for the reference 1% fee).
"""

from __future__ import annotations

import structlog

from cpamm.constants import DEFAULT_FEE_PERCENT, FEE_DENOMINATOR
from cpamm.errors import InvalidAmount, InvalidConfiguration, InvalidReserves
from cpamm.models.results import SwapQuote
from cpamm.safe_int import S

logger = structlog.get_logger()


class PricingEngine:
    """Exact-integer swap math for one fee level.

    Pure and stateless apart from the fee; safe to share between pools
    with the same fee.
    """

    def __init__(self, fee_percent: int = DEFAULT_FEE_PERCENT) -> None:
        if not 0 <= fee_percent < FEE_DENOMINATOR:
            raise InvalidConfiguration(
                f"fee_percent must be in [0, {FEE_DENOMINATOR}), got {fee_percent}"
            )
        self.fee_percent = fee_percent

    @property
    def fee_multiplier(self) -> int:
        """Input multiplier after fee (99 for a 1% fee)."""
        return FEE_DENOMINATOR - self.fee_percent

    def quote_output(self, amount_in: int, reserve_in: int, reserve_out: int) -> int:
        """Calculate swap output for an exact input.

        Args:
            amount_in: Amount of the input asset sent to the pool
            reserve_in: Pool reserve of the input asset before this swap
            reserve_out: Pool reserve of the output asset

        Returns:
            Output amount, floor-rounded

        Raises:
            InvalidReserves: If either reserve is not positive
            InvalidAmount: If amount_in is negative
            Uint256Overflow: If an intermediate product leaves the uint256 range
        """
        if reserve_in <= 0 or reserve_out <= 0:
            raise InvalidReserves(
                f"Reserves must be positive: reserve_in={reserve_in}, reserve_out={reserve_out}"
            )
        if amount_in < 0:
            raise InvalidAmount(f"amount_in cannot be negative: {amount_in}")

        amount_in_with_fee = S(amount_in) * S(self.fee_multiplier)
        numerator = amount_in_with_fee * S(reserve_out)
        denominator = S(reserve_in) * S(FEE_DENOMINATOR) + amount_in_with_fee

        return (numerator // denominator).value

    def quote_input(self, amount_out: int, reserve_in: int, reserve_out: int) -> int:
        """Calculate the input needed to receive at least `amount_out`.

        Formula: amount_in = (res_in * out * 100) / ((res_out - out) * m) + 1

        Raises:
            InvalidReserves: If either reserve is not positive
            InvalidAmount: If amount_out is negative or would drain reserve_out
        """
        if reserve_in <= 0 or reserve_out <= 0:
            raise InvalidReserves(
                f"Reserves must be positive: reserve_in={reserve_in}, reserve_out={reserve_out}"
            )
        if amount_out < 0:
            raise InvalidAmount(f"amount_out cannot be negative: {amount_out}")
        if amount_out == 0:
            return 0
        if amount_out >= reserve_out:
            raise InvalidAmount(
                f"amount_out {amount_out} must be below the output reserve {reserve_out}"
            )

        numerator = S(reserve_in) * S(amount_out) * S(FEE_DENOMINATOR)
        denominator = (S(reserve_out) - S(amount_out)) * S(self.fee_multiplier)

        return ((numerator // denominator) + S(1)).value

    def quote(self, amount_in: int, reserve_in: int, reserve_out: int) -> SwapQuote:
        """Price a swap and return the full quote."""
        amount_out = self.quote_output(amount_in, reserve_in, reserve_out)
        logger.debug(
            "swap_quoted",
            amount_in=amount_in,
            reserve_in=reserve_in,
            reserve_out=reserve_out,
            amount_out=amount_out,
            fee_percent=self.fee_percent,
        )
        return SwapQuote(
            amount_in=amount_in,
            reserve_in=reserve_in,
            reserve_out=reserve_out,
            amount_out=amount_out,
            fee_percent=self.fee_percent,
        )


# Instance at the reference 1% fee
pricing_engine = PricingEngine()


__all__ = [
    "PricingEngine",
    "pricing_engine",
]
