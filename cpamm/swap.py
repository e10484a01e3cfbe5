"""One-directional swaps against the pool."""

from __future__ import annotations

import structlog

from cpamm.config import PoolConfig
from cpamm.errors import InvalidAmount, SlippageExceeded, TransferFailed
from cpamm.ledger.interfaces import Ledger
from cpamm.pricing import PricingEngine
from cpamm.reserves import ReserveAccessor
from cpamm.safe_int import S

logger = structlog.get_logger()


class SwapExecutor:
    """Prices a swap, checks the slippage bound, then moves assets.

    Every check runs before the first ledger mutation.
    """

    def __init__(
        self,
        ledger: Ledger,
        reserves: ReserveAccessor,
        pricing: PricingEngine,
        config: PoolConfig,
    ) -> None:
        self._ledger = ledger
        self._reserves = reserves
        self._pricing = pricing
        self._config = config

    def swap_base_for_second(self, caller: str, base_amount_in: int, min_second_out: int) -> int:
        """Sell base for the second asset.

        `base_amount_in` must already be held by the pool account; the
        pre-swap base reserve is recovered by subtraction.

        Returns:
            Amount of second asset paid to the caller

        Raises:
            InvalidAmount: If base_amount_in is not positive
            InvalidReserves: If the pool is empty
            SlippageExceeded: If output is below min_second_out
        """
        if base_amount_in <= 0:
            raise InvalidAmount(f"base_amount_in must be positive, got {base_amount_in}")

        second_reserve = self._reserves.get_reserve()
        base_before = (S(self._reserves.get_base_reserve()) - S(base_amount_in)).value
        second_out = self._pricing.quote_output(base_amount_in, base_before, second_reserve)
        self._check_slippage(caller, "base_for_second", second_out, min_second_out)

        if not self._ledger.transfer(
            self._config.second_asset, self._config.pool_account, caller, second_out
        ):
            raise TransferFailed(f"Could not pay {second_out} of the second asset to {caller}")

        logger.info(
            "swap_executed",
            direction="base_for_second",
            caller=caller,
            amount_in=base_amount_in,
            amount_out=second_out,
        )
        return second_out

    def swap_second_for_base(self, caller: str, second_amount_in: int, min_base_out: int) -> int:
        """Sell the second asset for base.

        The second asset is pulled from the caller (approval required) before
        base is paid out, so a failed pull leaves base untouched. If the
        base payout is refused, the pulled second asset is handed back.

        Returns:
            Amount of base asset paid to the caller

        Raises:
            InvalidAmount: If second_amount_in is not positive
            InvalidReserves: If the pool is empty
            SlippageExceeded: If output is below min_base_out
            TransferFailed: If the pull or the payout is refused
        """
        if second_amount_in <= 0:
            raise InvalidAmount(f"second_amount_in must be positive, got {second_amount_in}")

        second_reserve = self._reserves.get_reserve()
        base_reserve = self._reserves.get_base_reserve()
        base_out = self._pricing.quote_output(second_amount_in, second_reserve, base_reserve)
        self._check_slippage(caller, "second_for_base", base_out, min_base_out)

        pool = self._config.pool_account
        if not self._ledger.transfer_from(
            self._config.second_asset, pool, caller, pool, second_amount_in
        ):
            raise TransferFailed(
                f"Could not pull {second_amount_in} of the second asset from {caller}"
            )
        if not self._ledger.transfer(self._config.base_asset, pool, caller, base_out):
            if not self._ledger.transfer(
                self._config.second_asset, pool, caller, second_amount_in
            ):
                logger.error(
                    "swap_input_return_failed", caller=caller, amount=second_amount_in
                )
            raise TransferFailed(f"Could not pay {base_out} of the base asset to {caller}")

        logger.info(
            "swap_executed",
            direction="second_for_base",
            caller=caller,
            amount_in=second_amount_in,
            amount_out=base_out,
        )
        return base_out

    def _check_slippage(self, caller: str, direction: str, amount_out: int, min_out: int) -> None:
        if amount_out < min_out:
            logger.warning(
                "slippage_exceeded",
                caller=caller,
                direction=direction,
                amount_out=amount_out,
                min_out=min_out,
            )
            raise SlippageExceeded(f"Output {amount_out} is below the minimum {min_out}")
