"""Deposits and withdrawals of pool liquidity.

Shares are minted in proportion to the base asset contributed and burned
for a proportional slice of both reserves. All divisions floor, so rounding
always favours the pool.
"""

from __future__ import annotations

import structlog

from cpamm.config import PoolConfig
from cpamm.errors import (
    InsufficientOfferedAmount,
    InsufficientShares,
    InvalidAmount,
    TransferFailed,
)
from cpamm.ledger.interfaces import Ledger, ShareLedger
from cpamm.models.results import Deposit, Withdrawal
from cpamm.reserves import ReserveAccessor
from cpamm.safe_int import S

logger = structlog.get_logger()


class LiquidityManager:
    """Mint/burn accounting for one pool."""

    def __init__(
        self,
        ledger: Ledger,
        shares: ShareLedger,
        reserves: ReserveAccessor,
        config: PoolConfig,
    ) -> None:
        self._ledger = ledger
        self._shares = shares
        self._reserves = reserves
        self._config = config

    def add_liquidity(
        self,
        caller: str,
        base_amount_sent: int,
        second_amount_offered: int,
    ) -> Deposit:
        """Deposit both assets and mint shares to the caller.

        `base_amount_sent` must already be held by the pool account when this
        runs; the pre-deposit base reserve is recovered by subtraction.

        On an empty pool the whole offer is pulled and the caller receives one
        share per unit of base, which sets the initial price. Otherwise only
        the ratio-required amount of the second asset is pulled, even if more
        was offered.

        Args:
            caller: Depositing account
            base_amount_sent: Base asset attached to the call
            second_amount_offered: Maximum second asset the caller will provide

        Returns:
            Deposit with shares minted and second asset pulled

        Raises:
            InvalidAmount: If either amount is not positive where required
            InsufficientOfferedAmount: If the offer is below the required amount
            TransferFailed: If the ledger refuses the second-asset pull
        """
        if base_amount_sent <= 0:
            raise InvalidAmount(f"base_amount_sent must be positive, got {base_amount_sent}")
        if second_amount_offered < 0:
            raise InvalidAmount(f"second_amount_offered is negative: {second_amount_offered}")

        total_shares = self._shares.total_supply()
        base_reserve, second_reserve = self._reserves.get_reserves()

        if total_shares == 0:
            if second_amount_offered == 0:
                raise InvalidAmount("The first deposit must include the second asset")
            second_amount = second_amount_offered
            shares = base_amount_sent
        else:
            base_before = S(base_reserve) - S(base_amount_sent)
            required = (S(base_amount_sent) * S(second_reserve) // base_before).value
            if second_amount_offered < required:
                logger.warning(
                    "deposit_offer_too_low",
                    caller=caller,
                    offered=second_amount_offered,
                    required=required,
                )
                raise InsufficientOfferedAmount(
                    f"Offered {second_amount_offered} of the second asset, {required} required"
                )
            second_amount = required
            shares = (S(total_shares) * S(base_amount_sent) // base_before).value

        self._pull_second(caller, second_amount)
        self._shares.mint(caller, shares)

        logger.info(
            "liquidity_added",
            caller=caller,
            base_amount=base_amount_sent,
            second_amount=second_amount,
            shares=shares,
            total_shares=total_shares + shares,
        )
        return Deposit(shares=shares, second_amount=second_amount)

    def remove_liquidity(self, caller: str, shares_to_burn: int) -> Withdrawal:
        """Burn shares and pay out the matching slice of both reserves.

        Payouts use the supply and reserves from before the burn:
        reserve * shares_to_burn // total_shares. Both payouts happen before
        the burn; if the second one is refused the first is taken back and
        no shares are burned.

        Raises:
            InvalidAmount: If shares_to_burn is not positive
            InsufficientShares: If the caller holds fewer shares, or none exist
            TransferFailed: If the ledger refuses a payout
        """
        if shares_to_burn <= 0:
            raise InvalidAmount(f"shares_to_burn must be positive, got {shares_to_burn}")

        total_shares = self._shares.total_supply()
        if total_shares == 0:
            raise InsufficientShares("Pool has no outstanding shares")
        held = self._shares.balance_of(caller)
        if held < shares_to_burn:
            logger.warning(
                "burn_exceeds_balance",
                caller=caller,
                held=held,
                requested=shares_to_burn,
            )
            raise InsufficientShares(f"{caller} holds {held} shares, cannot burn {shares_to_burn}")

        base_reserve, second_reserve = self._reserves.get_reserves()
        base_amount = (S(base_reserve) * S(shares_to_burn) // S(total_shares)).value
        second_amount = (S(second_reserve) * S(shares_to_burn) // S(total_shares)).value

        self._pay(self._config.base_asset, caller, base_amount)
        try:
            self._pay(self._config.second_asset, caller, second_amount)
        except TransferFailed:
            self._reclaim(self._config.base_asset, caller, base_amount)
            raise
        self._shares.burn(caller, shares_to_burn)

        logger.info(
            "liquidity_removed",
            caller=caller,
            shares=shares_to_burn,
            base_amount=base_amount,
            second_amount=second_amount,
            total_shares=total_shares - shares_to_burn,
        )
        return Withdrawal(base_amount=base_amount, second_amount=second_amount)

    def _pull_second(self, caller: str, amount: int) -> None:
        pool = self._config.pool_account
        if not self._ledger.transfer_from(self._config.second_asset, pool, caller, pool, amount):
            raise TransferFailed(f"Could not pull {amount} of the second asset from {caller}")

    def _pay(self, asset: str, recipient: str, amount: int) -> None:
        if not self._ledger.transfer(asset, self._config.pool_account, recipient, amount):
            raise TransferFailed(f"Could not pay {amount} of {asset} to {recipient}")

    def _reclaim(self, asset: str, holder: str, amount: int) -> None:
        """Take back a payout made earlier in a failed operation."""
        if not self._ledger.transfer(asset, holder, self._config.pool_account, amount):
            logger.error("payout_reclaim_failed", asset=asset, holder=holder, amount=amount)
