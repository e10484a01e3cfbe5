"""The pool: one object composing reserves, pricing, liquidity and swaps.

A Pool owns no balances. It drives a Ledger (asset balances) and a
ShareLedger (ownership units) supplied by the host, and serializes its own
operations with a per-pool lock.

Base asset sent with a call ("attached value") is credited to the pool
account before the operation body runs and handed back if the body raises,
so an operation either completes fully or leaves no trace.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager

import structlog

from cpamm.config import DEFAULT_POOL_CONFIG, PoolConfig
from cpamm.errors import InvalidAmount, TransferFailed
from cpamm.ledger.interfaces import Ledger, ShareLedger
from cpamm.liquidity import LiquidityManager
from cpamm.models.results import SwapQuote, Withdrawal
from cpamm.models.types import normalize_address
from cpamm.pricing import PricingEngine
from cpamm.reserves import ReserveAccessor
from cpamm.swap import SwapExecutor

logger = structlog.get_logger()


class Pool:
    """Constant-product pool between a base asset and a second asset.

    Public operations:
    - get_reserve / get_reserves: current holdings
    - add_liquidity / remove_liquidity: mint and burn shares
    - quote_output / quote_input / quote: pure pricing
    - swap_base_for_second / swap_second_for_base: exact-input swaps
    """

    def __init__(
        self,
        ledger: Ledger,
        shares: ShareLedger,
        config: PoolConfig = DEFAULT_POOL_CONFIG,
    ) -> None:
        """Create a pool over the given ledgers.

        Args:
            ledger: Asset ledger holding the pool's reserves
            shares: Share ledger dedicated to this pool
            config: Assets, pool account and fee (validated on construction)
        """
        self.config = config
        self._ledger = ledger
        self._shares = shares
        self._lock = threading.RLock()

        self.reserves = ReserveAccessor(ledger, config)
        self.pricing = PricingEngine(config.fee_percent)
        self.liquidity = LiquidityManager(ledger, shares, self.reserves, config)
        self.swaps = SwapExecutor(ledger, self.reserves, self.pricing, config)

        logger.info(
            "pool_created",
            pool_account=config.pool_account,
            base_asset=config.base_asset,
            second_asset=config.second_asset,
            fee_percent=config.fee_percent,
        )

    # --- Reads ---

    def get_reserve(self) -> int:
        """Second-asset reserve."""
        with self._lock:
            return self.reserves.get_reserve()

    def get_reserves(self) -> tuple[int, int]:
        """(base_reserve, second_reserve)."""
        with self._lock:
            return self.reserves.get_reserves()

    def total_shares(self) -> int:
        with self._lock:
            return self._shares.total_supply()

    def shares_of(self, account: str) -> int:
        with self._lock:
            return self._shares.balance_of(normalize_address(account))

    # --- Pricing ---

    def quote_output(self, amount_in: int, reserve_in: int, reserve_out: int) -> int:
        """Pure constant-product quote; see PricingEngine.quote_output."""
        return self.pricing.quote_output(amount_in, reserve_in, reserve_out)

    def quote_input(self, amount_out: int, reserve_in: int, reserve_out: int) -> int:
        """Pure inverse quote; see PricingEngine.quote_input."""
        return self.pricing.quote_input(amount_out, reserve_in, reserve_out)

    def quote(
        self,
        amount_in: int,
        *,
        base_for_second: bool = True,
        reserve_in: int | None = None,
        reserve_out: int | None = None,
    ) -> SwapQuote:
        """Price a swap against the live reserves unless both reserves are given.

        Live reserves are read in the requested direction. Nothing is locked;
        the quote may be stale by the time a swap executes.
        """
        if (reserve_in is None) != (reserve_out is None):
            raise InvalidAmount("reserve_in and reserve_out must be given together")
        if reserve_in is None or reserve_out is None:
            base_reserve, second_reserve = self.reserves.get_reserves()
            if base_for_second:
                reserve_in, reserve_out = base_reserve, second_reserve
            else:
                reserve_in, reserve_out = second_reserve, base_reserve
        return self.pricing.quote(amount_in, reserve_in, reserve_out)

    # --- Liquidity ---

    def add_liquidity(self, caller: str, base_amount: int, second_amount_offered: int) -> int:
        """Deposit `base_amount` of base plus up to `second_amount_offered`.

        Returns:
            Shares minted to the caller
        """
        caller = normalize_address(caller)
        with self._lock, self._attached_value(caller, base_amount):
            deposit = self.liquidity.add_liquidity(caller, base_amount, second_amount_offered)
        return deposit.shares

    def remove_liquidity(self, caller: str, shares: int) -> Withdrawal:
        """Burn `shares` and return (base_amount, second_amount) paid out."""
        caller = normalize_address(caller)
        with self._lock:
            return self.liquidity.remove_liquidity(caller, shares)

    # --- Swaps ---

    def swap_base_for_second(self, caller: str, base_amount: int, min_second_out: int) -> int:
        """Swap attached base for the second asset; returns second asset paid."""
        caller = normalize_address(caller)
        with self._lock, self._attached_value(caller, base_amount):
            return self.swaps.swap_base_for_second(caller, base_amount, min_second_out)

    def swap_second_for_base(self, caller: str, second_amount: int, min_base_out: int) -> int:
        """Swap approved second asset for base; returns base paid."""
        caller = normalize_address(caller)
        with self._lock:
            return self.swaps.swap_second_for_base(caller, second_amount, min_base_out)

    @contextmanager
    def _attached_value(self, caller: str, amount: int) -> Iterator[None]:
        """Credit base sent with a call to the pool, refunding it on failure."""
        if amount <= 0:
            raise InvalidAmount(f"Attached base amount must be positive, got {amount}")

        base_asset = self.config.base_asset
        pool_account = self.config.pool_account
        if not self._ledger.transfer(base_asset, caller, pool_account, amount):
            raise TransferFailed(f"{caller} cannot send {amount} of the base asset")
        try:
            yield
        except Exception:
            if not self._ledger.transfer(base_asset, pool_account, caller, amount):
                logger.error("attached_value_refund_failed", caller=caller, amount=amount)
            raise
