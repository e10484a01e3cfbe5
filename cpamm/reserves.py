"""Reads the pool's holdings from the ledger."""

from cpamm.config import PoolConfig
from cpamm.ledger.interfaces import Ledger


class ReserveAccessor:
    """Fresh reserve reads for one pool.

    Nothing is cached: every call queries the ledger, so each operation
    sees the balances as they stand when it runs.
    """

    def __init__(self, ledger: Ledger, config: PoolConfig) -> None:
        self._ledger = ledger
        self._config = config

    def get_reserve(self) -> int:
        """Second-asset balance held by the pool account."""
        return self._ledger.balance_of(self._config.second_asset, self._config.pool_account)

    def get_base_reserve(self) -> int:
        """Base-asset balance held by the pool account."""
        return self._ledger.balance_of(self._config.base_asset, self._config.pool_account)

    def get_reserves(self) -> tuple[int, int]:
        """Both reserves as (base_reserve, second_reserve)."""
        return self.get_base_reserve(), self.get_reserve()
