"""Process-local pool backed by in-memory ledgers."""

from __future__ import annotations

from dataclasses import dataclass, field

from cpamm.config import DEFAULT_POOL_CONFIG, PoolConfig, ServiceSettings
from cpamm.ledger import InMemoryLedger, InMemoryShareLedger
from cpamm.pool import Pool


@dataclass
class PoolService:
    """A pool together with the ledgers it runs on."""

    config: PoolConfig = DEFAULT_POOL_CONFIG
    ledger: InMemoryLedger = field(default_factory=InMemoryLedger)
    shares: InMemoryShareLedger = field(default_factory=InMemoryShareLedger)
    pool: Pool = field(init=False)

    def __post_init__(self) -> None:
        self.pool = Pool(self.ledger, self.shares, self.config)


_default_service: PoolService | None = None


def get_default_service() -> PoolService:
    """Get the process-wide service instance, creating it on first use."""
    global _default_service
    if _default_service is None:
        _default_service = PoolService(config=ServiceSettings.from_env().pool_config())
    return _default_service
