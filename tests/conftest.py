"""Pytest configuration and fixtures."""

import pytest

from cpamm.ledger import InMemoryLedger, InMemoryShareLedger
from cpamm.pool import Pool
from tests.helpers import ALICE, BOB, fund


@pytest.fixture
def ledger() -> InMemoryLedger:
    """Empty asset ledger."""
    return InMemoryLedger()


@pytest.fixture
def share_ledger() -> InMemoryShareLedger:
    """Empty share ledger."""
    return InMemoryShareLedger()


@pytest.fixture
def pool(ledger: InMemoryLedger, share_ledger: InMemoryShareLedger) -> Pool:
    """Empty pool at the default config, with ALICE and BOB funded and approved."""
    fund(ledger, ALICE)
    fund(ledger, BOB)
    return Pool(ledger, share_ledger)


@pytest.fixture
def seeded_pool(pool: Pool) -> Pool:
    """Pool at reserves (2000, 1000) with 2000 shares held by ALICE."""
    pool.add_liquidity(ALICE, 2000, 1000)
    return pool
