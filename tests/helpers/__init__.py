"""Test helpers module for shared test utilities.

- constants: Account and asset addresses
- factories: Pool construction and account funding
"""

from tests.helpers.constants import (
    ALICE,
    BASE,
    BOB,
    CAROL,
    DEFAULT_FUNDING,
    POOL_ACCOUNT,
    SECOND,
)
from tests.helpers.factories import RefusingLedger, fund, make_pool

__all__ = [
    # Constants
    "ALICE",
    "BOB",
    "CAROL",
    "BASE",
    "SECOND",
    "POOL_ACCOUNT",
    "DEFAULT_FUNDING",
    # Factories
    "fund",
    "make_pool",
    "RefusingLedger",
]
