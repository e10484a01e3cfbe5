"""Shared account and asset constants for tests.

All addresses are lowercase for consistency with normalize_address().
"""

from cpamm.constants import BASE_ASSET, DEFAULT_POOL_ACCOUNT, DEFAULT_SECOND_ASSET

ALICE = "0x00000000000000000000000000000000000a11ce"
BOB = "0x0000000000000000000000000000000000000b0b"
CAROL = "0x00000000000000000000000000000000000ca401"

BASE = BASE_ASSET
SECOND = DEFAULT_SECOND_ASSET
POOL_ACCOUNT = DEFAULT_POOL_ACCOUNT

# Balance handed to test accounts by fund()
DEFAULT_FUNDING = 10**24
