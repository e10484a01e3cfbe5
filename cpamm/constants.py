"""Pool constants.

Fees are expressed in whole percent against a denominator of 100, so the
reference 1% fee multiplies the input by 99.
"""

from cpamm.models.types import is_valid_address

# Denominator for fee arithmetic: amount_in_with_fee = amount_in * (100 - fee)
FEE_DENOMINATOR = 100

# Reference swap fee in percent
DEFAULT_FEE_PERCENT = 1

ZERO_ADDRESS = "0x" + "00" * 20


def _validate_asset_address(name: str, address: str) -> str:
    if not is_valid_address(address):
        raise ValueError(f"Invalid {name} address: {address} (must be 0x + 40 hex chars)")
    return address


# Identifier of the native (base) asset on the ledger
BASE_ASSET = _validate_asset_address("BASE_ASSET", "0xeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeee")

# Default pool account and second asset used by the standalone service
DEFAULT_POOL_ACCOUNT = _validate_asset_address(
    "DEFAULT_POOL_ACCOUNT", "0x000000000000000000000000000000000000a11e"
)
DEFAULT_SECOND_ASSET = _validate_asset_address(
    "DEFAULT_SECOND_ASSET", "0x6b175474e89094c44da98b954eedeac495271d0f"
)
