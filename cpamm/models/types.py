"""Amount and address types shared by the pool models.

Amounts cross the HTTP boundary as decimal strings so that values above
2**53 survive JSON clients; inside the pool they are plain ints.
"""

import re
from typing import Annotated, Any

from pydantic import BeforeValidator, Field

UINT256_MAX = 2**256 - 1

# Ledger identifiers for assets and accounts: 0x + 20 bytes of hex
ADDRESS_PATTERN = r"^0x[a-fA-F0-9]{40}$"
_ADDRESS_RE = re.compile(ADDRESS_PATTERN)


def validate_uint256(value: Any) -> str:
    """Accept an int or decimal string in [0, 2**256 - 1] and return it as a string.

    Raises:
        ValueError: If value is a bool, not integral, negative or too large
    """
    if isinstance(value, bool):
        raise ValueError("Uint256 must be string or int, got bool")

    if isinstance(value, int):
        int_value = value
    elif isinstance(value, str):
        try:
            int_value = int(value)
        except ValueError as err:
            raise ValueError(f"Uint256 must be a decimal integer string: '{value}'") from err
    else:
        raise ValueError(f"Uint256 must be string or int, got {type(value).__name__}")

    if not 0 <= int_value <= UINT256_MAX:
        raise ValueError(f"Uint256 out of range: {value}")

    return str(int_value)


Address = Annotated[str, Field(pattern=ADDRESS_PATTERN)]

Uint256 = Annotated[
    str,
    BeforeValidator(validate_uint256),
    Field(description="256-bit unsigned integer as decimal string"),
]


def normalize_address(address: str) -> str:
    """Lowercase an address so ledger keys compare case-insensitively.

    A missing 0x prefix is added; validity is checked separately with
    is_valid_address().
    """
    addr = address.lower()
    if not addr.startswith("0x"):
        addr = "0x" + addr
    return addr


def is_valid_address(address: str) -> bool:
    """True if address is 0x followed by exactly 40 hex characters."""
    return isinstance(address, str) and _ADDRESS_RE.fullmatch(address) is not None
