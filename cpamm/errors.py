"""Pool error classes.

Every rejected pool operation raises a subclass of PoolError before any
ledger mutation happens. Arithmetic faults are not PoolErrors; they come
from cpamm.safe_int and are treated as fatal.
"""


class PoolError(Exception):
    """Base error for pool operations."""

    error_code = "PoolError"


class InvalidConfiguration(PoolError):
    """Pool set up with a zero or malformed asset address, or a bad fee."""

    error_code = "InvalidConfiguration"


class InvalidReserves(PoolError):
    """Pricing called with a non-positive reserve."""

    error_code = "InvalidReserves"


class InsufficientOfferedAmount(PoolError):
    """Deposit offered less of the second asset than the pool ratio requires."""

    error_code = "InsufficientOfferedAmount"


class InvalidAmount(PoolError):
    """Non-positive amount where a positive one is required."""

    error_code = "InvalidAmount"


class InsufficientShares(PoolError):
    """Burn exceeds the holder's share balance."""

    error_code = "InsufficientShares"


class SlippageExceeded(PoolError):
    """Swap output is below the caller's minimum."""

    error_code = "SlippageExceeded"


class TransferFailed(PoolError):
    """The ledger refused an asset transfer."""

    error_code = "TransferFailed"
