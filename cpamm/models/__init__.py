"""Data models for the pool engine and its HTTP service."""

from cpamm.models.api import (
    AddLiquidityRequest,
    AddLiquidityResponse,
    ApproveRequest,
    BalanceResponse,
    ErrorResponse,
    MintRequest,
    PoolState,
    QuoteRequest,
    QuoteResponse,
    RemoveLiquidityRequest,
    RemoveLiquidityResponse,
    ReserveResponse,
    SwapRequest,
    SwapResponse,
)
from cpamm.models.results import Deposit, SwapQuote, Withdrawal
from cpamm.models.types import (
    UINT256_MAX,
    Address,
    Uint256,
    is_valid_address,
    normalize_address,
)

__all__ = [
    # Results
    "Deposit",
    "SwapQuote",
    "Withdrawal",
    # API
    "AddLiquidityRequest",
    "AddLiquidityResponse",
    "ApproveRequest",
    "BalanceResponse",
    "ErrorResponse",
    "MintRequest",
    "PoolState",
    "QuoteRequest",
    "QuoteResponse",
    "RemoveLiquidityRequest",
    "RemoveLiquidityResponse",
    "ReserveResponse",
    "SwapRequest",
    "SwapResponse",
    # Types
    "UINT256_MAX",
    "Address",
    "Uint256",
    "is_valid_address",
    "normalize_address",
]
