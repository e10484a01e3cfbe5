"""API endpoints for the pool service."""

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, Path

from cpamm.api.service import PoolService, get_default_service
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
from cpamm.models.types import ADDRESS_PATTERN, normalize_address

logger = structlog.get_logger()

router = APIRouter(
    responses={
        400: {"model": ErrorResponse, "description": "Malformed or rejected request"},
        409: {"model": ErrorResponse, "description": "Conflicts with the current pool state"},
    }
)


def get_service() -> PoolService:
    """Dependency provider for the pool service.

    Override this in tests to inject a fresh pool:
        app.dependency_overrides[get_service] = lambda: PoolService()
    """
    return get_default_service()


@router.get("/pool")
async def pool_state(service: PoolService = Depends(get_service)) -> PoolState:
    """Reserves, share supply and fee of the pool."""
    base_reserve, second_reserve = service.pool.get_reserves()
    config = service.config
    return PoolState(
        base_asset=config.base_asset,
        second_asset=config.second_asset,
        pool_account=config.pool_account,
        base_reserve=base_reserve,
        second_reserve=second_reserve,
        total_shares=service.pool.total_shares(),
        fee_percent=config.fee_percent,
    )


@router.get("/pool/reserve")
async def get_reserve(service: PoolService = Depends(get_service)) -> ReserveResponse:
    """Second-asset reserve."""
    return ReserveResponse(reserve=service.pool.get_reserve())


@router.post("/pool/quote")
async def quote(
    request: QuoteRequest,
    service: PoolService = Depends(get_service),
) -> QuoteResponse:
    """Quote a swap.

    Uses the supplied reserves when both are given, otherwise the live
    reserves in the requested direction.
    """
    swap_quote = service.pool.quote(
        int(request.amount_in),
        base_for_second=request.direction == "base_for_second",
        reserve_in=None if request.reserve_in is None else int(request.reserve_in),
        reserve_out=None if request.reserve_out is None else int(request.reserve_out),
    )
    return QuoteResponse(
        amount_in=swap_quote.amount_in,
        amount_out=swap_quote.amount_out,
        reserve_in=swap_quote.reserve_in,
        reserve_out=swap_quote.reserve_out,
        fee_percent=swap_quote.fee_percent,
    )


@router.post("/pool/liquidity/add")
async def add_liquidity(
    request: AddLiquidityRequest,
    service: PoolService = Depends(get_service),
) -> AddLiquidityResponse:
    """Deposit base (as attached value) and the second asset."""
    shares = service.pool.add_liquidity(
        request.caller,
        int(request.base_amount),
        int(request.second_amount_offered),
    )
    return AddLiquidityResponse(shares=shares, total_shares=service.pool.total_shares())


@router.post("/pool/liquidity/remove")
async def remove_liquidity(
    request: RemoveLiquidityRequest,
    service: PoolService = Depends(get_service),
) -> RemoveLiquidityResponse:
    """Burn shares for a proportional withdrawal."""
    withdrawal = service.pool.remove_liquidity(request.caller, int(request.shares))
    return RemoveLiquidityResponse(
        base_amount=withdrawal.base_amount,
        second_amount=withdrawal.second_amount,
    )


@router.post("/pool/swap/base-for-second")
async def swap_base_for_second(
    request: SwapRequest,
    service: PoolService = Depends(get_service),
) -> SwapResponse:
    """Swap attached base for the second asset."""
    amount_out = service.pool.swap_base_for_second(
        request.caller, int(request.amount_in), int(request.min_amount_out)
    )
    return SwapResponse(amount_in=request.amount_in, amount_out=amount_out)


@router.post("/pool/swap/second-for-base")
async def swap_second_for_base(
    request: SwapRequest,
    service: PoolService = Depends(get_service),
) -> SwapResponse:
    """Swap approved second asset for base."""
    amount_out = service.pool.swap_second_for_base(
        request.caller, int(request.amount_in), int(request.min_amount_out)
    )
    return SwapResponse(amount_in=request.amount_in, amount_out=amount_out)


@router.post("/ledger/mint")
async def mint(
    request: MintRequest,
    service: PoolService = Depends(get_service),
) -> BalanceResponse:
    """Credit an account on the in-memory ledger (development faucet)."""
    service.ledger.credit(request.asset, request.account, int(request.amount))
    logger.info(
        "ledger_credited",
        asset=normalize_address(request.asset),
        account=normalize_address(request.account),
        amount=request.amount,
    )
    return BalanceResponse(
        asset=request.asset,
        account=request.account,
        balance=service.ledger.balance_of(request.asset, request.account),
    )


@router.post("/ledger/approve")
async def approve(
    request: ApproveRequest,
    service: PoolService = Depends(get_service),
) -> BalanceResponse:
    """Approve the pool to pull the second asset from `owner`."""
    config = service.config
    service.ledger.approve(
        config.second_asset, request.owner, config.pool_account, int(request.amount)
    )
    return BalanceResponse(
        asset=config.second_asset,
        account=request.owner,
        balance=service.ledger.balance_of(config.second_asset, request.owner),
    )


@router.get("/ledger/{asset}/{account}")
async def balance(
    asset: Annotated[str, Path(pattern=ADDRESS_PATTERN)],
    account: Annotated[str, Path(pattern=ADDRESS_PATTERN)],
    service: PoolService = Depends(get_service),
) -> BalanceResponse:
    """Ledger balance lookup."""
    asset = normalize_address(asset)
    account = normalize_address(account)
    return BalanceResponse(
        asset=asset,
        account=account,
        balance=service.ledger.balance_of(asset, account),
    )
