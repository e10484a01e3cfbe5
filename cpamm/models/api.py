"""Pydantic models for the pool HTTP service."""

from typing import Literal

from pydantic import BaseModel, Field, model_validator

from cpamm.models.types import Address, Uint256


class PoolState(BaseModel):
    """Snapshot of the pool's reserves and share supply."""

    base_asset: Address = Field(alias="baseAsset")
    second_asset: Address = Field(alias="secondAsset")
    pool_account: Address = Field(alias="poolAccount")
    base_reserve: Uint256 = Field(alias="baseReserve")
    second_reserve: Uint256 = Field(alias="secondReserve")
    total_shares: Uint256 = Field(alias="totalShares")
    fee_percent: int = Field(alias="feePercent", ge=0, lt=100)

    model_config = {"populate_by_name": True}


class ReserveResponse(BaseModel):
    """The pool's second-asset reserve."""

    reserve: Uint256

    model_config = {"populate_by_name": True}


class QuoteRequest(BaseModel):
    """Quote a swap against live reserves or caller-supplied ones.

    Reserves are supplied as a pair or not at all. When both are given the
    quote is purely hypothetical and the direction is ignored.
    """

    amount_in: Uint256 = Field(alias="amountIn")
    direction: Literal["base_for_second", "second_for_base"] = "base_for_second"
    reserve_in: Uint256 | None = Field(default=None, alias="reserveIn")
    reserve_out: Uint256 | None = Field(default=None, alias="reserveOut")

    model_config = {"populate_by_name": True}

    @model_validator(mode="after")
    def _reserves_paired(self) -> "QuoteRequest":
        if (self.reserve_in is None) != (self.reserve_out is None):
            raise ValueError("reserveIn and reserveOut must be given together")
        return self


class QuoteResponse(BaseModel):
    """Result of a swap quote."""

    amount_in: Uint256 = Field(alias="amountIn")
    amount_out: Uint256 = Field(alias="amountOut")
    reserve_in: Uint256 = Field(alias="reserveIn")
    reserve_out: Uint256 = Field(alias="reserveOut")
    fee_percent: int = Field(alias="feePercent", ge=0, lt=100)

    model_config = {"populate_by_name": True}


class AddLiquidityRequest(BaseModel):
    """Deposit base (attached value) plus an offered amount of the second asset."""

    caller: Address
    base_amount: Uint256 = Field(alias="baseAmount")
    second_amount_offered: Uint256 = Field(alias="secondAmountOffered")

    model_config = {"populate_by_name": True}


class AddLiquidityResponse(BaseModel):
    """Shares minted for a deposit."""

    shares: Uint256
    total_shares: Uint256 = Field(alias="totalShares")

    model_config = {"populate_by_name": True}


class RemoveLiquidityRequest(BaseModel):
    """Burn shares for a proportional withdrawal."""

    caller: Address
    shares: Uint256

    model_config = {"populate_by_name": True}


class RemoveLiquidityResponse(BaseModel):
    """Assets paid out for burned shares."""

    base_amount: Uint256 = Field(alias="baseAmount")
    second_amount: Uint256 = Field(alias="secondAmount")

    model_config = {"populate_by_name": True}


class SwapRequest(BaseModel):
    """Exact-input swap with a slippage bound."""

    caller: Address
    amount_in: Uint256 = Field(alias="amountIn")
    min_amount_out: Uint256 = Field(default="0", alias="minAmountOut")

    model_config = {"populate_by_name": True}


class SwapResponse(BaseModel):
    """Executed swap amounts."""

    amount_in: Uint256 = Field(alias="amountIn")
    amount_out: Uint256 = Field(alias="amountOut")

    model_config = {"populate_by_name": True}


class MintRequest(BaseModel):
    """Credit an account with an asset on the in-memory ledger."""

    asset: Address
    account: Address
    amount: Uint256

    model_config = {"populate_by_name": True}


class ApproveRequest(BaseModel):
    """Allow the pool to pull up to `amount` of the second asset from `owner`."""

    owner: Address
    amount: Uint256

    model_config = {"populate_by_name": True}


class BalanceResponse(BaseModel):
    """Ledger balance of one asset for one account."""

    asset: Address
    account: Address
    balance: Uint256

    model_config = {"populate_by_name": True}


class ErrorResponse(BaseModel):
    """Body returned for rejected pool operations."""

    detail: str
    error: str
