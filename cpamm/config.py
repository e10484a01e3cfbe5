"""Pool and service configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass

from cpamm.constants import (
    BASE_ASSET,
    DEFAULT_FEE_PERCENT,
    DEFAULT_POOL_ACCOUNT,
    DEFAULT_SECOND_ASSET,
    FEE_DENOMINATOR,
    ZERO_ADDRESS,
)
from cpamm.errors import InvalidConfiguration
from cpamm.models.types import is_valid_address, normalize_address


@dataclass(frozen=True)
class PoolConfig:
    """Fixed parameters of one pool deployment.

    The fee is set once here and never changes for the life of a pool.

    Attributes:
        second_asset: Ledger identifier of the second asset
        pool_account: Account that holds the pool's reserves
        base_asset: Ledger identifier of the native asset
        fee_percent: Swap fee in whole percent (default: 1)
    """

    second_asset: str = DEFAULT_SECOND_ASSET
    pool_account: str = DEFAULT_POOL_ACCOUNT
    base_asset: str = BASE_ASSET
    fee_percent: int = DEFAULT_FEE_PERCENT

    def __post_init__(self) -> None:
        for name in ("second_asset", "pool_account", "base_asset"):
            address = getattr(self, name)
            if not is_valid_address(address):
                raise InvalidConfiguration(f"Invalid {name}: {address!r}")
            address = normalize_address(address)
            if address == ZERO_ADDRESS:
                raise InvalidConfiguration(f"{name} cannot be the zero address")
            object.__setattr__(self, name, address)

        if self.second_asset == self.base_asset:
            raise InvalidConfiguration("second_asset must differ from base_asset")
        if isinstance(self.fee_percent, bool) or not isinstance(self.fee_percent, int):
            raise InvalidConfiguration(f"fee_percent must be int, got {self.fee_percent!r}")
        if not 0 <= self.fee_percent < FEE_DENOMINATOR:
            raise InvalidConfiguration(
                f"fee_percent must be in [0, {FEE_DENOMINATOR}), got {self.fee_percent}"
            )

    @property
    def fee_multiplier(self) -> int:
        """Multiplier applied to swap input (100 - fee_percent).

        For the reference 1% fee this returns 99.
        """
        return FEE_DENOMINATOR - self.fee_percent


# Default configuration instance
DEFAULT_POOL_CONFIG = PoolConfig()


@dataclass(frozen=True)
class ServiceSettings:
    """Settings for the HTTP service, read from environment variables."""

    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False
    log_level: str = "INFO"
    fee_percent: int = DEFAULT_FEE_PERCENT
    second_asset: str = DEFAULT_SECOND_ASSET

    @classmethod
    def from_env(cls) -> ServiceSettings:
        """Build settings from the process environment.

        - CPAMM_HOST: Host to bind to (default: 0.0.0.0)
        - CPAMM_PORT: Port to bind to (default: 8000)
        - CPAMM_DEBUG: Enable debug/reload mode (default: false)
        - CPAMM_LOG_LEVEL: structlog filtering level (default: INFO)
        - CPAMM_FEE_PERCENT: Swap fee in whole percent (default: 1)
        - CPAMM_SECOND_ASSET: Second asset address
        """
        return cls(
            host=os.environ.get("CPAMM_HOST", "0.0.0.0"),
            port=int(os.environ.get("CPAMM_PORT", "8000")),
            debug=os.environ.get("CPAMM_DEBUG", "false").lower() in ("true", "1", "yes"),
            log_level=os.environ.get("CPAMM_LOG_LEVEL", "INFO").upper(),
            fee_percent=int(os.environ.get("CPAMM_FEE_PERCENT", str(DEFAULT_FEE_PERCENT))),
            second_asset=os.environ.get("CPAMM_SECOND_ASSET", DEFAULT_SECOND_ASSET),
        )

    def pool_config(self) -> PoolConfig:
        """PoolConfig for the pool served by this process."""
        return PoolConfig(second_asset=self.second_asset, fee_percent=self.fee_percent)
