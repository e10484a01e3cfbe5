"""Constant-product AMM pool engine."""

from cpamm.config import DEFAULT_POOL_CONFIG, PoolConfig
from cpamm.pool import Pool

__version__ = "0.1.0"
__all__ = ["Pool", "PoolConfig", "DEFAULT_POOL_CONFIG", "__version__"]
