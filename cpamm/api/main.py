"""FastAPI application for the pool service."""

import logging

import structlog
import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from cpamm.api.endpoints import router
from cpamm.config import ServiceSettings
from cpamm.errors import (
    InsufficientOfferedAmount,
    InsufficientShares,
    PoolError,
    SlippageExceeded,
    TransferFailed,
)
from cpamm.safe_int import SafeIntError

logger = structlog.get_logger()

# Errors about pool state rather than malformed input
CONFLICT_ERRORS = (InsufficientOfferedAmount, InsufficientShares, SlippageExceeded, TransferFailed)

app = FastAPI(
    title="cpamm",
    description="Constant-product AMM pool service",
    version="0.1.0",
)


@app.exception_handler(PoolError)
async def pool_error_handler(request: Request, exc: PoolError) -> JSONResponse:
    """Map rejected pool operations to 400/409 with the error kind."""
    status_code = 409 if isinstance(exc, CONFLICT_ERRORS) else 400
    logger.warning(
        "pool_operation_rejected",
        path=request.url.path,
        error=exc.error_code,
        detail=str(exc),
    )
    return JSONResponse(
        status_code=status_code,
        content={"detail": str(exc), "error": exc.error_code},
    )


@app.exception_handler(SafeIntError)
async def arithmetic_error_handler(request: Request, exc: SafeIntError) -> JSONResponse:
    """Arithmetic faults are fatal for the request."""
    logger.error("arithmetic_fault", path=request.url.path, detail=str(exc))
    return JSONResponse(
        status_code=500,
        content={"detail": str(exc), "error": type(exc).__name__},
    )


app.include_router(router)


@app.get("/health")
async def health() -> dict[str, object]:
    """Health check endpoint."""
    return {"status": "ok"}


def configure_logging(level: str = "INFO") -> None:
    """Configure structlog for console output at the given level."""
    log_level = getattr(logging, level.upper(), logging.INFO)
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
    )


def run() -> None:
    """Run the pool API server.

    Configuration via environment variables (see ServiceSettings.from_env).
    """
    settings = ServiceSettings.from_env()
    configure_logging(settings.log_level)
    uvicorn.run(
        "cpamm.api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    run()
