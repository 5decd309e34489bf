"""CCI calculator service entry point."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from cci_calculator.api.router import router
from cci_calculator.core.catalog import CCI_PARAMETERS, TOTAL_WEIGHTAGE
from cci_calculator.observability import configure_logging
from cci_calculator.settings import get_settings

settings = get_settings()
configure_logging(settings.log_level, json_logs=settings.log_json)

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Manage application startup and shutdown lifecycle.

    Args:
        app: The FastAPI application instance.

    Yields:
        None
    """
    logger.info(
        "CCI calculator starting",
        service_name=settings.service_name,
        version=settings.version,
        parameter_count=len(CCI_PARAMETERS),
        total_weightage=TOTAL_WEIGHTAGE,
    )
    yield
    logger.info("CCI calculator stopped", service_name=settings.service_name)


app: FastAPI = FastAPI(
    title=settings.service_name,
    version=settings.version,
    lifespan=lifespan,
)


@app.get("/health", tags=["health"])
async def health() -> dict[str, str]:
    """Liveness probe."""
    return {"status": "ok", "service": settings.service_name}


app.include_router(router, prefix=settings.api_prefix)
