"""FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from finsight.api import api_router
from finsight.config import get_settings
from finsight.core.dependencies import close_clients
from finsight.core.logging import get_logger, setup_logging
from finsight.ui import page

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan: configure logging, release HTTP clients on shutdown."""
    settings = get_settings()
    setup_logging(settings)
    logger.info(
        "FinSight ready",
        env=settings.env,
        llm_provider=settings.llm_provider,
        summary_enabled=settings.get_llm_api_key() is not None,
    )
    yield
    await close_clients()


app = FastAPI(
    title="FinSight",
    description="Recent SEC filings and AI-generated financial summaries",
    version="0.1.0",
    lifespan=lifespan,
)


@app.get("/health")
async def health() -> dict[str, str]:
    """Liveness check: always ok if the process is running."""
    return {"status": "ok"}


# Domain API
app.include_router(api_router, prefix="/api")

# Browser UI
app.include_router(page.router)
