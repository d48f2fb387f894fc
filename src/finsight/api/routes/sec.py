"""SEC filings API endpoints."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from finsight.core.dependencies import SECEdgarClientDep
from finsight.core.exceptions import TickerNotFoundError
from finsight.core.logging import get_logger

logger = get_logger(__name__)

router = APIRouter()


@router.get("/filings/{ticker}", response_model=None)
async def get_company_filings(
    ticker: str,
    client: SECEdgarClientDep,
) -> dict[str, Any] | JSONResponse:
    """Get a company's 10-K, 10-Q and 8-K filings from the past 12 months."""
    try:
        response = await client.get_company_filings(ticker)
    except TickerNotFoundError:
        return JSONResponse(status_code=404, content={"error": "Ticker not found"})
    except Exception:
        logger.exception("Failed to fetch SEC data", ticker=ticker.upper())
        return JSONResponse(status_code=500, content={"error": "Failed to fetch SEC data"})

    return response.model_dump(mode="json", by_alias=True)
