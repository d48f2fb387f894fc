"""FastAPI dependencies for dependency injection."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends

from finsight.processing.summary import SummaryGenerator
from finsight.providers.sec_edgar import SECEdgarClient

# Module-level singletons (initialised lazily on first use)
_sec_edgar_client: SECEdgarClient | None = None
_summary_generator: SummaryGenerator | None = None


def get_sec_edgar_client() -> SECEdgarClient:
    """Get or create singleton SEC EDGAR client."""
    global _sec_edgar_client
    if _sec_edgar_client is None:
        _sec_edgar_client = SECEdgarClient()
    return _sec_edgar_client


def get_summary_generator() -> SummaryGenerator:
    """Get or create singleton summary generator."""
    global _summary_generator
    if _summary_generator is None:
        _summary_generator = SummaryGenerator()
    return _summary_generator


async def close_clients() -> None:
    """Close singletons that hold network resources."""
    global _sec_edgar_client
    if _sec_edgar_client is not None:
        await _sec_edgar_client.close()
        _sec_edgar_client = None


# Annotated dependencies for use in route handlers
SECEdgarClientDep = Annotated[SECEdgarClient, Depends(get_sec_edgar_client)]
SummaryGeneratorDep = Annotated[SummaryGenerator, Depends(get_summary_generator)]
