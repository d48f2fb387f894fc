"""AI summary API endpoints."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Query

from finsight.core.dependencies import SummaryGeneratorDep

router = APIRouter()


@router.get("/{ticker}")
async def get_company_summary(
    ticker: str,
    generator: SummaryGeneratorDep,
    company_name: str | None = Query(None, description="Company display name"),
) -> dict[str, Any]:
    """Generate a Markdown summary of the company's past 12 months.

    Always returns 200; generation failures are embedded in ``narrativeText``.
    """
    result = await generator.generate(company_name or ticker.upper(), ticker)
    return result.model_dump(mode="json", by_alias=True)
