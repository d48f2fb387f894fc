"""Models for AI-generated company summaries."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class SummaryResult(BaseModel):
    """Markdown narrative about a company's past 12 months.

    When generation fails the reason is embedded in ``narrative_text`` and
    ``failed`` is set, so the summary panel still has something to show.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    ticker: str
    company_name: str
    narrative_text: str
    failed: bool = False
