"""AI summary flow.

Web-search-grounded Markdown summaries of a company's past 12 months.
"""

from finsight.processing.summary.generator import (
    SummaryGenerator,
    build_summary_prompt,
    create_summary_agent,
)
from finsight.processing.summary.models import SummaryResult

__all__ = [
    "SummaryGenerator",
    "SummaryResult",
    "build_summary_prompt",
    "create_summary_agent",
]
