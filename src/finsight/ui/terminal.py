"""Plain-text rendering of an analysis session for the CLI."""

from __future__ import annotations

import sys
from typing import TextIO

from finsight.providers.sec_edgar.models import FilingRecord
from finsight.ui.session import AnalysisSession, SessionState

_STATUS_LINES = {
    SessionState.SEARCHING: "Fetching SEC filings for {ticker}...",
    SessionState.SUMMARY_PENDING: "Analyzing financial reports and news (this may take a few moments)...",
}


def format_filing_table(filings: list[FilingRecord]) -> str:
    """Format filings as a simple table."""
    if not filings:
        return "No recent filings found."

    lines = []
    lines.append(f"{'Form':<6} {'Filed':<12} {'Description':<40}")
    lines.append("-" * 60)

    for filing in filings:
        lines.append(f"{filing.form:<6} {filing.filing_date.isoformat():<12} {filing.description[:40]:<40}")
        lines.append(f"{'':<19} {filing.url}")

    return "\n".join(lines)


def render(
    session: AnalysisSession,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> None:
    """Print whatever the latest transition made visible."""
    out = out or sys.stdout
    err = err or sys.stderr
    if session.state in _STATUS_LINES:
        if session.state is SessionState.SUMMARY_PENDING and session.filings is not None:
            _print_filings(session, out)
        print(_STATUS_LINES[session.state].format(ticker=session.ticker), file=out)
    elif session.state is SessionState.IDLE and session.error:
        print(f"Error: {session.error}", file=err)
    elif session.state is SessionState.SUMMARY_LOADED:
        print("\nAI Financial Summary (Past 12 Months)", file=out)
        print("=" * 60, file=out)
        print(session.summary, file=out)


def _print_filings(session: AnalysisSession, out: TextIO) -> None:
    assert session.filings is not None
    data = session.filings
    print(f"\nCompany: {data.company_name} ({data.ticker})", file=out)
    print(f"CIK: {data.cik}\n", file=out)
    print("Recent SEC Filings, past 12 months (10-K, 10-Q, 8-K)", file=out)
    print(format_filing_table(data.filings), file=out)
    print(file=out)
