"""Selection of recent filings from a submissions ``filings.recent`` block.

The SEC submissions API returns filings as parallel arrays indexed by
position (``form[i]``, ``filingDate[i]``, ``accessionNumber[i]``, ...).
This module turns that block into FilingRecords without touching the network.
"""

from __future__ import annotations

from collections.abc import Collection, Mapping, Sequence
from datetime import date, datetime, timedelta
from typing import Any

from finsight.providers.sec_edgar.models import FilingRecord

SEC_WWW_URL = "https://www.sec.gov"

DEFAULT_FORM_TYPES: frozenset[str] = frozenset({"10-K", "10-Q", "8-K"})
DEFAULT_LOOKBACK_DAYS = 365


def build_document_url(cik: str, accession_number: str, primary_document: str) -> str:
    """Build the archive URL of a filing's primary document.

    Example:
        >>> build_document_url("320193", "0000320193-24-000123", "aapl-20240928.htm")
        'https://www.sec.gov/Archives/edgar/data/320193/000032019324000123/aapl-20240928.htm'
    """
    accession = accession_number.replace("-", "")
    return f"{SEC_WWW_URL}/Archives/edgar/data/{cik}/{accession}/{primary_document}"


def _parse_date(value: Any) -> date | None:
    if not isinstance(value, str) or not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        return None


def _at(values: Sequence[Any], i: int) -> str:
    """Read a parallel array entry, tolerating short arrays and nulls."""
    if i < len(values) and values[i] is not None:
        return str(values[i])
    return ""


def select_recent_filings(
    recent: Mapping[str, Any],
    cik: str,
    now: datetime,
    form_types: Collection[str] = DEFAULT_FORM_TYPES,
    lookback_days: int = DEFAULT_LOOKBACK_DAYS,
) -> list[FilingRecord]:
    """Select filings of the given form types filed within the lookback window.

    An entry is kept when its filing date parses, is on or after
    ``now - lookback_days`` and its form is one of ``form_types``. There is
    no upper bound, so future-dated filings are kept. Order follows the
    source arrays.

    Args:
        recent: The ``filings.recent`` block of a submissions response
        cik: Company CIK used in document URLs (unpadded)
        now: Reference time for the lookback window
        form_types: Allowed form types
        lookback_days: Size of the trailing window in days

    Returns:
        FilingRecords in source order
    """
    forms: Sequence[Any] = recent.get("form") or []
    filing_dates: Sequence[Any] = recent.get("filingDate") or []
    report_dates: Sequence[Any] = recent.get("reportDate") or []
    accession_numbers: Sequence[Any] = recent.get("accessionNumber") or []
    primary_documents: Sequence[Any] = recent.get("primaryDocument") or []
    descriptions: Sequence[Any] = recent.get("primaryDocDescription") or []

    cutoff = (now - timedelta(days=lookback_days)).date()

    filings: list[FilingRecord] = []
    for i, form in enumerate(forms):
        filed = _parse_date(_at(filing_dates, i))
        if filed is None or filed < cutoff:
            continue
        if form not in form_types:
            continue

        accession = _at(accession_numbers, i)
        document = _at(primary_documents, i)
        filings.append(
            FilingRecord(
                form=form,
                filing_date=filed,
                report_date=_parse_date(_at(report_dates, i)),
                accession_number=accession,
                primary_document=document,
                description=_at(descriptions, i) or form,
                url=build_document_url(cik, accession, document),
            )
        )

    return filings
