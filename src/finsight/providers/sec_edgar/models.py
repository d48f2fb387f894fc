"""Pydantic models for SEC EDGAR data."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _WireModel(BaseModel):
    """Immutable model serialized in camelCase on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class CompanyIdentity(_WireModel):
    """A ticker resolved against the SEC company directory."""

    ticker: str
    cik: str  # As stored in the directory, unpadded
    name: str

    @property
    def padded_cik(self) -> str:
        """CIK zero-padded to 10 digits, as used by the submissions API."""
        return self.cik.zfill(10)


class FilingRecord(_WireModel):
    """A single SEC filing selected for display."""

    form: str  # "10-K", "10-Q", "8-K"
    filing_date: date
    report_date: date | None
    accession_number: str
    primary_document: str
    description: str
    url: str  # Full URL to the primary document


class CompanyFilingsResponse(_WireModel):
    """Resolved company plus its recent filings, newest first as SEC lists them."""

    ticker: str
    company_name: str
    cik: str
    filings: list[FilingRecord]
