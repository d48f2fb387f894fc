"""SEC EDGAR provider for company filings.

Uses the free SEC EDGAR API (data.sec.gov); no API key required.
"""

from finsight.providers.sec_edgar.client import SECEdgarClient
from finsight.providers.sec_edgar.filings import build_document_url, select_recent_filings
from finsight.providers.sec_edgar.models import (
    CompanyFilingsResponse,
    CompanyIdentity,
    FilingRecord,
)

__all__ = [
    "SECEdgarClient",
    "CompanyFilingsResponse",
    "CompanyIdentity",
    "FilingRecord",
    "build_document_url",
    "select_recent_filings",
]
