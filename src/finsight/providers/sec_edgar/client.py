"""SEC EDGAR API client.

Free API, no key required, just a User-Agent header.
- Ticker→CIK mapping: https://www.sec.gov/files/company_tickers.json
- Company submissions: https://data.sec.gov/submissions/CIK{cik}.json
- Filing documents: https://www.sec.gov/Archives/edgar/data/{cik}/{accession}/{document}
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

import httpx
import orjson

from finsight.config import get_settings
from finsight.core.exceptions import TickerNotFoundError, UpstreamError
from finsight.core.logging import get_logger
from finsight.providers.sec_edgar.filings import SEC_WWW_URL, select_recent_filings
from finsight.providers.sec_edgar.models import CompanyFilingsResponse, CompanyIdentity

logger = get_logger(__name__)

SEC_BASE_URL = "https://data.sec.gov"
COMPANY_TICKERS_URL = f"{SEC_WWW_URL}/files/company_tickers.json"


class SECEdgarClient:
    """Client for the SEC EDGAR API.

    Resolves tickers to CIKs and lists a company's recent 10-K, 10-Q and 8-K
    filings. Every call goes to SEC; nothing is cached between requests.

    Usage:
        client = SECEdgarClient()
        response = await client.get_company_filings("AAPL")
        await client.close()
    """

    def __init__(self) -> None:
        self._http_client: httpx.AsyncClient | None = None

    def _get_http_client(self) -> httpx.AsyncClient:
        if self._http_client is None:
            settings = get_settings()
            self._http_client = httpx.AsyncClient(
                timeout=settings.sec_edgar_timeout,
                follow_redirects=True,
                headers={
                    "User-Agent": settings.sec_edgar_user_agent,
                    "Accept-Encoding": "gzip, deflate",
                },
            )
        return self._http_client

    async def _fetch_json(self, url: str) -> dict[str, Any]:
        """GET a JSON object, raising UpstreamError on any transport or payload problem."""
        client = self._get_http_client()
        try:
            resp = await client.get(url)
            resp.raise_for_status()
            data = orjson.loads(resp.content)
        except httpx.HTTPStatusError as e:
            raise UpstreamError(
                f"SEC returned HTTP {e.response.status_code} for {url}"
            ) from e
        except httpx.HTTPError as e:
            raise UpstreamError(f"SEC request failed for {url}: {e}") from e
        except orjson.JSONDecodeError as e:
            raise UpstreamError(f"SEC returned invalid JSON for {url}") from e

        if not isinstance(data, dict):
            raise UpstreamError(f"SEC returned unexpected payload for {url}")
        return data

    # ─────────────────────────────────────────────────────────────
    # CIK Resolution
    # ─────────────────────────────────────────────────────────────

    async def resolve_company(self, ticker: str) -> CompanyIdentity:
        """Resolve a ticker to its CIK and company name.

        The full directory is downloaded on every call and scanned in listed
        order; the first case-insensitive match wins.

        Raises:
            TickerNotFoundError: If no directory entry has this ticker
            UpstreamError: If the directory could not be fetched
        """
        ticker = ticker.strip().upper()
        if not ticker:
            raise TickerNotFoundError("Ticker cannot be empty")

        data = await self._fetch_json(COMPANY_TICKERS_URL)

        for entry in data.values():
            if not isinstance(entry, dict):
                continue
            if str(entry.get("ticker", "")).upper() != ticker:
                continue
            cik = entry.get("cik_str")
            if cik is None:
                continue
            identity = CompanyIdentity(
                ticker=ticker,
                cik=str(cik),
                name=str(entry.get("title", "")),
            )
            logger.debug("Resolved ticker", ticker=ticker, cik=identity.cik)
            return identity

        logger.info("Ticker not in SEC directory", ticker=ticker)
        raise TickerNotFoundError(f"Ticker '{ticker}' not found")

    # ─────────────────────────────────────────────────────────────
    # Submissions
    # ─────────────────────────────────────────────────────────────

    async def get_submissions(self, company: CompanyIdentity) -> dict[str, Any]:
        """Get the ``filings.recent`` block of a company's submission history.

        A response without a filings container yields an empty block.

        Raises:
            UpstreamError: If the submissions could not be fetched
        """
        padded_cik = company.padded_cik
        data = await self._fetch_json(f"{SEC_BASE_URL}/submissions/CIK{padded_cik}.json")

        filings = data.get("filings")
        recent = filings.get("recent") if isinstance(filings, dict) else None
        if not isinstance(recent, dict):
            logger.warning("Submissions missing recent filings", cik=padded_cik)
            return {}

        logger.debug("Fetched SEC submissions", cik=padded_cik, count=len(recent.get("form", [])))
        return recent

    # ─────────────────────────────────────────────────────────────
    # Filings
    # ─────────────────────────────────────────────────────────────

    async def get_company_filings(
        self,
        ticker: str,
        now: datetime | None = None,
    ) -> CompanyFilingsResponse:
        """Get a company's 10-K, 10-Q and 8-K filings from the past year.

        Args:
            ticker: Stock ticker symbol (case-insensitive)
            now: Reference time for the lookback window (defaults to current UTC time)

        Returns:
            CompanyFilingsResponse with filings in SEC order (newest first)

        Raises:
            TickerNotFoundError: If the ticker is not listed
            UpstreamError: If SEC could not be reached or returned bad data
        """
        settings = get_settings()
        company = await self.resolve_company(ticker)
        recent = await self.get_submissions(company)

        filings = select_recent_filings(
            recent,
            cik=company.cik,
            now=now or datetime.now(timezone.utc),
            form_types=settings.filing_form_types,
            lookback_days=settings.filings_lookback_days,
        )
        logger.info(
            "Selected recent filings",
            ticker=company.ticker,
            cik=company.cik,
            count=len(filings),
        )

        return CompanyFilingsResponse(
            ticker=company.ticker,
            company_name=company.name,
            cik=company.cik,
            filings=filings,
        )

    async def close(self) -> None:
        """Clean up resources."""
        if self._http_client:
            await self._http_client.aclose()
            self._http_client = None
        logger.debug("SECEdgarClient closed")
