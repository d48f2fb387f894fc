"""Async client for the FinSight HTTP API, used by the presentation layer."""

from __future__ import annotations

import httpx

from finsight.core.exceptions import SUMMARY_FAILURE_PREFIX, FilingsRequestError
from finsight.core.logging import get_logger
from finsight.providers.sec_edgar.models import CompanyFilingsResponse

logger = get_logger(__name__)

FILINGS_ERROR_MESSAGE = "Failed to fetch company data. Please check the ticker symbol."


class FinSightAPIClient:
    """Thin wrapper over the two FinSight endpoints.

    Usage:
        async with FinSightAPIClient("http://localhost:3000") as api:
            filings = await api.get_filings("AAPL")
            summary = await api.get_summary(filings.company_name, filings.ticker)
    """

    def __init__(
        self,
        base_url: str,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        # No timeout: summary generation can take minutes
        self._http_client = httpx.AsyncClient(
            base_url=base_url,
            transport=transport,
            timeout=None,
        )

    async def get_filings(self, ticker: str) -> CompanyFilingsResponse:
        """Fetch a company's recent filings.

        Raises:
            FilingsRequestError: On a non-200 response, a transport failure or
                a body that is not a filings payload
        """
        try:
            resp = await self._http_client.get(f"/api/sec/filings/{ticker.strip()}")
        except httpx.HTTPError as e:
            logger.warning("Filings request failed", ticker=ticker, error=str(e))
            raise FilingsRequestError(FILINGS_ERROR_MESSAGE) from e

        if resp.status_code != 200:
            logger.info("Filings request rejected", ticker=ticker, status=resp.status_code)
            raise FilingsRequestError(FILINGS_ERROR_MESSAGE)

        try:
            return CompanyFilingsResponse.model_validate(resp.json())
        except ValueError as e:
            logger.warning("Malformed filings response", ticker=ticker, error=str(e))
            raise FilingsRequestError(FILINGS_ERROR_MESSAGE) from e

    async def get_summary(self, company_name: str, ticker: str) -> str:
        """Fetch the AI summary text. Never raises; failures come back as text."""
        try:
            resp = await self._http_client.get(
                f"/api/summary/{ticker}",
                params={"company_name": company_name},
            )
            resp.raise_for_status()
            text: str = resp.json()["narrativeText"]
        except (httpx.HTTPError, KeyError, TypeError, ValueError) as e:
            logger.warning("Summary request failed", ticker=ticker, error=str(e))
            return f"{SUMMARY_FAILURE_PREFIX}{e}"
        return text

    async def close(self) -> None:
        """Clean up resources."""
        await self._http_client.aclose()

    async def __aenter__(self) -> FinSightAPIClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()
