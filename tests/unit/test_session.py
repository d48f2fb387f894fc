"""Tests for the analysis session state machine and its API client."""

from __future__ import annotations

import asyncio
import io
import subprocess
import sys
from datetime import date
from unittest.mock import AsyncMock

import httpx
import pytest
from fastapi import FastAPI

from finsight.api.router import api_router
from finsight.core.dependencies import get_sec_edgar_client, get_summary_generator
from finsight.core.exceptions import FilingsRequestError, SessionBusyError, TickerNotFoundError
from finsight.processing.summary import SummaryResult
from finsight.providers.sec_edgar.models import CompanyFilingsResponse, FilingRecord
from finsight.ui.api_client import FILINGS_ERROR_MESSAGE, FinSightAPIClient
from finsight.ui.session import AnalysisSession, SessionState
from finsight.ui.terminal import format_filing_table, render


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


def _filing() -> FilingRecord:
    return FilingRecord(
        form="10-K",
        filing_date=date(2026, 2, 10),
        report_date=date(2025, 12, 27),
        accession_number="0000320193-26-000010",
        primary_document="aapl-20251227.htm",
        description="Annual report",
        url="https://www.sec.gov/Archives/edgar/data/320193/000032019326000010/aapl-20251227.htm",
    )


SAMPLE_FILINGS = CompanyFilingsResponse(
    ticker="AAPL",
    company_name="Apple Inc.",
    cik="320193",
    filings=[_filing()],
)


@pytest.fixture()
def mock_api():
    api = AsyncMock()
    api.get_filings = AsyncMock(return_value=SAMPLE_FILINGS)
    api.get_summary = AsyncMock(return_value="## Financial Performance")
    return api


@pytest.fixture()
def transitions():
    return []


@pytest.fixture()
def session(mock_api, transitions):
    return AnalysisSession(mock_api, on_change=lambda s: transitions.append(s.state))


# ---------------------------------------------------------------------------
# State machine
# ---------------------------------------------------------------------------


class TestAnalysisSession:
    async def test_starts_idle(self, session: AnalysisSession):
        assert session.state is SessionState.IDLE
        assert not session.busy

    async def test_successful_search(self, session: AnalysisSession, mock_api, transitions):
        await session.submit(" aapl ")

        assert transitions == [
            SessionState.SEARCHING,
            SessionState.SUMMARY_PENDING,
            SessionState.SUMMARY_LOADED,
        ]
        assert session.filings == SAMPLE_FILINGS
        assert session.summary == "## Financial Performance"
        assert session.error == ""
        mock_api.get_filings.assert_awaited_once_with("AAPL")
        mock_api.get_summary.assert_awaited_once_with("Apple Inc.", "AAPL")

    async def test_filings_failure_skips_summary(
        self, session: AnalysisSession, mock_api, transitions
    ):
        mock_api.get_filings.side_effect = FilingsRequestError(FILINGS_ERROR_MESSAGE)

        await session.submit("ZZZZ")

        assert transitions == [SessionState.SEARCHING, SessionState.IDLE]
        assert session.error == FILINGS_ERROR_MESSAGE
        assert session.filings is None
        mock_api.get_summary.assert_not_called()

    async def test_summary_failure_text_keeps_filings(self, session: AnalysisSession, mock_api):
        mock_api.get_summary.return_value = "Failed to generate summary: GEMINI_API_KEY is not set"

        await session.submit("AAPL")

        assert session.state is SessionState.SUMMARY_LOADED
        assert session.filings == SAMPLE_FILINGS
        assert session.summary.startswith("Failed to generate summary")

    async def test_new_search_clears_previous_results(self, session: AnalysisSession, mock_api):
        await session.submit("AAPL")
        mock_api.get_filings.side_effect = FilingsRequestError(FILINGS_ERROR_MESSAGE)

        await session.submit("ZZZZ")

        assert session.filings is None
        assert session.summary == ""
        assert session.ticker == "ZZZZ"

    async def test_error_cleared_on_next_search(self, session: AnalysisSession, mock_api):
        mock_api.get_filings.side_effect = FilingsRequestError(FILINGS_ERROR_MESSAGE)
        await session.submit("ZZZZ")
        mock_api.get_filings.side_effect = None

        await session.submit("AAPL")

        assert session.error == ""
        assert session.state is SessionState.SUMMARY_LOADED

    async def test_submit_rejected_while_busy(self, session: AnalysisSession, mock_api):
        release = asyncio.Event()

        async def slow_summary(company_name: str, ticker: str) -> str:
            await release.wait()
            return "done"

        mock_api.get_summary.side_effect = slow_summary
        task = asyncio.create_task(session.submit("AAPL"))
        while session.state is not SessionState.SUMMARY_PENDING:
            await asyncio.sleep(0)

        assert session.busy
        with pytest.raises(SessionBusyError):
            await session.submit("MSFT")

        release.set()
        await task
        assert session.state is SessionState.SUMMARY_LOADED
        assert mock_api.get_filings.await_count == 1

    async def test_blank_ticker_rejected(self, session: AnalysisSession, transitions):
        with pytest.raises(ValueError):
            await session.submit("  ")
        assert transitions == []

    async def test_unexpected_filings_error_returns_to_idle(
        self, session: AnalysisSession, mock_api, transitions
    ):
        mock_api.get_filings.side_effect = RuntimeError("unexpected")

        await session.submit("AAPL")

        assert transitions == [SessionState.SEARCHING, SessionState.IDLE]
        assert session.error == FILINGS_ERROR_MESSAGE
        mock_api.get_summary.assert_not_called()

    async def test_unexpected_summary_error_still_loads(self, session: AnalysisSession, mock_api):
        mock_api.get_summary.side_effect = RuntimeError("socket closed")

        await session.submit("AAPL")

        assert session.state is SessionState.SUMMARY_LOADED
        assert session.filings == SAMPLE_FILINGS
        assert session.summary == "Failed to generate summary: socket closed"


# ---------------------------------------------------------------------------
# API client against the real routes
# ---------------------------------------------------------------------------


@pytest.fixture()
def mock_sec_client():
    client = AsyncMock()
    client.get_company_filings = AsyncMock(return_value=SAMPLE_FILINGS)
    return client


@pytest.fixture()
def mock_generator():
    generator = AsyncMock()
    generator.generate = AsyncMock(
        return_value=SummaryResult(
            ticker="AAPL",
            company_name="Apple Inc.",
            narrative_text="Failed to generate summary: GEMINI_API_KEY is not set",
            failed=True,
        )
    )
    return generator


@pytest.fixture()
async def api(mock_sec_client, mock_generator):
    app = FastAPI()
    app.include_router(api_router, prefix="/api")
    app.dependency_overrides[get_sec_edgar_client] = lambda: mock_sec_client
    app.dependency_overrides[get_summary_generator] = lambda: mock_generator
    async with FinSightAPIClient("http://test", transport=httpx.ASGITransport(app=app)) as c:
        yield c


class TestFinSightAPIClient:
    async def test_get_filings(self, api: FinSightAPIClient):
        filings = await api.get_filings("AAPL")
        assert filings == SAMPLE_FILINGS

    async def test_get_filings_404_raises(self, api: FinSightAPIClient, mock_sec_client):
        mock_sec_client.get_company_filings.side_effect = TickerNotFoundError("nope")
        with pytest.raises(FilingsRequestError, match="check the ticker symbol"):
            await api.get_filings("ZZZZ")

    async def test_get_filings_500_raises(self, api: FinSightAPIClient, mock_sec_client):
        mock_sec_client.get_company_filings.side_effect = RuntimeError("down")
        with pytest.raises(FilingsRequestError):
            await api.get_filings("AAPL")

    async def test_get_summary_returns_embedded_failure(self, api: FinSightAPIClient):
        text = await api.get_summary("Apple Inc.", "AAPL")
        assert text == "Failed to generate summary: GEMINI_API_KEY is not set"

    async def test_get_summary_transport_error_becomes_text(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with FinSightAPIClient(
            "http://test", transport=httpx.MockTransport(handler)
        ) as client:
            text = await client.get_summary("Apple Inc.", "AAPL")

        assert text.startswith("Failed to generate summary: ")

    async def test_full_session_with_missing_credential(self, api: FinSightAPIClient):
        session = AnalysisSession(api)
        await session.submit("AAPL")

        assert session.state is SessionState.SUMMARY_LOADED
        assert session.filings is not None
        assert len(session.filings.filings) == 1
        assert session.summary.startswith("Failed to generate summary")


# ---------------------------------------------------------------------------
# Terminal rendering
# ---------------------------------------------------------------------------


class TestTerminal:
    def test_format_filing_table(self):
        table = format_filing_table([_filing()])
        assert "10-K" in table
        assert "2026-02-10" in table
        assert "Annual report" in table
        assert _filing().url in table

    def test_format_empty_table(self):
        assert format_filing_table([]) == "No recent filings found."

    async def test_render_session(self, mock_api):
        out, err = io.StringIO(), io.StringIO()
        session = AnalysisSession(mock_api, on_change=lambda s: render(s, out, err))

        await session.submit("AAPL")

        text = out.getvalue()
        assert "Fetching SEC filings for AAPL" in text
        assert "Company: Apple Inc. (AAPL)" in text
        assert "AI Financial Summary (Past 12 Months)" in text
        assert "## Financial Performance" in text
        assert err.getvalue() == ""

    async def test_render_error(self, mock_api):
        mock_api.get_filings.side_effect = FilingsRequestError(FILINGS_ERROR_MESSAGE)
        out, err = io.StringIO(), io.StringIO()
        session = AnalysisSession(mock_api, on_change=lambda s: render(s, out, err))

        await session.submit("ZZZZ")

        assert FILINGS_ERROR_MESSAGE in err.getvalue()
        assert "AI Financial Summary" not in out.getvalue()


# ---------------------------------------------------------------------------
# Malformed server responses
# ---------------------------------------------------------------------------


def _server_returning(filings_body: object) -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path.startswith("/api/sec/filings/"):
            return httpx.Response(200, json=filings_body)
        return httpx.Response(200, json={"narrativeText": "Summary"})

    return httpx.MockTransport(handler)


class TestMalformedFilingsResponse:
    @pytest.mark.parametrize("body", [{"ticker": "AAPL"}, ["AAPL"], "not a payload"])
    async def test_get_filings_raises_request_error(self, body: object):
        async with FinSightAPIClient("http://test", transport=_server_returning(body)) as api:
            with pytest.raises(FilingsRequestError):
                await api.get_filings("AAPL")

    async def test_non_json_body_raises_request_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>gateway</html>")

        async with FinSightAPIClient("http://test", transport=httpx.MockTransport(handler)) as api:
            with pytest.raises(FilingsRequestError):
                await api.get_filings("AAPL")

    async def test_session_recovers_for_next_search(self):
        async with FinSightAPIClient(
            "http://test", transport=_server_returning({"ticker": "AAPL"})
        ) as api:
            session = AnalysisSession(api)
            await session.submit("AAPL")

            assert session.state is SessionState.IDLE
            assert session.error == FILINGS_ERROR_MESSAGE

            await session.submit("MSFT")

        assert session.ticker == "MSFT"
        assert session.state is SessionState.IDLE

    async def test_summary_body_not_an_object(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=["unexpected"])

        async with FinSightAPIClient("http://test", transport=httpx.MockTransport(handler)) as api:
            text = await api.get_summary("Apple Inc.", "AAPL")

        assert text.startswith("Failed to generate summary: ")


class TestImportBoundaries:
    def test_ui_client_does_not_load_llm_stack(self):
        code = (
            "import sys\n"
            "import finsight.ui.api_client\n"
            "import finsight.ui.session\n"
            "import finsight.ui.terminal\n"
            "sys.exit(1 if 'pydantic_ai' in sys.modules else 0)\n"
        )
        result = subprocess.run([sys.executable, "-c", code], capture_output=True, text=True)
        assert result.returncode == 0, result.stderr
