"""Per-session state machine for the analysis view.

A search runs in two phases: filings first, then the AI summary. The summary
phase starts on its own once filings arrive and is skipped entirely if the
filings phase fails. Only one search may be in flight per session.

    IDLE ──submit──▶ SEARCHING ──ok──▶ SUMMARY_PENDING ──▶ SUMMARY_LOADED
                        │
                        └──error──▶ IDLE (error set)
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum

from finsight.core.exceptions import SUMMARY_FAILURE_PREFIX, FilingsRequestError, SessionBusyError
from finsight.core.logging import get_logger
from finsight.providers.sec_edgar.models import CompanyFilingsResponse
from finsight.ui.api_client import FILINGS_ERROR_MESSAGE, FinSightAPIClient

logger = get_logger(__name__)


class SessionState(str, Enum):
    IDLE = "idle"
    SEARCHING = "searching"
    SUMMARY_PENDING = "summary_pending"
    SUMMARY_LOADED = "summary_loaded"


BUSY_STATES = frozenset({SessionState.SEARCHING, SessionState.SUMMARY_PENDING})


class AnalysisSession:
    """Drives one user's search through the filings and summary phases."""

    def __init__(
        self,
        api: FinSightAPIClient,
        on_change: Callable[[AnalysisSession], None] | None = None,
    ) -> None:
        self._api = api
        self._on_change = on_change
        self.state = SessionState.IDLE
        self.ticker = ""
        self.error = ""
        self.filings: CompanyFilingsResponse | None = None
        self.summary = ""

    @property
    def busy(self) -> bool:
        """True while a search is in flight; the submit control is disabled."""
        return self.state in BUSY_STATES

    def _transition(self, state: SessionState) -> None:
        logger.debug("Session transition", ticker=self.ticker, src=self.state.value, dst=state.value)
        self.state = state
        if self._on_change is not None:
            self._on_change(self)

    async def submit(self, ticker: str) -> None:
        """Run a full search for ``ticker``.

        Raises:
            SessionBusyError: If a search is already in flight
            ValueError: If the ticker is blank
        """
        if self.busy:
            raise SessionBusyError("A search is already in progress")
        ticker = ticker.strip().upper()
        if not ticker:
            raise ValueError("Ticker cannot be empty")

        self.ticker = ticker
        self.error = ""
        self.summary = ""
        self.filings = None
        self._transition(SessionState.SEARCHING)

        # Phase 1: filings
        try:
            filings = await self._api.get_filings(ticker)
        except FilingsRequestError as e:
            self.error = e.message
            self._transition(SessionState.IDLE)
            return
        except Exception:
            logger.exception("Filings phase failed", ticker=ticker)
            self.error = FILINGS_ERROR_MESSAGE
            self._transition(SessionState.IDLE)
            return

        self.filings = filings
        self._transition(SessionState.SUMMARY_PENDING)

        # Phase 2: summary, only reached when phase 1 succeeded
        try:
            self.summary = await self._api.get_summary(filings.company_name, filings.ticker)
        except Exception as e:
            logger.exception("Summary phase failed", ticker=ticker)
            self.summary = f"{SUMMARY_FAILURE_PREFIX}{e}"
        self._transition(SessionState.SUMMARY_LOADED)
