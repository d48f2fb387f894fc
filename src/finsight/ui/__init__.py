"""Presentation layer: session state machine, browser page, terminal output."""

from finsight.ui.api_client import FinSightAPIClient
from finsight.ui.session import AnalysisSession, SessionState

__all__ = [
    "AnalysisSession",
    "FinSightAPIClient",
    "SessionState",
]
