"""Custom exceptions for FinSight."""


class FinSightError(Exception):
    """Base exception for all FinSight errors."""

    def __init__(self, message: str, *args: object) -> None:
        self.message = message
        super().__init__(message, *args)


# SEC EDGAR errors
class SECEdgarError(FinSightError):
    """Base error for the SEC EDGAR provider."""


class TickerNotFoundError(SECEdgarError):
    """Ticker is not listed in the SEC company directory."""


class UpstreamError(SECEdgarError):
    """SEC EDGAR was unreachable or returned malformed data."""


# Summary errors

# Prepended to the reason when a summary could not be produced
SUMMARY_FAILURE_PREFIX = "Failed to generate summary: "


class SummaryError(FinSightError):
    """Base error for AI summary generation."""


class ConfigurationError(SummaryError):
    """No credential is configured for the LLM provider."""


class GenerationError(SummaryError):
    """The LLM call failed."""


# Presentation errors
class PresentationError(FinSightError):
    """Base error for the presentation layer."""


class FilingsRequestError(PresentationError):
    """The filings endpoint returned an error or was unreachable."""


class SessionBusyError(PresentationError):
    """A search was submitted while another one is still in flight."""
