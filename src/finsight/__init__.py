"""FinSight: SEC filings and AI-generated company summaries."""

__version__ = "0.1.0"
