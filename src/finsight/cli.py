"""CLI entry point for FinSight."""

import argparse
import asyncio
import sys

import uvicorn

from finsight.config import get_settings
from finsight.core.logging import setup_logging
from finsight.ui.api_client import FinSightAPIClient
from finsight.ui.session import AnalysisSession
from finsight.ui.terminal import render


async def analyze(ticker: str, api_url: str) -> int:
    """Run one search against a FinSight server and print it as it progresses."""
    async with FinSightAPIClient(api_url) as api:
        session = AnalysisSession(api, on_change=render)
        await session.submit(ticker)
    return 1 if session.error else 0


def main() -> None:
    settings = get_settings()

    parser = argparse.ArgumentParser(description="FinSight")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Run the HTTP server")
    serve.add_argument("--reload", action="store_true", help="Enable auto-reload")
    serve.add_argument("--host", default=settings.host, help="Bind host")
    serve.add_argument("--port", type=int, default=settings.port, help="Bind port")

    analyze_cmd = subparsers.add_parser("analyze", help="Show filings and AI summary for a ticker")
    analyze_cmd.add_argument("ticker", help="Stock ticker symbol (e.g., AAPL, MSFT)")
    analyze_cmd.add_argument("--api-url", default=settings.api_url, help="FinSight server URL")

    args = parser.parse_args()

    if args.command == "serve":
        uvicorn.run(
            "finsight.main:app",
            host=args.host,
            port=args.port,
            reload=args.reload,
        )
        return

    if not args.ticker.strip():
        parser.error("ticker cannot be empty")

    setup_logging(settings)
    sys.exit(asyncio.run(analyze(args.ticker, args.api_url)))


if __name__ == "__main__":
    main()
