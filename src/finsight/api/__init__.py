"""HTTP API."""

from finsight.api.router import api_router

__all__ = ["api_router"]
