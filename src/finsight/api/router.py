"""Top-level API router: mounts all domain routers under /api."""

from fastapi import APIRouter

from finsight.api.routes import sec, summary

api_router = APIRouter()
api_router.include_router(sec.router, prefix="/sec", tags=["sec"])
api_router.include_router(summary.router, prefix="/summary", tags=["summary"])
