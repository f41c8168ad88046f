from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from core.config import settings
from schemas.responses import ServiceInfo

router = APIRouter(tags=["System"])

ENDPOINTS = [
    "GET /health",
    "GET /posts or /api/posts",
    "POST /posts or /api/posts",
    "DELETE /posts/:id or /api/posts/:id",
]


@router.get("/health", tags=["Health"], response_class=PlainTextResponse)
async def health() -> str:
    # Liveness probe, must not touch the database
    return "OK"


@router.get("/", tags=["Root"], response_model=ServiceInfo)
async def root() -> ServiceInfo:
    return ServiceInfo(message=settings.api_title, endpoints=ENDPOINTS)
