from __future__ import annotations

from fastapi import APIRouter

from api.post_controller import posts_router

# One handler set, mounted under /api and at the root for older clients
api_router = APIRouter(prefix="/api")
api_router.include_router(posts_router)

legacy_router = APIRouter()
legacy_router.include_router(posts_router)

__all__ = ["api_router", "legacy_router"]
