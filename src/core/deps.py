from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncEngine

from db.repositories.post_repository import PostRepository


def get_engine(request: Request) -> AsyncEngine:
    """Return the pool the application was started with."""
    return request.app.state.engine


def get_post_repository(request: Request) -> PostRepository:
    return PostRepository(get_engine(request))
