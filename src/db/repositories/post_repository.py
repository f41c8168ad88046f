import logging

from sqlalchemy import Row, delete, insert, select
from sqlalchemy.ext.asyncio import AsyncEngine

from db.models.post import MAX_POST_ID, Post
from db.repositories.decorators import handle_db_errors

logger = logging.getLogger(__name__)

posts = Post.__table__


def parse_post_id(raw: int | str) -> int | None:
    """Return the id as an int, or None when it cannot match any row."""
    try:
        post_id = int(raw)
    except (TypeError, ValueError):
        logger.debug("post_id %r is not an integer", raw)
        return None
    if post_id <= 0 or post_id > MAX_POST_ID:
        logger.debug("post_id %s is out of range", post_id)
        return None
    return post_id


class PostRepository:
    """SQL access for the posts table.

    Each method runs exactly one statement in its own transaction on a
    connection borrowed from the shared engine.
    """

    def __init__(self, engine: AsyncEngine) -> None:
        self._engine = engine

    @handle_db_errors("post")
    async def create(self, title: str, content: str) -> Row:
        stmt = insert(posts).values(title=title, content=content).returning(*posts.c)
        async with self._engine.begin() as conn:
            res = await conn.execute(stmt)
            row = res.one()
        logger.info("Created new post with id %s", row.id)
        return row

    @handle_db_errors("post")
    async def list_all(self) -> list[Row]:
        stmt = select(posts).order_by(posts.c.created_at.desc(), posts.c.id.desc())
        async with self._engine.connect() as conn:
            res = await conn.execute(stmt)
            return list(res.all())

    @handle_db_errors("post")
    async def delete_by_id(self, post_id: int | str) -> Row | None:
        parsed = parse_post_id(post_id)
        if parsed is None:
            logger.debug("Skip delete: post %s not found", post_id)
            return None

        stmt = delete(posts).where(posts.c.id == parsed).returning(*posts.c)
        async with self._engine.begin() as conn:
            res = await conn.execute(stmt)
            row = res.first()
        if row is None:
            logger.debug("Skip delete: post %s not found", parsed)
            return None
        logger.info("Deleted post with id %s", parsed)
        return row
