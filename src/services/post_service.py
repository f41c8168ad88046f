import json
from typing import Any

from core.exceptions import NotFoundError, ValidationError
from db.repositories.post_repository import PostRepository
import schemas.posts


def as_text(value: Any) -> str:
    """Render a present JSON value the way it is stored in a text column."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, dict | list):
        return json.dumps(value)
    return str(value)


async def list_posts(repo: PostRepository) -> list[schemas.posts.PostOut]:
    rows = await repo.list_all()
    return [schemas.posts.PostOut.model_validate(r) for r in rows]


async def create_post(
    repo: PostRepository,
    post_data: schemas.posts.PostCreate | None,
) -> schemas.posts.PostOut:
    # Reject before any SQL is issued
    if post_data is None or post_data.missing_fields():
        raise ValidationError(schemas.posts.MISSING_FIELDS_MESSAGE)

    row = await repo.create(title=as_text(post_data.title), content=as_text(post_data.content))
    return schemas.posts.PostOut.model_validate(row)


async def delete_post(repo: PostRepository, post_id: int | str) -> schemas.posts.PostDeleted:
    row = await repo.delete_by_id(post_id)
    if row is None:
        raise NotFoundError("Post not found")
    return schemas.posts.PostDeleted(deleted_post=schemas.posts.PostOut.model_validate(row))
