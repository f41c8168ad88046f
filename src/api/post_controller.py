from typing import Annotated

from fastapi import APIRouter, Body, Depends, status

from core.deps import get_post_repository
from db.repositories.post_repository import PostRepository
import schemas.posts as posts
from schemas.responses import ErrorResponse
from services import post_service

posts_router = APIRouter(prefix="/posts", tags=["Posts"])

_persistence_failure = {status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse}}


@posts_router.get(
    "",
    response_model=list[posts.PostOut],
    summary="List posts",
    description="Get every post, newest first.",
    responses=_persistence_failure,
)
async def get_all_posts(
    repo: Annotated[PostRepository, Depends(get_post_repository)],
) -> list[posts.PostOut]:
    return await post_service.list_posts(repo)


@posts_router.post(
    "",
    response_model=posts.PostOut,
    status_code=status.HTTP_201_CREATED,
    summary="Create post",
    description="Create a new post from a title and content, both required.",
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}, **_persistence_failure},
)
async def create_post(
    repo: Annotated[PostRepository, Depends(get_post_repository)],
    post_data: Annotated[posts.PostCreate | None, Body()] = None,
) -> posts.PostOut:
    return await post_service.create_post(repo, post_data)


@posts_router.delete(
    "/{post_id}",
    response_model=posts.PostDeleted,
    summary="Delete post",
    description="Delete a post by ID and return the deleted row.",
    responses={status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}, **_persistence_failure},
)
async def delete_post(
    post_id: str,
    repo: Annotated[PostRepository, Depends(get_post_repository)],
) -> posts.PostDeleted:
    return await post_service.delete_post(repo, post_id)
