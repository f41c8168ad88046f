from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

MISSING_FIELDS_MESSAGE = "The title and content fields are mandatory."


class PostCreate(BaseModel):
    """Create payload. Presence is checked by the service, not here."""

    title: Any | None = Field(None, description="Post title, required and non-empty")
    content: Any | None = Field(None, description="Post content, required and non-empty")

    model_config = ConfigDict(extra="ignore")

    def missing_fields(self) -> bool:
        return not self.title or not self.content


class PostOut(BaseModel):
    id: int = Field(..., description="Post ID")
    title: str = Field(..., description="Post title")
    content: str = Field(..., description="Post content")
    created_at: datetime = Field(..., description="Post creation timestamp")

    model_config = ConfigDict(from_attributes=True)


class PostDeleted(BaseModel):
    message: str = Field(default="Post deleted successfully")
    deleted_post: PostOut = Field(..., description="The row as it was before deletion")
