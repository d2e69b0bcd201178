"""Response models shared by the post and comment use cases.

The HTTP API speaks camelCase JSON, so every response model serializes
through camelCase aliases while Python code keeps snake_case names.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from board.domain.model import Comment, Post


class ResponseModel(BaseModel):
    """Base for response models (camelCase on the wire)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PostItem(ResponseModel):
    """Post as returned by the API."""

    id: int
    handle: str
    title: str
    content: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, post: Post) -> "PostItem":
        return cls(
            id=post.id,
            handle=post.handle,
            title=post.title,
            content=post.content,
            created_at=post.created_at,
            updated_at=post.updated_at,
        )


class CommentItem(ResponseModel):
    """Comment as returned by the API (stored values, no masking)."""

    id: int
    post_id: int
    parent_id: int | None
    handle: str
    content: str
    created_at: datetime
    updated_at: datetime
    is_deleted: bool
    deleted_at: datetime | None

    @classmethod
    def from_domain(cls, comment: Comment) -> "CommentItem":
        return cls(
            id=comment.id,
            post_id=comment.post_id,
            parent_id=comment.parent_id,
            handle=comment.handle,
            content=comment.content,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
            is_deleted=comment.is_deleted,
            deleted_at=comment.deleted_at,
        )


class SuccessResponse(ResponseModel):
    """Acknowledgement for operations without a resource body."""

    success: bool = True
