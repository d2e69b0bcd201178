"""Comment entity.

Comments are threaded replies on a post. Threading is expressed only through
``parent_id``; the nested shape is rebuilt on read by the comment tree builder.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from board.domain.model.common import DomainModel
from board.domain.value import CommentId, PostId


class Comment(DomainModel):
    """Comment entity.

    Represents a comment on a post or a reply to another comment.

    Lifecycle:
    - parent_id: Direct parent comment (None for top-level). A weak reference,
      the parent may be gone while the reply remains.
    - is_deleted/deleted_at: Soft deletion. Terminal, a deleted comment
      can no longer be edited or restored. Handle and content stay in storage.
    """

    id: CommentId
    post_id: PostId
    parent_id: Optional[CommentId] = None
    handle: str = Field(min_length=1)
    content: str = Field(min_length=1)
    created_at: datetime
    updated_at: datetime
    is_deleted: bool = False
    deleted_at: Optional[datetime] = None

    @property
    def is_edited(self) -> bool:
        """Whether the content changed after creation."""
        return self.updated_at != self.created_at
