"""Domain model entities for the discussion board."""

from board.domain.model.comment import Comment
from board.domain.model.post import Post

__all__ = [
    "Post",
    "Comment",
]
