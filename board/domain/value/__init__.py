"""Domain value objects for the discussion board."""

from board.domain.value.identifiers import CommentId, PostId
from board.domain.value.limits import (
    DEFAULT_PAGE_SIZE,
    DELETED_PLACEHOLDER,
    EDIT_WINDOW,
    HANDLE_MAX_LENGTH,
    HANDLE_MIN_LENGTH,
    HANDLE_PATTERN,
    MAX_COMMENT_LENGTH,
    MAX_ID,
    MAX_PAGE_SIZE,
    MAX_POST_CONTENT_LENGTH,
)

__all__ = [
    # Identifiers
    "PostId",
    "CommentId",
    # Limits
    "DEFAULT_PAGE_SIZE",
    "DELETED_PLACEHOLDER",
    "EDIT_WINDOW",
    "HANDLE_MAX_LENGTH",
    "HANDLE_MIN_LENGTH",
    "HANDLE_PATTERN",
    "MAX_COMMENT_LENGTH",
    "MAX_ID",
    "MAX_PAGE_SIZE",
    "MAX_POST_CONTENT_LENGTH",
]
