"""Repository interfaces for the discussion board domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from board.domain.repository.comment import CommentRepository
from board.domain.repository.post import PostRepository

__all__ = [
    "PostRepository",
    "CommentRepository",
]
