"""Comment repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from board.domain.model.comment import Comment
from board.domain.value import CommentId, PostId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID, deleted or not.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments for a post in creation order.

        Soft-deleted comments are included; masking happens on display.

        Args:
            post_id: The post ID

        Returns:
            Comments ordered by created_at ascending, id as tiebreaker
        """
        pass

    @abstractmethod
    async def create(
        self,
        post_id: PostId,
        parent_id: Optional[CommentId],
        handle: str,
        content: str,
        now: datetime,
    ) -> Comment:
        """Insert a new, non-deleted comment.

        Returns:
            The created comment with its store-assigned id
        """
        pass

    @abstractmethod
    async def update_content(
        self, comment_id: CommentId, content: str, now: datetime
    ) -> Optional[Comment]:
        """Overwrite the content of a non-deleted comment.

        Returns:
            Updated comment, or None if the comment doesn't exist or is deleted
        """
        pass

    @abstractmethod
    async def mark_deleted(
        self, comment_id: CommentId, now: datetime
    ) -> Optional[Comment]:
        """Soft-delete a comment, keeping its row.

        Returns:
            The deleted comment, or None if the comment doesn't exist
        """
        pass

    @abstractmethod
    async def delete_by_post(self, post_id: PostId) -> int:
        """Hard-delete every comment of a post.

        Used when the owning post is deleted.

        Returns:
            Number of deleted comments
        """
        pass
