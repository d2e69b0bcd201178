"""Post repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from board.domain.model.post import Post
from board.domain.value import PostId


class PostRepository(ABC):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the infrastructure layer.
    Business rules (validation, edit window) are enforced by PostService.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_page(self, cursor: Optional[PostId], limit: int) -> List[Post]:
        """Find one page of posts, newest id first.

        Args:
            cursor: Only posts with an id below the cursor (None for the first page)
            limit: Maximum number of posts to return

        Returns:
            Posts ordered by id descending
        """
        pass

    @abstractmethod
    async def create(
        self, handle: str, title: str, content: str, now: datetime
    ) -> Post:
        """Insert a new post.

        The id is assigned by the store; created_at and updated_at are both
        set to ``now``.

        Returns:
            The created post
        """
        pass

    @abstractmethod
    async def update_content(
        self, post_id: PostId, title: str, content: str, now: datetime
    ) -> Optional[Post]:
        """Overwrite title and content and set updated_at to ``now``.

        Returns:
            Updated post, or None if the post doesn't exist
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> bool:
        """Delete a post (hard delete).

        Args:
            post_id: The post ID to delete

        Returns:
            True if a post was deleted, False if it didn't exist
        """
        pass
