"""Post domain service."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

import logfire

from board.config import BoardSettings
from board.domain.error import EditWindowExpiredError, NotFoundError
from board.domain.model.post import Post
from board.domain.repository import CommentRepository, PostRepository
from board.domain.validation import validate_content, validate_handle, validate_title
from board.domain.value import PostId

from .base import Clock, Service, utc_now


@dataclass(frozen=True)
class PostPage:
    """One page of the post listing.

    ``has_more`` is true when the page is full. When exactly ``limit`` posts
    remained, the next page will be empty.
    """

    items: list[Post]
    next_cursor: Optional[PostId]
    has_more: bool


class PostService(Service):
    """Domain service for post operations.

    Enforces validation and the edit window on top of PostRepository.
    """

    def __init__(
        self,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
        settings: BoardSettings,
        clock: Optional[Clock] = None,
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            comment_repository: Comment repository (for cascading deletes)
            settings: Board business rule settings
            clock: Source of the current time (UTC now by default)
        """
        self.post_repository = post_repository
        self.comment_repository = comment_repository
        self.settings = settings
        self.clock: Clock = clock or utc_now

    async def create_post(self, handle: str, title: str, content: str) -> Post:
        """Create a post.

        Args:
            handle: Author handle (self-declared)
            title: Post title
            content: Markdown content

        Returns:
            Created post with its assigned id and timestamps

        Raises:
            ValidationError: If handle, title or content is invalid
        """
        with logfire.span("post_service.create_post", handle=handle):
            handle = validate_handle(handle)
            title = validate_title(title)
            content = validate_content(content, self.settings.max_post_length)

            post = await self.post_repository.create(
                handle=handle, title=title, content=content, now=self.clock()
            )
            logfire.info("Post created", post_id=post.id, handle=handle)
            return post

    async def get_post_by_id(self, post_id: PostId) -> Post:
        """Get a post by ID.

        Raises:
            NotFoundError: If the post does not exist
        """
        with logfire.span("post_service.get_post_by_id", post_id=post_id):
            post = await self.post_repository.find_by_id(post_id)
            if post is None:
                logfire.warn("Post not found", post_id=post_id)
                raise NotFoundError("post", post_id)
            return post

    async def list_posts(
        self, cursor: Optional[PostId] = None, limit: Optional[int] = None
    ) -> PostPage:
        """List posts with cursor pagination, newest first.

        Args:
            cursor: Id of the last post of the previous page (None for the first page)
            limit: Requested page size; defaults to the configured page size and
                is capped at the maximum page size

        Returns:
            Page of posts with the cursor for the next page
        """
        effective_limit = min(
            limit if limit is not None else self.settings.default_page_size,
            self.settings.max_page_size,
        )
        with logfire.span(
            "post_service.list_posts", cursor=cursor, limit=effective_limit
        ):
            posts = await self.post_repository.find_page(cursor, effective_limit)

            next_cursor = posts[-1].id if posts else None
            has_more = len(posts) == effective_limit

            logfire.info(
                "Posts listed",
                count=len(posts),
                next_cursor=next_cursor,
                has_more=has_more,
            )
            return PostPage(items=posts, next_cursor=next_cursor, has_more=has_more)

    def is_editable(self, post: Post, now: Optional[datetime] = None) -> bool:
        """Whether the post is still inside its edit window."""
        now = now or self.clock()
        return now - post.created_at <= self.settings.edit_window

    async def update_post(self, post_id: PostId, title: str, content: str) -> Post:
        """Overwrite a post's title and content.

        Args:
            post_id: Post ID
            title: New title
            content: New content

        Returns:
            Updated post

        Raises:
            ValidationError: If title or content is invalid
            NotFoundError: If the post does not exist
            EditWindowExpiredError: If the edit window has closed
        """
        with logfire.span("post_service.update_post", post_id=post_id):
            title = validate_title(title)
            content = validate_content(content, self.settings.max_post_length)

            post = await self.get_post_by_id(post_id)

            now = self.clock()
            if not self.is_editable(post, now):
                logfire.warn(
                    "Edit window expired",
                    post_id=post_id,
                    created_at=post.created_at.isoformat(),
                )
                raise EditWindowExpiredError(post_id)

            updated = await self.post_repository.update_content(
                post_id, title=title, content=content, now=now
            )
            if updated is None:
                # Deleted between the lookup and the update
                raise NotFoundError("post", post_id)

            logfire.info("Post updated", post_id=post_id)
            return updated

    async def delete_post(self, post_id: PostId) -> None:
        """Hard-delete a post together with its comments.

        Raises:
            NotFoundError: If the post does not exist
        """
        with logfire.span("post_service.delete_post", post_id=post_id):
            post = await self.post_repository.find_by_id(post_id)
            if post is None:
                logfire.warn("Post not found for delete", post_id=post_id)
                raise NotFoundError("post", post_id)

            removed_comments = await self.comment_repository.delete_by_post(post_id)
            await self.post_repository.delete(post_id)
            logfire.info(
                "Post deleted", post_id=post_id, removed_comments=removed_comments
            )
