"""Comment domain service."""

from typing import Optional

import logfire

from board.config import BoardSettings
from board.domain.error import ContentDeletedException, NotFoundError, ValidationError
from board.domain.model.comment import Comment
from board.domain.repository import CommentRepository, PostRepository
from board.domain.validation import validate_content, validate_handle
from board.domain.value import CommentId, PostId

from .base import Clock, Service, utc_now
from .comment_tree import CommentNode, build_comment_tree


class CommentService(Service):
    """Domain service for comment operations.

    Enforces parent/post consistency and the soft-delete lifecycle:
    a deleted comment is immutable and stays deleted.
    """

    def __init__(
        self,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
        settings: BoardSettings,
        clock: Optional[Clock] = None,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            post_repository: Post repository (for existence checks)
            settings: Board business rule settings
            clock: Source of the current time (UTC now by default)
        """
        self.comment_repository = comment_repository
        self.post_repository = post_repository
        self.settings = settings
        self.clock: Clock = clock or utc_now

    async def _ensure_post_exists(self, post_id: PostId) -> None:
        post = await self.post_repository.find_by_id(post_id)
        if post is None:
            logfire.warn("Post not found", post_id=post_id)
            raise NotFoundError("post", post_id)

    async def get_comments_for_post(self, post_id: PostId) -> list[Comment]:
        """Get all comments for a post in creation order.

        Soft-deleted comments are included so replies keep their place.

        Args:
            post_id: Post ID

        Returns:
            Comments ordered by created_at ascending

        Raises:
            NotFoundError: If the post does not exist
        """
        with logfire.span("comment_service.get_comments_for_post", post_id=post_id):
            await self._ensure_post_exists(post_id)
            comments = await self.comment_repository.find_by_post(post_id)
            logfire.info(
                "Comments retrieved for post", post_id=post_id, count=len(comments)
            )
            return comments

    async def get_comment_tree(self, post_id: PostId) -> list[CommentNode]:
        """Get the reply forest of a post.

        Raises:
            NotFoundError: If the post does not exist
        """
        comments = await self.get_comments_for_post(post_id)
        return build_comment_tree(comments)

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID.

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span("comment_service.get_comment_by_id", comment_id=comment_id):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment is None:
                logfire.warn("Comment not found", comment_id=comment_id)
                raise NotFoundError("comment", comment_id)
            return comment

    async def create_comment(
        self,
        post_id: PostId,
        handle: str,
        content: str,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment on a post or reply to another comment.

        Args:
            post_id: Post ID
            handle: Author handle (self-declared)
            content: Comment text
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment

        Raises:
            NotFoundError: If the post does not exist
            ValidationError: If handle or content is invalid, or the parent
                comment doesn't exist in this post (PARENT_NOT_FOUND)
        """
        with logfire.span(
            "comment_service.create_comment",
            post_id=post_id,
            handle=handle,
            parent_id=parent_id,
        ):
            await self._ensure_post_exists(post_id)

            handle = validate_handle(handle)
            content = validate_content(content, self.settings.max_comment_length)

            # If replying, the parent must belong to the same post
            if parent_id is not None:
                parent = await self.comment_repository.find_by_id(parent_id)
                if parent is None or parent.post_id != post_id:
                    logfire.warn(
                        "Parent comment not found in post",
                        parent_id=parent_id,
                        parent_post_id=parent.post_id if parent else None,
                        target_post_id=post_id,
                    )
                    raise ValidationError(
                        "PARENT_NOT_FOUND", "Parent comment not found in this post."
                    )

            comment = await self.comment_repository.create(
                post_id=post_id,
                parent_id=parent_id,
                handle=handle,
                content=content,
                now=self.clock(),
            )
            logfire.info(
                "Comment created",
                comment_id=comment.id,
                post_id=post_id,
                handle=handle,
                is_reply=parent_id is not None,
            )
            return comment

    async def update_comment(self, comment_id: CommentId, content: str) -> Comment:
        """Overwrite the content of a comment.

        Args:
            comment_id: Comment ID
            content: New content

        Returns:
            Updated comment

        Raises:
            ValidationError: If the content is invalid
            NotFoundError: If the comment does not exist
            ContentDeletedException: If the comment was soft-deleted
        """
        with logfire.span(
            "comment_service.update_comment",
            comment_id=comment_id,
            content_length=len(content),
        ):
            content = validate_content(content, self.settings.max_comment_length)

            comment = await self.get_comment_by_id(comment_id)
            if comment.is_deleted:
                logfire.warn("Attempt to edit deleted comment", comment_id=comment_id)
                raise ContentDeletedException("comment", comment_id)

            updated = await self.comment_repository.update_content(
                comment_id, content=content, now=self.clock()
            )
            if updated is None:
                # Deleted concurrently between the lookup and the update
                raise ContentDeletedException("comment", comment_id)

            logfire.info(
                "Comment content updated",
                comment_id=comment_id,
                post_id=updated.post_id,
                content_length=len(updated.content),
            )
            return updated

    async def soft_delete_comment(self, comment_id: CommentId) -> Comment:
        """Soft-delete a comment.

        Idempotent: deleting an already deleted comment returns it unchanged.

        Returns:
            The deleted comment

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span("comment_service.soft_delete_comment", comment_id=comment_id):
            comment = await self.get_comment_by_id(comment_id)
            if comment.is_deleted:
                logfire.info("Comment already deleted", comment_id=comment_id)
                return comment

            deleted = await self.comment_repository.mark_deleted(
                comment_id, now=self.clock()
            )
            if deleted is None:
                raise NotFoundError("comment", comment_id)

            logfire.info(
                "Comment soft-deleted", comment_id=comment_id, post_id=deleted.post_id
            )
            return deleted
