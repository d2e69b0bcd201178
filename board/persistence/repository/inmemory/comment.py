"""In-memory comment repository for testing."""

from datetime import datetime
from typing import Optional

from board.domain.model.comment import Comment
from board.domain.repository.comment import CommentRepository
from board.domain.value import CommentId, PostId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}
        self._next_id = 1

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_post(self, post_id: PostId) -> list[Comment]:
        """Find all comments for a post in creation order."""
        comments = [c for c in self._comments.values() if c.post_id == post_id]

        # Sort by created_at, id breaks ties
        comments.sort(key=lambda c: (c.created_at, c.id))

        return comments

    async def create(
        self,
        post_id: PostId,
        parent_id: Optional[CommentId],
        handle: str,
        content: str,
        now: datetime,
    ) -> Comment:
        """Insert a new comment with the next auto-increment id."""
        comment = Comment(
            id=CommentId(self._next_id),
            post_id=post_id,
            parent_id=parent_id,
            handle=handle,
            content=content,
            created_at=now,
            updated_at=now,
            is_deleted=False,
            deleted_at=None,
        )
        self._next_id += 1
        self._comments[comment.id] = comment
        return comment

    async def save(self, comment: Comment) -> Comment:
        """Store a fully built comment as is (test setup helper)."""
        self._comments[comment.id] = comment
        self._next_id = max(self._next_id, comment.id + 1)
        return comment

    async def update_content(
        self, comment_id: CommentId, content: str, now: datetime
    ) -> Optional[Comment]:
        """Update the content of a non-deleted comment."""
        comment = self._comments.get(comment_id)
        if comment is None or comment.is_deleted:
            return None

        updated = comment.model_copy(update={"content": content, "updated_at": now})
        self._comments[comment_id] = updated
        return updated

    async def mark_deleted(
        self, comment_id: CommentId, now: datetime
    ) -> Optional[Comment]:
        """Soft-delete a comment."""
        comment = self._comments.get(comment_id)
        if comment is None:
            return None

        deleted = comment.model_copy(update={"is_deleted": True, "deleted_at": now})
        self._comments[comment_id] = deleted
        return deleted

    async def delete_by_post(self, post_id: PostId) -> int:
        """Hard-delete every comment of a post."""
        doomed = [cid for cid, c in self._comments.items() if c.post_id == post_id]
        for comment_id in doomed:
            del self._comments[comment_id]
        return len(doomed)
