"""PostgreSQL implementation of Comment repository."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from board.domain.model import Comment
from board.domain.repository import CommentRepository
from board.domain.value import CommentId, PostId
from board.persistence.mappers import row_to_comment
from board.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments for a post in creation order."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.post_id == post_id)
            .order_by(comments_table.c.created_at, comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def create(
        self,
        post_id: PostId,
        parent_id: Optional[CommentId],
        handle: str,
        content: str,
        now: datetime,
    ) -> Comment:
        """Insert a new comment."""
        stmt = (
            insert(comments_table)
            .values(
                post_id=post_id,
                parent_id=parent_id,
                handle=handle,
                content=content,
                created_at=now,
                updated_at=now,
                is_deleted=False,
                deleted_at=None,
            )
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_comment(row._asdict())

    async def update_content(
        self, comment_id: CommentId, content: str, now: datetime
    ) -> Optional[Comment]:
        """Update the content of a non-deleted comment."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .where(comments_table.c.is_deleted.is_(False))
            .values(content=content, updated_at=now)
            .returning(comments_table)
        )

        result = await self.session.execute(stmt)
        row = result.fetchone()

        if row is None:
            # Comment not found or deleted
            return None

        await self.session.flush()
        return row_to_comment(row._asdict())

    async def mark_deleted(
        self, comment_id: CommentId, now: datetime
    ) -> Optional[Comment]:
        """Soft-delete a comment, keeping handle and content."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(is_deleted=True, deleted_at=now)
            .returning(comments_table)
        )

        result = await self.session.execute(stmt)
        row = result.fetchone()

        if row is None:
            return None

        await self.session.flush()
        return row_to_comment(row._asdict())

    async def delete_by_post(self, post_id: PostId) -> int:
        """Hard-delete every comment of a post."""
        stmt = delete(comments_table).where(comments_table.c.post_id == post_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
