"""PostgreSQL implementation of Post repository."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import delete, desc, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from board.domain.model import Post
from board.domain.repository import PostRepository
from board.domain.value import PostId
from board.persistence.mappers import row_to_post
from board.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        stmt = select(posts_table).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_post(row._asdict()) if row else None

    async def find_page(self, cursor: Optional[PostId], limit: int) -> List[Post]:
        """Find one page of posts, newest id first."""
        stmt = select(posts_table)

        if cursor is not None:
            stmt = stmt.where(posts_table.c.id < cursor)

        stmt = stmt.order_by(desc(posts_table.c.id)).limit(limit)

        result = await self.session.execute(stmt)
        return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def create(
        self, handle: str, title: str, content: str, now: datetime
    ) -> Post:
        """Insert a new post."""
        stmt = (
            insert(posts_table)
            .values(
                handle=handle,
                title=title,
                content=content,
                created_at=now,
                updated_at=now,
            )
            .returning(posts_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_post(row._asdict())

    async def update_content(
        self, post_id: PostId, title: str, content: str, now: datetime
    ) -> Optional[Post]:
        """Overwrite title and content of a post."""
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .values(title=title, content=content, updated_at=now)
            .returning(posts_table)
        )

        result = await self.session.execute(stmt)
        row = result.fetchone()

        if row is None:
            return None

        await self.session.flush()
        return row_to_post(row._asdict())

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post (hard delete, comments cascade in the database)."""
        stmt = delete(posts_table).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0
