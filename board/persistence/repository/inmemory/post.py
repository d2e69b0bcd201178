"""In-memory post repository for testing."""

from datetime import datetime
from typing import Optional

from board.domain.model.post import Post
from board.domain.repository.post import PostRepository
from board.domain.value import PostId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}
        self._next_id = 1

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_page(self, cursor: Optional[PostId], limit: int) -> list[Post]:
        """Find one page of posts, newest id first."""
        posts = [
            p for p in self._posts.values() if cursor is None or p.id < cursor
        ]

        # Sort by id descending
        posts.sort(key=lambda p: p.id, reverse=True)

        return posts[:limit]

    async def create(
        self, handle: str, title: str, content: str, now: datetime
    ) -> Post:
        """Insert a new post with the next auto-increment id."""
        post = Post(
            id=PostId(self._next_id),
            handle=handle,
            title=title,
            content=content,
            created_at=now,
            updated_at=now,
        )
        self._next_id += 1
        self._posts[post.id] = post
        return post

    async def save(self, post: Post) -> Post:
        """Store a fully built post as is (test setup helper)."""
        self._posts[post.id] = post
        self._next_id = max(self._next_id, post.id + 1)
        return post

    async def update_content(
        self, post_id: PostId, title: str, content: str, now: datetime
    ) -> Optional[Post]:
        """Overwrite title and content of a post."""
        post = self._posts.get(post_id)
        if post is None:
            return None

        # Domain models are immutable
        updated = post.model_copy(
            update={"title": title, "content": content, "updated_at": now}
        )
        self._posts[post_id] = updated
        return updated

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post."""
        return self._posts.pop(post_id, None) is not None
