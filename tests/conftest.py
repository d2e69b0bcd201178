"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone

import logfire
import pytest

from board.config import BoardSettings
from board.domain.model import Comment, Post
from board.domain.value import CommentId, PostId

T0 = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


class FrozenClock:
    """Settable clock for services under test."""

    def __init__(self, now: datetime = T0) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now = self.now + delta


def make_post(post_id: int, created_at: datetime = T0, **overrides) -> Post:
    """Helper function to build a stored post."""
    fields = {
        "id": PostId(post_id),
        "handle": "alice",
        "title": f"Post {post_id}",
        "content": f"Content of post {post_id}",
        "created_at": created_at,
        "updated_at": created_at,
    }
    fields.update(overrides)
    return Post(**fields)


def make_comment(
    comment_id: int,
    post_id: int = 1,
    parent_id: int | None = None,
    created_at: datetime | None = None,
    **overrides,
) -> Comment:
    """Helper function to build a stored comment.

    Creation times default to one minute apart in id order.
    """
    created_at = created_at or T0 + timedelta(minutes=comment_id)
    fields = {
        "id": CommentId(comment_id),
        "post_id": PostId(post_id),
        "parent_id": CommentId(parent_id) if parent_id is not None else None,
        "handle": "bob",
        "content": f"Comment {comment_id}",
        "created_at": created_at,
        "updated_at": created_at,
    }
    fields.update(overrides)
    return Comment(**fields)


@pytest.fixture
def clock() -> FrozenClock:
    return FrozenClock()


@pytest.fixture
def board_settings() -> BoardSettings:
    return BoardSettings()


@pytest.fixture(scope="session", autouse=True)
def quiet_logfire():
    """Configure Logfire for tests: no cloud export, no console output."""
    logfire.configure(send_to_logfire=False, console=False)
