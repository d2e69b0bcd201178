"""Unit tests for CreateCommentUseCase."""

import pytest

from board.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from board.domain.error import NotFoundError, ValidationError
from board.domain.repository import PostRepository
from tests.conftest import make_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_create_comment_and_reply(self, unit_env):
        # Arrange
        post_repo = await unit_env.get(PostRepository)
        use_case = await unit_env.get(CreateCommentUseCase)
        await post_repo.save(make_post(1))

        # Act
        parent = await use_case.execute(
            CreateCommentRequest(post_id=1, handle="bob", content="First")
        )
        reply = await use_case.execute(
            CreateCommentRequest(
                post_id=1, handle="carol", content="Reply", parent_id=parent.id
            )
        )

        # Assert
        assert parent.parent_id is None
        assert reply.parent_id == parent.id
        assert reply.model_dump(by_alias=True)["postId"] == 1
        assert reply.is_deleted is False

    @pytest.mark.asyncio
    async def test_reply_across_posts_is_rejected(self, unit_env):
        # Arrange
        post_repo = await unit_env.get(PostRepository)
        use_case = await unit_env.get(CreateCommentUseCase)
        await post_repo.save(make_post(1))
        await post_repo.save(make_post(2))
        other = await use_case.execute(
            CreateCommentRequest(post_id=2, handle="bob", content="Elsewhere")
        )

        # Act & Assert
        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(
                CreateCommentRequest(
                    post_id=1, handle="carol", content="Reply", parent_id=other.id
                )
            )

        assert exc_info.value.code == "PARENT_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_missing_post(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateCommentRequest(post_id=1, handle="bob", content="Text")
            )
