"""Create comment use case."""

from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase
from board.application.usecase.common import CommentItem
from board.domain.service import CommentService
from board.domain.value import CommentId, PostId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: int
    handle: str
    content: str
    parent_id: int | None = None  # Parent comment ID for replies


class CreateCommentResponse(CommentItem):
    """Create comment response."""


class CreateCommentUseCase(
    BaseUseCase[CreateCommentRequest, CreateCommentResponse]
):
    """Use case for creating a comment on a post or replying to another comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Verify the post exists
        2. Validate handle and content
        3. Verify the parent comment belongs to the same post (replies only)
        4. Store the comment

        Args:
            request: Create comment request

        Returns:
            Created comment

        Raises:
            NotFoundError: If the post does not exist
            ValidationError: If a field is invalid or the parent is not in the post
        """
        parent_id = (
            CommentId(request.parent_id) if request.parent_id is not None else None
        )
        comment = await self.comment_service.create_comment(
            post_id=PostId(request.post_id),
            handle=request.handle,
            content=request.content,
            parent_id=parent_id,
        )
        return CreateCommentResponse.from_domain(comment)
