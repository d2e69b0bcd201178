"""Update comment use case."""

from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase
from board.application.usecase.common import CommentItem
from board.domain.service import CommentService
from board.domain.value import CommentId


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: int
    content: str


class UpdateCommentResponse(CommentItem):
    """Update comment response."""


class UpdateCommentUseCase(
    BaseUseCase[UpdateCommentRequest, UpdateCommentResponse]
):
    """Use case for editing a comment's content."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: UpdateCommentRequest) -> UpdateCommentResponse:
        """Execute update comment flow.

        Args:
            request: Update comment request

        Returns:
            Updated comment

        Raises:
            ValidationError: If the content is invalid
            NotFoundError: If the comment does not exist
            ContentDeletedException: If the comment was soft-deleted
        """
        comment = await self.comment_service.update_comment(
            CommentId(request.comment_id), content=request.content
        )
        return UpdateCommentResponse.from_domain(comment)
