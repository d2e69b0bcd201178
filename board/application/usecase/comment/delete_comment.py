"""Delete comment use case."""

from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase
from board.application.usecase.common import SuccessResponse
from board.domain.service import CommentService
from board.domain.value import CommentId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: int


class DeleteCommentUseCase(BaseUseCase[DeleteCommentRequest, SuccessResponse]):
    """Use case for soft-deleting a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> SuccessResponse:
        """Execute delete comment flow.

        Deleting an already deleted comment succeeds without changes.

        Raises:
            NotFoundError: If the comment does not exist
        """
        await self.comment_service.soft_delete_comment(CommentId(request.comment_id))
        return SuccessResponse()
