"""Get comments use case."""

from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase
from board.application.usecase.common import CommentItem, ResponseModel
from board.domain.service import CommentService
from board.domain.value import PostId


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    post_id: int


class GetCommentsResponse(ResponseModel):
    """Get comments response."""

    items: list[CommentItem]


class GetCommentsUseCase(BaseUseCase[GetCommentsRequest, GetCommentsResponse]):
    """Use case for getting the flat comment list of a post."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Comments come in creation order, soft-deleted ones included, so that
        clients can rebuild the reply tree themselves.

        Raises:
            NotFoundError: If the post does not exist
        """
        comments = await self.comment_service.get_comments_for_post(
            PostId(request.post_id)
        )
        return GetCommentsResponse(
            items=[CommentItem.from_domain(comment) for comment in comments]
        )
