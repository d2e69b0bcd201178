"""Delete post use case."""

from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase
from board.application.usecase.common import SuccessResponse
from board.domain.service import PostService
from board.domain.value import PostId


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: int


class DeletePostUseCase(BaseUseCase[DeletePostRequest, SuccessResponse]):
    """Use case for hard-deleting a post and its comments."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> SuccessResponse:
        """Execute delete post flow.

        Raises:
            NotFoundError: If the post does not exist
        """
        await self.post_service.delete_post(PostId(request.post_id))
        return SuccessResponse()
