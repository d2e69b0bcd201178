"""Get post use case."""

from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase
from board.application.usecase.common import PostItem
from board.domain.service import PostService
from board.domain.value import PostId


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: int


class GetPostResponse(PostItem):
    """Get post response."""


class GetPostUseCase(BaseUseCase[GetPostRequest, GetPostResponse]):
    """Use case for fetching a single post."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: GetPostRequest) -> GetPostResponse:
        """Execute get post flow.

        Raises:
            NotFoundError: If the post does not exist
        """
        post = await self.post_service.get_post_by_id(PostId(request.post_id))
        return GetPostResponse.from_domain(post)
