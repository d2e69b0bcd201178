"""Update post use case."""

from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase
from board.application.usecase.common import PostItem
from board.domain.service import PostService
from board.domain.value import PostId


class UpdatePostRequest(BaseModel):
    """Update post request."""

    post_id: int
    title: str
    content: str


class UpdatePostResponse(PostItem):
    """Update post response."""


class UpdatePostUseCase(BaseUseCase[UpdatePostRequest, UpdatePostResponse]):
    """Use case for editing a post's title and content."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize update post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: UpdatePostRequest) -> UpdatePostResponse:
        """Execute update post flow.

        Posts can be edited by anyone until the edit window closes.

        Args:
            request: Update post request

        Returns:
            The updated post

        Raises:
            ValidationError: If title or content is invalid
            NotFoundError: If the post does not exist
            EditWindowExpiredError: If the edit window has closed
        """
        post = await self.post_service.update_post(
            PostId(request.post_id),
            title=request.title,
            content=request.content,
        )
        return UpdatePostResponse.from_domain(post)
