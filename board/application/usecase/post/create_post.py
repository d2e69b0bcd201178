"""Create post use case."""

from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase
from board.application.usecase.common import PostItem
from board.domain.service import PostService


class CreatePostRequest(BaseModel):
    """Create post request."""

    handle: str
    title: str
    content: str  # Markdown


class CreatePostResponse(PostItem):
    """Create post response."""


class CreatePostUseCase(BaseUseCase[CreatePostRequest, CreatePostResponse]):
    """Use case for creating a post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: CreatePostRequest) -> CreatePostResponse:
        """Execute create post flow.

        Args:
            request: Create post request

        Returns:
            The stored post (trimmed values, assigned id and timestamps)

        Raises:
            ValidationError: If handle, title or content is invalid
        """
        post = await self.post_service.create_post(
            handle=request.handle,
            title=request.title,
            content=request.content,
        )
        return CreatePostResponse.from_domain(post)
