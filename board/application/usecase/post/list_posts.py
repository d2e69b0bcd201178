"""List posts use case."""

import logfire
from pydantic import BaseModel, Field

from board.application.usecase.base import BaseUseCase
from board.application.usecase.common import PostItem, ResponseModel
from board.domain.service import PostService
from board.domain.value import PostId


class ListPostsRequest(BaseModel):
    """List posts request."""

    cursor: int | None = Field(default=None, ge=1)  # Id of the last post seen
    limit: int | None = Field(default=None, ge=1)  # Capped by the service


class ListPostsResponse(ResponseModel):
    """List posts response."""

    items: list[PostItem]
    next_cursor: int | None
    has_more: bool


class ListPostsUseCase(BaseUseCase[ListPostsRequest, ListPostsResponse]):
    """Use case for listing posts with cursor pagination."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow.

        Args:
            request: List posts request with cursor and page size

        Returns:
            One page of posts, newest first
        """
        with logfire.span(
            "list_posts.execute", cursor=request.cursor, limit=request.limit
        ):
            cursor = PostId(request.cursor) if request.cursor is not None else None
            page = await self.post_service.list_posts(cursor=cursor, limit=request.limit)

            return ListPostsResponse(
                items=[PostItem.from_domain(post) for post in page.items],
                next_cursor=page.next_cursor,
                has_more=page.has_more,
            )
