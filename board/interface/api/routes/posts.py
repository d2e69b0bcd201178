"""Post routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, status
from pydantic import BaseModel, StrictStr

from board.application.usecase.common import SuccessResponse
from board.application.usecase.post import (
    CreatePostRequest,
    CreatePostResponse,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostUseCase,
    GetPostRequest,
    GetPostResponse,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
    UpdatePostRequest,
    UpdatePostResponse,
    UpdatePostUseCase,
)
from board.domain.error import DomainError, NotFoundError, ValidationError
from board.domain.value import MAX_ID
from board.interface.api.parsing import (
    ParseFailure,
    parse_body,
    parse_id,
    parse_positive_int,
)
from board.interface.error import from_domain_error, server_error

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class CreatePostBody(BaseModel):
    """Body of a create post request."""

    handle: StrictStr
    title: StrictStr
    content: StrictStr


class UpdatePostBody(BaseModel):
    """Body of an update post request."""

    title: StrictStr
    content: StrictStr


@router.get("", response_model=ListPostsResponse)
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    cursor: str | None = None,
    limit: str | None = None,
) -> ListPostsResponse:
    """List posts, newest first.

    Args:
        list_posts_use_case: List posts use case from DI
        cursor: Id of the last post of the previous page
        limit: Page size (default 20, capped at 50)

    Returns:
        One page of posts with the cursor for the next page
    """
    request = ListPostsRequest(
        cursor=parse_positive_int(cursor, "INVALID_CURSOR", "cursor", MAX_ID),
        limit=parse_positive_int(limit, "INVALID_LIMIT", "limit"),
    )
    try:
        return await list_posts_use_case.execute(request)
    except Exception as e:
        logfire.error("Unexpected error listing posts", error=str(e))
        raise server_error()


@router.post("", response_model=CreatePostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: Request,
    create_post_use_case: FromDishka[CreatePostUseCase],
) -> CreatePostResponse:
    """Create a new post.

    Every field failure is reported as INVALID_INPUT.

    Returns:
        Created post
    """
    parsed = await parse_body(
        request,
        CreatePostBody,
        field_codes={},
        default_code="INVALID_INPUT",
    )
    if isinstance(parsed, ParseFailure):
        raise parsed.to_api_error()
    body = parsed.value

    try:
        return await create_post_use_case.execute(
            CreatePostRequest(handle=body.handle, title=body.title, content=body.content)
        )
    except ValidationError as e:
        logfire.warn("Post creation validation error", error=str(e), code=e.code)
        raise from_domain_error(e, code="INVALID_INPUT")
    except Exception as e:
        logfire.error("Unexpected error creating post", error=str(e))
        raise server_error()


@router.get("/{post_id}", response_model=GetPostResponse)
async def get_post(
    post_id: str,
    get_post_use_case: FromDishka[GetPostUseCase],
) -> GetPostResponse:
    """Get a single post.

    Args:
        post_id: Post id
        get_post_use_case: Get post use case from DI

    Returns:
        The post
    """
    request = GetPostRequest(post_id=parse_id(post_id))
    try:
        return await get_post_use_case.execute(request)
    except DomainError as e:
        raise from_domain_error(e)
    except Exception as e:
        logfire.error("Unexpected error fetching post", error=str(e), post_id=post_id)
        raise server_error()


@router.patch("/{post_id}", response_model=UpdatePostResponse)
async def update_post(
    post_id: str,
    request: Request,
    update_post_use_case: FromDishka[UpdatePostUseCase],
) -> UpdatePostResponse:
    """Edit a post's title and content.

    Allowed for anyone while the edit window is open.

    Args:
        post_id: Post id
        request: Raw request (JSON body with title and content)
        update_post_use_case: Update post use case from DI

    Returns:
        The updated post
    """
    parsed_id = parse_id(post_id)
    parsed = await parse_body(
        request,
        UpdatePostBody,
        field_codes={"title": "INVALID_TITLE", "content": "INVALID_CONTENT"},
    )
    if isinstance(parsed, ParseFailure):
        raise parsed.to_api_error()
    body = parsed.value

    try:
        return await update_post_use_case.execute(
            UpdatePostRequest(post_id=parsed_id, title=body.title, content=body.content)
        )
    except DomainError as e:
        logfire.warn("Post update rejected", error=str(e), code=e.code)
        raise from_domain_error(e)
    except Exception as e:
        logfire.error("Unexpected error updating post", error=str(e), post_id=post_id)
        raise server_error()


@router.delete("/{post_id}", response_model=SuccessResponse)
async def delete_post(
    post_id: str,
    delete_post_use_case: FromDishka[DeletePostUseCase],
) -> SuccessResponse:
    """Delete a post together with all of its comments."""
    request = DeletePostRequest(post_id=parse_id(post_id))
    try:
        return await delete_post_use_case.execute(request)
    except NotFoundError as e:
        raise from_domain_error(e, code="NOT_FOUND")
    except Exception as e:
        logfire.error("Unexpected error deleting post", error=str(e), post_id=post_id)
        raise server_error()
