"""Comment routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, status
from pydantic import BaseModel, Field, StrictInt, StrictStr

from board.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetCommentTreeRequest,
    GetCommentTreeResponse,
    GetCommentTreeUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
    UpdateCommentRequest,
    UpdateCommentResponse,
    UpdateCommentUseCase,
)
from board.application.usecase.common import SuccessResponse
from board.application.usecase.post import GetPostRequest, GetPostUseCase
from board.domain.error import DomainError
from board.domain.value import MAX_ID
from board.interface.api.parsing import ParseFailure, parse_body, parse_id
from board.interface.error import from_domain_error, server_error

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


class CreateCommentBody(BaseModel):
    """Body of a create comment request."""

    handle: StrictStr
    content: StrictStr
    parent_id: StrictInt | None = Field(
        default=None, alias="parentId", gt=0, le=MAX_ID
    )


class UpdateCommentBody(BaseModel):
    """Body of an update comment request."""

    content: StrictStr


@router.get("/posts/{post_id}/comments", response_model=GetCommentsResponse)
async def get_comments(
    post_id: str,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
) -> GetCommentsResponse:
    """Get all comments for a post in creation order.

    Soft-deleted comments are included as stored.

    Args:
        post_id: Post id
        get_comments_use_case: Get comments use case from DI

    Returns:
        Flat comment list
    """
    request = GetCommentsRequest(post_id=parse_id(post_id))
    try:
        return await get_comments_use_case.execute(request)
    except DomainError as e:
        raise from_domain_error(e)
    except Exception as e:
        logfire.error("Unexpected error listing comments", error=str(e), post_id=post_id)
        raise server_error()


@router.get("/posts/{post_id}/comments/tree", response_model=GetCommentTreeResponse)
async def get_comment_tree(
    post_id: str,
    get_comment_tree_use_case: FromDishka[GetCommentTreeUseCase],
) -> GetCommentTreeResponse:
    """Get the threaded comment view of a post.

    Comments come back in tree pre-order, each with its nesting depth.
    Deleted comments keep their replies but show "[deleted]" in place of
    their handle and content.
    """
    request = GetCommentTreeRequest(post_id=parse_id(post_id))
    try:
        return await get_comment_tree_use_case.execute(request)
    except DomainError as e:
        raise from_domain_error(e)
    except Exception as e:
        logfire.error("Unexpected error building comment tree", error=str(e), post_id=post_id)
        raise server_error()


@router.post(
    "/posts/{post_id}/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: str,
    request: Request,
    get_post_use_case: FromDishka[GetPostUseCase],
    create_comment_use_case: FromDishka[CreateCommentUseCase],
) -> CreateCommentResponse:
    """Create a comment on a post or reply to another comment.

    Args:
        post_id: Post id
        request: Raw request (JSON body with handle, content and parentId)
        get_post_use_case: Get post use case from DI
        create_comment_use_case: Create comment use case from DI

    Returns:
        Created comment
    """
    parsed_id = parse_id(post_id)

    # The post is looked up before the body is read
    try:
        await get_post_use_case.execute(GetPostRequest(post_id=parsed_id))
    except DomainError as e:
        raise from_domain_error(e)
    except Exception as e:
        logfire.error("Unexpected error fetching post", error=str(e), post_id=post_id)
        raise server_error()

    parsed = await parse_body(
        request,
        CreateCommentBody,
        field_codes={
            "handle": "INVALID_HANDLE",
            "content": "INVALID_CONTENT",
            "parentId": "INVALID_PARENT_ID",
        },
    )
    if isinstance(parsed, ParseFailure):
        raise parsed.to_api_error()
    body = parsed.value

    try:
        return await create_comment_use_case.execute(
            CreateCommentRequest(
                post_id=parsed_id,
                handle=body.handle,
                content=body.content,
                parent_id=body.parent_id,
            )
        )
    except DomainError as e:
        logfire.warn("Comment creation rejected", error=str(e), code=e.code)
        raise from_domain_error(e)
    except Exception as e:
        logfire.error("Unexpected error creating comment", error=str(e), post_id=post_id)
        raise server_error()


@router.patch("/comments/{comment_id}", response_model=UpdateCommentResponse)
async def update_comment(
    comment_id: str,
    request: Request,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
) -> UpdateCommentResponse:
    """Update a comment's content.

    Deleted comments can no longer be edited.
    """
    parsed_id = parse_id(comment_id)
    parsed = await parse_body(
        request, UpdateCommentBody, field_codes={"content": "INVALID_CONTENT"}
    )
    if isinstance(parsed, ParseFailure):
        raise parsed.to_api_error()

    try:
        return await update_comment_use_case.execute(
            UpdateCommentRequest(comment_id=parsed_id, content=parsed.value.content)
        )
    except DomainError as e:
        logfire.warn("Comment update rejected", error=str(e), code=e.code)
        raise from_domain_error(e)
    except Exception as e:
        logfire.error(
            "Unexpected error updating comment", error=str(e), comment_id=comment_id
        )
        raise server_error()


@router.delete("/comments/{comment_id}", response_model=SuccessResponse)
async def delete_comment(
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
) -> SuccessResponse:
    """Soft-delete a comment (idempotent)."""
    request = DeleteCommentRequest(comment_id=parse_id(comment_id))
    try:
        return await delete_comment_use_case.execute(request)
    except DomainError as e:
        raise from_domain_error(e)
    except Exception as e:
        logfire.error(
            "Unexpected error deleting comment", error=str(e), comment_id=comment_id
        )
        raise server_error()
