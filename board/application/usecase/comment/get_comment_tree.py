"""Get comment tree use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase
from board.application.usecase.common import ResponseModel
from board.domain.service import CommentNode, CommentService, walk_tree
from board.domain.value import DELETED_PLACEHOLDER, PostId


class CommentTreeItem(ResponseModel):
    """Comment tree entry for display.

    Entries are sent as a flat pre-order list: every comment is followed by
    its replies, and ``depth`` gives its nesting level (0 for roots).
    Soft-deleted comments keep their place in the tree, but their handle and
    content are replaced by a placeholder.
    """

    id: int
    post_id: int
    parent_id: int | None
    handle: str
    content: str
    created_at: datetime
    updated_at: datetime
    is_deleted: bool
    is_edited: bool
    depth: int
    reply_count: int

    @classmethod
    def from_node(cls, node: CommentNode, depth: int = 0) -> "CommentTreeItem":
        comment = node.comment
        deleted = comment.is_deleted
        return cls(
            id=comment.id,
            post_id=comment.post_id,
            parent_id=comment.parent_id,
            handle=DELETED_PLACEHOLDER if deleted else comment.handle,
            content=DELETED_PLACEHOLDER if deleted else comment.content,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
            is_deleted=deleted,
            is_edited=not deleted and comment.is_edited,
            depth=depth,
            reply_count=len(node.replies),
        )


class GetCommentTreeRequest(BaseModel):
    """Get comment tree request."""

    post_id: int


class GetCommentTreeResponse(ResponseModel):
    """Get comment tree response."""

    items: list[CommentTreeItem]
    total: int


class GetCommentTreeUseCase(
    BaseUseCase[GetCommentTreeRequest, GetCommentTreeResponse]
):
    """Use case for getting the threaded comment view of a post."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get comment tree use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: GetCommentTreeRequest) -> GetCommentTreeResponse:
        """Execute get comment tree flow.

        Returns:
            All comments of the post in tree pre-order with their depth,
            plus the total comment count

        Raises:
            NotFoundError: If the post does not exist
        """
        with logfire.span("get_comment_tree.execute", post_id=request.post_id):
            roots = await self.comment_service.get_comment_tree(
                PostId(request.post_id)
            )
            items = [
                CommentTreeItem.from_node(node, depth)
                for node, depth in walk_tree(roots)
            ]
            return GetCommentTreeResponse(items=items, total=len(items))
