"""Domain services."""

from .base import Clock, Service, utc_now
from .comment_service import CommentService
from .comment_tree import CommentNode, build_comment_tree, count_nodes, walk_tree
from .post_service import PostPage, PostService

__all__ = [
    "Clock",
    "CommentNode",
    "CommentService",
    "PostPage",
    "PostService",
    "Service",
    "build_comment_tree",
    "count_nodes",
    "utc_now",
    "walk_tree",
]
