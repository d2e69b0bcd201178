"""Comment tree builder.

Turns the flat, creation-ordered comment list of one post into a forest of
reply trees. Reply chains can be arbitrarily deep, so nothing here recurses.
"""

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from board.domain.model.comment import Comment
from board.domain.value import CommentId


@dataclass(eq=False)
class CommentNode:
    """Node in a post's comment tree.

    Wraps a comment together with its direct replies, in creation order.
    """

    comment: Comment
    replies: list["CommentNode"] = field(default_factory=list, repr=False)


def build_comment_tree(comments: Iterable[Comment]) -> list[CommentNode]:
    """Build the reply forest of a post.

    Algorithm:
    1. Build an id -> node map with empty reply lists
    2. Walk the comments again and attach each node to its parent's replies;
       comments without a parent, or whose parent is not part of the input,
       become roots
    3. Nodes still unreachable from a root sit on a parent cycle; each one
       is detached from its parent and promoted to a root

    Sibling order equals input order, so passing comments sorted by
    created_at yields replies in creation order. Every input comment
    appears exactly once in the result.

    Args:
        comments: Comments of a single post, ordered by created_at ascending

    Returns:
        Root nodes in input order, each carrying its replies
    """
    ordered = list(comments)
    nodes: dict[CommentId, CommentNode] = {c.id: CommentNode(comment=c) for c in ordered}
    parents: dict[CommentId, CommentNode] = {}

    roots: list[CommentNode] = []
    for comment in ordered:
        node = nodes[comment.id]
        parent = nodes.get(comment.parent_id) if comment.parent_id is not None else None
        # A parent missing from the input (filtered out, hard-deleted) makes a root
        if parent is None or parent is node:
            roots.append(node)
        else:
            parent.replies.append(node)
            parents[comment.id] = parent

    reached = {node.comment.id for node, _ in walk_tree(roots)}
    if len(reached) < len(nodes):
        for comment in ordered:
            if comment.id in reached:
                continue
            node = nodes[comment.id]
            parents[comment.id].replies.remove(node)
            roots.append(node)
            reached.update(n.comment.id for n, _ in walk_tree([node]))

        position = {c.id: index for index, c in enumerate(ordered)}
        roots.sort(key=lambda n: position[n.comment.id])

    return roots


def walk_tree(roots: Iterable[CommentNode]) -> Iterator[tuple[CommentNode, int]]:
    """Yield ``(node, depth)`` pairs of a forest in pre-order.

    Roots have depth 0. Replies follow their parent, in sibling order.
    """
    stack = [(node, 0) for node in reversed(list(roots))]
    while stack:
        node, depth = stack.pop()
        yield node, depth
        stack.extend((reply, depth + 1) for reply in reversed(node.replies))


def count_nodes(roots: Iterable[CommentNode]) -> int:
    """Count all nodes of a forest."""
    return sum(1 for _ in walk_tree(roots))
