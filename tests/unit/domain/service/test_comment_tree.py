"""Unit tests for the comment tree builder."""

import random

from board.domain.service import build_comment_tree, count_nodes, walk_tree
from tests.conftest import make_comment


def _ids(nodes):
    return [node.comment.id for node in nodes]


def _flatten(nodes):
    return [node.comment for node, _ in walk_tree(nodes)]


class TestBuildCommentTree:
    """Tests for build_comment_tree."""

    def test_empty_input(self):
        assert build_comment_tree([]) == []

    def test_nests_replies_under_parents(self):
        # Arrange
        comments = [
            make_comment(1),
            make_comment(2, parent_id=1),
            make_comment(3),
            make_comment(4, parent_id=2),
            make_comment(5, parent_id=1),
        ]

        # Act
        roots = build_comment_tree(comments)

        # Assert
        assert _ids(roots) == [1, 3]
        assert _ids(roots[0].replies) == [2, 5]
        assert _ids(roots[0].replies[0].replies) == [4]
        assert roots[1].replies == []

    def test_sibling_order_follows_input_order(self):
        comments = [make_comment(1), make_comment(3, parent_id=1), make_comment(2, parent_id=1)]

        roots = build_comment_tree(comments)

        assert _ids(roots[0].replies) == [3, 2]

    def test_missing_parent_makes_root(self):
        """A reply whose parent is absent from the input is promoted to a root."""
        comments = [make_comment(1), make_comment(7, parent_id=99)]

        roots = build_comment_tree(comments)

        assert _ids(roots) == [1, 7]

    def test_reply_listed_before_parent_is_still_attached(self):
        comments = [make_comment(2, parent_id=1), make_comment(1)]

        roots = build_comment_tree(comments)

        assert _ids(roots) == [1]
        assert _ids(roots[0].replies) == [2]

    def test_self_parent_makes_root(self):
        roots = build_comment_tree([make_comment(1, parent_id=1)])

        assert _ids(roots) == [1]
        assert roots[0].replies == []

    def test_deleted_comments_keep_their_replies(self):
        comments = [
            make_comment(1, is_deleted=True, deleted_at=make_comment(1).created_at),
            make_comment(2, parent_id=1),
        ]

        roots = build_comment_tree(comments)

        assert _ids(roots) == [1]
        assert _ids(roots[0].replies) == [2]

    def test_every_comment_appears_exactly_once(self):
        # Arrange: random forest (parents are older), including dangling parents
        rng = random.Random(7)
        comments = []
        for comment_id in range(1, 201):
            candidates = [None, rng.randint(201, 250)]
            if comment_id > 1:
                candidates.append(rng.randint(1, comment_id - 1))
            parent_id = rng.choice(candidates)
            comments.append(make_comment(comment_id, parent_id=parent_id))

        # Act
        roots = build_comment_tree(comments)

        # Assert
        flattened = _flatten(roots)
        assert count_nodes(roots) == len(comments)
        assert sorted(c.id for c in flattened) == list(range(1, 201))

    def test_is_deterministic(self):
        comments = [make_comment(i, parent_id=(i // 2) or None) for i in range(1, 20)]

        first = build_comment_tree(comments)
        second = build_comment_tree(comments)

        assert _flatten(first) == _flatten(second)

    def test_deep_reply_chain(self):
        # Arrange: every comment replies to the previous one
        comments = [make_comment(i, parent_id=i - 1 or None) for i in range(1, 1001)]

        # Act
        roots = build_comment_tree(comments)

        # Assert
        assert _ids(roots) == [1]
        assert count_nodes(roots) == 1000
        assert [depth for _, depth in walk_tree(roots)] == list(range(1000))

    def test_parent_cycle_is_broken(self):
        """Comments that only reach each other are still returned once each."""
        comments = [
            make_comment(1, parent_id=2),
            make_comment(2, parent_id=1),
            make_comment(3, parent_id=2),
            make_comment(4),
        ]

        roots = build_comment_tree(comments)

        assert _ids(roots) == [1, 4]
        assert _ids(roots[0].replies) == [2]
        assert _ids(roots[0].replies[0].replies) == [3]
        assert sorted(c.id for c in _flatten(roots)) == [1, 2, 3, 4]


class TestWalkTree:
    """Tests for walk_tree."""

    def test_preorder_with_depth(self):
        roots = build_comment_tree(
            [
                make_comment(1),
                make_comment(2, parent_id=1),
                make_comment(3),
                make_comment(4, parent_id=2),
                make_comment(5, parent_id=1),
            ]
        )

        walked = [(node.comment.id, depth) for node, depth in walk_tree(roots)]

        assert walked == [(1, 0), (2, 1), (4, 2), (5, 1), (3, 0)]

    def test_empty_forest(self):
        assert list(walk_tree([])) == []
        assert count_nodes([]) == 0
