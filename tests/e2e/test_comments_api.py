"""End-to-end tests for the comment endpoints."""

import pytest
from fastapi.testclient import TestClient

from board.domain.repository import CommentRepository
from board.interface.api.app import create_app
from tests.conftest import make_comment
from tests.di import build_test_container


@pytest.fixture
def container():
    return build_test_container()


@pytest.fixture
def client(container):
    """Create test client with test container."""
    app_instance = create_app(container)
    with TestClient(app_instance) as test_client:
        yield test_client


@pytest.fixture
def post_id(client):
    response = client.post(
        "/api/posts", json={"handle": "alice", "title": "Hello", "content": "Body"}
    )
    return response.json()["id"]


def _comment(client, post_id, content="Text", handle="bob", parent_id=None):
    body = {"handle": handle, "content": content}
    if parent_id is not None:
        body["parentId"] = parent_id
    response = client.post(f"/api/posts/{post_id}/comments", json=body)
    assert response.status_code == 201
    return response.json()


def _assert_error(response, status_code, code):
    assert response.status_code == status_code
    assert response.json()["error"]["code"] == code


class TestCreateComment:
    """Tests for POST /api/posts/{id}/comments."""

    def test_create_comment(self, client, post_id):
        # Act
        response = client.post(
            f"/api/posts/{post_id}/comments",
            json={"handle": " bob ", "content": " First! "},
        )

        # Assert
        assert response.status_code == 201
        data = response.json()
        assert data["postId"] == post_id
        assert data["parentId"] is None
        assert data["handle"] == "bob"
        assert data["content"] == "First!"
        assert data["isDeleted"] is False
        assert data["deletedAt"] is None

    def test_create_reply(self, client, post_id):
        parent = _comment(client, post_id)

        reply = _comment(client, post_id, parent_id=parent["id"])

        assert reply["parentId"] == parent["id"]

    def test_reply_to_other_posts_comment(self, client, post_id):
        # Arrange
        other_post = client.post(
            "/api/posts", json={"handle": "alice", "title": "Other", "content": "B"}
        ).json()
        foreign = _comment(client, other_post["id"])

        # Act
        response = client.post(
            f"/api/posts/{post_id}/comments",
            json={"handle": "bob", "content": "Reply", "parentId": foreign["id"]},
        )

        # Assert
        _assert_error(response, 400, "PARENT_NOT_FOUND")

    @pytest.mark.parametrize(
        "body,code",
        [
            ({"handle": "b", "content": "Text"}, "INVALID_HANDLE"),
            ({"content": "Text"}, "INVALID_HANDLE"),
            ({"handle": "bob", "content": "   "}, "INVALID_CONTENT"),
            ({"handle": "bob", "content": "x" * 2_001}, "CONTENT_TOO_LONG"),
            ({"handle": "bob", "content": "Text", "parentId": "1"}, "INVALID_PARENT_ID"),
            ({"handle": "bob", "content": "Text", "parentId": 1.5}, "INVALID_PARENT_ID"),
            ({"handle": "bob", "content": "Text", "parentId": 0}, "INVALID_PARENT_ID"),
        ],
    )
    def test_invalid_fields(self, client, post_id, body, code):
        response = client.post(f"/api/posts/{post_id}/comments", json=body)

        _assert_error(response, 400, code)

    def test_missing_post(self, client):
        response = client.post(
            "/api/posts/42/comments", json={"handle": "bob", "content": "Text"}
        )

        _assert_error(response, 404, "POST_NOT_FOUND")

    @pytest.mark.parametrize("body", ["text", {"handle": 5, "content": "x"}])
    def test_missing_post_is_checked_before_body(self, client, body):
        response = client.post("/api/posts/42/comments", json=body)

        _assert_error(response, 404, "POST_NOT_FOUND")

    def test_malformed_body_on_existing_post(self, client, post_id):
        response = client.post(f"/api/posts/{post_id}/comments", json="text")

        _assert_error(response, 400, "INVALID_BODY")

    def test_parent_id_above_id_range(self, client, post_id):
        response = client.post(
            f"/api/posts/{post_id}/comments",
            json={"handle": "bob", "content": "Text", "parentId": 2**31},
        )

        _assert_error(response, 400, "INVALID_PARENT_ID")

    def test_post_id_above_id_range(self, client):
        response = client.post(
            "/api/posts/99999999999/comments", json={"handle": "bob", "content": "Text"}
        )

        _assert_error(response, 400, "INVALID_ID")

    def test_invalid_post_id(self, client):
        response = client.post(
            "/api/posts/abc/comments", json={"handle": "bob", "content": "Text"}
        )

        _assert_error(response, 400, "INVALID_ID")


class TestListComments:
    """Tests for GET /api/posts/{id}/comments."""

    def test_lists_in_creation_order_with_deleted(self, client, post_id):
        # Arrange
        first = _comment(client, post_id, content="One")
        second = _comment(client, post_id, content="Two", parent_id=first["id"])
        client.delete(f"/api/comments/{first['id']}")

        # Act
        response = client.get(f"/api/posts/{post_id}/comments")

        # Assert
        assert response.status_code == 200
        items = response.json()["items"]
        assert [c["id"] for c in items] == [first["id"], second["id"]]
        assert items[0]["isDeleted"] is True
        assert items[0]["deletedAt"] is not None

    def test_missing_post(self, client):
        _assert_error(client.get("/api/posts/3/comments"), 404, "POST_NOT_FOUND")


class TestCommentTree:
    """Tests for GET /api/posts/{id}/comments/tree."""

    def test_tree_masks_deleted_comments(self, client, post_id):
        # Arrange
        root = _comment(client, post_id, content="Root", handle="mallory")
        reply = _comment(client, post_id, content="Reply", parent_id=root["id"])
        nested = _comment(client, post_id, content="Nested", parent_id=reply["id"])
        other_root = _comment(client, post_id, content="Second")
        client.delete(f"/api/comments/{root['id']}")

        # Act
        response = client.get(f"/api/posts/{post_id}/comments/tree")

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 4
        assert [(n["id"], n["depth"]) for n in data["items"]] == [
            (root["id"], 0),
            (reply["id"], 1),
            (nested["id"], 2),
            (other_root["id"], 0),
        ]

        masked = data["items"][0]
        assert masked["handle"] == "[deleted]"
        assert masked["content"] == "[deleted]"
        assert masked["isDeleted"] is True
        assert masked["replyCount"] == 1
        assert data["items"][1]["content"] == "Reply"
        assert data["items"][1]["parentId"] == root["id"]

    def test_deep_reply_chain(self, client, container, post_id):
        # Arrange: 1000 nested replies, each to the previous comment
        repo = client.portal.call(container.get, CommentRepository)
        for comment_id in range(1, 1001):
            client.portal.call(
                repo.save,
                make_comment(
                    comment_id, post_id=post_id, parent_id=comment_id - 1 or None
                ),
            )

        # Act
        flat = client.get(f"/api/posts/{post_id}/comments")
        tree = client.get(f"/api/posts/{post_id}/comments/tree")

        # Assert
        assert flat.status_code == 200
        assert tree.status_code == 200
        data = tree.json()
        assert data["total"] == 1000
        assert [n["depth"] for n in data["items"]] == list(range(1000))

    def test_tree_for_missing_post(self, client):
        _assert_error(client.get("/api/posts/3/comments/tree"), 404, "POST_NOT_FOUND")


class TestUpdateComment:
    """Tests for PATCH /api/comments/{id}."""

    def test_update_comment(self, client, post_id):
        comment = _comment(client, post_id, content="Old")

        response = client.patch(
            f"/api/comments/{comment['id']}", json={"content": "New"}
        )

        assert response.status_code == 200
        assert response.json()["content"] == "New"

    def test_update_deleted_comment(self, client, post_id):
        comment = _comment(client, post_id)
        client.delete(f"/api/comments/{comment['id']}")

        response = client.patch(
            f"/api/comments/{comment['id']}", json={"content": "New"}
        )

        _assert_error(response, 403, "COMMENT_DELETED")

    def test_update_missing_comment(self, client):
        response = client.patch("/api/comments/77", json={"content": "New"})

        _assert_error(response, 404, "COMMENT_NOT_FOUND")

    def test_update_too_long(self, client, post_id):
        comment = _comment(client, post_id)

        response = client.patch(
            f"/api/comments/{comment['id']}", json={"content": "x" * 2_001}
        )

        _assert_error(response, 400, "CONTENT_TOO_LONG")


class TestDeleteComment:
    """Tests for DELETE /api/comments/{id}."""

    def test_delete_is_idempotent(self, client, post_id):
        comment = _comment(client, post_id)

        first = client.delete(f"/api/comments/{comment['id']}")
        second = client.delete(f"/api/comments/{comment['id']}")

        assert first.status_code == 200
        assert second.status_code == 200
        assert second.json() == {"success": True}

    def test_delete_missing_comment(self, client):
        _assert_error(client.delete("/api/comments/5"), 404, "COMMENT_NOT_FOUND")

    def test_delete_invalid_id(self, client):
        _assert_error(client.delete("/api/comments/five"), 400, "INVALID_ID")
