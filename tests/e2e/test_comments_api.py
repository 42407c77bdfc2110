"""End-to-end tests for comment endpoints."""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from remark.config import Settings
from remark.domain.model import User
from remark.domain.repository import CommentRepository, UserRepository
from remark.domain.service import EventPublisher
from remark.domain.value import CommentId, Permission
from remark.interface.api.app import create_app
from remark.util.di.container import setup_di
from remark.util.jwt import create_token
from tests.di import build_test_container
from tests.factories import make_comment, make_user

ALLOWED_URLS = '{"blog_post": ["example.com"]}'


async def _save_users(container, *users: User) -> None:
    user_repo = await container.get(UserRepository)
    for user in users:
        await user_repo.save(user)


async def _insert_comments(container, *comments) -> None:
    comment_repo = await container.get(CommentRepository)
    for comment in comments:
        await comment_repo.insert(comment)


async def _get_publisher(container) -> EventPublisher:
    return await container.get(EventPublisher)


def _token(user: User, permissions: list[str] | None = None) -> dict[str, str]:
    """Auth cookie for a user, signed with the configured secret."""
    token = create_token(
        str(user.id), user.handle.root, Settings().auth, permissions=permissions
    )
    return {"auth_token": token}


@pytest.fixture
def container(monkeypatch):
    """Test container with an allow-list for blog posts."""
    monkeypatch.setenv("COMMENTS__ALLOWED_EXTERNAL_URLS", ALLOWED_URLS)
    return build_test_container(with_fastapi=True)


@pytest.fixture
def client(container):
    """Create test client with test container."""
    app_instance = create_app()
    setup_di(app_instance, container)
    with TestClient(app_instance) as test_client:
        yield test_client


@pytest.fixture
def users(client, container) -> tuple[User, User]:
    """Two registered users, alice and bob."""
    alice, bob = make_user("alice"), make_user("bob")
    client.portal.call(_save_users, container, alice, bob)
    return alice, bob


def _post(client, user: User, text: str, replied_comment_id: str | None = None):
    return client.post(
        "/comments/blog_post/post-1",
        json={"text": text, "replied_comment_id": replied_comment_id},
        cookies=_token(user),
    )


class TestCommentEndpoints:
    """End-to-end tests for comment API endpoints.

    Note: These tests focus on the HTTP API interface layer.
    More detailed business logic tests are in unit tests.
    """

    def test_list_comments_of_new_entity_is_empty(self, client):
        """Reading is public and returns no threads for unknown entities."""
        # Act
        response = client.get("/comments/blog_post/post-1")

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["items"] == []
        assert data["total"] == 0

    def test_create_and_list_thread(self, client, users):
        """Created comments and replies come back nested."""
        alice, bob = users

        # Act
        top = _post(client, alice, "Nice post")
        reply = _post(client, bob, "Agreed", top.json()["comment_id"])
        response = client.get("/comments/blog_post/post-1")

        # Assert
        assert top.status_code == 201
        assert reply.status_code == 201
        assert reply.json()["replied_comment_id"] == top.json()["comment_id"]

        data = response.json()
        assert data["total"] == 2
        assert len(data["items"]) == 1
        thread = data["items"][0]
        assert thread["text"] == "Nice post"
        assert thread["author"]["handle"] == "alice"
        assert [r["text"] for r in thread["replies"]] == ["Agreed"]
        assert thread["replies"][0]["author"]["handle"] == "bob"

    def test_create_publishes_event(self, client, container, users):
        alice, _ = users

        response = _post(client, alice, "Hello")

        publisher = client.portal.call(_get_publisher, container)
        assert [str(e.comment_id) for e in publisher.events] == [
            response.json()["comment_id"]
        ]

    def test_create_without_auth_fails(self, client):
        """Should return 401 when not authenticated."""
        response = client.post("/comments/blog_post/post-1", json={"text": "Hi"})

        assert response.status_code == 401

    def test_first_comment_by_unseen_user_succeeds(self, client):
        """A valid token is enough; the author record is created on demand."""
        carol = make_user("carol")

        response = _post(client, carol, "Hello")

        assert response.status_code == 201
        assert response.json()["author"]["handle"] == "carol"
        listing = client.get("/comments/blog_post/post-1").json()
        assert listing["items"][0]["author"]["user_id"] == str(carol.id)

    def test_anonymous_reply_with_malformed_id_is_unauthorized(self, client):
        response = client.post(
            "/comments/blog_post/post-1",
            json={"text": "Hi", "replied_comment_id": "nope"},
        )

        assert response.status_code == 401

    def test_create_with_invalid_token_fails(self, client):
        response = client.post(
            "/comments/blog_post/post-1",
            json={"text": "Hi"},
            cookies={"auth_token": "invalid-token"},
        )

        assert response.status_code == 401

    def test_create_with_disallowed_link_fails(self, client, users):
        """Links outside the allow-list are rejected with the url."""
        alice, _ = users

        response = _post(client, alice, "Look [here](https://evil.test/x)")

        assert response.status_code == 400
        assert "https://evil.test/x" in response.json()["detail"]

    def test_create_with_allowed_link_succeeds(self, client, users):
        alice, _ = users

        response = _post(client, alice, "Look [here](https://www.example.com/x/)")

        assert response.status_code == 201

    def test_reply_to_missing_comment_fails(self, client, users):
        alice, _ = users

        response = _post(client, alice, "Reply", str(uuid4()))

        assert response.status_code == 404

    def test_reply_with_malformed_id_fails(self, client, users):
        alice, _ = users

        response = _post(client, alice, "Reply", "not-a-uuid")

        assert response.status_code == 400

    def test_empty_text_fails_validation(self, client, users):
        alice, _ = users

        response = _post(client, alice, "")

        assert response.status_code == 422

    def test_overlong_entity_id_fails(self, client):
        response = client.get(f"/comments/blog_post/{'x' * 65}")

        assert response.status_code == 400

    def test_update_by_author(self, client, users):
        """The author edits and receives a new concurrency stamp."""
        alice, _ = users
        created = _post(client, alice, "Before").json()

        # Act
        response = client.put(
            f"/comments/{created['comment_id']}",
            json={"text": "After", "concurrency_stamp": created["concurrency_stamp"]},
            cookies=_token(alice),
        )

        # Assert
        assert response.status_code == 200
        assert response.json()["text"] == "After"
        assert response.json()["concurrency_stamp"] != created["concurrency_stamp"]

    def test_update_with_stale_stamp_conflicts(self, client, users):
        alice, _ = users
        created = _post(client, alice, "Before").json()
        client.put(
            f"/comments/{created['comment_id']}",
            json={"text": "First", "concurrency_stamp": created["concurrency_stamp"]},
            cookies=_token(alice),
        )

        # Act - second edit still holds the original stamp
        response = client.put(
            f"/comments/{created['comment_id']}",
            json={"text": "Second", "concurrency_stamp": created["concurrency_stamp"]},
            cookies=_token(alice),
        )

        # Assert
        assert response.status_code == 409

    def test_update_by_other_user_is_forbidden(self, client, users):
        alice, bob = users
        created = _post(client, alice, "Before").json()

        response = client.put(
            f"/comments/{created['comment_id']}",
            json={"text": "Hijacked"},
            cookies=_token(bob),
        )

        assert response.status_code == 403

    def test_update_missing_comment_returns_404(self, client, users):
        alice, _ = users

        response = client.put(
            f"/comments/{uuid4()}", json={"text": "After"}, cookies=_token(alice)
        )

        assert response.status_code == 404

    def test_anonymous_update_of_malformed_id_is_unauthorized(self, client):
        response = client.put("/comments/nope", json={"text": "After"})

        assert response.status_code == 401

    def test_delete_by_author_removes_thread(self, client, users):
        alice, bob = users
        top = _post(client, alice, "Top").json()
        _post(client, bob, "Reply", top["comment_id"])

        # Act
        response = client.delete(
            f"/comments/{top['comment_id']}", cookies=_token(alice)
        )

        # Assert
        assert response.status_code == 204
        listing = client.get("/comments/blog_post/post-1").json()
        assert listing["items"] == []
        assert listing["total"] == 0

    def test_delete_by_other_user_is_forbidden(self, client, users):
        alice, bob = users
        top = _post(client, alice, "Top").json()

        response = client.delete(f"/comments/{top['comment_id']}", cookies=_token(bob))

        assert response.status_code == 403

    def test_delete_by_moderator(self, client, users):
        """A token granting delete-any removes anyone's comment."""
        alice, bob = users
        top = _post(client, alice, "Top").json()

        response = client.delete(
            f"/comments/{top['comment_id']}",
            cookies=_token(bob, [Permission.DELETE_ANY_COMMENT.value]),
        )

        assert response.status_code == 204

    def test_delete_without_auth_fails(self, client, users):
        alice, _ = users
        top = _post(client, alice, "Top").json()

        response = client.delete(f"/comments/{top['comment_id']}")

        assert response.status_code == 401


    def test_anonymous_delete_of_malformed_id_is_unauthorized(self, client):
        response = client.delete("/comments/nope")

        assert response.status_code == 401

class TestCommentFeatureSwitch:
    """Tests for disabling the comment feature."""

    def test_disabled_comments_are_not_routed(self, monkeypatch):
        monkeypatch.setenv("COMMENTS__ENABLED", "false")
        app_instance = create_app()
        setup_di(app_instance, build_test_container(with_fastapi=True))

        with TestClient(app_instance) as client:
            assert client.get("/comments/blog_post/post-1").status_code == 404
            assert client.get("/health").status_code == 200


class TestCorruptedData:
    """Tests for stored data that cannot form threads."""

    def test_orphaned_reply_is_a_server_error(self, client, container, users):
        """Corrupted threads surface as 500, not as a client error."""
        alice, _ = users
        orphan = make_comment(alice, "orphan", CommentId(uuid4()))
        client.portal.call(_insert_comments, container, orphan)

        response = client.get("/comments/blog_post/post-1")

        assert response.status_code == 500
        assert response.json()["detail"] == "Internal server error"


class TestHealth:
    def test_health_reports_feature_state(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["comments_enabled"] is True
