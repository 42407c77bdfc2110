"""Unit tests for GetCommentsUseCase."""

import pytest

from remark.application.usecase.comment import (
    GetCommentsRequest,
    GetCommentsUseCase,
)
from remark.domain.repository import CommentRepository, UserRepository
from tests.factories import make_comment
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetCommentsUseCase:
    """Tests for GetCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_returns_threads_with_authors_and_total(self, unit_env, alice, bob):
        """Threads carry their replies, and total counts both levels."""
        # Arrange
        use_case = await unit_env.get(GetCommentsUseCase)
        user_repo = await unit_env.get(UserRepository)
        comment_repo = await unit_env.get(CommentRepository)
        await user_repo.save(alice)
        await user_repo.save(bob)

        top = make_comment(alice, "top", minutes=0)
        reply = make_comment(bob, "reply", top.id, minutes=1)
        lonely = make_comment(bob, "lonely", minutes=2)
        for comment in (top, reply, lonely):
            await comment_repo.insert(comment)

        # Act
        response = await use_case.execute(
            GetCommentsRequest(entity_type="blog_post", entity_id="post-1")
        )

        # Assert
        assert response.entity_type == "blog_post"
        assert response.entity_id == "post-1"
        assert response.total == 3
        assert [item.text for item in response.items] == ["top", "lonely"]

        first = response.items[0]
        assert first.comment_id == str(top.id)
        assert first.author.handle == "alice"
        assert first.author.display_name == "Alice"
        assert [r.comment_id for r in first.replies] == [str(reply.id)]
        assert first.replies[0].replied_comment_id == str(top.id)
        assert first.replies[0].author.handle == "bob"
        assert response.items[1].replies == []

    @pytest.mark.asyncio
    async def test_no_comments_returns_empty_response(self, unit_env):
        use_case = await unit_env.get(GetCommentsUseCase)

        response = await use_case.execute(
            GetCommentsRequest(entity_type="blog_post", entity_id="empty")
        )

        assert response.items == []
        assert response.total == 0
