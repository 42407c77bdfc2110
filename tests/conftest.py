"""Test configuration and fixtures."""

import pytest

from remark.domain.model import User
from tests.factories import make_user


@pytest.fixture
def alice() -> User:
    """A regular comment author."""
    return make_user("alice")


@pytest.fixture
def bob() -> User:
    """A second, unrelated user."""
    return make_user("bob")
