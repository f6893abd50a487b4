"""Shared fixtures for unit tests."""

from typing import Any
from unittest.mock import AsyncMock
from uuid import UUID, uuid4

import pytest

from domain.entities.user import User


class FakeUnitOfWork:
    """Fake Unit of Work with user, profile and post repository mocks.

    ``update`` on profiles and posts echoes back the entity it was given.
    """

    def __init__(self) -> None:
        self.users = AsyncMock()
        self.profiles = AsyncMock()
        self.posts = AsyncMock()
        self.profiles.update.side_effect = lambda profile: profile
        self.posts.update.side_effect = lambda post: post
        self.committed = False
        self.rolled_back = False

    async def commit(self) -> None:
        self.committed = True

    async def rollback(self) -> None:
        self.rolled_back = True

    async def __aenter__(self) -> "FakeUnitOfWork":
        return self

    async def __aexit__(self, *args: Any) -> None:
        pass


@pytest.fixture
def uow() -> FakeUnitOfWork:
    """Create a fresh FakeUnitOfWork."""
    return FakeUnitOfWork()


@pytest.fixture
def user_id() -> UUID:
    """A random user ID."""
    return uuid4()


@pytest.fixture
def actor_id() -> UUID:
    """A random actor ID (distinct from user_id)."""
    return uuid4()


@pytest.fixture
def author(user_id: UUID) -> User:
    """A stored user with a gravatar."""
    return User(
        id=user_id,
        name="Jane Doe",
        email="jane@example.com",
        password_hash="hashed",
        avatar="https://www.gravatar.com/avatar/abc?s=200&r=pg&d=mm",
    )
