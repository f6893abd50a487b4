"""Pytest configuration and fixtures."""

import os
import sys
from collections.abc import AsyncGenerator, Awaitable, Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any
from uuid import UUID, uuid4

# Disable rate limiting in tests
os.environ["RATE_LIMIT_ENABLED"] = "false"

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.pool import StaticPool

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from infrastructure.auth.jwt_provider import JWTAuthProvider
from infrastructure.auth.provider import TokenUser
from infrastructure.database.models import Base


# Compile JSONB as JSON for SQLite (used in tests)
@compiles(JSONB, "sqlite")
def _compile_jsonb_sqlite(type_: Any, compiler: Any, **kw: Any) -> str:
    return "JSON"


# Test database URL (SQLite in memory)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@dataclass
class RegisteredUser:
    """A user registered through the API, with headers carrying its token."""

    id: UUID
    name: str
    email: str
    headers: dict[str, str]


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create a fresh in-memory database for each test.

    StaticPool keeps every session on the same connection, otherwise each
    connection would see its own empty in-memory database.
    """
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create session factory."""
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest.fixture
def test_user() -> TokenUser:
    """A token user that is not stored in the database."""
    return TokenUser(id=uuid4(), email="test@example.com", name="Test User")


@pytest.fixture
def auth_provider() -> JWTAuthProvider:
    """Create auth provider for testing."""
    return JWTAuthProvider(
        secret_key="test-secret-key",
        algorithm="HS256",
        expire_minutes=30,
    )


@pytest.fixture
def auth_token(auth_provider: JWTAuthProvider, test_user: TokenUser) -> str:
    """Create auth token for test user."""
    return str(auth_provider.create_token(test_user))


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create authorization headers."""
    return {"Authorization": f"Bearer {auth_token}"}


@pytest.fixture
def github_handler() -> Callable[..., Any]:
    """Default upstream for the GitHub proxy: an empty repository list."""
    import httpx

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=[])

    return handler


@pytest.fixture
def app(
    session_factory: async_sessionmaker[AsyncSession],
    auth_provider: JWTAuthProvider,
    github_handler: Callable[..., Any],
) -> FastAPI:
    """
    Create the application wired to the test database.

    This app:
    - Uses an in-memory SQLite database
    - Signs and checks tokens with the test auth provider
    - Hashes passwords with cheap bcrypt rounds
    - Answers GitHub requests from ``github_handler``
    """
    import httpx

    from api.dependencies.auth import get_auth_provider
    from api.v1.dependencies import (
        get_account_service,
        get_github_service,
        get_post_service,
        get_profile_service,
    )
    from domain.services.account_service import AccountService
    from domain.services.github_service import GitHubService
    from domain.services.post_service import PostService
    from domain.services.profile_service import ProfileService
    from infrastructure.auth.passwords import BcryptPasswordHasher
    from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork
    from main import create_app

    app = create_app()

    # Create a UoW factory that uses test session
    def test_uow_factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(session_factory)

    account_service = AccountService(
        test_uow_factory,
        auth_provider=auth_provider,
        password_hasher=BcryptPasswordHasher(rounds=4),
    )
    github_service = GitHubService(
        base_url="https://api.github.test",
        token="",
        transport=httpx.MockTransport(github_handler),
    )

    app.dependency_overrides[get_auth_provider] = lambda: auth_provider
    app.dependency_overrides[get_post_service] = lambda: PostService(test_uow_factory)
    app.dependency_overrides[get_profile_service] = lambda: ProfileService(test_uow_factory)
    app.dependency_overrides[get_account_service] = lambda: account_service
    app.dependency_overrides[get_github_service] = lambda: github_service

    return app


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create async test client (no auth)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
def register(client: AsyncClient) -> Callable[..., Awaitable[RegisteredUser]]:
    """Register users through the API.

    Each call creates a new account and returns its id and auth headers.
    """

    async def _register(
        name: str = "Test User",
        email: str | None = None,
        password: str = "secret123",
    ) -> RegisteredUser:
        email = email or f"{uuid4().hex[:12]}@example.com"
        response = await client.post(
            "/api/v1/users",
            json={"name": name, "email": email, "password": password},
        )
        assert response.status_code == 201, response.text

        headers = {"Authorization": f"Bearer {response.json()['token']}"}
        me = await client.get("/api/v1/auth", headers=headers)
        return RegisteredUser(
            id=UUID(me.json()["data"]["id"]),
            name=name,
            email=email,
            headers=headers,
        )

    return _register


@pytest.fixture
async def user(register: Callable[..., Awaitable[RegisteredUser]]) -> RegisteredUser:
    """A registered user."""
    return await register("Jane Doe")


@pytest.fixture
async def other_user(register: Callable[..., Awaitable[RegisteredUser]]) -> RegisteredUser:
    """A second registered user."""
    return await register("John Smith")
