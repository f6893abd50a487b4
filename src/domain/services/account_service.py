"""Account service layer: registration, login and cascading deletion."""

import hashlib
from collections.abc import Callable
from urllib.parse import urlencode
from uuid import UUID

import structlog

from core.exceptions import (
    InvalidCredentialsError,
    UserAlreadyExistsError,
    UserNotFoundError,
    ValidationError,
)
from domain.entities.user import User
from domain.repositories.unit_of_work import IUnitOfWork
from domain.validation import require_fields
from infrastructure.auth.passwords import IPasswordHasher
from infrastructure.auth.provider import IAuthProvider, TokenUser

logger = structlog.get_logger()

MIN_PASSWORD_LENGTH = 6


def gravatar_url(email: str, size: int = 200) -> str:
    """Build the Gravatar URL for an email address."""
    digest = hashlib.md5(email.strip().lower().encode("utf-8")).hexdigest()
    query = urlencode({"s": size, "r": "pg", "d": "mm"})
    return f"https://www.gravatar.com/avatar/{digest}?{query}"


class AccountService:
    """Service layer for user accounts."""

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        auth_provider: IAuthProvider,
        password_hasher: IPasswordHasher,
    ) -> None:
        self._uow_factory = uow_factory
        self._auth = auth_provider
        self._hasher = password_hasher

    async def register(self, name: str, email: str, password: str) -> str:
        """Create a user and return an access token for it."""
        require_fields(
            {"name": name, "email": email, "password": password},
            {
                "name": "Name is required",
                "email": "Please include a valid email",
                "password": "Please enter a password with 6 or more characters",
            },
        )
        if len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                [
                    {
                        "field": "password",
                        "message": "Please enter a password with 6 or more characters",
                    }
                ]
            )

        async with self._uow_factory() as uow:
            user = User(name=name, email=email, password_hash="")
            if await uow.users.get_by_email(user.email):
                raise UserAlreadyExistsError(user.email)

            user.password_hash = self._hasher.hash(password)
            user.avatar = gravatar_url(user.email)
            created = await uow.users.create(user)
            await uow.commit()

            logger.info("user_registered", user_id=str(created.id))
            return self._issue_token(created)

    async def authenticate(self, email: str, password: str) -> str:
        """Check credentials and return an access token."""
        require_fields(
            {"email": email, "password": password},
            {"email": "Please include a valid email", "password": "Password is required"},
        )

        async with self._uow_factory() as uow:
            user = await uow.users.get_by_email(email.strip().lower())

        if not user or not self._hasher.verify(password, user.password_hash):
            logger.info("login_failed")
            raise InvalidCredentialsError()

        return self._issue_token(user)

    async def get_user(self, user_id: UUID) -> User:
        """Get a user by ID."""
        async with self._uow_factory() as uow:
            user = await uow.users.get(user_id)
            if not user:
                raise UserNotFoundError(str(user_id))
            return user

    async def delete_account(self, user_id: UUID) -> None:
        """Delete the user's posts, then profile, then the user itself.

        Missing posts, profile or user are not errors, so deleting an
        already-deleted account succeeds. Likes and comments the user left on
        other people's posts are kept.
        """
        async with self._uow_factory() as uow:
            posts_removed = await uow.posts.delete_by_user(user_id)
            profile_removed = await uow.profiles.delete_by_user(user_id)
            user_removed = await uow.users.delete(user_id)
            await uow.commit()

        logger.info(
            "account_deleted",
            user_id=str(user_id),
            posts_removed=posts_removed,
            profile_removed=profile_removed,
            user_removed=user_removed,
        )

    def _issue_token(self, user: User) -> str:
        return self._auth.create_token(TokenUser(id=user.id, email=user.email, name=user.name))
