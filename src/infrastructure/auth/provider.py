"""Authentication provider protocol and the identity carried by a token."""

from dataclasses import dataclass
from typing import Any, Optional, Protocol
from uuid import UUID


@dataclass
class TokenUser:
    """The user a valid token was issued to."""

    id: UUID
    email: str
    name: Optional[str] = None

    def to_claims(self) -> dict[str, Any]:
        """Identity claims to embed in a token."""
        return {"sub": str(self.id), "email": self.email, "name": self.name}

    @classmethod
    def from_claims(cls, claims: dict[str, Any]) -> Optional["TokenUser"]:
        """Rebuild the user from decoded claims.

        Returns None when ``sub`` or ``email`` is missing or ``sub`` is not
        a UUID.
        """
        subject = claims.get("sub")
        email = claims.get("email")
        if not subject or not email:
            return None

        try:
            user_id = UUID(str(subject))
        except ValueError:
            return None

        return cls(id=user_id, email=email, name=claims.get("name"))


class IAuthProvider(Protocol):
    """Protocol for authentication providers."""

    async def validate_token(self, token: str) -> Optional[TokenUser]:
        """
        Validate an authentication token.

        Args:
            token: The token to validate

        Returns:
            TokenUser if valid, None if invalid
        """
        ...

    def create_token(self, user: TokenUser) -> str:
        """
        Create an authentication token for a user.

        Args:
            user: The user to create a token for

        Returns:
            The generated token string
        """
        ...
