"""Passthrough to the GitHub REST API for a user's latest repositories."""

from typing import Any

import httpx
import structlog

from core.config import settings
from core.exceptions import GitHubProfileNotFoundError, GitHubUnavailableError

logger = structlog.get_logger()


class GitHubService:
    """Fetch public repositories for a GitHub username."""

    def __init__(
        self,
        base_url: str = settings.github_api_url,
        token: str = settings.github_token,
        timeout: float = settings.github_timeout_seconds,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._token = token
        self._timeout = timeout
        self._transport = transport

    async def get_repos(self, username: str, per_page: int = 5) -> Any:
        """Return the upstream JSON for the user's oldest-first repositories."""
        headers = {
            "User-Agent": settings.app_name,
            "Accept": "application/vnd.github+json",
        }
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"

        params = {"per_page": per_page, "sort": "created", "direction": "asc"}

        try:
            async with httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                response = await client.get(
                    f"/users/{username}/repos", params=params, headers=headers
                )
        except httpx.HTTPError:
            logger.exception("github_request_failed", username=username)
            raise GitHubUnavailableError()

        if response.status_code != 200:
            logger.info(
                "github_profile_not_found",
                username=username,
                upstream_status=response.status_code,
            )
            raise GitHubProfileNotFoundError(username)

        return response.json()
