"""Unit tests for the GitHub repository passthrough."""

import httpx
import pytest

from core.exceptions import GitHubProfileNotFoundError, GitHubUnavailableError
from domain.services.github_service import GitHubService


def _service(handler, token: str = "") -> GitHubService:
    return GitHubService(
        base_url="https://api.github.test",
        token=token,
        timeout=1.0,
        transport=httpx.MockTransport(handler),
    )


class TestGitHubServiceGetRepos:
    @pytest.mark.asyncio
    async def test_returns_upstream_json_unchanged(self) -> None:
        repos = [{"name": "first", "stargazers_count": 3}, {"name": "second"}]
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=repos)

        result = await _service(handler).get_repos("octocat")

        assert result == repos
        request = seen[0]
        assert request.url.path == "/users/octocat/repos"
        assert request.url.params["per_page"] == "5"
        assert request.url.params["sort"] == "created"
        assert request.url.params["direction"] == "asc"
        assert request.headers["user-agent"]
        assert "authorization" not in request.headers

    @pytest.mark.asyncio
    async def test_sends_token_when_configured(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=[])

        await _service(handler, token="ghp_test").get_repos("octocat")

        assert seen[0].headers["authorization"] == "Bearer ghp_test"

    @pytest.mark.asyncio
    async def test_non_200_is_profile_not_found(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404, json={"message": "Not Found"})

        with pytest.raises(GitHubProfileNotFoundError) as exc_info:
            await _service(handler).get_repos("nobody")

        assert exc_info.value.message == "No Github profile found"
        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    async def test_transport_failure_is_upstream_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(GitHubUnavailableError) as exc_info:
            await _service(handler).get_repos("octocat")

        assert exc_info.value.status_code == 502
