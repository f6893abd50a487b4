"""Integration tests for Profile API."""

from uuid import uuid4

import httpx
import pytest
from httpx import AsyncClient

PROFILE = {
    "status": "Developer",
    "skills": "python, fastapi , sql",
    "company": "Acme",
    "bio": "Writes code",
    "github_username": "octocat",
    "twitter": "https://twitter.com/jane",
}


async def _create_profile(client: AsyncClient, headers: dict[str, str], **overrides) -> dict:
    response = await client.post("/api/v1/profile", json={**PROFILE, **overrides}, headers=headers)
    assert response.status_code == 200, response.text
    return response.json()["data"]


class TestProfileUpsertAPI:
    @pytest.mark.asyncio
    async def test_create_profile(self, client: AsyncClient, user) -> None:
        """Test POST /api/v1/profile creates the profile."""
        data = await _create_profile(client, user.headers)

        assert data["user_id"] == str(user.id)
        assert data["status"] == "Developer"
        assert data["skills"] == ["python", "fastapi", "sql"]
        assert data["social"]["twitter"] == "https://twitter.com/jane"
        assert data["experience"] == []
        assert data["education"] == []

    @pytest.mark.asyncio
    async def test_missing_status_and_skills(self, client: AsyncClient, user) -> None:
        response = await client.post(
            "/api/v1/profile", json={"company": "Acme"}, headers=user.headers
        )

        assert response.status_code == 422
        details = response.json()["details"]
        assert [d["message"] for d in details] == ["Status is required", "Skills is required"]

    @pytest.mark.asyncio
    async def test_update_merges_fields(self, client: AsyncClient, user) -> None:
        created = await _create_profile(client, user.headers)

        response = await client.post(
            "/api/v1/profile",
            json={"status": "Lead", "skills": "go", "company": "", "linkedin": "https://li/jane"},
            headers=user.headers,
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["id"] == created["id"]
        assert data["status"] == "Lead"
        assert data["skills"] == ["go"]
        assert data["company"] == "Acme"
        assert data["bio"] == "Writes code"
        assert data["social"]["linkedin"] == "https://li/jane"
        assert data["social"]["twitter"] is None


class TestProfileReadAPI:
    @pytest.mark.asyncio
    async def test_get_my_profile(self, client: AsyncClient, user) -> None:
        await _create_profile(client, user.headers)

        response = await client.get("/api/v1/profile/me", headers=user.headers)

        assert response.status_code == 200
        owner = response.json()["data"]["user"]
        assert owner["name"] == "Jane Doe"
        assert owner["id"] == str(user.id)

    @pytest.mark.asyncio
    async def test_get_my_profile_when_missing(self, client: AsyncClient, user) -> None:
        response = await client.get("/api/v1/profile/me", headers=user.headers)

        assert response.status_code == 404
        assert response.json()["message"] == "There is no profile for this user"

    @pytest.mark.asyncio
    async def test_list_profiles_is_public(self, client: AsyncClient, user, other_user) -> None:
        await _create_profile(client, user.headers)
        await _create_profile(client, other_user.headers, status="Student")

        response = await client.get("/api/v1/profile")

        assert response.status_code == 200
        names = {p["user"]["name"] for p in response.json()["data"]}
        assert names == {"Jane Doe", "John Smith"}

    @pytest.mark.asyncio
    async def test_get_profile_by_user(self, client: AsyncClient, user) -> None:
        await _create_profile(client, user.headers)

        response = await client.get(f"/api/v1/profile/user/{user.id}")

        assert response.status_code == 200
        assert response.json()["data"]["user_id"] == str(user.id)

    @pytest.mark.asyncio
    async def test_get_profile_by_unknown_user(self, client: AsyncClient) -> None:
        response = await client.get(f"/api/v1/profile/user/{uuid4()}")

        assert response.status_code == 404


class TestExperienceAPI:
    @pytest.mark.asyncio
    async def test_add_and_remove(self, client: AsyncClient, user) -> None:
        await _create_profile(client, user.headers)
        for title in ("First", "Second", "Third"):
            response = await client.put(
                "/api/v1/profile/experience",
                json={"title": title, "company": "Acme", "from": "2020-01-01"},
                headers=user.headers,
            )
            assert response.status_code == 200

        entries = response.json()["data"]["experience"]
        assert [e["title"] for e in entries] == ["Third", "Second", "First"]

        removed = await client.delete(
            f"/api/v1/profile/experience/{entries[1]['id']}", headers=user.headers
        )

        assert removed.status_code == 200
        assert [e["title"] for e in removed.json()["data"]["experience"]] == ["Third", "First"]

    @pytest.mark.asyncio
    async def test_add_reports_missing_fields(self, client: AsyncClient, user) -> None:
        await _create_profile(client, user.headers)

        response = await client.put(
            "/api/v1/profile/experience", json={"title": "Engineer"}, headers=user.headers
        )

        assert response.status_code == 422
        assert [d["field"] for d in response.json()["details"]] == ["company", "from_date"]

    @pytest.mark.asyncio
    async def test_add_without_profile(self, client: AsyncClient, user) -> None:
        response = await client.put(
            "/api/v1/profile/experience",
            json={"title": "Engineer", "company": "Acme", "from": "2020-01-01"},
            headers=user.headers,
        )

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_remove_unknown_entry(self, client: AsyncClient, user) -> None:
        await _create_profile(client, user.headers)

        response = await client.delete(
            f"/api/v1/profile/experience/{uuid4()}", headers=user.headers
        )

        assert response.status_code == 404


class TestEducationAPI:
    @pytest.mark.asyncio
    async def test_add_and_remove(self, client: AsyncClient, user) -> None:
        await _create_profile(client, user.headers)
        body = {
            "school": "State University",
            "degree": "BSc",
            "field_of_study": "Computer Science",
            "from": "2014-09-01",
            "to": "2018-06-01",
        }

        added = await client.put("/api/v1/profile/education", json=body, headers=user.headers)

        assert added.status_code == 200
        entry = added.json()["data"]["education"][0]
        assert entry["to_date"] == "2018-06-01"

        removed = await client.delete(
            f"/api/v1/profile/education/{entry['id']}", headers=user.headers
        )

        assert removed.status_code == 200
        assert removed.json()["data"]["education"] == []


class TestDeleteAccountAPI:
    @pytest.mark.asyncio
    async def test_removes_posts_profile_and_user(
        self, client: AsyncClient, user, other_user
    ) -> None:
        await _create_profile(client, user.headers)
        own = await client.post("/api/v1/posts", json={"text": "mine"}, headers=user.headers)
        theirs = await client.post(
            "/api/v1/posts", json={"text": "theirs"}, headers=other_user.headers
        )
        theirs_id = theirs.json()["data"]["id"]
        await client.put(f"/api/v1/posts/like/{theirs_id}", headers=user.headers)

        response = await client.delete("/api/v1/profile", headers=user.headers)

        assert response.status_code == 200
        assert response.json()["message"] == "User deleted"

        posts = await client.get("/api/v1/posts", headers=other_user.headers)
        ids = [p["id"] for p in posts.json()["data"]]
        assert ids == [theirs_id]
        assert own.json()["data"]["id"] not in ids
        # Likes left on other people's posts stay
        assert posts.json()["data"][0]["likes"] == [{"user_id": str(user.id)}]

        profile = await client.get(f"/api/v1/profile/user/{user.id}")
        assert profile.status_code == 404

        login = await client.post(
            "/api/v1/auth", json={"email": user.email, "password": "secret123"}
        )
        assert login.status_code == 400

    @pytest.mark.asyncio
    async def test_deleting_empty_account_succeeds(self, client: AsyncClient, user) -> None:
        first = await client.delete("/api/v1/profile", headers=user.headers)
        second = await client.delete("/api/v1/profile", headers=user.headers)

        assert first.status_code == 200
        assert second.status_code == 200


class TestGitHubAPI:
    @pytest.fixture
    def github_handler(self):
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path == "/users/ghost/repos":
                return httpx.Response(404, json={"message": "Not Found"})
            return httpx.Response(200, json=[{"name": "hello-world"}])

        return handler

    @pytest.mark.asyncio
    async def test_passes_upstream_json_through(self, client: AsyncClient) -> None:
        response = await client.get("/api/v1/profile/github/octocat")

        assert response.status_code == 200
        assert response.json() == [{"name": "hello-world"}]

    @pytest.mark.asyncio
    async def test_unknown_username(self, client: AsyncClient) -> None:
        response = await client.get("/api/v1/profile/github/ghost")

        assert response.status_code == 404
        assert response.json()["message"] == "No Github profile found"
