"""Unit tests for Profile service layer."""

from datetime import date
from uuid import UUID, uuid4

import pytest

from core.exceptions import (
    EducationNotFoundError,
    ExperienceNotFoundError,
    ProfileNotFoundError,
    ValidationError,
)
from domain.entities.profile import Education, Experience, Profile, SocialLinks
from domain.entities.user import User
from domain.services.profile_service import ProfileFields, ProfileService, parse_skills
from tests.unit.conftest import FakeUnitOfWork


@pytest.fixture
def service(uow: FakeUnitOfWork) -> ProfileService:
    """Create service with fake UoW."""
    return ProfileService(lambda: uow)


@pytest.fixture
def sample_profile(user_id: UUID) -> Profile:
    return Profile(
        user_id=user_id,
        status="Developer",
        company="Acme",
        bio="Writes code",
        skills=["python"],
        social=SocialLinks(twitter="https://twitter.com/jane"),
    )


class TestParseSkills:
    def test_trims_tokens(self) -> None:
        assert parse_skills("a, b , c") == ["a", "b", "c"]

    def test_drops_empty_tokens(self) -> None:
        assert parse_skills("a,,b, ,") == ["a", "b"]

    def test_keeps_order_and_duplicates(self) -> None:
        assert parse_skills("go, python, go") == ["go", "python", "go"]


class TestProfileServiceGet:
    @pytest.mark.asyncio
    async def test_returns_profile_with_owner(
        self,
        service: ProfileService,
        uow: FakeUnitOfWork,
        user_id: UUID,
        author: User,
        sample_profile: Profile,
    ) -> None:
        uow.profiles.get_by_user.return_value = sample_profile
        uow.users.get_many.return_value = {user_id: author}

        result = await service.get_for_user(user_id)

        assert result.profile is sample_profile
        assert result.name == "Jane Doe"
        assert result.avatar == author.avatar

    @pytest.mark.asyncio
    async def test_raises_when_no_profile(
        self, service: ProfileService, uow: FakeUnitOfWork, user_id: UUID
    ) -> None:
        uow.profiles.get_by_user.return_value = None

        with pytest.raises(ProfileNotFoundError) as exc_info:
            await service.get_for_user(user_id)

        assert exc_info.value.message == "There is no profile for this user"

    @pytest.mark.asyncio
    async def test_list_all_loads_owners_in_one_call(
        self, service: ProfileService, uow: FakeUnitOfWork, user_id: UUID, author: User
    ) -> None:
        orphan = Profile(user_id=uuid4(), status="Student")
        profiles = [Profile(user_id=user_id, status="Developer"), orphan]
        uow.profiles.get_all.return_value = profiles
        uow.users.get_many.return_value = {user_id: author}

        result = await service.list_all()

        uow.users.get_many.assert_called_once_with([user_id, orphan.user_id])
        assert [item.name for item in result] == ["Jane Doe", ""]


class TestProfileServiceUpsert:
    @pytest.mark.asyncio
    async def test_creates_profile(
        self, service: ProfileService, uow: FakeUnitOfWork, user_id: UUID
    ) -> None:
        uow.profiles.get_by_user.return_value = None
        uow.profiles.create.side_effect = lambda profile: profile

        result = await service.upsert(
            user_id,
            ProfileFields(status="Developer", skills="a, b , c", youtube="https://yt/jane"),
        )

        assert result.user_id == user_id
        assert result.skills == ["a", "b", "c"]
        assert result.social.youtube == "https://yt/jane"
        assert uow.committed

    @pytest.mark.asyncio
    async def test_reports_every_missing_required_field(
        self, service: ProfileService, uow: FakeUnitOfWork, user_id: UUID
    ) -> None:
        with pytest.raises(ValidationError) as exc_info:
            await service.upsert(user_id, ProfileFields(company="Acme"))

        assert exc_info.value.details == [
            {"field": "status", "message": "Status is required"},
            {"field": "skills", "message": "Skills is required"},
        ]
        uow.profiles.get_by_user.assert_not_called()

    @pytest.mark.asyncio
    async def test_empty_fields_do_not_clear_stored_values(
        self,
        service: ProfileService,
        uow: FakeUnitOfWork,
        user_id: UUID,
        sample_profile: Profile,
    ) -> None:
        uow.profiles.get_by_user.return_value = sample_profile

        result = await service.upsert(
            user_id,
            ProfileFields(status="Senior Developer", skills="python, sql", company="", bio=None),
        )

        assert result.status == "Senior Developer"
        assert result.skills == ["python", "sql"]
        assert result.company == "Acme"
        assert result.bio == "Writes code"
        uow.profiles.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_social_links_are_replaced(
        self,
        service: ProfileService,
        uow: FakeUnitOfWork,
        user_id: UUID,
        sample_profile: Profile,
    ) -> None:
        """Test links not sent on update are dropped from the stored profile."""
        uow.profiles.get_by_user.return_value = sample_profile

        result = await service.upsert(
            user_id,
            ProfileFields(status="Developer", skills="python", linkedin="https://li/jane"),
        )

        assert result.social == SocialLinks(linkedin="https://li/jane")


class TestProfileServiceExperience:
    @pytest.mark.asyncio
    async def test_add_prepends(
        self,
        service: ProfileService,
        uow: FakeUnitOfWork,
        user_id: UUID,
        sample_profile: Profile,
    ) -> None:
        older = Experience(title="Intern", company="Acme", from_date=date(2018, 1, 1))
        sample_profile.experience = [older]
        uow.profiles.get_by_user.return_value = sample_profile

        result = await service.add_experience(
            user_id, title="Engineer", company="Globex", from_date=date(2020, 5, 1)
        )

        assert [e.title for e in result.experience] == ["Engineer", "Intern"]
        assert uow.committed

    @pytest.mark.asyncio
    async def test_add_reports_all_missing_fields(
        self, service: ProfileService, uow: FakeUnitOfWork, user_id: UUID
    ) -> None:
        with pytest.raises(ValidationError) as exc_info:
            await service.add_experience(user_id, title="", company=None, from_date=None)

        assert [e["field"] for e in exc_info.value.details] == ["title", "company", "from_date"]

    @pytest.mark.asyncio
    async def test_add_without_profile(
        self, service: ProfileService, uow: FakeUnitOfWork, user_id: UUID
    ) -> None:
        uow.profiles.get_by_user.return_value = None

        with pytest.raises(ProfileNotFoundError):
            await service.add_experience(
                user_id, title="Engineer", company="Globex", from_date=date(2020, 5, 1)
            )

    @pytest.mark.asyncio
    async def test_remove_keeps_order_of_the_rest(
        self,
        service: ProfileService,
        uow: FakeUnitOfWork,
        user_id: UUID,
        sample_profile: Profile,
    ) -> None:
        entries = [
            Experience(title=f"Job {i}", company="Acme", from_date=date(2020, 1, 1))
            for i in range(4)
        ]
        sample_profile.experience = list(entries)
        uow.profiles.get_by_user.return_value = sample_profile

        result = await service.remove_experience(user_id, entries[1].id)

        assert result.experience == [entries[0], entries[2], entries[3]]

    @pytest.mark.asyncio
    async def test_remove_unknown_id(
        self,
        service: ProfileService,
        uow: FakeUnitOfWork,
        user_id: UUID,
        sample_profile: Profile,
    ) -> None:
        uow.profiles.get_by_user.return_value = sample_profile

        with pytest.raises(ExperienceNotFoundError):
            await service.remove_experience(user_id, uuid4())

        uow.profiles.update.assert_not_called()


class TestProfileServiceEducation:
    @pytest.mark.asyncio
    async def test_add_prepends(
        self,
        service: ProfileService,
        uow: FakeUnitOfWork,
        user_id: UUID,
        sample_profile: Profile,
    ) -> None:
        uow.profiles.get_by_user.return_value = sample_profile

        result = await service.add_education(
            user_id,
            school="State University",
            degree="BSc",
            field_of_study="Computer Science",
            from_date=date(2014, 9, 1),
            to_date=date(2018, 6, 1),
        )

        assert result.education[0].school == "State University"
        assert result.education[0].to_date == date(2018, 6, 1)

    @pytest.mark.asyncio
    async def test_add_reports_all_missing_fields(
        self, service: ProfileService, uow: FakeUnitOfWork, user_id: UUID
    ) -> None:
        with pytest.raises(ValidationError) as exc_info:
            await service.add_education(
                user_id, school=None, degree=None, field_of_study=None, from_date=None
            )

        assert len(exc_info.value.details) == 4

    @pytest.mark.asyncio
    async def test_remove_uses_education_id(
        self,
        service: ProfileService,
        uow: FakeUnitOfWork,
        user_id: UUID,
        sample_profile: Profile,
    ) -> None:
        keep = Education(school="A", degree="BSc", field_of_study="CS", from_date=date(2010, 1, 1))
        drop = Education(school="B", degree="MSc", field_of_study="CS", from_date=date(2014, 1, 1))
        sample_profile.education = [drop, keep]
        uow.profiles.get_by_user.return_value = sample_profile

        result = await service.remove_education(user_id, drop.id)

        assert result.education == [keep]

    @pytest.mark.asyncio
    async def test_remove_unknown_id(
        self,
        service: ProfileService,
        uow: FakeUnitOfWork,
        user_id: UUID,
        sample_profile: Profile,
    ) -> None:
        uow.profiles.get_by_user.return_value = sample_profile

        with pytest.raises(EducationNotFoundError):
            await service.remove_education(user_id, uuid4())
