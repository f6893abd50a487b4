"""Profile service layer: upsert and experience/education editing."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

import structlog

from core.exceptions import (
    EducationNotFoundError,
    ExperienceNotFoundError,
    ProfileNotFoundError,
)
from domain.entities.profile import (
    SOCIAL_NETWORKS,
    Education,
    Experience,
    Profile,
    ProfileWithOwner,
    SocialLinks,
)
from domain.repositories.unit_of_work import IUnitOfWork
from domain.validation import require_fields

logger = structlog.get_logger()

# Scalar profile fields copied as-is when truthy
_PROFILE_FIELDS = ("company", "website", "location", "bio", "status", "github_username")


@dataclass
class ProfileFields:
    """Sparse input for creating or updating a profile.

    Falsy values (None, "") mean "not supplied".
    """

    status: str | None = None
    skills: str | None = None
    company: str | None = None
    website: str | None = None
    location: str | None = None
    bio: str | None = None
    github_username: str | None = None
    youtube: str | None = None
    twitter: str | None = None
    facebook: str | None = None
    instagram: str | None = None
    linkedin: str | None = None


def parse_skills(raw: str) -> list[str]:
    """Split a comma-delimited skills string into trimmed tokens.

    Order and duplicates are kept; tokens that are empty after trimming are
    dropped.
    """
    return [skill.strip() for skill in raw.split(",") if skill.strip()]


class ProfileService:
    """Service layer for Profile business logic."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def get_for_user(self, user_id: UUID) -> ProfileWithOwner:
        """Get a user's profile along with the owner's name and avatar."""
        async with self._uow_factory() as uow:
            profile = await uow.profiles.get_by_user(user_id)
            if not profile:
                raise ProfileNotFoundError(str(user_id))

            owners = await uow.users.get_many([user_id])
            return self._with_owner(profile, owners)

    async def list_all(self) -> list[ProfileWithOwner]:
        """Get every profile along with its owner's name and avatar."""
        async with self._uow_factory() as uow:
            profiles = await uow.profiles.get_all()
            owners = await uow.users.get_many([p.user_id for p in profiles])
            return [self._with_owner(profile, owners) for profile in profiles]

    async def upsert(self, user_id: UUID, fields: ProfileFields) -> Profile:
        """Create the user's profile, or merge the supplied fields into it.

        Only truthy fields are applied. The social sub-record is rebuilt from
        the supplied social fields and replaces the stored one.
        """
        require_fields(
            {"status": fields.status, "skills": fields.skills},
            {"status": "Status is required", "skills": "Skills is required"},
        )

        values = {
            name: getattr(fields, name) for name in _PROFILE_FIELDS if getattr(fields, name)
        }
        if fields.skills:
            values["skills"] = parse_skills(fields.skills)
        values["social"] = SocialLinks(
            **{name: getattr(fields, name) for name in SOCIAL_NETWORKS if getattr(fields, name)}
        )

        async with self._uow_factory() as uow:
            profile = await uow.profiles.get_by_user(user_id)

            if profile:
                for name, value in values.items():
                    setattr(profile, name, value)
                profile.updated_at = datetime.utcnow()
                saved = await uow.profiles.update(profile)
                event = "profile_updated"
            else:
                saved = await uow.profiles.create(Profile(user_id=user_id, **values))
                event = "profile_created"

            await uow.commit()

            logger.info(event, profile_id=str(saved.id), user_id=str(user_id))
            return saved

    async def add_experience(
        self,
        user_id: UUID,
        title: str | None,
        company: str | None,
        from_date: date | None,
        location: str | None = None,
        to_date: date | None = None,
        current: bool = False,
        description: str | None = None,
    ) -> Profile:
        """Prepend an experience entry to the user's own profile."""
        require_fields(
            {"title": title, "company": company, "from_date": from_date},
            {
                "title": "Title is required",
                "company": "Company is required",
                "from_date": "From date is required",
            },
        )
        entry = Experience(
            title=title,  # type: ignore[arg-type]
            company=company,  # type: ignore[arg-type]
            from_date=from_date,  # type: ignore[arg-type]
            location=location,
            to_date=to_date,
            current=current,
            description=description,
        )

        async with self._uow_factory() as uow:
            profile = await uow.profiles.get_by_user(user_id)
            if not profile:
                raise ProfileNotFoundError(str(user_id))

            profile.add_experience(entry)
            updated = await uow.profiles.update(profile)
            await uow.commit()
            return updated

    async def remove_experience(self, user_id: UUID, experience_id: UUID) -> Profile:
        """Remove one experience entry, matched by its id."""
        async with self._uow_factory() as uow:
            profile = await uow.profiles.get_by_user(user_id)
            if not profile:
                raise ProfileNotFoundError(str(user_id))

            if not profile.remove_experience(experience_id):
                raise ExperienceNotFoundError(str(experience_id))

            updated = await uow.profiles.update(profile)
            await uow.commit()
            return updated

    async def add_education(
        self,
        user_id: UUID,
        school: str | None,
        degree: str | None,
        field_of_study: str | None,
        from_date: date | None,
        to_date: date | None = None,
        current: bool = False,
        description: str | None = None,
    ) -> Profile:
        """Prepend an education entry to the user's own profile."""
        require_fields(
            {
                "school": school,
                "degree": degree,
                "field_of_study": field_of_study,
                "from_date": from_date,
            },
            {
                "school": "School is required",
                "degree": "Degree is required",
                "field_of_study": "Field of study is required",
                "from_date": "From date is required",
            },
        )
        entry = Education(
            school=school,  # type: ignore[arg-type]
            degree=degree,  # type: ignore[arg-type]
            field_of_study=field_of_study,  # type: ignore[arg-type]
            from_date=from_date,  # type: ignore[arg-type]
            to_date=to_date,
            current=current,
            description=description,
        )

        async with self._uow_factory() as uow:
            profile = await uow.profiles.get_by_user(user_id)
            if not profile:
                raise ProfileNotFoundError(str(user_id))

            profile.add_education(entry)
            updated = await uow.profiles.update(profile)
            await uow.commit()
            return updated

    async def remove_education(self, user_id: UUID, education_id: UUID) -> Profile:
        """Remove one education entry, matched by its id."""
        async with self._uow_factory() as uow:
            profile = await uow.profiles.get_by_user(user_id)
            if not profile:
                raise ProfileNotFoundError(str(user_id))

            if not profile.remove_education(education_id):
                raise EducationNotFoundError(str(education_id))

            updated = await uow.profiles.update(profile)
            await uow.commit()
            return updated

    @staticmethod
    def _with_owner(profile: Profile, owners: dict) -> ProfileWithOwner:
        owner = owners.get(profile.user_id)
        return ProfileWithOwner(
            profile=profile,
            name=owner.name if owner else "",
            avatar=owner.avatar if owner else None,
        )
