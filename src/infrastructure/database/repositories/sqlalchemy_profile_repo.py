"""SQLAlchemy implementation of Profile repository."""

from datetime import date
from typing import Any
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.exc import StaleDataError

from core.exceptions import ConcurrentUpdateError
from domain.entities.profile import Education, Experience, Profile, SocialLinks
from infrastructure.database.models import ProfileModel


def _parse_date(value: str | None) -> date | None:
    return date.fromisoformat(value) if value else None


def _format_date(value: date | None) -> str | None:
    return value.isoformat() if value else None


class SQLAlchemyProfileRepository:
    """SQLAlchemy implementation of IProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_user(self, user_id: UUID) -> Profile | None:
        """Get the profile owned by a user."""
        model = await self._get_model_by_user(user_id)
        return self._to_entity(model) if model else None

    async def get_all(self) -> list[Profile]:
        """Get all profiles."""
        stmt = select(ProfileModel).order_by(ProfileModel.created_at)
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def create(self, profile: Profile) -> Profile:
        """Create a new profile."""
        model = self._to_model(profile)
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def update(self, profile: Profile) -> Profile:
        """Write back an existing profile.

        Raises ConcurrentUpdateError if the row changed since it was read.
        """
        stmt = select(ProfileModel).where(ProfileModel.id == profile.id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if not model:
            raise ValueError(f"Profile {profile.id} not found")
        if model.version != profile.version:
            raise ConcurrentUpdateError("profile", str(profile.id))

        model.status = profile.status
        model.company = profile.company
        model.website = profile.website
        model.location = profile.location
        model.bio = profile.bio
        model.github_username = profile.github_username
        model.skills = list(profile.skills)
        model.social = self._social_to_dict(profile.social)
        model.experience = [self._experience_to_dict(e) for e in profile.experience]
        model.education = [self._education_to_dict(e) for e in profile.education]
        model.updated_at = profile.updated_at

        try:
            await self._session.flush()
        except StaleDataError as e:
            raise ConcurrentUpdateError("profile", str(profile.id)) from e
        return self._to_entity(model)

    async def delete_by_user(self, user_id: UUID) -> bool:
        """Delete the profile owned by a user."""
        model = await self._get_model_by_user(user_id)

        if not model:
            return False

        await self._session.delete(model)
        await self._session.flush()
        return True

    async def _get_model_by_user(self, user_id: UUID) -> ProfileModel | None:
        stmt = select(ProfileModel).where(ProfileModel.user_id == user_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    @staticmethod
    def _social_to_dict(social: SocialLinks) -> dict[str, Any]:
        return {k: v for k, v in vars(social).items() if v}

    @staticmethod
    def _experience_to_dict(entry: Experience) -> dict[str, Any]:
        return {
            "id": str(entry.id),
            "title": entry.title,
            "company": entry.company,
            "location": entry.location,
            "from": _format_date(entry.from_date),
            "to": _format_date(entry.to_date),
            "current": entry.current,
            "description": entry.description,
        }

    @staticmethod
    def _education_to_dict(entry: Education) -> dict[str, Any]:
        return {
            "id": str(entry.id),
            "school": entry.school,
            "degree": entry.degree,
            "field_of_study": entry.field_of_study,
            "from": _format_date(entry.from_date),
            "to": _format_date(entry.to_date),
            "current": entry.current,
            "description": entry.description,
        }

    def _to_entity(self, model: ProfileModel) -> Profile:
        """Convert ORM model to domain entity."""
        return Profile(
            id=model.id,
            user_id=model.user_id,
            status=model.status,
            company=model.company,
            website=model.website,
            location=model.location,
            bio=model.bio,
            github_username=model.github_username,
            skills=list(model.skills or []),
            social=SocialLinks(**(model.social or {})),
            experience=[
                Experience(
                    id=UUID(item["id"]),
                    title=item["title"],
                    company=item["company"],
                    location=item.get("location"),
                    from_date=_parse_date(item["from"]),  # type: ignore[arg-type]
                    to_date=_parse_date(item.get("to")),
                    current=item.get("current", False),
                    description=item.get("description"),
                )
                for item in model.experience or []
            ],
            education=[
                Education(
                    id=UUID(item["id"]),
                    school=item["school"],
                    degree=item["degree"],
                    field_of_study=item["field_of_study"],
                    from_date=_parse_date(item["from"]),  # type: ignore[arg-type]
                    to_date=_parse_date(item.get("to")),
                    current=item.get("current", False),
                    description=item.get("description"),
                )
                for item in model.education or []
            ],
            version=model.version,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Profile) -> ProfileModel:
        """Convert domain entity to ORM model. The version is assigned on insert."""
        return ProfileModel(
            id=entity.id,
            user_id=entity.user_id,
            status=entity.status,
            company=entity.company,
            website=entity.website,
            location=entity.location,
            bio=entity.bio,
            github_username=entity.github_username,
            skills=list(entity.skills),
            social=self._social_to_dict(entity.social),
            experience=[self._experience_to_dict(e) for e in entity.experience],
            education=[self._education_to_dict(e) for e in entity.education],
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
