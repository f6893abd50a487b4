"""Pydantic schemas for Profile API."""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class ProfileUpsert(BaseModel):
    """Schema for creating or updating a Profile.

    ``status`` and ``skills`` are checked by the service so that missing
    values are reported with the profile's own messages. ``skills`` is a
    comma-separated string.
    """

    status: str | None = Field(None, max_length=100)
    skills: str | None = Field(None, max_length=1000)
    company: str | None = Field(None, max_length=255)
    website: str | None = Field(None, max_length=500)
    location: str | None = Field(None, max_length=255)
    bio: str | None = None
    github_username: str | None = Field(None, max_length=100)
    youtube: str | None = Field(None, max_length=500)
    twitter: str | None = Field(None, max_length=500)
    facebook: str | None = Field(None, max_length=500)
    instagram: str | None = Field(None, max_length=500)
    linkedin: str | None = Field(None, max_length=500)


class ExperienceCreate(BaseModel):
    """Schema for adding an experience entry. Dates may be sent as ``from``/``to``."""

    model_config = ConfigDict(populate_by_name=True)

    title: str | None = Field(None, max_length=255)
    company: str | None = Field(None, max_length=255)
    location: str | None = Field(None, max_length=255)
    from_date: date | None = Field(None, alias="from")
    to_date: date | None = Field(None, alias="to")
    current: bool = False
    description: str | None = None


class EducationCreate(BaseModel):
    """Schema for adding an education entry. Dates may be sent as ``from``/``to``."""

    model_config = ConfigDict(populate_by_name=True)

    school: str | None = Field(None, max_length=255)
    degree: str | None = Field(None, max_length=255)
    field_of_study: str | None = Field(None, max_length=255)
    from_date: date | None = Field(None, alias="from")
    to_date: date | None = Field(None, alias="to")
    current: bool = False
    description: str | None = None


class SocialLinksResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    youtube: str | None = None
    twitter: str | None = None
    facebook: str | None = None
    instagram: str | None = None
    linkedin: str | None = None


class ExperienceResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    company: str
    location: str | None = None
    from_date: date
    to_date: date | None = None
    current: bool
    description: str | None = None


class EducationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    school: str
    degree: str
    field_of_study: str
    from_date: date
    to_date: date | None = None
    current: bool
    description: str | None = None


class ProfileOwnerResponse(BaseModel):
    """Public identity of a profile's owner."""

    id: UUID
    name: str
    avatar: str | None = None


class ProfileResponse(BaseModel):
    """Schema for Profile response."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    user: ProfileOwnerResponse | None = None
    status: str
    company: str | None = None
    website: str | None = None
    location: str | None = None
    bio: str | None = None
    github_username: str | None = None
    skills: list[str]
    social: SocialLinksResponse
    experience: list[ExperienceResponse]
    education: list[EducationResponse]
    created_at: datetime
    updated_at: datetime


class ProfileListResponse(BaseModel):
    """Schema for list of Profiles."""

    data: list[ProfileResponse]


class ProfileDetailResponse(BaseModel):
    """Schema for single Profile."""

    data: ProfileResponse
