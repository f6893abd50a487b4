"""Profile domain entities."""

from dataclasses import dataclass, field
from datetime import date, datetime
from uuid import UUID, uuid4

SOCIAL_NETWORKS = ("youtube", "twitter", "facebook", "instagram", "linkedin")


@dataclass
class SocialLinks:
    """Optional links to the owner's social network accounts."""

    youtube: str | None = None
    twitter: str | None = None
    facebook: str | None = None
    instagram: str | None = None
    linkedin: str | None = None


@dataclass
class Experience:
    """A job held by the profile owner."""

    title: str
    company: str
    from_date: date
    id: UUID = field(default_factory=uuid4)
    location: str | None = None
    to_date: date | None = None
    current: bool = False
    description: str | None = None


@dataclass
class Education:
    """A school attended by the profile owner."""

    school: str
    degree: str
    field_of_study: str
    from_date: date
    id: UUID = field(default_factory=uuid4)
    to_date: date | None = None
    current: bool = False
    description: str | None = None


@dataclass
class Profile:
    """Domain entity for a user's developer profile.

    Experience and education lists are kept newest first.
    """

    user_id: UUID
    status: str
    id: UUID = field(default_factory=uuid4)
    company: str | None = None
    website: str | None = None
    location: str | None = None
    bio: str | None = None
    github_username: str | None = None
    skills: list[str] = field(default_factory=list)
    social: SocialLinks = field(default_factory=SocialLinks)
    experience: list[Experience] = field(default_factory=list)
    education: list[Education] = field(default_factory=list)
    version: int = 1
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self) -> None:
        """Ensure updated_at is always at least as recent as created_at."""
        if self.updated_at < self.created_at:
            self.updated_at = self.created_at

    def add_experience(self, entry: Experience) -> None:
        """Prepend an experience entry."""
        self.experience.insert(0, entry)
        self.updated_at = datetime.utcnow()

    def remove_experience(self, entry_id: UUID) -> bool:
        """Remove the experience entry with ``entry_id``. Returns False if absent."""
        for index, entry in enumerate(self.experience):
            if entry.id == entry_id:
                del self.experience[index]
                self.updated_at = datetime.utcnow()
                return True
        return False

    def add_education(self, entry: Education) -> None:
        """Prepend an education entry."""
        self.education.insert(0, entry)
        self.updated_at = datetime.utcnow()

    def remove_education(self, entry_id: UUID) -> bool:
        """Remove the education entry with ``entry_id``. Returns False if absent."""
        for index, entry in enumerate(self.education):
            if entry.id == entry_id:
                del self.education[index]
                self.updated_at = datetime.utcnow()
                return True
        return False


@dataclass(frozen=True, slots=True)
class ProfileWithOwner:
    """Read-only value object: a Profile bundled with its owner's public identity."""

    profile: Profile
    name: str
    avatar: str | None
