"""Post domain entities."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4


@dataclass
class Like:
    """A user's endorsement of a post."""

    user_id: UUID


@dataclass
class Comment:
    """A comment attached to a post, with a snapshot of its author."""

    user_id: UUID
    text: str
    name: str
    id: UUID = field(default_factory=uuid4)
    avatar: str | None = None
    date: datetime = field(default_factory=datetime.utcnow)


@dataclass
class Post:
    """Domain entity for a Post.

    ``name`` and ``avatar`` are copied from the author at creation time and
    are not re-synced afterwards. Likes and comments are kept newest first.
    """

    user_id: UUID
    text: str
    name: str
    id: UUID = field(default_factory=uuid4)
    avatar: str | None = None
    likes: list[Like] = field(default_factory=list)
    comments: list[Comment] = field(default_factory=list)
    version: int = 1
    date: datetime = field(default_factory=datetime.utcnow)

    def is_liked_by(self, user_id: UUID) -> bool:
        """Check whether ``user_id`` already has a like on this post."""
        return any(like.user_id == user_id for like in self.likes)

    def add_like(self, user_id: UUID) -> bool:
        """Prepend a like for ``user_id``. Returns False if one already exists."""
        if self.is_liked_by(user_id):
            return False
        self.likes.insert(0, Like(user_id=user_id))
        return True

    def remove_like(self, user_id: UUID) -> bool:
        """Remove the first like by ``user_id``. Returns False if there is none."""
        for index, like in enumerate(self.likes):
            if like.user_id == user_id:
                del self.likes[index]
                return True
        return False

    def add_comment(self, comment: Comment) -> None:
        """Prepend a comment."""
        self.comments.insert(0, comment)

    def find_comment(self, comment_id: UUID) -> Comment | None:
        """Get a comment by its id."""
        return next((c for c in self.comments if c.id == comment_id), None)

    def remove_comment(self, comment_id: UUID) -> bool:
        """Remove the comment with ``comment_id``. Returns False if absent."""
        for index, comment in enumerate(self.comments):
            if comment.id == comment_id:
                del self.comments[index]
                return True
        return False
