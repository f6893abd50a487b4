"""SQLAlchemy implementation of Post repository."""

from datetime import datetime
from typing import Any
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.exc import StaleDataError

from core.exceptions import ConcurrentUpdateError
from domain.entities.post import Comment, Like, Post
from infrastructure.database.models import PostModel


class SQLAlchemyPostRepository:
    """SQLAlchemy implementation of IPostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: UUID) -> Post | None:
        """Get a post by ID."""
        stmt = select(PostModel).where(PostModel.id == id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_all(self) -> list[Post]:
        """Get all posts, newest first."""
        stmt = select(PostModel).order_by(PostModel.date.desc())
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def create(self, post: Post) -> Post:
        """Create a new post."""
        model = self._to_model(post)
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def update(self, post: Post) -> Post:
        """Write back an existing post's text, likes and comments.

        Raises ConcurrentUpdateError if the row changed since it was read.
        """
        stmt = select(PostModel).where(PostModel.id == post.id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if not model:
            raise ValueError(f"Post {post.id} not found")
        if model.version != post.version:
            raise ConcurrentUpdateError("post", str(post.id))

        model.text = post.text
        model.likes = [{"user": str(like.user_id)} for like in post.likes]
        model.comments = [self._comment_to_dict(c) for c in post.comments]

        try:
            await self._session.flush()
        except StaleDataError as e:
            raise ConcurrentUpdateError("post", str(post.id)) from e
        return self._to_entity(model)

    async def delete(self, id: UUID) -> bool:
        """Delete a post."""
        stmt = select(PostModel).where(PostModel.id == id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if not model:
            return False

        await self._session.delete(model)
        await self._session.flush()
        return True

    async def delete_by_user(self, user_id: UUID) -> int:
        """Delete every post authored by a user."""
        stmt = delete(PostModel).where(PostModel.user_id == user_id)
        result = await self._session.execute(stmt)
        await self._session.flush()
        return result.rowcount or 0

    @staticmethod
    def _comment_to_dict(comment: Comment) -> dict[str, Any]:
        return {
            "id": str(comment.id),
            "user": str(comment.user_id),
            "text": comment.text,
            "name": comment.name,
            "avatar": comment.avatar,
            "date": comment.date.isoformat(),
        }

    def _to_entity(self, model: PostModel) -> Post:
        """Convert ORM model to domain entity."""
        return Post(
            id=model.id,
            user_id=model.user_id,
            text=model.text,
            name=model.name,
            avatar=model.avatar,
            likes=[Like(user_id=UUID(item["user"])) for item in model.likes or []],
            comments=[
                Comment(
                    id=UUID(item["id"]),
                    user_id=UUID(item["user"]),
                    text=item["text"],
                    name=item["name"],
                    avatar=item.get("avatar"),
                    date=datetime.fromisoformat(item["date"]),
                )
                for item in model.comments or []
            ],
            version=model.version,
            date=model.date,
        )

    def _to_model(self, entity: Post) -> PostModel:
        """Convert domain entity to ORM model. The version is assigned on insert."""
        return PostModel(
            id=entity.id,
            user_id=entity.user_id,
            text=entity.text,
            name=entity.name,
            avatar=entity.avatar,
            likes=[{"user": str(like.user_id)} for like in entity.likes],
            comments=[self._comment_to_dict(c) for c in entity.comments],
            date=entity.date,
        )
