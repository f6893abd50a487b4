"""Post service layer: posts, likes and comments."""

from collections.abc import Callable
from uuid import UUID

import structlog

from core.exceptions import (
    CommentNotFoundError,
    NotAuthorizedError,
    PostAlreadyLikedError,
    PostNotFoundError,
    PostNotLikedError,
    UserNotFoundError,
)
from domain.entities.post import Comment, Like, Post
from domain.repositories.unit_of_work import IUnitOfWork
from domain.validation import require_fields

logger = structlog.get_logger()


class PostService:
    """Service layer for Post business logic.

    Every mutation reads the post, changes its embedded lists in memory and
    writes the whole document back inside one unit of work. The repository
    rejects the write if the post changed since it was read.
    """

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def create(self, user_id: UUID, text: str) -> Post:
        """Create a post, snapshotting the author's name and avatar."""
        require_fields({"text": text}, {"text": "Text is required"})

        async with self._uow_factory() as uow:
            user = await uow.users.get(user_id)
            if not user:
                raise UserNotFoundError(str(user_id))

            post = Post(
                user_id=user_id,
                text=text,
                name=user.name,
                avatar=user.avatar,
            )
            created = await uow.posts.create(post)
            await uow.commit()

            logger.info("post_created", post_id=str(created.id), user_id=str(user_id))
            return created

    async def list_all(self) -> list[Post]:
        """Get all posts, newest first."""
        async with self._uow_factory() as uow:
            return await uow.posts.get_all()  # type: ignore[no-any-return]

    async def get_by_id(self, post_id: UUID) -> Post:
        """Get a single post."""
        async with self._uow_factory() as uow:
            post = await uow.posts.get(post_id)
            if not post:
                raise PostNotFoundError(str(post_id))
            return post

    async def delete(self, post_id: UUID, user_id: UUID) -> None:
        """Delete a post. Only its author may do so."""
        async with self._uow_factory() as uow:
            post = await uow.posts.get(post_id)
            if not post:
                raise PostNotFoundError(str(post_id))
            if post.user_id != user_id:
                raise NotAuthorizedError()

            await uow.posts.delete(post_id)
            await uow.commit()

            logger.info("post_deleted", post_id=str(post_id), user_id=str(user_id))

    async def like(self, post_id: UUID, user_id: UUID) -> list[Like]:
        """Add the user's like to a post. A user can like a post only once."""
        async with self._uow_factory() as uow:
            post = await uow.posts.get(post_id)
            if not post:
                raise PostNotFoundError(str(post_id))

            if not post.add_like(user_id):
                raise PostAlreadyLikedError(str(post_id))

            updated = await uow.posts.update(post)
            await uow.commit()
            return updated.likes

    async def unlike(self, post_id: UUID, user_id: UUID) -> list[Like]:
        """Remove the user's like from a post."""
        async with self._uow_factory() as uow:
            post = await uow.posts.get(post_id)
            if not post:
                raise PostNotFoundError(str(post_id))

            if not post.remove_like(user_id):
                raise PostNotLikedError(str(post_id))

            updated = await uow.posts.update(post)
            await uow.commit()
            return updated.likes

    async def add_comment(self, post_id: UUID, user_id: UUID, text: str) -> list[Comment]:
        """Prepend a comment by the user and return the post's comments."""
        require_fields({"text": text}, {"text": "Text is required"})

        async with self._uow_factory() as uow:
            post = await uow.posts.get(post_id)
            if not post:
                raise PostNotFoundError(str(post_id))

            user = await uow.users.get(user_id)
            if not user:
                raise UserNotFoundError(str(user_id))

            post.add_comment(
                Comment(
                    user_id=user_id,
                    text=text,
                    name=user.name,
                    avatar=user.avatar,
                )
            )
            updated = await uow.posts.update(post)
            await uow.commit()
            return updated.comments

    async def delete_comment(
        self, post_id: UUID, comment_id: UUID, user_id: UUID
    ) -> list[Comment]:
        """Remove a comment. Only the comment's author may do so."""
        async with self._uow_factory() as uow:
            post = await uow.posts.get(post_id)
            if not post:
                raise PostNotFoundError(str(post_id))

            comment = post.find_comment(comment_id)
            if not comment:
                raise CommentNotFoundError(str(comment_id))
            if comment.user_id != user_id:
                raise NotAuthorizedError()

            post.remove_comment(comment_id)
            updated = await uow.posts.update(post)
            await uow.commit()
            return updated.comments
