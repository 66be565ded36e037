"""
Comment DAO — persistence access for the Comment entity.

Design notes
------------
- ``CommentDAO`` is the capability the service layer depends on.  Any
  object with these four coroutines will do; tests hand the service an
  ``AsyncMock(spec=CommentDAO)``.
- ``SQLCommentDAO`` flushes but never commits; the transaction boundary
  belongs to the ``get_db`` dependency that owns the session.
- ``CachedCommentDAO`` wraps another DAO with a cache-aside layer for the
  list query.  Write operations pass straight through and then drop the
  affected cache pages.
- Errors are never translated here: whatever the database driver raises
  reaches the caller as-is.  The only error this module originates is
  ``CommentNotFoundError``.
"""
import logging
import uuid
from datetime import datetime
from typing import Protocol

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from comments.cache import CacheManager
from comments.config import settings
from comments.models import Comment

logger = logging.getLogger(__name__)


class CommentNotFoundError(Exception):
    """Raised when no comment exists with the requested id."""

    def __init__(self, comment_id: uuid.UUID | None = None) -> None:
        self.comment_id = comment_id
        if comment_id is None:
            super().__init__("comment not found")
        else:
            super().__init__(f"comment {comment_id} not found")


class CommentDAO(Protocol):
    async def list_by_video_id(self, video_id: str, limit: int, offset: int) -> list[Comment]:
        ...

    async def create(self, comment: Comment) -> uuid.UUID:
        ...

    async def update(self, comment: Comment) -> None:
        ...

    async def delete(self, comment_id: uuid.UUID) -> None:
        ...


# ---------------------------------------------------------------------------
# SQLAlchemy implementation
# ---------------------------------------------------------------------------

class SQLCommentDAO:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def list_by_video_id(self, video_id: str, limit: int, offset: int) -> list[Comment]:
        """
        Return the comments on *video_id* oldest first.

        A *limit* of zero or less returns every comment past *offset*.
        """
        q = (
            select(Comment)
            .where(Comment.video_id == video_id)
            .order_by(Comment.created_at, Comment.id)
            .offset(offset)
        )
        if limit > 0:
            q = q.limit(limit)
        result = await self.db.execute(q)
        return list(result.scalars().all())

    async def create(self, comment: Comment) -> uuid.UUID:
        self.db.add(comment)
        await self.db.flush()
        logger.debug("Created comment %s on video %r", comment.id, comment.video_id)
        return comment.id

    async def update(self, comment: Comment) -> None:
        q = (
            update(Comment)
            .where(Comment.id == comment.id)
            .values(content=comment.content)
        )
        result = await self.db.execute(q)
        if result.rowcount == 0:
            logger.info("Update of unknown comment %s", comment.id)
            raise CommentNotFoundError(comment.id)

    async def delete(self, comment_id: uuid.UUID) -> None:
        q = delete(Comment).where(Comment.id == comment_id)
        result = await self.db.execute(q)
        if result.rowcount == 0:
            logger.info("Delete of unknown comment %s", comment_id)
            raise CommentNotFoundError(comment_id)


# ---------------------------------------------------------------------------
# Cache-aside decorator
# ---------------------------------------------------------------------------

def _comment_to_dict(comment: Comment) -> dict:
    return {
        "id": str(comment.id),
        "video_id": comment.video_id,
        "content": comment.content,
        "created_at": comment.created_at.isoformat() if comment.created_at else None,
    }


def _comment_from_dict(data: dict) -> Comment:
    created_at = data.get("created_at")
    return Comment(
        id=uuid.UUID(data["id"]),
        video_id=data["video_id"],
        content=data["content"],
        created_at=datetime.fromisoformat(created_at) if created_at else None,
    )


class CachedCommentDAO:
    """Serve ``list_by_video_id`` from the cache when possible.

    Pages are invalidated after the base DAO flushes but before the
    request commits; a listing that lands in between can cache the
    pre-commit rows until ``ttl`` expires.
    """

    def __init__(self, base: CommentDAO, cache: CacheManager, ttl: int | None = None) -> None:
        self.base = base
        self.cache = cache
        self.ttl = settings.CACHE_TTL_LIST if ttl is None else ttl

    async def list_by_video_id(self, video_id: str, limit: int, offset: int) -> list[Comment]:
        key = self.cache.list_key(video_id, limit, offset)
        cached = await self.cache.get(key)
        if cached is not None:
            return [_comment_from_dict(c) for c in cached]

        comments = await self.base.list_by_video_id(video_id, limit, offset)
        await self.cache.set(key, [_comment_to_dict(c) for c in comments], ttl=self.ttl)
        return comments

    async def create(self, comment: Comment) -> uuid.UUID:
        comment_id = await self.base.create(comment)
        await self.cache.invalidate_comments(comment.video_id)
        return comment_id

    async def update(self, comment: Comment) -> None:
        # Only the id is known here, so every video's pages go.
        await self.base.update(comment)
        await self.cache.invalidate_comments()

    async def delete(self, comment_id: uuid.UUID) -> None:
        await self.base.delete(comment_id)
        await self.cache.invalidate_comments()
