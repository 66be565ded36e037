from fastapi import Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from comments.cache import cache
from comments.config import settings
from comments.dao import CachedCommentDAO, SQLCommentDAO
from comments.database import get_db
from comments.schemas import INT32_MAX
from comments.services.comment_service import CommentService


class ListParams:
    """
    Reusable FastAPI dependency that parses limit / offset query
    parameters for comment listings.

    Attributes
    ----------
    limit:
        Maximum number of comments to return, clamped to
        ``settings.MAX_LIST_LIMIT`` regardless of the value supplied.
    offset:
        Number of comments to skip from the oldest one.
    """

    def __init__(
        self,
        limit: int = Query(
            settings.DEFAULT_LIST_LIMIT,
            ge=1,
            description="Number of comments to return.",
        ),
        offset: int = Query(
            0,
            ge=0,
            le=INT32_MAX,
            description="Number of comments to skip.",
        ),
    ) -> None:
        self.limit = min(limit, settings.MAX_LIST_LIMIT)
        self.offset = offset


def get_comment_service(db: AsyncSession = Depends(get_db)) -> CommentService:
    """Build a CommentService over the request's session and the shared cache."""
    return CommentService(CachedCommentDAO(SQLCommentDAO(db), cache))
