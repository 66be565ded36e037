"""
Comment service — maps request messages onto the comment DAO.

Every handler is a straight pipeline: unpack the request, call the DAO
with plain arguments, and pack the result into a response message.
DAO errors are not caught here.  ``CommentNotFoundError`` in particular
reaches the caller as the exact instance the DAO raised, so the HTTP
layer can turn it into a 404.
"""
import logging
import uuid

from comments.dao import CommentDAO, CommentNotFoundError
from comments.models import Comment
from comments.schemas import (
    CommentInfo,
    CreateCommentRequest,
    CreateCommentResponse,
    DeleteCommentRequest,
    DeleteCommentResponse,
    ListCommentRequest,
    ListCommentResponse,
    UpdateCommentRequest,
    UpdateCommentResponse,
)

logger = logging.getLogger(__name__)

__all__ = [
    "CommentNotFoundError",
    "CommentService",
    "InvalidCommentIDError",
    "comment_to_info",
]


class InvalidCommentIDError(ValueError):
    """Raised when a request carries an id that is not a UUID."""

    def __init__(self, raw_id: str) -> None:
        self.raw_id = raw_id
        super().__init__(f"invalid comment id: {raw_id!r}")


def comment_to_info(comment: Comment) -> CommentInfo:
    """Project a Comment onto its wire form."""
    return CommentInfo(
        id=str(comment.id),
        video_id=comment.video_id,
        content=comment.content,
    )


def _parse_id(raw_id: str) -> uuid.UUID:
    try:
        return uuid.UUID(raw_id)
    except ValueError:
        raise InvalidCommentIDError(raw_id) from None


class CommentService:
    """Request handlers for the comment API.

    Args:
        dao: Storage backend the handlers delegate to
    """

    def __init__(self, dao: CommentDAO) -> None:
        self.dao = dao

    async def list_comment(self, req: ListCommentRequest) -> ListCommentResponse:
        """List a video's comments in storage order.

        Raises:
            Exception: Whatever the DAO raised, unchanged
        """
        comments = await self.dao.list_by_video_id(req.video_id, req.limit, req.offset)
        return ListCommentResponse(comments=[comment_to_info(c) for c in comments])

    async def create_comment(self, req: CreateCommentRequest) -> CreateCommentResponse:
        """Create a comment; the DAO assigns its id.

        Raises:
            Exception: Whatever the DAO raised, unchanged
        """
        comment = Comment(video_id=req.video_id, content=req.content)
        comment_id = await self.dao.create(comment)
        logger.debug("Comment %s created on video %r", comment_id, req.video_id)
        return CreateCommentResponse(id=str(comment_id))

    async def update_comment(self, req: UpdateCommentRequest) -> UpdateCommentResponse:
        """Replace a comment's content.

        Raises:
            InvalidCommentIDError: If ``req.id`` is not a UUID
            CommentNotFoundError: If no comment has that id
        """
        comment = Comment(id=_parse_id(req.id), content=req.content)
        await self.dao.update(comment)
        return UpdateCommentResponse()

    async def delete_comment(self, req: DeleteCommentRequest) -> DeleteCommentResponse:
        """Delete a comment.

        Raises:
            InvalidCommentIDError: If ``req.id`` is not a UUID
            CommentNotFoundError: If no comment has that id
        """
        await self.dao.delete(_parse_id(req.id))
        return DeleteCommentResponse()
