from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime, Index, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from comments.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# ---------------------------------------------------------------------------
# Comment
# ---------------------------------------------------------------------------
class Comment(Base):
    """
    A comment attached to a video.

    ``id`` stays ``None`` on a freshly constructed instance; the uuid4
    default is applied by SQLAlchemy when the row is inserted.
    """

    __tablename__ = "comments"

    __table_args__ = (
        # Per-video listing in creation order
        Index("ix_comments_video_id_created_at", "video_id", "created_at"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    video_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    # Python-side timestamps keep microsecond ordering on every backend.
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, nullable=False
    )
    updated_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), onupdate=_utcnow, nullable=True
    )

    def __repr__(self) -> str:
        return f"<Comment id={self.id} video_id={self.video_id!r}>"
