from fastapi import APIRouter, Depends
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession
from comments.database import get_db
from comments.models import Comment
from comments.schemas import MetricsResponse
from comments.cache import cache

router = APIRouter(prefix="/api/v1/metrics", tags=["metrics"])

@router.get("", response_model=MetricsResponse)
async def get_metrics(db: AsyncSession = Depends(get_db)):

    total_comments = (await db.execute(select(func.count()).select_from(Comment))).scalar_one()

    total_videos = (
        await db.execute(select(func.count(func.distinct(Comment.video_id))))
    ).scalar_one()

    return MetricsResponse(
        total_comments=total_comments,
        total_videos=total_videos,
        cache_info=cache.stats,
    )
