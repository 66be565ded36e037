import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from comments.cache import cache
from comments.config import settings
from comments.routers import comments, metrics

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        await cache.connect()
    except Exception as exc:
        # The DAO stack works without Redis.
        logger.warning("Cache unavailable: %s", exc)
    yield
    # Shutdown
    await cache.disconnect()

app = FastAPI(
    title="Comment Service",
    description="Comments attached to videos: list, create, update, delete",
    version="1.0.0",
    lifespan=lifespan,
)

# Routers
app.include_router(comments.router)
app.include_router(metrics.router)

@app.get("/health")
async def health():
    return {"status": "healthy", "version": "1.0.0", "env": settings.APP_ENV}
