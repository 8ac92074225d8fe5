"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.app.api import ideas, leaderboard
from backend.app.core.config import settings
from backend.app.core.exception_handlers import register_exception_handlers
from backend.app.services.idea_store import IdeaStore, get_idea_store

logger = logging.getLogger(__name__)

VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info(f"[STARTUP] {settings.app_name} v{VERSION} starting (debug={settings.debug})")

    yield

    logger.info("[SHUTDOWN] Discarding in-memory ideas")


app = FastAPI(
    title=settings.app_name,
    description="Submit startup ideas, vote on them, and follow the leaderboard",
    version=VERSION,
    debug=settings.debug,
    lifespan=lifespan,
)

# Register custom exception handlers
register_exception_handlers(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(ideas.router)
app.include_router(leaderboard.router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": settings.app_name,
        "version": VERSION,
        "description": "Submit startup ideas, vote on them, and follow the leaderboard",
    }


@app.get("/health")
async def health_check(store: IdeaStore = Depends(get_idea_store)):
    """Health check endpoint."""
    return {"status": "healthy", "ideas": store.count()}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)
