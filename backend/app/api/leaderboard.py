"""Leaderboard API endpoints."""

from fastapi import APIRouter, Depends, Query

from backend.app.core.config import settings
from backend.app.schemas.idea import IdeaResponse
from backend.app.services.idea_store import IdeaStore, get_idea_store
from backend.app.services.ranking import leaderboard

router = APIRouter(prefix="/leaderboard", tags=["leaderboard"])


@router.get("", response_model=list[IdeaResponse])
async def get_leaderboard(
    limit: int | None = Query(
        None,
        ge=1,
        le=settings.leaderboard_max_limit,
        description="Number of top ideas to return",
    ),
    store: IdeaStore = Depends(get_idea_store),
) -> list[IdeaResponse]:
    """Top ideas ranked by votes, most voted first."""
    return [IdeaResponse.model_validate(idea) for idea in leaderboard(store, limit)]
