"""Idea submission and voting API endpoints."""

import logging

from fastapi import APIRouter, Depends, status

from backend.app.schemas.idea import IdeaCreate, IdeaResponse
from backend.app.services.idea_store import IdeaStore, get_idea_store
from backend.app.services.ranking import RankBy, rank

router = APIRouter(prefix="/ideas", tags=["ideas"])

logger = logging.getLogger(__name__)


@router.get("", response_model=list[IdeaResponse])
async def list_ideas(
    sort: RankBy | None = None,
    store: IdeaStore = Depends(get_idea_store),
) -> list[IdeaResponse]:
    """
    List all ideas.

    Ideas come back in submission order unless ``sort`` asks for a ranking
    by votes, rating or newest first.
    """
    ideas = store.list_ideas()
    if sort is not None:
        ideas = rank(ideas, sort)
    return [IdeaResponse.model_validate(idea) for idea in ideas]


@router.post("", response_model=IdeaResponse, status_code=status.HTTP_201_CREATED)
async def create_idea(
    idea_data: IdeaCreate,
    store: IdeaStore = Depends(get_idea_store),
) -> IdeaResponse:
    """
    Submit a new idea.

    The idea gets the next sequential ID, a random rating between 0 and 100,
    and zero votes. Missing or blank fields are rejected with 400.
    """
    idea = store.create(idea_data.name, idea_data.tagline, idea_data.description)
    return IdeaResponse.model_validate(idea)


@router.get("/{idea_id}", response_model=IdeaResponse)
async def get_idea(
    idea_id: int,
    store: IdeaStore = Depends(get_idea_store),
) -> IdeaResponse:
    """Get a single idea by ID."""
    return IdeaResponse.model_validate(store.get(idea_id))


@router.put("/{idea_id}/vote", response_model=IdeaResponse)
async def upvote_idea(
    idea_id: int,
    store: IdeaStore = Depends(get_idea_store),
) -> IdeaResponse:
    """
    Upvote an idea.

    Each call adds exactly one vote. The server does not track who voted;
    clients keep their own record of which ideas they have upvoted.
    """
    return IdeaResponse.model_validate(store.upvote(idea_id))


@router.put("/{idea_id}/downvote", response_model=IdeaResponse)
async def downvote_idea(
    idea_id: int,
    store: IdeaStore = Depends(get_idea_store),
) -> IdeaResponse:
    """Remove one vote from an idea. Votes never drop below zero."""
    return IdeaResponse.model_validate(store.downvote(idea_id))
