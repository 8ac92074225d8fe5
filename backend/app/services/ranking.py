"""
Idea ranking and leaderboard derivation.

All orderings are descending on the chosen key. Ties on votes or rating go
to the lower ID (earlier submission); ``newest`` orders by ``(created_at, id)``
so ideas sharing a timestamp still come out newest-ID first.
"""

from enum import Enum
from typing import Iterable

from backend.app.core.config import settings
from backend.app.models.idea import Idea
from backend.app.services.idea_store import IdeaStore


class RankBy(str, Enum):
    """Fields an idea list can be ranked by."""

    VOTES = "votes"
    RATING = "rating"
    NEWEST = "newest"


def rank(ideas: Iterable[Idea], by: RankBy | str = RankBy.VOTES) -> list[Idea]:
    """
    Rank ideas by the given field.

    Args:
        ideas: Ideas to order (not modified)
        by: One of "votes", "rating", "newest"

    Returns:
        New list ordered descending on the chosen field

    Raises:
        ValueError: If ``by`` is not a known ranking field
    """
    by = RankBy(by)

    if by is RankBy.NEWEST:
        return sorted(ideas, key=lambda idea: (idea.created_at, idea.id), reverse=True)
    if by is RankBy.RATING:
        return sorted(ideas, key=lambda idea: (-idea.rating, idea.id))
    return sorted(ideas, key=lambda idea: (-idea.votes, idea.id))


def leaderboard(store: IdeaStore, limit: int | None = None) -> list[Idea]:
    """
    Top ideas by vote count.

    Args:
        store: Idea store to read from
        limit: Maximum entries to return (defaults to settings.leaderboard_limit)

    Returns:
        At most ``limit`` ideas ranked by votes
    """
    if limit is None:
        limit = settings.leaderboard_limit
    if limit <= 0:
        raise ValueError(f"limit must be positive, got {limit}")

    return rank(store.list_ideas(), RankBy.VOTES)[:limit]
