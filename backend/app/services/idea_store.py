"""
Idea store service.

Holds every submitted idea for the lifetime of the process. Callers depend on
the ``IdeaStore`` protocol so that a durable backend can replace the
in-memory implementation without changing the API layer.
"""

import logging
import random
import threading
from dataclasses import replace
from datetime import datetime, timezone
from functools import lru_cache
from typing import Callable, Protocol

from backend.app.core.config import settings
from backend.app.core.exceptions import IdeaNotFoundError, IdeaValidationError
from backend.app.models.idea import Idea

logger = logging.getLogger(__name__)

RATING_MIN = 0
RATING_MAX = 100


class IdeaStore(Protocol):
    """Protocol for idea storage backends."""

    def create(self, name: str | None, tagline: str | None, description: str | None) -> Idea:
        """
        Store a new idea and return it.

        Raises:
            IdeaValidationError: If any field is missing or empty
        """
        ...

    def list_ideas(self) -> list[Idea]:
        """Return all ideas in creation order."""
        ...

    def get(self, idea_id: int) -> Idea:
        """
        Return a single idea.

        Raises:
            IdeaNotFoundError: If no idea has this ID
        """
        ...

    def upvote(self, idea_id: int) -> Idea:
        """Add one vote and return the updated idea."""
        ...

    def downvote(self, idea_id: int) -> Idea:
        """Remove one vote (never below zero) and return the updated idea."""
        ...

    def count(self) -> int:
        """Return the number of stored ideas."""
        ...


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryIdeaStore:
    """
    Process-local idea store.

    One lock guards both the ID counter and every vote read-modify-write, so
    concurrent votes on the same idea are never lost. All returned ideas are
    copies; mutating them has no effect on the store.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        """
        Initialize an empty store.

        Args:
            rng: Random source for ratings (defaults to an unseeded Random)
            clock: Callable returning the current timestamp
        """
        self._rng = rng if rng is not None else random.Random()
        self._clock = clock
        self._ideas: dict[int, Idea] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def create(self, name: str | None, tagline: str | None, description: str | None) -> Idea:
        fields = {"name": name, "tagline": tagline, "description": description}
        for field, value in fields.items():
            if not value or not value.strip():
                raise IdeaValidationError(field)

        with self._lock:
            idea = Idea(
                id=self._next_id,
                name=name,
                tagline=tagline,
                description=description,
                rating=self._rng.randint(RATING_MIN, RATING_MAX),
                created_at=self._clock(),
            )
            self._ideas[idea.id] = idea
            self._next_id += 1
            snapshot = replace(idea)

        logger.info(f"[IDEA] Created idea {snapshot.id} '{snapshot.name}' (rating={snapshot.rating})")
        return snapshot

    def list_ideas(self) -> list[Idea]:
        with self._lock:
            return [replace(idea) for idea in self._ideas.values()]

    def get(self, idea_id: int) -> Idea:
        with self._lock:
            return replace(self._require(idea_id))

    def upvote(self, idea_id: int) -> Idea:
        with self._lock:
            idea = self._require(idea_id)
            idea.votes += 1
            snapshot = replace(idea)

        logger.info(f"[VOTE] Idea {idea_id} upvoted (votes={snapshot.votes})")
        return snapshot

    def downvote(self, idea_id: int) -> Idea:
        with self._lock:
            idea = self._require(idea_id)
            idea.votes = max(0, idea.votes - 1)
            snapshot = replace(idea)

        logger.info(f"[DOWNVOTE] Idea {idea_id} downvoted (votes={snapshot.votes})")
        return snapshot

    def count(self) -> int:
        with self._lock:
            return len(self._ideas)

    def _require(self, idea_id: int) -> Idea:
        # Caller must hold self._lock
        idea = self._ideas.get(idea_id)
        if idea is None:
            raise IdeaNotFoundError(idea_id)
        return idea


# Global singleton instance
@lru_cache(maxsize=1)
def get_idea_store() -> IdeaStore:
    """
    Get the process-wide idea store.

    Returns:
        Cached InMemoryIdeaStore instance

    Note:
        Used as a FastAPI dependency; tests swap it out through
        ``app.dependency_overrides``.
    """
    logger.info("[STORE] Creating in-memory idea store")
    return InMemoryIdeaStore(rng=random.Random(settings.rating_seed))


def reset_idea_store() -> None:
    """Drop the cached store so the next request starts from an empty one."""
    get_idea_store.cache_clear()
