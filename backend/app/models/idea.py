"""Idea model."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Idea:
    """
    Idea model representing a submitted startup concept.

    Attributes:
        id: Sequential idea identifier, starting at 1 and never reused
        name: Display name of the idea
        tagline: Short pitch
        description: Full description
        rating: Stub "AI" score (0-100), fixed at creation
        votes: Community vote counter, never negative
        created_at: Creation timestamp (UTC)
    """

    id: int
    name: str
    tagline: str
    description: str
    rating: int
    created_at: datetime
    votes: int = 0

    def __repr__(self) -> str:
        return (
            f"<Idea(id={self.id}, name={self.name[:50]}, "
            f"rating={self.rating}, votes={self.votes})>"
        )
