"""Pydantic schemas for API request/response validation."""

from backend.app.schemas.idea import IdeaCreate, IdeaResponse

__all__ = [
    "IdeaCreate",
    "IdeaResponse",
]
