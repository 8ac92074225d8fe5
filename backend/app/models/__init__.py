"""Domain models."""

from backend.app.models.idea import Idea

__all__ = ["Idea"]
