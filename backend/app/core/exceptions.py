"""Custom exception classes for the idea leaderboard service."""


class IdeaBoardException(Exception):
    """Base exception for all idea-board-specific errors."""

    def __init__(self, message: str, details: str | None = None):
        self.message = message
        self.details = details
        super().__init__(self.message)


class IdeaValidationError(IdeaBoardException):
    """Raised when a submitted idea is missing a required field."""

    def __init__(self, field: str):
        super().__init__(
            message="All fields are required",
            details=f"Field '{field}' is missing or empty"
        )
        self.field = field


class IdeaNotFoundError(IdeaBoardException):
    """Raised when an idea is not found."""

    def __init__(self, idea_id: int):
        super().__init__(
            message=f"Idea not found: {idea_id}",
            details="The requested idea does not exist"
        )
        self.idea_id = idea_id
