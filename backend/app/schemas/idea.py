"""Idea-related schemas."""

from datetime import datetime
from pydantic import BaseModel, Field, field_validator


class IdeaCreate(BaseModel):
    """
    Schema for submitting a new idea.

    Fields are optional at the schema level so that missing and blank values
    reach the store and are rejected there with a 400 response.
    """

    name: str | None = Field(None, description="Idea name")
    tagline: str | None = Field(None, description="Short tagline")
    description: str | None = Field(None, description="Full description")

    @field_validator("name", "tagline", "description")
    @classmethod
    def strip_whitespace(cls, v: str | None) -> str | None:
        """Trim surrounding whitespace from submitted text."""
        return v.strip() if v is not None else v


class IdeaResponse(BaseModel):
    """Schema for idea data in responses."""

    id: int = Field(..., description="Idea ID")
    name: str = Field(..., description="Idea name")
    tagline: str = Field(..., description="Short tagline")
    description: str = Field(..., description="Full description")
    rating: int = Field(..., ge=0, le=100, description="Stub AI rating (0-100)")
    votes: int = Field(..., ge=0, description="Number of votes")
    created_at: datetime = Field(
        ...,
        alias="createdAt",
        description="Creation timestamp"
    )

    model_config = {"from_attributes": True, "populate_by_name": True}
