"""
DTOs for fixture calendar operations.
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class MatchCreate(BaseModel):
    """DTO for creating a fixture."""

    match_date: date = Field(..., description="Date of the fixture")
    opponent: str | None = Field(None, max_length=255)
    competition: str | None = Field(None, max_length=100)


class MatchRead(BaseModel):
    id: int
    match_date: date
    opponent: str | None
    competition: str | None

    model_config = ConfigDict(from_attributes=True)
