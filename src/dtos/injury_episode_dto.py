"""
DTOs for injury episode operations.
"""

from __future__ import annotations

from datetime import date
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class InjuryStatus(StrEnum):
    injured = "injured"
    recovered = "recovered"


INJURY_TYPES = [
    "muscle strain",
    "muscle tear",
    "partial tear",
    "meniscus tear",
    "muscle overload",
    "groin pain",
    "bone fracture",
    "hip flexor",
    "ankle sprain",
    "knee injury (ACL)",
    "knee injury (MCL)",
    "shoulder injury",
    "concussion",
    "groin injury",
    "back injury",
    "other",
]

CLUB_ESTIMATIONS = [
    "a few days",
    "a week",
    "two weeks",
    "several weeks",
    "a month",
    "half a year",
    "unknown",
]

_OPTIONAL_FIELDS = (
    "photo_url",
    "injury_type",
    "injury_date",
    "recovery_date",
    "article_link",
    "injury_context",
    "club_estimation",
)


def check_date_order(injury_date: date | None, recovery_date: date | None) -> None:
    """Raise ValueError when a recovery date precedes its injury date."""
    if injury_date and recovery_date and recovery_date < injury_date:
        raise ValueError("recovery_date cannot be earlier than injury_date")


class _EpisodeFields(BaseModel):
    @field_validator(*_OPTIONAL_FIELDS, mode="before", check_fields=False)
    @classmethod
    def _blank_to_none(cls, value):
        # Admin forms submit cleared inputs as empty strings.
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("status", mode="before", check_fields=False)
    @classmethod
    def _blank_status(cls, value):
        if value is None or (isinstance(value, str) and not value.strip()):
            return InjuryStatus.injured
        return value


class InjuryEpisodeCreate(_EpisodeFields):
    """DTO for creating an injury episode."""

    name: str = Field(..., min_length=1, max_length=255, description="Player name")
    photo_url: str | None = Field(None, max_length=500)
    injury_type: str | None = Field(None, max_length=100, description="Type of injury")
    injury_date: date | None = Field(None, description="Date the injury happened")
    recovery_date: date | None = Field(
        None, description="Actual or expected return date"
    )
    status: InjuryStatus = Field(InjuryStatus.injured)
    article_link: str | None = Field(None, max_length=500)
    injury_context: str | None = Field(
        None, max_length=255, description="Where the injury happened"
    )
    club_estimation: str | None = Field(
        None, max_length=100, description="Club estimate of the absence"
    )

    @model_validator(mode="after")
    def _check_dates(self) -> InjuryEpisodeCreate:
        if self.status == InjuryStatus.injured and self.injury_date is None:
            raise ValueError("injury_date is required for an injured player")
        check_date_order(self.injury_date, self.recovery_date)
        return self


class InjuryEpisodeUpdate(_EpisodeFields):
    """DTO for partial updates. Only fields that are sent get written."""

    name: str | None = Field(None, min_length=1, max_length=255)
    photo_url: str | None = Field(None, max_length=500)
    injury_type: str | None = Field(None, max_length=100)
    injury_date: date | None = None
    recovery_date: date | None = None
    status: InjuryStatus | None = None
    article_link: str | None = Field(None, max_length=500)
    injury_context: str | None = Field(None, max_length=255)
    club_estimation: str | None = Field(None, max_length=100)

    @model_validator(mode="after")
    def _check_dates(self) -> InjuryEpisodeUpdate:
        check_date_order(self.injury_date, self.recovery_date)
        return self


class InjuryEpisodeRead(BaseModel):
    """DTO for reading injury episode data."""

    id: int
    name: str
    photo_url: str | None
    injury_type: str | None
    injury_date: date | None
    recovery_date: date | None
    status: InjuryStatus
    article_link: str | None
    injury_context: str | None
    club_estimation: str | None

    model_config = ConfigDict(from_attributes=True)


class InjuryEpisodeView(InjuryEpisodeRead):
    """Episode enriched with the values the list and detail views display."""

    missed_matches: int = 0
    injury_days: int = 0


class InjuryEpisodePage(BaseModel):
    items: list[InjuryEpisodeView]
    page: int
    page_size: int
    total: int
    total_pages: int


class AdminEpisodeList(BaseModel):
    items: list[InjuryEpisodeRead]
    currently_injured_count: int
