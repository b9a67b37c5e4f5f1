"""
DTOs for the statistics dashboard.
"""

from pydantic import BaseModel, Field


def _twelve_zeros() -> list[int]:
    return [0] * 12


class StatisticsBundle(BaseModel):
    """Aggregates derived from the full episode list and match calendar."""

    reference_year: int
    injuries_this_year: int = 0
    unique_injured_players_this_year: int = 0
    currently_injured_count: int = 0
    recovered_this_year: int = 0
    total_injured_days: int = 0
    injury_type_histogram: dict[str, int] = Field(default_factory=dict)
    player_injury_days: dict[str, int] = Field(default_factory=dict)
    avg_recovery_days_by_type: dict[str, int] = Field(default_factory=dict)
    monthly_injury_counts: list[int] = Field(default_factory=_twelve_zeros)
    monthly_recovery_counts: list[int] = Field(default_factory=_twelve_zeros)
    total_matches_missed_this_year: int = 0
    player_missed_matches: dict[str, int] = Field(default_factory=dict)


class ChartSeries(BaseModel):
    title: str
    labels: list[str]
    values: list[int]


class StatisticsDashboard(BaseModel):
    statistics: StatisticsBundle
    charts: list[ChartSeries]
