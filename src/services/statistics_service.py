"""
Service for the injury statistics dashboard.

``compute_statistics`` is a pure function over already-fetched snapshots of
the ``players`` and ``matches`` tables. ``StatisticsService`` fetches those
snapshots for a request and shapes the result into chart series.
"""

from __future__ import annotations

import logging
import math
from collections import Counter, defaultdict
from datetime import date
from typing import Any, Optional, Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from src.dtos.injury_episode_dto import InjuryStatus
from src.dtos.statistics_dto import ChartSeries, StatisticsBundle, StatisticsDashboard
from src.repositories.injury_episode_repo import InjuryEpisodeRepository
from src.repositories.match_repo import MatchRepository
from src.services.missed_matches_service import (
    count_matches_in_window,
    injury_duration_days,
    window_end,
)

logger = logging.getLogger(__name__)

MONTH_LABELS = [
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
]


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _in_year(value: Optional[date], year: int) -> bool:
    return value is not None and value.year == year


def compute_statistics(
    all_episodes: Sequence[Any],
    all_matches: Sequence[Any],
    reference_year: int,
    today: Optional[date] = None,
) -> StatisticsBundle:
    """
    Derive the dashboard aggregates for *reference_year*.

    Episodes missing the dates an aggregate needs are left out of that
    aggregate. Windows without a recovery date end at *today*, so fields that
    touch them are only reproducible for a fixed *today*.
    """
    today = today or date.today()

    this_year = [ep for ep in all_episodes if _in_year(ep.injury_date, reference_year)]
    dated = [ep for ep in all_episodes if ep.injury_date is not None]
    closed = [ep for ep in dated if ep.recovery_date is not None]

    type_histogram = Counter(ep.injury_type for ep in this_year if ep.injury_type)

    player_days: dict[str, int] = defaultdict(int)
    for ep in dated:
        player_days[ep.name] += injury_duration_days(ep, today)

    recovery_totals: dict[str, list[int]] = defaultdict(lambda: [0, 0])
    for ep in closed:
        if ep.injury_type:
            totals = recovery_totals[ep.injury_type]
            totals[0] += injury_duration_days(ep)
            totals[1] += 1

    monthly_injuries = [0] * 12
    for ep in this_year:
        monthly_injuries[ep.injury_date.month - 1] += 1

    recovered_this_year = [
        ep
        for ep in all_episodes
        if ep.status == InjuryStatus.recovered
        and _in_year(ep.recovery_date, reference_year)
    ]
    monthly_recoveries = [0] * 12
    for ep in all_episodes:
        if not _in_year(ep.recovery_date, reference_year):
            continue
        monthly_recoveries[ep.recovery_date.month - 1] += 1

    windows = [(ep.injury_date, window_end(ep, today)) for ep in dated]
    matches_missed = sum(
        1
        for match in all_matches
        if _in_year(match.match_date, reference_year)
        and any(start <= match.match_date <= end for start, end in windows)
    )

    # Overlapping episodes of one player count a shared fixture once per episode.
    player_missed: dict[str, int] = defaultdict(int)
    for ep in dated:
        player_missed[ep.name] += count_matches_in_window(
            ep, all_matches, today=today, include_injury_day=True
        )

    return StatisticsBundle(
        reference_year=reference_year,
        injuries_this_year=len(this_year),
        unique_injured_players_this_year=len({ep.name for ep in this_year}),
        currently_injured_count=sum(
            1 for ep in all_episodes if ep.status == InjuryStatus.injured
        ),
        recovered_this_year=len(recovered_this_year),
        total_injured_days=sum(injury_duration_days(ep) for ep in closed),
        injury_type_histogram=dict(type_histogram),
        player_injury_days=dict(player_days),
        avg_recovery_days_by_type={
            injury_type: _round_half_up(total / count)
            for injury_type, (total, count) in recovery_totals.items()
        },
        monthly_injury_counts=monthly_injuries,
        monthly_recovery_counts=monthly_recoveries,
        total_matches_missed_this_year=matches_missed,
        player_missed_matches=dict(player_missed),
    )


def build_charts(bundle: StatisticsBundle) -> list[ChartSeries]:
    """Label/value series for the dashboard charts."""

    def _series(title: str, mapping: dict[str, int]) -> ChartSeries:
        return ChartSeries(
            title=title, labels=list(mapping.keys()), values=list(mapping.values())
        )

    players_by_days = dict(
        sorted(
            bundle.player_injury_days.items(), key=lambda item: item[1], reverse=True
        )
    )
    return [
        _series("Injury types", bundle.injury_type_histogram),
        _series("Most injured players by days", players_by_days),
        _series(
            "Average recovery days by injury type", bundle.avg_recovery_days_by_type
        ),
        ChartSeries(
            title="Injuries by month",
            labels=MONTH_LABELS,
            values=bundle.monthly_injury_counts,
        ),
        ChartSeries(
            title="Recoveries by month",
            labels=MONTH_LABELS,
            values=bundle.monthly_recovery_counts,
        ),
        _series("Missed matches by player", bundle.player_missed_matches),
    ]


class StatisticsService:
    """
    Fetches episode and match snapshots and aggregates them.

    A failed fetch is logged and treated as an empty dataset, so the
    dashboard degrades to zeros instead of erroring.
    """

    def __init__(self, session: Session) -> None:
        self.session = session
        self.episode_repo = InjuryEpisodeRepository(session)
        self.match_repo = MatchRepository(session)

    def _fetch_episodes(self) -> list:
        try:
            return self.episode_repo.get_all()
        except SQLAlchemyError:
            logger.exception("Error fetching injury episodes for statistics")
            return []

    def _fetch_matches(self) -> list:
        try:
            return self.match_repo.get_all_ordered()
        except SQLAlchemyError:
            logger.exception("Error fetching matches for statistics")
            return []

    def get_statistics(
        self, reference_year: Optional[int] = None, today: Optional[date] = None
    ) -> StatisticsBundle:
        today = today or date.today()
        year = reference_year or today.year
        episodes = self._fetch_episodes()
        matches = self._fetch_matches()
        logger.info(
            "Computing statistics for %s over %d episodes and %d matches",
            year,
            len(episodes),
            len(matches),
        )
        return compute_statistics(episodes, matches, year, today=today)

    def get_dashboard(
        self, reference_year: Optional[int] = None, today: Optional[date] = None
    ) -> StatisticsDashboard:
        bundle = self.get_statistics(reference_year, today=today)
        return StatisticsDashboard(statistics=bundle, charts=build_charts(bundle))
