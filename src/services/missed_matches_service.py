"""
Injury windows and the matches a player missed inside them.

An episode's window runs from its injury date to its recovery date, or to
today while the player is still out. The per-episode count shown in the
player lists uses an exclusive lower bound: a fixture played on the day of
the injury is assumed to have been played before it happened. The
aggregate tallies in ``statistics_service`` count that fixture as missed.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Iterable, Optional


def window_end(episode: Any, today: Optional[date] = None) -> date:
    """Recovery date when known, otherwise *today* (defaults to the current date)."""
    if episode.recovery_date is not None:
        return episode.recovery_date
    return today or date.today()


def injury_duration_days(episode: Any, today: Optional[date] = None) -> int:
    """Whole days between injury and recovery (or today). 0 without an injury date."""
    if episode.injury_date is None:
        return 0
    return abs((window_end(episode, today) - episode.injury_date).days)


def count_matches_in_window(
    episode: Any,
    matches: Iterable[Any],
    *,
    today: Optional[date] = None,
    include_injury_day: bool = False,
) -> int:
    """
    Count fixtures dated inside the episode's window.

    Args:
        episode: Object with ``injury_date`` and ``recovery_date`` attributes
        matches: Objects with a ``match_date`` attribute
        today: End of open-ended windows
        include_injury_day: Whether a fixture on the injury date counts

    Returns:
        Number of fixtures in the window, 0 when the injury date is unknown
    """
    start = episode.injury_date
    if start is None:
        return 0
    end = window_end(episode, today)

    count = 0
    for match in matches:
        match_date = match.match_date
        if match_date is None or match_date > end:
            continue
        if match_date > start or (include_injury_day and match_date == start):
            count += 1
    return count


def missed_matches(
    episode: Any, matches: Iterable[Any], today: Optional[date] = None
) -> int:
    """Fixtures strictly after the injury date and on or before the window end."""
    return count_matches_in_window(episode, matches, today=today)
