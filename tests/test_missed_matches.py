"""
Unit tests for injury windows and the missed-matches count.
"""
from datetime import date, timedelta

import pytest

from src.services.missed_matches_service import (
    count_matches_in_window,
    injury_duration_days,
    missed_matches,
    window_end,
)


class TestMissedMatches:
    """Per-episode count: exclusive lower bound, inclusive upper bound."""

    def test_scenario_counts_matches_inside_window(self, episode_factory, matches_factory):
        episode = episode_factory(
            injury_date=date(2024, 1, 1), recovery_date=date(2024, 1, 10)
        )
        matches = matches_factory(date(2024, 1, 5), date(2024, 1, 10), date(2024, 1, 11))

        assert missed_matches(episode, matches) == 2

    def test_match_on_injury_day_is_not_missed(self, episode_factory, matches_factory):
        episode = episode_factory(
            injury_date=date(2024, 3, 2), recovery_date=date(2024, 3, 20)
        )
        matches = matches_factory(date(2024, 3, 2), date(2024, 3, 9))

        assert missed_matches(episode, matches) == 1

    def test_same_day_injury_and_recovery(self, episode_factory, matches_factory):
        episode = episode_factory(
            injury_date=date(2024, 5, 5), recovery_date=date(2024, 5, 5)
        )
        matches = matches_factory(date(2024, 5, 4), date(2024, 5, 5), date(2024, 5, 6))

        assert missed_matches(episode, matches) == 0

    def test_no_injury_date_returns_zero(self, episode_factory, matches_factory):
        episode = episode_factory(injury_date=None, recovery_date=date(2024, 5, 5))
        matches = matches_factory(date(2024, 5, 1))

        assert missed_matches(episode, matches) == 0

    def test_empty_match_list(self, episode_factory):
        episode = episode_factory(injury_date=date(2024, 1, 1))

        assert missed_matches(episode, [], today=date(2024, 6, 1)) == 0

    def test_open_window_ends_today(self, episode_factory, matches_factory):
        episode = episode_factory(injury_date=date(2024, 1, 1))
        matches = matches_factory(date(2024, 1, 8), date(2024, 1, 15), date(2024, 1, 22))

        assert missed_matches(episode, matches, today=date(2024, 1, 15)) == 2

    def test_open_window_is_monotonic_in_today(self, episode_factory, matches_factory):
        episode = episode_factory(injury_date=date(2024, 1, 1))
        matches = matches_factory(*(date(2024, 1, 1) + timedelta(days=7 * i) for i in range(10)))

        counts = [
            missed_matches(episode, matches, today=date(2024, 1, 1) + timedelta(days=d))
            for d in range(0, 80, 3)
        ]

        assert counts == sorted(counts)
        assert counts[0] == 0
        assert counts[-1] == 9

    def test_open_window_defaults_to_current_date(self, episode_factory, matches_factory):
        injury = date.today() - timedelta(days=10)
        episode = episode_factory(injury_date=injury)
        matches = matches_factory(
            injury + timedelta(days=3), date.today() + timedelta(days=3)
        )

        assert missed_matches(episode, matches) == 1

    def test_matches_without_date_are_skipped(self, episode_factory, matches_factory):
        episode = episode_factory(
            injury_date=date(2024, 1, 1), recovery_date=date(2024, 2, 1)
        )
        matches = matches_factory(None, date(2024, 1, 20))

        assert missed_matches(episode, matches) == 1


class TestCountMatchesInWindow:
    def test_inclusive_lower_bound(self, episode_factory, matches_factory):
        episode = episode_factory(
            injury_date=date(2024, 3, 2), recovery_date=date(2024, 3, 20)
        )
        matches = matches_factory(date(2024, 3, 2), date(2024, 3, 9))

        assert count_matches_in_window(episode, matches, include_injury_day=True) == 2
        assert count_matches_in_window(episode, matches) == 1


class TestInjuryDuration:
    def test_closed_window(self, episode_factory):
        episode = episode_factory(
            injury_date=date(2024, 1, 1), recovery_date=date(2024, 1, 10)
        )
        assert injury_duration_days(episode) == 9

    def test_open_window(self, episode_factory):
        episode = episode_factory(injury_date=date(2024, 1, 1))
        assert injury_duration_days(episode, today=date(2024, 2, 1)) == 31

    def test_reversed_dates_use_absolute_difference(self, episode_factory):
        episode = episode_factory(
            injury_date=date(2024, 1, 10), recovery_date=date(2024, 1, 1)
        )
        assert injury_duration_days(episode) == 9

    def test_no_injury_date(self, episode_factory):
        assert injury_duration_days(episode_factory(injury_date=None)) == 0

    @pytest.mark.parametrize(
        "recovery_date, expected",
        [(date(2024, 4, 1), date(2024, 4, 1)), (None, date(2024, 6, 30))],
    )
    def test_window_end(self, episode_factory, recovery_date, expected):
        episode = episode_factory(injury_date=date(2024, 3, 1), recovery_date=recovery_date)
        assert window_end(episode, today=date(2024, 6, 30)) == expected
