"""
Service behind the injury list, recovered report and admin panel.

Reads degrade to empty results when the store is unreachable; writes let
store errors propagate to the global exception handler.
"""

from __future__ import annotations

import logging
import math
from datetime import date
from typing import Callable, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from src.core.config import settings
from src.dtos.injury_episode_dto import (
    AdminEpisodeList,
    InjuryEpisodeCreate,
    InjuryEpisodePage,
    InjuryEpisodeRead,
    InjuryEpisodeUpdate,
    InjuryEpisodeView,
    InjuryStatus,
    check_date_order,
)
from src.dtos.match_dto import MatchCreate, MatchRead
from src.entities.injury_episode import InjuryEpisode
from src.entities.match import Match
from src.repositories.injury_episode_repo import InjuryEpisodeRepository
from src.repositories.match_repo import MatchRepository
from src.services.missed_matches_service import injury_duration_days, missed_matches

logger = logging.getLogger(__name__)


class RecordNotFoundError(LookupError):
    pass


class InvalidEpisodeError(ValueError):
    pass


class InjuryService:
    """
    Service for reading and maintaining injury episodes and fixtures.

    Every call re-fetches what it needs; nothing is cached between requests.
    """

    def __init__(self, session: Session, page_size: Optional[int] = None) -> None:
        self.session = session
        self.episode_repo = InjuryEpisodeRepository(session)
        self.match_repo = MatchRepository(session)
        self.page_size = page_size or settings.PAGE_SIZE

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def _safe_fetch(self, fetch: Callable[[], list], what: str) -> list:
        try:
            return fetch()
        except SQLAlchemyError:
            logger.exception("Error fetching %s", what)
            return []

    def _to_view(
        self, episode: InjuryEpisode, matches: List[Match], today: date
    ) -> InjuryEpisodeView:
        base = InjuryEpisodeRead.model_validate(episode)
        return InjuryEpisodeView(
            **base.model_dump(),
            missed_matches=missed_matches(episode, matches, today),
            injury_days=injury_duration_days(episode, today),
        )

    def _paginate(
        self, episodes: List[InjuryEpisode], page: int, today: date
    ) -> InjuryEpisodePage:
        total = len(episodes)
        total_pages = math.ceil(total / self.page_size) if total else 0
        page = max(page, 1)
        start = (page - 1) * self.page_size
        current = episodes[start : start + self.page_size]

        matches = []
        if current:
            matches = self._safe_fetch(self.match_repo.get_all_ordered, "matches")
        return InjuryEpisodePage(
            items=[self._to_view(ep, matches, today) for ep in current],
            page=page,
            page_size=self.page_size,
            total=total,
            total_pages=total_pages,
        )

    def get_current_injuries(
        self, page: int = 1, today: Optional[date] = None
    ) -> InjuryEpisodePage:
        """
        Injured players for the visitor list.

        Args:
            page: 1-based page number
            today: End of open injury windows (defaults to the current date)

        Returns:
            One page of episodes with missed matches and injury days
        """
        today = today or date.today()
        episodes = self._safe_fetch(self.episode_repo.get_injured, "injured players")
        return self._paginate(episodes, page, today)

    def get_recovered_this_year(
        self, page: int = 1, today: Optional[date] = None
    ) -> InjuryEpisodePage:
        """
        Players who recovered during the current calendar year.

        Args:
            page: 1-based page number
            today: Reference date; its year selects the report range

        Returns:
            One page of recovered episodes with missed matches and injury days
        """
        today = today or date.today()
        start, end = date(today.year, 1, 1), date(today.year, 12, 31)
        episodes = self._safe_fetch(
            lambda: self.episode_repo.get_recovered_between(start, end),
            "recovered players",
        )
        return self._paginate(episodes, page, today)

    def get_episode(
        self, episode_id: int, today: Optional[date] = None
    ) -> InjuryEpisodeView:
        episode = self.episode_repo.get_by_id(episode_id)
        if episode is None:
            raise RecordNotFoundError(f"Injury episode {episode_id} not found")
        matches = self._safe_fetch(self.match_repo.get_all_ordered, "matches")
        return self._to_view(episode, matches, today or date.today())

    def list_all(self) -> AdminEpisodeList:
        episodes = self._safe_fetch(self.episode_repo.get_all, "players")
        return AdminEpisodeList(
            items=[InjuryEpisodeRead.model_validate(ep) for ep in episodes],
            currently_injured_count=sum(
                1 for ep in episodes if ep.status == InjuryStatus.injured
            ),
        )

    def list_matches(self) -> List[MatchRead]:
        matches = self._safe_fetch(self.match_repo.get_all_ordered, "matches")
        return [MatchRead.model_validate(m) for m in matches]

    # ------------------------------------------------------------------
    # Writes (admin)
    # ------------------------------------------------------------------

    def create_episode(self, dto: InjuryEpisodeCreate) -> InjuryEpisodeRead:
        episode = self.episode_repo.create_from_dto(dto)
        logger.info("Created injury episode %s for %s", episode.id, episode.name)
        return InjuryEpisodeRead.model_validate(episode)

    def update_episode(
        self, episode_id: int, dto: InjuryEpisodeUpdate
    ) -> InjuryEpisodeRead:
        """
        Apply a partial update to an episode.

        Raises:
            RecordNotFoundError: If no episode has this id
            InvalidEpisodeError: If the merged dates are out of order
                or an injured episode would lose its injury date
        """
        episode = self.episode_repo.get_by_id(episode_id)
        if episode is None:
            raise RecordNotFoundError(f"Injury episode {episode_id} not found")

        values = dto.model_dump(exclude_unset=True)
        if values.get("name", "") is None:
            raise InvalidEpisodeError("name cannot be empty")
        if "status" in values:
            values["status"] = InjuryStatus(values["status"]).value

        injury_date = values.get("injury_date", episode.injury_date)
        recovery_date = values.get("recovery_date", episode.recovery_date)
        status = values.get("status", episode.status)
        if status == InjuryStatus.injured and injury_date is None:
            raise InvalidEpisodeError("injury_date is required for an injured player")
        try:
            check_date_order(injury_date, recovery_date)
        except ValueError as e:
            raise InvalidEpisodeError(str(e)) from e

        updated = self.episode_repo.update_fields(episode_id, values)
        logger.info("Updated injury episode %s", episode_id)
        return InjuryEpisodeRead.model_validate(updated)

    def delete_episode(self, episode_id: int) -> None:
        if not self.episode_repo.delete_by_id(episode_id):
            raise RecordNotFoundError(f"Injury episode {episode_id} not found")
        logger.info("Deleted injury episode %s", episode_id)

    def mark_recovered(
        self, episode_id: int, today: Optional[date] = None
    ) -> InjuryEpisodeRead:
        """Set the episode to recovered as of *today*."""
        episode = self.episode_repo.get_by_id(episode_id)
        if episode is None:
            raise RecordNotFoundError(f"Injury episode {episode_id} not found")

        recovery_date = today or date.today()
        try:
            check_date_order(episode.injury_date, recovery_date)
        except ValueError as e:
            raise InvalidEpisodeError(str(e)) from e

        updated = self.episode_repo.mark_recovered(episode_id, recovery_date)
        logger.info(
            "Marked injury episode %s as recovered on %s", episode_id, recovery_date
        )
        return InjuryEpisodeRead.model_validate(updated)

    def create_match(self, dto: MatchCreate) -> MatchRead:
        match = self.match_repo.create_from_dto(dto)
        logger.info("Created match %s on %s", match.id, match.match_date)
        return MatchRead.model_validate(match)

    def delete_match(self, match_id: int) -> None:
        if not self.match_repo.delete_by_id(match_id):
            raise RecordNotFoundError(f"Match {match_id} not found")
        logger.info("Deleted match %s", match_id)
