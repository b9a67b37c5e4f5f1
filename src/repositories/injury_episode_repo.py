"""
Repository for injury episode data access.
"""

from __future__ import annotations

from datetime import date
from typing import List

from sqlalchemy import and_, select
from sqlalchemy.orm import Session

from src.dtos.injury_episode_dto import InjuryEpisodeCreate, InjuryStatus
from src.entities.injury_episode import InjuryEpisode
from src.repositories.base_repo import BaseRepository


class InjuryEpisodeRepository(BaseRepository[InjuryEpisode]):
    """
    Repository for the ``players`` table.

    Handles all database operations for injury episodes.
    """

    def __init__(self, session: Session) -> None:
        super().__init__(session=session, model=InjuryEpisode)

    def create_from_dto(self, dto: InjuryEpisodeCreate) -> InjuryEpisode:
        """
        Create an injury episode from a DTO.

        Args:
            dto: InjuryEpisodeCreate DTO

        Returns:
            Created InjuryEpisode entity
        """
        values = dto.model_dump()
        values["status"] = dto.status.value
        entity = InjuryEpisode(**values)
        return self.create(entity, commit=True)

    def get_all(self) -> List[InjuryEpisode]:
        """Every episode in insertion order."""
        return self.select(order_by="id")

    def get_injured(self) -> List[InjuryEpisode]:
        """
        Get every episode still marked as injured.

        Returns:
            List of InjuryEpisode entities ordered by injury date
        """
        stmt = (
            select(InjuryEpisode)
            .where(InjuryEpisode.status == InjuryStatus.injured.value)
            .order_by(InjuryEpisode.injury_date.desc(), InjuryEpisode.id)
        )
        return list(self.session.execute(stmt).scalars().all())

    def get_recovered_between(self, start: date, end: date) -> List[InjuryEpisode]:
        """
        Get recovered episodes whose recovery date falls in [start, end].

        Args:
            start: First day of the range
            end: Last day of the range

        Returns:
            List of InjuryEpisode entities, most recent recovery first
        """
        stmt = (
            select(InjuryEpisode)
            .where(
                and_(
                    InjuryEpisode.status == InjuryStatus.recovered.value,
                    InjuryEpisode.recovery_date >= start,
                    InjuryEpisode.recovery_date <= end,
                )
            )
            .order_by(InjuryEpisode.recovery_date.desc(), InjuryEpisode.id)
        )
        return list(self.session.execute(stmt).scalars().all())

    def get_by_name(self, name: str) -> List[InjuryEpisode]:
        """All episodes recorded for one player, oldest injury first."""
        return self.select({"name": name}, order_by="injury_date")

    def count_injured(self) -> int:
        return len(self.select({"status": InjuryStatus.injured.value}))

    def mark_recovered(
        self, episode_id: int, recovery_date: date
    ) -> InjuryEpisode | None:
        """
        Set an episode to recovered with the given recovery date.

        Returns:
            Updated InjuryEpisode entity or None if not found
        """
        return self.update_fields(
            episode_id,
            {"status": InjuryStatus.recovered.value, "recovery_date": recovery_date},
        )
