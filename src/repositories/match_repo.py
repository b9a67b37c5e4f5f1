from __future__ import annotations

from datetime import date

from sqlalchemy import and_, select
from sqlalchemy.orm import Session

from src.dtos.match_dto import MatchCreate
from src.entities.match import Match
from src.repositories.base_repo import BaseRepository


class MatchRepository(BaseRepository[Match]):
    def __init__(self, session: Session) -> None:
        super().__init__(session=session, model=Match)

    def create_from_dto(self, dto: MatchCreate) -> Match:
        return self.create(Match(**dto.model_dump()), commit=True)

    def get_all_ordered(self) -> list[Match]:
        return self.select(order_by="match_date")

    def get_between(self, start: date, end: date) -> list[Match]:
        stmt = (
            select(Match)
            .where(and_(Match.match_date >= start, Match.match_date <= end))
            .order_by(Match.match_date)
        )
        return list(self.session.execute(stmt).scalars().all())
