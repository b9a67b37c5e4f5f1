"""
Entity for player injury episodes.
"""

from __future__ import annotations

from datetime import date

from sqlalchemy import Date, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from src.entities.base import Base


class InjuryEpisode(Base):
    """
    One injury occurrence for one player.

    A player can have several rows over time. Rows are grouped by ``name``;
    there is no separate player table.
    """

    __tablename__ = "players"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    photo_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    injury_type: Mapped[str | None] = mapped_column(String(100), nullable=True)
    injury_date: Mapped[date | None] = mapped_column(Date, nullable=True, index=True)
    recovery_date: Mapped[date | None] = mapped_column(Date, nullable=True, index=True)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default="injured", index=True
    )  # injured, recovered
    article_link: Mapped[str | None] = mapped_column(String(500), nullable=True)
    injury_context: Mapped[str | None] = mapped_column(String(255), nullable=True)
    club_estimation: Mapped[str | None] = mapped_column(String(100), nullable=True)
