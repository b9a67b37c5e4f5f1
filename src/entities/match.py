"""
Entity for the fixture calendar.
"""

from __future__ import annotations

from datetime import date

from sqlalchemy import Date, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from src.entities.base import Base


class Match(Base):
    """A scheduled fixture. Only ``match_date`` takes part in injury computations."""

    __tablename__ = "matches"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    match_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    opponent: Mapped[str | None] = mapped_column(String(255), nullable=True)
    competition: Mapped[str | None] = mapped_column(String(100), nullable=True)
