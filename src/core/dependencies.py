# core/dependencies.py
from dataclasses import dataclass

from fastapi import Depends, HTTPException, Security
from fastapi.security import APIKeyHeader
from sqlalchemy.orm import Session

from src.core.config import settings
from src.core.database import get_db
from src.services.injury_service import InjuryService
from src.services.statistics_service import StatisticsService

api_key_header = APIKeyHeader(name="X-API-Key", auto_error=False)


@dataclass(frozen=True)
class AdminContext:
    """Per-request admin session handed to the admin routes."""

    authenticated: bool


async def verify_api_key(
    api_key: str | None = Security(api_key_header),
) -> AdminContext:
    """Require X-API-Key header when API_KEY is configured."""
    if not settings.API_KEY:
        return AdminContext(authenticated=True)
    if api_key != settings.API_KEY:
        raise HTTPException(status_code=403, detail="Invalid or missing API key")
    return AdminContext(authenticated=True)


def get_injury_service(db: Session = Depends(get_db)) -> InjuryService:
    return InjuryService(db)


def get_statistics_service(db: Session = Depends(get_db)) -> StatisticsService:
    return StatisticsService(db)
