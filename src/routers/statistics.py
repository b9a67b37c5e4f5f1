from fastapi import APIRouter, Depends, Query

from src.core.dependencies import get_statistics_service
from src.dtos.statistics_dto import StatisticsDashboard
from src.services.statistics_service import StatisticsService

router = APIRouter(prefix="/api/v1/statistics", tags=["statistics"])


@router.get("", response_model=StatisticsDashboard)
async def get_statistics(
    year: int | None = Query(None, gt=1900),
    svc: StatisticsService = Depends(get_statistics_service),
):
    return svc.get_dashboard(reference_year=year)
