from fastapi import APIRouter, Depends, HTTPException, Query

from src.core.dependencies import get_injury_service
from src.dtos.injury_episode_dto import (
    CLUB_ESTIMATIONS,
    INJURY_TYPES,
    InjuryEpisodePage,
    InjuryEpisodeView,
)
from src.dtos.match_dto import MatchRead
from src.services.injury_service import InjuryService, RecordNotFoundError

router = APIRouter(prefix="/api/v1", tags=["injuries"])


@router.get("/injuries/current", response_model=InjuryEpisodePage)
async def get_current_injuries(
    page: int = Query(1, ge=1),
    svc: InjuryService = Depends(get_injury_service),
):
    return svc.get_current_injuries(page=page)


@router.get("/injuries/recovered", response_model=InjuryEpisodePage)
async def get_recovered_players(
    page: int = Query(1, ge=1),
    svc: InjuryService = Depends(get_injury_service),
):
    return svc.get_recovered_this_year(page=page)


@router.get("/injuries/options")
async def get_injury_options():
    return {"injury_types": INJURY_TYPES, "club_estimations": CLUB_ESTIMATIONS}


@router.get("/injuries/{episode_id}", response_model=InjuryEpisodeView)
async def get_injury(
    episode_id: int,
    svc: InjuryService = Depends(get_injury_service),
):
    try:
        return svc.get_episode(episode_id)
    except RecordNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/matches", response_model=list[MatchRead])
async def get_matches(svc: InjuryService = Depends(get_injury_service)):
    return svc.list_matches()
