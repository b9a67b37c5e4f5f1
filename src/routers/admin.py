from fastapi import APIRouter, Depends, HTTPException

from src.core.dependencies import AdminContext, get_injury_service, verify_api_key
from src.dtos.injury_episode_dto import (
    AdminEpisodeList,
    InjuryEpisodeCreate,
    InjuryEpisodeRead,
    InjuryEpisodeUpdate,
)
from src.dtos.match_dto import MatchCreate, MatchRead
from src.services.injury_service import (
    InjuryService,
    InvalidEpisodeError,
    RecordNotFoundError,
)

router = APIRouter(prefix="/api/v1/admin", tags=["admin"])


@router.get("/injuries", response_model=AdminEpisodeList)
async def list_injuries(
    svc: InjuryService = Depends(get_injury_service),
    _: AdminContext = Depends(verify_api_key),
):
    return svc.list_all()


@router.post("/injuries", response_model=InjuryEpisodeRead, status_code=201)
async def create_injury(
    dto: InjuryEpisodeCreate,
    svc: InjuryService = Depends(get_injury_service),
    _: AdminContext = Depends(verify_api_key),
):
    return svc.create_episode(dto)


@router.put("/injuries/{episode_id}", response_model=InjuryEpisodeRead)
async def update_injury(
    episode_id: int,
    dto: InjuryEpisodeUpdate,
    svc: InjuryService = Depends(get_injury_service),
    _: AdminContext = Depends(verify_api_key),
):
    try:
        return svc.update_episode(episode_id, dto)
    except RecordNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidEpisodeError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.delete("/injuries/{episode_id}", status_code=204)
async def delete_injury(
    episode_id: int,
    svc: InjuryService = Depends(get_injury_service),
    _: AdminContext = Depends(verify_api_key),
):
    try:
        svc.delete_episode(episode_id)
    except RecordNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/injuries/{episode_id}/recover", response_model=InjuryEpisodeRead)
async def recover_injury(
    episode_id: int,
    svc: InjuryService = Depends(get_injury_service),
    _: AdminContext = Depends(verify_api_key),
):
    try:
        return svc.mark_recovered(episode_id)
    except RecordNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidEpisodeError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.post("/matches", response_model=MatchRead, status_code=201)
async def create_match(
    dto: MatchCreate,
    svc: InjuryService = Depends(get_injury_service),
    _: AdminContext = Depends(verify_api_key),
):
    return svc.create_match(dto)


@router.delete("/matches/{match_id}", status_code=204)
async def delete_match(
    match_id: int,
    svc: InjuryService = Depends(get_injury_service),
    _: AdminContext = Depends(verify_api_key),
):
    try:
        svc.delete_match(match_id)
    except RecordNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
