from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from src.core.database import get_db
from src.dtos.user_dto import LoginResult, UserCredentials, UserRead, UserRegister
from src.services.auth_service import (
    AuthService,
    EmailAlreadyRegisteredError,
    InvalidCredentialsError,
    RegistrationRejectedError,
)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=UserRead, status_code=201)
async def register(dto: UserRegister, db: Session = Depends(get_db)):
    try:
        return AuthService(db).register(dto)
    except RegistrationRejectedError as e:
        raise HTTPException(status_code=403, detail=str(e))
    except EmailAlreadyRegisteredError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.post("/login", response_model=LoginResult)
async def login(dto: UserCredentials, db: Session = Depends(get_db)):
    try:
        return AuthService(db).login(dto)
    except InvalidCredentialsError as e:
        raise HTTPException(status_code=401, detail=str(e))
