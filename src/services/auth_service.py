"""
Service for admin registration and login.

Passwords are stored as bcrypt hashes. A successful login only reports the
user's role; it does not issue a credential. Admin routes are gated by the
API key dependency in ``src.main``.
"""

from __future__ import annotations

import logging
import secrets

from passlib.context import CryptContext
from sqlalchemy.orm import Session

from src.core.config import settings
from src.dtos.user_dto import LoginResult, UserCredentials, UserRead, UserRegister
from src.repositories.user_repo import UserRepository

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


class InvalidCredentialsError(Exception):
    pass


class RegistrationRejectedError(Exception):
    pass


class EmailAlreadyRegisteredError(Exception):
    pass


class AuthService:
    def __init__(self, session: Session) -> None:
        self.session = session
        self.repo = UserRepository(session)

    def register(self, dto: UserRegister) -> UserRead:
        """
        Create a user after checking the admin registration code.

        Raises:
            RegistrationRejectedError: If registration is disabled or the code is wrong
            EmailAlreadyRegisteredError: If the email is taken
        """
        expected = settings.ADMIN_REGISTRATION_CODE
        if not expected or not secrets.compare_digest(dto.registration_code, expected):
            logger.warning("Rejected registration for %s: bad admin code", dto.email)
            raise RegistrationRejectedError("Invalid admin code")

        if self.repo.get_by_email(dto.email) is not None:
            raise EmailAlreadyRegisteredError(f"{dto.email} is already registered")

        user = self.repo.create_user(
            email=dto.email,
            hashed_password=pwd_context.hash(dto.password),
            role=settings.DEFAULT_USER_ROLE,
        )
        logger.info("Registered user %s", user.email)
        return UserRead.model_validate(user)

    def login(self, dto: UserCredentials) -> LoginResult:
        user = self.repo.get_by_email(dto.email)
        if user is None or not pwd_context.verify(dto.password, user.hashed_password):
            raise InvalidCredentialsError("Invalid credentials")
        return LoginResult(email=user.email, role=user.role)
