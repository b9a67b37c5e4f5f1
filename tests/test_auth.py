"""
Tests for admin registration and login.
"""

from unittest.mock import patch

import pytest

from src.dtos.user_dto import UserCredentials, UserRegister
from src.services.auth_service import (
    AuthService,
    EmailAlreadyRegisteredError,
    InvalidCredentialsError,
    RegistrationRejectedError,
    pwd_context,
)


@pytest.fixture
def registration_code():
    with patch("src.services.auth_service.settings") as mock_settings:
        mock_settings.ADMIN_REGISTRATION_CODE = "let-me-in"
        mock_settings.DEFAULT_USER_ROLE = "viewer"
        yield "let-me-in"


class TestAuthService:
    def test_register_hashes_password(self, db_session, registration_code):
        service = AuthService(db_session)

        user = service.register(
            UserRegister(email="admin@club.org", password="secret", registration_code=registration_code)
        )

        stored = service.repo.get_by_email("admin@club.org")
        assert user.role == "viewer"
        assert stored.hashed_password != "secret"
        assert pwd_context.verify("secret", stored.hashed_password)

    def test_register_wrong_code(self, db_session, registration_code):
        with pytest.raises(RegistrationRejectedError):
            AuthService(db_session).register(
                UserRegister(email="admin@club.org", password="secret", registration_code="nope")
            )

    def test_register_disabled_without_code(self, db_session):
        with patch("src.services.auth_service.settings") as mock_settings:
            mock_settings.ADMIN_REGISTRATION_CODE = ""
            with pytest.raises(RegistrationRejectedError):
                AuthService(db_session).register(
                    UserRegister(email="admin@club.org", password="secret", registration_code="")
                )

    def test_register_duplicate_email(self, db_session, registration_code):
        service = AuthService(db_session)
        dto = UserRegister(
            email="admin@club.org", password="secret", registration_code=registration_code
        )
        service.register(dto)

        with pytest.raises(EmailAlreadyRegisteredError):
            service.register(dto)

    def test_login(self, db_session, registration_code):
        service = AuthService(db_session)
        service.register(
            UserRegister(email="admin@club.org", password="secret", registration_code=registration_code)
        )

        result = service.login(UserCredentials(email="admin@club.org", password="secret"))

        assert result.logged_in is True
        assert result.role == "viewer"

    @pytest.mark.parametrize(
        "email, password",
        [("admin@club.org", "wrong"), ("nobody@club.org", "secret")],
    )
    def test_login_rejected(self, db_session, registration_code, email, password):
        service = AuthService(db_session)
        service.register(
            UserRegister(email="admin@club.org", password="secret", registration_code=registration_code)
        )

        with pytest.raises(InvalidCredentialsError):
            service.login(UserCredentials(email=email, password=password))


class TestAuthEndpoints:
    def test_register_and_login(self, client, registration_code):
        r = client.post(
            "/auth/register",
            json={"email": "admin@club.org", "password": "secret", "registration_code": registration_code},
        )
        assert r.status_code == 201
        assert "hashed_password" not in r.json()

        r = client.post("/auth/login", json={"email": "admin@club.org", "password": "secret"})
        assert r.status_code == 200
        assert r.json() == {"email": "admin@club.org", "role": "viewer", "logged_in": True}

    def test_register_forbidden(self, client, registration_code):
        r = client.post(
            "/auth/register",
            json={"email": "admin@club.org", "password": "secret", "registration_code": "nope"},
        )
        assert r.status_code == 403

    def test_login_unauthorized(self, client):
        r = client.post("/auth/login", json={"email": "admin@club.org", "password": "secret"})
        assert r.status_code == 401
        assert r.json()["error"] == "http_error"
