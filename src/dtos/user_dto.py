"""
DTOs for admin login and registration.
"""

from pydantic import BaseModel, ConfigDict, Field


class UserCredentials(BaseModel):
    email: str = Field(..., min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")
    password: str = Field(..., min_length=1, max_length=72)


class UserRegister(UserCredentials):
    registration_code: str = Field(..., description="Admin registration code")


class UserRead(BaseModel):
    id: int
    email: str
    role: str

    model_config = ConfigDict(from_attributes=True)


class LoginResult(BaseModel):
    email: str
    role: str
    logged_in: bool = True
