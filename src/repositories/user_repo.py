from __future__ import annotations

from typing import Optional

from sqlalchemy.orm import Session

from src.entities.user import User
from src.repositories.base_repo import BaseRepository


class UserRepository(BaseRepository[User]):
    def __init__(self, session: Session) -> None:
        super().__init__(session=session, model=User)

    def get_by_email(self, email: str) -> Optional[User]:
        users = self.select({"email": email}, limit=1)
        return users[0] if users else None

    def create_user(self, email: str, hashed_password: str, role: str) -> User:
        user = User(email=email, hashed_password=hashed_password, role=role)
        return self.create(user)
