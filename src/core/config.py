# core/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    PROJECT_NAME: str = "injury-tracker"
    VERSION: str = "0.1.0"

    DATABASE_URL: str = "sqlite:///./injury_tracker.db"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Empty string disables the admin key check.
    API_KEY: str = ""
    ADMIN_REGISTRATION_CODE: str = ""
    DEFAULT_USER_ROLE: str = "viewer"

    PAGE_SIZE: int = 10


settings = Settings()
