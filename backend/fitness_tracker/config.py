"""Application configuration loaded from environment variables."""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database
    DATABASE_URL: str = "sqlite:///./fitness_tracker.db"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "text"  # text or json

    # Seed the database with sample users, trainings and statistics on startup
    LOAD_INITIAL_DATA: bool = False

    # Monthly report job
    REPORTS_ENABLED: bool = True
    REPORT_DAY_OF_MONTH: int = 1
    REPORT_HOUR: int = 8

    # Outgoing mail
    MAIL_ENABLED: bool = False
    MAIL_HOST: str = "localhost"
    MAIL_PORT: int = 25
    MAIL_USERNAME: str = ""
    MAIL_PASSWORD: str = ""
    MAIL_USE_TLS: bool = False
    MAIL_FROM: str = "noreply@fitnesstracker.local"
    MAIL_TIMEOUT_SECONDS: float = 10.0

    # Frontend URL for CORS
    FRONTEND_URL: str = "http://localhost:5173"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Create a global settings instance for direct import
settings = get_settings()
