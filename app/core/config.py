from typing import List, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    SECRET_KEY: str
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24

    DATABASE_URL: str = "sqlite+aiosqlite:///./jobotics.db"
    CORS_ORIGINS: List[str] = ["http://localhost:3000"]

    # Interviews are scheduled in a single organization-wide zone
    ORGANIZATION_TIMEZONE: str = "Asia/Kolkata"
    INTERVIEW_SLOT_MINUTES: int = 30

    GOOGLE_CALENDAR_CLIENT_ID: Optional[str] = None
    GOOGLE_CALENDAR_CLIENT_SECRET: Optional[str] = None
    GOOGLE_REFRESH_TOKEN: Optional[str] = None
    GOOGLE_CALENDAR_ID: str = "primary"

    SENDGRID_API_KEY: Optional[str] = None
    MAIL_FROM_EMAIL: str = "no-reply@jobotics.app"
    MAIL_FROM_NAME: str = "Jobotics"

    OPENAI_API_KEY: Optional[str] = None
    OPENAI_MODEL: str = "gpt-4o-mini"

    UPLOAD_DIR: str = "uploads"
    PUBLIC_BASE_URL: str = "http://localhost:8000"
    MAX_UPLOAD_BYTES: int = 10 * 1024 * 1024

    HTTP_TIMEOUT_SECONDS: float = 15.0

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

settings = Settings()
