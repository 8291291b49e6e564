from pydantic_settings import BaseSettings
from dotenv import load_dotenv
from typing import Optional

load_dotenv()


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite+aiosqlite:///./planner.db"
    DB_ECHO: bool = False
    LOG_LEVEL: str = "INFO"

    # Base URLs embedded in emails and redirects
    API_BASE_URL: str = "http://localhost:3333"
    WEB_BASE_URL: str = "http://localhost:3000"

    # "smtp" delivers through SMTP_*, "console" only logs the message
    MAIL_BACKEND: str = "console"
    SMTP_HOST: Optional[str] = None
    SMTP_PORT: int = 465
    SMTP_USER: Optional[str] = None
    SMTP_PASSWORD: Optional[str] = None
    SMTP_TIMEOUT_SECONDS: float = 10.0

    MAIL_FROM_NAME: str = "Planner"
    MAIL_FROM_ADDRESS: str = "planner@me.com"

    PROJECT_NAME: str = "Planner API"
    PROJECT_VERSION: str = "1.0.0"
    PROJECT_DESCRIPTION: str = "Trip planning API with participant invitations"

    class Config:
        env_file = ".env"


settings = Settings()
