from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env")

    # Banco de dados
    DATABASE_URL: str = "sqlite:///./fluffy_trivia.db"
    DB_ECHO: bool = False

    # JWT (CMS)
    JWT_SECRET_KEY: str = "dev-secret-change-me"
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    # CMS admin created by the seed script
    CMS_ADMIN_USERNAME: str = "admin"
    CMS_ADMIN_PASSWORD: Optional[str] = None

    ALLOWED_ORIGINS: List[str] = ["*"]
    LOG_LEVEL: str = "INFO"

    # analytics leaderboards
    ANALYTICS_TOP_N: int = 10


settings = Settings()
