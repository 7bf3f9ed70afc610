# blog_api/core/config.py
import os
from typing import ClassVar, List

from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()


def _default_database_url() -> str:
    data_dir = os.path.abspath(os.getenv("DATA_DIR", "./data"))
    os.makedirs(data_dir, exist_ok=True)
    return os.getenv("DATABASE_URL", f"sqlite:///{os.path.join(data_dir, 'blog.db')}")


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


def _env_list(name: str, default: str) -> List[str]:
    return [item.strip() for item in os.getenv(name, default).split(",") if item.strip()]


class Settings(BaseModel):
    # Constante (não vira campo Pydantic)
    API_PREFIX: ClassVar[str] = "/api/v1"

    DATABASE_URL: str = Field(default_factory=_default_database_url)
    SECRET_KEY: str = Field(default_factory=lambda: os.getenv("SECRET_KEY", "CHANGE_ME_SUPER_SECRET"))
    ALGORITHM: str = Field(default_factory=lambda: os.getenv("ALGORITHM", "HS256"))

    # token e registro de autenticação nascem com a mesma validade
    ACCESS_TOKEN_EXPIRE_DAYS: int = Field(default_factory=lambda: int(os.getenv("ACCESS_TOKEN_EXPIRE_DAYS", "7")))
    AUTH_RECORD_EXPIRE_DAYS: int = Field(default_factory=lambda: int(os.getenv("AUTH_RECORD_EXPIRE_DAYS", "7")))
    REVALIDATE_INTERVAL_MINUTES: int = Field(default_factory=lambda: int(os.getenv("REVALIDATE_INTERVAL_MINUTES", "5")))

    ACCESS_TOKEN_COOKIE: str = Field(default_factory=lambda: os.getenv("ACCESS_TOKEN_COOKIE", "access_token"))
    COOKIE_SECURE: bool = Field(default_factory=lambda: _env_bool("COOKIE_SECURE", "false"))
    AUTH_BYPASS_PATHS: List[str] = Field(
        default_factory=lambda: _env_list("AUTH_BYPASS_PATHS", "/api/v1/auth/logout")
    )

    CORS_ORIGINS: List[str] = Field(default_factory=lambda: _env_list("CORS_ORIGINS", "*"))
    LOG_LEVEL: str = Field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())
    RUN_MIGRATIONS_ON_STARTUP: bool = Field(default_factory=lambda: _env_bool("RUN_MIGRATIONS_ON_STARTUP", "true"))

    DEFAULT_PAGE_LIMIT: int = Field(default_factory=lambda: int(os.getenv("DEFAULT_PAGE_LIMIT", "20")))
    MAX_PAGE_LIMIT: int = Field(default_factory=lambda: int(os.getenv("MAX_PAGE_LIMIT", "100")))


settings = Settings()
