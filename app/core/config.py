"""
Application settings.

Values are read from environment variables once, at import time, after
``load_dotenv`` has merged an optional ``.env`` file into the process
environment.
"""

import os

from dotenv import load_dotenv

load_dotenv()


def _as_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes"}


def _as_list(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings:
    """Settings loaded from environment variables.

    Every value is read once, when this module is imported. Set environment
    variables before the import, or patch attributes on ``settings``.
    """

    PROJECT_NAME: str = os.getenv("PROJECT_NAME", "Games API")
    API_VERSION: str = os.getenv("API_VERSION", "1.0.0")

    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./games.db")
    SQL_ECHO: bool = _as_bool(os.getenv("SQL_ECHO", "False"))

    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "3000"))
    RELOAD: bool = _as_bool(os.getenv("RELOAD", "False"))

    # The front end is hosted separately, so every origin is allowed unless
    # CORS_ORIGINS narrows it down, e.g. CORS_ORIGINS="https://me.github.io".
    CORS_ORIGINS: list[str] = _as_list(os.getenv("CORS_ORIGINS", "*"))

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")


settings = Settings()
