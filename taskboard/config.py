"""Settings loaded from environment variables (+ optional .env)."""

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKBOARD"
BASE_DIR = Path(__file__).parent.parent

load_dotenv(override=False)


def _env(name: str, default: str) -> str:
    value = os.getenv(f"{ENV_PREFIX}_{name}")
    if value is None or value.strip() == "":
        return default
    return value.strip()


def _env_int(name: str, default: int) -> int:
    raw = _env(name, "")
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_list(name: str, default: str) -> list[str]:
    return [item.strip() for item in _env(name, default).split(",") if item.strip()]


@dataclass(frozen=True)
class Settings:
    """Application settings."""

    database_path: Path
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"
    cors_origins: list[str] = field(default_factory=lambda: ["*"])


def load_settings() -> Settings:
    """Build settings from the current environment."""
    return Settings(
        database_path=Path(_env("DATABASE_PATH", str(BASE_DIR / "tasks.db"))),
        host=_env("HOST", "0.0.0.0"),
        port=_env_int("PORT", 8000),
        log_level=_env("LOG_LEVEL", "INFO").upper(),
        cors_origins=_env_list("CORS_ORIGINS", "*"),
    )


settings = load_settings()
