from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from tars.domain.fields import DEFAULT_DATETIME_FORMAT

logger = logging.getLogger(__name__)


def _resolve_project_root() -> Path:
    if getattr(sys, "frozen", False):
        return Path(sys.executable).resolve().parent
    return Path(__file__).resolve().parents[1]


PROJECT_ROOT = _resolve_project_root()


def load_env() -> list[Path]:
    """Load .env, then .env.<APP_ENV> over it. Returns the files that were read."""
    env_name = os.getenv("APP_ENV", "development")
    candidates = [Path.cwd(), PROJECT_ROOT]
    loaded: list[Path] = []
    for base in candidates:
        env_path = base / ".env"
        if env_path.exists():
            load_dotenv(env_path)
            loaded.append(env_path)
            break

    for base in candidates:
        env_specific = base / f".env.{env_name}"
        if env_specific.exists():
            load_dotenv(env_specific, override=True)
            loaded.append(env_specific)
            break

    if loaded:
        logger.debug("Loaded settings from %s", ", ".join(str(p) for p in loaded))
    else:
        logger.debug("No .env file found for APP_ENV=%s", env_name)
    return loaded


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    log_dir: str = "logs"
    datetime_format: str = DEFAULT_DATETIME_FORMAT
    default_priority: str = "m"

    @classmethod
    def from_env(cls) -> Settings:
        return cls(
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_dir=os.getenv("LOG_DIR", "logs"),
            datetime_format=os.getenv("TARS_DATETIME_FORMAT", "").strip() or DEFAULT_DATETIME_FORMAT,
            default_priority=os.getenv("TARS_DEFAULT_PRIORITY", "m").strip() or "m",
        )


load_env()

SETTINGS = Settings.from_env()
