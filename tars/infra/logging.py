from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler

from tars.config import PROJECT_ROOT, SETTINGS, Settings

logger = logging.getLogger(__name__)


def setup_logging(settings: Settings = SETTINGS) -> None:
    """
    Configure the root logger for an application embedding tars.

    Call once at startup; the domain and service modules only create
    module loggers and never install handlers themselves.
    """
    log_dir = PROJECT_ROOT / settings.log_dir
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "tars.log"

    formatter = logging.Formatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    file_handler = RotatingFileHandler(log_file, maxBytes=2_000_000, backupCount=3)
    file_handler.setFormatter(formatter)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)

    logging.basicConfig(
        level=settings.log_level.upper(),
        handlers=[file_handler, console_handler],
        force=True,
    )
    logger.info(
        "Logging to %s (level=%s, datetime_format=%r, default_priority=%s)",
        log_file,
        settings.log_level.upper(),
        settings.datetime_format,
        settings.default_priority,
    )
