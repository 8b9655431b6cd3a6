"""
Logging configuration for the DEX aggregator clients.
"""
from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from loguru import logger

from dexagg.settings.config import settings

_FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message} | {extra}"
_FALLBACK_DIR = Path("/tmp/dexagg_logs")


def _resolve_log_path(default_path: Path) -> Path:
    try:
        default_path.parent.mkdir(parents=True, exist_ok=True)
        return default_path
    except OSError:
        fallback_dir = Path.cwd() / "logs"
        fallback_dir.mkdir(parents=True, exist_ok=True)
        return fallback_dir / default_path.name


def _add_file_sink(path: Path, level: str, rotation: str, retention: str) -> None:
    # File sink with fallback for permission issues (e.g. read-only checkouts)
    try:
        logger.add(
            str(path),
            format=_FILE_FORMAT,
            level=level,
            rotation=rotation,
            retention=retention,
            compression="zip",
        )
    except PermissionError:
        _FALLBACK_DIR.mkdir(parents=True, exist_ok=True)
        logger.add(
            str(_FALLBACK_DIR / path.name),
            format=_FILE_FORMAT,
            level=level,
            rotation=rotation,
            retention=retention,
            compression="zip",
        )


class LoguruHandler(logging.Handler):
    """Forward standard-library records (httpx, httpcore) into loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        logger.opt(depth=6, exception=record.exc_info).log(level, record.getMessage())


def setup_logging():
    """Configure loguru sinks and route stdlib logging into loguru.

    Replaces existing loguru sinks and root logging handlers, so only the
    application entry point (or the test suite) should call it.
    """
    logger.remove()
    logger.configure(extra={"environment": settings.environment})

    log_level = (settings.log_level or "INFO").upper()
    # Allow LOG_LEVEL env override (e.g. debug/trace) used in tests
    env_level = os.getenv("LOG_LEVEL", "").upper()
    if env_level:
        log_level = env_level

    logger.add(
        sys.stdout,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        level=log_level,
        colorize=True,
    )

    log_path = _resolve_log_path(Path(settings.log_file))
    _add_file_sink(log_path, "DEBUG", rotation="100 MB", retention="30 days")
    _add_file_sink(
        _resolve_log_path(log_path.parent / "errors.log"),
        "ERROR",
        rotation="50 MB",
        retention="90 days",
    )

    root_logger = logging.getLogger()
    root_logger.handlers = []
    root_logger.setLevel(logging.INFO)
    root_logger.addHandler(LoguruHandler())

    logger.info(f"Logging initialized - Level: {log_level}, File: {log_path}")
    return logger


# Library modules log through the plain loguru logger; sinks are only
# installed when the application calls setup_logging().
log = logger
