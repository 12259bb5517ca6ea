"""Application bootstrap: logging and service wiring."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from formstyler.config.settings import AppSettings
from formstyler.styles.service import StyleService
from formstyler.styles.store import PresetStore

LOGGER_NAME = "formstyler"
LOG_FILENAME = "formstyler.log"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
MAX_LOG_ENTRIES = 100

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def log_path(settings: AppSettings) -> Path:
    return settings.log_dir / LOG_FILENAME


def configure_logging(settings: AppSettings) -> logging.Logger:
    """Attach the rotating file handler to the package logger when enabled."""
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if getattr(handler, "_formstyler_handler", False):
            logger.removeHandler(handler)
            handler.close()

    if not settings.logging_enabled:
        logger.addHandler(_tagged(logging.NullHandler()))
        logger.propagate = False
        return logger

    logger.setLevel(_LEVELS[settings.log_level])
    settings.log_dir.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        log_path(settings),
        maxBytes=512_000,
        backupCount=3,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(_tagged(handler))
    logger.propagate = False
    return logger


def read_log_entries(settings: AppSettings, limit: int = MAX_LOG_ENTRIES) -> list[str]:
    """Return up to ``limit`` log lines, newest first."""
    path = log_path(settings)
    if limit <= 0 or not path.exists():
        return []
    lines = [line for line in path.read_text(encoding="utf-8").splitlines() if line.strip()]
    return list(reversed(lines[-limit:]))


def clear_logs(settings: AppSettings) -> None:
    logger = logging.getLogger(LOGGER_NAME)
    for handler in logger.handlers:
        if isinstance(handler, RotatingFileHandler):
            handler.flush()
    path = log_path(settings)
    if path.exists():
        path.write_text("", encoding="utf-8")
    logger.info("logs cleared by user")


def build_service(settings: AppSettings) -> StyleService:
    """Create the style service from settings and load stored presets."""
    logger = logging.getLogger(f"{LOGGER_NAME}.startup")
    store = PresetStore(settings.presets_path)
    store.reload()
    errors = store.load_errors()
    if errors:
        logger.warning("preset load warnings: %s", " | ".join(errors[:6]))
    return StyleService(
        store,
        settings.css_output_dir,
        css_filename=settings.css_filename,
        base_url=settings.css_base_url,
    )


def _tagged(handler: logging.Handler) -> logging.Handler:
    handler._formstyler_handler = True  # type: ignore[attr-defined]
    return handler
