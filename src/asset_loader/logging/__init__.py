from __future__ import annotations

import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import List

from asset_loader.config.models import LoggingSettings

_FORMAT = "[%(asctime)s][%(levelname)s][%(name)s] %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _resolve_level(name: str) -> int:
    level = logging.getLevelNamesMapping().get(name.strip().upper())
    if level is None:
        raise ValueError(f"Invalid logging level: {name}")
    return level


def _file_handler(settings: LoggingSettings) -> TimedRotatingFileHandler | None:
    path = Path(settings.file.path.strip()) if settings.file.path.strip() else None
    if path is None:
        return None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = TimedRotatingFileHandler(
            filename=str(path),
            when="midnight",
            backupCount=settings.file.rotation.backup_count,
            encoding="utf-8",
        )
    except OSError:
        logging.getLogger(__name__).error("Asset log file could not be opened. path=%s", path, exc_info=True)
        return None
    handler.suffix = "%Y-%m-%d"
    return handler


def init_logging(settings: LoggingSettings) -> int:
    """
    Route the root logger to stderr and, when ``file.path`` is set, to a daily log file.

    Existing root handlers are replaced. Returns the numeric level applied.
    """
    level = _resolve_level(settings.level)
    formatter = logging.Formatter(fmt=_FORMAT, datefmt=_DATE_FORMAT)

    handlers: List[logging.Handler] = [logging.StreamHandler()]
    root_logger = logging.getLogger()
    for existing in list(root_logger.handlers):
        root_logger.removeHandler(existing)
    root_logger.setLevel(level)

    file_handler = _file_handler(settings)
    if file_handler is not None:
        handlers.append(file_handler)

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)
    return level


__all__ = ["init_logging"]
