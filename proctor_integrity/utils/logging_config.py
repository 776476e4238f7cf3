"""
Logging setup for the integrity engine
"""
import logging
import logging.handlers
import sys
from datetime import date
from pathlib import Path
from typing import List, Optional, Union

from ..config import get_settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

MAX_LOG_BYTES = 5 * 1024 * 1024
LOG_BACKUPS = 3


def _build_handlers(service_name: str, log_to_file: bool, log_to_console: bool, log_dir: Path) -> List[logging.Handler]:
    handlers: List[logging.Handler] = []

    if log_to_console:
        handlers.append(logging.StreamHandler(sys.stdout))

    if log_to_file:
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.handlers.RotatingFileHandler(
            log_dir / f"{service_name}_{date.today().isoformat()}.log",
            maxBytes=MAX_LOG_BYTES,
            backupCount=LOG_BACKUPS,
            encoding="utf-8",
        ))

    return handlers


def setup_logging(
    service_name: str = "proctor-integrity",
    level: Optional[str] = None,
    log_to_file: Optional[bool] = None,
    log_to_console: bool = True,
    log_dir: Optional[Union[str, Path]] = None
) -> logging.Logger:
    """
    Configure the root logger for the engine.

    Unset arguments fall back to the INTEGRITY_* settings.

    Returns:
        Logger named after the service
    """
    settings = get_settings()
    level = level or settings.LOG_LEVEL
    if log_to_file is None:
        log_to_file = settings.LOG_TO_FILE

    handlers = _build_handlers(
        service_name, log_to_file, log_to_console, Path(log_dir or settings.LOG_DIR)
    )
    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    root_logger.handlers = handlers

    logger = logging.getLogger(service_name)
    logger.debug(f"Logging configured: level={level} file={log_to_file}")
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the given name"""
    return logging.getLogger(name)
