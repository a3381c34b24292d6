"""Logging setup for the jitsu engine and the demo.

Handlers are attached to the ``jitsu`` logger, not the root logger, so an
embedding application keeps control of its own logging. Each handler is
tagged with a name and reused on later calls, so setup_logging() can run
any number of times.

The level comes from GameConfig (``JITSU_LOG_LEVEL``); ``JITSU_DEBUG``
forces DEBUG. ``JITSU_LOG_FILE`` moves the rotating log file.
"""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

from jitsu.config import GameConfig, get_config

LOGGER_NAME = "jitsu"
FILE_HANDLER_NAME = "jitsu_file"
CONSOLE_HANDLER_NAME = "jitsu_console"
DEFAULT_LOG_FILE = Path("logs") / "jitsu.log"

_FORMAT = "%(asctime)s %(levelname)-8s %(name)s:%(lineno)d | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def parse_level(level: str | int) -> int:
    """Turn ``"debug"`` / ``"INFO"`` / ``10`` into a logging level (INFO if unknown)"""
    if isinstance(level, int):
        return level
    name = (level or "").strip().upper()
    return logging._nameToLevel.get(name, logging.INFO)


def resolve_log_file(log_file: str | Path | None = None) -> Path:
    """Pick the log file: argument, then JITSU_LOG_FILE, then logs/jitsu.log"""
    path = Path(log_file or os.environ.get("JITSU_LOG_FILE") or DEFAULT_LOG_FILE)
    if not path.is_absolute():
        path = Path.cwd() / path
    return path


def _named_handler(logger: logging.Logger, name: str) -> logging.Handler | None:
    for handler in logger.handlers:
        if handler.name == name:
            return handler
    return None


def setup_logging(
    config: GameConfig | None = None,
    *,
    log_file: str | Path | None = None,
    enable_file: bool = True,
    enable_console: bool = False,
    console_level: str | int = "WARNING",
    max_bytes: int = 2 * 1024 * 1024,
    backup_count: int = 5,
) -> logging.Logger:
    """Configure the ``jitsu`` logger.

    Args:
        config: engine config supplying ``log_level`` / ``debug_mode``
        log_file: rotating log file path (see resolve_log_file)
        enable_file: attach the UTF-8 rotating file handler
        enable_console: attach a stderr handler
        console_level: level of the stderr handler
        max_bytes: rotation size
        backup_count: rotated files kept

    Returns:
        The configured ``jitsu`` logger
    """
    config = config or get_config()
    level = logging.DEBUG if config.debug_mode else parse_level(config.log_level)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)  # handlers filter
    formatter = logging.Formatter(fmt=_FORMAT, datefmt=_DATE_FORMAT)

    if enable_file:
        path = resolve_log_file(log_file)
        handler = _named_handler(logger, FILE_HANDLER_NAME)
        if handler is None:
            path.parent.mkdir(parents=True, exist_ok=True)
            handler = RotatingFileHandler(
                str(path), maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
            )
            handler.name = FILE_HANDLER_NAME
            logger.addHandler(handler)
        handler.setFormatter(formatter)
        handler.setLevel(level)

    if enable_console:
        handler = _named_handler(logger, CONSOLE_HANDLER_NAME)
        if handler is None:
            handler = logging.StreamHandler()
            handler.name = CONSOLE_HANDLER_NAME
            logger.addHandler(handler)
        handler.setFormatter(formatter)
        handler.setLevel(logging.DEBUG if config.debug_mode else parse_level(console_level))

    logger.debug(
        "Logging initialized | level=%s file=%s console=%s",
        logging.getLevelName(level), enable_file, enable_console,
    )
    return logger


def teardown_logging() -> None:
    """Detach and close the handlers installed by setup_logging"""
    logger = logging.getLogger(LOGGER_NAME)
    for name in (FILE_HANDLER_NAME, CONSOLE_HANDLER_NAME):
        handler = _named_handler(logger, name)
        if handler is not None:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(logging.NOTSET)
