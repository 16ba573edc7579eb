"""Logging configuration for termfolio.

The REPL owns stdout, so log records go to ~/.termfolio/logs/termfolio.log.
A stderr handler can be added for debugging.
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

# Directory for log files
LOGS_DIR = Path.home() / ".termfolio" / "logs"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ROOT_LOGGER = "termfolio"

# Module-level state
_file_handler: Optional[logging.FileHandler] = None
_stderr_handler: Optional[logging.Handler] = None
_log_path: Optional[Path] = None


def get_log_path(name: str = "termfolio") -> Path:
    """Get the log file path, creating the logs directory."""
    LOGS_DIR.mkdir(parents=True, exist_ok=True)
    return LOGS_DIR / f"{name}.log"


def _level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(
    level: int | str = logging.INFO,
    log_path: Optional[Path] = None,
    debug: bool = False,
) -> Path:
    """Attach file logging (and optionally stderr) to the termfolio logger.

    Args:
        level: Level for the file handler.
        log_path: Override the log file location.
        debug: Also log DEBUG records to stderr.

    Returns:
        Path to the log file
    """
    global _file_handler, _stderr_handler, _log_path

    close_logging()

    path = log_path or get_log_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    file_level = logging.DEBUG if debug else _level(level)
    _file_handler = logging.FileHandler(path, mode="a", encoding="utf-8")
    _file_handler.setLevel(file_level)
    _file_handler.setFormatter(formatter)

    logger = logging.getLogger(ROOT_LOGGER)
    logger.addHandler(_file_handler)
    logger.setLevel(file_level)

    if debug:
        _stderr_handler = logging.StreamHandler(sys.stderr)
        _stderr_handler.setLevel(logging.DEBUG)
        _stderr_handler.setFormatter(formatter)
        logger.addHandler(_stderr_handler)

    _log_path = path
    logger.info("=== termfolio started ===")
    return path


def close_logging() -> None:
    """Detach and close handlers added by configure_logging."""
    global _file_handler, _stderr_handler, _log_path

    logger = logging.getLogger(ROOT_LOGGER)
    if _file_handler is not None:
        logger.info("=== termfolio stopped ===")
        logger.removeHandler(_file_handler)
        _file_handler.close()
        _file_handler = None
    if _stderr_handler is not None:
        logger.removeHandler(_stderr_handler)
        _stderr_handler = None
    _log_path = None


def get_current_log_path() -> Optional[Path]:
    """Path of the active log file, or None if logging is not configured."""
    return _log_path
