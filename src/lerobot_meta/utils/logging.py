"""Structured logging utilities."""

import logging
import sys
from pathlib import Path
from typing import Optional

LOGGER_NAMESPACE = "lerobot_meta"
HTTP_LOGGER = "httpx"


def _build_handlers(
    log_level: int, log_dir: Optional[Path], log_file: str
) -> list[logging.Handler]:
    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # stderr keeps command output on stdout clean
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    handlers: list[logging.Handler] = [console_handler]

    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_dir / log_file)
        file_handler.setLevel(log_level)
        handlers.append(file_handler)

        error_handler = logging.FileHandler(log_dir / "errors.log")
        error_handler.setLevel(logging.ERROR)
        handlers.append(error_handler)

    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def setup_logging(
    level: str = "INFO",
    log_dir: Optional[Path] = None,
    log_file: str = "resolve.log",
    include_http: bool = False,
) -> None:
    """Setup logging configuration.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR).
        log_dir: Directory for log files. If None, only console logging.
        log_file: Name of the log file.
        include_http: Also route httpx's per-request logs to the same handlers.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    handlers = _build_handlers(log_level, log_dir, log_file)

    names = [LOGGER_NAMESPACE]
    if include_http:
        names.append(HTTP_LOGGER)

    for name in names:
        logger = logging.getLogger(name)
        logger.setLevel(log_level)
        logger.handlers.clear()
        for handler in handlers:
            logger.addHandler(handler)
        logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a module.

    Args:
        name: Module path below the package, e.g. "hub.fetcher".

    Returns:
        Logger instance.
    """
    return logging.getLogger(f"{LOGGER_NAMESPACE}.{name}")
