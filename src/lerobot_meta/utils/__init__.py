"""Utility functions."""

from lerobot_meta.utils.logging import setup_logging, get_logger
from lerobot_meta.utils.paths import normalize_base_path

__all__ = [
    "setup_logging",
    "get_logger",
    "normalize_base_path",
]
