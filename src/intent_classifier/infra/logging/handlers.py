from __future__ import annotations

import logging
from logging import Handler
from pathlib import Path

from .formatters import HumanReadableFormatter, JSONFormatter


def build_jsonl_file_handler(path: Path, level: int = logging.INFO) -> Handler:
    """Create an appending file handler that writes one JSON object per line.

    Args:
        path: Path to the .jsonl log file (parent directories are created)
        level: Logging level

    Returns:
        Configured FileHandler appending JSON lines
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    h = logging.FileHandler(path, encoding="utf-8", mode="a")
    h.setLevel(level)
    h.setFormatter(JSONFormatter())
    return h


def build_console_handler(level: int = logging.INFO) -> Handler:
    """Create a stderr handler with human-readable formatting.

    Args:
        level: Logging level

    Returns:
        Configured StreamHandler
    """
    h = logging.StreamHandler()
    h.setLevel(level)
    h.setFormatter(HumanReadableFormatter())
    return h
