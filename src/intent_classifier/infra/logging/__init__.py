from __future__ import annotations

from .logger import ClassifierLogger
from .handlers import build_jsonl_file_handler, build_console_handler
from .formatters import JSONFormatter, HumanReadableFormatter

__all__ = [
    "ClassifierLogger",
    "build_jsonl_file_handler",
    "build_console_handler",
    "JSONFormatter",
    "HumanReadableFormatter",
]
