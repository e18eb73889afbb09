from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from dependency_injector.resources import Resource

from .handlers import build_console_handler, build_jsonl_file_handler


LOG_FILE_NAME = "classifier.jsonl"


class ClassifierLogger(Resource):
    """Structured logger for the classification workflow.

    Structured fields passed as keyword arguments end up as top-level keys
    in the JSONL file. Handlers are released on container shutdown.
    """

    def init(
        self,
        *,
        logs_dir: Path,
        logger_name: str = "intent_classifier",
        level: str = "INFO",
        console_output: bool = False,
        file_output: bool = False,
    ) -> "ClassifierLogger":
        """Configure the named logger.

        Args:
            logs_dir: Directory for the JSONL log file
            logger_name: Logger name
            level: Logging level (DEBUG, INFO, WARNING, ERROR)
            console_output: Whether to add a human-readable stderr handler
            file_output: Whether to append JSON lines to ``logs_dir/classifier.jsonl``

        Returns:
            Self for dependency_injector Resource pattern
        """
        numeric_level = getattr(logging, level.upper())
        self._logger = logging.getLogger(logger_name)
        self._logger.setLevel(numeric_level)
        self._logger.propagate = False

        self._logger.handlers.clear()
        self._handlers: list[logging.Handler] = []

        if file_output:
            self._add_handler(build_jsonl_file_handler(logs_dir / LOG_FILE_NAME, level=numeric_level))

        if console_output:
            self._add_handler(build_console_handler(level=numeric_level))

        return self

    def shutdown(self, resource: "ClassifierLogger") -> None:
        """Flush and close every handler this logger added."""
        for handler in self._handlers:
            handler.flush()
            handler.close()
        self._logger.handlers.clear()

    def _add_handler(self, handler: logging.Handler) -> None:
        self._logger.addHandler(handler)
        self._handlers.append(handler)

    def debug(self, message: str, **fields: Any) -> None:
        self._logger.debug(message, extra=fields or None)

    def info(self, message: str, **fields: Any) -> None:
        self._logger.info(message, extra=fields or None)

    def warning(self, message: str, **fields: Any) -> None:
        self._logger.warning(message, extra=fields or None)

    def error(self, message: str, exc_info: bool = False, **fields: Any) -> None:
        self._logger.error(message, extra=fields or None, exc_info=exc_info)

    def exception(self, message: str, **fields: Any) -> None:
        self._logger.exception(message, extra=fields or None)
