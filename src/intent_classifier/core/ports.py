from __future__ import annotations

from typing import Any, Protocol


class LoggerPort(Protocol):
    """Port for structured logging.

    Keyword arguments are structured fields attached to the log record.
    Implementations handle JSON serialization and formatting.
    """

    def debug(self, message: str, **fields: Any) -> None:
        ...

    def info(self, message: str, **fields: Any) -> None:
        ...

    def warning(self, message: str, **fields: Any) -> None:
        ...

    def error(self, message: str, exc_info: bool = False, **fields: Any) -> None:
        ...

    def exception(self, message: str, **fields: Any) -> None:
        ...
