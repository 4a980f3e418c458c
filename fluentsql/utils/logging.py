"""Logging helpers for fluentsql.

Every logger lives under the ``fluentsql`` namespace. Records about statements carry
their details (operation, table, parameter and column/value counts) in an
``extra_fields`` mapping, which :class:`StructuredFormatter` flattens into JSON.
"""

from __future__ import annotations

import json
import logging
import sys
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from logging import LogRecord

__all__ = (
    "StructuredFormatter",
    "configure_logging",
    "get_logger",
    "statement_fields",
)

ROOT_LOGGER_NAME = "fluentsql"
SIMPLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def statement_fields(**fields: Any) -> dict[str, Any]:
    """Build the ``extra`` argument for a statement log record.

    Fields whose value is None are left out, so callers can pass optional details as-is.

    Example:
        ```python
        logger.debug("Rendered %s", query, extra=statement_fields(operation="SELECT", table="users"))
        ```

    Returns:
        A mapping suitable for the ``extra`` keyword of ``Logger.log``.
    """
    return {"extra_fields": {key: value for key, value in fields.items() if value is not None}}


class StructuredFormatter(logging.Formatter):
    """Render records as one JSON object per line."""

    def format(self, record: LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(getattr(record, "extra_fields", {}))
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger under the ``fluentsql`` namespace.

    Args:
        name: Logger name, with or without the ``fluentsql.`` prefix. Omit for the package logger.

    Returns:
        The namespaced logger.
    """
    if name is None or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if not name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(
    level: str = "INFO",
    format_style: str = "structured",
    log_to_file: str | None = None,
    extra_handlers: list[logging.Handler] | None = None,
) -> None:
    """Install handlers on the ``fluentsql`` logger.

    Existing handlers are replaced and the logger stops propagating to the root logger.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        format_style: ``"structured"`` for JSON lines on stdout, anything else for plain text.
        log_to_file: Optional path that receives structured records regardless of ``format_style``.
        extra_handlers: Additional handlers to attach unchanged.
    """
    package_logger = get_logger()
    package_logger.setLevel(getattr(logging, level.upper()))
    package_logger.handlers.clear()

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(StructuredFormatter() if format_style == "structured" else logging.Formatter(SIMPLE_FORMAT))
    package_logger.addHandler(console)

    if log_to_file:
        file_handler = logging.FileHandler(log_to_file)
        file_handler.setFormatter(StructuredFormatter())
        package_logger.addHandler(file_handler)

    for handler in extra_handlers or ():
        package_logger.addHandler(handler)

    package_logger.propagate = False
