"""Logging setup for iban-gen.

Modules obtain loggers through :func:`get_logger` and attach structured
context with ``extra={"extra": {...}}``; :class:`JsonFormatter` merges that
context into each JSON line.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, TextIO

ROOT_LOGGER = "iban_gen"

TEXT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers kept at WARNING whatever the requested level
QUIET_LOGGERS = ("faker",)


class JsonFormatter(logging.Formatter):
    """Render a record as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        context = getattr(record, "extra", None)
        if isinstance(context, dict):
            log_data.update(context)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


def build_formatter(format_type: str = "standard") -> logging.Formatter:
    """Return the formatter for ``"standard"`` or ``"json"`` output."""
    if format_type == "json":
        return JsonFormatter()
    return logging.Formatter(fmt=TEXT_FORMAT, datefmt=DATE_FORMAT)


def setup_logging(
    level: str = "INFO",
    format_type: str = "standard",
    stream: TextIO | None = None,
) -> None:
    """Install a single console handler on the root logger.

    Parameters
    ----------
    level : str
        Log level name; unknown names fall back to INFO.
    format_type : str
        ``"standard"`` (pipe-separated text) or ``"json"``.
    stream : TextIO | None
        Destination, stderr by default so stdout only carries IBANs.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(log_level)
    handler.setFormatter(build_formatter(format_type))

    root_logger = logging.getLogger()
    for existing in root_logger.handlers[:]:
        root_logger.removeHandler(existing)
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level)

    logging.getLogger(ROOT_LOGGER).setLevel(log_level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Return a logger inside the ``iban_gen`` hierarchy.

    ``__name__`` of a package module is used as is; anything else
    (``"__main__"`` when a module runs as a script) is nested under
    ``iban_gen`` so the level set by :func:`setup_logging` applies.
    """
    if name != ROOT_LOGGER and not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
