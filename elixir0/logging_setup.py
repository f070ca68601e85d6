"""Logging for the ``elixir0`` codec.

Library modules only call ``get_logger("elixir0.<module>")``; handlers are
attached once by the CLI through :func:`configure_logging`.

Codec log records carry where in a file they happened. :class:`LineLogger`
prefixes each message with the 1-based line number and the layout position
(``line 3 [amount]: ...``) so a rejected record can be found in the source
file, and :func:`log_run_summary` reports per-run record counts in one
consistent shape.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import MutableMapping
from typing import IO, Any

_PKG_LOGGER_NAME = "elixir0"
_DEFAULT_FMT = "%(asctime)s %(name)s %(levelname)s %(message)s"
_CONFIGURED = False


def _parse_level(level: int | str | None) -> int:
    if level is None:
        level = os.getenv("ELIXIR0_LOG_LEVEL") or logging.INFO
    if isinstance(level, int):
        return level
    name = level.strip().upper()
    if name.isdigit():
        return int(name)
    numeric = logging.getLevelName(name)
    return numeric if isinstance(numeric, int) else logging.INFO


def configure_logging(
    level: int | str | None = None,
    *,
    fmt: str | None = None,
    stream: IO[str] | None = None,
) -> None:
    """Attach a single ``StreamHandler`` to the ``elixir0`` logger, once.

    ``level`` defaults to ``ELIXIR0_LOG_LEVEL``, else ``INFO``. ``stream``
    defaults to the ``sys.stderr`` current at call time.
    """

    global _CONFIGURED
    if _CONFIGURED:
        return

    logger = logging.getLogger(_PKG_LOGGER_NAME)
    for h in list(logger.handlers):
        if isinstance(h, logging.NullHandler):
            logger.removeHandler(h)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(fmt or _DEFAULT_FMT))
    logger.setLevel(_parse_level(level))
    logger.addHandler(handler)
    logger.propagate = False

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger, keeping the package silent until configured."""

    pkg_logger = logging.getLogger(_PKG_LOGGER_NAME)
    if not _CONFIGURED and not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)


class LineLogger(logging.LoggerAdapter):
    """Logger adapter tagging messages with a line number and layout field.

    The values are also exposed on the record as ``line_number`` and
    ``field`` for formatters or filters that want them.
    """

    def __init__(
        self,
        logger: logging.Logger,
        *,
        line_number: int | None = None,
        field: str | None = None,
    ) -> None:
        super().__init__(logger, {"line_number": line_number, "field": field})

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> tuple[Any, MutableMapping[str, Any]]:
        extra = dict(self.extra or {})
        prefix = ""
        if extra.get("line_number") is not None:
            prefix = f"line {extra['line_number']}"
        if extra.get("field"):
            prefix = f"{prefix} [{extra['field']}]".lstrip()
        kwargs["extra"] = {**extra, **kwargs.get("extra", {})}
        return (f"{prefix}: {msg}" if prefix else msg), kwargs


def log_run_summary(
    logger: logging.Logger,
    action: str,
    count: int,
    *,
    source: str | None = None,
    level: int = logging.INFO,
) -> None:
    """Log how many records one encode/decode run handled."""

    where = f" from {source}" if source else ""
    logger.log(level, "%s %d record(s)%s", action, count, where)


__all__ = ["LineLogger", "configure_logging", "get_logger", "log_run_summary"]
