"""Environment-driven settings for the ``elixir0`` CLI.

Values are read from the process environment. Entry points load a local
``.env`` with ``python-dotenv`` first (without overriding variables that are
already set), so both sources work.

Variables
---------
``ELIXIR0_LINE_TERMINATOR``
    ``crlf`` (default) or ``lf``; terminator written after each encoded line.
``ELIXIR0_FILE_ENCODING``
    Text encoding for reading and writing Elixir0 files (default ``utf-8``).
``ELIXIR0_LOG_LEVEL``
    Consumed by :mod:`elixir0.logging_setup`.
"""

from __future__ import annotations

import codecs
import os

from pydantic import BaseModel, ConfigDict, field_validator

from .streams import CRLF, LF

_TERMINATORS = {"crlf": CRLF, "lf": LF}


class Settings(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True, str_strip_whitespace=True)

    line_terminator: str = "crlf"
    file_encoding: str = "utf-8"

    @field_validator("line_terminator")
    @classmethod
    def _known_terminator(cls, v: str) -> str:
        key = v.lower()
        if key not in _TERMINATORS:
            raise ValueError("line_terminator must be one of: crlf, lf")
        return key

    @field_validator("file_encoding")
    @classmethod
    def _known_encoding(cls, v: str) -> str:
        try:
            codecs.lookup(v)
        except LookupError as exc:
            raise ValueError(f"unknown encoding: {v!r}") from exc
        return v

    @property
    def terminator(self) -> str:
        return _TERMINATORS[self.line_terminator]


def load_settings() -> Settings:
    """Build :class:`Settings` from ``ELIXIR0_*`` environment variables."""

    raw: dict[str, str] = {}
    env_term = os.getenv("ELIXIR0_LINE_TERMINATOR")
    if env_term:
        raw["line_terminator"] = env_term
    env_enc = os.getenv("ELIXIR0_FILE_ENCODING")
    if env_enc:
        raw["file_encoding"] = env_enc
    return Settings(**raw)


__all__ = ["Settings", "load_settings"]
