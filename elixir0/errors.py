"""Exception types raised by the Elixir0 codec.

All errors derive from :class:`ValueError` so callers that already guard
parsing with ``except ValueError`` keep working.
"""

from __future__ import annotations


class Elixir0Error(ValueError):
    """Base class for codec failures."""


class EncodingError(Elixir0Error):
    """A record value could not be rendered as line text.

    Encoding aborts on the first such value; no partial line is ever returned.
    Callers should treat this as a programming error rather than a
    recoverable condition.
    """

    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class DecodingError(Elixir0Error):
    """A line does not match the Elixir0 field layout."""

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        line_number: int | None = None,
    ) -> None:
        super().__init__(message)
        self.field = field
        self.line_number = line_number

    def __str__(self) -> str:
        msg = super().__str__()
        if self.line_number is not None:
            return f"line {self.line_number}: {msg}"
        return msg


__all__ = ["Elixir0Error", "EncodingError", "DecodingError"]
