"""Formatting style passed into every encode/decode call.

The style is an immutable value rather than shared formatting state, so the
codec functions stay pure and can run concurrently without coordination.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class FormatStyle:
    """Delimiter, quoting and date rules for one line format.

    Attributes
    ----------
    delimiter:
        Single character separating line tokens. Also joins the two halves of
        a composite name/address field.
    quote:
        Single character wrapped around every text field. Never escaped.
    date_format:
        ``strftime``/``strptime`` pattern for date fields.
    null_text:
        Text rendered for an absent value (before quoting).
    """

    delimiter: str = "|"
    quote: str = '"'
    date_format: str = "%Y%m%d"
    null_text: str = ""

    def __post_init__(self) -> None:
        for name in ("delimiter", "quote"):
            val = getattr(self, name)
            if not isinstance(val, str) or len(val) != 1:
                raise ValueError(f"FormatStyle.{name} must be a single character")
        if self.delimiter == self.quote:
            raise ValueError("FormatStyle.delimiter and FormatStyle.quote must differ")
        if not self.date_format:
            raise ValueError("FormatStyle.date_format must be non-empty")


DEFAULT_STYLE = FormatStyle()
"""The Elixir0 style: ``|`` delimiter, ``"`` quotes, ``yyyyMMdd`` dates."""


__all__ = ["FormatStyle", "DEFAULT_STYLE"]
