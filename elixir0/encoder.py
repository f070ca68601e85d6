"""Record -> line encoder for the Elixir0 format.

``encode`` projects an :class:`~elixir0.models.Elixir0Transaction` onto the
fixed layout in :data:`elixir0.layout.ELIXIR0_LAYOUT`:

- absent values render as ``style.null_text`` (empty by default);
- dates render with ``style.date_format`` (``yyyyMMdd``);
- decimals render in plain notation with their own scale (``150.00`` stays
  ``150.00``, ``1E+3`` becomes ``1000``);
- text fields are wrapped in one pair of quotes after null substitution;
- tokens are joined by the delimiter with no leading/trailing delimiter and
  no line terminator.

Every token is rendered before joining, so a failure never yields a partial
line. Values that cannot be rendered raise :class:`~elixir0.errors.EncodingError`.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Any

from .errors import EncodingError
from .layout import ELIXIR0_LAYOUT, FieldKind, FieldSpec
from .logging_setup import LineLogger, get_logger
from .models import Elixir0Transaction
from .style import DEFAULT_STYLE, FormatStyle

logger = get_logger("elixir0.encoder")


def _format_date(value: date, pattern: str) -> str:
    # strftime does not zero-pad years below 1000 on every platform.
    return value.strftime(pattern.replace("%Y", f"{value.year:04d}"))


def render_value(value: Any, style: FormatStyle = DEFAULT_STYLE, *, field: str | None = None) -> str:
    """Render a single field value as unquoted line text."""

    if value is None:
        return style.null_text
    # bool is an int subclass; it is not a valid value for any position.
    if isinstance(value, bool):
        raise EncodingError(f"cannot render boolean value {value!r}", field=field)
    if isinstance(value, date):
        try:
            return _format_date(value, style.date_format)
        except (ValueError, OverflowError) as exc:
            raise EncodingError(f"cannot render date {value!r}: {exc}", field=field) from exc
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise EncodingError(f"cannot render non-finite amount {value!r}", field=field)
        return format(value, "f")
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str):
        return value
    raise EncodingError(
        f"cannot render value of type {type(value).__name__}: {value!r}", field=field
    )


def _render_field(spec: FieldSpec, record: Elixir0Transaction, style: FormatStyle) -> str:
    if spec.kind is FieldKind.LITERAL:
        return spec.literal or ""
    parts = [render_value(getattr(record, a), style, field=spec.name) for a in spec.attrs]
    text = style.delimiter.join(parts)
    if spec.quoted:
        return f"{style.quote}{text}{style.quote}"
    return text


def encode_tokens(
    record: Elixir0Transaction, style: FormatStyle = DEFAULT_STYLE
) -> list[str]:
    """Return the rendered tokens of ``record`` in layout order (quotes included)."""

    try:
        return [_render_field(spec, record, style) for spec in ELIXIR0_LAYOUT]
    except EncodingError as exc:
        LineLogger(logger, field=exc.field).debug("encode failed: %s", exc)
        raise


def encode(record: Elixir0Transaction, style: FormatStyle = DEFAULT_STYLE) -> str:
    """Encode ``record`` as one Elixir0 line (without a line terminator).

    Pure function of its inputs: equal records always produce identical
    output.

    Raises
    ------
    EncodingError
        When a field value cannot be rendered as text.
    """

    return style.delimiter.join(encode_tokens(record, style))


__all__ = ["encode", "encode_tokens", "render_value"]
