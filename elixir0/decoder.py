"""Line -> record decoder for the Elixir0 format.

Inverse of :func:`elixir0.encoder.encode`. A line is split with a quote-aware
tokenizer (a delimiter inside a quoted text field is data), checked against
:data:`elixir0.layout.ELIXIR0_LAYOUT` position by position, and converted
into an :class:`~elixir0.models.Elixir0Transaction`.

Canonical form
--------------
The encoder renders ``None`` and ``""`` identically, so the decoder cannot
tell them apart. Empty tokens (and empty halves of a composite name/address
field) always decode to ``None``. ``encode(decode(line)) == line`` holds for
every well-formed line.

Composite fields are split on the first embedded delimiter. A name that
itself contains the delimiter is therefore misread; the format has no
escaping, so this is a format limitation rather than something the decoder
can fix.

Tax/social-security fields are left unset. Their values live inside
``payment_details`` and extracting them is a separate, format-specific step.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any

from .encoder import render_value
from .errors import DecodingError
from .layout import ELIXIR0_LAYOUT, FieldKind, FieldSpec
from .models import Elixir0Transaction, TransactionStatus
from .style import DEFAULT_STYLE, FormatStyle

_INT_RE = re.compile(r"-?[0-9]+")
# Plain notation only; the encoder never emits exponents or separators.
_DECIMAL_RE = re.compile(r"-?[0-9]+(?:\.[0-9]+)?")


def _canonical(value: Any, token: str, spec: FieldSpec, style: FormatStyle) -> Any:
    # Accept only tokens the encoder itself would produce for the parsed value.
    if render_value(value, style, field=spec.name) != token:
        raise DecodingError(f"non-canonical {spec.name} {token!r}", field=spec.name)
    return value


def _parse_plain(token: str, spec: FieldSpec, style: FormatStyle) -> Any:
    if token == "" or token == style.null_text:
        return None
    if spec.value_type is int:
        if not _INT_RE.fullmatch(token):
            raise DecodingError(f"invalid integer {token!r}", field=spec.name)
        return _canonical(int(token), token, spec, style)
    if spec.value_type is date:
        if not token.isascii():
            raise DecodingError(f"invalid date {token!r}", field=spec.name)
        try:
            parsed = datetime.strptime(token, style.date_format).date()
        except ValueError as exc:
            raise DecodingError(f"invalid date {token!r}", field=spec.name) from exc
        return _canonical(parsed, token, spec, style)
    if spec.value_type is Decimal:
        if not _DECIMAL_RE.fullmatch(token):
            raise DecodingError(f"invalid amount {token!r}", field=spec.name)
        try:
            parsed = Decimal(token)
        except InvalidOperation as exc:  # pragma: no cover - regex guards this
            raise DecodingError(f"invalid amount {token!r}", field=spec.name) from exc
        return _canonical(parsed, token, spec, style)
    return token


def _empty_to_none(text: str, style: FormatStyle) -> str | None:
    if text == "" or text == style.null_text:
        return None
    return text


def _decode_text(token: str, spec: FieldSpec, style: FormatStyle) -> dict[str, str | None]:
    q = style.quote
    if len(token) < 2 or not (token.startswith(q) and token.endswith(q)):
        raise DecodingError(f"text field must be quoted, got {token!r}", field=spec.name)
    inner = token[1:-1]
    if q in inner:
        raise DecodingError("text field contains an embedded quote", field=spec.name)
    if not spec.composite:
        return {spec.attrs[0]: _empty_to_none(inner, style)}
    name, sep, address = inner.partition(style.delimiter)
    if not sep:
        raise DecodingError(
            f"composite field is missing its {style.delimiter!r} separator", field=spec.name
        )
    return {
        spec.attrs[0]: _empty_to_none(name, style),
        spec.attrs[1]: _empty_to_none(address, style),
    }


def decode(line: str, style: FormatStyle = DEFAULT_STYLE) -> Elixir0Transaction:
    """Decode one Elixir0 line into a record.

    A trailing line terminator is ignored. The result has ``status`` set to
    :attr:`TransactionStatus.NEW`.

    Raises
    ------
    DecodingError
        When the line does not match the layout: wrong token count, a text
        field without quotes, a plain field with quotes, a literal position
        that is not ``0``, a non-empty reserved position, or a value that
        cannot be parsed.
    """

    tokens = split_line(line.rstrip("\r\n"), style)
    if len(tokens) != len(ELIXIR0_LAYOUT):
        raise DecodingError(
            f"expected {len(ELIXIR0_LAYOUT)} fields, got {len(tokens)}"
        )

    values: dict[str, Any] = {}
    for spec, token in zip(ELIXIR0_LAYOUT, tokens, strict=True):
        if spec.kind is FieldKind.LITERAL:
            if token != spec.literal:
                raise DecodingError(
                    f"expected {spec.literal!r}, got {token!r}", field=spec.name
                )
        elif spec.kind is FieldKind.TEXT:
            values.update(_decode_text(token, spec, style))
        else:
            if style.quote in token:
                raise DecodingError(f"plain field must not be quoted: {token!r}", field=spec.name)
            values[spec.attrs[0]] = _parse_plain(token, spec, style)

    return Elixir0Transaction(**values, status=TransactionStatus.NEW)


__all__ = ["decode", "split_line"]
