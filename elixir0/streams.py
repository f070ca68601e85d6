"""Line-oriented readers and writers around the codec.

These helpers play the role of the line sink and line source that surround
the encoder: they own line termination, blank-line skipping and line
numbering. They add no file framing (headers, trailers, checksums).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import TextIO

from .decoder import decode
from .encoder import encode
from .errors import DecodingError, EncodingError
from .logging_setup import LineLogger, get_logger, log_run_summary
from .models import Elixir0Transaction
from .style import DEFAULT_STYLE, FormatStyle

logger = get_logger("elixir0.streams")

CRLF = "\r\n"
LF = "\n"


def encode_lines(
    records: Iterable[Elixir0Transaction], style: FormatStyle = DEFAULT_STYLE
) -> Iterator[str]:
    """Lazily encode ``records`` into lines without terminators."""

    for record in records:
        yield encode(record, style)


def write_lines(
    records: Iterable[Elixir0Transaction],
    stream: TextIO,
    *,
    terminator: str = CRLF,
    style: FormatStyle = DEFAULT_STYLE,
) -> int:
    """Write one terminated line per record to ``stream``.

    Each line is fully encoded before anything is written for it, so an
    encoding failure leaves previously written lines intact and never a
    partial line. Returns the number of lines written.
    """

    count = 0
    for lineno, record in enumerate(records, start=1):
        try:
            line = encode(record, style)
        except EncodingError as exc:
            LineLogger(logger, line_number=lineno, field=exc.field).warning(
                "record rejected: %s", exc
            )
            raise
        stream.write(line + terminator)
        count += 1
    log_run_summary(logger, "wrote", count, level=logging.DEBUG)
    return count


def read_lines(
    stream: Iterable[str], style: FormatStyle = DEFAULT_STYLE
) -> Iterator[Elixir0Transaction]:
    """Decode each non-blank line of ``stream``.

    Decoding failures are re-raised with the 1-based line number attached.
    """

    count = 0
    for lineno, raw in enumerate(stream, start=1):
        line = raw.rstrip("\r\n")
        if not line.strip():
            continue
        try:
            record = decode(line, style)
        except DecodingError as exc:
            LineLogger(logger, line_number=lineno, field=exc.field).warning(
                "line rejected: %s", exc.args[0]
            )
            raise DecodingError(
                exc.args[0], field=exc.field, line_number=lineno
            ) from exc
        count += 1
        yield record
    log_run_summary(logger, "read", count, level=logging.DEBUG)


__all__ = ["CRLF", "LF", "encode_lines", "read_lines", "write_lines"]
