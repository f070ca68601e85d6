"""Public interface for the ``elixir0`` package.

This module exposes the codec functions and public models/types as the stable
import surface. There is no runtime logic here, only symbol re-exports.
"""

from .decoder import decode, split_line
from .encoder import encode, encode_tokens, render_value
from .errors import DecodingError, Elixir0Error, EncodingError
from .layout import ELIXIR0_LAYOUT, TEXT_FIELDS, FieldKind, FieldSpec
from .models import (
    PAYMENT_CODE_LOCAL,
    TRANSACTION_CODE_CT,
    Elixir0Transaction,
    TransactionStatus,
)
from .streams import encode_lines, read_lines, write_lines
from .style import DEFAULT_STYLE, FormatStyle

__all__ = [
    # Codec
    "encode",
    "encode_tokens",
    "render_value",
    "decode",
    "split_line",
    "encode_lines",
    "read_lines",
    "write_lines",
    # Layout / style
    "ELIXIR0_LAYOUT",
    "TEXT_FIELDS",
    "FieldKind",
    "FieldSpec",
    "FormatStyle",
    "DEFAULT_STYLE",
    # Models / types
    "Elixir0Transaction",
    "TransactionStatus",
    "PAYMENT_CODE_LOCAL",
    "TRANSACTION_CODE_CT",
    # Errors
    "Elixir0Error",
    "EncodingError",
    "DecodingError",
]
