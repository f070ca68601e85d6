"""CLI for the ``elixir0`` package.

This module exposes callable command handlers (``cmd_encode``,
``cmd_decode``) and a Typer-based console interface. Environment variables
are loaded from a local ``.env`` using ``python-dotenv`` before delegating to
command logic. Codec logic lives in :mod:`elixir0.encoder` and
:mod:`elixir0.decoder`.

Commands
--------
- ``encode --input records.jsonl [--output out.txt]``: JSON Lines of
  :class:`~elixir0.payload.TransactionPayload` objects -> Elixir0 lines.
- ``decode --input file.txt [--output out.jsonl]``: Elixir0 lines -> JSON
  Lines.

Output is produced in memory first and written only when every record
succeeded, so a failing run never leaves a half-written file behind.
"""

from __future__ import annotations

import io
import sys
from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv
from pydantic import ValidationError
from typer.models import OptionInfo

from .errors import Elixir0Error
from .logging_setup import configure_logging, get_logger, log_run_summary
from .models import Elixir0Transaction
from .payload import TransactionPayload
from .settings import load_settings
from .streams import read_lines, write_lines

logger = get_logger("elixir0.cli")


def _emit(text: str, output_path: str | None, *, encoding: str) -> None:
    if output_path is None:
        # stdout gets the configured file encoding, without newline translation.
        buffer = getattr(sys.stdout, "buffer", None)
        if buffer is None:
            sys.stdout.write(text)
            return
        sys.stdout.flush()
        buffer.write(text.encode(encoding))
        buffer.flush()
        return
    with open(output_path, "w", encoding=encoding, newline="") as f:
        f.write(text)


def _load_payloads(input_path: str) -> list[Elixir0Transaction]:
    records: list[Elixir0Transaction] = []
    with open(input_path, encoding="utf-8") as f:
        for lineno, line in enumerate(f, start=1):
            if not line.strip():
                continue
            try:
                payload = TransactionPayload.model_validate_json(line)
            except ValidationError as e:
                raise ValueError(f"line {lineno}: invalid record: {e}") from e
            records.append(payload.to_transaction())
    return records


def cmd_encode(input_path: str, output_path: str | None = None) -> int:
    """Encode a JSON Lines file of records into Elixir0 lines.

    Errors are written to stderr and the function returns a non-zero exit
    status. On success, returns ``0``.
    """

    try:
        settings = load_settings()
    except ValidationError as e:
        print(f"Error: invalid settings: {e}", file=sys.stderr)
        return 1

    try:
        records = _load_payloads(input_path)
    except FileNotFoundError:
        print(f"Error: File not found: {input_path}", file=sys.stderr)
        return 1
    except PermissionError:
        print(f"Error: Permission denied: {input_path}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: Failed to parse records: {e}", file=sys.stderr)
        return 1

    buf = io.StringIO()
    try:
        count = write_lines(records, buf, terminator=settings.terminator)
    except Elixir0Error as e:
        print(f"Error: encode failed: {e}", file=sys.stderr)
        return 1

    try:
        _emit(buf.getvalue(), output_path, encoding=settings.file_encoding)
    except OSError as e:
        print(f"Error: failed to write output: {e}", file=sys.stderr)
        return 1

    log_run_summary(logger, "encoded", count, source=input_path)
    return 0


def cmd_decode(input_path: str, output_path: str | None = None) -> int:
    """Decode an Elixir0 file into JSON Lines (one record per line)."""

    try:
        settings = load_settings()
    except ValidationError as e:
        print(f"Error: invalid settings: {e}", file=sys.stderr)
        return 1

    try:
        with open(input_path, encoding=settings.file_encoding, newline="") as f:
            records = list(read_lines(f))
    except FileNotFoundError:
        print(f"Error: File not found: {input_path}", file=sys.stderr)
        return 1
    except PermissionError:
        print(f"Error: Permission denied: {input_path}", file=sys.stderr)
        return 1
    except UnicodeDecodeError as e:
        print(f"Error: cannot read '{input_path}' as {settings.file_encoding}: {e}", file=sys.stderr)
        return 1
    except Elixir0Error as e:
        print(f"Error: decode failed: {e}", file=sys.stderr)
        return 1

    out = "".join(
        TransactionPayload.from_transaction(r).model_dump_json(exclude_none=True) + "\n"
        for r in records
    )
    try:
        _emit(out, output_path, encoding="utf-8")
    except OSError as e:
        print(f"Error: failed to write output: {e}", file=sys.stderr)
        return 1

    log_run_summary(logger, "decoded", len(records), source=input_path)
    return 0


# ---- Typer-based console interface -------------------------------------------


app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help="Encode and decode Elixir0 domestic transfer lines.",
)

# Module-level option objects to satisfy ruff B008 (no calls in parameter
# defaults).
INPUT_OPTION: OptionInfo = typer.Option(
    ...,
    "--input",
    "-i",
    help="Path to the input file",
    dir_okay=False,
    file_okay=True,
    exists=False,  # the handler reports missing files itself
)
OUTPUT_OPTION: OptionInfo = typer.Option(
    "--output",
    "-o",
    help="Write to this file instead of stdout",
    dir_okay=False,
)


@app.command("encode")
def encode_cmd(
    input_path: Annotated[Path, INPUT_OPTION],
    output_path: Annotated[Path | None, OUTPUT_OPTION] = None,
) -> None:
    """Encode JSON Lines records into Elixir0 lines."""

    code = cmd_encode(str(input_path), str(output_path) if output_path else None)
    if code:
        raise typer.Exit(code)


@app.command("decode")
def decode_cmd(
    input_path: Annotated[Path, INPUT_OPTION],
    output_path: Annotated[Path | None, OUTPUT_OPTION] = None,
) -> None:
    """Decode Elixir0 lines into JSON Lines records."""

    code = cmd_decode(str(input_path), str(output_path) if output_path else None)
    if code:
        raise typer.Exit(code)


@app.callback()
def _root() -> None:
    """Load ``.env`` from the CWD (existing env wins) and configure logging."""

    load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)
    configure_logging()


def main() -> None:
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
