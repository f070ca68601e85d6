from __future__ import annotations

import logging
from dataclasses import replace
from decimal import Decimal
from io import StringIO

import pytest

from elixir0 import DecodingError, EncodingError, encode_lines, read_lines, write_lines
from tests.helpers.records import REFERENCE_LINE, REFERENCE_RECORD, TAX_LINE, TAX_RECORD


def test_encode_lines_is_lazy_and_ordered():
    it = encode_lines([REFERENCE_RECORD, TAX_RECORD])
    assert next(it) == REFERENCE_LINE
    assert list(it) == [TAX_LINE]


def test_write_lines_terminates_each_line():
    buf = StringIO()
    n = write_lines([REFERENCE_RECORD, TAX_RECORD], buf)
    assert n == 2
    assert buf.getvalue() == f"{REFERENCE_LINE}\r\n{TAX_LINE}\r\n"


def test_write_lines_custom_terminator():
    buf = StringIO()
    write_lines([REFERENCE_RECORD], buf, terminator="\n")
    assert buf.getvalue() == REFERENCE_LINE + "\n"


def test_write_lines_never_writes_partial_line():
    bad = replace(TAX_RECORD, amount=Decimal("NaN"))
    buf = StringIO()
    with pytest.raises(EncodingError):
        write_lines([REFERENCE_RECORD, bad], buf)
    assert buf.getvalue() == REFERENCE_LINE + "\r\n"


def test_read_lines_skips_blank_lines():
    stream = StringIO(f"{REFERENCE_LINE}\r\n\r\n   \n{TAX_LINE}\n")
    records = list(read_lines(stream))
    assert [r.payment_details for r in records] == ["INVOICE 123", TAX_RECORD.payment_details]


def test_read_lines_reports_line_number():
    stream = StringIO(f"{REFERENCE_LINE}\n\n110|20240305\n")
    with pytest.raises(DecodingError) as exc_info:
        list(read_lines(stream))
    assert exc_info.value.line_number == 3
    assert str(exc_info.value).startswith("line 3: expected 16 fields")


def test_read_lines_logs_rejected_line(caplog: pytest.LogCaptureFixture):
    stream = StringIO(f"{REFERENCE_LINE}\n{REFERENCE_LINE.replace('|150.00|', '|1,50|')}\n")
    with caplog.at_level(logging.WARNING, logger="elixir0"), pytest.raises(DecodingError):
        list(read_lines(stream))
    [rec] = caplog.records
    assert rec.getMessage().startswith("line 2 [amount]: ")
    assert rec.line_number == 2


def test_write_lines_logs_rejected_record(caplog: pytest.LogCaptureFixture):
    bad = replace(TAX_RECORD, amount=Decimal("Infinity"))
    with caplog.at_level(logging.WARNING, logger="elixir0"), pytest.raises(EncodingError):
        write_lines([REFERENCE_RECORD, REFERENCE_RECORD, bad], StringIO())
    [rec] = caplog.records
    assert rec.getMessage().startswith("line 3 [amount]: record rejected")
    assert rec.field == "amount"
