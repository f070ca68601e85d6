"""Pytest configuration for test isolation.

The CLI reads ``ELIXIR0_*`` variables from the environment and loads a
``.env`` from the current working directory. Tests must not pick up either
from the developer's shell or checkout, so each test runs in its own
temporary directory with those variables cleared.

Logging is marked as already configured so CLI invocations never attach a
handler bound to pytest's captured streams.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from elixir0 import logging_setup


@pytest.fixture(autouse=True)
def _isolate_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    for var in ("ELIXIR0_LINE_TERMINATOR", "ELIXIR0_FILE_ENCODING", "ELIXIR0_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(logging_setup, "_CONFIGURED", True)
