"""Shared test fixtures and helpers for tmuxbind test suite.

Every test runs against a patched subprocess.run, so no tmux process is ever
spawned. Helpers build tmux-shaped output lines and records for the entity
variable lists.
"""

import os

# Config isolation: pin env vars BEFORE any tmuxbind import.
# config.py creates a singleton at import time.
os.environ["TMUXBIND_TMUX_BIN"] = "tmux"
os.environ.pop("TMUXBIND_SOCKET", None)
os.environ.pop("TMUXBIND_LOG_LEVEL", None)

from collections.abc import Iterable, Iterator
from unittest.mock import MagicMock, patch

import pytest

from tmuxbind import Tmux
from tmuxbind.query import SEPARATOR


# ── Output builders ──────────────────────────────────────────────────────


def make_completed(stdout: str = "", returncode: int = 0, stderr: str = "") -> MagicMock:
    """Build a CompletedProcess-like result for a patched subprocess.run."""
    return MagicMock(stdout=stdout, stderr=stderr, returncode=returncode)


def make_record(variables: Iterable[str], **values: str) -> dict[str, str]:
    """Build a record for ``variables``, blank except for ``values``."""
    return {name: values.get(name, "") for name in variables}


def make_line(variables: Iterable[str], **values: str) -> str:
    """Build one quoted output line as tmux prints it for ``variables``."""
    record = make_record(variables, **values)
    return "'" + SEPARATOR.join(record.values()) + "'"


def make_output(variables: Iterable[str], *rows: dict[str, str]) -> str:
    """Build multi-line output, one row per dict of values."""
    variables = list(variables)
    return "".join(make_line(variables, **row) + "\n" for row in rows)


def argv_of(mock_run: MagicMock, index: int = -1) -> list[str]:
    """Return the argv passed to the index-th subprocess.run call."""
    return list(mock_run.call_args_list[index][0][0])


# ── Fixtures ─────────────────────────────────────────────────────────────


@pytest.fixture
def mock_run() -> Iterator[MagicMock]:
    """Patch subprocess.run; succeeds with empty output unless reconfigured."""
    with patch("subprocess.run") as m:
        m.return_value = make_completed()
        yield m


@pytest.fixture
def tmux(mock_run: MagicMock) -> Tmux:
    """A Tmux handle on the default socket, with tmux reported as installed."""
    with patch("shutil.which", return_value="/usr/bin/tmux"):
        return Tmux(tmux_bin="tmux")


@pytest.fixture
def socket_tmux(mock_run: MagicMock) -> Tmux:
    """A Tmux handle bound to /tmp/test.sock (validated against mock_run)."""
    with patch("shutil.which", return_value="/usr/bin/tmux"):
        handle = Tmux(socket_path="/tmp/test.sock", tmux_bin="tmux")
    mock_run.reset_mock()
    mock_run.return_value = make_completed()
    return handle
