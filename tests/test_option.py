"""Tests for tmuxbind.option — option listing parser and scoped commands."""

import pytest

from tmuxbind.errors import ExternalProcessError
from tmuxbind.option import Option, OptionScope, parse_options
from tmuxbind.pane import PANE_VARS, Pane
from tmuxbind.session import SESSION_VARS, Session
from tmuxbind.window import WINDOW_VARS, Window

from conftest import argv_of, make_completed, make_record


# ── parse_options ────────────────────────────────────────────────────────


class TestParseOptions:
    def test_key_value_lines(self):
        text = "status on\nhistory-limit 5000\n"
        assert parse_options(text) == [
            Option("status", "on"),
            Option("history-limit", "5000"),
        ]

    def test_splits_on_first_space_only(self):
        assert parse_options('status-left "[#S] "\n') == [Option("status-left", '"[#S] "')]

    def test_skips_lines_without_value(self):
        assert parse_options("\nlonely\nmouse off\n") == [Option("mouse", "off")]

    def test_empty(self):
        assert parse_options("") == []


# ── Scopes ───────────────────────────────────────────────────────────────


@pytest.fixture
def session(tmux) -> Session:
    return Session.from_record(
        make_record(SESSION_VARS, session_name="main", session_id="$0"), tmux,
    )


@pytest.fixture
def window(tmux) -> Window:
    return Window.from_record(make_record(WINDOW_VARS, window_id="@1"), tmux)


@pytest.fixture
def pane(tmux) -> Pane:
    return Pane.from_record(make_record(PANE_VARS, pane_id="%1"), tmux)


class TestServerOptions:
    def test_options(self, tmux, mock_run):
        mock_run.return_value = make_completed("escape-time 10\nexit-empty on\n")
        assert tmux.options() == [Option("escape-time", "10"), Option("exit-empty", "on")]
        assert argv_of(mock_run) == ["tmux", "show-options", "-s"]

    def test_set_option(self, tmux, mock_run):
        tmux.set_option("escape-time", "0")
        assert argv_of(mock_run) == ["tmux", "set-option", "-s", "escape-time", "0"]

    def test_delete_option(self, tmux, mock_run):
        tmux.delete_option("escape-time")
        assert argv_of(mock_run) == ["tmux", "set-option", "-s", "-u", "escape-time"]


class TestSessionOptions:
    def test_option(self, session, mock_run):
        mock_run.return_value = make_completed("status off\n")
        assert session.option("status") == Option("status", "off")
        assert argv_of(mock_run) == ["tmux", "show-options", "-t", "$0", "status"]

    def test_option_not_set(self, session, mock_run):
        mock_run.return_value = make_completed("")
        assert session.option("status") is None

    def test_set_option(self, session, mock_run):
        session.set_option("status", "off")
        assert argv_of(mock_run) == ["tmux", "set-option", "-t", "$0", "status", "off"]

    def test_unknown_option(self, session, mock_run):
        mock_run.return_value = make_completed("", 1, "invalid option: bogus")
        with pytest.raises(ExternalProcessError, match="failed to get option bogus"):
            session.option("bogus")


class TestWindowOptions:
    def test_options(self, window, mock_run):
        window.options()
        assert argv_of(mock_run) == ["tmux", "show-options", "-w", "-t", "@1"]

    def test_delete_option(self, window, mock_run):
        window.delete_option("automatic-rename")
        assert argv_of(mock_run) == [
            "tmux", "set-option", "-w", "-t", "@1", "-u", "automatic-rename",
        ]


class TestPaneOptions:
    def test_set_option(self, pane, mock_run):
        pane.set_option("remain-on-exit", "on")
        assert argv_of(mock_run) == [
            "tmux", "set-option", "-p", "-t", "%1", "remain-on-exit", "on",
        ]


class TestOptionScope:
    def test_flags(self):
        assert OptionScope.SERVER.value == "-s"
        assert OptionScope.SESSION.value == ""
        assert OptionScope.WINDOW.value == "-w"
        assert OptionScope.PANE.value == "-p"
