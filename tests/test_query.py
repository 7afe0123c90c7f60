"""Tests for tmuxbind.query — rendering and executing queries."""

import pytest

from tmuxbind.errors import ExternalProcessError
from tmuxbind.query import SEPARATOR, Query, QueryOutput

from conftest import argv_of, make_completed


# ── render ───────────────────────────────────────────────────────────────


class TestRender:
    def test_list_sessions_scenario(self):
        q = Query().cmd("list-sessions").vars("session_name", "session_id")
        assert q.render() == [
            "list-sessions",
            "-F",
            "'#{session_name}-:-#{session_id}'",
        ]

    def test_display_message_uses_p(self):
        q = Query().cmd("display-message").vars("session_name", "session_id")
        assert q.render() == [
            "display-message",
            "-p",
            "'#{session_name}-:-#{session_id}'",
        ]

    def test_no_vars_no_format_flag(self):
        q = Query().cmd("kill-server")
        assert q.render() == ["kill-server"]

    def test_order_command_flags_format_positionals(self):
        q = (
            Query()
            .cmd("new-session")
            .fargs("-d", "-P")
            .pargs("htop")
            .vars("session_id")
            .fargs("-s", "work")
        )
        assert q.render() == [
            "new-session", "-d", "-P", "-s", "work",
            "-F", "'#{session_id}'",
            "htop",
        ]

    def test_socket_prefix(self):
        q = Query(socket_path="/tmp/s").cmd("list-clients")
        assert q.render() == ["-S", "/tmp/s", "list-clients"]

    def test_socket_prefix_keeps_display_message_flag(self):
        q = Query(socket_path="/tmp/s").cmd("display-message").vars("pid")
        assert q.render() == ["-S", "/tmp/s", "display-message", "-p", "'#{pid}'"]

    def test_vars_last_call_wins(self):
        q = Query().cmd("list-panes").vars("pane_id", "pane_index").vars("pane_tty")
        assert q.variables == ["pane_tty"]
        assert q.render()[-1] == "'#{pane_tty}'"

    def test_duplicate_flags_are_kept_in_order(self):
        q = Query().cmd("capture-pane").fargs("-p", "-t", "%1").fargs("-p")
        assert q.render() == ["capture-pane", "-p", "-t", "%1", "-p"]

    def test_commands_not_deduplicated(self):
        q = Query().cmd("list-sessions").cmd("list-sessions")
        assert q.render() == ["list-sessions", "list-sessions"]

    def test_render_is_repeatable(self):
        q = Query().cmd("list-windows").vars("window_id")
        assert q.render() == q.render()

    def test_template_joined_with_separator(self):
        q = Query().vars("a", "b", "c")
        assert q.format_template() == f"'#{{a}}{SEPARATOR}#{{b}}{SEPARATOR}#{{c}}'"

    def test_argv_prepends_executable(self):
        q = Query(tmux_bin="/opt/tmux").cmd("list-sessions")
        assert q.argv() == ["/opt/tmux", "list-sessions"]


# ── run ──────────────────────────────────────────────────────────────────


class TestRun:
    def test_returns_output_with_variables(self, mock_run):
        mock_run.return_value = make_completed("'main-:-$0'\n")
        o = Query(tmux_bin="tmux").cmd("list-sessions").vars("session_name", "session_id").run()
        assert isinstance(o, QueryOutput)
        assert o.variables == ["session_name", "session_id"]
        assert o.one() == {"session_name": "main", "session_id": "$0"}
        assert argv_of(mock_run) == [
            "tmux", "list-sessions", "-F", "'#{session_name}-:-#{session_id}'",
        ]
        assert mock_run.call_args.kwargs["capture_output"] is True

    def test_nonzero_exit_raises(self, mock_run):
        mock_run.return_value = make_completed("", 1, "can't find session: nope\n")
        with pytest.raises(ExternalProcessError) as exc_info:
            Query(tmux_bin="tmux").cmd("kill-session").fargs("-t", "nope").run()

        err = exc_info.value
        assert err.returncode == 1
        assert "can't find session" in err.stderr
        assert err.argv == ["tmux", "kill-session", "-t", "nope"]

    def test_custom_error_message(self, mock_run):
        mock_run.return_value = make_completed("", 1, "no server running")
        with pytest.raises(ExternalProcessError, match="failed to kill window"):
            Query(tmux_bin="tmux").cmd("kill-window").run(error="failed to kill window")

    def test_launch_failure_raises(self, mock_run):
        mock_run.side_effect = FileNotFoundError("No such file or directory: 'tmux'")
        with pytest.raises(ExternalProcessError) as exc_info:
            Query(tmux_bin="tmux").cmd("list-sessions").run()
        assert exc_info.value.returncode is None
        assert "No such file" in exc_info.value.stderr


class TestRunTty:
    def test_inherits_terminal(self, mock_run):
        Query(tmux_bin="tmux").cmd("attach-session").fargs("-t", "main").run_tty()
        assert argv_of(mock_run) == ["tmux", "attach-session", "-t", "main"]
        assert "capture_output" not in mock_run.call_args.kwargs
        assert "stdout" not in mock_run.call_args.kwargs

    def test_nonzero_exit_raises(self, mock_run):
        mock_run.return_value = make_completed(returncode=1)
        with pytest.raises(ExternalProcessError, match="failed to attach session") as exc_info:
            Query(tmux_bin="tmux").cmd("attach-session").run_tty(error="failed to attach session")
        assert exc_info.value.returncode == 1
