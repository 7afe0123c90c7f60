"""Tests for tmuxbind.session — session commands."""

import pytest

from tmuxbind import vars as v
from tmuxbind.client import CLIENT_VARS
from tmuxbind.errors import ExternalProcessError, InvalidSessionNameError
from tmuxbind.session import SESSION_VARS, AttachSessionOptions, NewWindowOptions, Session
from tmuxbind.window import WINDOW_VARS

from conftest import argv_of, make_completed, make_line, make_output, make_record


@pytest.fixture
def session(tmux) -> Session:
    return Session.from_record(
        make_record(SESSION_VARS, session_name="main", session_id="$0", session_windows="2"),
        tmux,
    )


# ── Decoding ─────────────────────────────────────────────────────────────


class TestFromRecord:
    def test_fields(self, tmux):
        s = Session.from_record(make_record(
            SESSION_VARS,
            session_name="main",
            session_id="$0",
            session_attached="2",
            session_attached_list="/dev/pts/1,/dev/pts/2",
            session_grouped="1",
            session_group_size="not-a-number",
            session_path="/home/dev",
        ), tmux)

        assert s.attached == 2
        assert s.attached_list == ["/dev/pts/1", "/dev/pts/2"]
        assert s.grouped is True
        assert s.group_size == 0
        assert s.path == "/home/dev"

    def test_equality_ignores_handle(self, tmux, socket_tmux):
        record = make_record(SESSION_VARS, session_name="main", session_id="$0")
        assert Session.from_record(record, tmux) == Session.from_record(record, socket_tmux)

    def test_repr_hides_handle(self, session):
        assert "tmux=" not in repr(session)


# ── Commands ─────────────────────────────────────────────────────────────


class TestLifecycle:
    def test_kill(self, session, mock_run):
        session.kill()
        assert argv_of(mock_run) == ["tmux", "kill-session", "-t", "$0"]

    def test_kill_failure(self, session, mock_run):
        mock_run.return_value = make_completed("", 1, "can't find session: main")
        with pytest.raises(ExternalProcessError, match="failed to kill session"):
            session.kill()

    def test_rename_updates_name(self, session, mock_run):
        session.rename("renamed")
        assert argv_of(mock_run) == ["tmux", "rename-session", "-t", "$0", "renamed"]
        assert session.name == "renamed"

        session.kill()
        assert argv_of(mock_run) == ["tmux", "kill-session", "-t", "$0"]

    def test_rename_failure_keeps_name(self, session, mock_run):
        mock_run.return_value = make_completed("", 1, "duplicate session: work")
        with pytest.raises(ExternalProcessError, match="failed to rename session"):
            session.rename("work")
        assert session.name == "main"

    @pytest.mark.parametrize("name", ["", "foo:bar", "foo.bar"])
    def test_rename_rejects_invalid_name(self, session, mock_run, name):
        with pytest.raises(InvalidSessionNameError):
            session.rename(name)
        mock_run.assert_not_called()
        assert session.name == "main"

    def test_detach(self, session, mock_run):
        session.detach()
        assert argv_of(mock_run) == ["tmux", "detach-client", "-s", "$0"]

    def test_next_and_previous_window(self, session, mock_run):
        session.next_window()
        assert argv_of(mock_run) == ["tmux", "next-window", "-t", "$0"]
        session.previous_window()
        assert argv_of(mock_run) == ["tmux", "previous-window", "-t", "$0"]


class TestAttach:
    def test_default(self, session, mock_run):
        session.attach()
        assert argv_of(mock_run) == ["tmux", "attach-session", "-t", "$0"]
        assert "capture_output" not in mock_run.call_args.kwargs

    def test_options(self, session, mock_run):
        session.attach_session(AttachSessionOptions(working_dir="/srv", detach_clients=True))
        assert argv_of(mock_run) == [
            "tmux", "attach-session", "-t", "$0", "-d", "-c", "/srv",
        ]

    def test_failure(self, session, mock_run):
        mock_run.return_value = make_completed(returncode=1)
        with pytest.raises(ExternalProcessError, match="failed to attach session"):
            session.attach()


class TestWindows:
    def test_list_windows(self, session, mock_run):
        mock_run.return_value = make_completed(make_output(
            WINDOW_VARS,
            {v.WINDOW_ID: "@1", v.WINDOW_INDEX: "0", v.WINDOW_NAME: "editor", v.WINDOW_ACTIVE: "1"},
            {v.WINDOW_ID: "@2", v.WINDOW_INDEX: "1", v.WINDOW_NAME: "shell"},
        ))
        windows = session.list_windows()

        assert [w.name for w in windows] == ["editor", "shell"]
        assert windows[0].active is True
        assert windows[1].active is False
        assert windows[0].tmux is session.tmux
        assert argv_of(mock_run)[1:4] == ["list-windows", "-t", "$0"]

    def test_get_window_by_index(self, session, mock_run):
        mock_run.return_value = make_completed(make_output(
            WINDOW_VARS,
            {v.WINDOW_ID: "@1", v.WINDOW_INDEX: "0"},
            {v.WINDOW_ID: "@2", v.WINDOW_INDEX: "1"},
        ))
        assert session.get_window_by_index(1).id == "@2"
        assert session.get_window_by_index(5) is None

    def test_new_default(self, session, mock_run):
        mock_run.return_value = make_completed(
            make_line(WINDOW_VARS, window_id="@7", window_index="2") + "\n"
        )
        window = session.new()

        assert window.id == "@7"
        assert window.index == 2
        argv = argv_of(mock_run)
        assert argv[:5] == ["tmux", "new-window", "-P", "-t", "$0"]
        assert argv[5] == "-F"

    def test_new_window_options(self, session, mock_run):
        mock_run.return_value = make_completed(make_line(WINDOW_VARS, window_id="@8") + "\n")
        session.new_window(NewWindowOptions(
            start_directory="/srv", window_name="logs", do_not_attach=True,
        ))
        argv = argv_of(mock_run)
        assert argv[:10] == [
            "tmux", "new-window", "-P", "-t", "$0",
            "-c", "/srv", "-n", "logs", "-d",
        ]
        assert argv[10] == "-F"


class TestClients:
    def test_filters_by_session_name(self, session, mock_run):
        mock_run.return_value = make_completed(make_output(
            CLIENT_VARS,
            {v.CLIENT_TTY: "/dev/pts/1", v.CLIENT_SESSION: "main"},
            {v.CLIENT_TTY: "/dev/pts/2", v.CLIENT_SESSION: "work"},
            {v.CLIENT_TTY: "/dev/pts/3", v.CLIENT_SESSION: "main"},
        ))
        assert [c.tty for c in session.list_clients()] == ["/dev/pts/1", "/dev/pts/3"]
