"""Session entity and session-level commands.

Session commands target the session by id, which stays fixed across renames.
rename() still refreshes the snapshot's name, which list_clients() matches on.

Key classes: Session, AttachSessionOptions, NewWindowOptions.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from . import vars as v
from .errors import InvalidSessionNameError
from .option import OptionScope, OptionsMixin
from .parsing import check_session_name, is_one, parse_int, parse_list
from .query import Record
from .window import WINDOW_VARS, Window

if TYPE_CHECKING:
    from .client import Client
    from .tmux import Tmux

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AttachSessionOptions:
    """Options for attach-session."""

    working_dir: str = ""         # -c
    detach_clients: bool = False  # -d: detach other clients


@dataclass(frozen=True)
class NewWindowOptions:
    """Options for new-window."""

    start_directory: str = ""  # -c
    window_name: str = ""      # -n
    do_not_attach: bool = False  # -d: do not make it the current window


SESSION_VARS: tuple[str, ...] = (
    v.SESSION_ACTIVITY,
    v.SESSION_ALERTS,
    v.SESSION_ATTACHED,
    v.SESSION_ATTACHED_LIST,
    v.SESSION_CREATED,
    v.SESSION_FORMAT,
    v.SESSION_GROUP,
    v.SESSION_GROUP_ATTACHED,
    v.SESSION_GROUP_ATTACHED_LIST,
    v.SESSION_GROUP_LIST,
    v.SESSION_GROUP_MANY_ATTACHED,
    v.SESSION_GROUP_SIZE,
    v.SESSION_GROUPED,
    v.SESSION_ID,
    v.SESSION_LAST_ATTACHED,
    v.SESSION_MANY_ATTACHED,
    v.SESSION_MARKED,
    v.SESSION_NAME,
    v.SESSION_PATH,
    v.SESSION_STACK,
    v.SESSION_WINDOWS,
)


@dataclass
class Session(OptionsMixin):
    """Snapshot of a tmux session."""

    activity: str
    alerts: str
    attached: int
    attached_list: list[str]
    created: str
    format: bool
    group: str
    group_attached: int
    group_attached_list: list[str]
    group_list: list[str]
    group_many_attached: bool
    group_size: int
    grouped: bool
    id: str
    last_attached: str
    many_attached: bool
    marked: bool
    name: str
    path: str
    stack: str
    windows: int

    tmux: Tmux = field(repr=False, compare=False)

    _option_scope = OptionScope.SESSION

    @classmethod
    def from_record(cls, record: Record, tmux: Tmux) -> Session:
        return cls(
            activity=record[v.SESSION_ACTIVITY],
            alerts=record[v.SESSION_ALERTS],
            attached=parse_int(record[v.SESSION_ATTACHED]),
            attached_list=parse_list(record[v.SESSION_ATTACHED_LIST]),
            created=record[v.SESSION_CREATED],
            format=is_one(record[v.SESSION_FORMAT]),
            group=record[v.SESSION_GROUP],
            group_attached=parse_int(record[v.SESSION_GROUP_ATTACHED]),
            group_attached_list=parse_list(record[v.SESSION_GROUP_ATTACHED_LIST]),
            group_list=parse_list(record[v.SESSION_GROUP_LIST]),
            group_many_attached=is_one(record[v.SESSION_GROUP_MANY_ATTACHED]),
            group_size=parse_int(record[v.SESSION_GROUP_SIZE]),
            grouped=is_one(record[v.SESSION_GROUPED]),
            id=record[v.SESSION_ID],
            last_attached=record[v.SESSION_LAST_ATTACHED],
            many_attached=is_one(record[v.SESSION_MANY_ATTACHED]),
            marked=is_one(record[v.SESSION_MARKED]),
            name=record[v.SESSION_NAME],
            path=record[v.SESSION_PATH],
            stack=record[v.SESSION_STACK],
            windows=parse_int(record[v.SESSION_WINDOWS]),
            tmux=tmux,
        )

    def _option_context(self) -> tuple[Tmux, str | None]:
        return self.tmux, self.id

    def list_clients(self) -> list[Client]:
        """List the clients attached to this session."""
        return [c for c in self.tmux.list_clients() if c.session == self.name]

    def attach_session(self, options: AttachSessionOptions | None = None) -> None:
        """Attach the calling terminal to this session.

        Blocks until the client detaches; tmux owns stdin/stdout/stderr
        for the duration.
        """
        op = options or AttachSessionOptions()
        q = self.tmux.query().cmd("attach-session").fargs("-t", self.id)
        if op.detach_clients:
            q.fargs("-d")
        if op.working_dir:
            q.fargs("-c", op.working_dir)
        q.run_tty(error="failed to attach session")

    def attach(self) -> None:
        """Attach to this session with default options."""
        self.attach_session()

    def detach(self) -> None:
        """Detach every client attached to this session."""
        self.tmux.query().cmd("detach-client").fargs("-s", self.id).run(
            error="failed to detach session",
        )

    def kill(self) -> None:
        """Kill the session and all its windows."""
        self.tmux.query().cmd("kill-session").fargs("-t", self.id).run(
            error="failed to kill session",
        )
        logger.info("Killed session %s", self.name)

    def rename(self, name: str) -> None:
        """Rename the session. The snapshot's name is updated on success."""
        if not check_session_name(name):
            raise InvalidSessionNameError(f"invalid tmux session name: {name!r}")
        self.tmux.query().cmd("rename-session").fargs("-t", self.id).pargs(name).run(
            error="failed to rename session",
        )
        logger.info("Renamed session '%s' to '%s'", self.name, name)
        self.name = name

    def list_windows(self) -> list[Window]:
        """List the windows of this session."""
        o = (
            self.tmux.query()
            .cmd("list-windows")
            .fargs("-t", self.id)
            .vars(*WINDOW_VARS)
            .run(error="failed to list windows")
        )
        return [Window.from_record(r, self.tmux) for r in o.collect()]

    def new_window(self, options: NewWindowOptions | None = None) -> Window:
        """Create a window in this session and return it."""
        op = options or NewWindowOptions()
        q = (
            self.tmux.query()
            .cmd("new-window")
            .fargs("-P", "-t", self.id)
            .vars(*WINDOW_VARS)
        )
        if op.start_directory:
            q.fargs("-c", op.start_directory)
        if op.window_name:
            q.fargs("-n", op.window_name)
        if op.do_not_attach:
            q.fargs("-d")

        window = Window.from_record(q.run(error="failed to create window").one(), self.tmux)
        logger.info("Created window %s in session %s", window.id, self.name)
        return window

    def new(self) -> Window:
        """Create a window with default options."""
        return self.new_window()

    def next_window(self) -> None:
        """Select the next window in the session."""
        self.tmux.query().cmd("next-window").fargs("-t", self.id).run(
            error="failed to select next window",
        )

    def previous_window(self) -> None:
        """Select the previous window in the session."""
        self.tmux.query().cmd("previous-window").fargs("-t", self.id).run(
            error="failed to select the previous window",
        )

    def get_window_by_index(self, index: int) -> Window | None:
        """Return the window at ``index`` in this session."""
        for window in self.list_windows():
            if window.index == index:
                return window
        logger.debug("Window index %d not found in session %s", index, self.name)
        return None
