"""Window entity and window-level commands.

Window commands target the window by its id (e.g. "@2").

Key classes: Window, WindowLayout.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from . import vars as v
from .option import OptionScope, OptionsMixin
from .pane import PANE_VARS, Pane
from .parsing import is_one, parse_int, parse_list
from .query import Record

if TYPE_CHECKING:
    from .client import Client
    from .session import Session
    from .tmux import Tmux

logger = logging.getLogger(__name__)


class WindowLayout(Enum):
    """Preset window layouts.

    Reference: https://man.openbsd.org/OpenBSD-current/man1/tmux.1#WINDOWS_AND_PANES
    """

    EVEN_HORIZONTAL = "even-horizontal"
    EVEN_VERTICAL = "even-vertical"
    MAIN_HORIZONTAL = "main-horizontal"
    MAIN_VERTICAL = "main-vertical"
    TILED = "tiled"


WINDOW_VARS: tuple[str, ...] = (
    v.WINDOW_ACTIVE,
    v.WINDOW_ACTIVE_CLIENTS,
    v.WINDOW_ACTIVE_CLIENTS_LIST,
    v.WINDOW_ACTIVE_SESSIONS,
    v.WINDOW_ACTIVE_SESSIONS_LIST,
    v.WINDOW_ACTIVITY,
    v.WINDOW_ACTIVITY_FLAG,
    v.WINDOW_BELL_FLAG,
    v.WINDOW_BIGGER,
    v.WINDOW_CELL_HEIGHT,
    v.WINDOW_CELL_WIDTH,
    v.WINDOW_END_FLAG,
    v.WINDOW_FLAGS,
    v.WINDOW_FORMAT,
    v.WINDOW_HEIGHT,
    v.WINDOW_ID,
    v.WINDOW_INDEX,
    v.WINDOW_LAST_FLAG,
    v.WINDOW_LAYOUT,
    v.WINDOW_LINKED,
    v.WINDOW_LINKED_SESSIONS,
    v.WINDOW_LINKED_SESSIONS_LIST,
    v.WINDOW_MARKED_FLAG,
    v.WINDOW_NAME,
    v.WINDOW_OFFSET_X,
    v.WINDOW_OFFSET_Y,
    v.WINDOW_PANES,
    v.WINDOW_RAW_FLAGS,
    v.WINDOW_SILENCE_FLAG,
    v.WINDOW_STACK_INDEX,
    v.WINDOW_START_FLAG,
    v.WINDOW_VISIBLE_LAYOUT,
    v.WINDOW_WIDTH,
    v.WINDOW_ZOOMED_FLAG,
)


@dataclass
class Window(OptionsMixin):
    """Snapshot of a tmux window."""

    active: bool
    active_clients: int
    active_clients_list: list[str]
    active_sessions: int
    active_sessions_list: list[str]
    activity: str
    activity_flag: bool
    bell_flag: bool
    bigger: bool
    cell_height: int
    cell_width: int
    end_flag: bool
    flags: str
    format: bool
    height: int
    id: str
    index: int
    last_flag: bool
    layout: str
    linked: bool
    linked_sessions: int
    linked_sessions_list: list[str]
    marked_flag: bool
    name: str
    offset_x: int
    offset_y: int
    panes: int
    raw_flags: str
    silence_flag: int
    stack_index: int
    start_flag: bool
    visible_layout: str
    width: int
    zoomed_flag: bool

    tmux: Tmux = field(repr=False, compare=False)

    _option_scope = OptionScope.WINDOW

    @classmethod
    def from_record(cls, record: Record, tmux: Tmux) -> Window:
        return cls(
            active=is_one(record[v.WINDOW_ACTIVE]),
            active_clients=parse_int(record[v.WINDOW_ACTIVE_CLIENTS]),
            active_clients_list=parse_list(record[v.WINDOW_ACTIVE_CLIENTS_LIST]),
            active_sessions=parse_int(record[v.WINDOW_ACTIVE_SESSIONS]),
            active_sessions_list=parse_list(record[v.WINDOW_ACTIVE_SESSIONS_LIST]),
            activity=record[v.WINDOW_ACTIVITY],
            activity_flag=is_one(record[v.WINDOW_ACTIVITY_FLAG]),
            bell_flag=is_one(record[v.WINDOW_BELL_FLAG]),
            bigger=is_one(record[v.WINDOW_BIGGER]),
            cell_height=parse_int(record[v.WINDOW_CELL_HEIGHT]),
            cell_width=parse_int(record[v.WINDOW_CELL_WIDTH]),
            end_flag=is_one(record[v.WINDOW_END_FLAG]),
            flags=record[v.WINDOW_FLAGS],
            format=is_one(record[v.WINDOW_FORMAT]),
            height=parse_int(record[v.WINDOW_HEIGHT]),
            id=record[v.WINDOW_ID],
            index=parse_int(record[v.WINDOW_INDEX]),
            last_flag=is_one(record[v.WINDOW_LAST_FLAG]),
            layout=record[v.WINDOW_LAYOUT],
            linked=is_one(record[v.WINDOW_LINKED]),
            linked_sessions=parse_int(record[v.WINDOW_LINKED_SESSIONS]),
            linked_sessions_list=parse_list(record[v.WINDOW_LINKED_SESSIONS_LIST]),
            marked_flag=is_one(record[v.WINDOW_MARKED_FLAG]),
            name=record[v.WINDOW_NAME],
            offset_x=parse_int(record[v.WINDOW_OFFSET_X]),
            offset_y=parse_int(record[v.WINDOW_OFFSET_Y]),
            panes=parse_int(record[v.WINDOW_PANES]),
            raw_flags=record[v.WINDOW_RAW_FLAGS],
            silence_flag=parse_int(record[v.WINDOW_SILENCE_FLAG]),
            stack_index=parse_int(record[v.WINDOW_STACK_INDEX]),
            start_flag=is_one(record[v.WINDOW_START_FLAG]),
            visible_layout=record[v.WINDOW_VISIBLE_LAYOUT],
            width=parse_int(record[v.WINDOW_WIDTH]),
            zoomed_flag=is_one(record[v.WINDOW_ZOOMED_FLAG]),
            tmux=tmux,
        )

    def _option_context(self) -> tuple[Tmux, str | None]:
        return self.tmux, self.id

    def list_panes(self) -> list[Pane]:
        """List the panes of this window."""
        o = (
            self.tmux.query()
            .cmd("list-panes")
            .fargs("-t", self.id)
            .vars(*PANE_VARS)
            .run(error="failed to list panes")
        )
        return [Pane.from_record(r, self.tmux) for r in o.collect()]

    def kill(self) -> None:
        """Kill the window."""
        self.tmux.query().cmd("kill-window").fargs("-t", self.id).run(
            error="failed to kill window",
        )
        logger.info("Killed window %s", self.id)

    def rename(self, new_name: str) -> None:
        """Rename the window. The snapshot's name is updated on success."""
        self.tmux.query().cmd("rename-window").fargs("-t", self.id).pargs(new_name).run(
            error="failed to rename window",
        )
        logger.info("Renamed window %s from '%s' to '%s'", self.id, self.name, new_name)
        self.name = new_name

    def select(self) -> None:
        """Make this the current window of its session."""
        self.tmux.query().cmd("select-window").fargs("-t", self.id).run(
            error="failed to select window",
        )

    def select_layout(self, layout: WindowLayout) -> None:
        """Arrange the window's panes using a preset layout."""
        self.tmux.query().cmd("select-layout").fargs("-t", self.id).pargs(layout.value).run(
            error="failed to select layout",
        )

    def move(self, target_session: str, target_index: int) -> None:
        """Move the window to ``target_session`` at ``target_index``.

        Fails if a window already occupies that index.
        """
        (
            self.tmux.query()
            .cmd("move-window")
            .fargs("-s", self.id)
            .fargs("-t", f"{target_session}:{target_index}")
            .run(error="failed to move window")
        )
        logger.info("Moved window %s to %s:%d", self.id, target_session, target_index)

    def get_pane_by_index(self, index: int) -> Pane | None:
        """Return the pane with the given index in this window."""
        for pane in self.list_panes():
            if pane.index == index:
                return pane
        logger.debug("Pane index %d not found in window %s", index, self.id)
        return None

    def list_linked_sessions(self) -> list[Session]:
        """Return the sessions this window is linked into."""
        return self._sessions_by_name(self.linked_sessions_list)

    def list_active_sessions(self) -> list[Session]:
        """Return the sessions in which this window is the current window."""
        return self._sessions_by_name(self.active_sessions_list)

    def list_active_clients(self) -> list[Client]:
        """Return the clients currently viewing this window."""
        clients: list[Client] = []
        for tty in self.active_clients_list:
            if not tty:
                continue
            client = self.tmux.get_client_by_tty(tty)
            if client is not None:
                clients.append(client)
        return clients

    def _sessions_by_name(self, names: list[str]) -> list[Session]:
        sessions: list[Session] = []
        for name in names:
            if not name:
                continue
            session = self.tmux.get_session_by_name(name)
            if session is not None:
                sessions.append(session)
        return sessions
