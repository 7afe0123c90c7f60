"""Tmux — entry point to the library.

A Tmux handle checks that the tmux executable is installed, optionally
selects a server socket, and issues the server-wide commands:
  - Server information and listings: sessions, clients, all windows, all panes.
  - Lookups by session name, client tty, window id and pane id.
  - Session creation, client detaching, server shutdown.
  - Server options.

Entities returned from here keep a reference to the handle and use it for
their own commands.

Key classes: Tmux, SessionOptions, DetachClientOptions.
"""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass

from .client import CLIENT_VARS, Client
from .config import config
from .errors import ExternalProcessError, InvalidSessionNameError, TmuxNotInstalledError
from .option import OptionScope, OptionsMixin
from .pane import PANE_VARS, Pane
from .parsing import check_session_name
from .query import Query
from .server import SERVER_VARS, Server, Socket
from .session import SESSION_VARS, Session
from .window import WINDOW_VARS, Window

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionOptions:
    """Options for new-session. Zero/empty values are left to tmux."""

    name: str = ""             # -s
    shell_command: str = ""    # positional
    start_directory: str = ""  # -c
    width: int = 0             # -x
    height: int = 0            # -y


@dataclass(frozen=True)
class DetachClientOptions:
    """Options for detach-client.

    target_client takes precedence; with neither set, the current client
    is detached.
    """

    target_client: str = ""   # -t
    target_session: str = ""  # -s: every client of this session


class Tmux(OptionsMixin):
    """Handle on one tmux server.

    Reference: https://man.openbsd.org/OpenBSD-current/man1/tmux.1#DESCRIPTION
    """

    _option_scope = OptionScope.SERVER

    def __init__(self, socket_path: str | None = None, tmux_bin: str | None = None) -> None:
        self.tmux_bin = tmux_bin or config.tmux_bin
        if shutil.which(self.tmux_bin) is None:
            raise TmuxNotInstalledError(f"{self.tmux_bin} is not installed on the system")

        self.socket: Socket | None = None
        if socket_path:
            self.socket = Socket.open(socket_path, self.tmux_bin)

    @classmethod
    def default(cls) -> Tmux:
        """Build a handle from configuration (TMUXBIND_SOCKET, TMUXBIND_TMUX_BIN)."""
        return cls(socket_path=config.socket_path)

    def __repr__(self) -> str:
        socket = self.socket.path if self.socket else None
        return f"Tmux(tmux_bin={self.tmux_bin!r}, socket={socket!r})"

    def query(self) -> Query:
        """Return a new query bound to this handle's executable and socket."""
        return Query(
            socket_path=self.socket.path if self.socket else None,
            tmux_bin=self.tmux_bin,
        )

    def _option_context(self) -> tuple[Tmux, str | None]:
        return self, None

    def get_server_information(self) -> Server:
        """Return information about the running server."""
        o = self.query().cmd("display-message").vars(*SERVER_VARS).run(
            error="failed to get server information",
        )
        return Server.from_record(o.one(), self)

    def list_clients(self) -> list[Client]:
        """List all clients attached to the server."""
        o = self.query().cmd("list-clients").vars(*CLIENT_VARS).run(
            error="failed to list clients",
        )
        return [Client.from_record(r, self) for r in o.collect()]

    def get_current_client(self) -> Client:
        """Return the client this process is running in."""
        o = self.query().cmd("display-message").vars(*CLIENT_VARS).run(
            error="failed to get current client",
        )
        return Client.from_record(o.one(), self)

    def list_sessions(self) -> list[Session]:
        """List all sessions."""
        o = self.query().cmd("list-sessions").vars(*SESSION_VARS).run(
            error="failed to list sessions",
        )
        return [Session.from_record(r, self) for r in o.collect()]

    def has_session(self, name: str) -> bool:
        """Return True if a session matching ``name`` exists."""
        try:
            self.query().cmd("has-session").fargs("-t", name).run()
        except ExternalProcessError:
            return False
        return True

    def get_session_by_name(self, name: str) -> Session | None:
        """Return the session named exactly ``name``."""
        for session in self.list_sessions():
            if session.name == name:
                return session
        return None

    def get_client_by_tty(self, tty: str) -> Client | None:
        """Return the client on terminal ``tty``."""
        for client in self.list_clients():
            if client.tty == tty:
                return client
        return None

    def new_session(self, options: SessionOptions | None = None) -> Session:
        """Create a detached session and return it.

        Raises:
            InvalidSessionNameError: the name is empty-looking or contains
                ':' or '.'; nothing is run.
            ExternalProcessError: tmux refused to create the session.
        """
        op = options or SessionOptions()
        q = self.query().cmd("new-session").fargs("-d", "-P").vars(*SESSION_VARS)

        if op.name:
            if not check_session_name(op.name):
                raise InvalidSessionNameError(f"invalid tmux session name: {op.name!r}")
            q.fargs("-s", op.name)
        if op.start_directory:
            q.fargs("-c", op.start_directory)
        if op.width:
            q.fargs("-x", str(op.width))
        if op.height:
            q.fargs("-y", str(op.height))
        if op.shell_command:
            q.pargs(op.shell_command)

        session = Session.from_record(q.run(error="failed to create session").one(), self)
        logger.info("Created session %s (%s)", session.name, session.id)
        return session

    def new(self) -> Session:
        """Create a detached session with default options."""
        return self.new_session()

    def detach_client(self, options: DetachClientOptions | None = None) -> None:
        """Detach the current client, a given client, or all clients of a session."""
        op = options or DetachClientOptions()
        q = self.query().cmd("detach-client")
        if op.target_client:
            q.fargs("-t", op.target_client)
        elif op.target_session:
            q.fargs("-s", op.target_session)
        q.run(error="failed to detach client")

    def kill_server(self) -> None:
        """Kill the server along with every session and client."""
        self.query().cmd("kill-server").run(error="failed to kill server")
        logger.info("Killed tmux server")

    def list_all_windows(self) -> list[Window]:
        """List every window in every session."""
        o = self.query().cmd("list-windows").fargs("-a").vars(*WINDOW_VARS).run(
            error="failed to list all windows",
        )
        return [Window.from_record(r, self) for r in o.collect()]

    def list_all_panes(self) -> list[Pane]:
        """List every pane on the server."""
        o = self.query().cmd("list-panes").fargs("-a").vars(*PANE_VARS).run(
            error="failed to list all panes",
        )
        return [Pane.from_record(r, self) for r in o.collect()]

    def get_window_by_id(self, window_id: str) -> Window | None:
        """Return the window with id ``window_id`` (e.g. "@3")."""
        for window in self.list_all_windows():
            if window.id == window_id:
                return window
        return None

    def get_pane_by_id(self, pane_id: str) -> Pane | None:
        """Return the pane with id ``pane_id`` (e.g. "%5")."""
        for pane in self.list_all_panes():
            if pane.id == pane_id:
                return pane
        return None
