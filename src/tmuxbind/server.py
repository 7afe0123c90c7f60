"""Server entity and socket handling.

A Socket is the control endpoint of one tmux server, selected with -S. It is
validated once, when the Tmux handle is built, by running list-clients
against it.

Key classes: Server, Socket.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from . import vars as v
from .errors import ExternalProcessError, InvalidSocketError
from .parsing import parse_int
from .query import Query, Record

if TYPE_CHECKING:
    from .tmux import Tmux

logger = logging.getLogger(__name__)

SERVER_VARS: tuple[str, ...] = (
    v.PID,
    v.SOCKET_PATH,
    v.START_TIME,
    v.UID,
    v.USER,
    v.VERSION,
)


@dataclass(frozen=True)
class Socket:
    """Path to a tmux server socket.

    Reference: https://man.openbsd.org/OpenBSD-current/man1/tmux.1#S
    """

    path: str

    @staticmethod
    def validate(path: str, tmux_bin: str | None = None) -> bool:
        """Return True if a tmux server answers on ``path``."""
        try:
            Query(socket_path=path, tmux_bin=tmux_bin).cmd("list-clients").run()
        except ExternalProcessError as e:
            logger.debug("Socket %s rejected: %s", path, e)
            return False
        return True

    @classmethod
    def open(cls, path: str, tmux_bin: str | None = None) -> Socket:
        """Return a Socket for ``path`` after checking that it is live.

        Raises:
            InvalidSocketError: nothing answers on ``path``.
        """
        if not cls.validate(path, tmux_bin):
            raise InvalidSocketError(f"invalid socket: {path}")
        return cls(path)


@dataclass
class Server:
    """Snapshot of the tmux server process."""

    pid: int
    socket: Socket | None
    start_time: str
    uid: str
    user: str
    version: str

    tmux: Tmux = field(repr=False, compare=False)

    @classmethod
    def from_record(cls, record: Record, tmux: Tmux) -> Server:
        socket_path = record[v.SOCKET_PATH]
        return cls(
            pid=parse_int(record[v.PID]),
            socket=Socket(socket_path) if socket_path else None,
            start_time=record[v.START_TIME],
            uid=record[v.UID],
            user=record[v.USER],
            version=record[v.VERSION],
            tmux=tmux,
        )
