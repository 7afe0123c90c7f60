"""Client entity — a terminal attached to the tmux server.

Reference: https://man.openbsd.org/OpenBSD-current/man1/tmux.1#list-clients
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from . import vars as v
from .parsing import is_one, parse_int
from .query import Record

if TYPE_CHECKING:
    from .session import Session
    from .tmux import Tmux

CLIENT_VARS: tuple[str, ...] = (
    v.CLIENT_ACTIVITY,
    v.CLIENT_CELL_HEIGHT,
    v.CLIENT_CELL_WIDTH,
    v.CLIENT_CONTROL_MODE,
    v.CLIENT_CREATED,
    v.CLIENT_DISCARDED,
    v.CLIENT_FLAGS,
    v.CLIENT_HEIGHT,
    v.CLIENT_KEY_TABLE,
    v.CLIENT_LAST_SESSION,
    v.CLIENT_NAME,
    v.CLIENT_PID,
    v.CLIENT_PREFIX,
    v.CLIENT_READONLY,
    v.CLIENT_SESSION,
    v.CLIENT_TERMNAME,
    v.CLIENT_TERMFEATURES,
    v.CLIENT_TERMTYPE,
    v.CLIENT_TTY,
    v.CLIENT_UID,
    v.CLIENT_USER,
    v.CLIENT_UTF8,
    v.CLIENT_WIDTH,
    v.CLIENT_WRITTEN,
)


@dataclass
class Client:
    """Snapshot of a tmux client."""

    activity: str
    cell_height: int
    cell_width: int
    control_mode: bool
    created: str
    discarded: str
    flags: str
    height: int
    key_table: str
    last_session: str
    name: str
    pid: int
    prefix: bool
    readonly: bool
    session: str
    termname: str
    termfeatures: str
    termtype: str
    tty: str
    uid: int
    user: str
    utf8: bool
    width: int
    written: str

    tmux: Tmux = field(repr=False, compare=False)

    @classmethod
    def from_record(cls, record: Record, tmux: Tmux) -> Client:
        return cls(
            activity=record[v.CLIENT_ACTIVITY],
            cell_height=parse_int(record[v.CLIENT_CELL_HEIGHT]),
            cell_width=parse_int(record[v.CLIENT_CELL_WIDTH]),
            control_mode=is_one(record[v.CLIENT_CONTROL_MODE]),
            created=record[v.CLIENT_CREATED],
            discarded=record[v.CLIENT_DISCARDED],
            flags=record[v.CLIENT_FLAGS],
            height=parse_int(record[v.CLIENT_HEIGHT]),
            key_table=record[v.CLIENT_KEY_TABLE],
            last_session=record[v.CLIENT_LAST_SESSION],
            name=record[v.CLIENT_NAME],
            pid=parse_int(record[v.CLIENT_PID]),
            prefix=is_one(record[v.CLIENT_PREFIX]),
            readonly=is_one(record[v.CLIENT_READONLY]),
            session=record[v.CLIENT_SESSION],
            termname=record[v.CLIENT_TERMNAME],
            termfeatures=record[v.CLIENT_TERMFEATURES],
            termtype=record[v.CLIENT_TERMTYPE],
            tty=record[v.CLIENT_TTY],
            uid=parse_int(record[v.CLIENT_UID]),
            user=record[v.CLIENT_USER],
            utf8=is_one(record[v.CLIENT_UTF8]),
            width=parse_int(record[v.CLIENT_WIDTH]),
            written=record[v.CLIENT_WRITTEN],
            tmux=tmux,
        )

    def get_session(self) -> Session | None:
        """Return the session this client is attached to."""
        return self.tmux.get_session_by_name(self.session)
