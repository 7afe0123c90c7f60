"""Pane entity and pane-level commands.

Pane commands target the pane by its id (e.g. "%3"), which tmux keeps stable
for the lifetime of the pane.

Key classes: Pane, PanePosition, PaneSplitDirection, and the option
dataclasses SelectPaneOptions, SplitWindowOptions, ChooseTreeOptions,
CaptureOptions.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from . import vars as v
from .option import OptionScope, OptionsMixin
from .parsing import is_one, parse_int
from .query import Record

if TYPE_CHECKING:
    from .tmux import Tmux

logger = logging.getLogger(__name__)


class PanePosition(Enum):
    """Direction flag for select-pane, relative to the target pane."""

    UP = "-U"
    RIGHT = "-R"
    DOWN = "-D"
    LEFT = "-L"


class PaneSplitDirection(Enum):
    """split-window direction: -h side by side, -v stacked.

    Reference: https://man.openbsd.org/OpenBSD-current/man1/tmux.1#split-window
    """

    HORIZONTAL = "-h"
    VERTICAL = "-v"


@dataclass(frozen=True)
class SelectPaneOptions:
    """Options for select-pane.

    target_position: select the neighbour in this direction instead of the
        pane itself.
    """

    target_position: PanePosition | None = None


@dataclass(frozen=True)
class SplitWindowOptions:
    """Options for split-window."""

    split_direction: PaneSplitDirection | None = None
    start_directory: str = ""
    shell_command: str = ""


@dataclass(frozen=True)
class ChooseTreeOptions:
    """Options for choose-tree: start with sessions (-s) or windows (-w) collapsed."""

    sessions_collapsed: bool = False
    windows_collapsed: bool = False


@dataclass(frozen=True)
class CaptureOptions:
    """Options for capture-pane. The pane is always printed to stdout (-p).

    Reference: https://man.openbsd.org/OpenBSD-current/man1/tmux.1#capture-pane
    """

    escape_text_and_background: bool = False  # -e
    escape_non_printables: bool = False       # -C
    ignore_trailing: bool = False             # -T
    preserve_trailing: bool = False           # -N
    preserve_and_join: bool = False           # -J


PANE_VARS: tuple[str, ...] = (
    v.PANE_ACTIVE,
    v.PANE_AT_BOTTOM,
    v.PANE_AT_LEFT,
    v.PANE_AT_RIGHT,
    v.PANE_AT_TOP,
    v.PANE_BG,
    v.PANE_BOTTOM,
    v.PANE_CURRENT_COMMAND,
    v.PANE_CURRENT_PATH,
    v.PANE_DEAD,
    v.PANE_DEAD_SIGNAL,
    v.PANE_DEAD_STATUS,
    v.PANE_DEAD_TIME,
    v.PANE_FG,
    v.PANE_FORMAT,
    v.PANE_HEIGHT,
    v.PANE_ID,
    v.PANE_IN_MODE,
    v.PANE_INDEX,
    v.PANE_INPUT_OFF,
    v.PANE_LAST,
    v.PANE_LEFT,
    v.PANE_MARKED,
    v.PANE_MARKED_SET,
    v.PANE_MODE,
    v.PANE_PATH,
    v.PANE_PID,
    v.PANE_PIPE,
    v.PANE_RIGHT,
    v.PANE_SEARCH_STRING,
    v.PANE_START_COMMAND,
    v.PANE_START_PATH,
    v.PANE_SYNCHRONIZED,
    v.PANE_TABS,
    v.PANE_TITLE,
    v.PANE_TOP,
    v.PANE_TTY,
    v.PANE_UNSEEN_CHANGES,
    v.PANE_WIDTH,
)


@dataclass
class Pane(OptionsMixin):
    """Snapshot of a tmux pane."""

    active: bool
    at_bottom: bool
    at_left: bool
    at_right: bool
    at_top: bool
    bg: str
    bottom: str
    current_command: str
    current_path: str
    dead: bool
    dead_signal: int
    dead_status: int
    dead_time: str
    fg: str
    format: bool
    height: int
    id: str
    in_mode: bool
    index: int
    input_off: bool
    last: bool
    left: str
    marked: bool
    marked_set: bool
    mode: str
    path: str
    pid: int
    pipe: bool
    right: str
    search_string: str
    start_command: str
    start_path: str
    synchronized: bool
    tabs: str
    title: str
    top: str
    tty: str
    unseen_changes: bool
    width: int

    tmux: Tmux = field(repr=False, compare=False)

    _option_scope = OptionScope.PANE

    @classmethod
    def from_record(cls, record: Record, tmux: Tmux) -> Pane:
        return cls(
            active=is_one(record[v.PANE_ACTIVE]),
            at_bottom=is_one(record[v.PANE_AT_BOTTOM]),
            at_left=is_one(record[v.PANE_AT_LEFT]),
            at_right=is_one(record[v.PANE_AT_RIGHT]),
            at_top=is_one(record[v.PANE_AT_TOP]),
            bg=record[v.PANE_BG],
            bottom=record[v.PANE_BOTTOM],
            current_command=record[v.PANE_CURRENT_COMMAND],
            current_path=record[v.PANE_CURRENT_PATH],
            dead=is_one(record[v.PANE_DEAD]),
            dead_signal=parse_int(record[v.PANE_DEAD_SIGNAL]),
            dead_status=parse_int(record[v.PANE_DEAD_STATUS]),
            dead_time=record[v.PANE_DEAD_TIME],
            fg=record[v.PANE_FG],
            format=is_one(record[v.PANE_FORMAT]),
            height=parse_int(record[v.PANE_HEIGHT]),
            id=record[v.PANE_ID],
            in_mode=is_one(record[v.PANE_IN_MODE]),
            index=parse_int(record[v.PANE_INDEX]),
            input_off=is_one(record[v.PANE_INPUT_OFF]),
            last=is_one(record[v.PANE_LAST]),
            left=record[v.PANE_LEFT],
            marked=is_one(record[v.PANE_MARKED]),
            marked_set=is_one(record[v.PANE_MARKED_SET]),
            mode=record[v.PANE_MODE],
            path=record[v.PANE_PATH],
            pid=parse_int(record[v.PANE_PID]),
            pipe=is_one(record[v.PANE_PIPE]),
            right=record[v.PANE_RIGHT],
            search_string=record[v.PANE_SEARCH_STRING],
            start_command=record[v.PANE_START_COMMAND],
            start_path=record[v.PANE_START_PATH],
            synchronized=is_one(record[v.PANE_SYNCHRONIZED]),
            tabs=record[v.PANE_TABS],
            title=record[v.PANE_TITLE],
            top=record[v.PANE_TOP],
            tty=record[v.PANE_TTY],
            unseen_changes=is_one(record[v.PANE_UNSEEN_CHANGES]),
            width=parse_int(record[v.PANE_WIDTH]),
            tmux=tmux,
        )

    def _option_context(self) -> tuple[Tmux, str | None]:
        return self.tmux, self.id

    def kill(self) -> None:
        """Kill the pane."""
        self.tmux.query().cmd("kill-pane").fargs("-t", self.id).run(
            error="failed to kill pane",
        )
        logger.info("Killed pane %s", self.id)

    def select_pane(self, options: SelectPaneOptions | None = None) -> None:
        """Make this pane (or its neighbour) the active pane."""
        op = options or SelectPaneOptions()
        q = self.tmux.query().cmd("select-pane").fargs("-t", self.id)
        if op.target_position is not None:
            q.fargs(op.target_position.value)
        q.run(error="failed to select pane")

    def select(self) -> None:
        """Select this pane with default options."""
        self.select_pane()

    def split_window(self, options: SplitWindowOptions | None = None) -> None:
        """Split this pane in two."""
        op = options or SplitWindowOptions()
        q = self.tmux.query().cmd("split-window").fargs("-t", self.id)
        if op.split_direction is not None:
            q.fargs(op.split_direction.value)
        if op.start_directory:
            q.fargs("-c", op.start_directory)
        if op.shell_command:
            q.pargs(op.shell_command)
        q.run(error="failed to split pane")

    def split(self) -> None:
        """Split this pane with default options."""
        self.split_window()

    def choose_tree(self, options: ChooseTreeOptions | None = None) -> None:
        """Put the pane in choose-tree mode."""
        op = options or ChooseTreeOptions()
        q = self.tmux.query().cmd("choose-tree").fargs("-t", self.id)
        if op.sessions_collapsed:
            q.fargs("-s")
        if op.windows_collapsed:
            q.fargs("-w")
        q.run(error="failed to put the pane in choose tree mode")

    def capture_pane(self, options: CaptureOptions | None = None) -> str:
        """Return the visible contents of the pane."""
        op = options or CaptureOptions()
        q = self.tmux.query().cmd("capture-pane").fargs("-t", self.id, "-p")
        if op.escape_text_and_background:
            q.fargs("-e")
        if op.escape_non_printables:
            q.fargs("-C")
        if op.ignore_trailing:
            q.fargs("-T")
        if op.preserve_trailing:
            q.fargs("-N")
        if op.preserve_and_join:
            q.fargs("-J")
        return q.run(error="failed to capture pane").raw()

    def capture(self) -> str:
        """Capture the pane with text and background attributes escaped."""
        return self.capture_pane(CaptureOptions(escape_text_and_background=True))

    def send_keys(self, keys: str, enter: bool = True, literal: bool = True) -> None:
        """Send keys to the pane.

        Args:
            keys: Text to type, or a key name such as "Escape" or "C-c".
            enter: Press Enter afterwards.
            literal: Type ``keys`` as text (-l) instead of looking up key names.
        """
        q = self.tmux.query().cmd("send-keys").fargs("-t", self.id)
        if literal:
            q.fargs("-l")
            q.pargs(keys)
            q.run(error="failed to send keys")
            if enter:
                # -l would type the word "Enter"
                self.tmux.query().cmd("send-keys").fargs("-t", self.id).pargs("Enter").run(
                    error="failed to send keys",
                )
            return

        q.pargs(keys)
        if enter:
            q.pargs("Enter")
        q.run(error="failed to send keys")
