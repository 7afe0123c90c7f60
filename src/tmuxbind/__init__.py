"""tmuxbind — drive tmux through its command line.

Re-exports the public API:
  - Tmux: entry point; checks tmux is installed and optionally selects a socket.
  - Server, Client, Session, Window, Pane: snapshots decoded from tmux output,
    each able to issue further commands about itself.
  - Option / OptionScope: key/value settings at server, session, window or
    pane scope.
  - Option dataclasses for commands with optional flags.
  - Query / QueryOutput: the builder and parser every command goes through.
  - Errors: TmuxBindError and its subclasses.
"""

from .client import Client
from .errors import (
    ExternalProcessError,
    InvalidSessionNameError,
    InvalidSocketError,
    MalformedOutputError,
    TmuxBindError,
    TmuxNotInstalledError,
)
from .option import Option, OptionScope
from .pane import (
    CaptureOptions,
    ChooseTreeOptions,
    Pane,
    PanePosition,
    PaneSplitDirection,
    SelectPaneOptions,
    SplitWindowOptions,
)
from .query import SEPARATOR, Query, QueryOutput
from .server import Server, Socket
from .session import AttachSessionOptions, NewWindowOptions, Session
from .tmux import DetachClientOptions, SessionOptions, Tmux
from .window import Window, WindowLayout

__all__ = [
    "AttachSessionOptions",
    "CaptureOptions",
    "ChooseTreeOptions",
    "Client",
    "DetachClientOptions",
    "ExternalProcessError",
    "InvalidSessionNameError",
    "InvalidSocketError",
    "MalformedOutputError",
    "NewWindowOptions",
    "Option",
    "OptionScope",
    "Pane",
    "PanePosition",
    "PaneSplitDirection",
    "Query",
    "QueryOutput",
    "SEPARATOR",
    "SelectPaneOptions",
    "Server",
    "Session",
    "SessionOptions",
    "Socket",
    "SplitWindowOptions",
    "Tmux",
    "TmuxBindError",
    "TmuxNotInstalledError",
    "Window",
    "WindowLayout",
]
