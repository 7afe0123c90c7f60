"""Command-line entry point — inspect a tmux server from the shell.

Subcommands:
  info      server pid, version and socket
  sessions  one line per session
  windows   windows of a session (-t) or of the whole server
  panes     panes of a window (-t) or of the whole server
  clients   attached clients
  capture   print the contents of a pane
"""

from __future__ import annotations

import argparse
import logging
import sys

from .config import config
from .errors import TmuxBindError
from .tmux import Tmux

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tmuxbind",
        description="Inspect a running tmux server",
    )
    parser.add_argument(
        "-S",
        dest="socket",
        default=None,
        help="Server socket path (default: TMUXBIND_SOCKET or tmux's default)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("info", help="Show server information")
    sub.add_parser("sessions", help="List sessions")
    sub.add_parser("clients", help="List attached clients")

    windows = sub.add_parser("windows", help="List windows")
    windows.add_argument("-t", dest="target", default=None, help="Session name")

    panes = sub.add_parser("panes", help="List panes")
    panes.add_argument("-t", dest="target", default=None, help="Window id (e.g. @1)")

    capture = sub.add_parser("capture", help="Print the contents of a pane")
    capture.add_argument("pane_id", help="Pane id (e.g. %%3)")
    return parser


def _run(tmux: Tmux, args: argparse.Namespace) -> int:
    if args.command == "info":
        server = tmux.get_server_information()
        print(f"pid: {server.pid}")
        print(f"version: {server.version}")
        print(f"socket: {server.socket.path if server.socket else ''}")
        print(f"user: {server.user}")
        return 0

    if args.command == "sessions":
        for session in tmux.list_sessions():
            attached = " (attached)" if session.attached else ""
            print(f"{session.id}\t{session.name}\t{session.windows} windows{attached}")
        return 0

    if args.command == "clients":
        for client in tmux.list_clients():
            print(f"{client.tty}\t{client.session}\t{client.width}x{client.height}")
        return 0

    if args.command == "windows":
        if args.target:
            session = tmux.get_session_by_name(args.target)
            if session is None:
                print(f"No such session: {args.target}", file=sys.stderr)
                return 1
            windows = session.list_windows()
        else:
            windows = tmux.list_all_windows()
        for window in windows:
            active = "*" if window.active else ""
            print(f"{window.id}\t{window.index}: {window.name}{active}\t{window.panes} panes")
        return 0

    if args.command == "panes":
        if args.target:
            window = tmux.get_window_by_id(args.target)
            if window is None:
                print(f"No such window: {args.target}", file=sys.stderr)
                return 1
            panes = window.list_panes()
        else:
            panes = tmux.list_all_panes()
        for pane in panes:
            active = "*" if pane.active else ""
            print(f"{pane.id}\t{pane.index}{active}\t{pane.current_command}\t{pane.current_path}")
        return 0

    if args.command == "capture":
        pane = tmux.get_pane_by_id(args.pane_id)
        if pane is None:
            print(f"No such pane: {args.pane_id}", file=sys.stderr)
            return 1
        sys.stdout.write(pane.capture_pane())
        return 0

    return 2


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.WARNING,
    )
    logging.getLogger("tmuxbind").setLevel(config.log_level)

    args = _build_parser().parse_args(argv)
    try:
        tmux = Tmux(socket_path=args.socket or config.socket_path)
        return _run(tmux, args)
    except TmuxBindError as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"tmuxbind: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
