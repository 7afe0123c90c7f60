"""Exceptions raised by tmuxbind.

All library errors derive from TmuxBindError so callers can catch the whole
family at once:
  - ExternalProcessError: tmux exited non-zero or could not be started.
  - MalformedOutputError: delimited output did not match the requested variables.
  - TmuxNotInstalledError / InvalidSocketError: client construction failures.
  - InvalidSessionNameError: rejected before any process is spawned.
"""

from __future__ import annotations

from collections.abc import Sequence


class TmuxBindError(Exception):
    """Base exception for all tmuxbind errors."""


class ExternalProcessError(TmuxBindError):
    """Raised when a tmux invocation fails.

    ``returncode`` is None when the process could not be launched at all
    (e.g. the binary disappeared from PATH after the client was built).
    """

    def __init__(
        self,
        message: str,
        returncode: int | None = None,
        stderr: str = "",
        args: Sequence[str] = (),
    ) -> None:
        super().__init__(message)
        self.message = message
        self.returncode = returncode
        self.stderr = stderr
        self.argv = list(args)

    def __str__(self) -> str:
        detail = self.stderr.strip()
        if detail:
            return f"{self.message}: {detail}"
        return self.message


class MalformedOutputError(TmuxBindError):
    """Raised when tmux output cannot be aligned with the requested variables."""


class TmuxNotInstalledError(TmuxBindError):
    """Raised when the tmux executable cannot be found on PATH."""


class InvalidSocketError(TmuxBindError):
    """Raised when a socket path does not answer a tmux command."""


class InvalidSessionNameError(TmuxBindError, ValueError):
    """Raised for session names tmux would misinterpret as a target."""
