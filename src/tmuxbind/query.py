"""Query builder and result parser for tmux invocations.

A Query accumulates one tmux command line:
  - cmd(): command tokens, e.g. "list-sessions".
  - fargs() / pargs(): flag and positional arguments.
  - vars(): format variables to request, rendered as a single -F template
    (-p for display-message) of '#{a}-:-#{b}-:-...'.

render() is pure and returns the argument list without the executable, so it
can be inspected in tests. run() executes it and captures stdout into a
QueryOutput; run_tty() hands the terminal to tmux (attach-session).

QueryOutput.collect() splits stdout into one record per line, keyed by the
requested variable names.

Key classes: Query, QueryOutput.
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass, field

from .config import config
from .errors import ExternalProcessError, MalformedOutputError

logger = logging.getLogger(__name__)

# Separates variable values on one output line. A value containing it
# cannot be parsed.
SEPARATOR = "-:-"

# One decoded output line, keyed by variable name
Record = dict[str, str]


class Query:
    """A single tmux command line, built incrementally."""

    def __init__(self, socket_path: str | None = None, tmux_bin: str | None = None) -> None:
        self.socket_path = socket_path
        self.tmux_bin = tmux_bin or config.tmux_bin
        self.command: list[str] = []
        self.flag_args: list[str] = []
        self.positional_args: list[str] = []
        self.variables: list[str] = []

    def cmd(self, *tokens: str) -> Query:
        """Append command tokens."""
        self.command.extend(tokens)
        return self

    def fargs(self, *args: str) -> Query:
        """Append flag arguments. Repeated flags are kept as given."""
        self.flag_args.extend(args)
        return self

    def pargs(self, *args: str) -> Query:
        """Append positional arguments, rendered after everything else."""
        self.positional_args.extend(args)
        return self

    def vars(self, *names: str) -> Query:
        """Set the format variables to request, replacing any earlier set."""
        self.variables = list(names)
        return self

    def format_template(self) -> str:
        """Return the quoted format template, or "" when no variables are set."""
        if not self.variables:
            return ""
        joined = SEPARATOR.join(f"#{{{name}}}" for name in self.variables)
        return f"'{joined}'"

    def render(self) -> list[str]:
        """Return the tmux arguments for this query, without the executable."""
        tokens: list[str] = []
        if self.socket_path:
            tokens.extend(["-S", self.socket_path])
        tokens.extend(self.command)
        tokens.extend(self.flag_args)

        template = self.format_template()
        if template:
            # display-message prints a format with -p; everything else takes -F
            if self.command and self.command[0] == "display-message":
                tokens.extend(["-p", template])
            else:
                tokens.extend(["-F", template])

        tokens.extend(self.positional_args)
        return tokens

    def argv(self) -> list[str]:
        """Return the full command line including the tmux executable."""
        return [self.tmux_bin, *self.render()]

    def _describe(self) -> str:
        return " ".join(self.command) or self.tmux_bin

    def run(self, error: str | None = None) -> QueryOutput:
        """Run the query and capture its output.

        Args:
            error: Message for the ExternalProcessError raised on failure.
                   Defaults to a description of the command.

        Raises:
            ExternalProcessError: tmux exited non-zero or could not start.
        """
        argv = self.argv()
        logger.debug("Running %s", argv)
        try:
            result = subprocess.run(
                argv,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except OSError as e:
            logger.debug("Failed to start %s: %s", argv[0], e)
            raise ExternalProcessError(
                error or f"failed to start {self.tmux_bin}",
                stderr=str(e),
                args=argv,
            ) from e

        if result.returncode != 0:
            logger.debug(
                "Command %s failed (rc=%d): %s",
                argv, result.returncode, result.stderr.strip(),
            )
            raise ExternalProcessError(
                error or f"{self._describe()} exited with status {result.returncode}",
                returncode=result.returncode,
                stderr=result.stderr,
                args=argv,
            )

        return QueryOutput(result=result.stdout, variables=list(self.variables))

    def run_tty(self, error: str | None = None) -> None:
        """Run the query attached to the calling process's terminal.

        stdin, stdout and stderr are inherited, so this blocks until tmux
        exits (for attach-session: until the client detaches).
        """
        argv = self.argv()
        logger.debug("Running %s on the terminal", argv)
        try:
            result = subprocess.run(argv)
        except OSError as e:
            raise ExternalProcessError(
                error or f"failed to start {self.tmux_bin}",
                stderr=str(e),
                args=argv,
            ) from e

        if result.returncode != 0:
            logger.debug("Command %s failed (rc=%d)", argv, result.returncode)
            raise ExternalProcessError(
                error or f"{self._describe()} exited with status {result.returncode}",
                returncode=result.returncode,
                args=argv,
            )


@dataclass
class QueryOutput:
    """Captured stdout of a query plus the variables it requested."""

    result: str
    variables: list[str] = field(default_factory=list)

    def collect(self) -> list[Record]:
        """Parse every non-empty output line into a record.

        Raises:
            MalformedOutputError: a line's field count differs from the
                number of requested variables.
        """
        records: list[Record] = []
        for line in self.result.split("\n"):
            if not line:
                continue

            if len(line) >= 2 and line[0] == "'" and line[-1] == "'":
                line = line[1:-1]
            values = line.split(SEPARATOR)
            if len(values) != len(self.variables):
                raise MalformedOutputError(
                    f"expected {len(self.variables)} fields, got {len(values)}: {line!r}"
                )
            records.append(dict(zip(self.variables, values)))

        return records

    def one(self) -> Record:
        """Return the first record.

        Raises:
            MalformedOutputError: the output held no records.
        """
        records = self.collect()
        if not records:
            raise MalformedOutputError("expected at least one record, got none")
        return records[0]

    def raw(self) -> str:
        """Return the unparsed output."""
        return self.result
