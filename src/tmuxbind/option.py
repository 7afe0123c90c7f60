"""tmux options — key/value settings scoped to the server, a session, a
window or a pane.

Options are read with show-options, whose output is one "key value" pair per
line rather than the delimited format used for entities. OptionsMixin gives
Tmux, Session, Window and Pane the same four methods: options(), option(),
set_option() and delete_option().

Reference: https://man.openbsd.org/OpenBSD-current/man1/tmux.1#OPTIONS
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from .query import Query
    from .tmux import Tmux

logger = logging.getLogger(__name__)


class OptionScope(Enum):
    """Option scope and the set-option/show-options flag selecting it."""

    SERVER = "-s"
    SESSION = ""
    WINDOW = "-w"
    PANE = "-p"


@dataclass(frozen=True)
class Option:
    """A single tmux option."""

    key: str
    value: str


def parse_options(text: str) -> list[Option]:
    """Parse show-options output into options.

    Each line is split on its first space; lines without one are skipped.
    Values are returned as printed (tmux quotes values containing spaces).
    """
    options: list[Option] = []
    for line in text.split("\n"):
        key, sep, value = line.partition(" ")
        if not sep or not key:
            continue
        options.append(Option(key=key, value=value))
    return options


def _option_query(
    tmux: Tmux, command: str, scope: OptionScope, target: str | None,
) -> Query:
    q = tmux.query().cmd(command)
    if scope.value:
        q.fargs(scope.value)
    if target and scope is not OptionScope.SERVER:
        q.fargs("-t", target)
    return q


def list_options(tmux: Tmux, scope: OptionScope, target: str | None = None) -> list[Option]:
    """Return all options set at ``scope`` for ``target``."""
    o = _option_query(tmux, "show-options", scope, target).run(
        error="failed to list options",
    )
    return parse_options(o.raw())


def get_option(
    tmux: Tmux, key: str, scope: OptionScope, target: str | None = None,
) -> Option | None:
    """Return one option, or None if it is not set at ``scope``."""
    o = _option_query(tmux, "show-options", scope, target).pargs(key).run(
        error=f"failed to get option {key}",
    )
    for option in parse_options(o.raw()):
        if option.key == key:
            return option
    return None


def set_option(
    tmux: Tmux, key: str, value: str, scope: OptionScope, target: str | None = None,
) -> None:
    """Set an option at ``scope``."""
    _option_query(tmux, "set-option", scope, target).pargs(key, value).run(
        error=f"failed to set option {key}",
    )
    logger.debug("Set option %s=%s (%s %s)", key, value, scope.name, target or "")


def delete_option(
    tmux: Tmux, key: str, scope: OptionScope, target: str | None = None,
) -> None:
    """Unset an option at ``scope`` so it falls back to its inherited value."""
    _option_query(tmux, "set-option", scope, target).fargs("-u").pargs(key).run(
        error=f"failed to delete option {key}",
    )
    logger.debug("Deleted option %s (%s %s)", key, scope.name, target or "")


class OptionsMixin(ABC):
    """Option accessors for anything addressable as a tmux option target."""

    _option_scope: ClassVar[OptionScope]

    @abstractmethod
    def _option_context(self) -> tuple[Tmux, str | None]:
        """Return the handle to run commands with and the -t target."""

    def options(self) -> list[Option]:
        """List options set at this object's scope."""
        tmux, target = self._option_context()
        return list_options(tmux, self._option_scope, target)

    def option(self, key: str) -> Option | None:
        """Get one option by key."""
        tmux, target = self._option_context()
        return get_option(tmux, key, self._option_scope, target)

    def set_option(self, key: str, value: str) -> None:
        """Set an option."""
        tmux, target = self._option_context()
        set_option(tmux, key, value, self._option_scope, target)

    def delete_option(self, key: str) -> None:
        """Unset an option."""
        tmux, target = self._option_context()
        delete_option(tmux, key, self._option_scope, target)
