"""Coercion helpers shared by the entity modules.

tmux prints every format variable as text. These helpers turn that text into
Python values with the same rules everywhere:
  - is_one: booleans are "1" for true, anything else is false.
  - parse_int: integers, falling back to 0 when the text is not a number.
  - parse_list: comma-separated lists ("" gives [""]).
  - check_session_name: reject names tmux would read as a target path.
"""

from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

_INT_RE = re.compile(r"-?[0-9]+")


def is_one(value: str) -> bool:
    """Return True only for the literal string "1"."""
    return value == "1"


def parse_int(value: str) -> int:
    """Parse an integer field, returning 0 when it is not a valid integer.

    Empty values are common (e.g. pane_dead_status on a live pane), so only
    non-empty failures are logged. Only plain decimal digits with an optional
    leading minus are accepted, so "+5", " 7 " and "4_2" all give 0.
    """
    if _INT_RE.fullmatch(value):
        return int(value)
    if value:
        logger.debug("Non-integer value %r, defaulting to 0", value)
    return 0


def parse_list(value: str) -> list[str]:
    """Split a comma-separated field into its elements."""
    return value.split(",")


def check_session_name(name: str) -> bool:
    """Return True if ``name`` is usable as a tmux session name.

    ':' and '.' separate session, window and pane in target syntax.
    """
    if not name:
        return False
    if ":" in name or "." in name:
        return False
    return True
