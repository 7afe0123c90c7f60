"""Library configuration — reads env vars and exposes a singleton.

Loads the tmux executable name, a default socket path and the CLI log level
from environment variables (with .env support).
The module-level `config` instance is read by the Tmux handle and the CLI.

Key class: Config (singleton instantiated as `config`).
"""

import logging
import os

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Config:
    """Library configuration loaded from environment variables."""

    def __init__(self) -> None:
        load_dotenv()

        # Executable used for every invocation
        self.tmux_bin: str = os.getenv("TMUXBIND_TMUX_BIN") or "tmux"

        # Socket used by Tmux.default(); None means tmux's own default socket
        self.socket_path: str | None = os.getenv("TMUXBIND_SOCKET") or None

        self.log_level: str = os.getenv("TMUXBIND_LOG_LEVEL", "WARNING").upper()
        if self.log_level not in _LOG_LEVELS:
            raise ValueError(
                f"TMUXBIND_LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}, "
                f"got {self.log_level!r}"
            )

        logger.debug(
            "Config initialized: tmux_bin=%s, socket=%s, log_level=%s",
            self.tmux_bin,
            self.socket_path,
            self.log_level,
        )


config = Config()
