"""Tests for tmuxbind.config — environment-driven configuration."""

from unittest.mock import patch

import pytest

from tmuxbind.config import Config


@pytest.fixture(autouse=True)
def no_dotenv():
    # A developer's .env must not leak into these tests
    with patch("tmuxbind.config.load_dotenv"):
        yield


class TestConfig:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("TMUXBIND_TMUX_BIN", raising=False)
        monkeypatch.delenv("TMUXBIND_SOCKET", raising=False)
        monkeypatch.delenv("TMUXBIND_LOG_LEVEL", raising=False)
        cfg = Config()
        assert cfg.tmux_bin == "tmux"
        assert cfg.socket_path is None
        assert cfg.log_level == "WARNING"

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("TMUXBIND_TMUX_BIN", "/opt/bin/tmux")
        monkeypatch.setenv("TMUXBIND_SOCKET", "/tmp/work.sock")
        monkeypatch.setenv("TMUXBIND_LOG_LEVEL", "debug")
        cfg = Config()
        assert cfg.tmux_bin == "/opt/bin/tmux"
        assert cfg.socket_path == "/tmp/work.sock"
        assert cfg.log_level == "DEBUG"

    def test_empty_socket_is_unset(self, monkeypatch):
        monkeypatch.setenv("TMUXBIND_SOCKET", "")
        assert Config().socket_path is None

    def test_invalid_log_level(self, monkeypatch):
        monkeypatch.setenv("TMUXBIND_LOG_LEVEL", "LOUD")
        with pytest.raises(ValueError, match="TMUXBIND_LOG_LEVEL"):
            Config()
