"""Tests for Config loading from env vars and YAML."""

import logging
from pathlib import Path

import pytest

from acr.config import Config, LoggingConfig, configure_logging


class TestConfigDefaults:
    def test_defaults(self):
        config = Config()

        assert config.logging.level == "INFO"
        assert config.session.logout_on_user_delete is True
        assert config.bootstrap.default_group == "basic"
        assert len(config.bootstrap.users) == 3


class TestConfigSources:
    def test_env_nested_override(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("ACR_SESSION__LOGOUT_ON_USER_DELETE", "false")
        monkeypatch.setenv("ACR_LOGGING__LEVEL", "DEBUG")

        config = Config()

        assert config.session.logout_on_user_delete is False
        assert config.logging.level == "DEBUG"

    def test_yaml_bootstrap(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        config_file = tmp_path / "acr.yaml"
        config_file.write_text(
            """
bootstrap:
  rights: [read, write]
  groups:
    readers: [read]
    writers: [read, write]
  users:
    - nickname: alice
      password: secret
      groups: [writers]
  default_group: readers
"""
        )
        monkeypatch.setenv("ACR_CONFIG_FILE", str(config_file))

        config = Config()

        assert config.bootstrap.rights == ["read", "write"]
        assert list(config.bootstrap.groups) == ["readers", "writers"]
        assert config.bootstrap.users[0].nickname == "alice"
        assert config.bootstrap.default_group == "readers"

    def test_env_wins_over_yaml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        config_file = tmp_path / "acr.yaml"
        config_file.write_text("logging:\n  level: WARNING\n")
        monkeypatch.setenv("ACR_CONFIG_FILE", str(config_file))
        monkeypatch.setenv("ACR_LOGGING__LEVEL", "ERROR")

        assert Config().logging.level == "ERROR"

    def test_missing_yaml_file_is_ignored(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("ACR_CONFIG_FILE", str(tmp_path / "absent.yaml"))

        assert Config().bootstrap.default_group == "basic"


class TestConfigureLogging:
    @pytest.fixture(autouse=True)
    def _restore_root_logger(self):
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        yield
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_console_handler(self):
        configure_logging(LoggingConfig(level="WARNING"))

        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], logging.StreamHandler)

    def test_file_handler(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        log_file = tmp_path / "logs" / "acr.log"
        monkeypatch.setenv("ACR_LOG_FILE", str(log_file))

        configure_logging(LoggingConfig())

        root = logging.getLogger()
        assert isinstance(root.handlers[0], logging.FileHandler)
        assert log_file.parent.exists()
        root.handlers[0].close()
