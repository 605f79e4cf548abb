import logging
import os
import sys
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from acr.domain.registry.model.bootstrap import Bootstrap


class YamlConfigSettingsSource(PydanticBaseSettingsSource):
    """Load settings from YAML file specified by ACR_CONFIG_FILE env var."""

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Get the value for a field from the YAML config."""
        yaml_data = self._load_yaml_config()
        field_value = yaml_data.get(field_name)
        return field_value, field_name, False

    def __call__(self) -> dict[str, Any]:
        """Return all settings from YAML file."""
        return self._load_yaml_config()

    def _load_yaml_config(self) -> dict[str, Any]:
        """Load config from YAML file if specified."""
        config_file = os.environ.get("ACR_CONFIG_FILE")
        if config_file:
            path = Path(config_file)
            if path.exists():
                return yaml.safe_load(path.read_text()) or {}
        return {}


class LoggingConfig(BaseModel):
    """Logging configuration (nested in Config, uses env_nested_delimiter)."""

    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"

    @property
    def file(self) -> str | None:
        """Get log file path from ACR_LOG_FILE env var."""
        return os.environ.get("ACR_LOG_FILE")


class SessionConfig(BaseModel):
    """Session behaviour (nested in Config, uses env_nested_delimiter)."""

    logout_on_user_delete: bool = True  # Close the session when its holder is deleted


class Config(BaseSettings):
    logging: LoggingConfig = LoggingConfig()
    session: SessionConfig = SessionConfig()
    bootstrap: Bootstrap = Bootstrap()  # Initial rights, groups and users

    model_config = {
        "env_prefix": "ACR_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_nested_delimiter": "__",  # Allows ACR_SESSION__LOGOUT_ON_USER_DELETE override
    }

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings sources to include YAML config.

        Priority (highest to lowest):
        1. init_settings - values passed to Config()
        2. env_settings - environment variables
        3. dotenv_settings - .env file
        4. yaml_settings - ACR_CONFIG_FILE yaml
        5. file_secret_settings - secrets from files
        """
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )


def configure_logging(config: LoggingConfig) -> None:
    """Configure Python logging based on config.

    Should be called once by the embedding application before the registry
    is built, so the registry's loggers pick up the configuration.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(config.level)

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    formatter = logging.Formatter(config.format, datefmt=config.date_format)

    if config.file:
        log_path = Path(config.file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path)
        file_handler.setLevel(config.level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)
    else:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(config.level)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    logging.debug("Logging configured: level=%s, file=%s", config.level, config.file)
