"""Configuration management for ics-decode."""

from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .utils.exceptions import ConfigurationError

load_dotenv()

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Decoder and CLI settings, read from ICS_* environment variables."""

    # Decoder
    max_line_length: int = Field(default=4096, ge=1)
    encoding: str = "utf-8"

    # Output
    json_indent: int = Field(default=4, ge=0)

    # Logging
    log_level: str = "WARNING"
    log_file: Optional[Path] = None

    model_config = SettingsConfigDict(
        env_prefix="ICS_",
        env_file=".env",
        extra="ignore",
        env_parse_none_str="",  # Treat empty string as None
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level


def load_settings(config_path: Optional[Path] = None) -> Settings:
    """
    Load settings from the environment, overlaid with an optional YAML file.

    Args:
        config_path: YAML file whose top-level keys are Settings field names

    Returns:
        Validated Settings

    Raises:
        ConfigurationError: If the file cannot be read or holds invalid values
    """
    overrides = {}
    if config_path is not None:
        try:
            with open(config_path) as f:
                overrides = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to read config file {config_path}: {e}") from e
        if not isinstance(overrides, dict):
            raise ConfigurationError(f"Config file {config_path} must contain a mapping")

    try:
        return Settings(**overrides)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e
