"""
Configuration management for ghclone.

Provides centralized configuration for the forge client, the git
cloner and the prompt theme, with sensible defaults and overrides
from environment variables or a JSON file.
"""

import json
import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Optional

from ghclone.core.exceptions import ConfigurationError


@dataclass
class ForgeConfig:
    """Configuration for the forge REST API."""

    # Base URL of the API (no trailing slash)
    api_url: str = "https://api.github.com"

    # Media type sent in the Accept header
    media_type: str = "application/vnd.github+json"

    # Static User-Agent; the account name is sent when unset
    user_agent: Optional[str] = None

    # Optional API token, sent as a bearer token
    token: Optional[str] = None

    # Timeout for the HTTP request (seconds)
    timeout: int = 30


@dataclass
class CloneConfig:
    """Configuration for git clone invocations."""

    # Executable looked up on PATH
    git_executable: str = "git"

    # Wait for each clone to finish before starting the next one
    wait: bool = True

    # Timeout per clone when waiting (seconds, 0 = no limit)
    timeout: int = 0


@dataclass
class PromptTheme:
    """Colours used by the interactive prompts."""

    prompt_color: str = "cyan"
    value_color: str = "yellow"
    value_dim: bool = True
    error_color: str = "red"


@dataclass
class AppConfig:
    """Master configuration combining all section configurations."""

    forge: ForgeConfig = field(default_factory=ForgeConfig)
    clone: CloneConfig = field(default_factory=CloneConfig)
    theme: PromptTheme = field(default_factory=PromptTheme)

    # Value pre-filled in the destination prompt
    default_destination: str = "."

    # Enable verbose logging
    verbose: bool = False


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("true", "1", "yes", "on")


def _parse_int(name: str, value: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise ConfigurationError(
            f"{name} must be an integer, got '{value}'",
            details={"variable": name, "value": value},
        )


class Config:
    """
    Central configuration manager providing access to all settings.

    Supports loading from environment variables and configuration files.
    """

    _instance: Optional["Config"] = None
    _config: AppConfig = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._config = AppConfig()
        return cls._instance

    @classmethod
    def get(cls) -> AppConfig:
        """Get the current application configuration."""
        if cls._instance is None:
            cls()
        return cls._instance._config

    @classmethod
    def reset(cls) -> AppConfig:
        """Discard any loaded settings and return fresh defaults."""
        cls._instance = None
        return cls.get()

    @classmethod
    def load_from_file(cls, config_path: str) -> AppConfig:
        """
        Load configuration from a JSON file on top of the current settings.

        Args:
            config_path: Path to the configuration file.

        Returns:
            Updated AppConfig instance.

        Raises:
            ConfigurationError: If the file is missing, unreadable or
                contains unknown keys or values of the wrong type.
        """
        config_path = Path(config_path)
        if not config_path.exists():
            raise ConfigurationError(
                f"Configuration file not found: {config_path}",
                details={"path": str(config_path)},
            )

        try:
            with open(config_path, "r") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(
                f"Could not read configuration file {config_path}: {e}",
                details={"path": str(config_path)},
            )

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration file {config_path} must contain a JSON object",
                details={"path": str(config_path)},
            )

        config = cls.get()
        cls._apply_dict(config, data)
        return config

    @classmethod
    def load_from_env(cls) -> AppConfig:
        """
        Load configuration from environment variables.

        Environment variables are prefixed with GHCLONE_.

        Returns:
            AppConfig with environment overrides applied.
        """
        config = cls.get()

        # Forge settings
        if os.getenv("GHCLONE_API_URL"):
            config.forge.api_url = os.getenv("GHCLONE_API_URL").rstrip("/")

        if os.getenv("GHCLONE_TOKEN"):
            config.forge.token = os.getenv("GHCLONE_TOKEN")

        if os.getenv("GHCLONE_USER_AGENT"):
            config.forge.user_agent = os.getenv("GHCLONE_USER_AGENT")

        if os.getenv("GHCLONE_TIMEOUT"):
            config.forge.timeout = _parse_int(
                "GHCLONE_TIMEOUT", os.getenv("GHCLONE_TIMEOUT")
            )

        # Clone settings
        if os.getenv("GHCLONE_GIT"):
            config.clone.git_executable = os.getenv("GHCLONE_GIT")

        if os.getenv("GHCLONE_WAIT"):
            config.clone.wait = _parse_bool(os.getenv("GHCLONE_WAIT"))

        if os.getenv("GHCLONE_CLONE_TIMEOUT"):
            config.clone.timeout = _parse_int(
                "GHCLONE_CLONE_TIMEOUT", os.getenv("GHCLONE_CLONE_TIMEOUT")
            )

        # Override verbosity
        if os.getenv("GHCLONE_VERBOSE"):
            config.verbose = _parse_bool(os.getenv("GHCLONE_VERBOSE"))

        return config

    @staticmethod
    def _apply_dict(config: AppConfig, data: dict) -> None:
        """Apply a dictionary of settings onto an AppConfig."""
        sections = {
            "forge": config.forge,
            "clone": config.clone,
            "theme": config.theme,
        }

        for key, value in data.items():
            if key in sections:
                if not isinstance(value, dict):
                    raise ConfigurationError(
                        f"Section '{key}' must be an object",
                        details={"section": key},
                    )
                _update_section(sections[key], key, value)
            elif key in ("default_destination", "verbose"):
                _check_type(key, value, getattr(AppConfig(), key))
                setattr(config, key, value)
            else:
                raise ConfigurationError(
                    f"Unknown configuration key: {key}",
                    details={"key": key},
                )


def _check_type(key: str, value, default) -> None:
    """Reject a value whose type does not match the field default."""
    if isinstance(default, bool):
        valid = isinstance(value, bool)
        expected = "a boolean"
    elif isinstance(default, int):
        valid = isinstance(value, int) and not isinstance(value, bool)
        expected = "an integer"
    elif isinstance(default, str):
        valid = isinstance(value, str)
        expected = "a string"
    else:
        valid = value is None or isinstance(value, str)
        expected = "a string or null"

    if not valid:
        raise ConfigurationError(
            f"{key} must be {expected}, got {value!r}",
            details={"key": key, "value": value},
        )


def _update_section(section, name: str, values: dict) -> None:
    defaults = {f.name: f.default for f in fields(section)}
    for key, value in values.items():
        if key not in defaults:
            raise ConfigurationError(
                f"Unknown configuration key: {name}.{key}",
                details={"key": f"{name}.{key}"},
            )
        _check_type(f"{name}.{key}", value, defaults[key])
        setattr(section, key, value)
