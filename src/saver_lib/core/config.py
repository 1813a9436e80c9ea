# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Configuration system for saver.

This module defines dataclasses representing the configurable aspects of saver:
environment variable names, database location defaults, exit codes, and the
styling of list output.

The `Config` class loads user configuration from a TOML file (if available)
and provides a globally accessible `CFG` instance.
"""

import os
import tomllib
from dataclasses import dataclass, field, fields, is_dataclass
from pathlib import Path
from typing import Any, Self


@dataclass
class EnvironmentVariables:
    """Environment variable names used by saver."""

    # Home directory of the user; the default database lives inside it.
    home: str = "HOME"
    # Enables saver debug mode.
    debug_mode: str = "SAVER_DEBUG"


@dataclass
class DatabaseSettings:
    """Settings for the command database."""

    # Location of the database directory relative to the home directory.
    default_subdir: str = ".saver/db"
    # Option marking that the next token is the database directory.
    override_flag: str = "--saver-db"


@dataclass
class ListPresenterSettings:
    """Settings for ListPresenter."""

    # Style used for the 1-based index of a record.
    index_style: str = "default"
    # Style used for the name of a record.
    name_style: str = "default"


@dataclass
class ExitCodes:
    """Exit codes used for various errors."""

    # Default error code for failures of saver actions.
    default: int = 1
    # Returned on an unexpected or unhandled error.
    unexpected_error: int = 99


@dataclass
class Config:
    """Main configuration for saver."""

    env_vars: EnvironmentVariables = field(default_factory=EnvironmentVariables)
    database: DatabaseSettings = field(default_factory=DatabaseSettings)
    list_presenter: ListPresenterSettings = field(
        default_factory=ListPresenterSettings
    )
    exit_codes: ExitCodes = field(default_factory=ExitCodes)

    # Name of the saver binary.
    binary_name: str = "saver"

    @classmethod
    def load(cls, config_path: Path | None = None) -> Self:
        """
        Load configuration from TOML file or use defaults.

        Args:
            config_path: Explicit path to config file. If None, searches standard locations.

        Returns:
            Config instance with loaded or default values.
        """
        if config_path is None:
            config_path = Config._get_config_path()

        try:
            if config_path and config_path.exists():
                with config_path.open("rb") as f:
                    config_data = tomllib.load(f)
                return _dict_to_dataclass(cls, config_data)
        except Exception as e:
            raise ValueError(f"Could not read saver config '{config_path}': {e}.")

        # no config found - use defaults
        return cls()

    @staticmethod
    def _get_config_path() -> Path | None:
        """
        Search for config file in standard locations (XDG compliant).
        Returns the first existing config file, or None.
        """
        config_locations: list[Path | None] = [
            # 1. Explicit environment variable (highest priority)
            Path(env_path) if (env_path := os.getenv("SAVER_CONFIG")) else None,
            # 2. Current working directory
            Path.cwd() / "saver_config.toml",
            # 3. XDG config home
            Path(os.getenv("XDG_CONFIG_HOME", Path.home() / ".config"))
            / "saver"
            / "config.toml",
        ]

        for path in config_locations:
            if path and path.is_file():
                return path

        return None


def _dict_to_dataclass(cls, data: dict[str, Any]):
    """
    Recursively convert a dictionary to a dataclass instance.
    Handles nested dataclasses properly.
    """
    if not is_dataclass(cls):
        return data

    field_values = {}
    for field_info in fields(cls):
        field_name = field_info.name
        field_type = field_info.type

        if field_name in data:
            value = data[field_name]
            if is_dataclass(field_type) and isinstance(value, dict):
                field_values[field_name] = _dict_to_dataclass(field_type, value)
            else:
                field_values[field_name] = value

    return cls(**field_values)


# Global configuration for saver.
CFG = Config.load()
