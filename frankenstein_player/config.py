"""Loading and querying the JSON configuration file."""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from typing import Any


class ConfigError(RuntimeError):
    """Raised when the configuration is missing, unreadable or incomplete."""


class Environment(Enum):
    PRODUCTION = "production"
    TESTING = "testing"
    DEVELOPMENT = "development"


_PATH_KEYS = (
    ("user_home", "User music directory not found"),
    ("public_user", "Public music directory not found"),
    ("input_public", "Input public path not found"),
    ("input_user", "Input user path not found"),
)


class ConfigManager:
    """Reads the player's JSON configuration and answers questions about it."""

    def __init__(self, config_file_path: str) -> None:
        self.config_file_path = config_file_path
        self._data: Any = None

    def load_config(self) -> None:
        """Read and parse the configuration file."""
        path = Path(self.config_file_path)
        if not path.exists():
            raise ConfigError("Config file not found")
        try:
            content = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigError("Failed to open config file") from exc
        try:
            self._data = json.loads(content)
        except json.JSONDecodeError as exc:
            raise ConfigError(
                "Failed to parse config file, invalid JSON format"
            ) from exc

    def _section(self, key: str) -> Any:
        if isinstance(self._data, dict) and key in self._data:
            return self._data[key]
        return None

    def get_config_value(self, key: str) -> str:
        """Return a top-level string value, or an empty string if absent."""
        value = self._section(key)
        if value is None and not (isinstance(self._data, dict) and key in self._data):
            return ""
        if not isinstance(value, str):
            raise TypeError(f"config value {key!r} is not a string")
        return value

    def database_path(self) -> str:
        database = self._section("database")
        if not isinstance(self._data, dict) or "database" not in self._data:
            raise ConfigError("Database configuration not found")
        if isinstance(database, dict):
            return database.get("filename", "frankenstein.db")
        return "frankenstein.db"

    def database_schema_path(self) -> str:
        if not isinstance(self._data, dict) or "database" not in self._data:
            raise ConfigError("Database configuration not found")
        database = self._data["database"]
        schema = database.get("schema_path") if isinstance(database, dict) else None
        if not schema:
            raise ConfigError("Database schema path not found")
        return schema

    def validate_config_paths(self) -> None:
        """Check that every required path entry is present and non-empty."""
        if not isinstance(self._data, dict) or "paths" not in self._data:
            raise ConfigError("Paths configuration not found")
        paths = self._data["paths"]
        for key, message in _PATH_KEYS:
            value = paths.get(key) if isinstance(paths, dict) else None
            if not value:
                raise ConfigError(message)

    def _path(self, key: str) -> str:
        self.validate_config_paths()
        return self._data["paths"][key]

    def user_music_directory(self) -> str:
        return self._path("user_home")

    def public_music_directory(self) -> str:
        return self._path("public_user")

    def input_public_path(self) -> str:
        return self._path("input_public")

    def input_user_path(self) -> str:
        return self._path("input_user")

    def environment(self) -> Environment:
        """The configured environment; unknown values mean development."""
        env = "production"
        if isinstance(self._data, dict):
            env = self._data.get("enviroment", "production")
        if env == "production":
            return Environment.PRODUCTION
        if env == "testing":
            return Environment.TESTING
        return Environment.DEVELOPMENT

    def __str__(self) -> str:
        return (
            "ConfigManager:\n"
            f" - Config file path: {self.config_file_path}\n"
            f"{json.dumps(self._data, indent=4)}\n"
        )