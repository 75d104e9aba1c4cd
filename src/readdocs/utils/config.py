"""Global configuration and runtime settings resolution."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ValidationError, field_validator

ENV_PREFIX = "READDOCS_"

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class ConfigError(Exception):
    """Raised for invalid or incomplete configuration."""


class Settings(BaseModel):
    name: str = ""
    repo_url: str = ""
    branch: str = "main"
    docs_path: str = "docs"
    clone_location: str = ""
    auth_token: str = ""
    include_src: bool = False
    docs_dir: str = ""
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"unknown log level {value!r}")
        return level

    @property
    def project_name(self) -> str:
        """Clone subfolder name: explicit name, else derived from the repo URL."""
        if self.name:
            return self.name
        return repo_name(self.repo_url) or "docs"


# Keys the global config file may hold. auth_token is never persisted.
CONFIG_KEYS = (
    "name",
    "repo_url",
    "branch",
    "docs_path",
    "clone_location",
    "include_src",
    "docs_dir",
    "log_level",
)


def global_config_dir() -> Path:
    config = Path.home() / ".config" / "readdocs"
    config.mkdir(parents=True, exist_ok=True)
    return config


def load_global_config() -> dict:
    path = global_config_dir() / "config.json"
    if path.exists():
        try:
            return json.loads(path.read_text())
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid config file {path}: {e}")
    return {}


def save_global_config(config: dict) -> None:
    path = global_config_dir() / "config.json"
    path.write_text(json.dumps(config, indent=2))


def repo_name(repo_url: str) -> str:
    """Last path segment of a git URL without the .git suffix."""
    tail = repo_url.rstrip("/").replace(":", "/").rsplit("/", 1)[-1]
    if tail.endswith(".git"):
        tail = tail[: -len(".git")]
    return tail


def _env_settings() -> dict[str, str]:
    values = {}
    for key in Settings.model_fields:
        raw = os.environ.get(ENV_PREFIX + key.upper())
        if raw is not None and raw != "":
            values[key] = raw
    return values


def resolve_settings(**overrides: Any) -> Settings:
    """Merge global config, READDOCS_* environment and explicit overrides.

    Later sources win. Overrides that are None count as not given.
    """
    merged: dict[str, Any] = {
        k: v for k, v in load_global_config().items() if k in CONFIG_KEYS
    }
    merged.update(_env_settings())
    merged.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return Settings.model_validate(merged)
    except ValidationError as e:
        raise ConfigError(f"Invalid settings: {e}")
