"""Config subcommands: get, set, unset, list for global readdocs settings."""

from __future__ import annotations

from typing import Optional

import typer

from readdocs.cli._shared import FORMAT_OPTION
from readdocs.utils.config import CONFIG_KEYS, ConfigError, Settings, load_global_config, save_global_config
from readdocs.utils.output import error, info, output_json, resolve_format, success

config_app = typer.Typer(no_args_is_help=True)


def _check_key(key: str) -> None:
    if key not in CONFIG_KEYS:
        error(f"Unknown key: {key}. Valid keys: {', '.join(sorted(CONFIG_KEYS))}")
        raise typer.Exit(1)


def _load() -> dict:
    try:
        return load_global_config()
    except ConfigError as e:
        error(str(e))
        raise typer.Exit(1)


@config_app.command("get")
def config_get(
    key: str = typer.Argument(..., help="Configuration key"),
    fmt: Optional[str] = FORMAT_OPTION,
) -> None:
    """Get a configuration value."""
    _check_key(key)
    value = _load().get(key)
    if resolve_format(fmt) == "json":
        output_json({"key": key, "value": value})
    elif value is None:
        info(f"{key}: (not set)")
    else:
        info(f"{key}: {value}")


@config_app.command("set")
def config_set(
    key: str = typer.Argument(..., help="Configuration key"),
    value: str = typer.Argument(..., help="Value to set"),
    fmt: Optional[str] = FORMAT_OPTION,
) -> None:
    """Set a configuration value."""
    _check_key(key)
    try:
        # Parse through the settings model to coerce booleans and log levels
        parsed = getattr(Settings.model_validate({key: value}), key)
    except ValueError as e:
        error(f"Invalid value for {key}: {value} ({e.__class__.__name__})")
        raise typer.Exit(1)

    config = _load()
    config[key] = parsed
    save_global_config(config)

    if resolve_format(fmt) == "json":
        output_json({"key": key, "value": parsed})
    else:
        success(f"{key} = {parsed}")


@config_app.command("unset")
def config_unset(
    key: str = typer.Argument(..., help="Configuration key"),
) -> None:
    """Remove a configuration value."""
    _check_key(key)
    config = _load()
    if config.pop(key, None) is None:
        info(f"{key}: (not set)")
        return
    save_global_config(config)
    success(f"{key} unset")


@config_app.command("list")
def config_list(
    fmt: Optional[str] = FORMAT_OPTION,
) -> None:
    """List all configuration values."""
    config = _load()
    if resolve_format(fmt) == "json":
        output_json(config)
    elif config:
        for k, v in sorted(config.items()):
            info(f"{k}: {v}")
    else:
        info("No configuration set")
