# browser_launcher/config.py
"""Configuration for browser-launcher.

Settings come from an optional JSON file at
~/.config/browser-launcher/config.json, overridden by environment variables:

    BROWSER_LAUNCHER_NO_NATIVE: "1"/"true" to skip the native browser and use the OS command.
    BROWSER_LAUNCHER_STOP_ON_ERROR: "1"/"true" to abandon a batch after the first failure.
    BROWSER_LAUNCHER_OS_NAME: Pretend to run on this OS (e.g. "Windows 11").
    BROWSER_LAUNCHER_CONFIG_DIR: Read config.json from this directory instead.
"""

import json
import os
import pathlib

from pydantic import BaseModel, ValidationError
from rich.console import Console
from rich.markup import escape

from .constants import (
    CONFIG_FILE_NAME,
    DEFAULT_CONFIG_DIR,
    ENV_CONFIG_DIR,
    ENV_NO_NATIVE,
    ENV_OS_NAME,
    ENV_STOP_ON_ERROR,
    TRUTHY_VALUES,
)


class LauncherConfig(BaseModel):
    """Behavior switches for a launch call."""

    prefer_native: bool = True
    stop_on_error: bool = False
    os_name: str | None = None


def get_config_file() -> pathlib.Path:
    """Return the path of the config file, honoring BROWSER_LAUNCHER_CONFIG_DIR."""
    config_dir = os.getenv(ENV_CONFIG_DIR)
    base = pathlib.Path(config_dir) if config_dir else DEFAULT_CONFIG_DIR
    return base / CONFIG_FILE_NAME


def _env_flag(name: str) -> bool | None:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return None
    return value.strip().lower() in TRUTHY_VALUES


def load_config_file(path: pathlib.Path, console: Console | None = None) -> LauncherConfig:
    """Load settings from a JSON file. Missing or unreadable files yield the defaults."""
    if not path.exists():
        return LauncherConfig()
    try:
        with open(path, "r", encoding="utf-8") as f:
            return LauncherConfig.model_validate(json.load(f))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, ValidationError) as e:
        (console or Console(stderr=True)).print(
            f"[yellow]Warning: Unable to read config file at {escape(str(path))}: {escape(str(e))}. Using defaults.[/]"
        )
        return LauncherConfig()


def load_config(console: Console | None = None) -> LauncherConfig:
    """Load the config file and apply environment variable overrides."""
    config = load_config_file(get_config_file(), console=console)
    overrides = {}

    no_native = _env_flag(ENV_NO_NATIVE)
    if no_native is not None:
        overrides["prefer_native"] = not no_native

    stop_on_error = _env_flag(ENV_STOP_ON_ERROR)
    if stop_on_error is not None:
        overrides["stop_on_error"] = stop_on_error

    os_name = os.getenv(ENV_OS_NAME)
    if os_name:
        overrides["os_name"] = os_name

    return config.model_copy(update=overrides)
