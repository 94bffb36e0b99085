# browser_launcher/constants.py
"""
Constants for the browser-launcher package.
"""

import pathlib

# Fallback commands per platform family; the URL is appended as the final argument
WINDOWS_OPEN_COMMAND = ("rundll32", "url.dll,FileProtocolHandler")
MACOS_OPEN_COMMAND = ("open",)
UNIX_OPEN_COMMAND = ("xdg-open",)

# Reported OS name on macOS hosts (platform.system() says "Darwin", which contains "win")
MACOS_OS_NAME = "Mac OS X"

# Configuration locations
DEFAULT_CONFIG_DIR = pathlib.Path.home() / ".config" / "browser-launcher"
CONFIG_FILE_NAME = "config.json"

# Environment variables
ENV_CONFIG_DIR = "BROWSER_LAUNCHER_CONFIG_DIR"
ENV_NO_NATIVE = "BROWSER_LAUNCHER_NO_NATIVE"
ENV_STOP_ON_ERROR = "BROWSER_LAUNCHER_STOP_ON_ERROR"
ENV_OS_NAME = "BROWSER_LAUNCHER_OS_NAME"

TRUTHY_VALUES = ("1", "true", "yes", "on")
