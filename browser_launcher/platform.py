# browser_launcher/platform.py
"""
Host platform detection.
"""

import platform
import sys
from enum import Enum

from .constants import MACOS_OS_NAME


class PlatformFamily(str, Enum):
    """Coarse OS classification used to pick a fallback command."""

    WINDOWS = "windows"
    MACOS = "macos"
    UNIX = "unix"
    UNSUPPORTED = "unsupported"


def get_os_name() -> str:
    """Return a human-readable name for the host operating system (e.g. 'Windows 11')."""
    if sys.platform == "darwin":
        return MACOS_OS_NAME

    system = platform.system()
    release = platform.release()
    if system and release:
        return f"{system} {release}"
    return system or sys.platform


def detect_platform_family(os_name: str) -> PlatformFamily:
    """Classify an OS name into a platform family.

    Matching is by substring on the lower-cased name, checked in order:
    "win", then "mac", then "nix"/"nux". Anything else is unsupported.
    """
    name = os_name.lower()
    if "win" in name:
        return PlatformFamily.WINDOWS
    elif "mac" in name:
        return PlatformFamily.MACOS
    elif "nix" in name or "nux" in name:
        return PlatformFamily.UNIX
    else:
        return PlatformFamily.UNSUPPORTED
