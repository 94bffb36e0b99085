"""Open URLs in the system's default web browser."""

__pkg_version__ = "1.0.0"

from .launcher import normalize_urls, open_home_page
from .models import LaunchOutcome, LaunchReport
from .platform import PlatformFamily, detect_platform_family, get_os_name

__all__ = [
    "__pkg_version__",
    "open_home_page",
    "normalize_urls",
    "LaunchOutcome",
    "LaunchReport",
    "PlatformFamily",
    "detect_platform_family",
    "get_os_name",
]
