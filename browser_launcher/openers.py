# browser_launcher/openers.py
"""Openers that hand a URL to the default browser.

Every opener exposes a single ``open(url) -> LaunchOutcome`` method so the
launcher can be driven with fakes in tests. Launch errors are returned as
failed outcomes rather than raised.
"""

import subprocess
import traceback
import webbrowser
from abc import ABC, abstractmethod
from typing import Any, Callable

from rich.console import Console
from rich.markup import escape

from .constants import MACOS_OPEN_COMMAND, UNIX_OPEN_COMMAND, WINDOWS_OPEN_COMMAND
from .models import LaunchOutcome
from .platform import PlatformFamily


Spawn = Callable[..., Any]

FALLBACK_COMMANDS = {
    PlatformFamily.WINDOWS: WINDOWS_OPEN_COMMAND,
    PlatformFamily.MACOS: MACOS_OPEN_COMMAND,
    PlatformFamily.UNIX: UNIX_OPEN_COMMAND,
}


class BrowserOpener(ABC):
    """Abstract base class for URL openers."""

    method = "none"

    @abstractmethod
    def open(self, url: str) -> LaunchOutcome:
        """Open ``url`` and report what happened."""
        pass


class NativeBrowserOpener(BrowserOpener):
    """Opens URLs through the platform's registered default browser (``webbrowser``)."""

    method = "native"

    def __init__(self, controller: Any):
        self.controller = controller

    def open(self, url: str) -> LaunchOutcome:
        try:
            if not self.controller.open(url):
                return LaunchOutcome.failed(url, "Default browser refused to open the URL", method="native")
        except (webbrowser.Error, OSError) as e:
            return LaunchOutcome.failed(url, str(e) or type(e).__name__, method="native", detail=traceback.format_exc())
        return LaunchOutcome.opened(url, method="native")


class CommandBrowserOpener(BrowserOpener):
    """Opens URLs by spawning an OS command with the URL as its last argument.

    The command is started without a shell and is not waited on.
    """

    method = "command"

    def __init__(self, argv_prefix: tuple[str, ...] | list[str], spawn: Spawn | None = None):
        self.argv_prefix = list(argv_prefix)
        self.spawn = spawn or subprocess.Popen

    def build_command(self, url: str) -> list[str]:
        return [*self.argv_prefix, url]

    def open(self, url: str) -> LaunchOutcome:
        command = self.build_command(url)
        try:
            self.spawn(command, stdin=subprocess.DEVNULL, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)
        except OSError as e:
            return LaunchOutcome.failed(
                url,
                f"Failed to run {command[0]}: {e}",
                method="command",
                command=command,
                detail=traceback.format_exc(),
            )
        return LaunchOutcome.opened(url, method="command", command=command)


class UnsupportedPlatformOpener(BrowserOpener):
    """Stand-in for platforms with no known fallback command; it only prints a notice."""

    def __init__(self, os_name: str, console: Console):
        self.os_name = os_name
        self.console = console

    def open(self, url: str) -> LaunchOutcome:
        self.console.print(f"[yellow]Unsupported operating system: {escape(self.os_name.lower())}[/]")
        return LaunchOutcome(
            url=url, status="unsupported", error=f"Unsupported operating system: {self.os_name.lower()}"
        )


def get_native_opener() -> NativeBrowserOpener | None:
    """Return an opener for the default browser, or None if no browser can be driven natively."""
    try:
        controller = webbrowser.get()
    except webbrowser.Error:
        return None

    # Controllers without an open() cannot browse
    if not callable(getattr(controller, "open", None)):
        return None
    return NativeBrowserOpener(controller)


def fallback_opener(
    family: PlatformFamily, os_name: str, console: Console, spawn: Spawn | None = None
) -> BrowserOpener:
    """Return the command opener for a platform family."""
    argv_prefix = FALLBACK_COMMANDS.get(family)
    if argv_prefix is None:
        return UnsupportedPlatformOpener(os_name, console)
    return CommandBrowserOpener(argv_prefix, spawn=spawn)
