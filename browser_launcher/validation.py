"""Input validation for browser-launcher.

Input shape is checked when URLs are normalized; each URL is checked for basic
well-formedness right before it is handed to an opener.
"""

from rich.console import Console
from rich.markup import escape

# Characters that must be percent-encoded before they can appear in a URI
ILLEGAL_URL_CHARACTERS = frozenset('"<>\\^`{|}')


class LauncherError(Exception):
    """Base class for browser-launcher errors."""

    def __init__(self, message: str, suggestion: str | None = None):
        self.message = message
        self.suggestion = suggestion
        super().__init__(message)


class InvalidURLInputError(LauncherError):
    """Raised when the input is neither a string nor a sequence of strings."""

    pass


class MalformedURLError(LauncherError):
    """Raised when a URL cannot be used to build a URI."""

    def __init__(self, url: str, reason: str):
        self.url = url
        super().__init__(f"Malformed URL {url!r}: {reason}")


def validate_url(url: str) -> None:
    """
    Check that a URL is usable as a URI.

    Raises:
        MalformedURLError: If the URL is empty or contains whitespace, control characters
            or one of the characters a URI may not carry unescaped.
    """
    if not url:
        raise MalformedURLError(url, "URL is empty")

    for index, char in enumerate(url):
        if char.isspace():
            raise MalformedURLError(url, f"illegal whitespace at index {index}")
        if not char.isprintable():
            raise MalformedURLError(url, f"illegal control character at index {index}")
        if char in ILLEGAL_URL_CHARACTERS:
            raise MalformedURLError(url, f"illegal character {char!r} at index {index}")


def print_launcher_error(error: LauncherError, console: Console) -> None:
    """Print a launcher error in a user-friendly format."""
    console.print(f"[bold red]Error:[/] {escape(error.message)}")
    if error.suggestion:
        console.print(f"[dim]{error.suggestion}[/]")
