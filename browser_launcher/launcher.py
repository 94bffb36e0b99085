# browser_launcher/launcher.py
"""Open one or more URLs in the system's default web browser.

Usage:
    from browser_launcher import open_home_page

    open_home_page("https://example.com")
    report = open_home_page(["https://example.com", "https://example.org"])
    if not report.ok:
        ...

The native browser (``webbrowser``) is preferred. When it is unavailable the
platform's own command is spawned instead: ``rundll32 url.dll,FileProtocolHandler``
on Windows, ``open`` on macOS and ``xdg-open`` on Linux/Unix.

Launching is best-effort: problems are printed to the console and recorded in
the returned LaunchReport, and nothing is raised to the caller.
"""

import traceback
from collections.abc import Sequence
from typing import Any, Callable

from rich.console import Console
from rich.markup import escape

from .config import LauncherConfig, load_config
from .models import LaunchOutcome, LaunchReport
from .openers import BrowserOpener, Spawn, fallback_opener, get_native_opener
from .platform import detect_platform_family, get_os_name
from .validation import InvalidURLInputError, MalformedURLError, print_launcher_error, validate_url


def normalize_urls(urls: Any) -> list[str]:
    """Turn a URL or a sequence of URLs into a list of URL strings.

    Non-string items inside a sequence are dropped; order is preserved.

    Raises:
        InvalidURLInputError: If ``urls`` is neither a string nor a sequence.
    """
    if isinstance(urls, str):
        return [urls]

    if isinstance(urls, Sequence) and not isinstance(urls, (bytes, bytearray)):
        return [url for url in urls if isinstance(url, str)]

    raise InvalidURLInputError(
        f"Invalid argument type {type(urls).__name__}. Expected str or a sequence of str.",
        suggestion="Pass a single URL string or a list of URL strings.",
    )


def _print_failure(outcome: LaunchOutcome, console: Console) -> None:
    error = outcome.error or "unknown error"
    console.print(f"[bold red]Error:[/] Could not open {escape(outcome.url)}: {escape(error)}")
    if outcome.detail:
        console.print(escape(outcome.detail.rstrip()), style="dim", highlight=False)


def _print_setup_error(message: str, error: Exception, console: Console) -> None:
    console.print(f"[yellow]Warning: {message}: {escape(str(error) or type(error).__name__)}[/]")
    console.print(escape(traceback.format_exc().rstrip()), style="dim", highlight=False)


def _skip_remaining(urls: list[str], failed_url: str) -> list[LaunchOutcome]:
    return [
        LaunchOutcome(url=url, status="skipped", error=f"Skipped after failure on {failed_url}") for url in urls
    ]


def open_home_page(
    urls: Any,
    *,
    config: LauncherConfig | None = None,
    console: Console | None = None,
    os_name: str | None = None,
    native_opener_factory: Callable[[], BrowserOpener | None] = get_native_opener,
    spawn: Spawn | None = None,
) -> LaunchReport:
    """
    Open the given URL(s) in the system's default web browser.

    Args:
        urls: A URL string or a sequence of URL strings. Non-string items in a sequence are ignored.
        config: Launcher settings. Loaded from the config file and environment when omitted.
        console: Rich console for diagnostics. Defaults to a stderr console.
        os_name: OS name used to pick the fallback command. Defaults to the configured or detected name.
        native_opener_factory: Returns the native opener, or None when the native browser is unavailable.
        spawn: Process spawner used by fallback commands (defaults to subprocess.Popen).

    Returns:
        LaunchReport with one outcome per URL in input order. Invalid input is
        reported through ``input_error`` with no outcomes.
    """
    console = console or Console(stderr=True)
    report = LaunchReport()

    try:
        url_list = normalize_urls(urls)
    except InvalidURLInputError as e:
        print_launcher_error(e, console)
        report.input_error = e.message
        return report

    if config is None:
        try:
            config = load_config(console=console)
        except Exception as e:
            _print_setup_error("Unable to load configuration, using defaults", e, console)
            config = LauncherConfig()

    # Resolved once per call and shared by every URL in the batch
    native_opener = None
    if config.prefer_native:
        try:
            native_opener = native_opener_factory()
        except Exception as e:
            _print_setup_error("Native browser lookup failed, using the OS command", e, console)
    os_name = os_name or config.os_name or get_os_name()
    family = detect_platform_family(os_name)
    report.os_name = os_name
    report.platform_family = family

    opener = native_opener or fallback_opener(family, os_name, console, spawn=spawn)

    for index, url in enumerate(url_list):
        try:
            validate_url(url)
            outcome = opener.open(url)
        except MalformedURLError as e:
            outcome = LaunchOutcome.failed(url, e.message)
        except Exception as e:
            outcome = LaunchOutcome.failed(
                url, f"Unexpected error: {e}", method=opener.method, detail=traceback.format_exc()
            )
        report.outcomes.append(outcome)

        if outcome.status != "failed":
            continue

        _print_failure(outcome, console)
        if config.stop_on_error:
            report.outcomes.extend(_skip_remaining(url_list[index + 1 :], url))
            break

    return report
