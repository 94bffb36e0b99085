import argparse
import sys
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.traceback import install

from . import __pkg_version__
from .config import load_config
from .launcher import open_home_page
from .models import LaunchReport


install(show_locals=True)
console = Console()
err_console = Console(stderr=True)

STATUS_STYLES = {"opened": "green", "failed": "bold red", "unsupported": "yellow", "skipped": "dim"}


def configure_parser(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("urls", nargs="+", metavar="URL", help="One or more URLs to open in the default browser.")
    parser.add_argument(
        "--no-native",
        action="store_true",
        help="Skip the native browser integration and always use the OS command (rundll32, open or xdg-open).",
    )
    parser.add_argument(
        "--stop-on-error",
        action="store_true",
        help="Stop at the first URL that fails to open instead of trying the remaining ones.",
    )
    parser.add_argument(
        "--os-name",
        type=str,
        default=None,
        help="Treat the host as this operating system when choosing the fallback command (e.g. 'Windows 11').",
    )
    parser.add_argument(
        "--output",
        type=str,
        choices=["rich", "plain"],
        default="rich",
        help="Output mode: 'rich' for a summary table (default), 'plain' for one '<status> <url>' line per URL.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__pkg_version__}")


def print_report(report: LaunchReport, output_mode: str, out: Console) -> None:
    """Print the outcome of each URL."""
    if output_mode == "plain":
        for outcome in report.outcomes:
            out.print(f"{outcome.status} {outcome.url}", markup=False, highlight=False, soft_wrap=True)
        return

    if not report.outcomes:
        return

    family = report.platform_family.value if report.platform_family else "unknown"
    table = Table(title=f"Browser launch ({escape(report.os_name or 'unknown OS')}, {family})")
    table.add_column("URL", overflow="fold")
    table.add_column("Status")
    table.add_column("Method")
    table.add_column("Details", overflow="fold")
    for outcome in report.outcomes:
        style = STATUS_STYLES.get(outcome.status, "")
        details = " ".join(outcome.command) if outcome.command else (outcome.error or "")
        table.add_row(escape(outcome.url), f"[{style}]{outcome.status}[/]", outcome.method, escape(details))
    out.print(table)


def main() -> None:
    """Main function for the browser-launcher CLI."""
    try:
        _main()
    except KeyboardInterrupt:
        # Clean exit on Ctrl+C without traceback
        console.print("\n[yellow]Interrupted.[/]")
        sys.exit(130)  # Standard exit code for SIGINT


def _main(argv: list[str] | None = None) -> None:
    """Internal main function containing the CLI logic."""
    parser = argparse.ArgumentParser(
        prog="browser-launcher",
        description="Open URLs in the system's default web browser.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    configure_parser(parser)
    args = parser.parse_args(argv)

    config = load_config(console=err_console)
    overrides = {}
    if args.no_native:
        overrides["prefer_native"] = False
    if args.stop_on_error:
        overrides["stop_on_error"] = True
    if args.os_name:
        overrides["os_name"] = args.os_name
    config = config.model_copy(update=overrides)

    report = open_home_page(args.urls, config=config, console=err_console)
    print_report(report, args.output, console)

    sys.exit(0 if report.ok else 1)
