"""juck CLI - passive subdomain discovery."""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from juck.config import is_verbose, load_scan_config
from juck.modules.subdomains import (
    FileWriteFailed,
    SubdomainScanError,
    format_lines,
    subdomain_scan,
    write_results,
)
from juck.utils.async_utils import safe_async_run

app = typer.Typer(
    name="juck",
    help="Find subdomains using public threat-intel and certificate transparency APIs",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)

BANNER = r"""      _   _   _    ____   _
     | | | | | |  / ___| | | __
  _  | | | | | | | |     | |/ /
 | |_| | | |_| | | |___  |   <
  \___/   \___/   \____| |_|\_\
"""


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )
    # httpx logs every request at INFO; only surface it in verbose mode.
    logging.getLogger("httpx").setLevel(logging.INFO if verbose else logging.WARNING)


def _print_plain(text: str, style: str | None = None) -> None:
    console.print(text, style=style, markup=False, highlight=False, soft_wrap=True)


@app.command()
def scan(
    target: Optional[str] = typer.Argument(
        None, help="Target URL or domain (prompted for when omitted)", show_default=False
    ),
    timeout: Optional[float] = typer.Option(
        None, "--timeout", "-t", help="Per-request timeout in seconds"
    ),
    scan_timeout: Optional[float] = typer.Option(
        None, "--scan-timeout", help="Overall scan deadline in seconds"
    ),
    best_effort: bool = typer.Option(
        False, "--best-effort", help="Keep results from sources that succeeded if others fail"
    ),
    dedupe: bool = typer.Option(False, "--dedupe", help="Remove duplicate subdomains"),
    output_dir: Optional[Path] = typer.Option(
        None,
        "--output-dir",
        "-o",
        help="Directory for <domain>_subdomains.txt (default: current directory)",
        file_okay=False,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """Enumerate subdomains of TARGET and save them to <domain>_subdomains.txt."""
    configure_logging(verbose or is_verbose())
    _print_plain(BANNER, style="green")

    if not target:
        tokens = typer.prompt("Enter a domain").split()
        target = tokens[0] if tokens else ""

    config = load_scan_config()
    if timeout is not None:
        config.request_timeout = timeout
    if scan_timeout is not None:
        config.scan_timeout = scan_timeout
    if best_effort:
        config.require_all_sources = False
    if dedupe:
        config.dedupe = True

    try:
        result = safe_async_run(subdomain_scan(target, config))
    except SubdomainScanError as exc:
        _print_plain(f"\nFailed to find subdomains of {target}", style="red")
        err_console.print(f"[dim]{escape(str(exc))}[/dim]", highlight=False)
        raise typer.Exit(1) from exc

    _print_plain(f"\nSubdomains of {target} found!\n", style="green")
    for line in format_lines(result.subdomains):
        _print_plain(line)

    for error in result.errors:
        err_console.print(
            f"[yellow]{error.source} ({error.stage}) skipped:[/yellow] {escape(error.message)}",
            highlight=False,
        )

    try:
        path = write_results(result.domain, result.subdomains, output_dir)
    except FileWriteFailed as exc:
        _print_plain(f"\nFailed to save subdomains to file: {exc}", style="red")
        raise typer.Exit(1) from exc

    _print_plain(f"\nSubdomains saved to '{path}'", style="green")


def main() -> None:
    """Console script entry point."""
    app()
