"""Formatting and persistence of scan results."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from .models import FileWriteFailed


def format_lines(subdomains: Iterable[str]) -> list[str]:
    """Render each hostname as an ``http://`` URL."""
    return [f"http://{name}" for name in subdomains]


def output_path(domain: str, directory: Path | None = None) -> Path:
    """Return ``<directory>/<domain>_subdomains.txt`` (current directory by default)."""
    return (directory or Path.cwd()) / f"{domain}_subdomains.txt"


def write_results(domain: str, subdomains: Iterable[str], directory: Path | None = None) -> Path:
    """Write one URL per line to the domain's output file, replacing it if present."""
    path = output_path(domain, directory)
    content = "".join(f"{line}\n" for line in format_lines(subdomains))
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise FileWriteFailed(path, exc.strerror or str(exc)) from exc
    return path
