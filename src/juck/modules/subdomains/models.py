"""Data models and errors for subdomain enumeration."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from urllib.parse import quote


@dataclass
class ScanConfig:
    """Runtime settings for one subdomain scan."""

    request_timeout: float = 30.0
    scan_timeout: float = 120.0
    user_agent: str = "Mozilla/5.0"
    require_all_sources: bool = True
    dedupe: bool = False
    follow_redirects: bool = True


@dataclass(frozen=True)
class SubdomainSource:
    """A public API queried for subdomains of a domain.

    ``url_template`` is formatted with the percent-encoded ``domain``; ``parser``
    turns the raw response body into hostnames and raises :class:`ParseFailed`
    on bad input.
    """

    name: str
    label: str
    url_template: str
    parser: Callable[[bytes], list[str]]

    def url_for(self, domain: str) -> str:
        return self.url_template.format(domain=quote(domain, safe=""))


@dataclass
class SourceError:
    """A per-source failure captured during a scan."""

    source: str
    stage: str
    message: str


@dataclass
class ScanResult:
    """Merged output of a subdomain scan."""

    target: str
    domain: str
    subdomains: list[str] = field(default_factory=list)
    errors: list[SourceError] = field(default_factory=list)


class SubdomainScanError(Exception):
    """Base class for subdomain scan failures."""


class InvalidURLFormat(SubdomainScanError, ValueError):
    """The input does not contain a hostname."""

    def __init__(self, target: str):
        super().__init__(f"invalid URL format: {target!r}")
        self.target = target


class FetchFailed(SubdomainScanError):
    """One or more sources could not be fetched."""

    def __init__(self, message: str, sources: list[str] | None = None):
        super().__init__(message)
        self.sources = sources or []


class ScanTimeout(FetchFailed):
    """The scan did not finish within its deadline."""


class ParseFailed(SubdomainScanError):
    """A source returned a body that does not match its schema."""

    def __init__(self, source: str, reason: str):
        super().__init__(f"error parsing {source} response: {reason}")
        self.source = source
        self.reason = reason


class FileWriteFailed(SubdomainScanError):
    """Results could not be written to disk."""

    def __init__(self, path, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason
