"""Passive subdomain enumeration from public threat-intel and CT log APIs."""

from .aggregator import ResultSet, dedupe_subdomains
from .domain import extract_domain
from .fetcher import create_client, fetch_all, fetch_source
from .models import (
    FetchFailed,
    FileWriteFailed,
    InvalidURLFormat,
    ParseFailed,
    ScanConfig,
    ScanResult,
    ScanTimeout,
    SourceError,
    SubdomainScanError,
    SubdomainSource,
)
from .output import format_lines, output_path, write_results
from .parsers import parse_crtsh, parse_threatcrowd, parse_urlscan
from .scanner import SubdomainScanner, subdomain_scan
from .sources import SOURCES

__all__ = [
    "FetchFailed",
    "FileWriteFailed",
    "InvalidURLFormat",
    "ParseFailed",
    "ResultSet",
    "SOURCES",
    "ScanConfig",
    "ScanResult",
    "ScanTimeout",
    "SourceError",
    "SubdomainScanError",
    "SubdomainScanner",
    "SubdomainSource",
    "create_client",
    "dedupe_subdomains",
    "extract_domain",
    "fetch_all",
    "fetch_source",
    "format_lines",
    "output_path",
    "parse_crtsh",
    "parse_threatcrowd",
    "parse_urlscan",
    "subdomain_scan",
    "write_results",
]
