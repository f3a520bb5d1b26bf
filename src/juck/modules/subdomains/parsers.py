"""Response parsers for each subdomain source.

Every parser takes the raw response body and returns hostnames in the order the
source lists them. JSON ``null`` counts as a missing value. A body that is not
JSON, or whose shape does not match the source's schema, raises
:class:`ParseFailed`.
"""

from __future__ import annotations

import json
from typing import Any

from .models import ParseFailed


def _load_json(source: str, body: bytes) -> Any:
    # ValueError covers JSONDecodeError, UnicodeDecodeError and oversized integers.
    try:
        return json.loads(body)
    except (ValueError, RecursionError) as exc:
        raise ParseFailed(source, str(exc)) from exc


def _require(source: str, value: Any, kind: type, what: str) -> Any:
    if not isinstance(value, kind):
        raise ParseFailed(source, f"expected {what}, got {type(value).__name__}")
    return value


def _string(source: str, value: Any, what: str) -> str:
    return "" if value is None else _require(source, value, str, what)


def parse_threatcrowd(body: bytes) -> list[str]:
    """ThreatCrowd domain report: ``{"subdomains": ["a.example.com", ...]}``."""
    data = _load_json("ThreatCrowd", body)
    if data is None:
        return []
    _require("ThreatCrowd", data, dict, "object")
    subdomains = data.get("subdomains")
    if subdomains is None:
        return []
    _require("ThreatCrowd", subdomains, list, "'subdomains' array")
    return [_string("ThreatCrowd", item, "string in 'subdomains'") for item in subdomains]


def parse_crtsh(body: bytes) -> list[str]:
    """crt.sh search results: ``[{"name_value": "a.example.com\\nb.example.com"}, ...]``.

    A certificate can cover several names, so ``name_value`` is split on
    newlines. Empty segments are dropped.
    """
    entries = _load_json("Crt.sh", body)
    if entries is None:
        return []
    _require("Crt.sh", entries, list, "array")
    hostnames: list[str] = []
    for entry in entries:
        if entry is None:
            continue
        _require("Crt.sh", entry, dict, "object in array")
        name_value = _string("Crt.sh", entry.get("name_value"), "string 'name_value'")
        hostnames.extend(segment for segment in name_value.split("\n") if segment)
    return hostnames


def parse_urlscan(body: bytes) -> list[str]:
    """URLScan search: ``{"results": [{"page": {"domain": "a.example.com"}}, ...]}``."""
    data = _load_json("URLScan", body)
    if data is None:
        return []
    _require("URLScan", data, dict, "object")
    results = data.get("results")
    if results is None:
        return []
    _require("URLScan", results, list, "'results' array")

    hostnames: list[str] = []
    for result in results:
        if result is None:
            result = {}
        _require("URLScan", result, dict, "object in 'results'")
        page = result.get("page")
        page = _require("URLScan", {} if page is None else page, dict, "'page' object")
        hostnames.append(_string("URLScan", page.get("domain"), "string 'page.domain'"))
    return hostnames
