"""Thread-safe accumulation of parsed hostnames."""

import threading
from collections.abc import Iterable


class ResultSet:
    """Hostnames collected across sources.

    Parsers run in worker threads and each commits its whole contribution in
    one locked call. :meth:`records` flattens contributions in the order the
    sources were declared, so identical inputs give identical output.
    """

    def __init__(self, source_order: Iterable[str]):
        self._lock = threading.Lock()
        self._order = list(source_order)
        self._by_source: dict[str, list[str]] = {}

    def add(self, source: str, hostnames: Iterable[str]) -> None:
        with self._lock:
            self._by_source.setdefault(source, []).extend(hostnames)

    def records(self) -> list[str]:
        with self._lock:
            merged: list[str] = []
            for name in self._order:
                merged.extend(self._by_source.get(name, []))
            for name, hostnames in self._by_source.items():
                if name not in self._order:
                    merged.extend(hostnames)
            return merged

    def __len__(self) -> int:
        with self._lock:
            return sum(len(hostnames) for hostnames in self._by_source.values())


def dedupe_subdomains(subdomains: Iterable[str]) -> list[str]:
    """Drop repeated hostnames, keeping the first occurrence."""
    seen: set[str] = set()
    unique: list[str] = []
    for name in subdomains:
        if name in seen:
            continue
        seen.add(name)
        unique.append(name)
    return unique
