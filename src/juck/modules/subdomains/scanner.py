"""Fan-out / fan-in subdomain scan across all configured sources."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable

import httpx

from .aggregator import ResultSet, dedupe_subdomains
from .domain import extract_domain
from .fetcher import create_client, fetch_all
from .models import (
    FetchFailed,
    ParseFailed,
    ScanConfig,
    ScanResult,
    ScanTimeout,
    SourceError,
    SubdomainSource,
)
from .sources import SOURCES

logger = logging.getLogger(__name__)


class SubdomainScanner:
    """Query every source for a domain and merge what they report."""

    def __init__(
        self,
        config: ScanConfig | None = None,
        sources: Iterable[SubdomainSource] | None = None,
    ):
        self.config = config or ScanConfig()
        self.sources = list(sources) if sources is not None else list(SOURCES.values())

    async def scan(self, target: str, client: httpx.AsyncClient | None = None) -> ScanResult:
        """Scan *target* and return the merged hostnames.

        Raises :class:`InvalidURLFormat` for unusable input, :class:`FetchFailed`
        when the fetch policy rejects the responses, and :class:`ScanTimeout`
        when ``scan_timeout`` elapses first.
        """
        domain = extract_domain(target)
        logger.debug("Scanning %s (domain %s) across %d sources", target, domain, len(self.sources))
        try:
            async with asyncio.timeout(self.config.scan_timeout):
                if client is not None:
                    return await self._scan_domain(client, target, domain)
                async with create_client(self.config) as own_client:
                    return await self._scan_domain(own_client, target, domain)
        except TimeoutError as exc:
            raise ScanTimeout(
                f"scan of {domain} did not finish within {self.config.scan_timeout}s",
                [source.name for source in self.sources],
            ) from exc

    async def _scan_domain(
        self, client: httpx.AsyncClient, target: str, domain: str
    ) -> ScanResult:
        responses = await fetch_all(client, self.sources, domain)
        errors = self._check_fetches(responses)

        results = ResultSet(source.name for source in self.sources)
        bodies = [
            (source, responses[source.name])
            for source in self.sources
            if isinstance(responses[source.name], bytes)
        ]
        outcomes = await asyncio.gather(
            *(asyncio.to_thread(self._parse_into, results, source, body) for source, body in bodies)
        )
        errors.extend(error for error in outcomes if error is not None)

        subdomains = results.records()
        if self.config.dedupe:
            subdomains = dedupe_subdomains(subdomains)
        return ScanResult(target=target, domain=domain, subdomains=subdomains, errors=errors)

    def _check_fetches(self, responses: dict[str, bytes | FetchFailed]) -> list[SourceError]:
        failures = {
            name: outcome for name, outcome in responses.items() if isinstance(outcome, FetchFailed)
        }
        if not failures:
            return []

        failed = list(failures)
        if self.config.require_all_sources or len(failures) == len(responses):
            reasons = "; ".join(str(exc) for exc in failures.values())
            raise FetchFailed(
                f"failed to fetch data from one or more sources: {reasons}", failed
            )

        errors = []
        for name, exc in failures.items():
            logger.warning("Skipping %s: %s", name, exc)
            errors.append(SourceError(source=name, stage="fetch", message=str(exc)))
        return errors

    @staticmethod
    def _parse_into(
        results: ResultSet, source: SubdomainSource, body: bytes
    ) -> SourceError | None:
        try:
            hostnames = source.parser(body)
        except ParseFailed as exc:
            logger.warning("Error parsing %s response: %s", source.label, exc.reason)
            return SourceError(source=source.name, stage="parse", message=str(exc))
        results.add(source.name, hostnames)
        logger.debug("%s contributed %d hostnames", source.label, len(hostnames))
        return None


async def subdomain_scan(
    target: str,
    config: ScanConfig | None = None,
    sources: Iterable[SubdomainSource] | None = None,
) -> ScanResult:
    """Convenience wrapper around :class:`SubdomainScanner`."""
    return await SubdomainScanner(config, sources).scan(target)
