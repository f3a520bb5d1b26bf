"""Concurrent retrieval of raw source responses."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable

import httpx

from .models import FetchFailed, ScanConfig, SubdomainSource

logger = logging.getLogger(__name__)


def create_client(config: ScanConfig) -> httpx.AsyncClient:
    """Build the shared HTTP client used for every source request."""
    return httpx.AsyncClient(
        timeout=config.request_timeout,
        follow_redirects=config.follow_redirects,
        headers={"User-Agent": config.user_agent},
    )


async def fetch_source(client: httpx.AsyncClient, source: SubdomainSource, domain: str) -> bytes:
    """GET one source for *domain* and return the body.

    Anything other than a 200 response, or a transport error, raises
    :class:`FetchFailed`.
    """
    url = source.url_for(domain)
    logger.debug("GET %s", url)
    try:
        response = await client.get(url)
    except httpx.HTTPError as exc:
        raise FetchFailed(f"{source.label}: {exc!r}", [source.name]) from exc

    logger.debug(
        "%s responded %d (%d bytes)", source.label, response.status_code, len(response.content)
    )
    if response.status_code != 200:
        raise FetchFailed(
            f"{source.label}: received non-200 response code {response.status_code}",
            [source.name],
        )
    return response.content


async def _fetch_or_error(
    client: httpx.AsyncClient, source: SubdomainSource, domain: str
) -> bytes | FetchFailed:
    try:
        return await fetch_source(client, source, domain)
    except FetchFailed as exc:
        return exc


async def fetch_all(
    client: httpx.AsyncClient,
    sources: Iterable[SubdomainSource],
    domain: str,
) -> dict[str, bytes | FetchFailed]:
    """Fetch every source concurrently and wait for all of them.

    Returns a mapping of source name to either the body or the
    :class:`FetchFailed` it produced, in the order *sources* were given.
    """
    async with asyncio.TaskGroup() as group:
        tasks = {
            source.name: group.create_task(_fetch_or_error(client, source, domain))
            for source in sources
        }
    return {name: task.result() for name, task in tasks.items()}
