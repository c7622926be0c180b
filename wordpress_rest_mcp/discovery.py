"""Time-boxed caching of the content type and taxonomy discovery endpoints."""

from __future__ import annotations

import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

from .config import DISCOVERY_CACHE_TTL, logger


@dataclass(frozen=True)
class CacheEntry:
    payload: Any
    fetched_at: float

    def is_fresh(self, now: float, ttl: float) -> bool:
        return now - self.fetched_at < ttl


class DiscoveryCache:
    """Memoize one discovery call for ``ttl`` seconds.

    A failed fetch propagates to the caller and leaves any previous entry in
    place, so a later non-forced call can still be served from it.
    """

    def __init__(
        self,
        fetch: Callable[[], Awaitable[Any]],
        ttl: float = DISCOVERY_CACHE_TTL,
        clock: Callable[[], float] = time.monotonic,
        label: str = "discovery",
    ):
        self._fetch = fetch
        self._clock = clock
        self.ttl = ttl
        self.label = label
        self.entry: CacheEntry | None = None

    async def get(self, force_refresh: bool = False) -> Any:
        if (
            not force_refresh
            and self.entry is not None
            and self.entry.is_fresh(self._clock(), self.ttl)
        ):
            logger.debug("Using cached %s", self.label)
            return self.entry.payload

        logger.debug("Fetching %s from API", self.label)
        try:
            payload = await self._fetch()
        except Exception as e:
            logger.error("Error fetching %s: %s", self.label, e)
            raise
        self.entry = CacheEntry(payload, self._clock())
        return payload


class DiscoveryService:
    """Owns the two independent discovery caches for one WordPress site."""

    def __init__(
        self,
        client,
        ttl: float = DISCOVERY_CACHE_TTL,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.client = client
        self.content_types = DiscoveryCache(
            lambda: client.request("GET", "wp/v2/types"),
            ttl=ttl,
            clock=clock,
            label="content types",
        )
        self.taxonomies = DiscoveryCache(
            lambda: client.request("GET", "wp/v2/taxonomies"),
            ttl=ttl,
            clock=clock,
            label="taxonomies",
        )

    async def get_content_types(self, force_refresh: bool = False) -> dict[str, Any]:
        """Return ``wp/v2/types`` keyed by content type slug."""
        return await self.content_types.get(force_refresh)

    async def get_taxonomies(self, force_refresh: bool = False) -> dict[str, Any]:
        """Return ``wp/v2/taxonomies`` keyed by taxonomy slug."""
        return await self.taxonomies.get(force_refresh)
