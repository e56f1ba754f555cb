"""
HTTP collaborator for restriction-surface tiles.

Fetches raw GeoJSON FeatureCollections from the GSI kokuarea XYZ endpoint,
or from a proxy exposing the same tiles as ?z=&x=&y= query parameters.
Connection errors and timeouts are retried with exponential backoff.
"""

import asyncio
import logging
import os
from typing import Any

import aiohttp
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from ..constants import (
    KOKUAREA_TILE_URL,
    RETRY_ATTEMPTS,
    RETRY_WAIT_MAX,
    RETRY_WAIT_MIN,
    TILE_FETCH_TIMEOUT_S,
    EnvVar,
    ErrorMessages,
)
from .tile_math import TileKey

logger = logging.getLogger(__name__)

_retry_network = retry(
    stop=stop_after_attempt(RETRY_ATTEMPTS),
    wait=wait_exponential(multiplier=1, min=RETRY_WAIT_MIN, max=RETRY_WAIT_MAX),
    retry=retry_if_exception_type((aiohttp.ClientConnectionError, asyncio.TimeoutError)),
    reraise=True,
)


def build_tile_url(key: TileKey, url_template: str = KOKUAREA_TILE_URL) -> str:
    """Fill a {z}/{x}/{y} URL template for a tile."""
    return url_template.format(z=key.z, x=key.x, y=key.y)


def build_proxy_url(key: TileKey, endpoint: str) -> str:
    """Query-string form used by the tile proxy: <endpoint>?z=&x=&y=."""
    return f"{endpoint}?z={key.z}&x={key.x}&y={key.y}"


class TileFetcher:
    """
    Async callable returning the raw FeatureCollection for a tile.

    Args:
        url_template: {z}/{x}/{y} template; defaults to AIRSPACE_TILE_URL or GSI
        proxy_endpoint: If set, tiles are requested as <endpoint>?z=&x=&y=
        timeout_s: Total request timeout; defaults to AIRSPACE_TILE_TIMEOUT or 15 s
    """

    def __init__(
        self,
        url_template: str | None = None,
        proxy_endpoint: str | None = None,
        timeout_s: float | None = None,
    ) -> None:
        self.url_template = url_template or os.environ.get(EnvVar.TILE_URL) or KOKUAREA_TILE_URL
        self.proxy_endpoint = proxy_endpoint
        if timeout_s is None:
            timeout_s = float(os.environ.get(EnvVar.TILE_TIMEOUT, TILE_FETCH_TIMEOUT_S))
        self.timeout = aiohttp.ClientTimeout(total=timeout_s)

    def url_for(self, key: TileKey) -> str:
        if self.proxy_endpoint:
            return build_proxy_url(key, self.proxy_endpoint)
        return build_tile_url(key, self.url_template)

    async def __call__(self, key: TileKey) -> dict[str, Any]:
        return await self.fetch(key)

    @_retry_network
    async def fetch(self, key: TileKey) -> dict[str, Any]:
        """
        Download one tile.

        A 404 means the tile holds no surfaces and yields an empty collection.

        Raises:
            aiohttp.ClientResponseError: on any other HTTP error status
            ValueError: if the payload is not a FeatureCollection-like object
        """
        url = self.url_for(key)
        logger.debug(f"Fetching restriction-surface tile {key} from {url}")

        async with aiohttp.ClientSession(timeout=self.timeout) as session:
            async with session.get(url, headers={"Accept": "application/json"}) as resp:
                if resp.status == 404:
                    return {"type": "FeatureCollection", "features": []}
                resp.raise_for_status()
                payload = await resp.json(content_type=None)

        if not isinstance(payload, dict) or not isinstance(payload.get("features"), list):
            raise ValueError(ErrorMessages.MALFORMED_TILE.format(key))
        return payload
