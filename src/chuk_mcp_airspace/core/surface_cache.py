"""
Bounded cache of classified restriction-surface tiles.

Owns the tile cache and the in-flight request map, both touched only from
the event loop. Concurrent requests for one tile share a single fetch task;
the task is shielded so a cancelled caller never cancels the fetch.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable, Sequence
from typing import Any

from ..constants import KOKUAREA_TILE_ZOOM, MAX_TILES_PER_REQUEST, TILE_CACHE_MAX_ENTRIES
from .surface_classifier import enrich_feature
from .tile_math import TileKey, visible_range

logger = logging.getLogger(__name__)

SurfaceFeature = dict[str, Any]
TileFetchFn = Callable[[TileKey], Awaitable[dict[str, Any]]]


def empty_collection() -> dict[str, Any]:
    return {"type": "FeatureCollection", "features": []}


class SurfaceTileCache:
    """Resolve z=8 restriction-surface tiles with FIFO caching and de-duplication."""

    def __init__(
        self,
        fetcher: TileFetchFn,
        max_entries: int = TILE_CACHE_MAX_ENTRIES,
        max_tiles: int = MAX_TILES_PER_REQUEST,
        zoom: int = KOKUAREA_TILE_ZOOM,
    ) -> None:
        self._fetcher = fetcher
        self.max_entries = max_entries
        self.max_tiles = max_tiles
        self.zoom = zoom

        # Insertion-ordered: the first key is always the oldest entry
        self._cache: dict[TileKey, list[SurfaceFeature]] = {}
        self._inflight: dict[TileKey, asyncio.Future[list[SurfaceFeature]]] = {}
        self._fetch_count = 0

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._cache)

    def __contains__(self, key: object) -> bool:
        return key in self._cache

    def cached_keys(self) -> list[TileKey]:
        """Cached tile keys, oldest first."""
        return list(self._cache)

    @property
    def inflight_count(self) -> int:
        return len(self._inflight)

    @property
    def fetch_count(self) -> int:
        """Number of fetcher invocations issued so far."""
        return self._fetch_count

    def clear(self) -> None:
        self._cache.clear()

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    async def fetch_tiles(
        self,
        bbox: Sequence[float],
        zoom: int | None = None,
    ) -> dict[str, Any]:
        """
        Merged FeatureCollection of every tile covering a [west, south, east, north] box.

        The requested zoom is ignored: the upstream dataset only exists at
        z=8. Viewports needing more than max_tiles tiles return an empty
        collection without fetching anything.
        """
        tile_range = visible_range(bbox, self.zoom)
        if tile_range.count > self.max_tiles:
            logger.info(
                f"Viewport needs {tile_range.count} tiles (limit {self.max_tiles}); "
                f"skipping restriction-surface fetch"
            )
            return empty_collection()

        keys = tile_range.tiles()
        results = await asyncio.gather(*(self.resolve_tile(k) for k in keys))

        features: list[SurfaceFeature] = []
        for tile_features in results:
            features.extend(tile_features)
        return {"type": "FeatureCollection", "features": features}

    async def resolve_tile(self, key: TileKey) -> list[SurfaceFeature]:
        """Classified features of one tile; an empty list if it cannot be loaded."""
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        task = self._inflight.get(key)
        if task is None:
            task = asyncio.ensure_future(self._load(key))
            self._inflight[key] = task
        return await asyncio.shield(task)

    async def _load(self, key: TileKey) -> list[SurfaceFeature]:
        self._fetch_count += 1
        try:
            try:
                payload = await self._fetcher(key)
            except ValueError as e:
                # Malformed payload: cached as empty
                logger.warning(f"Restriction-surface tile {key} is malformed: {e}")
                features: list[SurfaceFeature] = []
            else:
                features = self._classify(key, payload)
            self._store(key, features)
            return features
        except Exception as e:
            # Not cached, so the tile is retried on the next request
            logger.warning(f"Restriction-surface tile {key} failed: {e}")
            return []
        finally:
            self._inflight.pop(key, None)

    def _classify(self, key: TileKey, payload: Any) -> list[SurfaceFeature]:
        raw = payload.get("features") if isinstance(payload, dict) else None
        if not isinstance(raw, list):
            logger.warning(f"Restriction-surface tile {key} has no feature list")
            return []

        features = []
        for feature in raw:
            if not isinstance(feature, dict):
                continue
            try:
                features.append(enrich_feature(feature))
            except Exception as e:
                logger.warning(f"Skipping unclassifiable feature in tile {key}: {e}")
        return features

    def _store(self, key: TileKey, features: list[SurfaceFeature]) -> None:
        if key not in self._cache and len(self._cache) >= self.max_entries:
            oldest = next(iter(self._cache))
            del self._cache[oldest]
            logger.debug(f"Evicted restriction-surface tile {oldest}")
        self._cache[key] = features
        logger.debug(f"Cached restriction-surface tile {key} ({len(features)} features)")
