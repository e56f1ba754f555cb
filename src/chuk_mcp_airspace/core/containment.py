"""
Exact point containment against restriction-surface polygons.

Ray casting with hole support; points are resolved against the single z=8
tile that covers them, path legs against every tile under their extent.
Queries never raise: missing coverage, failed tiles and malformed geometry
all read as "not inside".
"""

import asyncio
import logging
from collections.abc import Hashable, Iterable, Sequence
from dataclasses import dataclass
from typing import Any

from ..constants import SURFACE_STYLES, SurfaceProperty
from .geo_math import GeoPoint
from .intersection import crosses, leg_bbox, leg_line, outline
from .surface_cache import SurfaceFeature, SurfaceTileCache
from .tile_math import TileKey, tile_for_point, visible_range

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SurfaceCheck:
    """Result of testing one point against restriction surfaces."""

    in_surface: bool
    kind: str | None = None
    label: str | None = None
    label_en: str | None = None
    tile: str | None = None


NOT_IN_SURFACE = SurfaceCheck(in_surface=False)


def point_in_ring(lng: float, lat: float, ring: Sequence[Sequence[float]]) -> bool:
    """Even-odd ray casting against one linear ring of [lng, lat] positions."""
    inside = False
    n = len(ring)
    j = n - 1
    for i in range(n):
        xi, yi = ring[i][0], ring[i][1]
        xj, yj = ring[j][0], ring[j][1]
        if (yi > lat) != (yj > lat):
            x_cross = (xj - xi) * (lat - yi) / (yj - yi) + xi
            if lng < x_cross:
                inside = not inside
        j = i
    return inside


def _point_in_polygon_rings(lng: float, lat: float, rings: Sequence[Any]) -> bool:
    if not rings or not point_in_ring(lng, lat, rings[0]):
        return False
    return not any(point_in_ring(lng, lat, hole) for hole in rings[1:])


def point_in_polygon(point: GeoPoint, geometry: dict[str, Any] | None) -> bool:
    """
    Test a point against a Polygon or MultiPolygon geometry.

    Inside a hole counts as outside. Any other geometry type, or
    coordinates that cannot be read, give False.
    """
    if not isinstance(geometry, dict):
        return False
    geom_type = geometry.get("type")
    coords = geometry.get("coordinates")
    try:
        if geom_type == "Polygon":
            return _point_in_polygon_rings(point.lng, point.lat, coords)
        if geom_type == "MultiPolygon":
            return any(_point_in_polygon_rings(point.lng, point.lat, poly) for poly in coords)
    except (TypeError, IndexError) as e:
        logger.debug(f"Ignoring malformed {geom_type} geometry: {e}")
    return False


def _surface_hit(feature: SurfaceFeature, key: TileKey) -> SurfaceCheck:
    props = feature.get("properties") or {}
    kind = props.get(SurfaceProperty.KIND)
    style = SURFACE_STYLES.get(kind, {})
    return SurfaceCheck(
        in_surface=True,
        kind=kind,
        label=props.get(SurfaceProperty.LABEL),
        label_en=style.get("label_en"),
        tile=str(key),
    )


def _match(point: GeoPoint, features: Iterable[SurfaceFeature], key: TileKey) -> SurfaceCheck:
    for feature in features:
        if point_in_polygon(point, feature.get("geometry")):
            return _surface_hit(feature, key)
    return NOT_IN_SURFACE


class ContainmentEngine:
    """Single and batched surface containment queries backed by the tile cache."""

    def __init__(self, cache: SurfaceTileCache) -> None:
        self.cache = cache

    async def check_point(self, point: GeoPoint) -> SurfaceCheck:
        key = tile_for_point(point, self.cache.zoom)
        features = await self.cache.resolve_tile(key)
        return _match(point, features, key)

    async def check_points_batch(
        self,
        points: Sequence[tuple[Hashable, GeoPoint]],
    ) -> dict[Hashable, SurfaceCheck]:
        """
        Check many points, resolving each distinct covering tile exactly once.

        Args:
            points: (id, point) pairs; ids key the returned mapping

        Returns:
            Mapping of id to SurfaceCheck, in input order
        """
        point_tiles = [(pid, pt, tile_for_point(pt, self.cache.zoom)) for pid, pt in points]
        keys = list(dict.fromkeys(key for _, _, key in point_tiles))

        tile_features = await asyncio.gather(*(self.cache.resolve_tile(k) for k in keys))
        by_tile = dict(zip(keys, tile_features))

        return {pid: _match(pt, by_tile[key], key) for pid, pt, key in point_tiles}

    async def check_legs(self, legs: Sequence[tuple[GeoPoint, GeoPoint]]) -> list[SurfaceCheck]:
        """
        First restriction surface each straight leg touches.

        Every tile under a leg's bounding box is consulted, and tiles shared
        between legs are resolved once. A leg whose box needs more than
        max_tiles tiles is not checked and reads as clear.
        """
        leg_tiles: list[list[TileKey]] = []
        for start, end in legs:
            tile_range = visible_range(leg_bbox(start, end), self.cache.zoom)
            if tile_range.count > self.cache.max_tiles:
                logger.warning(
                    f"Leg {start.to_lonlat()} -> {end.to_lonlat()} spans {tile_range.count} "
                    f"tiles (limit {self.cache.max_tiles}); skipping surface check"
                )
                leg_tiles.append([])
            else:
                leg_tiles.append(tile_range.tiles())

        keys = list(dict.fromkeys(key for tiles in leg_tiles for key in tiles))
        tile_features = await asyncio.gather(*(self.cache.resolve_tile(k) for k in keys))
        by_tile = dict(zip(keys, tile_features))

        # Outlines memoised per call; features are shared by legs on one tile
        shapes: dict[int, Any] = {}
        results = []
        for (start, end), tiles in zip(legs, leg_tiles):
            line = leg_line(start, end)
            check = NOT_IN_SURFACE
            for key in tiles:
                check = _match_leg(line, by_tile[key], key, shapes)
                if check.in_surface:
                    break
            results.append(check)
        return results


def _match_leg(
    line: Any,
    features: Iterable[SurfaceFeature],
    key: TileKey,
    shapes: dict[int, Any],
) -> SurfaceCheck:
    for feature in features:
        fid = id(feature)
        if fid not in shapes:
            shapes[fid] = outline(feature.get("geometry"))
        if crosses(line, shapes[fid]):
            return _surface_hit(feature, key)
    return NOT_IN_SURFACE
