"""
Web-Mercator XYZ tile addressing.

Matches the slippy-map scheme used by GSI and OSM tile servers: x grows
eastward, y grows southward, tile (0, 0) is the north-west corner.
"""

import math
from dataclasses import dataclass
from typing import Sequence

from ..constants import MAX_MERCATOR_LAT, ErrorMessages
from .geo_math import GeoPoint


@dataclass(frozen=True)
class TileKey:
    """XYZ tile address; str() gives the canonical 'z/x/y' form."""

    z: int
    x: int
    y: int

    def __str__(self) -> str:
        return f"{self.z}/{self.x}/{self.y}"

    @classmethod
    def parse(cls, key: str) -> "TileKey":
        parts = key.split("/")
        if len(parts) != 3:
            raise ValueError(ErrorMessages.INVALID_TILE_KEY.format(key))
        try:
            z, x, y = (int(p) for p in parts)
        except ValueError:
            raise ValueError(ErrorMessages.INVALID_TILE_KEY.format(key)) from None
        return cls(z=z, x=x, y=y)


@dataclass(frozen=True)
class TileRange:
    """Inclusive block of tiles covering a bounding box."""

    z: int
    x_min: int
    x_max: int
    y_min: int
    y_max: int

    @property
    def count(self) -> int:
        return (self.x_max - self.x_min + 1) * (self.y_max - self.y_min + 1)

    def tiles(self) -> list[TileKey]:
        """Row-major enumeration (north row first, west to east)."""
        return [
            TileKey(self.z, x, y)
            for y in range(self.y_min, self.y_max + 1)
            for x in range(self.x_min, self.x_max + 1)
        ]


def lng_to_tile_x(lng: float, z: int) -> int:
    n = 2**z
    x = math.floor((lng + 180.0) / 360.0 * n)
    return max(0, min(n - 1, x))


def lat_to_tile_y(lat: float, z: int) -> int:
    n = 2**z
    lat = max(-MAX_MERCATOR_LAT, min(MAX_MERCATOR_LAT, lat))
    lat_rad = math.radians(lat)
    y = math.floor((1.0 - math.asinh(math.tan(lat_rad)) / math.pi) / 2.0 * n)
    return max(0, min(n - 1, y))


def tile_for_point(point: GeoPoint, z: int) -> TileKey:
    return TileKey(z=z, x=lng_to_tile_x(point.lng, z), y=lat_to_tile_y(point.lat, z))


def visible_range(bbox: Sequence[float], z: int) -> TileRange:
    """
    Tile range covering a [west, south, east, north] bounding box.

    North maps to y_min because tile rows are numbered from the top.
    """
    west, south, east, north = bbox
    return TileRange(
        z=z,
        x_min=lng_to_tile_x(west, z),
        x_max=lng_to_tile_x(east, z),
        y_min=lat_to_tile_y(north, z),
        y_max=lat_to_tile_y(south, z),
    )


def visible_tiles(bbox: Sequence[float], z: int) -> list[TileKey]:
    return visible_range(bbox, z).tiles()


def tile_bounds(key: TileKey) -> tuple[float, float, float, float]:
    """Tile extent as (west, south, east, north) in degrees."""
    n = 2**key.z

    def lat_from_y(tile_y: int) -> float:
        return math.degrees(math.atan(math.sinh(math.pi * (1.0 - 2.0 * tile_y / n))))

    west = key.x / n * 360.0 - 180.0
    east = (key.x + 1) / n * 360.0 - 180.0
    return (west, lat_from_y(key.y + 1), east, lat_from_y(key.y))
