"""
Path-leg intersection against GeoJSON polygons.

A leg is the straight [lng, lat] segment between two consecutive waypoints,
treated in planar degree space like the ray-casting point test. Touching
a polygon boundary counts as crossing it.
"""

import logging
from typing import Any

from shapely.errors import GEOSException
from shapely.geometry import LineString, Point, shape
from shapely.geometry.base import BaseGeometry

from .geo_math import GeoPoint

logger = logging.getLogger(__name__)

_POLYGONAL = ("Polygon", "MultiPolygon")


def leg_line(start: GeoPoint, end: GeoPoint) -> BaseGeometry:
    """Segment between two waypoints; a zero-length leg is its start point."""
    if start == end:
        return Point(start.to_lonlat())
    return LineString([start.to_lonlat(), end.to_lonlat()])


def leg_bbox(start: GeoPoint, end: GeoPoint) -> list[float]:
    """[west, south, east, north] extent of a leg."""
    return [
        min(start.lng, end.lng),
        min(start.lat, end.lat),
        max(start.lng, end.lng),
        max(start.lat, end.lat),
    ]


def outline(geometry: dict[str, Any] | None) -> BaseGeometry | None:
    """
    Shapely geometry for a GeoJSON Polygon or MultiPolygon.

    Other geometry types and coordinates shapely cannot read give None.
    """
    if not isinstance(geometry, dict) or geometry.get("type") not in _POLYGONAL:
        return None
    try:
        return shape(geometry)
    except (GEOSException, TypeError, ValueError, IndexError, KeyError, AttributeError) as e:
        logger.debug(f"Ignoring malformed {geometry.get('type')} geometry: {e}")
        return None


def crosses(line: BaseGeometry, geometry: BaseGeometry | None) -> bool:
    """Whether a leg touches a polygon; unreadable polygons never match."""
    if geometry is None:
        return False
    try:
        return bool(geometry.intersects(line))
    except GEOSException as e:
        logger.debug(f"Intersection test failed: {e}")
        return False
