"""
Spherical geometry primitives.

All functions are pure and synchronous. Coordinates follow GeoJSON order
([lng, lat]) inside geometries; GeoPoint carries (lat, lng) explicitly.
"""

import math
from dataclasses import dataclass
from typing import Any

from ..constants import (
    DEFAULT_CIRCLE_SEGMENTS,
    EARTH_RADIUS_KM,
    LEGACY_CIRCLE_SEGMENTS,
    LEGACY_KM_PER_DEGREE,
    ErrorMessages,
)

BBox = tuple[float, float, float, float]


@dataclass(frozen=True)
class GeoPoint:
    """WGS84 coordinate in degrees."""

    lat: float
    lng: float

    def __post_init__(self) -> None:
        if not -90.0 <= self.lat <= 90.0:
            raise ValueError(ErrorMessages.INVALID_LATITUDE.format(self.lat))
        if not -180.0 <= self.lng <= 180.0:
            raise ValueError(ErrorMessages.INVALID_LONGITUDE.format(self.lng))

    def to_lonlat(self) -> list[float]:
        return [self.lng, self.lat]


# ---------------------------------------------------------------------------
# Distance & direct geodesic problem
# ---------------------------------------------------------------------------


def distance_km(a: GeoPoint, b: GeoPoint) -> float:
    """Great-circle distance between two points (haversine)."""
    d_lat = math.radians(b.lat - a.lat)
    d_lng = math.radians(b.lng - a.lng)
    h = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(a.lat)) * math.cos(math.radians(b.lat)) * math.sin(d_lng / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))
    return EARTH_RADIUS_KM * c


def destination_point(origin: GeoPoint, dist_km: float, bearing_deg: float) -> GeoPoint:
    """
    Point reached by travelling dist_km from origin along an initial bearing.

    Args:
        origin: Start point
        dist_km: Distance along the great circle in kilometres
        bearing_deg: Initial bearing in degrees (0 = north, 90 = east)

    Returns:
        Destination point, longitude normalised to [-180, 180]
    """
    delta = dist_km / EARTH_RADIUS_KM
    theta = math.radians(bearing_deg)
    lat1 = math.radians(origin.lat)
    lng1 = math.radians(origin.lng)

    lat2 = math.asin(
        math.sin(lat1) * math.cos(delta) + math.cos(lat1) * math.sin(delta) * math.cos(theta)
    )
    lng2 = lng1 + math.atan2(
        math.sin(theta) * math.sin(delta) * math.cos(lat1),
        math.cos(delta) - math.sin(lat1) * math.sin(lat2),
    )

    lng_deg = (math.degrees(lng2) + 540.0) % 360.0 - 180.0
    lat_deg = max(-90.0, min(90.0, math.degrees(lat2)))
    return GeoPoint(lat=lat_deg, lng=lng_deg)


# ---------------------------------------------------------------------------
# Circle approximations
# ---------------------------------------------------------------------------


def circle_polygon(
    center: GeoPoint,
    radius_km: float,
    segments: int = DEFAULT_CIRCLE_SEGMENTS,
) -> dict[str, Any]:
    """
    Approximate a geodesic circle as a closed GeoJSON Polygon.

    Vertices are placed at segments + 1 evenly spaced bearings, the last one
    repeating bearing 0 to close the ring.
    """
    if radius_km <= 0:
        raise ValueError(ErrorMessages.INVALID_RADIUS.format(radius_km))
    if segments < 3:
        raise ValueError(ErrorMessages.INVALID_SEGMENTS.format(segments))

    ring = []
    for i in range(segments + 1):
        bearing = (i % segments) / segments * 360.0
        ring.append(destination_point(center, radius_km, bearing).to_lonlat())
    return {"type": "Polygon", "coordinates": [ring]}


def legacy_circle_polygon(
    center: GeoPoint,
    radius_km: float,
    segments: int = LEGACY_CIRCLE_SEGMENTS,
) -> dict[str, Any]:
    """
    LEGACY: planar degree-offset circle kept for back-compatible GeoJSON.

    Offsets are radius / 111.32 km per degree, with the longitude offset
    scaled by cos(lat). Numerically different from circle_polygon(); do not
    use it for containment.
    """
    if radius_km <= 0:
        raise ValueError(ErrorMessages.INVALID_RADIUS.format(radius_km))
    if segments < 3:
        raise ValueError(ErrorMessages.INVALID_SEGMENTS.format(segments))

    cos_lat = math.cos(math.radians(center.lat))
    ring = []
    for i in range(segments + 1):
        angle = (i % segments) / segments * 2 * math.pi
        lat_offset = (radius_km / LEGACY_KM_PER_DEGREE) * math.cos(angle)
        lng_offset = (radius_km / (LEGACY_KM_PER_DEGREE * cos_lat)) * math.sin(angle)
        ring.append([center.lng + lng_offset, center.lat + lat_offset])
    return {"type": "Polygon", "coordinates": [ring]}


# ---------------------------------------------------------------------------
# Bounding boxes
# ---------------------------------------------------------------------------


def bounding_box(geometry: dict[str, Any]) -> BBox:
    """
    Compute (min_lng, min_lat, max_lng, max_lat) for a GeoJSON geometry.

    Raises:
        ValueError: if the geometry type is not supported
    """
    bounds = [math.inf, math.inf, -math.inf, -math.inf]

    def visit(position: list[float]) -> None:
        lng, lat = position[0], position[1]
        bounds[0] = min(bounds[0], lng)
        bounds[1] = min(bounds[1], lat)
        bounds[2] = max(bounds[2], lng)
        bounds[3] = max(bounds[3], lat)

    geom_type = geometry.get("type")
    coords = geometry.get("coordinates")

    if geom_type == "Point":
        visit(coords)
    elif geom_type in ("MultiPoint", "LineString"):
        for position in coords:
            visit(position)
    elif geom_type in ("MultiLineString", "Polygon"):
        for line in coords:
            for position in line:
                visit(position)
    elif geom_type == "MultiPolygon":
        for polygon in coords:
            for ring in polygon:
                for position in ring:
                    visit(position)
    elif geom_type == "GeometryCollection":
        for member in geometry.get("geometries", []):
            m = bounding_box(member)
            bounds[0] = min(bounds[0], m[0])
            bounds[1] = min(bounds[1], m[1])
            bounds[2] = max(bounds[2], m[2])
            bounds[3] = max(bounds[3], m[3])
    else:
        raise ValueError(ErrorMessages.UNSUPPORTED_GEOMETRY.format(geom_type))

    return (bounds[0], bounds[1], bounds[2], bounds[3])


def bbox_intersects(a: BBox, b: BBox) -> bool:
    """Axis-aligned overlap test; boxes that only touch count as intersecting."""
    return not (a[2] < b[0] or a[0] > b[2] or a[3] < b[1] or a[1] > b[3])
