"""
Zone catalog: fixed restricted-airspace facilities modelled as circles.

The catalog is built once from compiled-in data, validated at construction
and never mutated afterwards. Containment is a radius test against each
facility centre; GeoJSON views are generated on demand.
"""

import logging
from dataclasses import dataclass
from typing import Any, Iterable

from ..constants import (
    DEFAULT_NEARBY_KM,
    FACILITY_TYPES,
    PERIMETER_ID_SUFFIX,
    PERIMETER_NAME_EN_SUFFIX,
    PERIMETER_NAME_SUFFIX,
    YELLOW_ZONE_BUFFER_KM,
    ZONE_COLORS,
    ErrorMessages,
    ZoneColor,
    ZoneType,
)
from .geo_math import (
    BBox,
    GeoPoint,
    bbox_intersects,
    bounding_box,
    circle_polygon,
    distance_km,
    legacy_circle_polygon,
)
from .intersection import crosses, leg_bbox, leg_line, outline

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ZoneFacility:
    """A fixed facility whose airspace is restricted within radius_km."""

    id: str
    name: str
    facility_type: str
    zone_color: str
    center: GeoPoint
    radius_km: float
    name_en: str | None = None
    category: str | None = None
    source: str | None = None
    operational_status: str | None = None
    reactor_count: int | None = None
    capacity: str | None = None
    operator: str | None = None
    address: str | None = None
    description: str | None = None
    is_perimeter: bool = False

    @property
    def zone_type(self) -> str:
        return ZoneType.RED_ZONE if self.zone_color == ZoneColor.RED else ZoneType.YELLOW_ZONE

    @property
    def type_label(self) -> str:
        return FACILITY_TYPES.get(self.facility_type, self.facility_type)

    def contains(self, point: GeoPoint) -> bool:
        return distance_km(point, self.center) <= self.radius_km

    def polygon(self) -> dict[str, Any]:
        return circle_polygon(self.center, self.radius_km)

    def to_dict(self) -> dict[str, Any]:
        """Flat dict form used by manager results and tool responses."""
        return {
            "id": self.id,
            "name": self.name,
            "name_en": self.name_en,
            "facility_type": self.facility_type,
            "type_label": self.type_label,
            "zone_color": self.zone_color,
            "zone_type": self.zone_type,
            "lat": self.center.lat,
            "lng": self.center.lng,
            "radius_km": self.radius_km,
            "category": self.category,
            "source": self.source,
            "operational_status": self.operational_status,
            "reactor_count": self.reactor_count,
            "capacity": self.capacity,
            "operator": self.operator,
            "address": self.address,
            "description": self.description,
            "is_perimeter": self.is_perimeter,
        }

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "ZoneFacility":
        """Build a facility from a catalog record, validating every field."""
        facility_id = record.get("id", "<missing id>")
        try:
            center = GeoPoint(lat=float(record["lat"]), lng=float(record["lng"]))
        except KeyError as e:
            raise ValueError(
                ErrorMessages.INVALID_FACILITY.format(facility_id, f"missing {e}")
            ) from None
        except ValueError as e:
            raise ValueError(ErrorMessages.INVALID_FACILITY.format(facility_id, e)) from e

        radius = float(record.get("radius_km", 0))
        if radius <= 0:
            raise ValueError(
                ErrorMessages.INVALID_FACILITY.format(
                    facility_id, ErrorMessages.INVALID_RADIUS.format(radius)
                )
            )

        zone_color = record.get("zone_color")
        if zone_color not in ZONE_COLORS:
            raise ValueError(
                ErrorMessages.INVALID_FACILITY.format(
                    facility_id,
                    ErrorMessages.INVALID_ZONE_COLOR.format(zone_color, ", ".join(ZONE_COLORS)),
                )
            )

        facility_type = record.get("facility_type")
        if facility_type not in FACILITY_TYPES:
            raise ValueError(
                ErrorMessages.INVALID_FACILITY.format(
                    facility_id,
                    ErrorMessages.INVALID_FACILITY_TYPE.format(
                        facility_type, ", ".join(FACILITY_TYPES)
                    ),
                )
            )

        return cls(
            id=facility_id,
            name=record["name"],
            name_en=record.get("name_en"),
            facility_type=facility_type,
            zone_color=zone_color,
            center=center,
            radius_km=radius,
            category=record.get("category", FACILITY_TYPES[facility_type]),
            source=record.get("source"),
            operational_status=record.get("operational_status"),
            reactor_count=record.get("reactor_count"),
            capacity=record.get("capacity"),
            operator=record.get("operator"),
            address=record.get("address"),
            description=record.get("description"),
        )


@dataclass(frozen=True)
class ZoneMatch:
    """Outcome of a positive zone containment query."""

    facility: ZoneFacility
    zone_color: str
    distance_km: float


class ZoneCatalog:
    """Immutable, ordered collection of restricted facilities."""

    def __init__(self, records: Iterable[dict[str, Any]]) -> None:
        facilities: list[ZoneFacility] = []
        seen: set[str] = set()
        for record in records:
            facility = ZoneFacility.from_record(record)
            if facility.id in seen:
                raise ValueError(ErrorMessages.DUPLICATE_FACILITY_ID.format(facility.id))
            seen.add(facility.id)
            facilities.append(facility)

        self._facilities: tuple[ZoneFacility, ...] = tuple(facilities)
        self._perimeters: tuple[ZoneFacility, ...] = tuple(
            _perimeter_of(f) for f in self._facilities if f.zone_color == ZoneColor.RED
        )
        # Shapely outlines and bounds, built on first leg query
        self._outlines: dict[str, Any] = {}
        logger.debug(
            f"Loaded zone catalog: {len(self._facilities)} facilities, "
            f"{len(self._perimeters)} perimeter rings"
        )

    def __len__(self) -> int:
        return len(self._facilities)

    def __iter__(self):
        return iter(self._facilities)

    @property
    def facilities(self) -> tuple[ZoneFacility, ...]:
        return self._facilities

    def get(self, facility_id: str) -> ZoneFacility | None:
        for facility in self._facilities:
            if facility.id == facility_id:
                return facility
        return None

    # ------------------------------------------------------------------
    # Filters
    # ------------------------------------------------------------------

    def by_zone(self, color: str) -> list[ZoneFacility]:
        return [f for f in self._facilities if f.zone_color == color]

    def by_type(self, facility_type: str) -> list[ZoneFacility]:
        return [f for f in self._facilities if f.facility_type == facility_type]

    def by_category(self, category: str) -> list[ZoneFacility]:
        return [f for f in self._facilities if f.category == category]

    def categories(self) -> dict[str, int]:
        """Facility count per facility type, in FACILITY_TYPES order."""
        counts = {t: 0 for t in FACILITY_TYPES}
        for facility in self._facilities:
            counts[facility.facility_type] += 1
        return counts

    def perimeter_facilities(self) -> list[ZoneFacility]:
        """Yellow buffer rings generated around every red-zone facility."""
        return list(self._perimeters)

    # ------------------------------------------------------------------
    # Spatial queries
    # ------------------------------------------------------------------

    def containing(self, point: GeoPoint, include_perimeter: bool = False) -> ZoneMatch | None:
        """
        First facility, in catalog order, whose circle contains the point.

        Overlapping circles resolve to the earlier catalog entry, not the
        nearest centre. Perimeter rings are scanned after the real catalog
        when include_perimeter is set.
        """
        candidates: Iterable[ZoneFacility] = self._facilities
        if include_perimeter:
            candidates = (*self._facilities, *self._perimeters)

        for facility in candidates:
            dist = distance_km(point, facility.center)
            if dist <= facility.radius_km:
                return ZoneMatch(facility=facility, zone_color=facility.zone_color, distance_km=dist)
        return None

    def crossing(
        self,
        start: GeoPoint,
        end: GeoPoint,
        include_perimeter: bool = False,
    ) -> list[ZoneFacility]:
        """
        Every facility whose circle the straight leg start-end enters.

        A leg counts when either endpoint lies inside the circle or the
        segment touches its polygon outline, so a leg passing clean
        through a zone is reported even though both endpoints are clear.
        Results keep catalog order, perimeter rings last.
        """
        candidates: Iterable[ZoneFacility] = self._facilities
        if include_perimeter:
            candidates = (*self._facilities, *self._perimeters)

        line = leg_line(start, end)
        extent = tuple(leg_bbox(start, end))
        hits = []
        for facility in candidates:
            if facility.contains(start) or facility.contains(end):
                hits.append(facility)
                continue
            shape_, bounds = self._outline(facility)
            if bbox_intersects(bounds, extent) and crosses(line, shape_):
                hits.append(facility)
        return hits

    def _outline(self, facility: ZoneFacility) -> tuple[Any, BBox]:
        cached = self._outlines.get(facility.id)
        if cached is None:
            polygon = facility.polygon()
            cached = (outline(polygon), bounding_box(polygon))
            self._outlines[facility.id] = cached
        return cached

    def nearby(
        self,
        point: GeoPoint,
        max_distance_km: float = DEFAULT_NEARBY_KM,
    ) -> list[tuple[ZoneFacility, float]]:
        """Facilities whose centre lies within max_distance_km, nearest first."""
        if max_distance_km <= 0:
            raise ValueError(ErrorMessages.INVALID_DISTANCE.format(max_distance_km))

        hits = []
        for facility in self._facilities:
            dist = distance_km(point, facility.center)
            if dist <= max_distance_km:
                hits.append((facility, dist))
        hits.sort(key=lambda item: item[1])
        return hits

    def in_bbox(self, bbox: BBox) -> list[ZoneFacility]:
        """Facilities whose circle bounds intersect a [west, south, east, north] box."""
        return [f for f in self._facilities if bbox_intersects(bounding_box(f.polygon()), bbox)]

    # ------------------------------------------------------------------
    # GeoJSON views
    # ------------------------------------------------------------------

    def red_zone_geojson(self) -> dict[str, Any]:
        return _collection(self.by_zone(ZoneColor.RED))

    def yellow_zone_geojson(self) -> dict[str, Any]:
        """Yellow-zone facilities followed by the perimeter rings of red zones."""
        return _collection([*self.by_zone(ZoneColor.YELLOW), *self._perimeters])

    def all_zones_geojson(self) -> dict[str, Any]:
        return _collection(self._facilities)

    def category_geojson(self, facility_type: str) -> dict[str, Any]:
        if facility_type not in FACILITY_TYPES:
            raise ValueError(
                ErrorMessages.INVALID_FACILITY_TYPE.format(facility_type, ", ".join(FACILITY_TYPES))
            )
        return _collection(self.by_type(facility_type))

    # ------------------------------------------------------------------
    # Legacy shim
    # ------------------------------------------------------------------

    def to_legacy_format(self) -> list[dict[str, Any]]:
        """LEGACY: flat records with the radius in metres and zone colour as 'type'."""
        return [
            {
                "name": f.name,
                "lat": f.center.lat,
                "lng": f.center.lng,
                "radius": f.radius_km * 1000,
                "type": f.zone_color,
                "category": f.facility_type,
            }
            for f in self._facilities
        ]

    def legacy_zones_geojson(self) -> dict[str, Any]:
        """LEGACY: all facilities drawn with the planar circle approximation."""
        return {
            "type": "FeatureCollection",
            "features": [
                {
                    "type": "Feature",
                    "properties": _feature_properties(f),
                    "geometry": legacy_circle_polygon(f.center, f.radius_km),
                }
                for f in self._facilities
            ],
        }


def _perimeter_of(facility: ZoneFacility) -> ZoneFacility:
    name_en = facility.name_en + PERIMETER_NAME_EN_SUFFIX if facility.name_en else "Perimeter"
    return ZoneFacility(
        id=facility.id + PERIMETER_ID_SUFFIX,
        name=facility.name + PERIMETER_NAME_SUFFIX,
        name_en=name_en,
        facility_type=facility.facility_type,
        zone_color=ZoneColor.YELLOW,
        center=facility.center,
        radius_km=facility.radius_km + YELLOW_ZONE_BUFFER_KM,
        category=facility.category,
        source=facility.source,
        is_perimeter=True,
    )


def _feature_properties(facility: ZoneFacility) -> dict[str, Any]:
    props: dict[str, Any] = {
        "id": facility.id,
        "name": facility.name,
        "name_en": facility.name_en,
        "type": facility.facility_type,
        "radius_km": facility.radius_km,
        "zone": facility.zone_color,
        "zone_type": facility.zone_type,
        "category": facility.category,
        "source": facility.source,
        "coordinates": facility.center.to_lonlat(),
    }
    optional = {
        "operational_status": facility.operational_status,
        "reactor_count": facility.reactor_count,
        "capacity": facility.capacity,
        "operator": facility.operator,
        "description": facility.description,
    }
    props.update({k: v for k, v in optional.items() if v is not None})
    if facility.is_perimeter:
        props["is_perimeter"] = True
    return props


def _collection(facilities: Iterable[ZoneFacility]) -> dict[str, Any]:
    return {
        "type": "FeatureCollection",
        "features": [
            {
                "type": "Feature",
                "properties": _feature_properties(f),
                "geometry": f.polygon(),
            }
            for f in facilities
        ],
    }


def load_default_catalog() -> ZoneCatalog:
    """Catalog built from the compiled-in facility list."""
    from ..facilities import NO_FLY_FACILITIES

    return ZoneCatalog(NO_FLY_FACILITIES)
