"""
Airport catalog: airports, air bases and heliports modelled as circles.

Built once from compiled-in data and never mutated. Heliports are held
apart from airports: containment, crossing and listing only consider them
when asked to.
"""

import logging
from dataclasses import dataclass
from typing import Any, Iterable

from ..constants import (
    AIRPORT_TYPES,
    AIRPORT_ZONE_TYPE,
    HELIPORT_ZONE_TYPE,
    NO_FLY_LAW_RADIUS_KM,
    AirportType,
    ErrorMessages,
)
from .geo_math import GeoPoint, bbox_intersects, bounding_box, circle_polygon, distance_km
from .intersection import crosses, leg_bbox, leg_line, outline

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Airport:
    """An aerodrome whose surrounding airspace is restricted within radius_km."""

    id: str
    name: str
    name_en: str
    airport_type: str
    center: GeoPoint
    radius_km: float

    @property
    def is_heliport(self) -> bool:
        return self.airport_type == AirportType.HELIPORT

    @property
    def type_label(self) -> str:
        return AIRPORT_TYPES[self.airport_type]

    @property
    def zone_type(self) -> str:
        return HELIPORT_ZONE_TYPE if self.is_heliport else AIRPORT_ZONE_TYPE

    @property
    def no_fly_law(self) -> bool:
        return not self.is_heliport and self.radius_km >= NO_FLY_LAW_RADIUS_KM

    def contains(self, point: GeoPoint) -> bool:
        return distance_km(point, self.center) <= self.radius_km

    def polygon(self) -> dict[str, Any]:
        return circle_polygon(self.center, self.radius_km)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "name_en": self.name_en,
            "airport_type": self.airport_type,
            "type_label": self.type_label,
            "zone_type": self.zone_type,
            "lat": self.center.lat,
            "lng": self.center.lng,
            "radius_km": self.radius_km,
            "no_fly_law": self.no_fly_law,
        }

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "Airport":
        airport_id = record.get("id", "<missing id>")
        try:
            center = GeoPoint(lat=float(record["lat"]), lng=float(record["lng"]))
            radius = float(record["radius_km"])
            name = record["name"]
        except KeyError as e:
            raise ValueError(ErrorMessages.INVALID_AIRPORT.format(airport_id, f"missing {e}")) from None
        except ValueError as e:
            raise ValueError(ErrorMessages.INVALID_AIRPORT.format(airport_id, e)) from e

        if radius <= 0:
            raise ValueError(
                ErrorMessages.INVALID_AIRPORT.format(
                    airport_id, ErrorMessages.INVALID_RADIUS.format(radius)
                )
            )
        airport_type = record.get("airport_type")
        if airport_type not in AIRPORT_TYPES:
            raise ValueError(
                ErrorMessages.INVALID_AIRPORT.format(
                    airport_id,
                    ErrorMessages.INVALID_AIRPORT_TYPE.format(
                        airport_type, ", ".join(AIRPORT_TYPES)
                    ),
                )
            )

        return cls(
            id=airport_id,
            name=name,
            name_en=record.get("name_en") or name,
            airport_type=airport_type,
            center=center,
            radius_km=radius,
        )


@dataclass(frozen=True)
class AirportMatch:
    airport: Airport
    distance_km: float


class AirportCatalog:
    """Immutable, ordered collection of airports and heliports."""

    def __init__(
        self,
        records: Iterable[dict[str, Any]],
        heliport_records: Iterable[dict[str, Any]] = (),
    ) -> None:
        seen: set[str] = set()
        airports: list[Airport] = []
        heliports: list[Airport] = []
        for record in (*records, *heliport_records):
            airport = Airport.from_record(record)
            if airport.id in seen:
                raise ValueError(ErrorMessages.DUPLICATE_AIRPORT_ID.format(airport.id))
            seen.add(airport.id)
            (heliports if airport.is_heliport else airports).append(airport)

        self._airports: tuple[Airport, ...] = tuple(airports)
        self._heliports: tuple[Airport, ...] = tuple(heliports)
        self._outlines: dict[str, Any] = {}
        logger.debug(
            f"Loaded airport catalog: {len(self._airports)} airports, "
            f"{len(self._heliports)} heliports"
        )

    def __len__(self) -> int:
        return len(self._airports)

    @property
    def airports(self) -> tuple[Airport, ...]:
        """Airports and air bases, heliports excluded."""
        return self._airports

    @property
    def heliports(self) -> tuple[Airport, ...]:
        return self._heliports

    def with_heliports(self) -> list[Airport]:
        return [*self._airports, *self._heliports]

    def get(self, airport_id: str) -> Airport | None:
        for airport in self.with_heliports():
            if airport.id == airport_id:
                return airport
        return None

    def by_type(self, airport_type: str) -> list[Airport]:
        return [a for a in self.with_heliports() if a.airport_type == airport_type]

    def no_fly_law_airports(self) -> list[Airport]:
        """Airports whose restricted radius is set by the drone act (24 km)."""
        return [a for a in self._airports if a.no_fly_law]

    # ------------------------------------------------------------------
    # Spatial queries
    # ------------------------------------------------------------------

    def _candidates(self, include_heliports: bool) -> Iterable[Airport]:
        return self.with_heliports() if include_heliports else self._airports

    def containing(self, point: GeoPoint, include_heliports: bool = False) -> AirportMatch | None:
        """First airport, in catalog order, whose circle contains the point."""
        for airport in self._candidates(include_heliports):
            dist = distance_km(point, airport.center)
            if dist <= airport.radius_km:
                return AirportMatch(airport=airport, distance_km=dist)
        return None

    def hits(self, point: GeoPoint, include_heliports: bool = False) -> list[AirportMatch]:
        """Every airport containing the point, nearest centre first."""
        matches = []
        for airport in self._candidates(include_heliports):
            dist = distance_km(point, airport.center)
            if dist <= airport.radius_km:
                matches.append(AirportMatch(airport=airport, distance_km=dist))
        matches.sort(key=lambda m: m.distance_km)
        return matches

    def crossing(
        self,
        start: GeoPoint,
        end: GeoPoint,
        include_heliports: bool = False,
    ) -> list[Airport]:
        """Every airport whose circle the straight leg start-end enters, in catalog order."""
        line = leg_line(start, end)
        extent = tuple(leg_bbox(start, end))
        result = []
        for airport in self._candidates(include_heliports):
            if airport.contains(start) or airport.contains(end):
                result.append(airport)
                continue
            shape_, bounds = self._outline(airport)
            if bbox_intersects(bounds, extent) and crosses(line, shape_):
                result.append(airport)
        return result

    def _outline(self, airport: Airport) -> tuple[Any, Any]:
        cached = self._outlines.get(airport.id)
        if cached is None:
            polygon = airport.polygon()
            cached = (outline(polygon), bounding_box(polygon))
            self._outlines[airport.id] = cached
        return cached

    # ------------------------------------------------------------------
    # GeoJSON views
    # ------------------------------------------------------------------

    def airport_geojson(self) -> dict[str, Any]:
        return _collection(self._airports)

    def heliport_geojson(self) -> dict[str, Any]:
        return _collection(self._heliports)


def _collection(airports: Iterable[Airport]) -> dict[str, Any]:
    return {
        "type": "FeatureCollection",
        "features": [
            {
                "type": "Feature",
                "properties": {
                    "id": a.id,
                    "name": a.name,
                    "name_en": a.name_en,
                    "type": a.airport_type,
                    "radius_km": a.radius_km,
                    "zone_type": a.zone_type,
                    "coordinates": a.center.to_lonlat(),
                },
                "geometry": a.polygon(),
            }
            for a in airports
        ],
    }


def load_default_airports() -> AirportCatalog:
    """Catalog built from the compiled-in airport and heliport lists."""
    from ..airports import AIRPORTS, HELIPORTS

    return AirportCatalog(AIRPORTS, HELIPORTS)
