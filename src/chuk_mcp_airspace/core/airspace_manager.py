"""
Airspace Manager: central orchestrator for restriction queries.

Composes the zone catalog, the airport catalog, the restriction-surface
tile cache and the containment engine, and stores exported GeoJSON in the
artifact store.
Catalog queries are synchronous; anything touching tiles is async.
"""

import json
import logging
import uuid
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Sequence

from ..constants import (
    AIRPORT_TYPES,
    ALL_SURFACE_KINDS,
    DEFAULT_NEARBY_KM,
    FACILITY_TYPES,
    SEVERITY_ORDER,
    SURFACE_STYLES,
    ZONE_COLORS,
    ZONE_LAYERS,
    AirportType,
    ErrorMessages,
    Severity,
    SurfaceProperty,
    ZoneColor,
)
from .airport_catalog import Airport, AirportCatalog, load_default_airports
from .containment import ContainmentEngine, SurfaceCheck
from .geo_math import GeoPoint, distance_km
from .surface_cache import SurfaceTileCache, TileFetchFn
from .surface_classifier import layer_styles
from .tile_fetcher import TileFetcher
from .tile_math import TileRange, visible_range
from .zone_catalog import ZoneCatalog, ZoneFacility, load_default_catalog

logger = logging.getLogger(__name__)

SurfaceCheckResult = SurfaceCheck


@dataclass
class ZoneCheckResult:
    """Result of a zone containment query."""

    in_zone: bool
    facility: dict | None = None
    zone_color: str | None = None
    distance_km: float | None = None


@dataclass
class SurfaceFetchResult:
    """Result of a viewport restriction-surface fetch."""

    collection: dict
    tile_range: TileRange
    feature_count: int
    rejected: bool
    kind_counts: dict[str, int] = field(default_factory=dict)


@dataclass
class AirportCheckResult:
    """Result of an airport containment query."""

    in_zone: bool
    airport: dict | None = None
    distance_km: float | None = None
    hits: list[dict] = field(default_factory=list)


@dataclass
class WaypointCheck:
    """Zone, airport and surface status of one path waypoint."""

    index: int
    lat: float
    lng: float
    zone: dict | None
    zone_color: str | None
    surface: SurfaceCheck
    severity: str
    airport: dict | None = None


@dataclass
class LegCheck:
    """Restrictions crossed by the straight leg between two waypoints."""

    index: int
    start: GeoPoint
    end: GeoPoint
    distance_km: float
    zones: list[dict]
    zone_color: str | None
    airports: list[dict]
    surface: SurfaceCheck
    severity: str


@dataclass
class PathCheckResult:
    """Result of checking a flight path waypoint by waypoint and leg by leg."""

    waypoints: list[WaypointCheck]
    legs: list[LegCheck]
    zone_hits: int
    airport_hits: int
    surface_hits: int
    crossing_legs: int
    severity: str
    total_distance_km: float


def _worst_color(colors: list[str]) -> str | None:
    if ZoneColor.RED in colors:
        return ZoneColor.RED
    return ZoneColor.YELLOW if colors else None


def _severity(zone_colors: list[str], other_hit: bool) -> str:
    if ZoneColor.RED in zone_colors:
        return Severity.DANGER
    if zone_colors or other_hit:
        return Severity.WARNING
    return Severity.SAFE


class AirspaceManager:
    """Central manager for airspace restriction operations."""

    def __init__(
        self,
        catalog: ZoneCatalog | None = None,
        fetcher: TileFetchFn | None = None,
        cache: SurfaceTileCache | None = None,
        airports: AirportCatalog | None = None,
    ) -> None:
        self.catalog = catalog if catalog is not None else load_default_catalog()
        self.airport_catalog = airports if airports is not None else load_default_airports()
        self.fetcher = fetcher if fetcher is not None else TileFetcher()
        self.cache = cache if cache is not None else SurfaceTileCache(self.fetcher)
        self.engine = ContainmentEngine(self.cache)

    # ------------------------------------------------------------------
    # Discovery (sync, no I/O)
    # ------------------------------------------------------------------

    def list_categories(self) -> list[dict]:
        """Facility types with their labels, zone colours and counts."""
        counts = self.catalog.categories()
        result = []
        for facility_type, label in FACILITY_TYPES.items():
            colors = sorted({f.zone_color for f in self.catalog.by_type(facility_type)})
            result.append(
                {
                    "facility_type": facility_type,
                    "label": label,
                    "count": counts[facility_type],
                    "zone_colors": colors,
                }
            )
        return result

    def surface_styles(self) -> list[dict]:
        """Static style table for every restriction-surface kind."""
        return [{"kind": kind, **SURFACE_STYLES[kind]} for kind in ALL_SURFACE_KINDS]

    def layer_styles(self) -> dict:
        return layer_styles()

    def cache_info(self) -> dict:
        fetch_url = getattr(self.fetcher, "url_template", None)
        return {
            "cached_tiles": len(self.cache),
            "inflight": self.cache.inflight_count,
            "fetch_count": self.cache.fetch_count,
            "max_entries": self.cache.max_entries,
            "max_tiles_per_request": self.cache.max_tiles,
            "zoom": self.cache.zoom,
            "tile_url": fetch_url,
        }

    # ------------------------------------------------------------------
    # Zones (sync, no I/O)
    # ------------------------------------------------------------------

    def zones(
        self,
        zone_color: str | None = None,
        facility_type: str | None = None,
        category: str | None = None,
    ) -> list[ZoneFacility]:
        """Catalog facilities matching every given filter, in catalog order."""
        if zone_color is not None and zone_color not in ZONE_COLORS:
            raise ValueError(
                ErrorMessages.INVALID_ZONE_COLOR.format(zone_color, ", ".join(ZONE_COLORS))
            )
        if facility_type is not None:
            self._validate_facility_type(facility_type)

        facilities = list(self.catalog.facilities)
        if zone_color is not None:
            facilities = [f for f in facilities if f.zone_color == zone_color]
        if facility_type is not None:
            facilities = [f for f in facilities if f.facility_type == facility_type]
        if category is not None:
            facilities = [f for f in facilities if f.category == category]
        return facilities

    def check_zone(
        self,
        lat: float,
        lng: float,
        include_perimeter: bool = False,
    ) -> ZoneCheckResult:
        """First catalog facility containing the point (not the nearest)."""
        point = GeoPoint(lat=lat, lng=lng)
        match = self.catalog.containing(point, include_perimeter=include_perimeter)
        if match is None:
            return ZoneCheckResult(in_zone=False)
        return ZoneCheckResult(
            in_zone=True,
            facility=match.facility.to_dict(),
            zone_color=match.zone_color,
            distance_km=match.distance_km,
        )

    def nearby_zones(
        self,
        lat: float,
        lng: float,
        max_distance_km: float = DEFAULT_NEARBY_KM,
    ) -> list[dict]:
        """Facilities within range, nearest first, each with distance_km."""
        point = GeoPoint(lat=lat, lng=lng)
        return [
            {**facility.to_dict(), "distance_km": round(dist, 3)}
            for facility, dist in self.catalog.nearby(point, max_distance_km)
        ]

    def zone_geojson(self, layer: str = "all") -> dict:
        """
        Zone circles as a GeoJSON FeatureCollection.

        Args:
            layer: red, yellow, all, legacy, airport, heliport, or a facility type

        Returns:
            FeatureCollection dict
        """
        if layer == "airport":
            return self.airport_catalog.airport_geojson()
        if layer == "heliport":
            return self.airport_catalog.heliport_geojson()
        if layer == "red":
            return self.catalog.red_zone_geojson()
        if layer == "yellow":
            return self.catalog.yellow_zone_geojson()
        if layer == "all":
            return self.catalog.all_zones_geojson()
        if layer == "legacy":
            return self.catalog.legacy_zones_geojson()
        if layer in FACILITY_TYPES:
            return self.catalog.category_geojson(layer)
        raise ValueError(ErrorMessages.INVALID_LAYER.format(layer, ", ".join(ZONE_LAYERS)))

    def zones_in_bbox(self, bbox: list[float]) -> list[ZoneFacility]:
        self._validate_bbox(bbox)
        return self.catalog.in_bbox(tuple(bbox))

    # ------------------------------------------------------------------
    # Airports (sync, no I/O)
    # ------------------------------------------------------------------

    def airports(
        self,
        airport_type: str | None = None,
        no_fly_law_only: bool = False,
        include_heliports: bool = False,
    ) -> list[Airport]:
        """Airports matching the filters; asking for the heliport type implies heliports."""
        if airport_type is not None and airport_type not in AIRPORT_TYPES:
            raise ValueError(
                ErrorMessages.INVALID_AIRPORT_TYPE.format(airport_type, ", ".join(AIRPORT_TYPES))
            )
        if no_fly_law_only:
            airports = self.airport_catalog.no_fly_law_airports()
        elif include_heliports or airport_type == AirportType.HELIPORT:
            airports = self.airport_catalog.with_heliports()
        else:
            airports = list(self.airport_catalog.airports)
        if airport_type is not None:
            airports = [a for a in airports if a.airport_type == airport_type]
        return airports

    def check_airport(
        self,
        lat: float,
        lng: float,
        include_heliports: bool = False,
    ) -> AirportCheckResult:
        """First airport containing the point, plus every airport that does."""
        point = GeoPoint(lat=lat, lng=lng)
        match = self.airport_catalog.containing(point, include_heliports=include_heliports)
        if match is None:
            return AirportCheckResult(in_zone=False)
        hits = self.airport_catalog.hits(point, include_heliports=include_heliports)
        return AirportCheckResult(
            in_zone=True,
            airport=match.airport.to_dict(),
            distance_km=round(match.distance_km, 3),
            hits=[{**m.airport.to_dict(), "distance_km": round(m.distance_km, 3)} for m in hits],
        )

    # ------------------------------------------------------------------
    # Restriction surfaces
    # ------------------------------------------------------------------

    def tile_range(self, bbox: list[float]) -> TileRange:
        """z=8 tile range covering a bbox; pure computation."""
        self._validate_bbox(bbox)
        return visible_range(bbox, self.cache.zoom)

    async def fetch_surfaces(
        self,
        bbox: list[float],
        zoom: int | None = None,
    ) -> SurfaceFetchResult:
        """Classified restriction surfaces for a viewport; empty when over the tile cap."""
        tile_range = self.tile_range(bbox)
        rejected = tile_range.count > self.cache.max_tiles

        collection = await self.cache.fetch_tiles(bbox, zoom)
        features = collection["features"]
        kinds = Counter(f["properties"].get(SurfaceProperty.KIND) for f in features)

        return SurfaceFetchResult(
            collection=collection,
            tile_range=tile_range,
            feature_count=len(features),
            rejected=rejected,
            kind_counts=dict(kinds),
        )

    async def check_surface(self, lat: float, lng: float) -> SurfaceCheckResult:
        point = GeoPoint(lat=lat, lng=lng)
        return await self.engine.check_point(point)

    async def check_surfaces(
        self,
        points: list[list[float]],
        ids: list[str] | None = None,
    ) -> dict[str, SurfaceCheckResult]:
        """
        Batch surface check for [lon, lat] points.

        Points sharing a z=8 tile trigger a single tile resolution.
        Ids default to the point's index in the input list.
        """
        geo_points = self._to_points(points)
        if ids is None:
            ids = [str(i) for i in range(len(geo_points))]
        if len(ids) != len(geo_points):
            raise ValueError(ErrorMessages.POINT_ID_COUNT.format(len(ids), len(geo_points)))
        seen: set[str] = set()
        for point_id in ids:
            if point_id in seen:
                raise ValueError(ErrorMessages.DUPLICATE_POINT_ID.format(point_id))
            seen.add(point_id)

        return await self.engine.check_points_batch(list(zip(ids, geo_points)))

    # ------------------------------------------------------------------
    # Flight paths
    # ------------------------------------------------------------------

    async def check_path(
        self,
        waypoints: list[list[float]],
        include_heliports: bool = False,
    ) -> PathCheckResult:
        """
        Check every [lon, lat] waypoint and every leg between them.

        Waypoints are tested against zones (perimeter rings included),
        airport circles and restriction surfaces. Each straight leg is
        tested for crossing the same areas, so a leg that passes through a
        zone is caught even when both of its waypoints are clear.

        Severity is danger for a red zone, warning for a yellow zone, an
        airport or a restriction surface, safe otherwise; the path takes
        the worst over waypoints and legs.
        """
        points = self._to_points(waypoints)
        if not points:
            raise ValueError(ErrorMessages.EMPTY_PATH)
        segments = list(zip(points, points[1:]))

        surfaces = await self.engine.check_points_batch(list(enumerate(points)))
        leg_surfaces = await self.engine.check_legs(segments)

        checks = []
        for i, point in enumerate(points):
            match = self.catalog.containing(point, include_perimeter=True)
            airport = self.airport_catalog.containing(point, include_heliports=include_heliports)
            surface = surfaces[i]
            colors = [match.zone_color] if match else []
            checks.append(
                WaypointCheck(
                    index=i,
                    lat=point.lat,
                    lng=point.lng,
                    zone=match.facility.to_dict() if match else None,
                    zone_color=match.zone_color if match else None,
                    surface=surface,
                    severity=_severity(colors, airport is not None or surface.in_surface),
                    airport=airport.airport.to_dict() if airport else None,
                )
            )

        legs = []
        for i, ((start, end), surface) in enumerate(zip(segments, leg_surfaces)):
            zones = self.catalog.crossing(start, end, include_perimeter=True)
            airports = self.airport_catalog.crossing(
                start, end, include_heliports=include_heliports
            )
            colors = [f.zone_color for f in zones]
            legs.append(
                LegCheck(
                    index=i,
                    start=start,
                    end=end,
                    distance_km=round(distance_km(start, end), 3),
                    zones=[f.to_dict() for f in zones],
                    zone_color=_worst_color(colors),
                    airports=[a.to_dict() for a in airports],
                    surface=surface,
                    severity=_severity(colors, bool(airports) or surface.in_surface),
                )
            )
            if zones or airports or surface.in_surface:
                logger.debug(
                    f"Leg {i} crosses {len(zones)} zones, {len(airports)} airports, "
                    f"surface {surface.kind}"
                )

        total = sum(distance_km(a, b) for a, b in segments)
        severities = [c.severity for c in checks] + [leg.severity for leg in legs]
        return PathCheckResult(
            waypoints=checks,
            legs=legs,
            zone_hits=sum(1 for c in checks if c.zone is not None),
            airport_hits=sum(1 for c in checks if c.airport is not None),
            surface_hits=sum(1 for c in checks if c.surface.in_surface),
            crossing_legs=sum(1 for leg in legs if leg.severity != Severity.SAFE),
            severity=max(severities, key=SEVERITY_ORDER.index),
            total_distance_km=round(total, 3),
        )

    # ------------------------------------------------------------------
    # Artifacts
    # ------------------------------------------------------------------

    async def export_geojson(self, collection: dict, metadata: dict) -> str:
        """Store a FeatureCollection in the artifact store and return its ref."""
        try:
            store = self._get_store()
            ref = f"airspace/{uuid.uuid4().hex[:12]}.geojson"
            data = json.dumps(collection, ensure_ascii=False).encode("utf-8")

            await store.store(
                ref,
                data,
                mime_type="application/geo+json",
                metadata=metadata,
                summary=f"Airspace GeoJSON ({metadata.get('layer', 'unknown')})",
            )
            return ref
        except Exception as e:
            logger.error(f"Failed to store GeoJSON: {e}")
            raise

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _get_store(self) -> Any:
        """Get the artifact store instance."""
        from chuk_mcp_server import get_artifact_store

        store = get_artifact_store()
        if store is None:
            raise RuntimeError(ErrorMessages.NO_ARTIFACT_STORE)
        return store

    def _validate_bbox(self, bbox: Sequence[float]) -> None:
        """Validate a [west, south, east, north] bounding box."""
        if len(bbox) != 4:
            raise ValueError(ErrorMessages.INVALID_BBOX)
        west, south, east, north = bbox
        if west >= east:
            raise ValueError(ErrorMessages.INVALID_BBOX_VALUES.format(west, east))
        if south >= north:
            raise ValueError(ErrorMessages.INVALID_BBOX_LAT.format(south, north))

    def _validate_facility_type(self, facility_type: str) -> None:
        if facility_type not in FACILITY_TYPES:
            raise ValueError(
                ErrorMessages.INVALID_FACILITY_TYPE.format(facility_type, ", ".join(FACILITY_TYPES))
            )

    def _to_points(self, coords: Sequence[Sequence[float]]) -> list[GeoPoint]:
        """Convert [lon, lat] pairs to GeoPoints, validating ranges."""
        points = []
        for c in coords:
            if len(c) != 2:
                raise ValueError(ErrorMessages.INVALID_POINT.format(list(c)))
            points.append(GeoPoint(lat=float(c[1]), lng=float(c[0])))
        return points
