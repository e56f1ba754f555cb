"""
Response models for chuk-mcp-airspace tools.

All tool responses are Pydantic models for type safety and consistent API.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


def format_response(model: BaseModel, output_mode: str = "json") -> str:
    """Format a response model as JSON or human-readable text.

    Args:
        model: Pydantic response model instance
        output_mode: "json" (default) or "text"

    Returns:
        Formatted string
    """
    if output_mode == "text" and hasattr(model, "to_text"):
        return str(model.to_text())
    return str(model.model_dump_json())


class ErrorResponse(BaseModel):
    """Error response model for tool failures."""

    model_config = ConfigDict(extra="forbid")

    error: str = Field(..., description="Error message describing what went wrong")

    def to_text(self) -> str:
        return f"Error: {self.error}"


# ---------------------------------------------------------------------------
# Discovery responses
# ---------------------------------------------------------------------------


class FacilityTypeInfo(BaseModel):
    """Summary of one facility type in the zone catalog."""

    model_config = ConfigDict(extra="forbid")

    facility_type: str = Field(..., description="Facility type identifier (e.g., nuclear)")
    label: str = Field(..., description="Japanese display label")
    count: int = Field(..., description="Number of catalog facilities of this type", ge=0)
    zone_colors: list[str] = Field(..., description="Zone colours used by this type")

    def to_text(self) -> str:
        colors = "/".join(self.zone_colors) or "-"
        return f"{self.facility_type}: {self.label} ({self.count}, {colors})"


class CategoriesResponse(BaseModel):
    """Response model for listing facility types."""

    model_config = ConfigDict(extra="forbid")

    categories: list[FacilityTypeInfo] = Field(..., description="Facility types")
    total_facilities: int = Field(..., description="Total facilities in the catalog", ge=0)
    message: str = Field(..., description="Operation result message")

    def to_text(self) -> str:
        lines = [self.message, ""]
        for c in self.categories:
            lines.append(f"  {c.to_text()}")
        return "\n".join(lines)


class SurfaceStyleInfo(BaseModel):
    """Static display style of a restriction-surface kind."""

    model_config = ConfigDict(extra="forbid")

    kind: str = Field(..., description="Surface kind identifier")
    label: str = Field(..., description="Japanese label")
    label_en: str = Field(..., description="English label")
    fill_color: str = Field(..., description="Fill colour (hex)")
    line_color: str = Field(..., description="Outline colour (hex)")
    fill_opacity: float = Field(..., description="Fill opacity", ge=0, le=1)
    line_width: float = Field(..., description="Outline width in pixels", ge=0)


class SurfaceStylesResponse(BaseModel):
    """Response model for restriction-surface styles."""

    model_config = ConfigDict(extra="forbid")

    styles: list[SurfaceStyleInfo] = Field(..., description="Style per surface kind")
    layer_styles: dict[str, Any] = Field(
        ..., description="Map paint expressions reading the injected feature properties"
    )
    message: str = Field(..., description="Operation result message")

    def to_text(self) -> str:
        lines = [self.message, ""]
        for s in self.styles:
            lines.append(
                f"  {s.kind}: {s.label} / {s.label_en} "
                f"(fill {s.fill_color} @ {s.fill_opacity}, line {s.line_color} x{s.line_width})"
            )
        return "\n".join(lines)


class StatusResponse(BaseModel):
    """Response model for server status queries."""

    model_config = ConfigDict(extra="forbid")

    server: str = Field(default="chuk-mcp-airspace", description="Server name")
    version: str = Field(default="0.1.0", description="Server version")
    facility_count: int = Field(..., description="Facilities in the zone catalog", ge=0)
    airport_count: int = Field(default=0, description="Airports in the airport catalog", ge=0)
    cached_tiles: int = Field(default=0, description="Restriction-surface tiles in cache", ge=0)
    inflight_tiles: int = Field(default=0, description="Tile fetches currently running", ge=0)
    tile_fetches: int = Field(default=0, description="Tile fetches issued since start", ge=0)
    tile_url: str | None = Field(None, description="Restriction-surface tile URL template")
    storage_provider: str = Field(..., description="Active storage provider (memory/filesystem/s3)")
    artifact_store_available: bool = Field(
        default=False, description="Whether artifact store is available"
    )

    def to_text(self) -> str:
        store_status = "available" if self.artifact_store_available else "not available"
        lines = [
            f"{self.server} v{self.version}",
            f"Facilities: {self.facility_count}",
            f"Airports: {self.airport_count}",
            f"Tile cache: {self.cached_tiles} tiles ({self.inflight_tiles} in flight, "
            f"{self.tile_fetches} fetched)",
            f"Tile source: {self.tile_url or 'custom fetcher'}",
            f"Storage: {self.storage_provider}",
            f"Artifact store: {store_status}",
        ]
        return "\n".join(lines)


class CapabilitiesResponse(BaseModel):
    """Response model for server capabilities listing."""

    model_config = ConfigDict(extra="forbid")

    server: str = Field(..., description="Server name")
    version: str = Field(..., description="Server version")
    facility_types: list[str] = Field(..., description="Zone facility types")
    airport_types: list[str] = Field(default_factory=list, description="Airport types")
    zone_colors: list[str] = Field(..., description="Zone colours")
    zone_layers: list[str] = Field(..., description="GeoJSON zone layers")
    surface_kinds: list[str] = Field(..., description="Restriction-surface kinds")
    tile_zoom: int = Field(..., description="Fixed zoom of restriction-surface tiles")
    max_tiles_per_request: int = Field(..., description="Tile cap per surface fetch")
    output_modes: list[str] = Field(..., description="Supported output modes")
    tool_count: int = Field(..., description="Number of available tools", ge=0)
    llm_guidance: str = Field(..., description="LLM-friendly usage guidance for the server")
    message: str = Field(..., description="Operation result message")

    def to_text(self) -> str:
        lines = [
            f"{self.server} v{self.version}",
            f"Tools: {self.tool_count}",
            f"Facility types: {', '.join(self.facility_types)}",
            f"Airport types: {', '.join(self.airport_types)}",
            f"Zone layers: {', '.join(self.zone_layers)}",
            f"Surface kinds: {', '.join(self.surface_kinds)}",
            f"Surface tiles: z={self.tile_zoom}, max {self.max_tiles_per_request} per request",
            f"Guidance: {self.llm_guidance}",
        ]
        return "\n".join(lines)


# ---------------------------------------------------------------------------
# Zone responses
# ---------------------------------------------------------------------------


class FacilityInfo(BaseModel):
    """A restricted facility (or generated perimeter ring)."""

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., description="Facility identifier")
    name: str = Field(..., description="Facility name (Japanese)")
    name_en: str | None = Field(None, description="Facility name (English)")
    facility_type: str = Field(..., description="Facility type identifier")
    type_label: str = Field(..., description="Facility type label")
    zone_color: str = Field(..., description="Zone colour (red/yellow)")
    zone_type: str = Field(..., description="RED_ZONE or YELLOW_ZONE")
    lat: float = Field(..., description="Centre latitude")
    lng: float = Field(..., description="Centre longitude")
    radius_km: float = Field(..., description="Restricted radius in kilometres", gt=0)
    category: str | None = Field(None, description="Catalog category")
    source: str | None = Field(None, description="Designation source")
    operational_status: str | None = Field(None, description="Operational status")
    reactor_count: int | None = Field(None, description="Reactor count (nuclear only)")
    capacity: str | None = Field(None, description="Capacity")
    operator: str | None = Field(None, description="Operator")
    address: str | None = Field(None, description="Address")
    description: str | None = Field(None, description="Free-text description")
    is_perimeter: bool = Field(default=False, description="Generated perimeter ring")
    distance_km: float | None = Field(None, description="Distance from the query point")

    def to_text(self) -> str:
        name = f"{self.name} ({self.name_en})" if self.name_en else self.name
        text = f"[{self.zone_color}] {name}, {self.type_label}, r={self.radius_km:.2f} km"
        if self.distance_km is not None:
            text += f", {self.distance_km:.2f} km away"
        return text


class ZoneListResponse(BaseModel):
    """Response model for filtered facility listings."""

    model_config = ConfigDict(extra="forbid")

    zone_color: str | None = Field(None, description="Zone colour filter")
    facility_type: str | None = Field(None, description="Facility type filter")
    category: str | None = Field(None, description="Category filter")
    bbox: list[float] | None = Field(None, description="Viewport filter [west, south, east, north]")
    count: int = Field(..., description="Number of facilities returned", ge=0)
    facilities: list[FacilityInfo] = Field(..., description="Matching facilities")
    message: str = Field(..., description="Operation result message")

    def to_text(self) -> str:
        lines = [self.message]
        for f in self.facilities:
            lines.append(f"  {f.to_text()}")
        return "\n".join(lines)


class ZoneCheckResponse(BaseModel):
    """Response model for point-in-zone checks."""

    model_config = ConfigDict(extra="forbid")

    lat: float = Field(..., description="Query latitude")
    lng: float = Field(..., description="Query longitude")
    in_zone: bool = Field(..., description="Whether the point is inside a zone")
    zone_color: str | None = Field(None, description="Colour of the matched zone")
    facility: FacilityInfo | None = Field(None, description="First matching facility")
    distance_km: float | None = Field(None, description="Distance to the facility centre")
    include_perimeter: bool = Field(..., description="Whether perimeter rings were checked")
    message: str = Field(..., description="Operation result message")

    def to_text(self) -> str:
        lines = [f"Point: ({self.lat:.6f}, {self.lng:.6f})", self.message]
        if self.facility is not None:
            lines.append(f"  {self.facility.to_text()}")
        return "\n".join(lines)


class NearbyResponse(BaseModel):
    """Response model for nearby facility queries."""

    model_config = ConfigDict(extra="forbid")

    lat: float = Field(..., description="Query latitude")
    lng: float = Field(..., description="Query longitude")
    max_distance_km: float = Field(..., description="Search radius in kilometres", gt=0)
    count: int = Field(..., description="Number of facilities found", ge=0)
    facilities: list[FacilityInfo] = Field(..., description="Facilities, nearest first")
    message: str = Field(..., description="Operation result message")

    def to_text(self) -> str:
        lines = [self.message]
        for f in self.facilities:
            lines.append(f"  {f.to_text()}")
        return "\n".join(lines)


class ZoneGeoJSONResponse(BaseModel):
    """Response model for zone GeoJSON generation."""

    model_config = ConfigDict(extra="forbid")

    layer: str = Field(..., description="Generated layer")
    feature_count: int = Field(..., description="Number of features", ge=0)
    geojson: dict[str, Any] | None = Field(None, description="Inline FeatureCollection")
    artifact_ref: str | None = Field(None, description="Artifact store reference")
    message: str = Field(..., description="Operation result message")

    def to_text(self) -> str:
        lines = [self.message]
        if self.artifact_ref:
            lines.append(f"Artifact: {self.artifact_ref}")
        return "\n".join(lines)


# ---------------------------------------------------------------------------
# Airport responses
# ---------------------------------------------------------------------------


class AirportInfo(BaseModel):
    """An airport, air base or heliport with its restricted radius."""

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., description="Airport identifier (IATA or ICAO where known)")
    name: str = Field(..., description="Airport name (Japanese)")
    name_en: str = Field(..., description="Airport name (English)")
    airport_type: str = Field(..., description="international, domestic, military or heliport")
    type_label: str = Field(..., description="Airport type label")
    zone_type: str = Field(..., description="AIRPORT or HELIPORT")
    lat: float = Field(..., description="Centre latitude")
    lng: float = Field(..., description="Centre longitude")
    radius_km: float = Field(..., description="Restricted radius in kilometres", gt=0)
    no_fly_law: bool = Field(default=False, description="Radius set by the drone act (24 km)")
    distance_km: float | None = Field(None, description="Distance from the query point")

    def to_text(self) -> str:
        text = f"{self.id} {self.name} ({self.name_en}), {self.type_label}, r={self.radius_km:g} km"
        if self.distance_km is not None:
            text += f", {self.distance_km:.2f} km away"
        return text


class AirportListResponse(BaseModel):
    """Response model for airport listings."""

    model_config = ConfigDict(extra="forbid")

    airport_type: str | None = Field(None, description="Airport type filter")
    no_fly_law_only: bool = Field(default=False, description="Only 24 km drone-act airports")
    include_heliports: bool = Field(default=False, description="Whether heliports are listed")
    count: int = Field(..., description="Number of airports returned", ge=0)
    airports: list[AirportInfo] = Field(..., description="Matching airports")
    message: str = Field(..., description="Operation result message")

    def to_text(self) -> str:
        lines = [self.message]
        for a in self.airports:
            lines.append(f"  {a.to_text()}")
        return "\n".join(lines)


class AirportCheckResponse(BaseModel):
    """Response model for point-in-airport-zone checks."""

    model_config = ConfigDict(extra="forbid")

    lat: float = Field(..., description="Query latitude")
    lng: float = Field(..., description="Query longitude")
    in_zone: bool = Field(..., description="Whether the point is inside an airport zone")
    airport: AirportInfo | None = Field(None, description="First matching airport")
    hits: list[AirportInfo] = Field(default_factory=list, description="Every match, nearest first")
    include_heliports: bool = Field(..., description="Whether heliports were checked")
    message: str = Field(..., description="Operation result message")

    def to_text(self) -> str:
        lines = [f"Point: ({self.lat:.6f}, {self.lng:.6f})", self.message]
        for a in self.hits:
            lines.append(f"  {a.to_text()}")
        return "\n".join(lines)


# ---------------------------------------------------------------------------
# Restriction-surface responses
# ---------------------------------------------------------------------------


class TileRangeResponse(BaseModel):
    """Response model for tile range computation."""

    model_config = ConfigDict(extra="forbid")

    bbox: list[float] = Field(..., description="Bounding box [west, south, east, north]")
    z: int = Field(..., description="Tile zoom level")
    x_min: int = Field(..., description="Westernmost tile column")
    x_max: int = Field(..., description="Easternmost tile column")
    y_min: int = Field(..., description="Northernmost tile row")
    y_max: int = Field(..., description="Southernmost tile row")
    count: int = Field(..., description="Number of tiles", ge=0)
    max_tiles: int = Field(..., description="Tile cap per surface fetch")
    within_limit: bool = Field(..., description="Whether a surface fetch would proceed")
    tiles: list[str] = Field(default_factory=list, description="Tile keys (z/x/y), row-major")
    message: str = Field(..., description="Operation result message")

    def to_text(self) -> str:
        lines = [
            self.message,
            f"x: {self.x_min}..{self.x_max}, y: {self.y_min}..{self.y_max}",
        ]
        if self.tiles:
            lines.append(f"Tiles: {', '.join(self.tiles)}")
        return "\n".join(lines)


class SurfaceFetchResponse(BaseModel):
    """Response model for viewport restriction-surface fetches."""

    model_config = ConfigDict(extra="forbid")

    bbox: list[float] = Field(..., description="Bounding box [west, south, east, north]")
    z: int = Field(..., description="Tile zoom used")
    tile_count: int = Field(..., description="Tiles covering the bbox", ge=0)
    feature_count: int = Field(..., description="Classified features returned", ge=0)
    rejected: bool = Field(..., description="True when the bbox exceeded the tile cap")
    kind_counts: dict[str, int] = Field(default_factory=dict, description="Features per kind")
    geojson: dict[str, Any] | None = Field(None, description="Inline FeatureCollection")
    artifact_ref: str | None = Field(None, description="Artifact store reference")
    message: str = Field(..., description="Operation result message")

    def to_text(self) -> str:
        lines = [self.message]
        for kind, n in sorted(self.kind_counts.items()):
            lines.append(f"  {kind}: {n}")
        if self.artifact_ref:
            lines.append(f"Artifact: {self.artifact_ref}")
        return "\n".join(lines)


class SurfaceCheckResponse(BaseModel):
    """Response model for a single-point restriction-surface check."""

    model_config = ConfigDict(extra="forbid")

    lat: float = Field(..., description="Query latitude")
    lng: float = Field(..., description="Query longitude")
    in_surface: bool = Field(..., description="Whether the point is inside a surface")
    kind: str | None = Field(None, description="Surface kind of the first match")
    label: str | None = Field(None, description="Japanese surface label")
    label_en: str | None = Field(None, description="English surface label")
    tile: str | None = Field(None, description="Tile key (z/x/y) holding the match")
    message: str = Field(..., description="Operation result message")

    def to_text(self) -> str:
        return f"Point: ({self.lat:.6f}, {self.lng:.6f})\n{self.message}"


class PointSurfaceResult(BaseModel):
    """Surface check result for one point of a batch."""

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., description="Caller-supplied point identifier")
    lat: float = Field(..., description="Latitude")
    lng: float = Field(..., description="Longitude")
    in_surface: bool = Field(..., description="Whether the point is inside a surface")
    kind: str | None = Field(None, description="Surface kind")
    label: str | None = Field(None, description="Japanese surface label")
    label_en: str | None = Field(None, description="English surface label")


class SurfaceBatchResponse(BaseModel):
    """Response model for batched restriction-surface checks."""

    model_config = ConfigDict(extra="forbid")

    total: int = Field(..., description="Number of points checked", ge=0)
    hit_count: int = Field(..., description="Points inside a surface", ge=0)
    results: list[PointSurfaceResult] = Field(..., description="Per-point results")
    message: str = Field(..., description="Operation result message")

    def to_text(self) -> str:
        lines = [self.message]
        for r in self.results:
            status = f"{r.kind} ({r.label})" if r.in_surface else "clear"
            lines.append(f"  {r.id} ({r.lat:.5f}, {r.lng:.5f}): {status}")
        return "\n".join(lines)


class WaypointInfo(BaseModel):
    """Restriction status of one path waypoint."""

    model_config = ConfigDict(extra="forbid")

    index: int = Field(..., description="Waypoint index", ge=0)
    lat: float = Field(..., description="Latitude")
    lng: float = Field(..., description="Longitude")
    severity: str = Field(..., description="danger, warning or safe")
    zone_id: str | None = Field(None, description="Matched facility id")
    zone_name: str | None = Field(None, description="Matched facility name")
    zone_color: str | None = Field(None, description="Matched zone colour")
    surface_kind: str | None = Field(None, description="Matched surface kind")
    surface_label: str | None = Field(None, description="Matched surface label")
    airport_id: str | None = Field(None, description="Matched airport id")
    airport_name: str | None = Field(None, description="Matched airport name")


class LegInfo(BaseModel):
    """Restrictions crossed by the leg between two consecutive waypoints."""

    model_config = ConfigDict(extra="forbid")

    index: int = Field(..., description="Leg index (waypoint index to index + 1)", ge=0)
    from_lat: float = Field(..., description="Start latitude")
    from_lng: float = Field(..., description="Start longitude")
    to_lat: float = Field(..., description="End latitude")
    to_lng: float = Field(..., description="End longitude")
    distance_km: float = Field(..., description="Great-circle leg length", ge=0)
    severity: str = Field(..., description="danger, warning or safe")
    zone_color: str | None = Field(None, description="Worst colour of the crossed zones")
    zone_ids: list[str] = Field(default_factory=list, description="Crossed facility ids")
    zone_names: list[str] = Field(default_factory=list, description="Crossed facility names")
    airport_ids: list[str] = Field(default_factory=list, description="Crossed airport ids")
    surface_kind: str | None = Field(None, description="First crossed surface kind")
    surface_label: str | None = Field(None, description="First crossed surface label")

    def to_text(self) -> str:
        parts = []
        if self.zone_names:
            parts.append(f"{self.zone_color} zones {', '.join(self.zone_names)}")
        if self.airport_ids:
            parts.append(f"airports {', '.join(self.airport_ids)}")
        if self.surface_kind:
            parts.append(f"surface {self.surface_label}")
        detail = ", ".join(parts) if parts else "clear"
        return (
            f"leg {self.index}->{self.index + 1} ({self.distance_km:.2f} km) "
            f"[{self.severity}] {detail}"
        )


class PathCheckResponse(BaseModel):
    """Response model for flight path checks."""

    model_config = ConfigDict(extra="forbid")

    waypoint_count: int = Field(..., description="Number of waypoints", ge=1)
    total_distance_km: float = Field(..., description="Great-circle path length", ge=0)
    zone_hits: int = Field(..., description="Waypoints inside a zone", ge=0)
    airport_hits: int = Field(default=0, description="Waypoints inside an airport zone", ge=0)
    surface_hits: int = Field(..., description="Waypoints inside a surface", ge=0)
    crossing_legs: int = Field(default=0, description="Legs crossing any restriction", ge=0)
    severity: str = Field(..., description="Worst severity over waypoints and legs")
    waypoints: list[WaypointInfo] = Field(..., description="Per-waypoint results")
    legs: list[LegInfo] = Field(default_factory=list, description="Per-leg results")
    message: str = Field(..., description="Operation result message")

    def to_text(self) -> str:
        lines = [self.message, f"Path length: {self.total_distance_km:.2f} km"]
        for w in self.waypoints:
            parts = []
            if w.zone_name:
                parts.append(f"{w.zone_color} zone {w.zone_name}")
            if w.airport_name:
                parts.append(f"airport {w.airport_name}")
            if w.surface_kind:
                parts.append(f"surface {w.surface_label}")
            detail = ", ".join(parts) if parts else "clear"
            lines.append(f"  #{w.index} ({w.lat:.5f}, {w.lng:.5f}) [{w.severity}] {detail}")
        for leg in self.legs:
            lines.append(f"  {leg.to_text()}")
        return "\n".join(lines)
