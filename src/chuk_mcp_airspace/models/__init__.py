"""Response models for chuk-mcp-airspace."""

from .responses import (
    AirportCheckResponse,
    AirportInfo,
    AirportListResponse,
    CapabilitiesResponse,
    CategoriesResponse,
    ErrorResponse,
    FacilityInfo,
    FacilityTypeInfo,
    LegInfo,
    NearbyResponse,
    PathCheckResponse,
    PointSurfaceResult,
    StatusResponse,
    SurfaceBatchResponse,
    SurfaceCheckResponse,
    SurfaceFetchResponse,
    SurfaceStyleInfo,
    SurfaceStylesResponse,
    TileRangeResponse,
    WaypointInfo,
    ZoneCheckResponse,
    ZoneGeoJSONResponse,
    ZoneListResponse,
    format_response,
)

__all__ = [
    "ErrorResponse",
    "FacilityTypeInfo",
    "CategoriesResponse",
    "SurfaceStyleInfo",
    "SurfaceStylesResponse",
    "StatusResponse",
    "CapabilitiesResponse",
    "FacilityInfo",
    "ZoneListResponse",
    "ZoneCheckResponse",
    "NearbyResponse",
    "ZoneGeoJSONResponse",
    "AirportInfo",
    "AirportListResponse",
    "AirportCheckResponse",
    "TileRangeResponse",
    "SurfaceFetchResponse",
    "SurfaceCheckResponse",
    "PointSurfaceResult",
    "SurfaceBatchResponse",
    "WaypointInfo",
    "LegInfo",
    "PathCheckResponse",
    "format_response",
]
