"""
Surface tools: tile ranges, restriction-surface fetch, point and path checks.

These tools resolve GSI kokuarea tiles (z=8) through the shared tile cache.
Tile failures never surface as errors: an unreachable tile reads as
"no restriction surfaces here".
"""

import logging

from ...constants import SuccessMessages
from ...models.responses import (
    ErrorResponse,
    LegInfo,
    PathCheckResponse,
    PointSurfaceResult,
    SurfaceBatchResponse,
    SurfaceCheckResponse,
    SurfaceFetchResponse,
    TileRangeResponse,
    WaypointInfo,
    format_response,
)

logger = logging.getLogger(__name__)


def register_surfaces_tools(mcp, manager):
    """Register restriction-surface tools with the MCP server."""

    @mcp.tool()
    async def surface_tile_range(bbox: list[float], output_mode: str = "json") -> str:
        """Compute the z=8 restriction-surface tiles covering a bounding box.

        Use this to check whether a viewport is small enough for surface_fetch.

        Args:
            bbox: Bounding box [west, south, east, north] in EPSG:4326
            output_mode: "json" or "text"

        Returns:
            Tile range, tile count, and the tile keys when within the limit
        """
        try:
            tile_range = manager.tile_range(bbox)
            max_tiles = manager.cache.max_tiles
            within = tile_range.count <= max_tiles

            if within:
                message = SuccessMessages.TILE_RANGE.format(tile_range.count, tile_range.z)
            else:
                message = SuccessMessages.TILE_RANGE_OVER.format(
                    tile_range.count, tile_range.z, max_tiles
                )

            response = TileRangeResponse(
                bbox=bbox,
                z=tile_range.z,
                x_min=tile_range.x_min,
                x_max=tile_range.x_max,
                y_min=tile_range.y_min,
                y_max=tile_range.y_max,
                count=tile_range.count,
                max_tiles=max_tiles,
                within_limit=within,
                tiles=[str(k) for k in tile_range.tiles()] if within else [],
                message=message,
            )
            return format_response(response, output_mode)

        except Exception as e:
            logger.error(f"surface_tile_range failed: {e}")
            return format_response(ErrorResponse(error=str(e)), output_mode)

    @mcp.tool()
    async def surface_fetch(
        bbox: list[float],
        zoom: int | None = None,
        store: bool = False,
        output_mode: str = "json",
    ) -> str:
        """Fetch and classify airport restriction surfaces for a bounding box.

        Surfaces are classified as approach, transitional, horizontal, conical,
        outer_horizontal, extended_approach or other, and each feature carries
        display style properties. Tiles are always z=8 whatever zoom is passed;
        viewports needing more than 64 tiles return an empty collection.

        Args:
            bbox: Bounding box [west, south, east, north] in EPSG:4326
            zoom: Map zoom of the caller (accepted for compatibility, not used)
            store: Store the GeoJSON in the artifact store instead of returning it inline
            output_mode: "json" or "text"

        Returns:
            Classified FeatureCollection (or artifact reference) with counts per kind
        """
        try:
            result = await manager.fetch_surfaces(bbox, zoom)
            tiles = result.tile_range.count

            artifact_ref = None
            geojson = result.collection
            if result.rejected:
                message = SuccessMessages.SURFACE_FETCH_REJECTED.format(
                    tiles, manager.cache.max_tiles
                )
            elif store:
                artifact_ref = await manager.export_geojson(
                    result.collection,
                    metadata={
                        "type": "restriction_surfaces",
                        "layer": "surfaces",
                        "bbox": bbox,
                        "feature_count": result.feature_count,
                    },
                )
                geojson = None
                message = SuccessMessages.SURFACE_FETCH_STORED.format(
                    result.feature_count, tiles, artifact_ref
                )
            else:
                message = SuccessMessages.SURFACE_FETCH.format(result.feature_count, tiles)

            response = SurfaceFetchResponse(
                bbox=bbox,
                z=result.tile_range.z,
                tile_count=tiles,
                feature_count=result.feature_count,
                rejected=result.rejected,
                kind_counts=result.kind_counts,
                geojson=geojson,
                artifact_ref=artifact_ref,
                message=message,
            )
            return format_response(response, output_mode)

        except Exception as e:
            logger.error(f"surface_fetch failed: {e}")
            return format_response(ErrorResponse(error=str(e)), output_mode)

    @mcp.tool()
    async def surface_check_point(lon: float, lat: float, output_mode: str = "json") -> str:
        """Check whether a point lies inside an airport restriction surface.

        Uses exact polygon containment (holes respected) against the z=8 tile
        covering the point.

        Args:
            lon: Longitude (-180 to 180)
            lat: Latitude (-90 to 90)
            output_mode: "json" or "text"

        Returns:
            Containment result with the first matching surface kind
        """
        try:
            result = await manager.check_surface(lat=lat, lng=lon)

            if result.in_surface:
                message = SuccessMessages.SURFACE_HIT.format(result.label)
            else:
                message = SuccessMessages.SURFACE_CLEAR

            response = SurfaceCheckResponse(
                lat=lat,
                lng=lon,
                in_surface=result.in_surface,
                kind=result.kind,
                label=result.label,
                label_en=result.label_en,
                tile=result.tile,
                message=message,
            )
            return format_response(response, output_mode)

        except Exception as e:
            logger.error(f"surface_check_point failed: {e}")
            return format_response(ErrorResponse(error=str(e)), output_mode)

    @mcp.tool()
    async def surface_check_points(
        points: list[list[float]],
        ids: list[str] | None = None,
        output_mode: str = "json",
    ) -> str:
        """Check many points against restriction surfaces in one call.

        Points are grouped by covering tile so each tile is fetched once.

        Args:
            points: List of [lon, lat] coordinate pairs
            ids: Optional identifiers, one per point (default: index)
            output_mode: "json" or "text"

        Returns:
            Per-point containment results
        """
        try:
            checks = await manager.check_surfaces(points, ids)
            labels = ids if ids is not None else [str(i) for i in range(len(points))]

            results = []
            for point_id, (lon, lat) in zip(labels, points):
                check = checks[point_id]
                results.append(
                    PointSurfaceResult(
                        id=point_id,
                        lat=lat,
                        lng=lon,
                        in_surface=check.in_surface,
                        kind=check.kind,
                        label=check.label,
                        label_en=check.label_en,
                    )
                )
            hits = sum(1 for r in results if r.in_surface)

            response = SurfaceBatchResponse(
                total=len(results),
                hit_count=hits,
                results=results,
                message=SuccessMessages.SURFACE_BATCH.format(hits, len(results)),
            )
            return format_response(response, output_mode)

        except Exception as e:
            logger.error(f"surface_check_points failed: {e}")
            return format_response(ErrorResponse(error=str(e)), output_mode)

    @mcp.tool()
    async def airspace_check_path(
        waypoints: list[list[float]],
        include_heliports: bool = False,
        output_mode: str = "json",
    ) -> str:
        """Check a flight path against no-fly zones, airports and restriction surfaces.

        Every waypoint is tested against the zone catalog (including the
        300 m perimeter rings), airport circles and restriction surfaces.
        Every leg between consecutive waypoints is tested for crossing the
        same areas, so a leg passing through a zone is flagged even when
        both of its waypoints are clear. Severity is "danger" for a red
        zone, "warning" for a yellow zone, airport or surface, else "safe".

        Args:
            waypoints: Ordered list of [lon, lat] waypoints
            include_heliports: Also check heliport circles
            output_mode: "json" or "text"

        Returns:
            Per-waypoint and per-leg status, hit counts, and the worst severity
        """
        try:
            result = await manager.check_path(waypoints, include_heliports=include_heliports)

            infos = [
                WaypointInfo(
                    index=w.index,
                    lat=w.lat,
                    lng=w.lng,
                    severity=w.severity,
                    zone_id=w.zone["id"] if w.zone else None,
                    zone_name=w.zone["name"] if w.zone else None,
                    zone_color=w.zone_color,
                    surface_kind=w.surface.kind,
                    surface_label=w.surface.label,
                    airport_id=w.airport["id"] if w.airport else None,
                    airport_name=w.airport["name"] if w.airport else None,
                )
                for w in result.waypoints
            ]
            legs = [
                LegInfo(
                    index=leg.index,
                    from_lat=leg.start.lat,
                    from_lng=leg.start.lng,
                    to_lat=leg.end.lat,
                    to_lng=leg.end.lng,
                    distance_km=leg.distance_km,
                    severity=leg.severity,
                    zone_color=leg.zone_color,
                    zone_ids=[z["id"] for z in leg.zones],
                    zone_names=[z["name"] for z in leg.zones],
                    airport_ids=[a["id"] for a in leg.airports],
                    surface_kind=leg.surface.kind,
                    surface_label=leg.surface.label,
                )
                for leg in result.legs
            ]

            response = PathCheckResponse(
                waypoint_count=len(infos),
                total_distance_km=result.total_distance_km,
                zone_hits=result.zone_hits,
                airport_hits=result.airport_hits,
                surface_hits=result.surface_hits,
                crossing_legs=result.crossing_legs,
                severity=result.severity,
                waypoints=infos,
                legs=legs,
                message=SuccessMessages.PATH_CHECK.format(
                    len(infos),
                    result.zone_hits,
                    result.airport_hits,
                    result.surface_hits,
                    result.crossing_legs,
                    result.severity,
                ),
            )
            return format_response(response, output_mode)

        except Exception as e:
            logger.error(f"airspace_check_path failed: {e}")
            return format_response(ErrorResponse(error=str(e)), output_mode)
