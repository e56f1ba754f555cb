"""
Zone tools: facility listing, point containment, nearby search, GeoJSON,
airport listing and airport containment.

These tools query the compiled-in no-fly zone and airport catalogs and
perform no network I/O. zone_geojson can optionally store its output in the
artifact store.
"""

import logging

from ...constants import DEFAULT_NEARBY_KM, SuccessMessages
from ...models.responses import (
    AirportCheckResponse,
    AirportInfo,
    AirportListResponse,
    ErrorResponse,
    FacilityInfo,
    NearbyResponse,
    ZoneCheckResponse,
    ZoneGeoJSONResponse,
    ZoneListResponse,
    format_response,
)

logger = logging.getLogger(__name__)


def register_zones_tools(mcp, manager):
    """Register zone tools with the MCP server."""

    @mcp.tool()
    async def zone_list(
        zone_color: str | None = None,
        facility_type: str | None = None,
        category: str | None = None,
        bbox: list[float] | None = None,
        output_mode: str = "json",
    ) -> str:
        """List no-fly zone facilities, optionally filtered.

        Args:
            zone_color: "red" (flight prohibited) or "yellow" (coordination required)
            facility_type: Facility type (e.g., nuclear, government, foreign_mission)
            category: Catalog category label (e.g., 在日米軍)
            bbox: Only facilities whose circle touches [west, south, east, north]
            output_mode: "json" or "text"

        Returns:
            Matching facilities in catalog order
        """
        try:
            facilities = manager.zones(
                zone_color=zone_color,
                facility_type=facility_type,
                category=category,
            )
            if bbox is not None:
                visible = {f.id for f in manager.zones_in_bbox(bbox)}
                facilities = [f for f in facilities if f.id in visible]

            infos = [FacilityInfo(**f.to_dict()) for f in facilities]
            response = ZoneListResponse(
                zone_color=zone_color,
                facility_type=facility_type,
                category=category,
                bbox=bbox,
                count=len(infos),
                facilities=infos,
                message=SuccessMessages.ZONE_LIST.format(len(infos)),
            )
            return format_response(response, output_mode)

        except Exception as e:
            logger.error(f"zone_list failed: {e}")
            return format_response(ErrorResponse(error=str(e)), output_mode)

    @mcp.tool()
    async def zone_check_point(
        lon: float,
        lat: float,
        include_perimeter: bool = False,
        output_mode: str = "json",
    ) -> str:
        """Check whether a point lies inside a no-fly zone circle.

        Returns the first facility in catalog order whose radius contains the
        point, which is not necessarily the nearest one.

        Args:
            lon: Longitude (-180 to 180)
            lat: Latitude (-90 to 90)
            include_perimeter: Also check the 300 m yellow rings around red zones
            output_mode: "json" or "text"

        Returns:
            Containment result with the matched facility
        """
        try:
            result = manager.check_zone(lat=lat, lng=lon, include_perimeter=include_perimeter)

            if result.in_zone:
                facility = FacilityInfo(**result.facility)
                message = SuccessMessages.ZONE_HIT.format(result.zone_color, facility.name)
            else:
                facility = None
                message = SuccessMessages.ZONE_CLEAR

            response = ZoneCheckResponse(
                lat=lat,
                lng=lon,
                in_zone=result.in_zone,
                zone_color=result.zone_color,
                facility=facility,
                distance_km=result.distance_km,
                include_perimeter=include_perimeter,
                message=message,
            )
            return format_response(response, output_mode)

        except Exception as e:
            logger.error(f"zone_check_point failed: {e}")
            return format_response(ErrorResponse(error=str(e)), output_mode)

    @mcp.tool()
    async def zone_nearby(
        lon: float,
        lat: float,
        max_distance_km: float = DEFAULT_NEARBY_KM,
        output_mode: str = "json",
    ) -> str:
        """Find no-fly zone facilities near a point, nearest first.

        Args:
            lon: Longitude (-180 to 180)
            lat: Latitude (-90 to 90)
            max_distance_km: Search radius in kilometres (default 10)
            output_mode: "json" or "text"

        Returns:
            Facilities with their distance from the point
        """
        try:
            nearby = manager.nearby_zones(lat=lat, lng=lon, max_distance_km=max_distance_km)
            infos = [FacilityInfo(**f) for f in nearby]

            response = NearbyResponse(
                lat=lat,
                lng=lon,
                max_distance_km=max_distance_km,
                count=len(infos),
                facilities=infos,
                message=SuccessMessages.NEARBY.format(len(infos), max_distance_km),
            )
            return format_response(response, output_mode)

        except Exception as e:
            logger.error(f"zone_nearby failed: {e}")
            return format_response(ErrorResponse(error=str(e)), output_mode)

    @mcp.tool()
    async def zone_geojson(
        layer: str = "all",
        store: bool = False,
        output_mode: str = "json",
    ) -> str:
        """Generate no-fly zone circles as a GeoJSON FeatureCollection.

        Args:
            layer: "red", "yellow" (yellow zones plus red-zone perimeters), "all",
                "legacy" (planar circle approximation), "airport" (airport catalog
                circles), "heliport", or a facility type
            store: Store the GeoJSON in the artifact store instead of returning it inline
            output_mode: "json" or "text"

        Returns:
            Inline GeoJSON or an artifact reference
        """
        try:
            collection = manager.zone_geojson(layer)
            count = len(collection["features"])

            if store:
                ref = await manager.export_geojson(
                    collection,
                    metadata={"type": "zones", "layer": layer, "feature_count": count},
                )
                response = ZoneGeoJSONResponse(
                    layer=layer,
                    feature_count=count,
                    artifact_ref=ref,
                    message=SuccessMessages.ZONE_GEOJSON_STORED.format(count, layer, ref),
                )
            else:
                response = ZoneGeoJSONResponse(
                    layer=layer,
                    feature_count=count,
                    geojson=collection,
                    message=SuccessMessages.ZONE_GEOJSON.format(count, layer),
                )
            return format_response(response, output_mode)

        except Exception as e:
            logger.error(f"zone_geojson failed: {e}")
            return format_response(ErrorResponse(error=str(e)), output_mode)

    @mcp.tool()
    async def airport_list(
        airport_type: str | None = None,
        no_fly_law_only: bool = False,
        include_heliports: bool = False,
        output_mode: str = "json",
    ) -> str:
        """List airports, air bases and heliports with their restricted radius.

        Args:
            airport_type: "international", "domestic", "military" or "heliport"
            no_fly_law_only: Only the airports with the 24 km drone-act radius
            include_heliports: Include heliports (implied by airport_type="heliport")
            output_mode: "json" or "text"

        Returns:
            Matching airports in catalog order
        """
        try:
            airports = manager.airports(
                airport_type=airport_type,
                no_fly_law_only=no_fly_law_only,
                include_heliports=include_heliports,
            )
            infos = [AirportInfo(**a.to_dict()) for a in airports]
            response = AirportListResponse(
                airport_type=airport_type,
                no_fly_law_only=no_fly_law_only,
                include_heliports=include_heliports,
                count=len(infos),
                airports=infos,
                message=SuccessMessages.AIRPORT_LIST.format(len(infos)),
            )
            return format_response(response, output_mode)

        except Exception as e:
            logger.error(f"airport_list failed: {e}")
            return format_response(ErrorResponse(error=str(e)), output_mode)

    @mcp.tool()
    async def airport_check_point(
        lon: float,
        lat: float,
        include_heliports: bool = False,
        output_mode: str = "json",
    ) -> str:
        """Check whether a point lies inside an airport's restricted circle.

        Reports the first airport in catalog order plus every airport whose
        circle contains the point, nearest first.

        Args:
            lon: Longitude (-180 to 180)
            lat: Latitude (-90 to 90)
            include_heliports: Also check heliport circles
            output_mode: "json" or "text"

        Returns:
            Containment result with the matched airports
        """
        try:
            result = manager.check_airport(lat=lat, lng=lon, include_heliports=include_heliports)

            if result.in_zone:
                airport = AirportInfo(**result.airport, distance_km=result.distance_km)
                message = SuccessMessages.AIRPORT_HIT.format(airport.name, airport.radius_km)
            else:
                airport = None
                message = SuccessMessages.AIRPORT_CLEAR

            response = AirportCheckResponse(
                lat=lat,
                lng=lon,
                in_zone=result.in_zone,
                airport=airport,
                hits=[AirportInfo(**h) for h in result.hits],
                include_heliports=include_heliports,
                message=message,
            )
            return format_response(response, output_mode)

        except Exception as e:
            logger.error(f"airport_check_point failed: {e}")
            return format_response(ErrorResponse(error=str(e)), output_mode)
