"""
Discovery tools: status, capabilities, facility types, surface styles.

These tools require no network I/O and describe the zone catalog, the
restriction-surface styles and the server configuration.
"""

import logging
import os

from ...constants import (
    ALL_AIRPORT_TYPES,
    ALL_FACILITY_TYPES,
    ALL_SURFACE_KINDS,
    OUTPUT_MODES,
    ZONE_COLORS,
    ZONE_LAYERS,
    EnvVar,
    ServerConfig,
    StorageProvider,
    SuccessMessages,
)
from ...models.responses import (
    CapabilitiesResponse,
    CategoriesResponse,
    ErrorResponse,
    FacilityTypeInfo,
    StatusResponse,
    SurfaceStyleInfo,
    SurfaceStylesResponse,
    format_response,
)

logger = logging.getLogger(__name__)


def register_discovery_tools(mcp, manager):
    """Register discovery tools with the MCP server."""

    @mcp.tool()
    async def airspace_status(output_mode: str = "json") -> str:
        """Get server status including catalog size, tile cache state, and storage configuration.

        Args:
            output_mode: "json" for structured data, "text" for human-readable summary

        Returns:
            Server status information
        """
        try:
            provider = os.environ.get(EnvVar.ARTIFACTS_PROVIDER, StorageProvider.MEMORY)

            store_available = False
            try:
                manager._get_store()
                store_available = True
            except Exception:
                pass

            info = manager.cache_info()
            response = StatusResponse(
                server=ServerConfig.NAME,
                version=ServerConfig.VERSION,
                facility_count=len(manager.catalog),
                airport_count=len(manager.airport_catalog),
                cached_tiles=info["cached_tiles"],
                inflight_tiles=info["inflight"],
                tile_fetches=info["fetch_count"],
                tile_url=info["tile_url"],
                storage_provider=provider,
                artifact_store_available=store_available,
            )
            return format_response(response, output_mode)

        except Exception as e:
            logger.error(f"airspace_status failed: {e}")
            return format_response(ErrorResponse(error=str(e)), output_mode)

    @mcp.tool()
    async def airspace_capabilities(output_mode: str = "json") -> str:
        """Get full server capabilities including facility types, zone layers,
        restriction-surface kinds, and tile limits.

        Args:
            output_mode: "json" for structured data, "text" for human-readable summary

        Returns:
            Complete server capabilities
        """
        try:
            info = manager.cache_info()
            response = CapabilitiesResponse(
                server=ServerConfig.NAME,
                version=ServerConfig.VERSION,
                facility_types=ALL_FACILITY_TYPES,
                zone_colors=ZONE_COLORS,
                zone_layers=ZONE_LAYERS,
                surface_kinds=ALL_SURFACE_KINDS,
                tile_zoom=info["zoom"],
                max_tiles_per_request=info["max_tiles_per_request"],
                output_modes=OUTPUT_MODES,
                airport_types=ALL_AIRPORT_TYPES,
                tool_count=15,
                llm_guidance=(
                    "Use zone_check_point to test a location against no-fly zones "
                    "(red = prohibited, yellow = needs coordination). "
                    "Use airport_check_point for airport and air-base circles and "
                    "surface_check_point for airport restriction surfaces. "
                    "Use airspace_check_path for a whole flight path. "
                    "Coordinates for points and paths are [lon, lat]; bounding boxes are "
                    "[west, south, east, north]. Surface fetches over more than "
                    f"{info['max_tiles_per_request']} z={info['zoom']} tiles return nothing; "
                    "zoom in first."
                ),
                message=f"{ServerConfig.NAME} v{ServerConfig.VERSION} capabilities",
            )
            return format_response(response, output_mode)

        except Exception as e:
            logger.error(f"airspace_capabilities failed: {e}")
            return format_response(ErrorResponse(error=str(e)), output_mode)

    @mcp.tool()
    async def airspace_list_categories(output_mode: str = "json") -> str:
        """List facility types in the no-fly zone catalog with counts and zone colours.

        Args:
            output_mode: "json" for structured data, "text" for human-readable summary

        Returns:
            Facility types with labels and counts
        """
        try:
            categories = [FacilityTypeInfo(**c) for c in manager.list_categories()]
            total = sum(c.count for c in categories)

            response = CategoriesResponse(
                categories=categories,
                total_facilities=total,
                message=SuccessMessages.CATEGORIES_LIST.format(len(categories), total),
            )
            return format_response(response, output_mode)

        except Exception as e:
            logger.error(f"airspace_list_categories failed: {e}")
            return format_response(ErrorResponse(error=str(e)), output_mode)

    @mcp.tool()
    async def airspace_surface_styles(output_mode: str = "json") -> str:
        """List restriction-surface kinds with their display styles and map paint expressions.

        Fetched surface features carry __surface_kind, __fill_color, __line_color,
        __fill_opacity and __line_width properties that the paint expressions read.

        Args:
            output_mode: "json" for structured data, "text" for human-readable summary

        Returns:
            Style per surface kind plus layer paint expressions
        """
        try:
            styles = [SurfaceStyleInfo(**s) for s in manager.surface_styles()]

            response = SurfaceStylesResponse(
                styles=styles,
                layer_styles=manager.layer_styles(),
                message=SuccessMessages.SURFACE_STYLES.format(len(styles)),
            )
            return format_response(response, output_mode)

        except Exception as e:
            logger.error(f"airspace_surface_styles failed: {e}")
            return format_response(ErrorResponse(error=str(e)), output_mode)
