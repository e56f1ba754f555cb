#!/usr/bin/env python3
"""
Async Airspace MCP Server using chuk-mcp-server

Drone airspace restriction checks over Japan. Serves the no-fly zone
catalog, fetches and classifies airport restriction surfaces from GSI
tiles, and stores exported GeoJSON in chuk-artifacts.

Storage is managed through chuk-mcp-server's built-in artifact store context.
"""

import logging

from chuk_mcp_server import ChukMCPServer

from .core.airspace_manager import AirspaceManager
from .tools.discovery import register_discovery_tools
from .tools.surfaces import register_surfaces_tools
from .tools.zones import register_zones_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-airspace")

# Create airspace manager instance
manager = AirspaceManager()

# Register all tool modules
register_discovery_tools(mcp, manager)
register_zones_tools(mcp, manager)
register_surfaces_tools(mcp, manager)

# Run the server
if __name__ == "__main__":
    logger.info("Starting Airspace MCP Server...")
    logger.info("Storage: Using chuk-mcp-server artifact store context")
    mcp.run(stdio=True)
