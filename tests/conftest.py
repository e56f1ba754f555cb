"""Shared test fixtures for chuk-mcp-airspace."""

import pytest
from unittest.mock import AsyncMock, MagicMock

from chuk_mcp_airspace.core.tile_math import TileKey

# Tokyo (Imperial Palace) sits in z=8 tile 227/100
TOKYO_TILE = TileKey(8, 227, 100)


def square_ring(west, south, east, north):
    """Closed counter-clockwise ring for an axis-aligned box."""
    return [[west, south], [east, south], [east, north], [west, north], [west, south]]


def make_feature(name, ring, holes=None, **props):
    """Raw upstream feature with a Polygon geometry."""
    return {
        "type": "Feature",
        "properties": {"name": name, **props},
        "geometry": {"type": "Polygon", "coordinates": [ring, *(holes or [])]},
    }


@pytest.fixture
def tokyo_surface_tile():
    """Raw kokuarea-style payload with two surfaces around central Tokyo."""
    return {
        "type": "FeatureCollection",
        "features": [
            make_feature(
                "東京国際空港 進入表面",
                square_ring(139.70, 35.60, 139.80, 35.65),
            ),
            make_feature(
                "東京国際空港 水平表面",
                square_ring(139.60, 35.55, 139.90, 35.75),
                holes=[square_ring(139.74, 35.68, 139.76, 35.69)],
            ),
        ],
    }


@pytest.fixture
def mock_fetcher(tokyo_surface_tile):
    """Async tile fetcher returning the Tokyo payload for every tile."""
    fetcher = AsyncMock(return_value=tokyo_surface_tile)
    fetcher.url_template = "https://tiles.example.com/kokuarea/{z}/{x}/{y}.geojson"
    fetcher.proxy_endpoint = None
    return fetcher


@pytest.fixture
def mock_artifact_store():
    """Mock artifact store."""
    store = AsyncMock()
    store.store = AsyncMock(return_value=None)
    store.retrieve = AsyncMock(return_value=b'{"type": "FeatureCollection", "features": []}')
    return store


@pytest.fixture
def mock_manager(mock_artifact_store, mock_fetcher):
    """AirspaceManager with mocked store and tile fetcher."""
    from chuk_mcp_airspace.core.airspace_manager import AirspaceManager

    manager = AirspaceManager(fetcher=mock_fetcher)
    manager._get_store = MagicMock(return_value=mock_artifact_store)
    return manager


@pytest.fixture
def mock_mcp():
    """Mock ChukMCPServer."""
    mcp = MagicMock()
    mcp.tool = MagicMock(return_value=lambda fn: fn)
    return mcp


@pytest.fixture
def capture_tools():
    """Return a helper that registers a tool module and collects its tools by name."""

    def _capture(register, manager):
        tools = {}
        mcp = MagicMock()

        def capture_tool(**kwargs):
            def decorator(fn):
                tools[fn.__name__] = fn
                return fn

            return decorator

        mcp.tool = capture_tool
        register(mcp, manager)
        return tools

    return _capture
