"""Comprehensive tests for chuk_mcp_airspace.tools.discovery.api module.

Tests all four discovery tools: airspace_status, airspace_capabilities,
airspace_list_categories and airspace_surface_styles. Covers JSON/text
output modes and error handling.
"""

import json
import os

import pytest
from unittest.mock import MagicMock, patch

from chuk_mcp_airspace.constants import (
    ALL_FACILITY_TYPES,
    ALL_SURFACE_KINDS,
    ServerConfig,
)
from chuk_mcp_airspace.tools.discovery.api import register_discovery_tools


@pytest.fixture
def discovery_tools(mock_manager, capture_tools):
    return capture_tools(register_discovery_tools, mock_manager)


class TestRegistration:
    def test_four_tools(self, discovery_tools):
        assert set(discovery_tools) == {
            "airspace_status",
            "airspace_capabilities",
            "airspace_list_categories",
            "airspace_surface_styles",
        }


# ── airspace_status ────────────────────────────────────────────────


class TestAirspaceStatus:
    async def test_json(self, discovery_tools, mock_manager):
        result = json.loads(await discovery_tools["airspace_status"]())
        assert result["server"] == ServerConfig.NAME
        assert result["version"] == ServerConfig.VERSION
        assert result["facility_count"] == len(mock_manager.catalog)
        assert result["airport_count"] == len(mock_manager.airport_catalog)
        assert result["cached_tiles"] == 0
        assert result["artifact_store_available"] is True

    async def test_storage_provider_from_env(self, discovery_tools):
        with patch.dict(os.environ, {"CHUK_ARTIFACTS_PROVIDER": "s3"}):
            result = json.loads(await discovery_tools["airspace_status"]())
        assert result["storage_provider"] == "s3"

    async def test_store_unavailable(self, discovery_tools, mock_manager):
        mock_manager._get_store = MagicMock(side_effect=RuntimeError("no store"))
        result = json.loads(await discovery_tools["airspace_status"]())
        assert result["artifact_store_available"] is False

    async def test_reflects_cache(self, discovery_tools, mock_manager):
        await mock_manager.check_surface(35.62, 139.75)
        result = json.loads(await discovery_tools["airspace_status"]())
        assert result["cached_tiles"] == 1
        assert result["tile_fetches"] == 1

    async def test_text(self, discovery_tools):
        text = await discovery_tools["airspace_status"](output_mode="text")
        assert text.startswith(f"{ServerConfig.NAME} v{ServerConfig.VERSION}")
        assert "Facilities:" in text
        assert "Airports:" in text

    async def test_error(self, discovery_tools, mock_manager):
        mock_manager.cache_info = MagicMock(side_effect=RuntimeError("broken"))
        result = json.loads(await discovery_tools["airspace_status"]())
        assert result == {"error": "broken"}


# ── airspace_capabilities ──────────────────────────────────────────


class TestAirspaceCapabilities:
    async def test_json(self, discovery_tools):
        result = json.loads(await discovery_tools["airspace_capabilities"]())
        assert result["facility_types"] == ALL_FACILITY_TYPES
        assert result["surface_kinds"] == ALL_SURFACE_KINDS
        assert result["zone_layers"] == ["red", "yellow", "all", "legacy", "airport", "heliport"]
        assert result["airport_types"] == ["international", "domestic", "military", "heliport"]
        assert result["tile_zoom"] == 8
        assert result["max_tiles_per_request"] == 64
        assert result["tool_count"] == 15
        assert "[lon, lat]" in result["llm_guidance"]

    async def test_text(self, discovery_tools):
        text = await discovery_tools["airspace_capabilities"](output_mode="text")
        assert "Tools: 15" in text
        assert "z=8, max 64 per request" in text


# ── airspace_list_categories ───────────────────────────────────────


class TestListCategories:
    async def test_json(self, discovery_tools, mock_manager):
        result = json.loads(await discovery_tools["airspace_list_categories"]())
        assert len(result["categories"]) == 13
        assert result["total_facilities"] == len(mock_manager.catalog)
        types = [c["facility_type"] for c in result["categories"]]
        assert types == ALL_FACILITY_TYPES

    async def test_text(self, discovery_tools):
        text = await discovery_tools["airspace_list_categories"](output_mode="text")
        assert "nuclear: 原子力施設" in text

    async def test_error(self, discovery_tools, mock_manager):
        mock_manager.list_categories = MagicMock(side_effect=RuntimeError("bad catalog"))
        result = json.loads(await discovery_tools["airspace_list_categories"]())
        assert "bad catalog" in result["error"]


# ── airspace_surface_styles ────────────────────────────────────────


class TestSurfaceStyles:
    async def test_json(self, discovery_tools):
        result = json.loads(await discovery_tools["airspace_surface_styles"]())
        assert [s["kind"] for s in result["styles"]] == ALL_SURFACE_KINDS
        assert "fill_paint" in result["layer_styles"]
        assert result["message"] == "7 restriction surface kinds"

    async def test_text(self, discovery_tools):
        text = await discovery_tools["airspace_surface_styles"](output_mode="text")
        assert "approach: 進入表面 / Approach Surface" in text
