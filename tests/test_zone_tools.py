"""Comprehensive tests for chuk_mcp_airspace.tools.zones.api module.

Tests zone_list, zone_check_point, zone_nearby and zone_geojson, covering
filters, coordinate order, artifact storage, text output and error paths.
"""

import json
from unittest.mock import AsyncMock

import pytest

from chuk_mcp_airspace.core.geo_math import GeoPoint, destination_point
from chuk_mcp_airspace.tools.zones.api import register_zones_tools

PALACE_LON, PALACE_LAT = 139.7528, 35.6852


@pytest.fixture
def zone_tools(mock_manager, capture_tools):
    return capture_tools(register_zones_tools, mock_manager)


class TestRegistration:
    def test_six_tools(self, zone_tools):
        assert set(zone_tools) == {
            "zone_list",
            "zone_check_point",
            "zone_nearby",
            "zone_geojson",
            "airport_list",
            "airport_check_point",
        }


# ── zone_list ──────────────────────────────────────────────────────


class TestZoneList:
    async def test_all(self, zone_tools, mock_manager):
        result = json.loads(await zone_tools["zone_list"]())
        assert result["count"] == len(mock_manager.catalog)
        assert result["facilities"][0]["name"] == "皇居"

    async def test_filters(self, zone_tools):
        result = json.loads(await zone_tools["zone_list"](zone_color="red", facility_type="nuclear"))
        assert result["count"] > 10
        assert all(f["facility_type"] == "nuclear" for f in result["facilities"])
        assert result["zone_color"] == "red"

    async def test_bbox(self, zone_tools):
        result = json.loads(await zone_tools["zone_list"](bbox=[139.74, 35.67, 139.76, 35.69]))
        ids = [f["id"] for f in result["facilities"]]
        assert "imperial-palace" in ids
        assert "npp-genkai" not in ids

    async def test_invalid_color(self, zone_tools):
        result = json.loads(await zone_tools["zone_list"](zone_color="blue"))
        assert "Invalid zone color" in result["error"]

    async def test_text(self, zone_tools):
        text = await zone_tools["zone_list"](facility_type="airport", output_mode="text")
        assert text.splitlines()[0] == "3 facilities matched"


# ── zone_check_point ───────────────────────────────────────────────


class TestZoneCheckPoint:
    async def test_palace(self, zone_tools):
        result = json.loads(await zone_tools["zone_check_point"](lon=PALACE_LON, lat=PALACE_LAT))
        assert result["in_zone"] is True
        assert result["zone_color"] == "red"
        assert result["facility"]["id"] == "imperial-palace"
        assert result["lat"] == PALACE_LAT
        assert result["lng"] == PALACE_LON
        assert result["message"] == "Inside red zone: 皇居"

    async def test_clear(self, zone_tools):
        result = json.loads(await zone_tools["zone_check_point"](lon=150.0, lat=30.0))
        assert result["in_zone"] is False
        assert result["facility"] is None
        assert result["message"] == "Not inside any no-fly zone"

    async def test_perimeter(self, zone_tools):
        point = destination_point(GeoPoint(PALACE_LAT, PALACE_LON), 0.95, 0)
        result = json.loads(
            await zone_tools["zone_check_point"](
                lon=point.lng, lat=point.lat, include_perimeter=True
            )
        )
        assert result["zone_color"] == "yellow"
        assert result["facility"]["is_perimeter"] is True
        assert result["include_perimeter"] is True

    async def test_invalid_latitude(self, zone_tools):
        result = json.loads(await zone_tools["zone_check_point"](lon=139.0, lat=99.0))
        assert "Latitude" in result["error"]

    async def test_text(self, zone_tools):
        text = await zone_tools["zone_check_point"](
            lon=PALACE_LON, lat=PALACE_LAT, output_mode="text"
        )
        assert "Inside red zone" in text
        assert "Imperial Palace" in text


# ── zone_nearby ────────────────────────────────────────────────────


class TestZoneNearby:
    async def test_nearest_first(self, zone_tools):
        result = json.loads(
            await zone_tools["zone_nearby"](lon=PALACE_LON, lat=PALACE_LAT, max_distance_km=3.0)
        )
        assert result["count"] == len(result["facilities"])
        assert result["facilities"][0]["id"] == "imperial-palace"
        distances = [f["distance_km"] for f in result["facilities"]]
        assert distances == sorted(distances)

    async def test_invalid_distance(self, zone_tools):
        result = json.loads(
            await zone_tools["zone_nearby"](lon=PALACE_LON, lat=PALACE_LAT, max_distance_km=-1)
        )
        assert "max_distance_km" in result["error"]

    async def test_nothing_nearby(self, zone_tools):
        result = json.loads(await zone_tools["zone_nearby"](lon=150.0, lat=30.0))
        assert result["count"] == 0
        assert result["message"] == "0 facilities within 10.0 km"


# ── zone_geojson ───────────────────────────────────────────────────


class TestZoneGeoJSON:
    async def test_inline(self, zone_tools, mock_manager):
        result = json.loads(await zone_tools["zone_geojson"](layer="red"))
        assert result["geojson"]["type"] == "FeatureCollection"
        assert result["feature_count"] == len(mock_manager.catalog.by_zone("red"))
        assert result["artifact_ref"] is None

    async def test_store(self, zone_tools, mock_artifact_store):
        result = json.loads(await zone_tools["zone_geojson"](layer="nuclear", store=True))
        assert result["geojson"] is None
        assert result["artifact_ref"].startswith("airspace/")
        metadata = mock_artifact_store.store.call_args.kwargs["metadata"]
        assert metadata["layer"] == "nuclear"
        assert metadata["feature_count"] == result["feature_count"]

    async def test_store_failure(self, zone_tools, mock_artifact_store):
        mock_artifact_store.store = AsyncMock(side_effect=RuntimeError("store down"))
        result = json.loads(await zone_tools["zone_geojson"](store=True))
        assert result == {"error": "store down"}

    async def test_invalid_layer(self, zone_tools):
        result = json.loads(await zone_tools["zone_geojson"](layer="purple"))
        assert "Invalid zone layer" in result["error"]

    async def test_text(self, zone_tools):
        text = await zone_tools["zone_geojson"](layer="legacy", output_mode="text")
        assert "(legacy layer)" in text

    async def test_airport_layer(self, zone_tools, mock_manager):
        result = json.loads(await zone_tools["zone_geojson"](layer="airport"))
        assert result["feature_count"] == len(mock_manager.airport_catalog)
        properties = result["geojson"]["features"][0]["properties"]
        assert properties["zone_type"] == "AIRPORT"


# ── airport_list ───────────────────────────────────────────────────


class TestAirportList:
    async def test_all(self, zone_tools, mock_manager):
        result = json.loads(await zone_tools["airport_list"]())
        assert result["count"] == len(mock_manager.airport_catalog)
        assert result["airports"][0]["id"] == "NRT"
        assert result["include_heliports"] is False

    async def test_no_fly_law_only(self, zone_tools):
        result = json.loads(await zone_tools["airport_list"](no_fly_law_only=True))
        assert result["count"] == 8
        assert all(a["no_fly_law"] for a in result["airports"])
        assert all(a["radius_km"] == 24.0 for a in result["airports"])

    async def test_heliports(self, zone_tools):
        result = json.loads(await zone_tools["airport_list"](airport_type="heliport"))
        assert result["count"] > 0
        assert {a["zone_type"] for a in result["airports"]} == {"HELIPORT"}

    async def test_invalid_type(self, zone_tools):
        result = json.loads(await zone_tools["airport_list"](airport_type="spaceport"))
        assert "Invalid airport type" in result["error"]

    async def test_text(self, zone_tools):
        text = await zone_tools["airport_list"](no_fly_law_only=True, output_mode="text")
        lines = text.splitlines()
        assert lines[0] == "8 airports matched"
        assert lines[2].startswith("  HND 東京国際空港（羽田）")


# ── airport_check_point ────────────────────────────────────────────


class TestAirportCheckPoint:
    async def test_inside(self, zone_tools):
        result = json.loads(await zone_tools["airport_check_point"](lon=139.75, lat=35.62))
        assert result["in_zone"] is True
        assert result["airport"]["id"] == "HND"
        assert result["airport"]["distance_km"] > 0
        assert result["lng"] == 139.75
        assert [h["id"] for h in result["hits"]] == ["HND"]

    async def test_clear(self, zone_tools):
        result = json.loads(await zone_tools["airport_check_point"](lon=150.0, lat=30.0))
        assert result["in_zone"] is False
        assert result["airport"] is None
        assert result["message"] == "Not inside any airport zone"

    async def test_heliport(self, zone_tools):
        result = json.loads(
            await zone_tools["airport_check_point"](
                lon=139.8372, lat=35.6403, include_heliports=True
            )
        )
        assert result["hits"][0]["id"] == "RJTI"
        assert result["include_heliports"] is True

    async def test_invalid_coordinates(self, zone_tools):
        result = json.loads(await zone_tools["airport_check_point"](lon=200.0, lat=35.0))
        assert "Longitude" in result["error"]

    async def test_text(self, zone_tools):
        text = await zone_tools["airport_check_point"](
            lon=139.75, lat=35.62, output_mode="text"
        )
        assert "Inside airport zone: 東京国際空港（羽田）" in text
        assert "  HND " in text
