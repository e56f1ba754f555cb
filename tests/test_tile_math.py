"""Tests for chuk_mcp_airspace.core.tile_math."""

import pytest

from chuk_mcp_airspace.core.geo_math import GeoPoint
from chuk_mcp_airspace.core.tile_math import (
    TileKey,
    TileRange,
    lat_to_tile_y,
    lng_to_tile_x,
    tile_bounds,
    tile_for_point,
    visible_range,
    visible_tiles,
)

JAPAN_BBOX = [122.0, 20.0, 154.0, 46.0]


class TestTileKey:
    def test_str(self):
        assert str(TileKey(8, 227, 100)) == "8/227/100"

    def test_parse(self):
        assert TileKey.parse("8/227/100") == TileKey(8, 227, 100)

    @pytest.mark.parametrize("bad", ["8/227", "a/b/c", "", "8/1/2/3"])
    def test_parse_invalid(self, bad):
        with pytest.raises(ValueError):
            TileKey.parse(bad)

    def test_hashable(self):
        assert len({TileKey(8, 1, 2), TileKey(8, 1, 2)}) == 1


class TestTileIndices:
    def test_origin(self):
        assert lng_to_tile_x(-180.0, 8) == 0
        assert lat_to_tile_y(85.0, 8) == 0

    def test_tokyo_at_z8(self):
        assert lng_to_tile_x(139.7528, 8) == 227
        assert lat_to_tile_y(35.6852, 8) == 100

    def test_equator_and_meridian(self):
        assert lng_to_tile_x(0.0, 1) == 1
        assert lat_to_tile_y(-0.0001, 1) == 1

    def test_clamped_to_grid(self):
        assert lng_to_tile_x(180.0, 8) == 255
        assert lat_to_tile_y(89.9, 8) == 0
        assert lat_to_tile_y(-89.9, 8) == 255

    def test_tile_for_point(self):
        assert tile_for_point(GeoPoint(35.6852, 139.7528), 8) == TileKey(8, 227, 100)


class TestVisibleRange:
    def test_single_tile(self):
        r = visible_range([139.70, 35.65, 139.75, 35.70], 8)
        assert r.count == 1
        assert (r.x_min, r.y_min) == (227, 100)

    def test_north_maps_to_y_min(self):
        r = visible_range([139.0, 34.0, 141.0, 37.0], 8)
        assert r.y_min == lat_to_tile_y(37.0, 8)
        assert r.y_max == lat_to_tile_y(34.0, 8)
        assert r.y_min < r.y_max

    def test_whole_country_exceeds_cap(self):
        r = visible_range(JAPAN_BBOX, 8)
        assert r.count > 64

    def test_count_matches_enumeration(self):
        r = visible_range([135.0, 34.0, 141.0, 37.0], 8)
        assert len(r.tiles()) == r.count


class TestVisibleTiles:
    def test_row_major_order(self):
        r = TileRange(z=8, x_min=10, x_max=11, y_min=20, y_max=21)
        assert [str(k) for k in r.tiles()] == ["8/10/20", "8/11/20", "8/10/21", "8/11/21"]

    def test_visible_tiles_uses_range(self):
        tiles = visible_tiles([139.70, 35.65, 139.75, 35.70], 8)
        assert tiles == [TileKey(8, 227, 100)]


class TestTileBounds:
    def test_bounds_contain_point(self):
        west, south, east, north = tile_bounds(TileKey(8, 227, 100))
        assert west <= 139.7528 <= east
        assert south <= 35.6852 <= north

    def test_width_at_z8(self):
        west, _, east, _ = tile_bounds(TileKey(8, 0, 0))
        assert east - west == pytest.approx(360 / 256)
