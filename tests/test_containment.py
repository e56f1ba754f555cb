"""Tests for chuk_mcp_airspace.core.containment."""

from unittest.mock import AsyncMock

import pytest

from chuk_mcp_airspace.core.containment import (
    NOT_IN_SURFACE,
    ContainmentEngine,
    point_in_polygon,
    point_in_ring,
)
from chuk_mcp_airspace.core.geo_math import GeoPoint
from chuk_mcp_airspace.core.surface_cache import SurfaceTileCache
from chuk_mcp_airspace.core.tile_math import TileKey

UNIT_SQUARE = [[0, 0], [1, 0], [1, 1], [0, 1], [0, 0]]
INNER_HOLE = [[0.4, 0.4], [0.6, 0.4], [0.6, 0.6], [0.4, 0.6], [0.4, 0.4]]


class TestPointInRing:
    def test_inside(self):
        assert point_in_ring(0.5, 0.5, UNIT_SQUARE)

    def test_outside(self):
        assert not point_in_ring(1.5, 0.5, UNIT_SQUARE)
        assert not point_in_ring(0.5, -0.1, UNIT_SQUARE)

    def test_concave_notch(self):
        # U-shape open to the north
        ring = [[0, 0], [3, 0], [3, 3], [2, 3], [2, 1], [1, 1], [1, 3], [0, 3], [0, 0]]
        assert point_in_ring(0.5, 2, ring)
        assert not point_in_ring(1.5, 2, ring)

    def test_orientation_independent(self):
        assert point_in_ring(0.5, 0.5, list(reversed(UNIT_SQUARE)))


class TestPointInPolygon:
    def test_polygon(self):
        geom = {"type": "Polygon", "coordinates": [UNIT_SQUARE]}
        assert point_in_polygon(GeoPoint(lat=0.5, lng=0.5), geom)

    def test_hole_counts_as_outside(self):
        geom = {"type": "Polygon", "coordinates": [UNIT_SQUARE, INNER_HOLE]}
        assert not point_in_polygon(GeoPoint(lat=0.5, lng=0.5), geom)
        assert point_in_polygon(GeoPoint(lat=0.2, lng=0.2), geom)

    def test_multipolygon(self):
        far = [[[10, 10], [11, 10], [11, 11], [10, 11], [10, 10]]]
        geom = {"type": "MultiPolygon", "coordinates": [[UNIT_SQUARE], far]}
        assert point_in_polygon(GeoPoint(lat=10.5, lng=10.5), geom)
        assert not point_in_polygon(GeoPoint(lat=5, lng=5), geom)

    @pytest.mark.parametrize(
        "geom",
        [
            None,
            {"type": "Point", "coordinates": [0.5, 0.5]},
            {"type": "LineString", "coordinates": [[0, 0], [1, 1]]},
            {"type": "Polygon", "coordinates": None},
            {"type": "Polygon", "coordinates": [[[0, 0], [1]]]},
            {"type": "Polygon", "coordinates": []},
        ],
    )
    def test_unsupported_or_malformed_is_outside(self, geom):
        assert not point_in_polygon(GeoPoint(lat=0.5, lng=0.5), geom)


class TestContainmentEngine:
    @pytest.fixture
    def engine(self, mock_fetcher):
        return ContainmentEngine(SurfaceTileCache(mock_fetcher))

    async def test_point_in_approach_surface(self, engine):
        result = await engine.check_point(GeoPoint(lat=35.62, lng=139.75))
        assert result.in_surface
        assert result.kind == "approach"
        assert result.label == "進入表面"
        assert result.label_en == "Approach Surface"
        assert result.tile == "8/227/100"

    async def test_point_in_horizontal_surface(self, engine):
        result = await engine.check_point(GeoPoint(lat=35.70, lng=139.65))
        assert result.kind == "horizontal"

    async def test_point_in_hole_is_clear(self, engine):
        result = await engine.check_point(GeoPoint(lat=35.6852, lng=139.7528))
        assert result == NOT_IN_SURFACE

    async def test_point_outside_all_surfaces(self, engine):
        result = await engine.check_point(GeoPoint(lat=35.80, lng=139.75))
        assert not result.in_surface
        assert result.kind is None

    async def test_failed_tile_reads_as_clear(self):
        fetcher = AsyncMock(side_effect=TimeoutError("slow"))
        engine = ContainmentEngine(SurfaceTileCache(fetcher))
        result = await engine.check_point(GeoPoint(lat=35.62, lng=139.75))
        assert result == NOT_IN_SURFACE

    async def test_batch_one_fetch_per_tile(self, engine, mock_fetcher):
        points = [
            ("a", GeoPoint(lat=35.62, lng=139.75)),
            ("b", GeoPoint(lat=35.70, lng=139.65)),
            ("c", GeoPoint(lat=35.80, lng=139.75)),
        ]
        results = await engine.check_points_batch(points)

        assert list(results) == ["a", "b", "c"]
        assert results["a"].kind == "approach"
        assert results["b"].kind == "horizontal"
        assert not results["c"].in_surface
        mock_fetcher.assert_awaited_once_with(TileKey(8, 227, 100))

    async def test_batch_across_tiles(self, engine, mock_fetcher):
        points = [
            (0, GeoPoint(lat=35.62, lng=139.75)),
            (1, GeoPoint(lat=34.69, lng=135.50)),
        ]
        results = await engine.check_points_batch(points)

        assert results[0].in_surface
        assert not results[1].in_surface
        assert mock_fetcher.await_count == 2

    async def test_empty_batch(self, engine, mock_fetcher):
        assert await engine.check_points_batch([]) == {}
        mock_fetcher.assert_not_awaited()

    # ── legs ───────────────────────────────────────────────────────

    async def test_leg_crossing_surface_with_clear_endpoints(self, engine, mock_fetcher):
        start = GeoPoint(lat=35.50, lng=139.75)
        end = GeoPoint(lat=35.80, lng=139.75)
        assert not (await engine.check_point(start)).in_surface
        assert not (await engine.check_point(end)).in_surface

        [result] = await engine.check_legs([(start, end)])
        assert result.in_surface
        assert result.kind == "approach"
        assert result.tile == "8/227/100"
        assert mock_fetcher.await_count == 1

    async def test_leg_inside_hole_is_clear(self, engine):
        leg = (GeoPoint(lat=35.685, lng=139.745), GeoPoint(lat=35.685, lng=139.755))
        assert await engine.check_legs([leg]) == [NOT_IN_SURFACE]

    async def test_leg_outside_all_surfaces(self, engine):
        leg = (GeoPoint(lat=35.80, lng=139.70), GeoPoint(lat=35.80, lng=139.80))
        assert await engine.check_legs([leg]) == [NOT_IN_SURFACE]

    async def test_zero_length_leg_matches_like_a_point(self, engine):
        point = GeoPoint(lat=35.62, lng=139.75)
        [result] = await engine.check_legs([(point, point)])
        assert result.kind == "approach"

    async def test_legs_share_tile_resolution(self, engine, mock_fetcher):
        legs = [
            (GeoPoint(lat=35.62, lng=139.75), GeoPoint(lat=35.70, lng=139.65)),
            (GeoPoint(lat=35.70, lng=139.65), GeoPoint(lat=35.80, lng=139.75)),
        ]
        results = await engine.check_legs(legs)
        assert [r.kind for r in results] == ["approach", "horizontal"]
        mock_fetcher.assert_awaited_once_with(TileKey(8, 227, 100))

    async def test_leg_resolves_every_tile_under_its_extent(self, engine, mock_fetcher):
        # Tokyo to Osaka spans tiles x 224..227, y 100..101
        leg = (GeoPoint(lat=35.62, lng=139.75), GeoPoint(lat=34.69, lng=135.50))
        [result] = await engine.check_legs([leg])
        assert result.in_surface
        assert mock_fetcher.await_count == 8

    async def test_leg_over_tile_cap_is_skipped(self, engine, mock_fetcher):
        leg = (GeoPoint(lat=20.0, lng=122.0), GeoPoint(lat=46.0, lng=154.0))
        assert await engine.check_legs([leg]) == [NOT_IN_SURFACE]
        mock_fetcher.assert_not_awaited()

    async def test_malformed_geometry_skipped_for_legs(self):
        fetcher = AsyncMock(
            return_value={
                "type": "FeatureCollection",
                "features": [
                    {
                        "type": "Feature",
                        "properties": {"name": "進入表面"},
                        "geometry": {"type": "Polygon", "coordinates": [[[0, 0], [1]]]},
                    },
                    {
                        "type": "Feature",
                        "properties": {"name": "水平表面"},
                        "geometry": {
                            "type": "Polygon",
                            "coordinates": [
                                [[139.6, 35.5], [139.9, 35.5], [139.9, 35.7], [139.6, 35.7], [139.6, 35.5]]
                            ],
                        },
                    },
                ],
            }
        )
        engine = ContainmentEngine(SurfaceTileCache(fetcher))
        leg = (GeoPoint(lat=35.60, lng=139.50), GeoPoint(lat=35.60, lng=140.00))
        [result] = await engine.check_legs([leg])
        assert result.kind == "horizontal"

    async def test_no_legs(self, engine, mock_fetcher):
        assert await engine.check_legs([]) == []
        mock_fetcher.assert_not_awaited()
