"""Tests for chuk_mcp_airspace.core.airport_catalog and the compiled-in airport list."""

import pytest

from chuk_mcp_airspace.airports import AIRPORTS, HELIPORTS, MAJOR_AIRPORTS
from chuk_mcp_airspace.constants import AIRPORT_TYPES, AirportType
from chuk_mcp_airspace.core.airport_catalog import (
    Airport,
    AirportCatalog,
    load_default_airports,
)
from chuk_mcp_airspace.core.geo_math import GeoPoint

HANEDA = GeoPoint(lat=35.5494, lng=139.7798)
IWAKUNI = GeoPoint(lat=34.1456, lng=132.2361)
TOKYO_HELIPORT = GeoPoint(lat=35.6403, lng=139.8372)
PACIFIC = GeoPoint(lat=30.0, lng=150.0)


def _record(airport_id, lat=35.0, lng=139.0, radius_km=6.0, airport_type="domestic", **kw):
    return {
        "id": airport_id,
        "name": airport_id,
        "lat": lat,
        "lng": lng,
        "radius_km": radius_km,
        "airport_type": airport_type,
        **kw,
    }


@pytest.fixture(scope="module")
def catalog():
    return load_default_airports()


# ── Airport ───────────────────────────────────────────────────────────


class TestAirport:
    def test_from_record(self):
        airport = Airport.from_record(_record("AAA", name_en="Alpha Airport"))
        assert airport.center == GeoPoint(lat=35.0, lng=139.0)
        assert airport.name_en == "Alpha Airport"
        assert airport.type_label == AIRPORT_TYPES["domestic"]
        assert airport.zone_type == "AIRPORT"

    def test_english_name_defaults_to_name(self):
        assert Airport.from_record(_record("AAA")).name_en == "AAA"

    def test_heliport_zone_type(self):
        heliport = Airport.from_record(_record("H", radius_km=0.2, airport_type="heliport"))
        assert heliport.is_heliport
        assert heliport.zone_type == "HELIPORT"
        assert not heliport.no_fly_law

    def test_no_fly_law_radius(self):
        assert Airport.from_record(_record("BIG", radius_km=24.0)).no_fly_law
        assert not Airport.from_record(_record("SMALL", radius_km=6.0)).no_fly_law

    def test_missing_coordinate(self):
        record = _record("AAA")
        del record["lat"]
        with pytest.raises(ValueError, match="Invalid airport 'AAA': missing 'lat'"):
            Airport.from_record(record)

    def test_invalid_type(self):
        with pytest.raises(ValueError, match="Invalid airport type 'seaport'"):
            Airport.from_record(_record("AAA", airport_type="seaport"))

    @pytest.mark.parametrize("radius", [0, -1.0])
    def test_invalid_radius(self, radius):
        with pytest.raises(ValueError, match="radius_km must be > 0"):
            Airport.from_record(_record("AAA", radius_km=radius))

    def test_to_dict(self):
        d = Airport.from_record(_record("AAA", radius_km=24.0)).to_dict()
        assert d["lat"] == 35.0
        assert d["lng"] == 139.0
        assert d["no_fly_law"] is True
        assert d["zone_type"] == "AIRPORT"


# ── AirportCatalog ────────────────────────────────────────────────────


class TestAirportCatalog:
    def test_heliports_held_apart(self):
        small = AirportCatalog([_record("A")], [_record("H", airport_type="heliport")])
        assert len(small) == 1
        assert [a.id for a in small.airports] == ["A"]
        assert [a.id for a in small.heliports] == ["H"]
        assert [a.id for a in small.with_heliports()] == ["A", "H"]

    def test_heliport_in_airport_list_is_moved(self):
        small = AirportCatalog([_record("A"), _record("H", airport_type="heliport")])
        assert [a.id for a in small.heliports] == ["H"]

    def test_duplicate_id(self):
        with pytest.raises(ValueError, match="Duplicate airport id 'A'"):
            AirportCatalog([_record("A")], [_record("A", airport_type="heliport")])

    def test_get(self, catalog):
        assert catalog.get("HND").name == "東京国際空港（羽田）"
        assert catalog.get("RJTI").is_heliport
        assert catalog.get("nope") is None


class TestDefaultCatalog:
    def test_loads_every_record(self, catalog):
        assert len(catalog) == len(AIRPORTS)
        assert len(catalog.heliports) == len(HELIPORTS)

    def test_every_type_represented(self, catalog):
        for airport_type in AIRPORT_TYPES:
            assert catalog.by_type(airport_type)

    def test_no_fly_law_airports(self, catalog):
        ids = [a.id for a in catalog.no_fly_law_airports()]
        assert ids == ["NRT", "HND", "KIX", "ITM", "NGO", "CTS", "FUK", "OKA"]
        assert len(ids) < len(MAJOR_AIRPORTS)

    def test_military_airfields(self, catalog):
        ids = {a.id for a in catalog.by_type(AirportType.MILITARY)}
        assert {"RJTY", "RODN", "ROTM"} <= ids


class TestContainment:
    def test_haneda_centre(self, catalog):
        match = catalog.containing(HANEDA)
        assert match.airport.id == "HND"
        assert match.distance_km == pytest.approx(0.0)

    def test_open_ocean(self, catalog):
        assert catalog.containing(PACIFIC) is None
        assert catalog.hits(PACIFIC) == []

    def test_heliports_excluded_by_default(self, catalog):
        assert all(not m.airport.is_heliport for m in catalog.hits(TOKYO_HELIPORT))

    def test_hits_nearest_first(self, catalog):
        hits = catalog.hits(TOKYO_HELIPORT, include_heliports=True)
        assert [m.airport.id for m in hits][:2] == ["RJTI", "HND"]
        assert hits[0].distance_km <= hits[1].distance_km

    def test_first_match_keeps_catalog_order(self, catalog):
        # Heliports are scanned after airports even when nearer
        match = catalog.containing(TOKYO_HELIPORT, include_heliports=True)
        assert match.airport.id == "HND"

    def test_shared_site_reports_both(self, catalog):
        assert [m.airport.id for m in catalog.hits(IWAKUNI)] == ["IWK", "RJOI"]


class TestCrossing:
    def test_leg_through_airport_with_clear_endpoints(self, catalog):
        start = GeoPoint(lat=33.7489, lng=129.70)
        end = GeoPoint(lat=33.7489, lng=129.87)
        assert catalog.containing(start) is None
        assert catalog.containing(end) is None
        assert [a.id for a in catalog.crossing(start, end)] == ["IKI"]

    def test_heliports_only_when_requested(self, catalog):
        start = GeoPoint(lat=35.6667, lng=139.74)
        end = GeoPoint(lat=35.6667, lng=139.76)
        assert [a.id for a in catalog.crossing(start, end)] == ["HND"]
        hits = catalog.crossing(start, end, include_heliports=True)
        assert [a.id for a in hits] == ["HND", "HLP-TORA"]

    def test_leg_over_open_ocean(self, catalog):
        assert catalog.crossing(PACIFIC, GeoPoint(lat=31.0, lng=151.0)) == []


class TestGeoJSON:
    def test_airport_layer(self, catalog):
        fc = catalog.airport_geojson()
        assert fc["type"] == "FeatureCollection"
        assert len(fc["features"]) == len(catalog)
        feature = fc["features"][0]
        assert feature["properties"]["id"] == "NRT"
        assert feature["properties"]["zone_type"] == "AIRPORT"
        assert feature["properties"]["radius_km"] == 24.0
        assert feature["geometry"]["type"] == "Polygon"

    def test_heliport_layer(self, catalog):
        fc = catalog.heliport_geojson()
        assert len(fc["features"]) == len(HELIPORTS)
        assert {f["properties"]["zone_type"] for f in fc["features"]} == {"HELIPORT"}
        assert {f["properties"]["type"] for f in fc["features"]} == {"heliport"}
