"""
Constants for chuk-mcp-airspace server.

All magic strings, surface styles, limits, and configuration values live here.
"""


class ServerConfig:
    NAME = "chuk-mcp-airspace"
    VERSION = "0.1.0"
    DESCRIPTION = "Drone Airspace Restriction Zones, Restriction Surfaces & Containment MCP Server"


class StorageProvider:
    MEMORY = "memory"
    S3 = "s3"
    FILESYSTEM = "filesystem"


class SessionProvider:
    MEMORY = "memory"
    REDIS = "redis"


class EnvVar:
    ARTIFACTS_PROVIDER = "CHUK_ARTIFACTS_PROVIDER"
    BUCKET_NAME = "BUCKET_NAME"
    REDIS_URL = "REDIS_URL"
    ARTIFACTS_PATH = "CHUK_ARTIFACTS_PATH"
    AWS_ACCESS_KEY_ID = "AWS_ACCESS_KEY_ID"
    AWS_SECRET_ACCESS_KEY = "AWS_SECRET_ACCESS_KEY"
    AWS_ENDPOINT_URL_S3 = "AWS_ENDPOINT_URL_S3"
    MCP_STDIO = "MCP_STDIO"
    TILE_URL = "AIRSPACE_TILE_URL"
    TILE_TIMEOUT = "AIRSPACE_TILE_TIMEOUT"


# ---------------------------------------------------------------------------
# No-fly zone facilities
# ---------------------------------------------------------------------------


class ZoneColor:
    RED = "red"
    YELLOW = "yellow"


ZONE_COLORS = [ZoneColor.RED, ZoneColor.YELLOW]


class ZoneType:
    RED_ZONE = "RED_ZONE"
    YELLOW_ZONE = "YELLOW_ZONE"


class FacilityType:
    GOVERNMENT = "government"
    IMPERIAL = "imperial"
    NUCLEAR = "nuclear"
    DEFENSE = "defense"
    FOREIGN_MISSION = "foreign_mission"
    PREFECTURE = "prefecture"
    POLICE = "police"
    PRISON = "prison"
    MILITARY_JSDF = "military_jsdf"
    ENERGY = "energy"
    WATER = "water"
    INFRASTRUCTURE = "infrastructure"
    AIRPORT = "airport"


FACILITY_TYPES: dict[str, str] = {
    FacilityType.GOVERNMENT: "政府機関",
    FacilityType.IMPERIAL: "皇室関連",
    FacilityType.NUCLEAR: "原子力施設",
    FacilityType.DEFENSE: "防衛施設",
    FacilityType.FOREIGN_MISSION: "外国公館",
    FacilityType.PREFECTURE: "都道府県庁",
    FacilityType.POLICE: "警察施設",
    FacilityType.PRISON: "刑務所・拘置所",
    FacilityType.MILITARY_JSDF: "自衛隊施設",
    FacilityType.ENERGY: "エネルギー施設",
    FacilityType.WATER: "ダム・浄水場",
    FacilityType.INFRASTRUCTURE: "その他重要インフラ",
    FacilityType.AIRPORT: "空港",
}

ALL_FACILITY_TYPES = list(FACILITY_TYPES.keys())


class OperationalStatus:
    OPERATIONAL = "operational"
    STOPPED = "stopped"
    DECOMMISSIONING = "decommissioning"
    DECOMMISSIONED = "decommissioned"
    PLANNED = "planned"


OPERATIONAL_STATUSES = [
    OperationalStatus.OPERATIONAL,
    OperationalStatus.STOPPED,
    OperationalStatus.DECOMMISSIONING,
    OperationalStatus.DECOMMISSIONED,
    OperationalStatus.PLANNED,
]

# Red-zone facilities are surrounded by a 300 m yellow perimeter
YELLOW_ZONE_BUFFER_KM = 0.3
PERIMETER_ID_SUFFIX = "-perimeter"
PERIMETER_NAME_SUFFIX = "周辺"
PERIMETER_NAME_EN_SUFFIX = " (Perimeter)"

DEFAULT_NEARBY_KM = 10.0

# Zone GeoJSON layers (any facility type is also accepted as a layer)
ZONE_LAYERS = ["red", "yellow", "all", "legacy", "airport", "heliport"]


# ---------------------------------------------------------------------------
# Airports and heliports
# ---------------------------------------------------------------------------


class AirportType:
    INTERNATIONAL = "international"
    DOMESTIC = "domestic"
    MILITARY = "military"
    HELIPORT = "heliport"


AIRPORT_TYPES: dict[str, str] = {
    AirportType.INTERNATIONAL: "国際空港",
    AirportType.DOMESTIC: "国内空港",
    AirportType.MILITARY: "軍用飛行場",
    AirportType.HELIPORT: "ヘリポート",
}

ALL_AIRPORT_TYPES = list(AIRPORT_TYPES.keys())

AIRPORT_ZONE_TYPE = "AIRPORT"
HELIPORT_ZONE_TYPE = "HELIPORT"

# Airports designated under the drone act carry a 24 km restricted radius
NO_FLY_LAW_RADIUS_KM = 24.0


# ---------------------------------------------------------------------------
# Geometry
# ---------------------------------------------------------------------------

EARTH_RADIUS_KM = 6371.0
DEFAULT_CIRCLE_SEGMENTS = 32

# Planar circle approximation used by the legacy GeoJSON generators
LEGACY_KM_PER_DEGREE = 111.32
LEGACY_CIRCLE_SEGMENTS = 64

MAX_MERCATOR_LAT = 85.05112878


# ---------------------------------------------------------------------------
# Restriction surfaces (GSI kokuarea tiles)
# ---------------------------------------------------------------------------


class SurfaceKind:
    APPROACH = "approach"
    TRANSITIONAL = "transitional"
    HORIZONTAL = "horizontal"
    CONICAL = "conical"
    OUTER_HORIZONTAL = "outer_horizontal"
    EXTENDED_APPROACH = "extended_approach"
    OTHER = "other"


SURFACE_STYLES: dict[str, dict] = {
    SurfaceKind.APPROACH: {
        "fill_color": "#4CAF50",
        "line_color": "#2E7D32",
        "fill_opacity": 0.25,
        "line_width": 1.2,
        "label": "進入表面",
        "label_en": "Approach Surface",
    },
    SurfaceKind.TRANSITIONAL: {
        "fill_color": "#FFC107",
        "line_color": "#FF8F00",
        "fill_opacity": 0.22,
        "line_width": 1.1,
        "label": "転移表面",
        "label_en": "Transitional Surface",
    },
    SurfaceKind.HORIZONTAL: {
        "fill_color": "#9C27B0",
        "line_color": "#6A1B9A",
        "fill_opacity": 0.2,
        "line_width": 1.1,
        "label": "水平表面",
        "label_en": "Horizontal Surface",
    },
    SurfaceKind.CONICAL: {
        "fill_color": "#7B1FA2",
        "line_color": "#4A148C",
        "fill_opacity": 0.18,
        "line_width": 1.0,
        "label": "円錐表面",
        "label_en": "Conical Surface",
    },
    SurfaceKind.OUTER_HORIZONTAL: {
        "fill_color": "#E1BEE7",
        "line_color": "#9C27B0",
        "fill_opacity": 0.15,
        "line_width": 0.8,
        "label": "外側水平表面",
        "label_en": "Outer Horizontal Surface",
    },
    SurfaceKind.EXTENDED_APPROACH: {
        "fill_color": "#81C784",
        "line_color": "#388E3C",
        "fill_opacity": 0.2,
        "line_width": 1.0,
        "label": "延長進入表面",
        "label_en": "Extended Approach Surface",
    },
    SurfaceKind.OTHER: {
        "fill_color": "#90EE90",
        "line_color": "#2E7D32",
        "fill_opacity": 0.15,
        "line_width": 0.9,
        "label": "空港周辺空域",
        "label_en": "Airport Airspace",
    },
}

ALL_SURFACE_KINDS = list(SURFACE_STYLES.keys())


class SurfaceProperty:
    """Property keys injected into classified features for rendering."""

    KIND = "__surface_kind"
    LABEL = "__surface_label"
    FILL_COLOR = "__fill_color"
    LINE_COLOR = "__line_color"
    FILL_OPACITY = "__fill_opacity"
    LINE_WIDTH = "__line_width"


KOKUAREA_TILE_URL = "https://maps.gsi.go.jp/xyz/kokuarea/{z}/{x}/{y}.geojson"
KOKUAREA_PROXY_ENDPOINT = "/api/kokuarea"

# The upstream dataset is published at z=8 only
KOKUAREA_TILE_ZOOM = 8
MAX_TILES_PER_REQUEST = 64

# Cache, retry & timeout
TILE_CACHE_MAX_ENTRIES = 200
TILE_FETCH_TIMEOUT_S = 15.0
RETRY_ATTEMPTS = 3
RETRY_WAIT_MIN = 1
RETRY_WAIT_MAX = 10


# ---------------------------------------------------------------------------
# Path checks
# ---------------------------------------------------------------------------


class Severity:
    DANGER = "danger"
    WARNING = "warning"
    SAFE = "safe"


SEVERITY_ORDER = [Severity.SAFE, Severity.WARNING, Severity.DANGER]

OUTPUT_MODES = ["json", "text"]


class ErrorMessages:
    INVALID_BBOX = "Invalid bounding box: must be [west, south, east, north]"
    INVALID_BBOX_VALUES = "Invalid bounding box values: west ({}) must be < east ({})"
    INVALID_BBOX_LAT = "Invalid bounding box values: south ({}) must be < north ({})"
    INVALID_LATITUDE = "Latitude must be between -90 and 90, got {}"
    INVALID_LONGITUDE = "Longitude must be between -180 and 180, got {}"
    INVALID_RADIUS = "radius_km must be > 0, got {}"
    INVALID_DISTANCE = "max_distance_km must be > 0, got {}"
    INVALID_SEGMENTS = "segments must be >= 3, got {}"
    INVALID_ZONE_COLOR = "Invalid zone color '{}'. Available: {}"
    INVALID_FACILITY_TYPE = "Invalid facility type '{}'. Available: {}"
    INVALID_LAYER = "Invalid zone layer '{}'. Available: {} or a facility type"
    INVALID_AIRPORT_TYPE = "Invalid airport type '{}'. Available: {}"
    INVALID_AIRPORT = "Invalid airport '{}': {}"
    DUPLICATE_AIRPORT_ID = "Duplicate airport id '{}' in catalog"
    INVALID_TILE_KEY = "Invalid tile key '{}': must be 'z/x/y'"
    INVALID_POINT = "Invalid point {}: must be [lon, lat]"
    UNSUPPORTED_GEOMETRY = "Unsupported geometry type '{}'"
    DUPLICATE_FACILITY_ID = "Duplicate facility id '{}' in catalog"
    INVALID_FACILITY = "Invalid facility '{}': {}"
    MALFORMED_TILE = "Tile {} payload has no 'features' list"
    EMPTY_PATH = "Path must contain at least one waypoint"
    DUPLICATE_POINT_ID = "Duplicate point id '{}'"
    POINT_ID_COUNT = "Got {} ids for {} points"
    NO_ARTIFACT_STORE = (
        "No artifact store available. Configure CHUK_ARTIFACTS_PROVIDER "
        "environment variable (memory, filesystem, or s3)."
    )


class SuccessMessages:
    CATEGORIES_LIST = "{} facility types, {} facilities"
    SURFACE_STYLES = "{} restriction surface kinds"
    ZONE_LIST = "{} facilities matched"
    ZONE_HIT = "Inside {} zone: {}"
    ZONE_CLEAR = "Not inside any no-fly zone"
    NEARBY = "{} facilities within {:.1f} km"
    ZONE_GEOJSON = "Generated {} zone features ({} layer)"
    ZONE_GEOJSON_STORED = "Stored {} zone features ({} layer) as {}"
    TILE_RANGE = "{} tiles at z={}"
    TILE_RANGE_OVER = "{} tiles at z={} exceeds limit of {}; zoom in"
    SURFACE_FETCH = "Fetched {} restriction surface features from {} tiles"
    SURFACE_FETCH_REJECTED = "Viewport needs {} tiles (limit {}); no surfaces fetched"
    SURFACE_FETCH_STORED = "Stored {} restriction surface features from {} tiles as {}"
    SURFACE_HIT = "Inside restriction surface: {}"
    SURFACE_CLEAR = "Not inside any restriction surface"
    SURFACE_BATCH = "{} of {} points inside restriction surfaces"
    AIRPORT_LIST = "{} airports matched"
    AIRPORT_HIT = "Inside airport zone: {} (r={} km)"
    AIRPORT_CLEAR = "Not inside any airport zone"
    PATH_CHECK = (
        "Checked {} waypoints: {} in zones, {} in airport zones, {} in surfaces; "
        "{} legs cross restrictions (severity: {})"
    )
    STATUS = "Airspace MCP Server v{} ({} facilities, {} cached tiles, storage: {})"
