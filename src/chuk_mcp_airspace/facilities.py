"""
Compiled-in catalog of fixed restricted-airspace facilities.

Coordinates are WGS84 degrees, radii in kilometres. Catalog order matters:
point containment returns the first facility whose circle contains the
point, so no facility centre may fall inside an earlier facility's circle.
"""

from .constants import FacilityType, OperationalStatus, ZoneColor

_SOURCE_ACT = "小型無人機等飛行禁止法"
_SOURCE_NRA = "原子力規制委員会"
_SOURCE_MOD = "防衛省告示"
_SOURCE_MOFA = "外務省告示"
_SOURCE_PREF = "都道府県公表資料"
_SOURCE_MLIT = "国土交通省"


def _facility(
    facility_id: str,
    name: str,
    name_en: str,
    facility_type: str,
    zone_color: str,
    lat: float,
    lng: float,
    radius_km: float,
    source: str,
    **extra: object,
) -> dict:
    return {
        "id": facility_id,
        "name": name,
        "name_en": name_en,
        "facility_type": facility_type,
        "zone_color": zone_color,
        "lat": lat,
        "lng": lng,
        "radius_km": radius_km,
        "source": source,
        **extra,
    }


def _nuclear(
    facility_id: str,
    name: str,
    name_en: str,
    lat: float,
    lng: float,
    operator: str,
    reactor_count: int,
    capacity: str,
    status: str,
    address: str,
) -> dict:
    return _facility(
        facility_id,
        name,
        name_en,
        FacilityType.NUCLEAR,
        ZoneColor.RED,
        lat,
        lng,
        0.5,
        _SOURCE_NRA,
        operator=operator,
        reactor_count=reactor_count,
        capacity=capacity,
        operational_status=status,
        address=address,
    )


NO_FLY_FACILITIES: list[dict] = [
    # --- Imperial & national government (Tokyo) ---------------------------
    _facility(
        "imperial-palace", "皇居", "Imperial Palace",
        FacilityType.IMPERIAL, ZoneColor.RED, 35.6852, 139.7528, 0.8, _SOURCE_ACT,
        address="東京都千代田区千代田1-1",
    ),
    _facility(
        "akasaka-estate", "赤坂御用地", "Akasaka Estate",
        FacilityType.IMPERIAL, ZoneColor.RED, 35.6776, 139.7262, 0.5, _SOURCE_ACT,
        address="東京都港区元赤坂2-1",
    ),
    _facility(
        "kantei", "首相官邸", "Prime Minister's Office",
        FacilityType.GOVERNMENT, ZoneColor.RED, 35.6731, 139.7429, 0.2, _SOURCE_ACT,
        address="東京都千代田区永田町2-3-1",
    ),
    _facility(
        "national-diet", "国会議事堂", "National Diet Building",
        FacilityType.GOVERNMENT, ZoneColor.RED, 35.6759, 139.7449, 0.25, _SOURCE_ACT,
        address="東京都千代田区永田町1-7-1",
    ),
    _facility(
        "supreme-court", "最高裁判所", "Supreme Court of Japan",
        FacilityType.GOVERNMENT, ZoneColor.RED, 35.6801, 139.7424, 0.15, _SOURCE_ACT,
        address="東京都千代田区隼町4-2",
    ),
    _facility(
        "mofa", "外務省", "Ministry of Foreign Affairs",
        FacilityType.GOVERNMENT, ZoneColor.RED, 35.6737, 139.7500, 0.15, _SOURCE_ACT,
        address="東京都千代田区霞が関2-2-1",
    ),
    _facility(
        "ldp-hq", "自由民主党本部", "Liberal Democratic Party Headquarters",
        FacilityType.GOVERNMENT, ZoneColor.RED, 35.6786, 139.7407, 0.1, _SOURCE_ACT,
        category="政党事務所",
        address="東京都千代田区永田町1-11-23",
    ),
    _facility(
        "kyoto-gosho", "京都御所", "Kyoto Imperial Palace",
        FacilityType.IMPERIAL, ZoneColor.RED, 35.0254, 135.7621, 0.5, _SOURCE_ACT,
        address="京都府京都市上京区京都御苑3",
    ),
    # --- Defense -------------------------------------------------------------
    _facility(
        "mod-ichigaya", "防衛省", "Ministry of Defense (Ichigaya)",
        FacilityType.DEFENSE, ZoneColor.RED, 35.6930, 139.7286, 0.3, _SOURCE_MOD,
        address="東京都新宿区市谷本村町5-1",
    ),
    _facility(
        "usfj-yokota", "横田飛行場", "Yokota Air Base",
        FacilityType.DEFENSE, ZoneColor.RED, 35.7485, 139.3485, 2.0, _SOURCE_MOD,
        category="在日米軍", operator="在日米空軍",
    ),
    _facility(
        "usfj-atsugi", "厚木海軍飛行場", "Naval Air Facility Atsugi",
        FacilityType.DEFENSE, ZoneColor.RED, 35.4546, 139.4500, 2.0, _SOURCE_MOD,
        category="在日米軍", operator="在日米海軍",
    ),
    _facility(
        "usfj-yokosuka", "横須賀海軍施設", "Fleet Activities Yokosuka",
        FacilityType.DEFENSE, ZoneColor.RED, 35.2833, 139.6667, 1.0, _SOURCE_MOD,
        category="在日米軍", operator="在日米海軍",
    ),
    _facility(
        "usfj-camp-zama", "キャンプ座間", "Camp Zama",
        FacilityType.DEFENSE, ZoneColor.RED, 35.5136, 139.3969, 0.8, _SOURCE_MOD,
        category="在日米軍", operator="在日米陸軍",
    ),
    _facility(
        "usfj-misawa", "三沢飛行場", "Misawa Air Base",
        FacilityType.DEFENSE, ZoneColor.RED, 40.7032, 141.3686, 2.0, _SOURCE_MOD,
        category="在日米軍", operator="在日米空軍",
    ),
    _facility(
        "usfj-iwakuni", "岩国飛行場", "MCAS Iwakuni",
        FacilityType.DEFENSE, ZoneColor.RED, 34.1464, 132.2361, 2.0, _SOURCE_MOD,
        category="在日米軍", operator="在日米海兵隊",
    ),
    _facility(
        "usfj-sasebo", "佐世保海軍施設", "Fleet Activities Sasebo",
        FacilityType.DEFENSE, ZoneColor.RED, 33.1600, 129.7150, 1.0, _SOURCE_MOD,
        category="在日米軍", operator="在日米海軍",
    ),
    _facility(
        "usfj-kadena", "嘉手納飛行場", "Kadena Air Base",
        FacilityType.DEFENSE, ZoneColor.RED, 26.3556, 127.7675, 2.5, _SOURCE_MOD,
        category="在日米軍", operator="在日米空軍",
    ),
    _facility(
        "usfj-futenma", "普天間飛行場", "MCAS Futenma",
        FacilityType.DEFENSE, ZoneColor.RED, 26.2742, 127.7561, 1.5, _SOURCE_MOD,
        category="在日米軍", operator="在日米海兵隊",
    ),
    # --- Self-Defense Forces -------------------------------------------------
    _facility(
        "jsdf-asaka", "朝霞駐屯地", "JGSDF Camp Asaka",
        FacilityType.MILITARY_JSDF, ZoneColor.RED, 35.7953, 139.6025, 1.0, _SOURCE_MOD,
        operator="陸上自衛隊",
    ),
    _facility(
        "jsdf-iruma", "入間基地", "JASDF Iruma Air Base",
        FacilityType.MILITARY_JSDF, ZoneColor.RED, 35.8419, 139.4106, 1.5, _SOURCE_MOD,
        operator="航空自衛隊",
    ),
    _facility(
        "jsdf-hyakuri", "百里基地", "JASDF Hyakuri Air Base",
        FacilityType.MILITARY_JSDF, ZoneColor.RED, 36.1811, 140.4147, 1.5, _SOURCE_MOD,
        operator="航空自衛隊",
    ),
    _facility(
        "jsdf-chitose", "千歳基地", "JASDF Chitose Air Base",
        FacilityType.MILITARY_JSDF, ZoneColor.RED, 42.7950, 141.6664, 1.5, _SOURCE_MOD,
        operator="航空自衛隊",
    ),
    _facility(
        "jsdf-kure", "呉基地", "JMSDF Kure Naval Base",
        FacilityType.MILITARY_JSDF, ZoneColor.RED, 34.2417, 132.5550, 1.0, _SOURCE_MOD,
        operator="海上自衛隊",
    ),
    # --- Nuclear power & fuel-cycle facilities -------------------------------
    _nuclear(
        "npp-kashiwazaki-kariwa", "柏崎刈羽原子力発電所", "Kashiwazaki-Kariwa NPP",
        37.4286, 138.5956, "東京電力", 7, "8212MW",
        OperationalStatus.STOPPED, "新潟県柏崎市・刈羽村",
    ),
    _nuclear(
        "npp-fukushima-daiichi", "福島第一原子力発電所", "Fukushima Daiichi NPP",
        37.4214, 141.0328, "東京電力", 6, "4696MW",
        OperationalStatus.DECOMMISSIONING, "福島県双葉郡大熊町",
    ),
    _nuclear(
        "npp-fukushima-daini", "福島第二原子力発電所", "Fukushima Daini NPP",
        37.3167, 141.0250, "東京電力", 4, "4400MW",
        OperationalStatus.DECOMMISSIONING, "福島県双葉郡楢葉町",
    ),
    _nuclear(
        "npp-onagawa", "女川原子力発電所", "Onagawa NPP",
        38.4011, 141.4997, "東北電力", 3, "2174MW",
        OperationalStatus.OPERATIONAL, "宮城県牡鹿郡女川町",
    ),
    _nuclear(
        "npp-tokai-daini", "東海第二発電所", "Tokai Daini NPP",
        36.4664, 140.6067, "日本原子力発電", 1, "1100MW",
        OperationalStatus.STOPPED, "茨城県那珂郡東海村",
    ),
    _nuclear(
        "npp-hamaoka", "浜岡原子力発電所", "Hamaoka NPP",
        34.6233, 138.1425, "中部電力", 5, "3617MW",
        OperationalStatus.STOPPED, "静岡県御前崎市",
    ),
    _nuclear(
        "npp-shika", "志賀原子力発電所", "Shika NPP",
        37.0600, 136.7264, "北陸電力", 2, "1746MW",
        OperationalStatus.STOPPED, "石川県羽咋郡志賀町",
    ),
    _nuclear(
        "npp-mihama", "美浜発電所", "Mihama NPP",
        35.7028, 135.9631, "関西電力", 3, "826MW",
        OperationalStatus.OPERATIONAL, "福井県三方郡美浜町",
    ),
    _nuclear(
        "npp-ohi", "大飯発電所", "Ohi NPP",
        35.5408, 135.6528, "関西電力", 4, "2360MW",
        OperationalStatus.OPERATIONAL, "福井県大飯郡おおい町",
    ),
    _nuclear(
        "npp-takahama", "高浜発電所", "Takahama NPP",
        35.5222, 135.5047, "関西電力", 4, "3392MW",
        OperationalStatus.OPERATIONAL, "福井県大飯郡高浜町",
    ),
    _nuclear(
        "npp-tsuruga", "敦賀発電所", "Tsuruga NPP",
        35.7400, 136.0189, "日本原子力発電", 2, "1160MW",
        OperationalStatus.STOPPED, "福井県敦賀市",
    ),
    _nuclear(
        "npp-shimane", "島根原子力発電所", "Shimane NPP",
        35.5386, 132.9994, "中国電力", 3, "2193MW",
        OperationalStatus.OPERATIONAL, "島根県松江市",
    ),
    _nuclear(
        "npp-ikata", "伊方発電所", "Ikata NPP",
        33.4906, 132.3092, "四国電力", 3, "890MW",
        OperationalStatus.OPERATIONAL, "愛媛県西宇和郡伊方町",
    ),
    _nuclear(
        "npp-genkai", "玄海原子力発電所", "Genkai NPP",
        33.5153, 129.8372, "九州電力", 4, "2360MW",
        OperationalStatus.OPERATIONAL, "佐賀県東松浦郡玄海町",
    ),
    _nuclear(
        "npp-sendai", "川内原子力発電所", "Sendai NPP",
        31.8336, 130.1897, "九州電力", 2, "1780MW",
        OperationalStatus.OPERATIONAL, "鹿児島県薩摩川内市",
    ),
    _nuclear(
        "npp-tomari", "泊発電所", "Tomari NPP",
        43.0364, 140.5128, "北海道電力", 3, "2070MW",
        OperationalStatus.STOPPED, "北海道古宇郡泊村",
    ),
    _nuclear(
        "npp-higashidori", "東通原子力発電所", "Higashidori NPP",
        41.1878, 141.3906, "東北電力", 1, "1100MW",
        OperationalStatus.STOPPED, "青森県下北郡東通村",
    ),
    _nuclear(
        "rokkasho", "六ヶ所再処理工場", "Rokkasho Reprocessing Plant",
        40.9614, 141.3253, "日本原燃", 0, "800tU/年",
        OperationalStatus.PLANNED, "青森県上北郡六ヶ所村",
    ),
    # --- Prefectural offices -------------------------------------------------
    _facility(
        "pref-tokyo", "東京都庁", "Tokyo Metropolitan Government Building",
        FacilityType.PREFECTURE, ZoneColor.YELLOW, 35.6895, 139.6917, 0.2, _SOURCE_PREF,
        address="東京都新宿区西新宿2-8-1",
    ),
    _facility(
        "pref-osaka", "大阪府庁", "Osaka Prefectural Government",
        FacilityType.PREFECTURE, ZoneColor.YELLOW, 34.6863, 135.5200, 0.2, _SOURCE_PREF,
    ),
    _facility(
        "pref-hokkaido", "北海道庁", "Hokkaido Government Office",
        FacilityType.PREFECTURE, ZoneColor.YELLOW, 43.0642, 141.3469, 0.2, _SOURCE_PREF,
    ),
    _facility(
        "pref-aichi", "愛知県庁", "Aichi Prefectural Government",
        FacilityType.PREFECTURE, ZoneColor.YELLOW, 35.1802, 136.9066, 0.2, _SOURCE_PREF,
    ),
    _facility(
        "pref-fukuoka", "福岡県庁", "Fukuoka Prefectural Government",
        FacilityType.PREFECTURE, ZoneColor.YELLOW, 33.6064, 130.4181, 0.2, _SOURCE_PREF,
    ),
    _facility(
        "pref-okinawa", "沖縄県庁", "Okinawa Prefectural Government",
        FacilityType.PREFECTURE, ZoneColor.YELLOW, 26.2124, 127.6809, 0.2, _SOURCE_PREF,
    ),
    _facility(
        "pref-kanagawa", "神奈川県庁", "Kanagawa Prefectural Government",
        FacilityType.PREFECTURE, ZoneColor.YELLOW, 35.4478, 139.6425, 0.2, _SOURCE_PREF,
    ),
    _facility(
        "pref-miyagi", "宮城県庁", "Miyagi Prefectural Government",
        FacilityType.PREFECTURE, ZoneColor.YELLOW, 38.2688, 140.8721, 0.2, _SOURCE_PREF,
    ),
    _facility(
        "pref-kyoto", "京都府庁", "Kyoto Prefectural Government",
        FacilityType.PREFECTURE, ZoneColor.YELLOW, 35.0212, 135.7556, 0.2, _SOURCE_PREF,
    ),
    _facility(
        "pref-hiroshima", "広島県庁", "Hiroshima Prefectural Government",
        FacilityType.PREFECTURE, ZoneColor.YELLOW, 34.3966, 132.4596, 0.2, _SOURCE_PREF,
    ),
    # --- Police --------------------------------------------------------------
    _facility(
        "police-mpd", "警視庁本部", "Metropolitan Police Department HQ",
        FacilityType.POLICE, ZoneColor.YELLOW, 35.6764, 139.7527, 0.15, _SOURCE_PREF,
    ),
    _facility(
        "police-hokkaido", "北海道警察本部", "Hokkaido Prefectural Police HQ",
        FacilityType.POLICE, ZoneColor.YELLOW, 43.0620, 141.3544, 0.15, _SOURCE_PREF,
    ),
    _facility(
        "police-kanagawa", "神奈川県警察本部", "Kanagawa Prefectural Police HQ",
        FacilityType.POLICE, ZoneColor.YELLOW, 35.4437, 139.6425, 0.15, _SOURCE_PREF,
    ),
    # --- Prisons & detention centres -----------------------------------------
    _facility(
        "prison-tokyo-detention", "東京拘置所", "Tokyo Detention House",
        FacilityType.PRISON, ZoneColor.YELLOW, 35.7640, 139.8180, 0.2, _SOURCE_PREF,
    ),
    _facility(
        "prison-fuchu", "府中刑務所", "Fuchu Prison",
        FacilityType.PRISON, ZoneColor.YELLOW, 35.6783, 139.4886, 0.2, _SOURCE_PREF,
    ),
    _facility(
        "prison-osaka-detention", "大阪拘置所", "Osaka Detention House",
        FacilityType.PRISON, ZoneColor.YELLOW, 34.7050, 135.5180, 0.2, _SOURCE_PREF,
    ),
    _facility(
        "prison-abashiri", "網走刑務所", "Abashiri Prison",
        FacilityType.PRISON, ZoneColor.YELLOW, 44.0150, 144.2600, 0.2, _SOURCE_PREF,
    ),
    _facility(
        "prison-yokohama", "横浜刑務所", "Yokohama Prison",
        FacilityType.PRISON, ZoneColor.YELLOW, 35.4080, 139.5950, 0.2, _SOURCE_PREF,
    ),
    # --- Foreign missions ----------------------------------------------------
    _facility(
        "embassy-us", "アメリカ合衆国大使館", "Embassy of the United States",
        FacilityType.FOREIGN_MISSION, ZoneColor.YELLOW, 35.6684, 139.7430, 0.1, _SOURCE_MOFA,
    ),
    _facility(
        "embassy-cn", "中華人民共和国大使館", "Embassy of the People's Republic of China",
        FacilityType.FOREIGN_MISSION, ZoneColor.YELLOW, 35.6572, 139.7272, 0.1, _SOURCE_MOFA,
    ),
    _facility(
        "embassy-uk", "英国大使館", "British Embassy",
        FacilityType.FOREIGN_MISSION, ZoneColor.YELLOW, 35.6866, 139.7425, 0.1, _SOURCE_MOFA,
    ),
    _facility(
        "embassy-kr", "大韓民国大使館", "Embassy of the Republic of Korea",
        FacilityType.FOREIGN_MISSION, ZoneColor.YELLOW, 35.6555, 139.7312, 0.1, _SOURCE_MOFA,
    ),
    _facility(
        "embassy-ru", "ロシア連邦大使館", "Embassy of the Russian Federation",
        FacilityType.FOREIGN_MISSION, ZoneColor.YELLOW, 35.6636, 139.7425, 0.1, _SOURCE_MOFA,
    ),
    _facility(
        "embassy-fr", "フランス大使館", "Embassy of France",
        FacilityType.FOREIGN_MISSION, ZoneColor.YELLOW, 35.6506, 139.7290, 0.1, _SOURCE_MOFA,
    ),
    _facility(
        "consulate-us-osaka", "在大阪・神戸アメリカ総領事館", "U.S. Consulate General Osaka-Kobe",
        FacilityType.FOREIGN_MISSION, ZoneColor.YELLOW, 34.6963, 135.5006, 0.1, _SOURCE_MOFA,
    ),
    # --- Energy, water & infrastructure --------------------------------------
    _facility(
        "energy-futtsu", "富津火力発電所", "Futtsu Thermal Power Station",
        FacilityType.ENERGY, ZoneColor.YELLOW, 35.3050, 139.8160, 0.3, _SOURCE_PREF,
        operator="JERA", capacity="5040MW", operational_status=OperationalStatus.OPERATIONAL,
    ),
    _facility(
        "water-kurobe", "黒部ダム", "Kurobe Dam",
        FacilityType.WATER, ZoneColor.YELLOW, 36.5664, 137.6625, 0.3, _SOURCE_PREF,
        operator="関西電力",
    ),
    _facility(
        "infra-aqualine", "東京湾アクアライン 風の塔", "Tokyo Bay Aqua-Line Kaze no To",
        FacilityType.INFRASTRUCTURE, ZoneColor.YELLOW, 35.4900, 139.8340, 0.2, _SOURCE_MLIT,
    ),
    # --- Airports ------------------------------------------------------------
    _facility(
        "airport-haneda", "東京国際空港（羽田）", "Tokyo International Airport (Haneda)",
        FacilityType.AIRPORT, ZoneColor.YELLOW, 35.5494, 139.7798, 3.0, _SOURCE_MLIT,
    ),
    _facility(
        "airport-narita", "成田国際空港", "Narita International Airport",
        FacilityType.AIRPORT, ZoneColor.YELLOW, 35.7720, 140.3929, 3.0, _SOURCE_MLIT,
    ),
    _facility(
        "airport-kansai", "関西国際空港", "Kansai International Airport",
        FacilityType.AIRPORT, ZoneColor.YELLOW, 34.4320, 135.2304, 3.0, _SOURCE_MLIT,
    ),
]
