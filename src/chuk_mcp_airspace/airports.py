"""
Compiled-in catalog of airports, air bases and heliports.

Coordinates are WGS84 degrees, radii in kilometres. The major international
airports carry the 24 km radius of the drone act; other airports use the
radius of their surrounding controlled airspace. Heliports are kept in a
separate list because they are excluded from airport containment unless
explicitly requested.
"""

from .constants import AirportType


def _airport(
    airport_id: str,
    name: str,
    name_en: str,
    airport_type: str,
    lat: float,
    lng: float,
    radius_km: float,
) -> dict:
    return {
        "id": airport_id,
        "name": name,
        "name_en": name_en,
        "airport_type": airport_type,
        "lat": lat,
        "lng": lng,
        "radius_km": radius_km,
    }


_INTL = AirportType.INTERNATIONAL
_DOM = AirportType.DOMESTIC
_MIL = AirportType.MILITARY
_HELI = AirportType.HELIPORT


MAJOR_AIRPORTS: list[dict] = [
    _airport("NRT", "成田国際空港", "Narita International Airport", _INTL, 35.772, 140.3929, 24.0),
    _airport("HND", "東京国際空港（羽田）", "Tokyo International Airport (Haneda)", _INTL, 35.5494, 139.7798, 24.0),
    _airport("KIX", "関西国際空港", "Kansai International Airport", _INTL, 34.4347, 135.244, 24.0),
    _airport("ITM", "大阪国際空港（伊丹）", "Osaka International Airport (Itami)", _INTL, 34.7855, 135.438, 24.0),
    _airport("NGO", "中部国際空港", "Chubu Centrair International Airport", _INTL, 34.8584, 136.8052, 24.0),
    _airport("CTS", "新千歳空港", "New Chitose Airport", _INTL, 42.7752, 141.6922, 24.0),
    _airport("FUK", "福岡空港", "Fukuoka Airport", _INTL, 33.5859, 130.4511, 24.0),
    _airport("OKA", "那覇空港", "Naha Airport", _INTL, 26.1958, 127.6465, 24.0),
    _airport("SDJ", "仙台空港", "Sendai Airport", _DOM, 38.1397, 140.9225, 6.0),
    _airport("HIJ", "広島空港", "Hiroshima Airport", _DOM, 34.4361, 132.922, 6.0),
    _airport("KMJ", "熊本空港", "Kumamoto Airport", _DOM, 32.8373, 130.8553, 6.0),
    _airport("KOJ", "鹿児島空港", "Kagoshima Airport", _DOM, 31.8034, 130.7191, 6.0),
    _airport("NGS", "長崎空港", "Nagasaki Airport", _DOM, 32.9169, 129.9146, 6.0),
    _airport("OIT", "大分空港", "Oita Airport", _DOM, 33.4794, 131.7368, 6.0),
    _airport("KMI", "宮崎空港", "Miyazaki Airport", _DOM, 31.8772, 131.4489, 6.0),
    _airport("TAK", "高松空港", "Takamatsu Airport", _DOM, 34.2142, 134.0159, 6.0),
    _airport("MYJ", "松山空港", "Matsuyama Airport", _DOM, 33.8272, 132.6997, 6.0),
    _airport("KCZ", "高知龍馬空港", "Kochi Ryoma Airport", _DOM, 33.5461, 133.6694, 6.0),
    _airport("TKS", "徳島空港", "Tokushima Airport", _DOM, 34.1328, 134.6067, 6.0),
    _airport("OKJ", "岡山空港", "Okayama Airport", _DOM, 34.7569, 133.855, 6.0),
    _airport("UBJ", "山口宇部空港", "Yamaguchi Ube Airport", _DOM, 33.93, 131.2789, 6.0),
    _airport("IZO", "出雲空港", "Izumo Airport", _DOM, 35.4136, 132.89, 6.0),
    _airport("TTJ", "鳥取空港", "Tottori Airport", _DOM, 35.53, 134.1669, 6.0),
    _airport("KMQ", "小松空港", "Komatsu Airport", _DOM, 36.3947, 136.4067, 6.0),
    _airport("TOY", "富山空港", "Toyama Airport", _DOM, 36.6483, 137.1878, 6.0),
    _airport("NKM", "県営名古屋空港", "Nagoya Airfield", _DOM, 35.255, 136.9239, 6.0),
    _airport("FSZ", "静岡空港", "Shizuoka Airport", _DOM, 34.7961, 138.19, 6.0),
    _airport("MMJ", "松本空港", "Matsumoto Airport", _DOM, 36.1669, 137.9228, 6.0),
    _airport("KIJ", "新潟空港", "Niigata Airport", _DOM, 37.9558, 139.1211, 6.0),
    _airport("AKJ", "旭川空港", "Asahikawa Airport", _DOM, 43.6708, 142.4475, 6.0),
    _airport("HKD", "函館空港", "Hakodate Airport", _DOM, 41.77, 140.8219, 6.0),
]


REGIONAL_AIRPORTS: list[dict] = [
    _airport("OBO", "帯広空港", "Obihiro Airport", _DOM, 42.7333, 143.2172, 6.0),
    _airport("KUH", "釧路空港", "Kushiro Airport", _DOM, 43.0411, 144.1928, 6.0),
    _airport("MMB", "女満別空港", "Memanbetsu Airport", _DOM, 43.8806, 144.1644, 6.0),
    _airport("SHB", "中標津空港", "Nakashibetsu Airport", _DOM, 43.5775, 144.96, 3.0),
    _airport("MBE", "紋別空港", "Monbetsu Airport", _DOM, 44.3039, 143.4044, 3.0),
    _airport("WKJ", "稚内空港", "Wakkanai Airport", _DOM, 45.4042, 141.8008, 6.0),
    _airport("RIS", "利尻空港", "Rishiri Airport", _DOM, 45.2411, 141.1864, 3.0),
    _airport("OIR", "奥尻空港", "Okushiri Airport", _DOM, 42.0717, 139.4328, 2.0),
    _airport("RJCO", "丘珠空港", "Okadama Airport", _DOM, 43.1176, 141.3816, 3.0),
    _airport("AOJ", "青森空港", "Aomori Airport", _DOM, 40.7347, 140.6908, 6.0),
    _airport("MSJ", "三沢空港", "Misawa Airport", _DOM, 40.7033, 141.3686, 6.0),
    _airport("HNA", "花巻空港", "Hanamaki Airport", _DOM, 39.4286, 141.1353, 6.0),
    _airport("AXT", "秋田空港", "Akita Airport", _DOM, 39.6156, 140.2186, 6.0),
    _airport("ONJ", "大館能代空港", "Odate-Noshiro Airport", _DOM, 40.1919, 140.3714, 3.0),
    _airport("GAJ", "山形空港", "Yamagata Airport", _DOM, 38.4119, 140.3714, 6.0),
    _airport("SYO", "庄内空港", "Shonai Airport", _DOM, 38.8122, 139.7878, 3.0),
    _airport("FKS", "福島空港", "Fukushima Airport", _DOM, 37.2275, 140.4311, 6.0),
    _airport("RJTF", "調布飛行場", "Chofu Airport", _DOM, 35.6717, 139.5281, 3.0),
    _airport("IBR", "茨城空港", "Ibaraki Airport", _DOM, 36.1811, 140.4156, 6.0),
    _airport("OIM", "大島空港", "Oshima Airport", _DOM, 34.7822, 139.3603, 3.0),
    _airport("MYE", "三宅島空港", "Miyakejima Airport", _DOM, 34.0736, 139.5603, 3.0),
    _airport("HAC", "八丈島空港", "Hachijojima Airport", _DOM, 33.1153, 139.7858, 3.0),
    _airport("NTQ", "能登空港", "Noto Airport", _DOM, 37.2931, 136.9619, 3.0),
    _airport("FKJ", "福井空港", "Fukui Airport", _DOM, 36.1428, 136.2236, 2.0),
    _airport("UKB", "神戸空港", "Kobe Airport", _DOM, 34.6328, 135.2239, 6.0),
    _airport("SHM", "南紀白浜空港", "Nanki-Shirahama Airport", _DOM, 33.6622, 135.3644, 3.0),
    _airport("TJH", "但馬空港", "Tajima Airport", _DOM, 35.5128, 134.7869, 2.0),
    _airport("IWJ", "石見空港", "Iwami Airport", _DOM, 34.6764, 131.7906, 3.0),
    _airport("YGJ", "米子空港", "Yonago Airport", _DOM, 35.4922, 133.2364, 6.0),
    _airport("IWK", "岩国錦帯橋空港", "Iwakuni Kintaikyo Airport", _DOM, 34.1456, 132.2361, 6.0),
    _airport("KKJ", "北九州空港", "Kitakyushu Airport", _DOM, 33.8459, 131.0349, 6.0),
    _airport("HSG", "佐賀空港", "Saga Airport", _DOM, 33.1497, 130.3022, 3.0),
    _airport("TSJ", "対馬空港", "Tsushima Airport", _DOM, 34.285, 129.3306, 3.0),
    _airport("IKI", "壱岐空港", "Iki Airport", _DOM, 33.7489, 129.7853, 2.0),
    _airport("FUJ", "福江空港", "Fukue Airport", _DOM, 32.6664, 128.8328, 3.0),
    _airport("TNE", "種子島空港", "Tanegashima Airport", _DOM, 30.6056, 130.9917, 3.0),
    _airport("KUM", "屋久島空港", "Yakushima Airport", _DOM, 30.3856, 130.6589, 3.0),
    _airport("ASJ", "奄美空港", "Amami Airport", _DOM, 28.4306, 129.7125, 6.0),
    _airport("TKN", "徳之島空港", "Tokunoshima Airport", _DOM, 27.8364, 128.8817, 3.0),
    _airport("OKE", "沖永良部空港", "Okinoerabu Airport", _DOM, 27.4256, 128.7011, 2.0),
    _airport("RNJ", "与論空港", "Yoron Airport", _DOM, 27.0439, 128.4014, 2.0),
    _airport("ISG", "新石垣空港", "New Ishigaki Airport", _DOM, 24.3964, 124.245, 6.0),
    _airport("MMY", "宮古空港", "Miyako Airport", _DOM, 24.7828, 125.295, 6.0),
    _airport("SHI", "下地島空港", "Shimojishima Airport", _DOM, 24.8267, 125.1447, 6.0),
    _airport("UEO", "久米島空港", "Kumejima Airport", _DOM, 26.3636, 126.7139, 3.0),
    _airport("OGN", "与那国空港", "Yonaguni Airport", _DOM, 24.4669, 122.9789, 3.0),
]


MILITARY_AIRFIELDS: list[dict] = [
    _airport("RJAH", "百里基地", "Hyakuri Air Base", _MIL, 36.1811, 140.4147, 6.0),
    _airport("RJFK", "築城基地", "Tsuiki Air Base", _MIL, 33.685, 131.04, 4.0),
    _airport("RJFN", "新田原基地", "Nyutabaru Air Base", _MIL, 32.0833, 131.45, 4.0),
    _airport("RJNA", "浜松基地", "Hamamatsu Air Base", _MIL, 34.7503, 137.7033, 4.0),
    _airport("RJNK", "小松基地", "Komatsu Air Base", _MIL, 36.3946, 136.4065, 6.0),
    _airport("RJSA", "三沢基地（空自）", "Misawa Air Base (JASDF)", _MIL, 40.7033, 141.3686, 6.0),
    _airport("RJCJ", "千歳基地", "Chitose Air Base", _MIL, 42.7944, 141.6667, 6.0),
    _airport("RJTE", "入間基地", "Iruma Air Base", _MIL, 35.8419, 139.4108, 4.0),
    _airport("RJTY", "横田基地", "Yokota Air Base", _MIL, 35.7486, 139.3486, 6.0),
    _airport("RJTA", "厚木基地", "Naval Air Facility Atsugi", _MIL, 35.4547, 139.45, 6.0),
    _airport("RJOI", "岩国基地", "Marine Corps Air Station Iwakuni", _MIL, 34.1456, 132.2361, 6.0),
    _airport("RODN", "嘉手納基地", "Kadena Air Base", _MIL, 26.3516, 127.7675, 6.0),
    _airport("ROTM", "普天間基地", "Marine Corps Air Station Futenma", _MIL, 26.2742, 127.7558, 4.0),
]


HELIPORTS: list[dict] = [
    _airport("RJTI", "東京ヘリポート", "Tokyo Heliport", _HELI, 35.6403, 139.8372, 0.5),
    _airport("HLP-YAO", "八尾ヘリポート", "Yao Heliport", _HELI, 34.5967, 135.6019, 0.5),
    _airport("HLP-MAI", "舞洲ヘリポート", "Maishima Heliport", _HELI, 34.6592, 135.3931, 0.5),
    _airport("HLP-YOK", "横浜ヘリポート", "Yokohama Heliport", _HELI, 35.4667, 139.6333, 0.5),
    _airport("HLP-NAG", "名古屋ヘリポート", "Nagoya Heliport", _HELI, 35.1833, 136.9, 0.5),
    _airport("HLP-TORA", "虎ノ門ヒルズヘリポート", "Toranomon Hills Heliport", _HELI, 35.6667, 139.75, 0.2),
    _airport("HLP-ROPPONGI", "六本木ヒルズヘリポート", "Roppongi Hills Heliport", _HELI, 35.6603, 139.7292, 0.2),
    _airport("HLP-LUKE", "聖路加国際病院ヘリポート", "St. Luke's Hospital Heliport", _HELI, 35.6714, 139.7731, 0.2),
    _airport("HLP-NMC", "日本医科大学付属病院ヘリポート", "Nippon Medical School Hospital Heliport", _HELI, 35.7028, 139.7683, 0.2),
]


# Airports, then air bases; heliports are listed separately
AIRPORTS: list[dict] = [*MAJOR_AIRPORTS, *REGIONAL_AIRPORTS, *MILITARY_AIRFIELDS]
