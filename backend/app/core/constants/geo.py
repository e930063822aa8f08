"""
Geo constants — regional reference points and place-name tables.

Used by the static distance tier and the place-name cleaner. Regions
follow the leading digits of the German postal-code plan.
Version: 1.0.0
"""
from typing import Dict, List, Tuple

EARTH_RADIUS_KM: float = 6371.0

# (first code, last code, lat, lng, region city)
POSTAL_REGIONS: List[Tuple[int, int, float, float, str]] = [
    (10000, 19999, 52.5200, 13.4050, "Berlin"),
    (20000, 29999, 53.5511, 9.9937, "Hamburg"),
    (30000, 39999, 52.3759, 9.7320, "Hannover"),
    (40000, 49999, 51.2277, 6.7735, "Düsseldorf"),
    (50000, 59999, 50.9375, 6.9603, "Köln"),
    (60000, 66999, 50.1109, 8.6821, "Frankfurt am Main"),
    (67000, 67999, 49.3501, 8.1000, "Neustadt an der Weinstraße"),
    (68000, 69999, 49.4875, 8.4660, "Mannheim"),
    (70000, 79999, 48.7758, 9.1829, "Stuttgart"),
    (80000, 89999, 48.1351, 11.5820, "München"),
    (90000, 99999, 49.4521, 11.0767, "Nürnberg"),
]

# Codes outside every region are placed along a diagonal through central Germany
UNMAPPED_BASE_LAT: float = 51.0
UNMAPPED_BASE_LNG: float = 10.0
UNMAPPED_PIVOT_CODE: int = 50000
UNMAPPED_DEGREES_PER_CODE: float = 0.00001

EXACT_PLACE_NAMES: Dict[str, str] = {
    "10115": "Berlin-Mitte",
    "10117": "Berlin-Mitte",
    "10178": "Berlin-Mitte",
    "10179": "Berlin-Mitte",
    "20095": "Hamburg-Altstadt",
    "20099": "Hamburg-St. Georg",
    "80331": "München-Altstadt",
    "80333": "München-Maxvorstadt",
    "50667": "Köln-Altstadt-Süd",
    "50674": "Köln-Altstadt-Nord",
    "60311": "Frankfurt-Altstadt",
    "60313": "Frankfurt-Innenstadt",
    "67433": "Neustadt an der Weinstraße",
    "67435": "Neustadt an der Weinstraße",
}

KNOWN_CITIES: List[str] = [
    "Berlin", "Hamburg", "München", "Köln", "Frankfurt", "Stuttgart",
    "Düsseldorf", "Dortmund", "Essen", "Leipzig", "Bremen", "Dresden",
    "Hannover", "Nürnberg", "Duisburg", "Bochum", "Wuppertal", "Bielefeld",
    "Bonn", "Münster", "Karlsruhe", "Mannheim", "Augsburg", "Wiesbaden",
    "Gelsenkirchen", "Mönchengladbach", "Braunschweig", "Chemnitz", "Kiel",
    "Aachen", "Halle", "Magdeburg", "Freiburg", "Krefeld", "Lübeck",
    "Oberhausen", "Erfurt", "Mainz", "Rostock", "Kassel", "Hagen",
    "Potsdam", "Saarbrücken", "Hamm", "Mülheim", "Ludwigshafen", "Leverkusen",
    "Neustadt", "Speyer", "Landau", "Kaiserslautern",
]

COUNTRY_NAMES: Tuple[str, ...] = ("Deutschland", "Germany")

# Segments containing any of these are administrative, not a place
ADMIN_KEYWORDS: Tuple[str, ...] = (
    "Landkreis", "Kreis", "Regierungsbezirk", "Bundesland",
    "Verwaltungsgemeinschaft", "Samtgemeinde", "Verbandsgemeinde",
    "Rheinland-Pfalz", "Bayern", "Baden-Württemberg", "Nordrhein-Westfalen",
    "Ortsteil", "Stadtteil", "Bezirk",
    "-Mitte", "-Altstadt", "-Nord", "-Süd", "-Ost", "-West",
)

MIN_PLACE_NAME_LENGTH: int = 3
DEFAULT_PLACE_NAME: str = "Germany"

# Duration estimate for tiers without a real route (minutes per km)
ESTIMATED_MINUTES_PER_KM: float = 1.2
