"""
Static city gazetteer and the fuzzy resolver built on top of it.

The table is read-only after import. Iteration order is part of the
matching contract: when several entries satisfy a rule, the earliest
entry wins.
"""

import logging
import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)


DEFAULT_COORDINATES: Tuple[float, float] = (40.7128, -74.0060)


# ─────────────────────────────────────────────
# Gazetteer Table
# ─────────────────────────────────────────────

CITY_COORDINATES: Mapping[str, Tuple[float, float]] = MappingProxyType({
    # United States
    "new york": (40.7128, -74.0060),
    "los angeles": (34.0522, -118.2437),
    "chicago": (41.8781, -87.6298),
    "houston": (29.7604, -95.3698),
    "phoenix": (33.4484, -112.0740),
    "philadelphia": (39.9526, -75.1652),
    "san antonio": (29.4241, -98.4936),
    "san diego": (32.7157, -117.1611),
    "dallas": (32.7767, -96.7970),
    "san jose": (37.3382, -121.8863),
    "austin": (30.2672, -97.7431),
    "jacksonville": (30.3322, -81.6557),
    "san francisco": (37.7749, -122.4194),
    "columbus": (39.9612, -82.9988),
    "charlotte": (35.2271, -80.8431),
    "indianapolis": (39.7684, -86.1581),
    "seattle": (47.6062, -122.3321),
    "denver": (39.7392, -104.9903),
    "washington": (38.9072, -77.0369),
    "boston": (42.3601, -71.0589),
    "nashville": (36.1627, -86.7816),
    "detroit": (42.3314, -83.0458),
    "portland": (45.5051, -122.6750),
    "memphis": (35.1495, -90.0490),
    "oklahoma city": (35.4676, -97.5164),
    "las vegas": (36.1699, -115.1398),
    "baltimore": (39.2904, -76.6122),
    "milwaukee": (43.0389, -87.9065),
    "albuquerque": (35.0844, -106.6504),
    "tucson": (32.2226, -110.9747),
    "fresno": (36.7378, -119.7871),
    "sacramento": (38.5816, -121.4944),
    "kansas city": (39.0997, -94.5786),
    "atlanta": (33.7490, -84.3880),
    "miami": (25.7617, -80.1918),
    "cleveland": (41.4993, -81.6944),
    "pittsburgh": (40.4406, -79.9959),
    "new orleans": (29.9511, -90.0715),
    "tampa": (27.9506, -82.4572),
    "minneapolis": (44.9778, -93.2650),
    "st louis": (38.6270, -90.1994),
    "cincinnati": (39.1031, -84.5120),
    "orlando": (28.5383, -81.3792),
    "salt lake city": (40.7608, -111.8910),
    "richmond": (37.5407, -77.4360),
    "san juan": (18.4655, -66.1057),
    "honolulu": (21.3069, -157.8583),
    "augusta": (33.4735, -82.0105),
    "savannah": (32.0809, -81.0912),
    "birmingham": (33.5207, -86.8025),
    "louisville": (38.2527, -85.7585),
    "buffalo": (42.8864, -78.8784),
    "raleigh": (35.7796, -78.6382),
    "hartford": (41.7658, -72.6734),
    "providence": (41.8240, -71.4128),
    "des moines": (41.5868, -93.6250),
    "boise": (43.6150, -116.2023),
    "omaha": (41.2565, -95.9345),
    "anchorage": (61.2181, -149.9003),

    # Europe
    "london": (51.5074, -0.1278),
    "paris": (48.8566, 2.3522),
    "berlin": (52.5200, 13.4050),
    "madrid": (40.4168, -3.7038),
    "rome": (41.9028, 12.4964),
    "amsterdam": (52.3676, 4.9041),
    "vienna": (48.2082, 16.3738),
    "dublin": (53.3498, -6.2603),
    "brussels": (50.8503, 4.3517),
    "lisbon": (38.7223, -9.1393),
    "barcelona": (41.3851, 2.1734),
    "milan": (45.4642, 9.1900),
    "munich": (48.1351, 11.5820),
    "stockholm": (59.3293, 18.0686),
    "oslo": (59.9139, 10.7522),
    "copenhagen": (55.6761, 12.5683),
    "helsinki": (60.1699, 24.9384),
    "warsaw": (52.2297, 21.0122),
    "prague": (50.0755, 14.4378),
    "budapest": (47.4979, 19.0402),
    "athens": (37.9838, 23.7275),
    "istanbul": (41.0082, 28.9784),
    "moscow": (55.7558, 37.6173),
    "st petersburg": (59.9343, 30.3351),
    "edinburgh": (55.9533, -3.1883),
    "manchester": (53.4808, -2.2426),
    "glasgow": (55.8642, -4.2518),
    "zurich": (47.3769, 8.5417),
    "geneva": (46.2044, 6.1432),

    # Asia
    "tokyo": (35.6762, 139.6503),
    "beijing": (39.9042, 116.4074),
    "shanghai": (31.2304, 121.4737),
    "hong kong": (22.3193, 114.1694),
    "singapore": (1.3521, 103.8198),
    "seoul": (37.5665, 126.9780),
    "taipei": (25.0330, 121.5654),
    "bangkok": (13.7563, 100.5018),
    "mumbai": (19.0760, 72.8777),
    "delhi": (28.7041, 77.1025),
    "bangalore": (12.9716, 77.5946),
    "chennai": (13.0827, 80.2707),
    "kolkata": (22.5726, 88.3639),
    "hyderabad": (17.3850, 78.4867),
    "jakarta": (-6.2088, 106.8456),
    "manila": (14.5995, 120.9842),
    "kuala lumpur": (3.1390, 101.6869),
    "ho chi minh": (10.8231, 106.6297),
    "hanoi": (21.0285, 105.8542),
    "osaka": (34.6937, 135.5023),
    "kyoto": (35.0116, 135.7681),

    # Oceania
    "sydney": (-33.8688, 151.2093),
    "melbourne": (-37.8136, 144.9631),
    "brisbane": (-27.4705, 153.0260),
    "perth": (-31.9505, 115.8605),
    "auckland": (-36.8509, 174.7645),
    "wellington": (-41.2866, 174.7756),

    # Canada
    "toronto": (43.6532, -79.3832),
    "vancouver": (49.2827, -123.1207),
    "montreal": (45.5017, -73.5673),
    "calgary": (51.0447, -114.0719),
    "ottawa": (45.4215, -75.6972),
    "edmonton": (53.5461, -113.4938),

    # Latin America
    "mexico city": (19.4326, -99.1332),
    "guadalajara": (20.6597, -103.3496),
    "monterrey": (25.6866, -100.3161),
    "buenos aires": (-34.6037, -58.3816),
    "sao paulo": (-23.5505, -46.6333),
    "rio de janeiro": (-22.9068, -43.1729),
    "lima": (-12.0464, -77.0428),
    "bogota": (4.7110, -74.0721),
    "santiago": (-33.4489, -70.6693),
    "caracas": (10.4806, -66.9036),

    # Africa & Middle East
    "cairo": (30.0444, 31.2357),
    "johannesburg": (-26.2041, 28.0473),
    "cape town": (-33.9249, 18.4241),
    "lagos": (6.5244, 3.3792),
    "nairobi": (-1.2921, 36.8219),
    "casablanca": (33.5731, -7.5898),
    "dubai": (25.2048, 55.2708),
    "tel aviv": (32.0853, 34.7818),
    "jerusalem": (31.7683, 35.2137),
    "riyadh": (24.7136, 46.6753),

    # US state names that users commonly type instead of a city
    "georgia": (33.0, -83.5),
})

CITY_ALIASES: Mapping[str, str] = MappingProxyType({
    "nyc": "new york",
    "la": "los angeles",
    "sf": "san francisco",
    "dc": "washington",
    "philly": "philadelphia",
    "vegas": "las vegas",
    "nola": "new orleans",
    "chi": "chicago",
})

_PUNCTUATION = re.compile(r"[,.]")
_WHITESPACE = re.compile(r"\s+")

# Shortest fragment allowed on either side of a containment or prefix match.
MIN_FRAGMENT_LENGTH = 4


@dataclass(frozen=True)
class ResolvedLocation:
    """
    Outcome of a gazetteer lookup.

    When ``matched`` is False the coordinates are always DEFAULT_COORDINATES.
    """
    lat: float
    lng: float
    matched: bool
    matched_city_name: Optional[str] = None


def normalize_city_text(text: Optional[str]) -> str:
    """
    Lowercase, turn commas and periods into spaces, collapse whitespace.
    """
    if not text:
        return ""
    lowered = _PUNCTUATION.sub(" ", text.lower())
    return _WHITESPACE.sub(" ", lowered).strip()


class GazetteerResolver:
    """
    Resolves free-text city input to coordinates.

    Rules are tried in priority order; the first rule that matches wins:
    1. exact name
    2. substring containment (either direction)
    3. alias of any single input word
    4. word-prefix against the first word of multi-word names
    5. default coordinate, unmatched
    """

    def __init__(
        self,
        cities: Mapping[str, Tuple[float, float]] = CITY_COORDINATES,
        aliases: Mapping[str, str] = CITY_ALIASES,
    ):
        self.cities = cities
        self.aliases = aliases

    # ─────────────────────────────────────────────
    # Public API
    # ─────────────────────────────────────────────

    def resolve(self, city_text: Optional[str]) -> ResolvedLocation:
        normalized = normalize_city_text(city_text)
        if not normalized:
            return self._default()

        for rule in (
            self._match_exact,
            self._match_substring,
            self._match_alias,
            self._match_word_prefix,
        ):
            city_name = rule(normalized)
            if city_name is not None:
                logger.debug(f"Gazetteer {rule.__name__} matched '{normalized}' -> '{city_name}'")
                return self._matched(city_name)

        logger.warning(f"No gazetteer match for '{normalized}', using default coordinates")
        return self._default()

    def search(self, query: Optional[str], limit: int = 10) -> List[str]:
        """
        Names containing the normalized query, in table order.
        """
        normalized = normalize_city_text(query)
        if len(normalized) < 2 or limit <= 0:
            return []
        return [name for name in self.cities if normalized in name][:limit]

    def coordinates_for(self, city_name: str) -> Tuple[float, float]:
        return self.cities[city_name]

    # ─────────────────────────────────────────────
    # Matching Rules
    # ─────────────────────────────────────────────

    def _match_exact(self, normalized: str) -> Optional[str]:
        return normalized if normalized in self.cities else None

    def _match_substring(self, normalized: str) -> Optional[str]:
        allow_reverse = len(normalized) >= MIN_FRAGMENT_LENGTH
        for city_name in self.cities:
            if city_name in normalized:
                return city_name
            if allow_reverse and normalized in city_name:
                return city_name
        return None

    def _match_alias(self, normalized: str) -> Optional[str]:
        for word in normalized.split(" "):
            city_name = self.aliases.get(word)
            if city_name is not None and city_name in self.cities:
                return city_name
        return None

    def _match_word_prefix(self, normalized: str) -> Optional[str]:
        words = [w for w in normalized.split(" ") if len(w) >= MIN_FRAGMENT_LENGTH]
        for word in words:
            for city_name in self.cities:
                if " " not in city_name:
                    continue
                first_word = city_name.split(" ", 1)[0]
                if word == first_word:
                    return city_name
                shorter, longer = sorted((word, first_word), key=len)
                if len(shorter) >= MIN_FRAGMENT_LENGTH and longer.startswith(shorter):
                    return city_name
        return None

    # ─────────────────────────────────────────────
    # Result Builders
    # ─────────────────────────────────────────────

    def _matched(self, city_name: str) -> ResolvedLocation:
        lat, lng = self.cities[city_name]
        return ResolvedLocation(lat=lat, lng=lng, matched=True, matched_city_name=city_name)

    @staticmethod
    def _default() -> ResolvedLocation:
        lat, lng = DEFAULT_COORDINATES
        return ResolvedLocation(lat=lat, lng=lng, matched=False)


default_resolver = GazetteerResolver()
