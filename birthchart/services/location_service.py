from typing import Any, Dict, List

from birthchart.domain.location.gazetteer import GazetteerResolver, default_resolver


class LocationService:
    """
    Service for searching the built-in gazetteer.

    Powers city autocomplete; the names it returns resolve exactly
    when submitted back as a city of birth.
    """

    def __init__(self, resolver: GazetteerResolver = default_resolver):
        self.resolver = resolver

    def search_cities(self, query: str, limit: int = 10) -> List[Dict[str, Any]]:
        results = []
        for name in self.resolver.search(query, limit=limit):
            lat, lng = self.resolver.coordinates_for(name)
            results.append({
                "display_name": name.title(),
                "city": name,
                "latitude": lat,
                "longitude": lng,
            })
        return results
