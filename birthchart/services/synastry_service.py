"""
Elemental Synastry Service

Compares two independently resolved charts placement by placement,
using the element of each sign.
"""

from typing import Any, Dict, List, Optional

from birthchart.domain.chart.schemas import BirthChartResult
from birthchart.domain.zodiac.signs import Element, ZodiacSign, element_of


HARMONIOUS = "harmonious"
CHALLENGING = "challenging"


class SynastryService:
    """
    Service to compare the elemental make-up of two charts.
    """

    # ─────────────────────────────────────────────
    # Constants / Lookup Tables
    # ─────────────────────────────────────────────

    # Fire feeds on air, earth holds water
    HARMONIOUS_ELEMENTS = {
        Element.FIRE: {Element.FIRE, Element.AIR},
        Element.AIR: {Element.AIR, Element.FIRE},
        Element.EARTH: {Element.EARTH, Element.WATER},
        Element.WATER: {Element.WATER, Element.EARTH},
    }

    PLACEMENTS = ("sun", "moon", "rising", "venus", "mercury", "mars")

    # ─────────────────────────────────────────────
    # Public API
    # ─────────────────────────────────────────────

    def element_compatibility(self, first: Element, second: Element) -> str:
        if second in self.HARMONIOUS_ELEMENTS[first]:
            return HARMONIOUS
        return CHALLENGING

    def compare(self, yours: BirthChartResult, theirs: BirthChartResult) -> Dict[str, Any]:
        """
        Compare two charts.

        Returns:
            Dict with harmoniousCount, total and the per-placement connections.
        """
        connections: List[Dict[str, Any]] = []

        for placement in self.PLACEMENTS:
            your_sign = getattr(yours, placement)
            their_sign = self._partner_sign(theirs, placement)
            if your_sign is None or their_sign is None:
                continue
            connections.append(self._connection(placement, your_sign, their_sign))

        harmonious = sum(1 for c in connections if c["compatibility"] == HARMONIOUS)
        return {
            "harmoniousCount": harmonious,
            "total": len(connections),
            "connections": connections,
        }

    # ─────────────────────────────────────────────
    # Helpers
    # ─────────────────────────────────────────────

    def _partner_sign(self, chart: BirthChartResult, placement: str) -> Optional[ZodiacSign]:
        sign = getattr(chart, placement)
        # A sun-only fallback chart copies the sun sign into rising
        if placement == "rising" and sign == chart.sun:
            return None
        return sign

    def _connection(
        self,
        placement: str,
        your_sign: ZodiacSign,
        their_sign: ZodiacSign,
    ) -> Dict[str, Any]:
        your_element = element_of(your_sign)
        their_element = element_of(their_sign)
        return {
            "placement": placement,
            "yourSign": your_sign.value,
            "theirSign": their_sign.value,
            "yourElement": your_element.value,
            "theirElement": their_element.value,
            "compatibility": self.element_compatibility(your_element, their_element),
        }
