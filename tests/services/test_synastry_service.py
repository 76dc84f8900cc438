import unittest

from birthchart.domain.chart.schemas import BirthChartResult, Coordinates
from birthchart.domain.zodiac.signs import Element
from birthchart.services.synastry_service import CHALLENGING, HARMONIOUS, SynastryService


def chart(**signs):
    return BirthChartResult(
        coordinates=Coordinates(lat=0.0, lng=0.0),
        location_matched=True,
        **signs,
    )


class TestSynastryService(unittest.TestCase):
    def setUp(self):
        self.service = SynastryService()

    def test_element_compatibility(self):
        self.assertEqual(self.service.element_compatibility(Element.FIRE, Element.AIR), HARMONIOUS)
        self.assertEqual(self.service.element_compatibility(Element.WATER, Element.EARTH), HARMONIOUS)
        self.assertEqual(self.service.element_compatibility(Element.EARTH, Element.EARTH), HARMONIOUS)
        self.assertEqual(self.service.element_compatibility(Element.FIRE, Element.WATER), CHALLENGING)
        self.assertEqual(self.service.element_compatibility(Element.AIR, Element.EARTH), CHALLENGING)

    def test_compares_shared_placements(self):
        yours = chart(sun="Aries", moon="Cancer", rising="Libra", venus="Taurus")
        theirs = chart(sun="Gemini", moon="Leo", rising="Capricorn", venus="Virgo", mars="Leo")

        result = self.service.compare(yours, theirs)

        placements = [c["placement"] for c in result["connections"]]
        self.assertEqual(placements, ["sun", "moon", "rising", "venus"])
        self.assertEqual(result["total"], 4)
        self.assertEqual(result["harmoniousCount"], 2)

        sun = result["connections"][0]
        self.assertEqual(sun["yourElement"], "fire")
        self.assertEqual(sun["theirElement"], "air")
        self.assertEqual(sun["compatibility"], HARMONIOUS)

    def test_skips_partner_rising_copied_from_sun(self):
        yours = chart(sun="Aries", moon="Aries", rising="Leo")
        theirs = chart(sun="Pisces", moon="Pisces", rising="Pisces")

        result = self.service.compare(yours, theirs)

        self.assertEqual([c["placement"] for c in result["connections"]], ["sun", "moon"])


if __name__ == "__main__":
    unittest.main()
