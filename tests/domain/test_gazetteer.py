import unittest

from birthchart.domain.location.gazetteer import (
    CITY_COORDINATES,
    DEFAULT_COORDINATES,
    GazetteerResolver,
    normalize_city_text,
)


class TestNormalizeCityText(unittest.TestCase):
    def test_punctuation_and_whitespace(self):
        self.assertEqual(normalize_city_text("  St. Louis,   MO "), "st louis mo")
        self.assertEqual(normalize_city_text(None), "")


class TestGazetteerResolver(unittest.TestCase):
    def setUp(self):
        self.resolver = GazetteerResolver()

    def assertMatched(self, text, city):
        result = self.resolver.resolve(text)
        self.assertTrue(result.matched, text)
        self.assertEqual(result.matched_city_name, city)
        self.assertEqual((result.lat, result.lng), CITY_COORDINATES[city])

    def assertUnmatched(self, text):
        result = self.resolver.resolve(text)
        self.assertFalse(result.matched, text)
        self.assertIsNone(result.matched_city_name)
        self.assertEqual((result.lat, result.lng), DEFAULT_COORDINATES)

    # ─── Rule 1: exact ─────────────────────

    def test_exact_match(self):
        self.assertMatched("Los Angeles", "los angeles")
        self.assertMatched("St. Louis", "st louis")

    def test_los_angeles_coordinates(self):
        result = self.resolver.resolve("Los Angeles")
        self.assertEqual((result.lat, result.lng), (34.0522, -118.2437))

    # ─── Rule 2: substring ─────────────────

    def test_key_inside_input(self):
        self.assertMatched("Paris, France", "paris")
        self.assertMatched("New York City", "new york")

    def test_input_inside_key(self):
        self.assertMatched("francisco", "san francisco")

    def test_short_input_is_not_searched_inside_keys(self):
        # "osa" would be inside "osaka" but is shorter than four characters
        self.assertUnmatched("osa")

    def test_first_entry_in_table_order_wins(self):
        self.assertMatched("New York, Los Angeles", "new york")
        self.assertMatched("Atlanta, Georgia", "atlanta")

    def test_substring_beats_alias(self):
        self.assertMatched("Chicago NYC", "chicago")

    # ─── Rule 3: aliases ───────────────────

    def test_nyc_alias_matches_new_york(self):
        self.assertEqual(
            self.resolver.resolve("NYC"),
            self.resolver.resolve("New York"),
        )

    def test_alias_on_any_word(self):
        self.assertMatched("LA", "los angeles")
        self.assertMatched("born in philly", "philadelphia")
        self.assertMatched("DC area", "washington")

    # ─── Rule 4: word prefix ───────────────

    def test_word_prefix_against_multi_word_names(self):
        self.assertMatched("Salty Lake", "salt lake city")
        self.assertMatched("Oklahoma, OK", "oklahoma city")

    def test_short_first_words_do_not_prefix_match(self):
        # "san" is shorter than four characters
        self.assertUnmatched("Sanford")

    # ─── Rule 5: default ───────────────────

    def test_unknown_city(self):
        self.assertUnmatched("Atlantis")

    def test_empty_input(self):
        self.assertUnmatched("")
        self.assertUnmatched("   ")
        self.assertUnmatched(None)

    # ─── Search ────────────────────────────

    def test_search_keeps_table_order(self):
        names = self.resolver.search("san")
        self.assertEqual(names[:4], ["san antonio", "san diego", "san jose", "san francisco"])
        self.assertTrue(all("san" in name for name in names))

    def test_search_limit_and_short_query(self):
        self.assertEqual(len(self.resolver.search("a", limit=3)), 0)
        self.assertEqual(len(self.resolver.search("an", limit=3)), 3)


if __name__ == "__main__":
    unittest.main()
