import json
from datetime import date
import unittest

import httpx

from birthchart.client.chart_client import ChartClient
from birthchart.domain.chart.errors import InvalidBirthDataError, RemoteChartError
from birthchart.domain.zodiac.signs import ZodiacSign


SERVER_CHART = {
    "sun": "Gemini",
    "moon": "Pisces",
    "rising": "Scorpio",
    "venus": "Taurus",
    "northNode": "Libra",
    "southNode": "Aries",
    "coordinates": {"lat": 34.0522, "lng": -118.2437},
    "locationMatched": True,
    "matchedCity": "los angeles",
}


def client_with(handler):
    return ChartClient(base_url="http://charts.test", transport=httpx.MockTransport(handler))


class TestChartClient(unittest.IsolatedAsyncioTestCase):
    async def test_returns_server_chart(self):
        seen = {}

        def handler(request):
            seen["url"] = str(request.url)
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json=SERVER_CHART)

        chart = await client_with(handler).resolve_remote("1995-06-15", "14:30", "Los Angeles")

        self.assertEqual(seen["url"], "http://charts.test/api/birth-chart")
        self.assertEqual(seen["body"], {
            "dateOfBirth": "1995-06-15",
            "timeOfBirth": "14:30",
            "cityOfBirth": "Los Angeles",
        })
        self.assertEqual(chart.moon, ZodiacSign.PISCES)
        self.assertEqual(chart.south_node, ZodiacSign.ARIES)

    async def test_missing_time_is_sent_as_noon(self):
        seen = {}

        def handler(request):
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json=SERVER_CHART)

        await client_with(handler).resolve_remote("1995-06-15", None, "Los Angeles")

        self.assertEqual(seen["body"]["timeOfBirth"], "12:00")

    async def test_server_error_falls_back_to_sun_sign(self):
        chart = await client_with(lambda request: httpx.Response(500)).resolve_remote(
            "1995-06-15", "14:30", "Los Angeles"
        )

        self.assertEqual(chart.sun, ZodiacSign.GEMINI)
        self.assertEqual(chart.moon, ZodiacSign.GEMINI)
        self.assertEqual(chart.rising, ZodiacSign.GEMINI)
        self.assertIsNone(chart.venus)
        self.assertTrue(chart.location_matched)

    async def test_network_failure_falls_back(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        chart = await client_with(handler).resolve_remote("2000-12-22", None, "")

        self.assertEqual(chart.sun, ZodiacSign.CAPRICORN)
        self.assertEqual(chart.rising, ZodiacSign.CAPRICORN)
        self.assertFalse(chart.location_matched)

    async def test_fetch_raises_on_malformed_payload(self):
        client = client_with(lambda request: httpx.Response(200, json={"sun": "Vulcan"}))

        with self.assertRaises(RemoteChartError):
            await client.fetch("1995-06-15")

    async def test_malformed_date_is_rejected_before_any_request(self):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(400, json={"error": "Invalid request body"})

        client = client_with(handler)
        for value in ("15/06/1995", "1995-06-15garbage", "1995-02-30"):
            with self.assertRaises(InvalidBirthDataError):
                await client.resolve_remote(value, "14:30", "Paris")

        self.assertEqual(calls, [])

    async def test_malformed_time_is_rejected_before_any_request(self):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(200, json=SERVER_CHART)

        with self.assertRaises(InvalidBirthDataError):
            await client_with(handler).resolve_remote("1995-06-15", "half past two", "Paris")

        self.assertEqual(calls, [])

    async def test_date_objects_are_sent_as_iso_strings(self):
        seen = {}

        def handler(request):
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json=SERVER_CHART)

        await client_with(handler).fetch(date(1995, 6, 15), "14:30", "Los Angeles")

        self.assertEqual(seen["body"]["dateOfBirth"], "1995-06-15")


if __name__ == "__main__":
    unittest.main()
