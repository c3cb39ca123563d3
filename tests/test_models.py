import json
import unittest

from pydantic import ValidationError

from app.models import DisplayWeather, UpstreamWeatherResponse


SAMPLE_BODY = {
    "coord": {"lon": -89.65, "lat": 39.8},
    "weather": [{"id": 803, "main": "Clouds", "description": "broken clouds", "icon": "04d"}],
    "base": "stations",
    "main": {
        "temp": 72.3,
        "feels_like": 71.9,
        "temp_min": 70.0,
        "temp_max": 74.1,
        "pressure": 1015,
        "humidity": 55,
        "sea_level": 1015,
        "grnd_level": 985,
    },
    "visibility": 10000,
    "wind": {"speed": 9.22, "deg": 200, "gust": 15.01},
    "clouds": {"all": 75},
    "dt": 1717430400,
    "sys": {"type": 2, "id": 2000415, "country": "US", "sunrise": 1717410000, "sunset": 1717463000},
    "timezone": -18000,
    "id": 4250542,
    "name": "Springfield",
    "cod": 200,
}


class TestUpstreamWeatherResponse(unittest.TestCase):
    def test_full_payload_decodes(self):
        parsed = UpstreamWeatherResponse.model_validate_json(json.dumps(SAMPLE_BODY))
        self.assertEqual(parsed.name, "Springfield")
        self.assertEqual(parsed.main.feels_like, 71.9)
        self.assertEqual(parsed.weather[0].main, "Clouds")
        self.assertEqual(parsed.sys.country, "US")
        self.assertEqual(parsed.cod, 200)

    def test_missing_fields_use_zero_values(self):
        parsed = UpstreamWeatherResponse.model_validate_json('{"main": {"feels_like": 50}}')
        self.assertEqual(parsed.name, "")
        self.assertEqual(parsed.weather, [])
        self.assertEqual(parsed.wind.speed, 0.0)
        self.assertEqual(parsed.main.feels_like, 50.0)

    def test_unknown_fields_ignored(self):
        parsed = UpstreamWeatherResponse.model_validate_json('{"rain": {"1h": 0.2}, "name": "X"}')
        self.assertEqual(parsed.name, "X")

    def test_null_fields_use_zero_values(self):
        parsed = UpstreamWeatherResponse.model_validate_json(
            '{"name": null, "weather": null, "main": {"feels_like": 41.5, "humidity": null}, "wind": null}'
        )
        self.assertEqual(parsed.name, "")
        self.assertEqual(parsed.weather, [])
        self.assertEqual(parsed.main.feels_like, 41.5)
        self.assertEqual(parsed.main.humidity, 0)
        self.assertEqual(parsed.wind.speed, 0.0)

    def test_null_document_is_all_defaults(self):
        parsed = UpstreamWeatherResponse.model_validate_json("null")
        self.assertEqual(parsed.name, "")
        self.assertEqual(parsed.main.feels_like, 0.0)

    def test_truncated_json_rejected(self):
        with self.assertRaises(ValidationError):
            UpstreamWeatherResponse.model_validate_json('{"main": {"feels_like": 5')

    def test_wrong_type_rejected(self):
        with self.assertRaises(ValidationError):
            UpstreamWeatherResponse.model_validate_json('{"weather": "sunny"}')


class TestDisplayWeather(unittest.TestCase):
    def test_is_immutable(self):
        d = DisplayWeather(name="a", temp_description="Hot", temp=90.0, current_description="")
        with self.assertRaises(Exception):
            d.name = "b"


if __name__ == "__main__":
    unittest.main()
