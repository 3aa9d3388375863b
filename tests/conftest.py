# ABOUTME: Shared test fixtures for the weatherapi_kit test suite.
# ABOUTME: Provides wire-format payloads shaped like real WeatherAPI.com responses.

import copy

import pytest

LOCATION = {
    "name": "London",
    "region": "City of London, Greater London",
    "country": "United Kingdom",
    "lat": 51.52,
    "lon": -0.11,
    "tz_id": "Europe/London",
    "localtime_epoch": 1732190400,
    "localtime": "2024-11-21 12:00",
}

CURRENT = {
    "last_updated_epoch": 1732190100,
    "last_updated": "2024-11-21 11:55",
    "temp_c": 18.0,
    "temp_f": 64.4,
    "is_day": 1,
    "condition": {
        "text": "Partly cloudy",
        "icon": "//cdn.weatherapi.com/weather/64x64/day/116.png",
        "code": 1003,
    },
    "wind_mph": 10.5,
    "wind_kph": 16.9,
    "wind_degree": 250,
    "wind_dir": "WSW",
    "pressure_mb": 1015.0,
    "pressure_in": 29.97,
    "precip_mm": 0.0,
    "precip_in": 0.0,
    "humidity": 72,
    "cloud": 50,
    "feelslike_c": 17.2,
    "feelslike_f": 63.0,
    "vis_km": 10.0,
    "vis_miles": 6.0,
    "uv": 2.0,
    "gust_mph": 14.1,
    "gust_kph": 22.7,
}


def make_hour(date: str, date_epoch: int, hour: int) -> dict:
    """Build one wire-format hour entry."""
    return {
        "time_epoch": date_epoch + hour * 3600,
        "time": f"{date} {hour:02d}:00",
        "temp_c": 8.0 + hour * 0.25,
        "temp_f": 46.4 + hour * 0.45,
        "is_day": 1 if 7 <= hour < 16 else 0,
        "condition": {"text": "Light rain", "icon": "//cdn.weatherapi.com/weather/64x64/day/296.png", "code": 1183},
        "wind_mph": 8.3,
        "wind_kph": 13.3,
        "wind_degree": 240,
        "wind_dir": "WSW",
        "pressure_mb": 1012.0,
        "pressure_in": 29.88,
        "precip_mm": 0.2,
        "precip_in": 0.01,
        "humidity": 88,
        "cloud": 100,
        "feelslike_c": 5.9,
        "feelslike_f": 42.6,
        "windchill_c": 5.9,
        "windchill_f": 42.6,
        "heatindex_c": 8.0,
        "heatindex_f": 46.4,
        "dewpoint_c": 6.1,
        "dewpoint_f": 43.0,
        "will_it_rain": 1,
        "chance_of_rain": 86,
        "will_it_snow": 0,
        "chance_of_snow": 0,
        "vis_km": 9.0,
        "vis_miles": 5.0,
        "gust_mph": 12.9,
        "gust_kph": 20.8,
        "uv": 0.0,
    }


def make_forecast_day(date: str, date_epoch: int, hours: int = 24) -> dict:
    """Build one wire-format forecastday entry with ``hours`` hour entries."""
    return {
        "date": date,
        "date_epoch": date_epoch,
        "day": {
            "maxtemp_c": 13.9,
            "maxtemp_f": 57.0,
            "mintemp_c": 7.1,
            "mintemp_f": 44.8,
            "avgtemp_c": 10.2,
            "avgtemp_f": 50.4,
            "maxwind_mph": 15.4,
            "maxwind_kph": 24.8,
            "totalprecip_mm": 3.61,
            "totalprecip_in": 0.14,
            "totalsnow_cm": 0,
            "avgvis_km": 9.4,
            "avgvis_miles": 5,
            "avghumidity": 85,
            "condition": {"text": "Patchy rain nearby", "icon": "//cdn.weatherapi.com/weather/64x64/day/176.png", "code": 1063},
            "uv": 0.4,
        },
        "astro": {
            "sunrise": "07:30 AM",
            "sunset": "04:03 PM",
            "moonrise": "09:12 PM",
            "moonset": "01:39 PM",
            "moon_phase": "Waning Gibbous",
            "moon_illumination": "71",
        },
        "hour": [make_hour(date, date_epoch, h) for h in range(hours)],
    }


@pytest.fixture
def current_payload() -> dict:
    """A complete current.json response body."""
    return {"location": copy.deepcopy(LOCATION), "current": copy.deepcopy(CURRENT)}


@pytest.fixture
def forecast_payload() -> dict:
    """A complete 3-day forecast.json response body."""
    days = [
        make_forecast_day("2024-11-21", 1732147200),
        make_forecast_day("2024-11-22", 1732233600),
        make_forecast_day("2024-11-23", 1732320000),
    ]
    return {
        "location": copy.deepcopy(LOCATION),
        "current": copy.deepcopy(CURRENT),
        "forecast": {"forecastday": days},
    }
