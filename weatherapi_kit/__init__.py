# ABOUTME: Typed async client for the WeatherAPI.com current and forecast endpoints.
# ABOUTME: Re-exports the client, result models and error classes.

from weatherapi_kit.deps import WeatherClient, create_http_client
from weatherapi_kit.errors import DecodeError, MalformedRequestError, UnexpectedResponseError, WeatherError
from weatherapi_kit.models import (
    AstronomicalData,
    Condition,
    CurrentConditions,
    CurrentWeatherResult,
    DailySummary,
    Forecast,
    ForecastDay,
    ForecastResult,
    HourlyConditions,
    Location,
)

__all__ = [
    "AstronomicalData",
    "Condition",
    "CurrentConditions",
    "CurrentWeatherResult",
    "DailySummary",
    "DecodeError",
    "Forecast",
    "ForecastDay",
    "ForecastResult",
    "HourlyConditions",
    "Location",
    "MalformedRequestError",
    "UnexpectedResponseError",
    "WeatherClient",
    "WeatherError",
    "create_http_client",
]
