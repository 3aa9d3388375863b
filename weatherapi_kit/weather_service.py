# ABOUTME: Service layer for WeatherAPI.com calls and response decoding.
# ABOUTME: Builds current/forecast requests, sends them over httpx and decodes into typed models.

from typing import TypeVar

import httpx
from pydantic import ValidationError

from weatherapi_kit.errors import DecodeError, MalformedRequestError, UnexpectedResponseError
from weatherapi_kit.models import CurrentWeatherResult, ForecastResult, WireModel

BASE_URL = "https://api.weatherapi.com/v1"
CURRENT_ENDPOINT = "current.json"
FORECAST_ENDPOINT = "forecast.json"

ModelT = TypeVar("ModelT", bound=WireModel)


def build_request(
    endpoint: str,
    query: str,
    api_key: str,
    days: int | None = None,
    base_url: str = BASE_URL,
) -> httpx.Request:
    """Build a GET request for an endpoint with ordered q, days and key parameters.

    The query is passed through opaquely; the service decides whether it names a
    location. ``days`` is not clamped.
    """
    if not query:
        raise MalformedRequestError("Location query must not be empty")
    if not api_key:
        raise MalformedRequestError("API key must not be empty")

    params: list[tuple[str, str | int]] = [("q", query)]
    if days is not None:
        params.append(("days", days))
    params.append(("key", api_key))

    try:
        return httpx.Request("GET", f"{base_url.rstrip('/')}/{endpoint}", params=params)
    except (httpx.InvalidURL, TypeError, ValueError) as e:
        raise MalformedRequestError(f"Could not build request for {endpoint}: {e}") from e


def decode_response(model: type[ModelT], status_code: int, content: bytes) -> ModelT:
    """Decode a raw response body into ``model``, classifying failures.

    Non-2xx statuses raise UnexpectedResponseError without touching the body.
    Malformed JSON and schema mismatches raise DecodeError.
    """
    if not 200 <= status_code <= 299:
        raise UnexpectedResponseError(status_code, content)
    try:
        return model.model_validate_json(content)
    except ValidationError as e:
        raise DecodeError(e) from e


async def get_current(
    client: httpx.AsyncClient,
    query: str,
    api_key: str,
    base_url: str = BASE_URL,
) -> CurrentWeatherResult:
    """Fetch current conditions for a location query."""
    request = build_request(CURRENT_ENDPOINT, query, api_key, base_url=base_url)
    return await _fetch(client, request, CurrentWeatherResult)


async def get_forecast(
    client: httpx.AsyncClient,
    query: str,
    api_key: str,
    days: int,
    base_url: str = BASE_URL,
) -> ForecastResult:
    """Fetch current conditions plus a ``days``-day forecast (1-10) for a location query."""
    request = build_request(FORECAST_ENDPOINT, query, api_key, days=days, base_url=base_url)
    return await _fetch(client, request, ForecastResult)


async def _fetch(client: httpx.AsyncClient, request: httpx.Request, model: type[ModelT]) -> ModelT:
    resp = await client.send(request)
    return decode_response(model, resp.status_code, resp.content)
