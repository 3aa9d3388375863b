# ABOUTME: Swappable weather client holding the current/forecast operations as function-valued fields.
# ABOUTME: Provides live (httpx-backed), preview (canned data), stub and unimplemented variants.

from collections.abc import Awaitable, Callable

import httpx
from pydantic import BaseModel, ConfigDict

from weatherapi_kit.fixtures import PREVIEW_CURRENT_WEATHER, PREVIEW_FORECAST
from weatherapi_kit.models import CurrentWeatherResult, ForecastResult
from weatherapi_kit.weather_service import BASE_URL, get_current, get_forecast

CurrentFn = Callable[[str, str], Awaitable[CurrentWeatherResult]]
ForecastFn = Callable[[str, str, int], Awaitable[ForecastResult]]


class WeatherClient(BaseModel):
    """The two weather operations, injected wherever weather data is needed.

    Callers only ever do ``await client.current(query, api_key)`` or
    ``await client.forecast(query, api_key, days)``; which implementation answers is
    decided where the client is constructed. Replace a single operation with
    ``client.model_copy(update={"forecast": fake})``.
    """

    model_config = ConfigDict(frozen=True)

    current: CurrentFn
    forecast: ForecastFn

    @classmethod
    def live(cls, http_client: httpx.AsyncClient, base_url: str = BASE_URL) -> "WeatherClient":
        """Client that talks to WeatherAPI.com over ``http_client``.

        The caller owns ``http_client`` and closes it; the client never opens
        or closes connections itself. Use ``create_http_client()`` for a default one.
        """

        async def current(query: str, api_key: str) -> CurrentWeatherResult:
            return await get_current(http_client, query, api_key, base_url=base_url)

        async def forecast(query: str, api_key: str, days: int) -> ForecastResult:
            return await get_forecast(http_client, query, api_key, days, base_url=base_url)

        return cls(current=current, forecast=forecast)

    @classmethod
    def stub(
        cls,
        current: CurrentWeatherResult | None = None,
        forecast: ForecastResult | None = None,
    ) -> "WeatherClient":
        """Client that returns fixed results for any input.

        An operation without a canned result behaves as in ``unimplemented()``.
        """
        client = cls.unimplemented()
        update = {}
        if current is not None:

            async def _current(query: str, api_key: str) -> CurrentWeatherResult:
                return current

            update["current"] = _current
        if forecast is not None:

            async def _forecast(query: str, api_key: str, days: int) -> ForecastResult:
                return forecast

            update["forecast"] = _forecast
        return client.model_copy(update=update)

    @classmethod
    def preview(cls) -> "WeatherClient":
        """Client answering with the canned New York data from ``fixtures``."""
        return cls.stub(current=PREVIEW_CURRENT_WEATHER, forecast=PREVIEW_FORECAST)

    @classmethod
    def unimplemented(cls) -> "WeatherClient":
        """Client whose operations raise, for tests that must override what they use."""

        async def current(query: str, api_key: str) -> CurrentWeatherResult:
            raise NotImplementedError(f"{cls.__name__}.current is not implemented (query={query!r})")

        async def forecast(query: str, api_key: str, days: int) -> ForecastResult:
            raise NotImplementedError(f"{cls.__name__}.forecast is not implemented (query={query!r})")

        return cls(current=current, forecast=forecast)


def create_http_client(timeout: float = 10.0) -> httpx.AsyncClient:
    """Create the httpx client used by the live weather client.

    No retry transport is installed: every failure reaches the caller.
    """
    return httpx.AsyncClient(timeout=timeout)
