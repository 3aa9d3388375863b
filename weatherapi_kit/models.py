# ABOUTME: Frozen Pydantic models for WeatherAPI.com current and forecast responses.
# ABOUTME: Field aliases hold the wire names; WireFlag decodes the service's 0/1 booleans.

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, PlainSerializer, ValidationInfo


def decode_flag(value: Any, info: ValidationInfo) -> bool:
    """Decode a 0/1 wire integer into a bool, rejecting anything else.

    Python bools are let through only when models are built in code; a JSON
    true/false is a schema violation.
    """
    if isinstance(value, bool):
        if info.mode == "python":
            return value
    elif isinstance(value, int) and value in (0, 1):
        return value == 1
    raise ValueError(f"expected 0 or 1, got {value!r}")


def encode_flag(value: bool) -> int:
    """Encode a bool back into the service's 0/1 representation."""
    return 1 if value else 0


WireFlag = Annotated[
    bool,
    BeforeValidator(decode_flag),
    PlainSerializer(encode_flag, return_type=int, when_used="json"),
]


class WireModel(BaseModel):
    """Base for all response models: immutable, strictly typed, populated by wire alias."""

    model_config = ConfigDict(frozen=True, strict=True, populate_by_name=True)

    def to_wire(self) -> dict[str, Any]:
        """Dump back to the JSON shape the service delivers."""
        return self.model_dump(by_alias=True, mode="json")


class Location(WireModel):
    """Geographical and timezone information for the queried location.

    ``localtime`` is formatted "yyyy-MM-dd HH:mm" in the ``timezone_id`` zone and
    denotes the same instant as ``localtime_epoch``.
    """

    name: str
    region: str
    country: str
    latitude: float = Field(alias="lat")
    longitude: float = Field(alias="lon")
    timezone_id: str = Field(alias="tz_id")
    localtime_epoch: int
    localtime: str


class Condition(WireModel):
    """Weather condition text, protocol-relative icon URL and service condition code."""

    text: str
    icon: str
    code: int


class Conditions(WireModel):
    """Measurements shared by current and hourly conditions, in metric and imperial units."""

    temperature_celsius: float = Field(alias="temp_c")
    temperature_fahrenheit: float = Field(alias="temp_f")
    is_day: WireFlag
    condition: Condition
    wind_speed_mph: float = Field(alias="wind_mph")
    wind_speed_kph: float = Field(alias="wind_kph")
    wind_degree: int
    wind_direction: str = Field(alias="wind_dir")
    pressure_mb: float
    pressure_in: float
    precipitation_mm: float = Field(alias="precip_mm")
    precipitation_in: float = Field(alias="precip_in")
    humidity: int
    cloud: int
    feels_like_celsius: float = Field(alias="feelslike_c")
    feels_like_fahrenheit: float = Field(alias="feelslike_f")
    visibility_km: float = Field(alias="vis_km")
    visibility_miles: float = Field(alias="vis_miles")
    uv: float
    gust_mph: float
    gust_kph: float


class CurrentConditions(Conditions):
    """Current weather at the location, as last updated by the service."""

    last_updated_epoch: int
    last_updated: str


class HourlyConditions(Conditions):
    """One hour of a forecast day."""

    time_epoch: int
    time: str
    wind_chill_celsius: float = Field(alias="windchill_c")
    wind_chill_fahrenheit: float = Field(alias="windchill_f")
    heat_index_celsius: float = Field(alias="heatindex_c")
    heat_index_fahrenheit: float = Field(alias="heatindex_f")
    dew_point_celsius: float = Field(alias="dewpoint_c")
    dew_point_fahrenheit: float = Field(alias="dewpoint_f")
    will_it_rain: WireFlag
    chance_of_rain: int
    will_it_snow: WireFlag
    chance_of_snow: int


class DailySummary(WireModel):
    """Aggregated figures for a whole forecast day."""

    max_temperature_celsius: float = Field(alias="maxtemp_c")
    max_temperature_fahrenheit: float = Field(alias="maxtemp_f")
    min_temperature_celsius: float = Field(alias="mintemp_c")
    min_temperature_fahrenheit: float = Field(alias="mintemp_f")
    avg_temperature_celsius: float = Field(alias="avgtemp_c")
    avg_temperature_fahrenheit: float = Field(alias="avgtemp_f")
    max_wind_mph: float = Field(alias="maxwind_mph")
    max_wind_kph: float = Field(alias="maxwind_kph")
    total_precipitation_mm: float = Field(alias="totalprecip_mm")
    total_precipitation_in: float = Field(alias="totalprecip_in")
    total_snow_cm: float = Field(alias="totalsnow_cm")
    avg_visibility_km: float = Field(alias="avgvis_km")
    avg_visibility_miles: float = Field(alias="avgvis_miles")
    avg_humidity: float = Field(alias="avghumidity")
    condition: Condition
    uv: float


class AstronomicalData(WireModel):
    """Sun and moon times ("06:45 AM") plus moon phase, passed through as strings."""

    sunrise: str
    sunset: str
    moonrise: str
    moonset: str
    moon_phase: str
    moon_illumination: str


class ForecastDay(WireModel):
    """One calendar day of a forecast, with its hours in the order the service sent them."""

    date: str
    date_epoch: int
    day: DailySummary
    astro: AstronomicalData
    hours: tuple[HourlyConditions, ...] = Field(default=(), alias="hour")


class Forecast(WireModel):
    """Container for the requested forecast days, starting from today."""

    days: tuple[ForecastDay, ...] = Field(default=(), alias="forecastday")


class CurrentWeatherResult(WireModel):
    """Parsed response from the current.json endpoint."""

    location: Location
    current: CurrentConditions


class ForecastResult(WireModel):
    """Parsed response from the forecast.json endpoint."""

    location: Location
    current: CurrentConditions
    forecast: Forecast

    @property
    def days(self) -> tuple[ForecastDay, ...]:
        return self.forecast.days
