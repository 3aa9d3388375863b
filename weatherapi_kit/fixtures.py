# ABOUTME: Canned New York weather data used by the preview client and in tests.
# ABOUTME: Built from literal values so it never touches the network.

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

PREVIEW_LOCATION = Location(
    name="New York",
    region="New York",
    country="United States of America",
    latitude=40.71,
    longitude=-74.01,
    timezone_id="America/New_York",
    localtime_epoch=1636000000,
    localtime="2021-11-04 12:00",
)

SUNNY = Condition(text="Sunny", icon="//cdn.weatherapi.com/weather/64x64/day/113.png", code=1000)
CLEAR = Condition(text="Clear", icon="//cdn.weatherapi.com/weather/64x64/night/113.png", code=1000)

PREVIEW_CURRENT = CurrentConditions(
    last_updated_epoch=1636000000,
    last_updated="2021-11-04 12:00",
    temperature_celsius=22.0,
    temperature_fahrenheit=71.6,
    is_day=True,
    condition=SUNNY,
    wind_speed_mph=5.6,
    wind_speed_kph=9.0,
    wind_degree=220,
    wind_direction="SW",
    pressure_mb=1012.0,
    pressure_in=29.89,
    precipitation_mm=0.0,
    precipitation_in=0.0,
    humidity=65,
    cloud=0,
    feels_like_celsius=24.5,
    feels_like_fahrenheit=76.1,
    visibility_km=10.0,
    visibility_miles=6.2,
    uv=5.0,
    gust_mph=6.7,
    gust_kph=10.8,
)

PREVIEW_CURRENT_WEATHER = CurrentWeatherResult(location=PREVIEW_LOCATION, current=PREVIEW_CURRENT)


def _preview_hour(hour: int, temperature_celsius: float, temperature_fahrenheit: float) -> HourlyConditions:
    is_day = 7 <= hour < 17
    return HourlyConditions(
        time_epoch=1635998400 + hour * 3600,
        time=f"2021-11-04 {hour:02d}:00",
        temperature_celsius=temperature_celsius,
        temperature_fahrenheit=temperature_fahrenheit,
        is_day=is_day,
        condition=SUNNY if is_day else CLEAR,
        wind_speed_mph=5.6,
        wind_speed_kph=9.0,
        wind_degree=220,
        wind_direction="SW",
        pressure_mb=1012.0,
        pressure_in=29.89,
        precipitation_mm=0.0,
        precipitation_in=0.0,
        humidity=65,
        cloud=0,
        feels_like_celsius=temperature_celsius,
        feels_like_fahrenheit=temperature_fahrenheit,
        wind_chill_celsius=temperature_celsius,
        wind_chill_fahrenheit=temperature_fahrenheit,
        heat_index_celsius=temperature_celsius,
        heat_index_fahrenheit=temperature_fahrenheit,
        dew_point_celsius=9.3,
        dew_point_fahrenheit=48.7,
        will_it_rain=False,
        chance_of_rain=0,
        will_it_snow=False,
        chance_of_snow=0,
        visibility_km=10.0,
        visibility_miles=6.0,
        gust_mph=6.7,
        gust_kph=10.8,
        uv=5.0 if is_day else 1.0,
    )


PREVIEW_FORECAST_DAY = ForecastDay(
    date="2021-11-04",
    date_epoch=1635984000,
    day=DailySummary(
        max_temperature_celsius=22.0,
        max_temperature_fahrenheit=71.6,
        min_temperature_celsius=14.0,
        min_temperature_fahrenheit=57.2,
        avg_temperature_celsius=17.6,
        avg_temperature_fahrenheit=63.7,
        max_wind_mph=6.3,
        max_wind_kph=10.1,
        total_precipitation_mm=0.0,
        total_precipitation_in=0.0,
        total_snow_cm=0.0,
        avg_visibility_km=10.0,
        avg_visibility_miles=6.0,
        avg_humidity=65.0,
        condition=SUNNY,
        uv=5.0,
    ),
    astro=AstronomicalData(
        sunrise="06:30 AM",
        sunset="04:47 PM",
        moonrise="06:19 AM",
        moonset="05:21 PM",
        moon_phase="New Moon",
        moon_illumination="0",
    ),
    hours=tuple(
        _preview_hour(hour, 14.0 + min(hour, 24 - hour) * 0.6, 57.2 + min(hour, 24 - hour) * 1.08)
        for hour in range(24)
    ),
)

PREVIEW_FORECAST = ForecastResult(
    location=PREVIEW_LOCATION,
    current=PREVIEW_CURRENT,
    forecast=Forecast(days=(PREVIEW_FORECAST_DAY,)),
)
