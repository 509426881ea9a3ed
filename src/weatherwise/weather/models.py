"""Typed models for WeatherAPI.com responses and the normalized weather data.

Raw ``*Response`` models mirror only the provider fields the app reads.
Everything downstream works with the normalized models (Celsius, m/s,
normalized icon ids).
"""

from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field

from weatherwise.weather.utils.icons import WeatherIcons
from weatherwise.weather.utils.units import UnitConverter

# ─────────────────────────── provider payloads ───────────────────────────────


class SearchResult(BaseModel):
    """One entry of the ``search.json`` array."""

    name: str
    country: str = ""
    lat: float
    lon: float

    model_config = ConfigDict(extra="allow")


class Condition(BaseModel):
    """Weather condition block shared by current and daily data."""

    text: str
    code: int | None = None
    icon: str | None = None


class ProviderLocation(BaseModel):
    name: str
    country: str = ""

    model_config = ConfigDict(extra="allow")


class ProviderCurrent(BaseModel):
    temp_c: float
    humidity: int
    wind_kph: float
    condition: Condition
    precip_mm: float | None = None

    model_config = ConfigDict(extra="allow")


class CurrentResponse(BaseModel):
    """Payload of ``current.json``."""

    location: ProviderLocation
    current: ProviderCurrent


class ProviderDay(BaseModel):
    maxtemp_c: float
    mintemp_c: float
    condition: Condition
    daily_chance_of_rain: float = 0

    model_config = ConfigDict(extra="allow")


class ProviderForecastDay(BaseModel):
    date: dt.date
    day: ProviderDay


class ProviderForecast(BaseModel):
    forecastday: list[ProviderForecastDay]


class ForecastResponse(BaseModel):
    """Payload of ``forecast.json``."""

    forecast: ProviderForecast


# ─────────────────────────── normalized model ────────────────────────────────


class Coordinates(BaseModel):
    """Geographic coordinates (latitude, longitude)."""

    latitude: float
    longitude: float

    model_config = ConfigDict(frozen=True)

    @property
    def as_query(self) -> str:
        """Coordinates in the ``lat,lon`` form the provider accepts as ``q``."""
        return f"{self.latitude},{self.longitude}"


class LocationSuggestion(BaseModel):
    """Autocomplete entry shown while the user types."""

    name: str
    coordinates: Coordinates

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_provider(cls, raw: SearchResult) -> LocationSuggestion:
        return cls(
            name=f"{raw.name}, {raw.country}",
            coordinates=Coordinates(latitude=raw.lat, longitude=raw.lon),
        )


class CurrentConditions(BaseModel):
    """Snapshot of the weather right now at the resolved location."""

    location_label: str
    temperature_celsius: float
    humidity_percent: int
    wind_speed_mps: float
    description: str
    icon_id: str
    precipitation_mm: float = Field(0.0, ge=0)

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_provider(cls, raw: CurrentResponse) -> CurrentConditions:
        """Normalize a ``current.json`` payload.

        Wind is converted to m/s and kept unrounded; a missing
        ``precip_mm`` counts as no precipitation.
        """
        cur = raw.current
        return cls(
            location_label=f"{raw.location.name}, {raw.location.country}",
            temperature_celsius=cur.temp_c,
            humidity_percent=cur.humidity,
            wind_speed_mps=UnitConverter.kph_to_mps(cur.wind_kph),
            description=cur.condition.text,
            icon_id=WeatherIcons.code_to_icon_id(cur.condition.code or 0),
            precipitation_mm=cur.precip_mm or 0.0,
        )


class ForecastDay(BaseModel):
    """Daily forecast data."""

    date: dt.date
    max_temp_celsius: float
    min_temp_celsius: float
    description: str
    icon_id: str
    chance_of_rain_percent: float = Field(0, ge=0, le=100)

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_provider(cls, raw: ProviderForecastDay) -> ForecastDay:
        day = raw.day
        return cls(
            date=raw.date,
            max_temp_celsius=day.maxtemp_c,
            min_temp_celsius=day.mintemp_c,
            description=day.condition.text,
            icon_id=WeatherIcons.code_to_icon_id(day.condition.code or 0),
            chance_of_rain_percent=day.daily_chance_of_rain,
        )

    @property
    def weekday_short(self) -> str:
        return self.date.strftime("%a")


class PackingSuggestion(BaseModel):
    """One packing category with the items to bring."""

    category: str
    icon_id: str
    items: list[str] = Field(..., min_length=1)

    model_config = ConfigDict(frozen=True)


class WeatherReport(BaseModel):
    """Everything one successful query produces."""

    current: CurrentConditions
    forecast: list[ForecastDay] = Field(..., min_length=1)
    suggestions: list[PackingSuggestion]

    model_config = ConfigDict(frozen=True)
