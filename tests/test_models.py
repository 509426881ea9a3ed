"""Tests for provider payload validation and normalization."""

from datetime import date
from typing import Any

import pytest
from pydantic import ValidationError

from weatherwise.weather.models import (
    Coordinates,
    CurrentConditions,
    CurrentResponse,
    ForecastDay,
    ForecastResponse,
    PackingSuggestion,
    WeatherReport,
)


def test_current_response_normalization(current_payload: dict[str, Any]) -> None:
    current = CurrentConditions.from_provider(CurrentResponse.model_validate(current_payload))
    assert current.location_label == "London, UK"
    assert current.description == "Partly cloudy"
    assert current.wind_speed_mps == pytest.approx(10.0)


def test_unknown_condition_code_uses_default_icon(current_payload: dict[str, Any]) -> None:
    current_payload["current"]["condition"]["code"] = 9999
    current = CurrentConditions.from_provider(CurrentResponse.model_validate(current_payload))
    assert current.icon_id == "01d"


def test_forecast_days_parse_dates(forecast_payload: dict[str, Any]) -> None:
    raw = ForecastResponse.model_validate(forecast_payload)
    days = [ForecastDay.from_provider(d) for d in raw.forecast.forecastday]
    assert days[0].date == date(2025, 5, 3)
    assert days[0].weekday_short == "Sat"
    assert days[1].icon_id == "01d"


def test_rain_chance_bounds() -> None:
    with pytest.raises(ValidationError):
        ForecastDay(
            date=date(2025, 5, 3),
            max_temp_celsius=20,
            min_temp_celsius=10,
            description="x",
            icon_id="01d",
            chance_of_rain_percent=120,
        )


def test_negative_precipitation_rejected() -> None:
    with pytest.raises(ValidationError):
        CurrentConditions(
            location_label="x",
            temperature_celsius=1,
            humidity_percent=1,
            wind_speed_mps=1,
            description="x",
            icon_id="01d",
            precipitation_mm=-1,
        )


def test_coordinates_value_equality() -> None:
    a = Coordinates(latitude=51.5, longitude=-0.13)
    assert a == Coordinates(latitude=51.5, longitude=-0.13)
    assert a.as_query == "51.5,-0.13"
    with pytest.raises(ValidationError):
        a.latitude = 0  # type: ignore[misc]


def test_packing_suggestion_requires_items() -> None:
    with pytest.raises(ValidationError):
        PackingSuggestion(category="Empty", icon_id="fa-sun", items=[])


def test_report_requires_forecast(current_payload: dict[str, Any]) -> None:
    current = CurrentConditions.from_provider(CurrentResponse.model_validate(current_payload))
    with pytest.raises(ValidationError):
        WeatherReport(current=current, forecast=[], suggestions=[])
