"""Text and number formatting utilities."""

from __future__ import annotations

from weatherwise.common.enums import TemperatureUnit
from weatherwise.weather.utils.units import UnitConverter


def format_temperature(
    celsius: float, unit: TemperatureUnit = TemperatureUnit.CELSIUS, symbol: bool = True
) -> str:
    """Format a stored Celsius value in the requested unit.

    Args:
        celsius: Temperature in °C (unrounded)
        unit: Display unit
        symbol: Append °C/°F

    Returns:
        Formatted temperature string, e.g. ``"18°C"``
    """
    if unit is TemperatureUnit.FAHRENHEIT:
        value = UnitConverter.celsius_to_fahrenheit(celsius)
    else:
        value = UnitConverter.round_half_away(celsius)
    return f"{value}{unit.symbol}" if symbol else f"{value}°"


def format_wind(mps: float) -> str:
    """Format wind speed in km/h."""
    return f"{UnitConverter.mps_to_kph(mps)} km/h"


def format_percentage(value: float) -> str:
    """Format a 0-100 value as percentage."""
    return f"{UnitConverter.round_half_away(value)}%"
