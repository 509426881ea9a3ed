from enum import Enum


class TemperatureUnit(str, Enum):
    """Temperature unit used for display formatting.

    Fetched data is always stored in Celsius; the unit only changes how
    temperatures are rendered.
    """

    CELSIUS = "celsius"
    FAHRENHEIT = "fahrenheit"

    @property
    def symbol(self) -> str:
        return "°C" if self is TemperatureUnit.CELSIUS else "°F"

    def toggled(self) -> "TemperatureUnit":
        """Return the other unit."""
        if self is TemperatureUnit.CELSIUS:
            return TemperatureUnit.FAHRENHEIT
        return TemperatureUnit.CELSIUS


class ErrorCategory(Enum):
    """User-facing failure categories for a weather query."""

    LOCATION_NOT_FOUND = "location_not_found"
    AUTH = "auth"
    RATE_LIMITED = "rate_limited"
    PROVIDER = "provider"
    NETWORK = "network"
    INVALID_INPUT = "invalid_input"
