# src/weatherwise/display/protocols.py
from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable

from weatherwise.common.enums import TemperatureUnit
from weatherwise.weather.models import (
    CurrentConditions,
    ForecastDay,
    LocationSuggestion,
    PackingSuggestion,
)


@runtime_checkable
class WeatherView(Protocol):
    """Protocol defining the presentation port.

    The controller only talks to the screen through these calls, so a
    console, an HTML page or a test double can sit behind it. Temperatures
    arrive in Celsius together with the unit to display them in.
    """

    def show_loading(self) -> None:
        """Show the loading indicator."""
        ...

    def hide_loading(self) -> None:
        """Hide the loading indicator."""
        ...

    def render_current(self, current: CurrentConditions, unit: TemperatureUnit) -> None:
        """Render current conditions.

        Args:
            current: Normalized current conditions
            unit: Unit to format temperatures in
        """
        ...

    def render_forecast(self, forecast: Sequence[ForecastDay], unit: TemperatureUnit) -> None:
        """Render the daily forecast."""
        ...

    def render_suggestions(self, suggestions: Sequence[PackingSuggestion]) -> None:
        """Render packing suggestions."""
        ...

    def render_locations(self, locations: Sequence[LocationSuggestion]) -> None:
        """Render (or clear, when empty) the autocomplete list."""
        ...

    def render_error(self, message: str) -> None:
        """Show a user-facing error message."""
        ...

    def clear_error(self) -> None:
        """Hide any error message currently shown."""
        ...


class MockView:
    """Mock implementation of WeatherView for testing."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, dict[str, Any]]] = []
        self.loading = False

    def _record(self, name: str, **kwargs: Any) -> None:
        self.calls.append((name, kwargs))

    def show_loading(self) -> None:
        self.loading = True
        self._record("show_loading")

    def hide_loading(self) -> None:
        self.loading = False
        self._record("hide_loading")

    def render_current(self, current: CurrentConditions, unit: TemperatureUnit) -> None:
        self._record("render_current", current=current, unit=unit)

    def render_forecast(self, forecast: Sequence[ForecastDay], unit: TemperatureUnit) -> None:
        self._record("render_forecast", forecast=list(forecast), unit=unit)

    def render_suggestions(self, suggestions: Sequence[PackingSuggestion]) -> None:
        self._record("render_suggestions", suggestions=list(suggestions))

    def render_locations(self, locations: Sequence[LocationSuggestion]) -> None:
        self._record("render_locations", locations=list(locations))

    def render_error(self, message: str) -> None:
        self._record("render_error", message=message)

    def clear_error(self) -> None:
        self._record("clear_error")

    def names(self) -> list[str]:
        """Names of the calls made so far, in order."""
        return [name for name, _ in self.calls]

    def last(self, name: str) -> dict[str, Any]:
        """Arguments of the most recent call with the given name."""
        for call_name, kwargs in reversed(self.calls):
            if call_name == name:
                return kwargs
        raise AssertionError(f"{name} was not called")


class TemplateProtocol(Protocol):
    """Protocol defining the expected interface for templates.

    This protocol abstracts the Jinja2 Template interface to allow
    for proper type checking of template operations.
    """

    def render(self, **kwargs: Any) -> str:
        """Render a template with the given context variables."""
        ...
