"""Terminal implementation of the WeatherView port."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

import typer

from weatherwise.common.enums import TemperatureUnit
from weatherwise.utils.formatting import format_percentage, format_temperature, format_wind
from weatherwise.weather.models import (
    CurrentConditions,
    ForecastDay,
    LocationSuggestion,
    PackingSuggestion,
)


class ConsoleView:
    """Prints weather data to the terminal with typer."""

    def __init__(self, quiet: bool = False) -> None:
        """Initialize the console view.

        Args:
            quiet: Suppress the loading indicator line
        """
        self.quiet = quiet

    def show_loading(self) -> None:
        if not self.quiet:
            typer.secho("Loading weather…", dim=True, err=True)

    def hide_loading(self) -> None:
        pass

    def render_current(self, current: CurrentConditions, unit: TemperatureUnit) -> None:
        typer.secho(current.location_label, bold=True)
        typer.echo(datetime.now().strftime("%A, %B %d, %Y"))
        typer.echo(
            f"{format_temperature(current.temperature_celsius, unit)}  {current.description}"
        )
        typer.echo(
            f"Humidity {current.humidity_percent}%  ·  "
            f"Wind {format_wind(current.wind_speed_mps)}  ·  "
            f"Precipitation {current.precipitation_mm:g} mm"
        )

    def render_forecast(self, forecast: Sequence[ForecastDay], unit: TemperatureUnit) -> None:
        typer.echo("")
        for day in forecast:
            high = format_temperature(day.max_temp_celsius, unit, symbol=False)
            low = format_temperature(day.min_temp_celsius, unit, symbol=False)
            typer.echo(
                f"{day.weekday_short:<4}{high:>5} / {low:<5}"
                f"{day.description:<28}Rain: {format_percentage(day.chance_of_rain_percent)}"
            )

    def render_suggestions(self, suggestions: Sequence[PackingSuggestion]) -> None:
        typer.echo("")
        typer.secho("What to pack", bold=True)
        for suggestion in suggestions:
            typer.echo(f"  {suggestion.category}: {', '.join(suggestion.items)}")

    def render_locations(self, locations: Sequence[LocationSuggestion]) -> None:
        for location in locations:
            typer.echo(
                f"{location.name}  ({location.coordinates.latitude}, "
                f"{location.coordinates.longitude})"
            )

    def render_error(self, message: str) -> None:
        typer.secho(message, fg=typer.colors.RED, err=True)

    def clear_error(self) -> None:
        pass
