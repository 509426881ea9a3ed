"""WeatherWise CLI application.

This module provides the command-line interface: weather lookups by text or
device location, location autocomplete, and configuration helpers.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any, Final

import typer
import yaml
from pydantic import ValidationError

from weatherwise.common.enums import TemperatureUnit
from weatherwise.controller import WeatherApp
from weatherwise.display.console import ConsoleView
from weatherwise.display.protocols import WeatherView
from weatherwise.display.render import HtmlView
from weatherwise.settings import UserSettings
from weatherwise.weather.models import (
    CurrentConditions,
    ForecastDay,
    LocationSuggestion,
    PackingSuggestion,
)

# ── CLI setup ────────────────────────────────────────────────────────────────
app = typer.Typer(help="WeatherWise weather lookup CLI", add_completion=False)
config_app = typer.Typer(help="Config helpers")
app.add_typer(config_app, name="config")

logger: Final = logging.getLogger(__name__)  # Will be "weatherwise.cli"

CONFIG_OPTION = typer.Option(None, "--config", "-c", exists=True, dir_okay=False)
DEBUG_OPTION = typer.Option(False, "--debug", help="Enable debug logging")
UNIT_OPTION = typer.Option(None, "--unit", "-u", help="Override display unit")
HTML_OPTION = typer.Option(None, "--html", help="Also write an HTML page to this path")
DST_ARGUMENT = typer.Argument(..., help="Output config.yaml")


class TeeView:
    """Forward every view call to several views, in order."""

    def __init__(self, *views: WeatherView) -> None:
        self.views = views

    def show_loading(self) -> None:
        for view in self.views:
            view.show_loading()

    def hide_loading(self) -> None:
        for view in self.views:
            view.hide_loading()

    def render_current(self, current: CurrentConditions, unit: TemperatureUnit) -> None:
        for view in self.views:
            view.render_current(current, unit)

    def render_forecast(self, forecast: Sequence[ForecastDay], unit: TemperatureUnit) -> None:
        for view in self.views:
            view.render_forecast(forecast, unit)

    def render_suggestions(self, suggestions: Sequence[PackingSuggestion]) -> None:
        for view in self.views:
            view.render_suggestions(suggestions)

    def render_locations(self, locations: Sequence[LocationSuggestion]) -> None:
        for view in self.views:
            view.render_locations(locations)

    def render_error(self, message: str) -> None:
        for view in self.views:
            view.render_error(message)

    def clear_error(self) -> None:
        for view in self.views:
            view.clear_error()


def _build_app(
    config: Path | None, debug: bool, unit: TemperatureUnit | None, html: Path | None
) -> WeatherApp:
    try:
        settings = UserSettings.load(config)
    except (FileNotFoundError, RuntimeError) as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=2) from exc

    if unit is not None:
        settings = settings.model_copy(update={"units": unit})

    view: WeatherView = ConsoleView()
    if html is not None:
        view = TeeView(view, HtmlView(html))

    return WeatherApp(settings=settings, view=view, debug=debug)


@app.command()
def search(
    query: str = typer.Argument(..., help="City, postcode or 'lat,lon'"),
    config: Path | None = CONFIG_OPTION,
    unit: TemperatureUnit | None = UNIT_OPTION,
    html: Path | None = HTML_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Show current weather, forecast and packing list for a location."""
    weather_app = _build_app(config, debug, unit, html)
    if not weather_app.check_api_key() or not weather_app.search(query):
        raise typer.Exit(code=1)


@app.command()
def here(
    config: Path | None = CONFIG_OPTION,
    unit: TemperatureUnit | None = UNIT_OPTION,
    html: Path | None = HTML_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Show weather for the configured device location (or the default city)."""
    weather_app = _build_app(config, debug, unit, html)
    if not weather_app.start():
        raise typer.Exit(code=1)


@app.command()
def suggest(
    text: str = typer.Argument(..., help="Partial location name"),
    config: Path | None = CONFIG_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """List matching locations, as the search box autocomplete does."""
    weather_app = _build_app(config, debug, None, None)
    if not weather_app.handle_location_input(text):
        typer.echo("No matching locations.", err=True)


# ───────────────────────── config sub-commands ───────────────────────────────
@config_app.command("validate")
def validate_config(file: Path):
    """Validate a YAML config file against the schema."""
    try:
        UserSettings.load(file)
        typer.echo("✅ Config valid")
    except (FileNotFoundError, RuntimeError) as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


@config_app.command("wizard")
def wizard(dst: Path = DST_ARGUMENT):
    """Interactive prompt to create a config file."""
    typer.echo("Interactive config builder - press Enter for defaults.")

    while True:
        data: dict[str, Any] = {
            "api_key": typer.prompt("WeatherAPI.com API key", hide_input=True),
            "units": typer.prompt("Units [celsius|fahrenheit]", default="celsius"),
            "default_location": typer.prompt("Default location", default="London"),
        }
        try:
            cfg = UserSettings(**data)
            break  # valid → exit loop
        except ValidationError as err:
            typer.secho("\nConfig error(s):", fg=typer.colors.RED, err=True)
            for e in err.errors():
                typer.secho(f"  • {e['loc'][0]} - {e['msg']}", fg=typer.colors.RED, err=True)
            typer.echo("Please re-enter the values.\n")

    dst.write_text(
        yaml.safe_dump(cfg.model_dump(mode="json", exclude_none=True), sort_keys=False),
        encoding="utf-8",
    )
    typer.secho(f"Config written to {dst}", fg=typer.colors.GREEN)


# ───────────────────────── module entrypoint ────────────────────────────────
if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        sys.exit(0)
