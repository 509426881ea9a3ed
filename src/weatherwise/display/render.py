"""HTML rendering of the weather page."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path
from typing import Any, Final, cast

from jinja2 import Environment, select_autoescape

from weatherwise.common.enums import TemperatureUnit
from weatherwise.display.protocols import TemplateProtocol
from weatherwise.utils.formatting import format_temperature, format_wind
from weatherwise.weather.models import (
    CurrentConditions,
    ForecastDay,
    LocationSuggestion,
    PackingSuggestion,
)
from weatherwise.weather.utils import UnitConverter, WeatherIcons

logger: Final = logging.getLogger(__name__)


class HtmlView:
    """WeatherView that writes a standalone HTML page.

    Every render call updates the view state and rewrites the page, so the
    file on disk always reflects what a browser would show at that moment.
    """

    PAGE_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
    <meta charset="UTF-8">
    <title>WeatherWise{% if current %} - {{ current.location_label }}{% endif %}</title>
    <link rel="stylesheet"
          href="https://cdnjs.cloudflare.com/ajax/libs/font-awesome/6.5.1/css/all.min.css">
    <style>
        .hidden { display: none; }
        .error { color: #b00020; }
        .forecast { display: flex; gap: 1em; }
        .forecast-day { border: 1px solid #ccc; border-radius: 8px; padding: 0.5em; }
    </style>
</head>
<body>
    <div id="loading" class="{{ '' if loading else 'hidden' }}">Loading…</div>
    <div id="error-message" class="error {{ '' if error else 'hidden' }}">{{ error or '' }}</div>

    {% if locations %}
    <ul id="location-suggestions">
        {% for loc in locations %}
        <li class="suggestion-item">{{ loc.name }}</li>
        {% endfor %}
    </ul>
    {% endif %}

    {% if current %}
    <section id="weather-display">
        <h2 id="location-name">{{ current.location_label }}</h2>
        <p id="current-date">{{ today }}</p>
        <div>
            <i id="weather-icon" class="fas {{ current.icon_id | weather_icon }}"></i>
            <span id="current-temp">{{ current.temperature_celsius | temperature(unit) }}</span>
        </div>
        <p id="weather-description">{{ current.description }}</p>
        <ul>
            <li>Humidity: <span id="humidity">{{ current.humidity_percent }}</span>%</li>
            <li>Wind: <span id="wind-speed">{{ current.wind_speed_mps | wind }}</span></li>
            <li>Precipitation: <span id="precipitation">{{ current.precipitation_mm }}</span> mm</li>
        </ul>
        <div id="forecast-container" class="forecast">
            {% for day in forecast %}
            <div class="forecast-day">
                <h4>{{ day.weekday_short }}</h4>
                <i class="fas {{ day.icon_id | weather_icon }}"></i>
                <div class="forecast-temp">
                    {{ day.max_temp_celsius | temperature(unit, False) }} /
                    {{ day.min_temp_celsius | temperature(unit, False) }}
                </div>
                <p class="forecast-desc">{{ day.description }}</p>
                <p>Rain: {{ day.chance_of_rain_percent | round_half_away }}%</p>
            </div>
            {% endfor %}
        </div>
    </section>
    {% endif %}

    {% if suggestions %}
    <section id="packing-suggestions">
        {% for s in suggestions %}
        <div class="packing-item">
            <h4><i class="fas {{ s.icon_id }}"></i> {{ s.category }}</h4>
            <p>{{ s.items | join(', ') }}</p>
        </div>
        {% endfor %}
    </section>
    {% endif %}
</body>
</html>"""

    def __init__(self, output_path: Path, template: str | None = None) -> None:
        """Initialize the HTML view.

        Args:
            output_path: Where the page is written
            template: Custom page template (uses default if None)
        """
        self.output_path = output_path
        self.env = Environment(autoescape=select_autoescape(default_for_string=True))
        self._register_filters()
        self.template = cast(
            TemplateProtocol, self.env.from_string(template or self.PAGE_TEMPLATE)
        )

        self.loading = False
        self.error: str | None = None
        self.unit = TemperatureUnit.CELSIUS
        self.current: CurrentConditions | None = None
        self.forecast: list[ForecastDay] = []
        self.suggestions: list[PackingSuggestion] = []
        self.locations: list[LocationSuggestion] = []

    def _register_filters(self) -> None:
        """Register custom filters with the Jinja environment."""
        self.env.filters.update(
            {
                "temperature": format_temperature,
                "wind": format_wind,
                "weather_icon": WeatherIcons.icon_id_to_display_class,
                "round_half_away": UnitConverter.round_half_away,
            }
        )

    def render_page(self) -> str:
        """Render the page for the current view state."""
        context: dict[str, Any] = {
            "loading": self.loading,
            "error": self.error,
            "unit": self.unit,
            "today": datetime.now().strftime("%A, %B %d, %Y"),
            "current": self.current,
            "forecast": self.forecast,
            "suggestions": self.suggestions,
            "locations": self.locations,
        }
        return self.template.render(**context)

    def _write(self) -> None:
        self.output_path.parent.mkdir(parents=True, exist_ok=True)
        self.output_path.write_text(self.render_page(), encoding="utf-8")
        logger.debug("Wrote %s", self.output_path)

    # WeatherView
    def show_loading(self) -> None:
        self.loading = True
        self._write()

    def hide_loading(self) -> None:
        self.loading = False
        self._write()

    def render_current(self, current: CurrentConditions, unit: TemperatureUnit) -> None:
        self.current = current
        self.unit = unit
        self._write()

    def render_forecast(self, forecast: Sequence[ForecastDay], unit: TemperatureUnit) -> None:
        self.forecast = list(forecast)
        self.unit = unit
        self._write()

    def render_suggestions(self, suggestions: Sequence[PackingSuggestion]) -> None:
        self.suggestions = list(suggestions)
        self._write()

    def render_locations(self, locations: Sequence[LocationSuggestion]) -> None:
        self.locations = list(locations)
        self._write()

    def render_error(self, message: str) -> None:
        self.error = message
        self._write()

    def clear_error(self) -> None:
        self.error = None
        self._write()
