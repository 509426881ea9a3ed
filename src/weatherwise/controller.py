# filepath: src/weatherwise/controller.py
"""Core controller for the WeatherWise app."""

from __future__ import annotations

import logging
from typing import Final

from weatherwise.common.enums import ErrorCategory, TemperatureUnit
from weatherwise.display.console import ConsoleView
from weatherwise.display.protocols import WeatherView
from weatherwise.geolocation import (
    GeolocationProvider,
    GeolocationUnavailable,
    StaticGeolocation,
)
from weatherwise.query import QueryContext, WeatherQueryService
from weatherwise.settings import ApplicationSettings, UserSettings
from weatherwise.weather.api import WeatherAPI
from weatherwise.weather.errors import InvalidInput, QuerySuperseded, WeatherAPIError
from weatherwise.weather.models import Coordinates, LocationSuggestion, WeatherReport
from weatherwise.weather.utils.icons import WeatherIcons

logger: Final = logging.getLogger(__name__)

ERROR_MESSAGES: Final[dict[ErrorCategory, str]] = {
    ErrorCategory.LOCATION_NOT_FOUND: "Location not found. Please try a different search term.",
    ErrorCategory.AUTH: "Invalid WeatherAPI key. Please check your API key.",
    ErrorCategory.RATE_LIMITED: "WeatherAPI rate limit exceeded. Please try again later.",
    ErrorCategory.NETWORK: "Network unavailable. Please check your connection and try again.",
    ErrorCategory.PROVIDER: "Failed to fetch weather data. Please try again.",
    ErrorCategory.INVALID_INPUT: "Received incomplete weather data. Please try again.",
}

PLACEHOLDER_KEY_MESSAGE: Final = (
    "Please replace the API key placeholder in config.yaml with your WeatherAPI.com key."
)


def message_for(error: WeatherAPIError | InvalidInput) -> str:
    """Pick the user-facing message for a failed query."""
    return ERROR_MESSAGES[error.category]


class WeatherApp:
    """Main controller class for the weather app.

    Reacts to user actions (search, typing, picking a suggestion, toggling
    units, start-up) by running queries through WeatherQueryService and
    handing finished results to the view. Session state lives in a single
    QueryContext instead of module globals.
    """

    def __init__(
        self,
        settings: UserSettings,
        view: WeatherView | None = None,
        weather_api: WeatherAPI | None = None,
        geolocation: GeolocationProvider | None = None,
        debug: bool = False,
    ):
        """Initialize the controller.

        Args:
            settings: Loaded user settings
            view: Presentation adapter (console by default)
            weather_api: Optional custom weather API client
            geolocation: Optional device location provider
            debug: Enable debug logging
        """
        logging.basicConfig(
            level=logging.DEBUG if debug else logging.INFO,
            format="%(asctime)s [%(levelname)s] %(message)s",
        )

        self.config: UserSettings = settings
        self.settings = ApplicationSettings(self.config)

        self.weather_api = weather_api or WeatherAPI(self.config)
        self.service = WeatherQueryService(
            self.weather_api, forecast_days=self.config.forecast_days
        )
        self.view: WeatherView = view or ConsoleView()
        self.geolocation = geolocation or StaticGeolocation.from_settings(self.config)
        self.context = QueryContext(unit=self.config.units)

        icons_map = self.settings.paths.icons_map_file
        if icons_map.exists():
            WeatherIcons.load_mapping(icons_map)
            logger.info("Loaded icon map override from %s", icons_map)

    def check_api_key(self) -> bool:
        """Report a placeholder API key before any query is attempted."""
        if self.config.has_placeholder_key:
            self.view.render_error(PLACEHOLDER_KEY_MESSAGE)
            return False
        return True

    def start(self) -> bool:
        """Show weather for the device location, or the default location.

        Returns:
            True if a report was rendered
        """
        if not self.check_api_key():
            return False

        try:
            coords = self.geolocation.locate()
        except GeolocationUnavailable as exc:
            logger.info("Geolocation unavailable (%s), loading %s", exc, self.config.default_location)
            return self.search(self.config.default_location)

        return self.show_weather(coords)

    def search(self, query: str | None) -> bool:
        """Run a free-text search; blank input does nothing."""
        text = (query or "").strip()
        if not text:
            return False
        self.service.cancel_suggestions(self.context)
        self.view.render_locations([])
        return self.show_weather(text)

    def select_suggestion(self, suggestion: LocationSuggestion) -> bool:
        """Show weather for a picked autocomplete entry."""
        self.service.cancel_suggestions(self.context)
        self.view.render_locations([])
        return self.show_weather(suggestion.coordinates)

    def show_weather(self, target: str | Coordinates) -> bool:
        """Fetch and render weather for text or coordinates.

        The loading indicator is always cleared. On failure one message is
        shown and the previous display is left as it was.

        Returns:
            True if the report was rendered
        """
        token = self.context.next_token()
        self.view.show_loading()
        self.view.clear_error()
        try:
            report = self.service.resolve_and_fetch(target, self.context, token=token)
        except QuerySuperseded as exc:
            logger.debug("Dropping stale result: %s", exc)
            return False
        except (WeatherAPIError, InvalidInput) as err:
            logger.error("Weather query for %r failed (%s): %s", target, err.category.value, err)
            if self.context.is_latest(token):
                self.view.render_error(message_for(err))
            return False
        finally:
            if self.context.is_latest(token):
                self.view.hide_loading()

        self._render_report(report)
        return True

    def handle_location_input(self, text: str) -> list[LocationSuggestion]:
        """Update the autocomplete list for what the user has typed.

        Lookups only start at ``min_query_length`` characters; failures are
        logged and leave the list empty.
        """
        query = text.strip()
        if len(query) < self.config.min_query_length:
            self.service.cancel_suggestions(self.context)
            self.view.render_locations([])
            return []

        try:
            suggestions = self.service.lookup_suggestions(query, self.context)
        except QuerySuperseded:
            return []
        except WeatherAPIError as exc:
            logger.error("Error fetching suggestions: %s", exc)
            return []

        self.view.render_locations(suggestions)
        return suggestions

    def toggle_unit(self) -> TemperatureUnit:
        """Switch °C/°F and redraw the last report without refetching."""
        unit = self.context.toggle_unit()
        if self.context.last_report is not None:
            self.view.render_current(self.context.last_report.current, unit)
            self.view.render_forecast(self.context.last_report.forecast, unit)
        return unit

    def _render_report(self, report: WeatherReport) -> None:
        unit = self.context.unit
        self.view.render_current(report.current, unit)
        self.view.render_forecast(report.forecast, unit)
        self.view.render_suggestions(report.suggestions)
