"""Query orchestration: geocode, fetch, advise, with request supersession."""

from __future__ import annotations

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Final

from weatherwise.common.enums import TemperatureUnit
from weatherwise.packing import PackingAdvisor
from weatherwise.weather.api import WeatherAPI
from weatherwise.weather.errors import QuerySuperseded
from weatherwise.weather.models import Coordinates, LocationSuggestion, WeatherReport

logger: Final = logging.getLogger(__name__)

WEATHER_CHANNEL: Final = "weather"
SUGGEST_CHANNEL: Final = "suggest"


@dataclass
class QueryContext:
    """Per-session state passed through every query.

    Holds the display unit, the last successfully resolved location and
    report, and one monotonically increasing request token per channel.
    Only the holder of the latest token may record a result.
    """

    unit: TemperatureUnit = TemperatureUnit.CELSIUS
    last_coordinates: Coordinates | None = None
    last_report: WeatherReport | None = None
    _tokens: dict[str, int] = field(default_factory=dict, init=False, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)

    def next_token(self, channel: str = WEATHER_CHANNEL) -> int:
        """Issue a new token, superseding every earlier one on the channel."""
        with self._lock:
            token = self._tokens.get(channel, 0) + 1
            self._tokens[channel] = token
            return token

    def is_latest(self, token: int, channel: str = WEATHER_CHANNEL) -> bool:
        with self._lock:
            return self._tokens.get(channel, 0) == token

    def ensure_latest(self, token: int, channel: str = WEATHER_CHANNEL) -> None:
        """Raise QuerySuperseded if a newer token was issued."""
        with self._lock:
            latest = self._tokens.get(channel, 0)
        if latest != token:
            raise QuerySuperseded(token, latest)

    def record(self, token: int, coords: Coordinates, report: WeatherReport) -> None:
        """Store a finished report if its query is still the latest."""
        with self._lock:
            latest = self._tokens.get(WEATHER_CHANNEL, 0)
            if latest != token:
                raise QuerySuperseded(token, latest)
            self.last_coordinates = coords
            self.last_report = report

    def toggle_unit(self) -> TemperatureUnit:
        self.unit = self.unit.toggled()
        return self.unit


class WeatherQueryService:
    """Runs the geocode → current + forecast → packing pipeline.

    Current conditions and forecast only share the coordinates, so they are
    fetched in parallel. Any stage failing aborts the whole query; nothing
    partial is returned. A query whose token has been superseded stops at
    the next stage boundary with QuerySuperseded.
    """

    def __init__(
        self,
        api: WeatherAPI,
        advisor: PackingAdvisor | None = None,
        forecast_days: int | None = None,
    ) -> None:
        self.api = api
        self.advisor = advisor or PackingAdvisor()
        self.forecast_days = forecast_days or api.config.forecast_days

    def resolve_and_fetch(
        self, target: str | Coordinates, context: QueryContext, token: int | None = None
    ) -> WeatherReport:
        """Resolve a location and build the full weather report.

        Args:
            target: Free-text location or already known coordinates
            context: Session context; receives the result on success
            token: Token already issued by the caller (a new one by default)

        Returns:
            Report with current conditions, forecast and packing suggestions

        Raises:
            QuerySuperseded: When a newer query was started meanwhile
            WeatherAPIError: When any provider call fails
            InvalidInput: When the forecast came back empty
        """
        if token is None:
            token = context.next_token()

        if isinstance(target, Coordinates):
            coords = target
        else:
            logger.info("Query %d: geocoding %r", token, target)
            coords = self.api.geocode(target)
            context.ensure_latest(token)

        logger.info("Query %d: fetching weather for %s", token, coords.as_query)
        with ThreadPoolExecutor(max_workers=2, thread_name_prefix="weather") as pool:
            current_future = pool.submit(self.api.fetch_current, coords)
            forecast_future = pool.submit(self.api.fetch_forecast, coords, self.forecast_days)
            current = current_future.result()
            forecast = forecast_future.result()
        context.ensure_latest(token)

        suggestions = self.advisor.suggest(current, forecast)
        report = WeatherReport(current=current, forecast=forecast, suggestions=suggestions)
        context.record(token, coords, report)
        return report

    def lookup_suggestions(self, text: str, context: QueryContext) -> list[LocationSuggestion]:
        """Autocomplete lookup; stale lookups raise QuerySuperseded."""
        token = context.next_token(SUGGEST_CHANNEL)
        suggestions = self.api.search_locations(text)
        context.ensure_latest(token, SUGGEST_CHANNEL)
        return suggestions

    def cancel_suggestions(self, context: QueryContext) -> None:
        """Invalidate any autocomplete lookup still in flight."""
        context.next_token(SUGGEST_CHANNEL)
