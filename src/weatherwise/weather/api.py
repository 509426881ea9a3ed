"""Weather API client for WeatherAPI.com."""

from __future__ import annotations

import logging
from typing import Any, Final

import requests
from pydantic import ValidationError

from weatherwise.settings import UserSettings

from .errors import LocationNotFound, NetworkError, ParseError, WeatherAPIError
from .models import (
    Coordinates,
    CurrentConditions,
    CurrentResponse,
    ForecastDay,
    ForecastResponse,
    LocationSuggestion,
    SearchResult,
)

logger = logging.getLogger(__name__)

# API endpoints
BASE_URL: Final = "https://api.weatherapi.com/v1"
SEARCH_URL: Final = f"{BASE_URL}/search.json"
CURRENT_URL: Final = f"{BASE_URL}/current.json"
FORECAST_URL: Final = f"{BASE_URL}/forecast.json"

# Human‑readable explanations for common HTTP errors
HTTP_ERROR_MAP: Final = {
    400: "Bad request - check the query parameter",
    401: "Invalid WeatherAPI key. Please check your API key.",
    403: "WeatherAPI key disabled or over quota",
    429: "WeatherAPI rate limit exceeded. Please try again later.",
    500: "WeatherAPI internal error",
    502: "Bad gateway at WeatherAPI",
    503: "Service unavailable (maintenance)",
    504: "Gateway timeout",
}


class WeatherAPI:
    """WeatherAPI.com client for geocoding, current conditions and forecasts.

    Each public method is a single round trip. Responses are validated with
    the raw provider models and normalized before they are returned, so
    callers only ever see Celsius, m/s and normalized icon ids.
    """

    def __init__(self, config: UserSettings, timeout: int | None = None) -> None:
        """Initialize the weather API client.

        Args:
            config: User settings with the API key
            timeout: Timeout for API requests in seconds (default from settings)
        """
        self.config = config
        self.timeout = timeout if timeout is not None else config.timeout

    def _get(self, url: str, params: dict[str, Any]) -> Any:
        """Perform one GET and return the decoded JSON body.

        Raises:
            NetworkError: When network connectivity issues occur
            AuthenticationError: When the API key is rejected
            RateLimitError: When API rate limits are exceeded
            ProviderError: For any other non-2xx answer or undecodable body
        """
        query = {"key": self.config.api_key, **params}

        try:
            resp = requests.get(url, params=query, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.warning("Weather API network error: %s", exc)
            raise NetworkError(f"Network error: {exc}", exc) from exc

        if not 200 <= resp.status_code < 300:
            try:
                msg = resp.json()["error"]["message"]
            except (ValueError, KeyError, TypeError):
                msg = HTTP_ERROR_MAP.get(resp.status_code, resp.text or resp.reason)
            logger.error("Weather API error: %s - %s", resp.status_code, msg)
            raise WeatherAPIError.from_response({"message": msg}, resp.status_code)

        try:
            return resp.json()
        except ValueError as exc:
            raise ParseError(f"Response from {url} is not JSON", exc) from exc

    def search_locations(self, query: str, limit: int | None = None) -> list[LocationSuggestion]:
        """Look up locations matching partial text.

        Args:
            query: Free text typed by the user
            limit: Maximum suggestions (default from settings)

        Returns:
            Up to ``limit`` suggestions, best match first
        """
        data = self._get(SEARCH_URL, {"q": query})
        limit = limit or self.config.max_suggestions
        results = self._parse_search(data)
        try:
            return [LocationSuggestion.from_provider(r) for r in results[:limit]]
        except ValidationError as exc:
            raise ParseError(f"Unusable search.json entry: {exc}", exc) from exc

    def geocode(self, query: str) -> Coordinates:
        """Resolve free text to coordinates using the first match.

        Raises:
            LocationNotFound: When the provider returns no matches
        """
        results = self._parse_search(self._get(SEARCH_URL, {"q": query}))
        if not results:
            logger.info("No location matches for %r", query)
            raise LocationNotFound(query)
        first = results[0]
        logger.debug("Geocoded %r to %s, %s (%s,%s)", query, first.name, first.country, first.lat, first.lon)
        return Coordinates(latitude=first.lat, longitude=first.lon)

    def fetch_current(self, coords: Coordinates) -> CurrentConditions:
        """Retrieve current conditions for coordinates."""
        data = self._get(CURRENT_URL, {"q": coords.as_query, "aqi": "no"})
        try:
            raw = CurrentResponse.model_validate(data)
            return CurrentConditions.from_provider(raw)
        except ValidationError as exc:
            raise ParseError(f"Unexpected current.json payload: {exc}", exc) from exc

    def fetch_forecast(self, coords: Coordinates, days: int | None = None) -> list[ForecastDay]:
        """Retrieve the daily forecast for coordinates.

        Args:
            coords: Location to fetch
            days: Number of days (default from settings, normally 5)

        Returns:
            Chronological, non-empty list of forecast days
        """
        params = {
            "q": coords.as_query,
            "days": days or self.config.forecast_days,
            "aqi": "no",
            "alerts": "no",
        }
        data = self._get(FORECAST_URL, params)
        try:
            raw = ForecastResponse.model_validate(data)
            days_out = [ForecastDay.from_provider(d) for d in raw.forecast.forecastday]
        except ValidationError as exc:
            raise ParseError(f"Unexpected forecast.json payload: {exc}", exc) from exc

        if not days_out:
            raise ParseError("Forecast response contained no days")
        return sorted(days_out, key=lambda d: d.date)

    # Private helper methods
    @staticmethod
    def _parse_search(data: Any) -> list[SearchResult]:
        if not isinstance(data, list):
            raise ParseError("search.json did not return a list")
        try:
            return [SearchResult.model_validate(item) for item in data]
        except ValidationError as exc:
            raise ParseError(f"Unexpected search.json payload: {exc}", exc) from exc
