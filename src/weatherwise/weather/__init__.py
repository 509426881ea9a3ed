"""Weather package - holds API client, models, and custom errors."""

from .api import WeatherAPI
from .errors import (
    AuthenticationError,
    InvalidInput,
    LocationNotFound,
    NetworkError,
    ParseError,
    ProviderError,
    QuerySuperseded,
    RateLimitError,
    WeatherAPIError,
)
from .models import (
    Coordinates,
    CurrentConditions,
    ForecastDay,
    LocationSuggestion,
    PackingSuggestion,
    WeatherReport,
)
from .utils import UnitConverter, WeatherIcons

# Define what gets imported with: from weatherwise.weather import *
__all__ = [
    "AuthenticationError",
    "Coordinates",
    "CurrentConditions",
    "ForecastDay",
    "InvalidInput",
    "LocationNotFound",
    "LocationSuggestion",
    "NetworkError",
    "PackingSuggestion",
    "ParseError",
    "ProviderError",
    "QuerySuperseded",
    "RateLimitError",
    "UnitConverter",
    "WeatherAPI",
    "WeatherAPIError",
    "WeatherIcons",
    "WeatherReport",
]
