"""User-configurable settings loaded from config.yaml."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import ClassVar

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, model_validator

from weatherwise.common.enums import TemperatureUnit

# Load environment variables from .env file(s)
load_dotenv()

PLACEHOLDER_KEYS = frozenset({"YOUR_WEATHERAPI_KEY", "YOUR_API_KEY", "changeme"})


def _interpolate_env(content: str) -> str:
    return re.sub(r"\$\{(\w+)\}", lambda m: os.getenv(m.group(1), ""), content)


class UserSettings(BaseModel):
    """User settings for provider access, lookups and display.

    Values come from config.yaml; ``${VAR}`` references are filled from the
    environment (and any ``.env`` file) before parsing.
    """

    DEFAULT_CONFIG_PATHS: ClassVar[list[Path]] = [
        Path("config.yaml"),
        Path("~/.config/weatherwise/config.yaml").expanduser(),
        Path("/etc/weatherwise/config.yaml"),
    ]

    # Provider
    api_key: str = Field(..., min_length=10, description="WeatherAPI.com API key")
    timeout: int = Field(10, gt=0, description="HTTP timeout in seconds")

    # Lookups
    default_location: str = Field(
        "London", min_length=1, description="Query used when geolocation is unavailable"
    )
    forecast_days: int = Field(5, ge=1, le=10, description="Days of forecast to fetch")
    max_suggestions: int = Field(5, ge=1, le=10, description="Autocomplete entries to show")
    min_query_length: int = Field(
        2, ge=1, description="Characters typed before suggestions are looked up"
    )

    # Display
    units: TemperatureUnit = TemperatureUnit.CELSIUS

    # Device location; leave unset to fall back to default_location
    latitude: float | None = Field(None, ge=-90, le=90)
    longitude: float | None = Field(None, ge=-180, le=180)

    @model_validator(mode="after")
    def check_location_pair(self) -> UserSettings:
        if (self.latitude is None) != (self.longitude is None):
            raise ValueError("latitude and longitude must be set together")
        return self

    @property
    def has_placeholder_key(self) -> bool:
        """Whether the API key still holds a sample placeholder."""
        return self.api_key in PLACEHOLDER_KEYS

    @property
    def is_fahrenheit(self) -> bool:
        return self.units is TemperatureUnit.FAHRENHEIT

    @classmethod
    def load(cls, path: Path | None = None) -> UserSettings:
        """Load configuration from a YAML file.

        Args:
            path: Path to config file (optional, searches default locations if None)

        Returns:
            Validated UserSettings object

        Raises:
            FileNotFoundError: If no config file is found
            RuntimeError: If the config file cannot be parsed or is invalid
        """
        if path is None:
            env_path = os.environ.get("WEATHERWISE_CONFIG")
            if env_path:
                path = Path(env_path)
                if not path.exists():
                    raise FileNotFoundError(
                        f"Config file from WEATHERWISE_CONFIG not found: {path}"
                    )
            else:
                for default_path in cls.DEFAULT_CONFIG_PATHS:
                    if default_path.exists():
                        path = default_path
                        break
                else:
                    raise FileNotFoundError(
                        "No configuration file found. Create config.yaml or set WEATHERWISE_CONFIG."
                    )

        try:
            raw = _interpolate_env(path.read_text())
            data = yaml.safe_load(raw)
        except Exception as exc:  # pragma: no cover
            raise RuntimeError(f"Unable to read config YAML: {exc}") from exc

        try:
            return cls.model_validate(data)
        except ValidationError as err:
            raise RuntimeError(f"Invalid configuration:\n{err}") from err
