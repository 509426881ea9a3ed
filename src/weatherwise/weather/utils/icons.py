"""Weather icon utilities and mappings."""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import ClassVar, Final

logger = logging.getLogger(__name__)

# Bump when WeatherAPI.com changes its condition code list.
ICON_TABLE_VERSION: Final = "weatherapi-2024.1"

DEFAULT_ICON_ID: Final = "01d"
DEFAULT_DISPLAY_CLASS: Final = "fa-cloud"

MAPPING_COLUMNS: Final = ("code", "icon_id")


class WeatherIcons:
    """Weather icon mapping and retrieval utilities.

    Translates WeatherAPI.com condition codes into normalized icon ids
    (OpenWeather style ``01d``..``50n``), and icon ids into Font Awesome
    class names. Both lookups are total: unknown keys fall back to a
    default rather than raising.
    """

    _default_code_map: ClassVar[dict[int, str]] = {
        1000: "01d",  # Sunny
        1003: "02d",  # Partly cloudy
        1006: "03d",  # Cloudy
        1009: "04d",  # Overcast
        1030: "50d",  # Mist
        1063: "10d",  # Patchy rain possible
        1180: "10d",  # Patchy light rain
        1183: "10d",  # Light rain
        1186: "10d",  # Moderate rain at times
        1189: "10d",  # Moderate rain
        1192: "10d",  # Heavy rain at times
        1195: "10d",  # Heavy rain
        1198: "13d",  # Light freezing rain
        1201: "13d",  # Moderate or heavy freezing rain
        1204: "13d",  # Light sleet
        1207: "13d",  # Moderate or heavy sleet
        1210: "13d",  # Patchy light snow
        1213: "13d",  # Light snow
        1216: "13d",  # Patchy moderate snow
        1219: "13d",  # Moderate snow
        1222: "13d",  # Patchy heavy snow
        1225: "13d",  # Heavy snow
        1240: "09d",  # Light rain shower
        1243: "09d",  # Moderate or heavy rain shower
        1246: "09d",  # Torrential rain shower
        1249: "13d",  # Light sleet showers
        1252: "13d",  # Moderate or heavy sleet showers
        1255: "13d",  # Light snow showers
        1258: "13d",  # Moderate or heavy snow showers
        1273: "11d",  # Patchy light rain with thunder
        1276: "11d",  # Moderate or heavy rain with thunder
        1279: "11d",  # Patchy light snow with thunder
        1282: "11d",  # Moderate or heavy snow with thunder
    }

    _code_map: ClassVar[dict[int, str]] = dict(_default_code_map)

    _display_map: ClassVar[dict[str, str]] = {
        "01d": "fa-sun",
        "01n": "fa-moon",
        "02d": "fa-cloud-sun",
        "02n": "fa-cloud-moon",
        "03d": "fa-cloud",
        "03n": "fa-cloud",
        "04d": "fa-cloud",
        "04n": "fa-cloud",
        "09d": "fa-cloud-rain",
        "09n": "fa-cloud-rain",
        "10d": "fa-cloud-sun-rain",
        "10n": "fa-cloud-moon-rain",
        "11d": "fa-bolt",
        "11n": "fa-bolt",
        "13d": "fa-snowflake",
        "13n": "fa-snowflake",
        "50d": "fa-smog",
        "50n": "fa-smog",
    }

    @classmethod
    def code_to_icon_id(cls, code: int) -> str:
        """Map a provider condition code to a normalized icon id.

        Args:
            code: WeatherAPI.com ``condition.code``

        Returns:
            Icon id such as ``"10d"``; ``"01d"`` for unknown codes
        """
        return cls._code_map.get(code, DEFAULT_ICON_ID)

    @classmethod
    def icon_id_to_display_class(cls, icon_id: str) -> str:
        """Map a normalized icon id to a Font Awesome class name."""
        return cls._display_map.get(icon_id, DEFAULT_DISPLAY_CLASS)

    @classmethod
    def load_mapping(cls, path: Path | str) -> None:
        """Override condition code entries from a CSV file.

        The file needs ``code`` and ``icon_id`` columns; a file without them
        is ignored. Rows with a non-numeric code or an empty icon id are
        skipped. Overrides always apply on top of the built-in table, so
        loading a file twice gives the same result as loading it once.

        Args:
            path: Path to the CSV mapping file
        """
        overrides: dict[int, str] = {}
        with open(path, newline="") as f:
            reader = csv.DictReader(f)
            missing = [col for col in MAPPING_COLUMNS if col not in (reader.fieldnames or [])]
            if missing:
                logger.warning("Ignoring icon map %s: missing column(s) %s", path, ", ".join(missing))
                return
            for row in reader:
                raw_code = (row["code"] or "").strip()
                icon_id = (row["icon_id"] or "").strip()
                if not raw_code.isdigit() or not icon_id:
                    logger.warning("Skipping icon map row %r", row)
                    continue
                overrides[int(raw_code)] = icon_id

        cls._code_map = {**cls._default_code_map, **overrides}

    @classmethod
    def get_code_map(cls) -> dict[int, str]:
        """Get the complete condition code mapping dictionary."""
        return cls._code_map
