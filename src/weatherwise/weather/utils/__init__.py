"""Weather utility classes."""

from weatherwise.weather.utils.icons import ICON_TABLE_VERSION, WeatherIcons
from weatherwise.weather.utils.units import UnitConverter

__all__ = ["ICON_TABLE_VERSION", "UnitConverter", "WeatherIcons"]
