"""Presentation adapters for weather data."""

from weatherwise.display.console import ConsoleView
from weatherwise.display.protocols import MockView, WeatherView
from weatherwise.display.render import HtmlView

__all__ = ["ConsoleView", "HtmlView", "MockView", "WeatherView"]
