"""Common utility functions and helpers for the weatherwise package."""

from weatherwise.utils.formatting import format_percentage, format_temperature, format_wind

__all__ = ["format_percentage", "format_temperature", "format_wind"]
