"""Shared enums used across weatherwise packages."""

from weatherwise.common.enums import ErrorCategory, TemperatureUnit

__all__ = ["ErrorCategory", "TemperatureUnit"]
