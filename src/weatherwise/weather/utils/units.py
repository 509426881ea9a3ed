"""Weather unit conversion utilities."""

from __future__ import annotations

import math


class UnitConverter:
    """Weather unit conversion utilities.

    Values are stored unrounded (Celsius, m/s). Only the display helpers
    round, and they round half away from zero so that 0.5 → 1 and
    -0.5 → -1, unlike Python's built-in banker's rounding.
    """

    @staticmethod
    def round_half_away(value: float) -> int:
        """Round to the nearest integer, ties away from zero."""
        return int(math.copysign(math.floor(abs(value) + 0.5), value))

    @classmethod
    def celsius_to_fahrenheit(cls, celsius: float) -> int:
        """Convert °C → °F for display (rounded)."""
        return cls.round_half_away(celsius * 9 / 5 + 32)

    @staticmethod
    def fahrenheit_to_celsius(fahrenheit: float) -> float:
        """Convert °F → °C (unrounded)."""
        return (fahrenheit - 32) * 5 / 9

    @staticmethod
    def kph_to_mps(kph: float) -> float:
        """Convert km/h → m/s (unrounded, for storage)."""
        return kph / 3.6

    @classmethod
    def mps_to_kph(cls, mps: float) -> int:
        """Convert m/s → km/h for display (rounded)."""
        return cls.round_half_away(mps * 3.6)
