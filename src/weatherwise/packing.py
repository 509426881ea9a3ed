"""Packing suggestions derived from the forecast."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import ClassVar, Final

from weatherwise.weather.errors import InvalidInput
from weatherwise.weather.models import CurrentConditions, ForecastDay, PackingSuggestion

logger: Final = logging.getLogger(__name__)

COLD_BELOW_C: Final = 10.0
WARM_FROM_C: Final = 20.0
RAIN_CHANCE_ABOVE: Final = 50.0
WIND_ABOVE_MPS: Final = 10.0


class PackingAdvisor:
    """Rule engine turning forecast statistics into packing categories.

    The temperature tier always comes first and exactly one is emitted.
    Rain and wind categories follow when their thresholds are exceeded
    (strictly).
    """

    COLD: ClassVar[PackingSuggestion] = PackingSuggestion(
        category="Cold Weather",
        icon_id="fa-snowflake",
        items=["Warm coat", "Sweaters", "Boots", "Gloves", "Scarf"],
    )
    MILD: ClassVar[PackingSuggestion] = PackingSuggestion(
        category="Mild Weather",
        icon_id="fa-cloud",
        items=["Light jacket", "Long sleeves", "Comfortable pants", "Closed shoes"],
    )
    WARM: ClassVar[PackingSuggestion] = PackingSuggestion(
        category="Warm Weather",
        icon_id="fa-sun",
        items=["T-shirts", "Shorts", "Sandals", "Sunglasses", "Sunscreen"],
    )
    RAIN: ClassVar[PackingSuggestion] = PackingSuggestion(
        category="Rain Protection",
        icon_id="fa-umbrella",
        items=["Umbrella", "Raincoat", "Waterproof shoes", "Plastic bags for electronics"],
    )
    WIND: ClassVar[PackingSuggestion] = PackingSuggestion(
        category="Wind Protection",
        icon_id="fa-wind",
        items=["Windbreaker", "Hair ties", "Secure clothing"],
    )

    @staticmethod
    def average_max_temp(forecast: Sequence[ForecastDay]) -> float:
        """Arithmetic mean of the daily maximum temperatures."""
        return sum(day.max_temp_celsius for day in forecast) / len(forecast)

    @staticmethod
    def max_rain_chance(forecast: Sequence[ForecastDay]) -> float:
        return max(day.chance_of_rain_percent for day in forecast)

    @classmethod
    def temperature_tier(cls, avg_max_temp: float) -> PackingSuggestion:
        """Pick the tier; 10 and 20 belong to the higher tier."""
        if avg_max_temp < COLD_BELOW_C:
            return cls.COLD
        elif avg_max_temp < WARM_FROM_C:
            return cls.MILD
        return cls.WARM

    def suggest(
        self, current: CurrentConditions, forecast: Sequence[ForecastDay]
    ) -> list[PackingSuggestion]:
        """Build the ordered packing suggestions for a query result.

        Args:
            current: Current conditions (wind speed is read from here)
            forecast: Chronological daily forecast, must not be empty

        Returns:
            Suggestions with the temperature tier first

        Raises:
            InvalidInput: If the forecast is empty
        """
        if not forecast:
            raise InvalidInput("Cannot suggest packing for an empty forecast")

        avg_max_temp = self.average_max_temp(forecast)
        rain_chance = self.max_rain_chance(forecast)

        suggestions = [self.temperature_tier(avg_max_temp)]
        if rain_chance > RAIN_CHANCE_ABOVE:
            suggestions.append(self.RAIN)
        if current.wind_speed_mps > WIND_ABOVE_MPS:
            suggestions.append(self.WIND)

        logger.debug(
            "Packing: avg max %.1f°C, rain %.0f%%, wind %.1f m/s -> %s",
            avg_max_temp,
            rain_chance,
            current.wind_speed_mps,
            [s.category for s in suggestions],
        )
        return suggestions
