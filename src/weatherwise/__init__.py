"""WeatherWise - weather lookup with packing suggestions."""

__version__ = "0.1.0"
