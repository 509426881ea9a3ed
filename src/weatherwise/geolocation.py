"""Device location providers."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from weatherwise.settings import UserSettings
from weatherwise.weather.models import Coordinates


class GeolocationUnavailable(Exception):
    """Raised when the location is denied, times out, or is not configured."""

    pass


@runtime_checkable
class GeolocationProvider(Protocol):
    """One-shot device location lookup."""

    def locate(self) -> Coordinates:
        """Return the device coordinates.

        Raises:
            GeolocationUnavailable: On denial or timeout
        """
        ...


class StaticGeolocation:
    """Location taken from configuration.

    Stands in for a browser geolocation prompt: configured coordinates are
    "granted", missing ones behave like a denial.
    """

    def __init__(self, coordinates: Coordinates | None = None) -> None:
        self.coordinates = coordinates

    @classmethod
    def from_settings(cls, settings: UserSettings) -> StaticGeolocation:
        if settings.latitude is None or settings.longitude is None:
            return cls(None)
        return cls(Coordinates(latitude=settings.latitude, longitude=settings.longitude))

    def locate(self) -> Coordinates:
        if self.coordinates is None:
            raise GeolocationUnavailable("No device location configured")
        return self.coordinates
