"""Application settings management.

This package provides:
- UserSettings: User-configurable settings loaded from config.yaml
- ApplicationSettings: Internal application settings and defaults
"""

from weatherwise.settings.application import ApplicationSettings, AppPaths
from weatherwise.settings.user import UserSettings

__all__ = ["AppPaths", "ApplicationSettings", "UserSettings"]
