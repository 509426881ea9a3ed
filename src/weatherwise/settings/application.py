"""Internal application settings derived from user settings."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from weatherwise.settings.user import UserSettings


@dataclass
class AppPaths:
    """Application file and directory paths."""

    icons_map_file: Path

    @classmethod
    def from_base_dir(cls, base_dir: Path) -> AppPaths:
        """Create paths from base directory."""
        return cls(icons_map_file=base_dir / "icon_map.csv")


class ApplicationSettings:
    """Application settings container.

    Combines user-provided configuration with application defaults.

    Examples:
        user_settings = UserSettings.load()
        app_settings = ApplicationSettings(user_settings)
        icon_map = app_settings.paths.icons_map_file
    """

    def __init__(self, user_settings: UserSettings, paths: AppPaths | None = None):
        """Initialize application settings with configuration sources."""
        self.user = user_settings
        self.paths = paths or AppPaths.from_base_dir(Path.cwd())
