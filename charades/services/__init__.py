"""Services layer for theme data access."""

from .repository import (
    BaseThemeRepository,
    CSVThemeRepository,
    JSONThemeRepository,
    ThemeLoadError,
    is_valid_theme_id,
)
from .remote import RemoteThemeSource

__all__ = [
    "BaseThemeRepository",
    "CSVThemeRepository",
    "JSONThemeRepository",
    "ThemeLoadError",
    "is_valid_theme_id",
    "RemoteThemeSource",
]
