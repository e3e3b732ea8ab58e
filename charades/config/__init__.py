"""Configuration module for charades cards."""

from .settings import Config
from .languages import (
    BASE_LANGUAGE,
    DEFAULT_LANGUAGES,
    LANG_CONFIG,
    LANGUAGE_PRIORITY,
    get_direction,
    get_legacy_keys,
    is_double_width,
)
from .difficulties import (
    DIFFICULTIES,
    Difficulty,
    get_default_difficulties,
    get_difficulty_ids,
    normalize_difficulty,
    validate_difficulties,
)
from .config_manager import SettingsManager

__all__ = [
    'Config',
    'BASE_LANGUAGE',
    'DEFAULT_LANGUAGES',
    'LANG_CONFIG',
    'LANGUAGE_PRIORITY',
    'get_direction',
    'get_legacy_keys',
    'is_double_width',
    'DIFFICULTIES',
    'Difficulty',
    'get_default_difficulties',
    'get_difficulty_ids',
    'normalize_difficulty',
    'validate_difficulties',
    'SettingsManager',
]
