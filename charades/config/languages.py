"""Language-specific configurations."""

from typing import Dict, List

LANG_CONFIG = {
    "en": {
        "label": "ENGLISH",
        "name": "English",
        "direction": "ltr",
        "double_width": False,
        "legacy_key": "word",
        "order": 0,
    },
    "es": {
        "label": "ESPAÑOL",
        "name": "Spanish",
        "direction": "ltr",
        "double_width": False,
        "legacy_key": "wordEs",
        "order": 1,
    },
    "zh": {
        "label": "中文",
        "name": "Chinese",
        "direction": "ltr",
        "double_width": True,
        "legacy_key": "wordZh",
        "order": 2,
    },
    "ar": {
        "label": "العربية",
        "name": "Arabic",
        "direction": "rtl",
        "double_width": False,
        "legacy_key": "wordAr",
        "order": 3,
    },
    "fr": {
        "label": "FRANÇAIS",
        "name": "French",
        "direction": "ltr",
        "double_width": False,
        "legacy_key": "wordFr",
        "order": 4,
    },
    "de": {
        "label": "DEUTSCH",
        "name": "German",
        "direction": "ltr",
        "double_width": False,
        "legacy_key": "wordDe",
        "order": 5,
    },
    "ja": {
        "label": "日本語",
        "name": "Japanese",
        "direction": "ltr",
        "double_width": True,
        "legacy_key": "wordJa",
        "order": 6,
    },
}

# The word's own text field is always the English line
BASE_LANGUAGE = "en"

DEFAULT_LANGUAGES = [BASE_LANGUAGE]

# Canonical order of lines on a card
LANGUAGE_PRIORITY: List[str] = sorted(LANG_CONFIG, key=lambda code: LANG_CONFIG[code]["order"])


def is_double_width(language: str) -> bool:
    """True for scripts whose glyphs take two columns (CJK)."""
    return bool(LANG_CONFIG.get(language, {}).get("double_width", False))


def get_direction(language: str) -> str:
    """Text direction for a language code ('ltr' or 'rtl')."""
    return LANG_CONFIG.get(language, {}).get("direction", "ltr")


def get_legacy_keys() -> Dict[str, str]:
    """Map language code -> legacy flat card key (word, wordEs, ...)."""
    return {code: cfg["legacy_key"] for code, cfg in LANG_CONFIG.items()}
