"""Card generation and presentation."""

from .generator import (
    filter_by_difficulty,
    generate_cards,
    normalize_options,
    project_word,
    shuffle_words,
)
from .renderer import (
    FONT_TIERS,
    CardPresentation,
    PresentedLine,
    font_size_for,
    present,
    select_font_tier,
    visual_length,
)

__all__ = [
    'filter_by_difficulty',
    'generate_cards',
    'normalize_options',
    'project_word',
    'shuffle_words',
    'FONT_TIERS',
    'CardPresentation',
    'PresentedLine',
    'font_size_for',
    'present',
    'select_font_tier',
    'visual_length',
]
