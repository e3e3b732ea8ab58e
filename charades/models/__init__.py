"""Data models for charades cards."""

from .card import Card, CardLine, GenerationOptions, ThemeData, ThemeSummary, Word

__all__ = [
    'Card',
    'CardLine',
    'GenerationOptions',
    'ThemeData',
    'ThemeSummary',
    'Word',
]
