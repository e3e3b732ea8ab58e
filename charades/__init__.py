"""Charades Cards - printable picture/word cards by theme"""

__version__ = "1.0.0"
__author__ = "Charades Cards Team"

from .cards import generate_cards, present
from .config import Config, LANG_CONFIG, SettingsManager
from .controller import SelectionController
from .models import Card, CardLine, GenerationOptions, ThemeData, ThemeSummary, Word
from .services import CSVThemeRepository, JSONThemeRepository, RemoteThemeSource, ThemeLoadError
from .sheet import PrintSheetBuilder
from .templates import CardTemplates

__all__ = [
    'generate_cards',
    'present',
    'Config',
    'LANG_CONFIG',
    'SettingsManager',
    'SelectionController',
    'Card',
    'CardLine',
    'GenerationOptions',
    'ThemeData',
    'ThemeSummary',
    'Word',
    'CSVThemeRepository',
    'JSONThemeRepository',
    'RemoteThemeSource',
    'ThemeLoadError',
    'PrintSheetBuilder',
    'CardTemplates',
]
