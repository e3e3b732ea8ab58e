"""
Selection controller.

Holds the user's current choices (theme, languages, difficulties) and
regenerates the card list whenever one of them changes. The card
pipeline itself stays stateless; all mutable state lives here.
"""

from typing import Callable, Iterable, List, Optional

from .cards import generate_cards
from .config import SettingsManager, get_default_difficulties
from .config.languages import DEFAULT_LANGUAGES
from .models import Card, GenerationOptions, ThemeData, ThemeSummary
from .services import BaseThemeRepository
from .utils.logger import setup_logger

logger = setup_logger(__name__)


class SelectionController:
    """
    UI state holder for theme, language and difficulty selection.

    Usage:
        controller = SelectionController(JSONThemeRepository())
        controller.on_change(lambda cards: print(len(cards)))
        controller.select_theme("animals")
        controller.set_languages(["en", "es"])
    """

    def __init__(
        self,
        repository: BaseThemeRepository,
        settings: Optional[SettingsManager] = None,
    ):
        """
        Initialize the controller.

        Args:
            repository: Source of themes
            settings: Settings used for the initial selections
        """
        self.repository = repository
        settings = settings or SettingsManager()

        self.current_theme: Optional[ThemeData] = None
        self.cards: List[Card] = []
        self._languages: List[str] = list(settings.get("DEFAULT_LANGUAGES", DEFAULT_LANGUAGES) or [])
        self._difficulties: List[str] = list(
            settings.get("DEFAULT_DIFFICULTIES", get_default_difficulties()) or []
        )
        self._change_callbacks: List[Callable[[List[Card]], None]] = []

    @property
    def selected_languages(self) -> List[str]:
        """Ticked languages; English when nothing is ticked."""
        return list(self._languages) if self._languages else list(DEFAULT_LANGUAGES)

    @property
    def selected_difficulties(self) -> List[str]:
        """Ticked difficulties; all of them when nothing is ticked."""
        return list(self._difficulties) if self._difficulties else get_default_difficulties()

    @property
    def can_print(self) -> bool:
        return bool(self.cards)

    def on_change(self, callback: Callable[[List[Card]], None]) -> None:
        """
        Register a callback for card list changes.

        Args:
            callback: Function receiving the new card list
        """
        self._change_callbacks.append(callback)

    def _notify_change(self) -> None:
        for callback in self._change_callbacks:
            callback(self.cards)

    def themes(self) -> List[ThemeSummary]:
        """Available themes from the repository."""
        return self.repository.list_themes()

    def select_theme(self, theme_id: str) -> bool:
        """
        Load a theme and display all of its cards.

        When the theme cannot be found the current theme and cards stay
        as they are and no change is notified.

        Returns:
            True if the theme was found
        """
        theme = self.repository.load_theme(theme_id)
        if theme is None:
            logger.error("Theme data not available: %s", theme_id)
            return False
        self.set_theme(theme)
        return True

    def set_theme(self, theme: Optional[ThemeData]) -> List[Card]:
        """Use already-loaded theme data (e.g. from a remote source)."""
        self.current_theme = theme
        return self.refresh()

    def set_languages(self, languages: Iterable[str]) -> List[Card]:
        self._languages = [code for code in languages if code]
        return self.refresh()

    def toggle_language(self, language: str, checked: bool) -> List[Card]:
        """Tick or untick one language checkbox."""
        if checked and language not in self._languages:
            self._languages.append(language)
        elif not checked and language in self._languages:
            self._languages.remove(language)
        return self.refresh()

    def set_difficulties(self, difficulties: Iterable[str]) -> List[Card]:
        self._difficulties = [d for d in difficulties if d]
        return self.refresh()

    def toggle_difficulty(self, difficulty: str, checked: bool) -> List[Card]:
        """Tick or untick one difficulty checkbox."""
        if checked and difficulty not in self._difficulties:
            self._difficulties.append(difficulty)
        elif not checked and difficulty in self._difficulties:
            self._difficulties.remove(difficulty)
        return self.refresh()

    def refresh(self) -> List[Card]:
        """
        Regenerate the cards for the current selection.

        The whole theme is shown, in its original order.
        """
        if self.current_theme is None:
            self.cards = []
        else:
            self.cards = generate_cards(
                self.current_theme,
                GenerationOptions(
                    count=len(self.current_theme.words),
                    shuffle=False,
                    languages=self.selected_languages,
                    difficulties=self.selected_difficulties,
                ),
            )
            logger.debug(
                "Generated %d cards for theme %s", len(self.cards), self.current_theme.id
            )
        self._notify_change()
        return self.cards
