from typing import List, Optional

from charades.controller import SelectionController
from charades.models import ThemeData, ThemeSummary, Word
from charades.services import BaseThemeRepository


class InMemoryRepository(BaseThemeRepository):
    def __init__(self, themes: List[ThemeData]):
        self._themes = {t.id: t for t in themes}

    def list_themes(self) -> List[ThemeSummary]:
        return [t.summary() for t in self._themes.values()]

    def load_theme(self, theme_id: str) -> Optional[ThemeData]:
        return self._themes.get(theme_id)


def _controller(mock_theme, isolated_settings):
    return SelectionController(InMemoryRepository([mock_theme]), settings=isolated_settings)


def test_initial_state_is_empty(mock_theme, isolated_settings):
    controller = _controller(mock_theme, isolated_settings)
    assert controller.cards == []
    assert not controller.can_print
    assert controller.selected_languages == ["en"]
    assert controller.selected_difficulties == ["easy", "medium", "hard"]
    assert [t.id for t in controller.themes()] == ["test-theme"]


def test_select_theme_shows_every_word_in_order(mock_theme, isolated_settings):
    controller = _controller(mock_theme, isolated_settings)
    assert controller.select_theme("test-theme") is True
    assert [c.text_for("en") for c in controller.cards] == [w.text for w in mock_theme.words]
    assert controller.can_print


def test_unknown_theme_keeps_current_cards(mock_theme, isolated_settings, caplog):
    controller = _controller(mock_theme, isolated_settings)
    received = []
    controller.on_change(lambda cards: received.append(len(cards)))
    controller.select_theme("test-theme")
    assert controller.select_theme("missing") is False
    assert controller.current_theme is mock_theme
    assert len(controller.cards) == 12
    assert received == [12]
    assert "Theme data not available: missing" in caplog.text


def test_unknown_first_theme_leaves_grid_empty(mock_theme, isolated_settings):
    controller = _controller(mock_theme, isolated_settings)
    assert controller.select_theme("missing") is False
    assert controller.current_theme is None
    assert controller.cards == []


def test_callbacks_receive_new_cards(mock_theme, isolated_settings):
    controller = _controller(mock_theme, isolated_settings)
    received = []
    controller.on_change(lambda cards: received.append(len(cards)))
    controller.select_theme("test-theme")
    controller.toggle_difficulty("easy", False)
    controller.toggle_difficulty("medium", False)
    assert received == [12, 8, 4]


def test_unticking_everything_falls_back_to_defaults(mock_theme, isolated_settings):
    controller = _controller(mock_theme, isolated_settings)
    controller.select_theme("test-theme")
    controller.set_difficulties([])
    controller.set_languages([])
    assert len(controller.cards) == 12
    assert all(c.languages == ["en"] for c in controller.cards)


def test_language_toggles_add_lines(isolated_settings):
    theme = ThemeData(id="pets", words=(Word(text="Dog", translations={"es": "Perro", "ar": "كلب"}),))
    controller = SelectionController(InMemoryRepository([theme]), settings=isolated_settings)
    controller.set_theme(theme)
    controller.toggle_language("ar", True)
    controller.toggle_language("es", True)
    assert controller.cards[0].languages == ["en", "es", "ar"]
    controller.toggle_language("en", False)
    assert controller.cards[0].languages == ["es", "ar"]


def test_initial_selection_comes_from_settings(mock_theme, isolated_settings):
    isolated_settings.set("DEFAULT_LANGUAGES", ["es"], persist=False)
    isolated_settings.set("DEFAULT_DIFFICULTIES", ["hard"], persist=False)
    controller = _controller(mock_theme, isolated_settings)
    assert controller.selected_languages == ["es"]
    controller.select_theme("test-theme")
    assert len(controller.cards) == 4
