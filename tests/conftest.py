import os
import sys

import pytest


def _add_root_to_path():
    # Ensure `charades` is importable when running tests without installing the package
    here = os.path.dirname(__file__)
    root_path = os.path.abspath(os.path.join(here, ".."))
    if root_path not in sys.path:
        sys.path.insert(0, root_path)


_add_root_to_path()

from charades.config import SettingsManager  # noqa: E402
from charades.models import ThemeData, Word  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Every test gets a fresh settings singleton backed by a temp file."""
    for key in SettingsManager.DEFAULTS:
        monkeypatch.delenv(f"CHARADES_{key}", raising=False)
    SettingsManager.reset_instance()
    settings = SettingsManager(str(tmp_path / "settings.json"))
    yield settings
    SettingsManager.reset_instance()


@pytest.fixture
def mock_theme():
    """Twelve words, four of each difficulty, English only."""
    difficulties = ["easy", "easy", "medium", "medium", "hard", "hard"] * 2
    words = tuple(
        Word(text=f"Word{i + 1}", emoji=f"e{i + 1}", difficulty=difficulties[i])
        for i in range(12)
    )
    return ThemeData(id="test-theme", name="Test Theme", description="A test theme", icon="T", words=words)


@pytest.fixture
def multilingual_words():
    return [
        Word(text="Dog", emoji="🐶", translations={"es": "Perro", "zh": "狗", "ar": "كلب"}, difficulty="easy"),
        Word(text="Cat", emoji="🐱", translations={"es": "Gato"}, difficulty="medium"),
        Word(text="Owl", emoji="🦉", translations={"zh": "猫头鹰", "ar": "   "}, difficulty="hard"),
        Word(text="Sun", emoji="☀️"),
    ]
