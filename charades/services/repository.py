"""
Repository Pattern - Theme data access layer.

Enables switching between JSON and CSV theme storage without changing the
card pipeline. Each theme resolves to an ordered word list.
"""

import json
import re
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional

import pandas as pd

from ..config import Config
from ..models import ThemeData, ThemeSummary, Word
from ..utils.helpers import ensure_dir
from ..utils.logger import setup_logger

logger = setup_logger(__name__)

# Theme ids double as file names
THEME_ID_PATTERN = re.compile(r'^[A-Za-z0-9][A-Za-z0-9_-]*$')


class ThemeLoadError(Exception):
    """Raised when a theme index or theme file cannot be read."""


def is_valid_theme_id(theme_id: str) -> bool:
    """True if ``theme_id`` is safe to use as a file name."""
    return bool(theme_id) and bool(THEME_ID_PATTERN.match(str(theme_id)))


class BaseThemeRepository(ABC):
    """
    Abstract base class for theme repositories.

    Defines the contract for all theme data access operations.
    """

    @abstractmethod
    def list_themes(self) -> List[ThemeSummary]:
        """Get all available themes in display order."""
        pass

    @abstractmethod
    def load_theme(self, theme_id: str) -> Optional[ThemeData]:
        """Get complete theme data, or None if the theme does not exist."""
        pass

    def get_summary(self, theme_id: str) -> Optional[ThemeSummary]:
        """Get the index entry of a single theme."""
        for summary in self.list_themes():
            if summary.id == theme_id:
                return summary
        return None


class JSONThemeRepository(BaseThemeRepository):
    """
    JSON-based repository implementation.

    Layout::

        <themes_dir>/themes.json          {"themes": [ThemeSummary, ...]}
        <themes_dir>/themes/<id>.json     ThemeData
    """

    def __init__(self, themes_dir: Optional[str] = None):
        """
        Initialize JSON repository.

        Args:
            themes_dir: Directory holding themes.json (defaults to the bundled data)
        """
        self.themes_dir = Path(themes_dir or Config.THEMES_DIR)

    @property
    def index_path(self) -> Path:
        return self.themes_dir / Config.THEMES_INDEX

    def theme_path(self, theme_id: str) -> Path:
        return self.themes_dir / "themes" / f"{theme_id}.json"

    @staticmethod
    def _read_json(path: Path) -> Any:
        try:
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            raise ThemeLoadError(f"Invalid JSON in {path}: {e}") from e
        except OSError as e:
            raise ThemeLoadError(f"Cannot read {path}: {e}") from e

    def list_themes(self) -> List[ThemeSummary]:
        """Load all available themes from the index."""
        if not self.index_path.exists():
            raise ThemeLoadError(f"Failed to load themes: {self.index_path} not found")

        data = self._read_json(self.index_path)
        entries = data.get("themes") if isinstance(data, dict) else None
        if not isinstance(entries, list):
            raise ThemeLoadError(f"Failed to load themes: {self.index_path} has no 'themes' list")

        themes = []
        for entry in entries:
            try:
                themes.append(ThemeSummary.from_dict(entry))
            except (KeyError, TypeError, ValueError) as e:
                logger.warning("Skipping malformed theme entry %r: %s", entry, e)
        logger.debug("Loaded %d themes from %s", len(themes), self.index_path)
        return themes

    def load_theme(self, theme_id: str) -> Optional[ThemeData]:
        """Load complete theme data by ID."""
        if not is_valid_theme_id(theme_id):
            logger.warning("Rejected theme id %r", theme_id)
            return None

        path = self.theme_path(theme_id)
        if not path.exists():
            return None

        data = self._read_json(path)
        if not isinstance(data, dict):
            raise ThemeLoadError(f"Failed to load theme {theme_id}: not a JSON object")

        data.setdefault("id", theme_id)
        theme = ThemeData.from_dict(data)
        logger.debug("Loaded theme %s with %d words", theme_id, len(theme.words))
        return theme

    def save_theme(self, theme: ThemeData) -> Path:
        """
        Write a theme file and add or refresh its entry in the index.

        Returns:
            Path of the written theme file
        """
        if not is_valid_theme_id(theme.id):
            raise ValueError(f"Invalid theme id: {theme.id!r}")

        path = self.theme_path(theme.id)
        ensure_dir(str(path.parent))
        with open(path, "w", encoding="utf-8") as f:
            json.dump(theme.to_dict(), f, indent=2, ensure_ascii=False)

        entries: List[Dict[str, Any]] = []
        if self.index_path.exists():
            entries = [s.to_dict() for s in self.list_themes()]

        summary = theme.summary().to_dict()
        for i, entry in enumerate(entries):
            if entry["id"] == theme.id:
                entries[i] = summary
                break
        else:
            entries.append(summary)

        with open(self.index_path, "w", encoding="utf-8") as f:
            json.dump({"themes": entries}, f, indent=2, ensure_ascii=False)

        logger.info("Saved theme %s (%d words) to %s", theme.id, len(theme.words), path)
        return path


class CSVThemeRepository(BaseThemeRepository):
    """
    CSV-based repository implementation.

    Every ``<id>.csv`` file in the directory is a theme. Files are
    pipe-separated with a header row: ``text|emoji|difficulty|es|zh|...``.
    Theme names and icons come from an optional themes.json index in the
    same directory, otherwise they are derived from the file.
    """

    def __init__(self, themes_dir: Optional[str] = None):
        self.themes_dir = Path(themes_dir or Config.THEMES_DIR)

    def _index(self) -> Dict[str, ThemeSummary]:
        index_path = self.themes_dir / Config.THEMES_INDEX
        if not index_path.exists():
            return {}
        try:
            return {s.id: s for s in JSONThemeRepository(str(self.themes_dir)).list_themes()}
        except ThemeLoadError as e:
            logger.warning("Ignoring theme index: %s", e)
            return {}

    def _read_words(self, path: Path) -> List[Word]:
        try:
            df = pd.read_csv(
                path,
                sep='|',
                encoding='utf-8-sig',
                dtype=str,
                keep_default_na=False,
                skipinitialspace=True,
            ).fillna('')
        except pd.errors.EmptyDataError:
            return []
        except (pd.errors.ParserError, UnicodeDecodeError, OSError) as e:
            raise ThemeLoadError(f"Failed to load theme file {path}: {e}") from e

        df.columns = df.columns.str.strip().str.lower()
        if "text" not in df.columns:
            raise ThemeLoadError(f"Failed to load theme file {path}: missing 'text' column")

        words = [Word.from_dict(row) for row in df.to_dict("records")]
        return [w for w in words if w.text]

    @staticmethod
    def _derive_name(theme_id: str) -> str:
        return re.sub(r'[-_]+', ' ', theme_id).strip().title()

    def list_themes(self) -> List[ThemeSummary]:
        if not self.themes_dir.is_dir():
            raise ThemeLoadError(f"Failed to load themes: {self.themes_dir} is not a directory")

        index = self._index()
        themes = []
        for path in sorted(self.themes_dir.glob("*.csv")):
            theme = self._load(path.stem, index)
            if theme is None:
                continue
            themes.append(theme.summary())

        # Index order first, then anything not listed
        order = {theme_id: i for i, theme_id in enumerate(index)}
        themes.sort(key=lambda s: (order.get(s.id, len(order)), s.id))
        return themes

    def load_theme(self, theme_id: str) -> Optional[ThemeData]:
        return self._load(theme_id, self._index())

    def _load(self, theme_id: str, index: Dict[str, ThemeSummary]) -> Optional[ThemeData]:
        if not is_valid_theme_id(theme_id):
            logger.warning("Rejected theme id %r", theme_id)
            return None

        path = self.themes_dir / f"{theme_id}.csv"
        if not path.exists():
            return None

        words = self._read_words(path)
        meta = index.get(theme_id)
        return ThemeData(
            id=theme_id,
            name=meta.name if meta else self._derive_name(theme_id),
            description=meta.description if meta else "",
            icon=meta.icon if meta else (words[0].emoji if words else ""),
            words=tuple(words),
        )
