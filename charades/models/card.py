"""Data models for charades cards."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from ..config.difficulties import get_default_difficulties, normalize_difficulty
from ..config.languages import BASE_LANGUAGE, DEFAULT_LANGUAGES, LANG_CONFIG, get_legacy_keys
from ..utils.parsing import TextParser


@dataclass(frozen=True)
class Word:
    """One vocabulary entry of a theme."""

    # English text; the base line of every card
    text: str
    emoji: str = ""
    translations: Mapping[str, str] = field(default_factory=dict)
    difficulty: Optional[str] = None

    def text_for(self, language: str) -> str:
        """Text of this word in ``language`` ('' when missing)."""
        if language == BASE_LANGUAGE:
            return self.text
        return self.translations.get(language, "")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Word":
        """
        Build a word from a theme file entry.

        Accepts translations either nested under ``"translations"`` or as
        top-level keys, by language code (``{"text": "Dog", "es": "Perro"}``)
        or by the flat card key (``{"word": "Dog", "wordEs": "Perro"}``).
        """
        translations: Dict[str, str] = {}

        nested = data.get("translations") or {}
        if isinstance(nested, Mapping):
            for code, value in nested.items():
                value = TextParser.clean_word(value)
                if value:
                    translations[str(code).strip().lower()] = value

        legacy_keys = get_legacy_keys()
        for code in LANG_CONFIG:
            if code == BASE_LANGUAGE or code in translations:
                continue
            value = TextParser.clean_word(data.get(code) or data.get(legacy_keys[code]))
            if value:
                translations[code] = value

        text = TextParser.clean_word(data.get("text"))
        if not text:
            text = TextParser.clean_word(data.get(BASE_LANGUAGE) or data.get(legacy_keys[BASE_LANGUAGE]))
        translations.pop(BASE_LANGUAGE, None)

        return cls(
            text=text,
            emoji=TextParser.clean_word(data.get("emoji")),
            translations=translations,
            difficulty=normalize_difficulty(data.get("difficulty")),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the theme file shape."""
        data: Dict[str, Any] = {"text": self.text, "emoji": self.emoji}
        if self.translations:
            data["translations"] = dict(self.translations)
        if self.difficulty:
            data["difficulty"] = self.difficulty
        return data


@dataclass(frozen=True)
class ThemeSummary:
    """Entry of the theme index."""

    id: str
    name: str
    description: str = ""
    word_count: int = 0
    icon: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ThemeSummary":
        return cls(
            id=str(data["id"]),
            name=str(data.get("name", data["id"])),
            description=str(data.get("description", "")),
            word_count=int(data.get("wordCount", data.get("word_count", 0)) or 0),
            icon=str(data.get("icon", "")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "wordCount": self.word_count,
            "icon": self.icon,
        }


@dataclass(frozen=True)
class ThemeData:
    """A theme together with its ordered word list."""

    id: str
    name: str = ""
    description: str = ""
    icon: str = ""
    words: Tuple[Word, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ThemeData":
        raw_words = data.get("words") or []
        return cls(
            id=str(data.get("id", "")),
            name=str(data.get("name", data.get("id", ""))),
            description=str(data.get("description", "")),
            icon=str(data.get("icon", "")),
            words=tuple(Word.from_dict(w) for w in raw_words if isinstance(w, Mapping)),
        )

    def summary(self) -> ThemeSummary:
        """Index entry for this theme."""
        return ThemeSummary(
            id=self.id,
            name=self.name,
            description=self.description,
            word_count=len(self.words),
            icon=self.icon,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "icon": self.icon,
            "words": [w.to_dict() for w in self.words],
        }


@dataclass
class GenerationOptions:
    """
    Options for one card generation call.

    Empty ``languages`` or ``difficulties`` mean "use the default set",
    mirroring the UI where no ticked checkbox falls back to everything.
    """

    count: Optional[int] = 12
    shuffle: bool = True
    languages: Sequence[str] = field(default_factory=lambda: list(DEFAULT_LANGUAGES))
    difficulties: Sequence[str] = field(default_factory=get_default_difficulties)

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "GenerationOptions":
        """Build options from a mapping; accepts ``cardCount`` as an alias of ``count``."""
        data = data or {}
        options = cls()
        if "count" in data:
            options.count = data["count"]
        elif "cardCount" in data:
            options.count = data["cardCount"]
        if "shuffle" in data and data["shuffle"] is not None:
            options.shuffle = bool(data["shuffle"])
        if data.get("languages") is not None:
            options.languages = list(data["languages"])
        if data.get("difficulties") is not None:
            options.difficulties = list(data["difficulties"])
        return options


@dataclass(frozen=True)
class CardLine:
    """One line of text on a card."""

    language: str
    text: str


@dataclass(frozen=True)
class Card:
    """A generated card: a value copy of one word's requested lines and emoji."""

    lines: Tuple[CardLine, ...] = ()
    image: str = ""
    is_emoji: bool = True

    @property
    def languages(self) -> List[str]:
        return [line.language for line in self.lines]

    def text_for(self, language: str) -> Optional[str]:
        """Text of the line for ``language``, or None if the card has no such line."""
        for line in self.lines:
            if line.language == language:
                return line.text
        return None

    def to_dict(self) -> Dict[str, Any]:
        """
        JSON-ready representation.

        Besides the ordered ``lines`` it carries the flat per-language keys
        (``word``, ``wordEs``, ...) that the grid markup uses.
        """
        data: Dict[str, Any] = {
            "lines": [{"language": line.language, "text": line.text} for line in self.lines],
            "image": self.image,
            "isEmoji": self.is_emoji,
        }
        legacy_keys = get_legacy_keys()
        for line in self.lines:
            key = legacy_keys.get(line.language)
            if key:
                data[key] = line.text
        return data
