"""Text helpers for word values, option lists and line widths."""

import re
import unicodedata
from typing import Any, List, Optional


class TextParser:
    """
    Text normalization and measurement.

    Single source of truth for normalizing word text, splitting option
    lists and measuring how wide a line will print.
    """

    # Comma / whitespace separated option lists ("en, es" or "en es")
    LIST_PATTERN = re.compile(r'[,\s]+')

    # Whitespace normalization pattern
    WHITESPACE_PATTERN = re.compile(r'\s+')

    @classmethod
    def normalize_unicode(cls, text: Any) -> str:
        """
        NFC-normalize text so composed and decomposed accents compare equal
        and count as one character.

        Args:
            text: Input text

        Returns:
            NFC-normalized text
        """
        if text is None:
            return ""
        return unicodedata.normalize('NFC', str(text))

    @classmethod
    def clean_word(cls, text: Any) -> str:
        """Normalize a word value read from a theme file; NaN/None become ''."""
        if text is None:
            return ""
        value = cls.normalize_unicode(text)
        if value.strip().lower() == "nan":
            return ""
        return cls.WHITESPACE_PATTERN.sub(' ', value).strip()

    @classmethod
    def is_blank(cls, text: Optional[str]) -> bool:
        """True for None, empty or whitespace-only text."""
        return text is None or not str(text).strip()

    @classmethod
    def split_list(cls, text: Optional[str]) -> List[str]:
        """
        Split a user-supplied option list.

        Args:
            text: Raw text such as "en, es" or "easy hard"

        Returns:
            Lower-cased, de-duplicated items in input order
        """
        if not text:
            return []
        items: List[str] = []
        for item in cls.LIST_PATTERN.split(str(text)):
            item = item.strip().lower()
            if item and item not in items:
                items.append(item)
        return items

    @classmethod
    def visual_length(cls, text: str, double_width: bool = False) -> int:
        """
        Number of print columns a line occupies.

        Args:
            text: Line text
            double_width: Whether the line's script prints two columns per glyph

        Returns:
            Character count, doubled for double-width scripts
        """
        length = len(text or "")
        return length * 2 if double_width else length
