"""
Card presentation.

Derives the display attributes of a card: which style each line uses,
its text direction, and a font size picked from the number of lines and
the widest line. Lines in double-width scripts count two columns per
character when measuring width.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from ..config.languages import get_direction, is_double_width
from ..models import Card
from ..utils.parsing import TextParser

# Upper bounds (inclusive) of the visual-length buckets
LENGTH_THRESHOLDS: Tuple[int, ...] = (6, 10, 14)

# Tier names per line-count group, from shortest to longest text
TIERS_SINGLE: Tuple[str, ...] = ("A1", "B1", "C1", "D1")
TIERS_DOUBLE: Tuple[str, ...] = ("A2", "B2", "C2", "D2")
TIERS_MULTI: Tuple[str, ...] = ("A", "B", "C")

# Font sizes in rem. Every single-line tier is larger than every
# two-line tier, which is larger than every 3+-line tier.
FONT_TIERS: Dict[str, float] = {
    "A1": 2.25,
    "B1": 2.0,
    "C1": 1.75,
    "D1": 1.5,
    "A2": 1.4,
    "B2": 1.25,
    "C2": 1.1,
    "D2": 1.0,
    "A": 0.95,
    "B": 0.85,
    "C": 0.75,
}

# Lines after the first render smaller than the primary line
SECONDARY_SCALE = 0.85

STYLE_PRIMARY = "word-primary"
STYLE_SECONDARY = "word-secondary"
STYLE_TERTIARY = "word-tertiary"
STYLE_RTL = "word-rtl"

LAYOUT_EMOJI_ONLY = "layout-emoji-only"
LAYOUT_SINGLE = "layout-single"
LAYOUT_DOUBLE = "layout-double"
LAYOUT_MULTI = "layout-multi"


@dataclass(frozen=True)
class PresentedLine:
    """A text line ready for display."""

    text: str
    style_class: str
    language: str
    direction: str = "ltr"
    font_size: str = ""


@dataclass(frozen=True)
class CardPresentation:
    """Presentation attributes of a single card."""

    text_lines: Tuple[PresentedLine, ...]
    emoji: str
    tier: Optional[str] = None
    font_size: str = ""
    layout_class: str = LAYOUT_EMOJI_ONLY
    is_emoji: bool = True


def visual_length(text: str, language: str) -> int:
    """Print width of a line, doubled for double-width scripts."""
    return TextParser.visual_length(text, is_double_width(language))


def select_font_tier(line_count: int, max_length: int) -> Optional[str]:
    """
    Pick the font tier for a card.

    Args:
        line_count: Number of non-empty lines
        max_length: Largest visual length across those lines

    Returns:
        Tier name, or None when there are no lines
    """
    if line_count <= 0:
        return None

    if line_count >= 3:
        tiers = TIERS_MULTI
    elif line_count == 2:
        tiers = TIERS_DOUBLE
    else:
        tiers = TIERS_SINGLE

    for tier, limit in zip(tiers, LENGTH_THRESHOLDS):
        if max_length <= limit:
            return tier
    return tiers[-1]


def font_size_for(tier: Optional[str], scale: float = 1.0) -> str:
    """CSS font size for a tier ('' for no tier)."""
    if tier is None:
        return ""
    return f"{FONT_TIERS[tier] * scale:.3g}rem"


def layout_class_for(line_count: int) -> str:
    if line_count <= 0:
        return LAYOUT_EMOJI_ONLY
    if line_count == 1:
        return LAYOUT_SINGLE
    if line_count == 2:
        return LAYOUT_DOUBLE
    return LAYOUT_MULTI


def _style_for(index: int, direction: str) -> str:
    if index == 0:
        style = STYLE_PRIMARY
    elif index == 1:
        style = STYLE_SECONDARY
    else:
        style = STYLE_TERTIARY
    if direction == "rtl":
        style = f"{style} {STYLE_RTL}"
    return style


def present(card: Card) -> CardPresentation:
    """
    Derive the presentation of a card.

    Blank lines are dropped before counting. A card without lines
    renders as emoji only.
    """
    lines = [line for line in (card.lines or ()) if not TextParser.is_blank(line.text)]
    count = len(lines)
    max_len = max((visual_length(line.text, line.language) for line in lines), default=0)

    tier = select_font_tier(count, max_len)

    presented = []
    for index, line in enumerate(lines):
        direction = get_direction(line.language)
        scale = 1.0 if index == 0 else SECONDARY_SCALE
        presented.append(PresentedLine(
            text=line.text,
            style_class=_style_for(index, direction),
            language=line.language,
            direction=direction,
            font_size=font_size_for(tier, scale),
        ))

    return CardPresentation(
        text_lines=tuple(presented),
        emoji=card.image or "",
        tier=tier,
        font_size=font_size_for(tier),
        layout_class=layout_class_for(count),
        is_emoji=card.is_emoji,
    )
