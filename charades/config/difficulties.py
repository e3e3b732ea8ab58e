"""
Difficulty Configuration
------------------------

Defines the difficulty tags a word can carry. Difficulties are used as an
inclusive filter when generating cards; untagged words always pass.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional


@dataclass
class Difficulty:
    """Definition of a single difficulty level."""

    id: str
    name: str
    description: str
    default_enabled: bool = True
    default_order: int = 0
    icon: str = "⭐"


DIFFICULTIES: Dict[str, Difficulty] = {
    "easy": Difficulty(
        id="easy",
        name="Easy",
        description="Everyday words that are quick to act out",
        default_order=0,
        icon="🟢",
    ),
    "medium": Difficulty(
        id="medium",
        name="Medium",
        description="Words that need a bit of creativity",
        default_order=1,
        icon="🟡",
    ),
    "hard": Difficulty(
        id="hard",
        name="Hard",
        description="Abstract or tricky words",
        default_order=2,
        icon="🔴",
    ),
}


def get_difficulty_ids() -> List[str]:
    """Get list of all difficulty IDs in default order."""
    return sorted(DIFFICULTIES.keys(), key=lambda x: DIFFICULTIES[x].default_order)


def get_default_difficulties() -> List[str]:
    """Get difficulties selected when the user has ticked none."""
    return [d for d in get_difficulty_ids() if DIFFICULTIES[d].default_enabled]


def normalize_difficulty(value: Optional[str]) -> Optional[str]:
    """Normalize a raw difficulty tag; blank or missing means untagged."""
    if value is None:
        return None
    tag = str(value).strip().lower()
    if not tag or tag == "nan":
        return None
    return tag


def validate_difficulties(selected: Optional[Iterable[str]] = None) -> List[str]:
    """
    Validate and normalize a difficulty selection.

    An empty or missing selection falls back to all default difficulties.
    Unknown tags are kept as given so that they simply never match; known
    tags are returned first, in default order.

    Args:
        selected: Difficulty tags chosen by the user

    Returns:
        Normalized list of difficulty tags
    """
    tags: List[str] = []
    for raw in selected or []:
        tag = normalize_difficulty(raw)
        if tag and tag not in tags:
            tags.append(tag)

    if not tags:
        return get_default_difficulties()

    known = [d for d in get_difficulty_ids() if d in tags]
    unknown = [t for t in tags if t not in DIFFICULTIES]
    return known + unknown
