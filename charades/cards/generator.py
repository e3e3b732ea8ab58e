"""
Card generation.

Turns a theme's word list into an ordered list of cards:
difficulty filter, optional shuffle, truncation, then projection of each
word onto the requested languages. Everything here is pure; the only
non-determinism is the shuffle, whose random source can be injected.
"""

import random
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Union

from ..config.difficulties import validate_difficulties
from ..config.languages import DEFAULT_LANGUAGES, LANGUAGE_PRIORITY
from ..config.settings import Config
from ..models import Card, CardLine, GenerationOptions, ThemeData, Word
from ..utils.parsing import TextParser

ThemeInput = Union[ThemeData, Mapping[str, Any], Sequence[Union[Word, Mapping[str, Any]]], None]


def normalize_options(options: Optional[GenerationOptions] = None) -> GenerationOptions:
    """
    Apply defaults to generation options.

    Missing fields take their defaults and empty language/difficulty
    selections mean "use the default set". A missing count means the
    default count; a negative count is treated as zero.

    Returns:
        A new, fully populated GenerationOptions
    """
    if options is None:
        options = GenerationOptions()

    count = options.count
    if count is None:
        count = Config.DEFAULT_CARD_COUNT
    count = max(0, int(count))

    languages: List[str] = []
    for code in options.languages or []:
        code = str(code).strip().lower()
        if code and code not in languages:
            languages.append(code)
    if not languages:
        languages = list(DEFAULT_LANGUAGES)

    return GenerationOptions(
        count=count,
        shuffle=bool(options.shuffle),
        languages=languages,
        difficulties=validate_difficulties(options.difficulties),
    )


def filter_by_difficulty(words: Iterable[Word], difficulties: Iterable[str]) -> List[Word]:
    """Keep untagged words and words whose tag is selected, in original order."""
    allowed = set(difficulties)
    return [w for w in words if not w.difficulty or w.difficulty in allowed]


def shuffle_words(words: Sequence[Word], rng: Optional[random.Random] = None) -> List[Word]:
    """Uniformly random permutation of ``words`` as a new list; the input is untouched."""
    source = rng if rng is not None else random
    return source.sample(list(words), len(words))


def project_word(word: Word, languages: Iterable[str]) -> Card:
    """
    Build the card for a single word.

    Lines follow the canonical language priority; a language gets a line
    only if it was requested and the word has non-blank text for it.
    """
    requested = set(languages)
    lines = tuple(
        CardLine(language=code, text=word.text_for(code).strip())
        for code in LANGUAGE_PRIORITY
        if code in requested and not TextParser.is_blank(word.text_for(code))
    )
    return Card(lines=lines, image=word.emoji, is_emoji=True)


def _theme_words(theme: ThemeInput) -> List[Word]:
    """Words of ``theme`` given as ThemeData, a theme dict, or a list of words or word dicts."""
    if theme is None:
        return []
    if isinstance(theme, Mapping):
        theme = ThemeData.from_dict(theme)
    if isinstance(theme, ThemeData):
        return list(theme.words or ())
    words = []
    for item in theme:
        if isinstance(item, Word):
            words.append(item)
        elif isinstance(item, Mapping):
            words.append(Word.from_dict(item))
    return words


def generate_cards(
    theme: ThemeInput,
    options: Optional[GenerationOptions] = None,
    rng: Optional[random.Random] = None,
) -> List[Card]:
    """
    Generate cards from theme data.

    Args:
        theme: Theme data, its dict form, a word list, or None
        options: Generation options (defaults when omitted)
        rng: Optional random source for reproducible shuffles

    Returns:
        Up to ``options.count`` cards; an empty list when nothing qualifies
    """
    words = _theme_words(theme)
    if not words:
        return []

    opts = normalize_options(options)

    # Filter by difficulty first
    words = filter_by_difficulty(words, opts.difficulties)

    if opts.shuffle:
        words = shuffle_words(words, rng)

    # Limit to requested card count (or available words if fewer)
    words = words[:min(opts.count, len(words))]

    return [project_word(word, opts.languages) for word in words]
