"""
Charades Cards: Printable Card Sheet Generator
----------------------------------------------

This is the main entry point for building printable charades card sheets
from a theme's word list.
"""

import argparse
import asyncio
import json
import random
import sys
from typing import List, Optional

from charades.cards import generate_cards
from charades.config import SettingsManager
from charades.models import GenerationOptions, ThemeData, ThemeSummary
from charades.services import (
    BaseThemeRepository,
    CSVThemeRepository,
    JSONThemeRepository,
    RemoteThemeSource,
    ThemeLoadError,
)
from charades.sheet import PrintSheetBuilder
from charades.utils import TextParser, setup_logger


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    settings = SettingsManager()
    parser = argparse.ArgumentParser(description="Build printable charades cards for a theme.")
    parser.add_argument("--list", action="store_true", help="List available themes and exit")
    parser.add_argument("--theme", help="Theme id (defaults to the first theme)")
    parser.add_argument("--languages", default=",".join(settings.get("DEFAULT_LANGUAGES", ["en"])),
                        help="Comma-separated language codes, e.g. en,es")
    parser.add_argument("--difficulties", default=",".join(settings.get("DEFAULT_DIFFICULTIES", [])),
                        help="Comma-separated difficulties, e.g. easy,medium")
    parser.add_argument("--count", type=int, default=settings.get("CARD_COUNT", 12),
                        help="Number of cards")
    parser.add_argument("--all", action="store_true", help="Use every word of the theme")
    parser.add_argument("--shuffle", dest="shuffle", action="store_true", help="Shuffle the words")
    parser.add_argument("--no-shuffle", dest="shuffle", action="store_false", help="Keep the theme's word order")
    parser.set_defaults(shuffle=bool(settings.get("SHUFFLE", True)))
    parser.add_argument("--seed", type=int, help="Seed for a reproducible shuffle")
    parser.add_argument("--themes-dir", default=settings.get("THEMES_DIR"),
                        help="Directory with themes.json or *.csv themes")
    parser.add_argument("--csv", action="store_true", help="Read themes from pipe-separated CSV files")
    parser.add_argument("--themes-url", default=settings.get("THEMES_URL") or None,
                        help="Fetch themes from this base URL instead of a directory")
    parser.add_argument("--timeout", type=int, default=settings.get("TIMEOUT", 30),
                        help="HTTP timeout in seconds for --themes-url")
    parser.add_argument("--output", help="Output HTML file")
    parser.add_argument("--json", action="store_true", help="Print cards as JSON instead of writing HTML")
    parser.add_argument("--print", dest="print_sheet", action="store_true",
                        help="Open the sheet in the browser and show the print dialog")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def print_themes(themes: List[ThemeSummary]) -> None:
    for theme in themes:
        print(f"{theme.icon} {theme.id:<16} {theme.name} ({theme.word_count} words)")


async def load_remote(args: argparse.Namespace) -> tuple:
    """Fetch the theme index and the chosen theme over HTTP."""
    async with RemoteThemeSource(args.themes_url, timeout=args.timeout) as source:
        themes = await source.list_themes()
        if args.list:
            return themes, None
        theme_id = args.theme or (themes[0].id if themes else None)
        theme = await source.load_theme(theme_id) if theme_id else None
        return themes, theme


def load_local(args: argparse.Namespace) -> tuple:
    repository: BaseThemeRepository
    if args.csv:
        repository = CSVThemeRepository(args.themes_dir)
    else:
        repository = JSONThemeRepository(args.themes_dir)
    themes = repository.list_themes()
    if args.list:
        return themes, None
    theme_id = args.theme or (themes[0].id if themes else None)
    theme = repository.load_theme(theme_id) if theme_id else None
    return themes, theme


def main(argv: Optional[List[str]] = None) -> bool:
    """Main entry point."""
    args = parse_args(argv)
    logger = setup_logger("charades", "debug" if args.verbose else None)

    try:
        if args.themes_url:
            themes, theme = asyncio.run(load_remote(args))
        else:
            themes, theme = load_local(args)
    except ThemeLoadError as e:
        print(f"❌ Error: {e}")
        return False

    if args.list:
        print_themes(themes)
        return True

    if theme is None:
        print(f"❌ Error: theme {args.theme or '(none)'} not found")
        return False

    options = GenerationOptions(
        count=len(theme.words) if args.all else args.count,
        shuffle=args.shuffle,
        languages=TextParser.split_list(args.languages),
        difficulties=TextParser.split_list(args.difficulties),
    )
    rng = random.Random(args.seed) if args.seed is not None else None
    cards = generate_cards(theme, options, rng=rng)
    logger.info("Generated %d cards from theme %s", len(cards), theme.id)

    if args.json:
        print(json.dumps([card.to_dict() for card in cards], indent=2, ensure_ascii=False))
        return True

    builder = PrintSheetBuilder(title=theme_title(theme))
    builder.build(cards, auto_print=args.print_sheet)
    path = builder.export(args.output)
    if args.print_sheet:
        builder.print_sheet(path)
    return True


def theme_title(theme: ThemeData) -> str:
    return f"{theme.name or theme.id} Charades"


if __name__ == "__main__":
    try:
        success = main()
        sys.exit(0 if success else 1)
    except KeyboardInterrupt:
        print("\n[!] Aborted by user.")
        sys.exit(1)
