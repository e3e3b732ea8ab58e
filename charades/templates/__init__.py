"""Card templates with CSS and HTML."""

from typing import Dict, Iterable, Optional

from ..cards.renderer import CardPresentation
from ..config.settings import DEFAULT_CARD_STYLE, Config
from ..utils.helpers import escape_html


class CardTemplates:
    """Container for all card templates and styling."""

    DEFAULT_STYLE: Dict[str, str] = DEFAULT_CARD_STYLE

    CSS = """
    body { font-family: var(--font-family); color: var(--text-color); margin: 0; padding: 1rem; }
    .grid { display: grid; grid-template-columns: repeat(var(--grid-columns), 1fr); gap: 1rem; max-width: 900px; margin: 0 auto; }
    .charade-card { aspect-ratio: 1; min-height: 150px; }

    .card {
        width: 100%; height: 100%;
        display: flex; flex-direction: column; align-items: center; justify-content: center;
        background: var(--card-bg); border: 1px dashed var(--card-border);
        box-sizing: border-box; padding: 0.5rem;
    }
    .emoji { font-size: var(--emoji-size); line-height: 1; margin-bottom: 0.5rem; }
    .layout-emoji-only .emoji { margin-bottom: 0; }

    .word { text-align: center; word-wrap: break-word; max-width: 100%; line-height: 1.2; }
    .word-primary { font-weight: 700; color: var(--text-color); }
    .word-secondary { font-weight: 500; color: var(--secondary-color); margin-top: 0.2rem; }
    .word-tertiary { font-weight: 400; font-style: italic; color: var(--tertiary-color); margin-top: 0.15rem; }
    .word-rtl { direction: rtl; unicode-bidi: isolate; }

    .empty-state { text-align: center; padding: 3rem; color: #6c757d; }

    @media print {
        body { padding: 0; }
        .grid {
            gap: 0;
            grid-template-columns: repeat(var(--grid-columns), var(--card-size));
            grid-auto-rows: var(--card-size);
        }
        .charade-card {
            width: var(--card-size); height: var(--card-size);
            break-inside: avoid; page-break-inside: avoid;
        }
        .card { border: 1px dashed var(--print-border); break-inside: avoid; page-break-inside: avoid; }
    }
    """

    CARD_HTML = """<div class="charade-card"><div class="card __LAYOUT__" data-tier="__TIER__"><span class="emoji">__EMOJI__</span>__LINES__</div></div>"""

    LINE_HTML = """<span class="word __STYLE__" lang="__LANG__" dir="__DIR__" style="font-size:__SIZE__;">__TEXT__</span>"""

    EMPTY_HTML = """<div class="empty-state"><p>__MESSAGE__</p></div>"""

    PRINT_SCRIPT = """<script>window.addEventListener('load', function () { window.print(); });</script>"""

    SHEET_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>__TITLE__</title>
<style>
__CSS__
</style>
</head>
<body>
__BODY__
__SCRIPT__
</body>
</html>
"""

    @classmethod
    def normalize_style(cls, style: Optional[Dict[str, str]]) -> Dict[str, str]:
        """Merge user style with defaults."""
        merged = cls.DEFAULT_STYLE.copy()
        if style:
            for key, value in style.items():
                if value is not None:
                    merged[key] = value
        return merged

    @classmethod
    def get_css(
        cls,
        style: Optional[Dict[str, str]] = None,
        columns: int = Config.GRID_COLUMNS,
        card_size: str = Config.CARD_SIZE,
    ) -> str:
        """Build CSS with variables from style config."""
        cfg = cls.normalize_style(style)
        vars_css = (
            ":root {"
            f"--card-bg:{cfg['card_bg']};"
            f"--card-border:{cfg['card_border']};"
            f"--print-border:{cfg['print_border']};"
            f"--text-color:{cfg['text_color']};"
            f"--secondary-color:{cfg['secondary_color']};"
            f"--tertiary-color:{cfg['tertiary_color']};"
            f"--emoji-size:{cfg['emoji_size']};"
            f"--font-family:{cfg['font_family']};"
            f"--grid-columns:{max(1, int(columns))};"
            f"--card-size:{card_size};"
            "}"
        )
        return f"{vars_css}\n{cls.CSS}"

    @classmethod
    def render_card_html(cls, presentation: CardPresentation) -> str:
        """
        Render one card presentation as an HTML fragment.

        All text is escaped; an emoji-only card has no word spans.
        """
        # Placeholders are filled last-to-first so inserted text never
        # lands in front of a placeholder still to be replaced.
        lines = "".join(
            cls.LINE_HTML
            .replace("__TEXT__", escape_html(line.text), 1)
            .replace("__SIZE__", escape_html(line.font_size) or "inherit", 1)
            .replace("__DIR__", escape_html(line.direction), 1)
            .replace("__LANG__", escape_html(line.language), 1)
            .replace("__STYLE__", escape_html(line.style_class), 1)
            for line in presentation.text_lines
        )
        return (
            cls.CARD_HTML
            .replace("__LINES__", lines, 1)
            .replace("__EMOJI__", escape_html(presentation.emoji), 1)
            .replace("__TIER__", escape_html(presentation.tier or "none"), 1)
            .replace("__LAYOUT__", escape_html(presentation.layout_class), 1)
        )

    @classmethod
    def render_grid_html(
        cls,
        presentations: Iterable[CardPresentation],
        empty_message: str = Config.EMPTY_STATE_MESSAGE,
    ) -> str:
        """Render the card grid, or the empty-state placeholder when there are no cards."""
        cards = [cls.render_card_html(p) for p in presentations]
        if not cards:
            return cls.EMPTY_HTML.replace("__MESSAGE__", escape_html(empty_message), 1)
        return '<div class="grid">' + "".join(cards) + "</div>"

    @classmethod
    def build_sheet_html(
        cls,
        presentations: Iterable[CardPresentation],
        title: str = "Charades Cards",
        style: Optional[Dict[str, str]] = None,
        columns: int = Config.GRID_COLUMNS,
        auto_print: bool = False,
    ) -> str:
        """
        Build a complete printable HTML page.

        Args:
            presentations: Card presentations in grid order
            title: Page title
            style: Optional style overrides (see DEFAULT_STYLE)
            columns: Number of grid columns
            auto_print: Open the print dialog once the page has loaded

        Returns:
            HTML document as a string
        """
        return (
            cls.SHEET_HTML
            .replace("__SCRIPT__", cls.PRINT_SCRIPT if auto_print else "", 1)
            .replace("__BODY__", cls.render_grid_html(presentations), 1)
            .replace("__CSS__", cls.get_css(style, columns), 1)
            .replace("__TITLE__", escape_html(title), 1)
        )
