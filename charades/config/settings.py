"""Global settings and configuration."""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load from project root
_env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(_env_path)


# Card look, fed into the sheet's CSS variables
DEFAULT_CARD_STYLE = {
    "card_bg": "#ffffff",
    "card_border": "#cccccc",
    "print_border": "#999999",
    "text_color": "#212529",
    "secondary_color": "#495057",
    "tertiary_color": "#6c757d",
    "emoji_size": "3rem",
    "font_family": "-apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, Helvetica, Arial, sans-serif",
}


@dataclass
class Config:
    """Application-wide configuration."""

    # Card generation defaults
    DEFAULT_CARD_COUNT: int = 12
    DEFAULT_SHUFFLE: bool = True

    # Print layout
    GRID_COLUMNS: int = 3
    CARD_SIZE: str = "2.5in"
    EMPTY_STATE_MESSAGE: str = "Select a theme to display charade cards."

    # Remote theme source (optional)
    THEMES_URL: str = os.environ.get("CHARADES_THEMES_URL", "")
    TIMEOUT: int = 30

    # Cross-platform paths using pathlib
    # BASE_DIR is the project root (parent of charades/)
    BASE_DIR: Path = Path(__file__).parent.parent.parent.resolve()
    PACKAGE_DIR: Path = Path(__file__).parent.parent.resolve()

    # Bundled themes ship inside the package
    THEMES_DIR: str = os.environ.get("CHARADES_THEMES_DIR", str(PACKAGE_DIR / "data"))
    THEMES_INDEX: str = "themes.json"
    OUTPUT_DIR: str = str(BASE_DIR / "data" / "output")
