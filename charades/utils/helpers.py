"""Utility functions."""

import html
from pathlib import Path


def escape_html(text: str) -> str:
    """Escape text for safe inclusion in HTML content and attributes."""
    if not text:
        return ""
    return html.escape(str(text), quote=True)


def ensure_dir(path: str) -> None:
    """Ensure directory exists."""
    Path(path).mkdir(parents=True, exist_ok=True)


def get_file_size_kb(path: str) -> float:
    """Get file size in kilobytes."""
    if not Path(path).exists():
        return 0.0
    return Path(path).stat().st_size / 1024
