"""Printable card sheet builder."""

import os
import re
import time
import webbrowser
from collections import Counter
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Sequence

from ..cards import CardPresentation, present
from ..config import Config, SettingsManager
from ..models import Card
from ..templates import CardTemplates
from ..utils import ensure_dir, get_file_size_kb


class PrintSheetBuilder:
    """Lays cards out on a printable HTML grid and hands it to the browser."""

    def __init__(
        self,
        title: str = "Charades Cards",
        settings: Optional[SettingsManager] = None,
        progress_callback: Optional[Callable[[Dict[str, Any]], None]] = None,
    ) -> None:
        """
        Initialize sheet builder.

        Args:
            title: Page title of the sheet
            settings: Settings providing style, grid columns and output dir
            progress_callback: Receives {"event": "log"|"progress", "message", "value"}
                              dicts while building and exporting
        """
        self.title = title
        self._settings = settings or SettingsManager()
        self.progress_callback = progress_callback or self._default_callback

        self.style: Dict[str, str] = self._settings.get("CARD_STYLE", CardTemplates.DEFAULT_STYLE)
        self.columns: int = int(self._settings.get("GRID_COLUMNS", Config.GRID_COLUMNS))
        self.output_dir: str = self._settings.get("OUTPUT_DIR", Config.OUTPUT_DIR)

        self.presentations: List[CardPresentation] = []
        self.html: str = ""
        self.stats: Counter = Counter()
        self._start_time = time.time()

    @staticmethod
    def _default_callback(payload: Dict[str, Any]) -> None:
        """Console output used when no callback is given."""
        if payload.get("event") == "log":
            print(payload.get("message", ""))
        elif payload.get("event") == "progress":
            value = payload.get("value", 0)
            message = payload.get("message", "")
            if message:
                print(f"[{value:.1f}%] {message}")

    def _emit(self, event: str, message: str = "", value: float = 0.0) -> None:
        """Send a {"event", "message", "value"} payload; value is a percentage for progress events."""
        self.progress_callback({"event": event, "message": message, "value": value})

    def build(self, cards: Sequence[Card], auto_print: bool = False) -> str:
        """
        Render cards into a complete HTML sheet.

        An empty card list produces the empty-state placeholder page.

        Args:
            cards: Cards in grid order
            auto_print: Open the print dialog when the page loads

        Returns:
            The HTML document
        """
        self.presentations = []
        self.stats = Counter()
        total = len(cards)

        if total == 0:
            self._emit("log", "No cards to lay out; writing empty sheet")

        for index, card in enumerate(cards):
            presentation = present(card)
            self.presentations.append(presentation)
            self.stats['cards'] += 1
            self.stats[f"tier_{presentation.tier or 'none'}"] += 1
            if not presentation.text_lines:
                self.stats['emoji_only'] += 1
            self._emit("progress", presentation.text_lines[0].text if presentation.text_lines else "", (index + 1) / total * 100)

        self.html = CardTemplates.build_sheet_html(
            self.presentations,
            title=self.title,
            style=self.style,
            columns=self.columns,
            auto_print=auto_print,
        )
        return self.html

    def default_output_file(self) -> str:
        slug = "".join(c if c.isalnum() else "_" for c in self.title.lower()).strip("_") or "cards"
        return os.path.join(self.output_dir, f"{slug}.html")

    def export(self, output_file: Optional[str] = None) -> str:
        """
        Write the built sheet to disk.

        An existing file is kept as a timestamped backup.

        Args:
            output_file: Output filename (defaults to <output_dir>/<title>.html)

        Returns:
            Path of the written file
        """
        if not self.html:
            self.build([])

        if output_file is None:
            output_file = self.default_output_file()
        ensure_dir(str(Path(output_file).parent))

        # Backup old file
        if os.path.exists(output_file):
            backup_file = self._backup_path(output_file)
            os.replace(output_file, backup_file)
            self._emit("log", f"[*] Backup created: {backup_file}")

        with open(output_file, "w", encoding="utf-8") as f:
            f.write(self.html)

        self._print_statistics(output_file)
        self._cleanup_old_backups(output_file)
        return output_file

    def print_sheet(self, path: str) -> bool:
        """Open the sheet in the default browser, where the print dialog takes over."""
        uri = Path(path).resolve().as_uri()
        self._emit("log", f"Opening {uri} for printing")
        return webbrowser.open(uri)

    def _print_statistics(self, filename: str) -> None:
        """Summarize the last build and the written file."""
        elapsed = time.time() - self._start_time
        tiers = sorted(k[len("tier_"):] for k in self.stats if k.startswith("tier_"))

        self._emit("log", "=" * 40)
        self._emit("log", f"[OK] Cards laid out:   {self.stats.get('cards', 0)}")
        if self.stats.get('emoji_only'):
            self._emit("log", f"[WARN] Emoji-only cards: {self.stats['emoji_only']}")
        if tiers:
            self._emit("log", f"[FONT] Tiers used:     {', '.join(tiers)}")
        self._emit("log", f"[TIME] Build time:     {elapsed:.2f}s")
        self._emit("log", f"[FILE] Output file:    {get_file_size_kb(filename):.1f} KB -> {filename}")
        self._emit("log", "=" * 40)

    @staticmethod
    def _backup_path(output_file: str) -> str:
        """``<stem>_<YYYYmmdd_HHMMSS><suffix>`` next to ``output_file``."""
        current = Path(output_file)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        return str(current.with_name(f"{current.stem}_{timestamp}{current.suffix}"))

    def _cleanup_old_backups(self, current_file: str, keep_count: int = 3) -> None:
        """Delete all but the newest ``keep_count`` backups of ``current_file``."""
        current = Path(current_file)
        pattern = re.compile(
            re.escape(current.stem) + r"_[0-9]{8}_[0-9]{6}" + re.escape(current.suffix) + "$"
        )
        backups = sorted(
            (p for p in current.parent.iterdir() if p.is_file() and pattern.match(p.name)),
            key=os.path.getmtime,
            reverse=True,
        )
        for old_backup in backups[keep_count:]:
            try:
                old_backup.unlink()
            except OSError as e:
                self._emit("log", f"[WARN] Could not remove backup {old_backup}: {e}")
