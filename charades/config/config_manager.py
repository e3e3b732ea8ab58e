"""Persistent settings manager with JSON storage and environment fallback."""

import copy
import json
import os
from pathlib import Path
from threading import Lock
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from ..utils.logger import setup_logger
from .difficulties import get_default_difficulties
from .languages import DEFAULT_LANGUAGES
from .settings import DEFAULT_CARD_STYLE, Config

_env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(_env_path)

logger = setup_logger(__name__)

ENV_PREFIX = "CHARADES_"

_TRUE_VALUES = ("true", "1", "yes", "on")


class SettingsManager:
    """
    User preferences for card generation and printing.

    Values are resolved in three layers: built-in defaults, then the
    JSON settings file, then ``CHARADES_<KEY>`` environment variables.
    Reading never creates the settings file; ``set`` and ``reset`` write it.

    Usage:
        settings = SettingsManager()
        languages = settings.get("DEFAULT_LANGUAGES", ["en"])
        settings.set("CARD_COUNT", 24)
    """

    _instance: Optional["SettingsManager"] = None
    _lock: Lock = Lock()

    DEFAULT_SETTINGS_FILE: str = "settings.json"

    DEFAULTS: Dict[str, Any] = {
        # Card generation
        "DEFAULT_LANGUAGES": list(DEFAULT_LANGUAGES),
        "DEFAULT_DIFFICULTIES": get_default_difficulties(),
        "CARD_COUNT": Config.DEFAULT_CARD_COUNT,
        "SHUFFLE": Config.DEFAULT_SHUFFLE,

        # Theme sources
        "THEMES_DIR": Config.THEMES_DIR,
        "THEMES_URL": Config.THEMES_URL,
        "TIMEOUT": Config.TIMEOUT,

        # Output
        "OUTPUT_DIR": Config.OUTPUT_DIR,
        "GRID_COLUMNS": Config.GRID_COLUMNS,

        # Card look
        "CARD_STYLE": copy.deepcopy(DEFAULT_CARD_STYLE),
    }

    def __new__(cls, settings_file: Optional[str] = None) -> "SettingsManager":
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    instance = super().__new__(cls)
                    instance._initialized = False
                    cls._instance = instance
        return cls._instance

    def __init__(self, settings_file: Optional[str] = None) -> None:
        """
        Args:
            settings_file: Path of the JSON settings file
                          (``settings.json`` in the working directory by default).
        """
        if getattr(self, "_initialized", False):
            return

        self._settings_file: Path = Path(settings_file or self.DEFAULT_SETTINGS_FILE)
        self._settings: Dict[str, Any] = {}
        self._file_lock: Lock = Lock()

        self._load_settings()
        self._initialized = True

    @property
    def settings_file(self) -> Path:
        return self._settings_file

    def _read_file(self) -> Dict[str, Any]:
        if not self._settings_file.exists():
            return {}
        try:
            with open(self._settings_file, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Could not load settings file %s: %s", self._settings_file, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring settings file %s: not a JSON object", self._settings_file)
            return {}
        return data

    def _env_overrides(self) -> Dict[str, Any]:
        overrides = {}
        for key, default in self.DEFAULTS.items():
            raw = os.environ.get(f"{ENV_PREFIX}{key}")
            if raw is not None:
                overrides[key] = self._coerce(raw, default)
        return overrides

    def _load_settings(self) -> None:
        settings = copy.deepcopy(self.DEFAULTS)
        settings.update(self._read_file())
        settings.update(self._env_overrides())
        self._settings = settings
        logger.debug("Settings loaded from %s", self._settings_file)

    @staticmethod
    def _coerce(raw: str, default: Any) -> Any:
        """
        Convert an environment string to the type of ``default``.

        Lists are comma-separated, dicts are JSON objects. Values that do
        not parse fall back to ``default``.
        """
        if isinstance(default, bool):
            return raw.strip().lower() in _TRUE_VALUES
        if isinstance(default, int):
            try:
                return int(raw)
            except ValueError:
                logger.warning("Expected an integer, got %r", raw)
                return default
        if isinstance(default, list):
            return [item.strip() for item in raw.split(",") if item.strip()]
        if isinstance(default, dict):
            try:
                parsed = json.loads(raw)
            except json.JSONDecodeError:
                parsed = None
            if not isinstance(parsed, dict):
                logger.warning("Expected a JSON object, got %r", raw)
                return copy.deepcopy(default)
            return parsed
        return raw

    def _save_settings(self) -> None:
        with self._file_lock:
            try:
                self._settings_file.parent.mkdir(parents=True, exist_ok=True)
                with open(self._settings_file, "w", encoding="utf-8") as f:
                    json.dump(self._settings, f, indent=2, ensure_ascii=False)
            except OSError as e:
                logger.warning("Could not save settings file %s: %s", self._settings_file, e)

    def get(self, key: str, default: Any = None) -> Any:
        """Value of ``key``; lists and dicts are returned as copies."""
        value = self._settings.get(key, default)
        if isinstance(value, (dict, list)):
            return copy.deepcopy(value)
        return value

    def set(self, key: str, value: Any, persist: bool = True) -> None:
        self._settings[key] = value
        if persist:
            self._save_settings()

    def get_all(self) -> Dict[str, Any]:
        return copy.deepcopy(self._settings)

    def reset(self, key: Optional[str] = None) -> None:
        """Restore one key, or everything when ``key`` is None, and save."""
        if key is None:
            self._settings = copy.deepcopy(self.DEFAULTS)
        elif key in self.DEFAULTS:
            self._settings[key] = copy.deepcopy(self.DEFAULTS[key])
        self._save_settings()

    def reload(self) -> None:
        self._load_settings()

    @classmethod
    def reset_instance(cls) -> None:
        """Forget the singleton so the next call builds a fresh one."""
        with cls._lock:
            cls._instance = None
