"""Remote theme source - fetch theme data over HTTP."""

import asyncio
from typing import Any, List, Optional

import aiohttp

from ..config import Config
from ..models import ThemeData, ThemeSummary
from ..utils.logger import setup_logger
from .repository import ThemeLoadError, is_valid_theme_id

logger = setup_logger(__name__)


class RemoteThemeSource:
    """
    Load themes from a web server using the JSON layout of the local repository.

    ``<base_url>/themes.json`` lists the themes and
    ``<base_url>/themes/<id>.json`` holds each theme's words.

    Usage:
        async with RemoteThemeSource("https://example.org/data") as source:
            themes = await source.list_themes()
            theme = await source.load_theme(themes[0].id)
    """

    def __init__(self, base_url: Optional[str] = None, timeout: int = Config.TIMEOUT):
        """
        Initialize remote source.

        Args:
            base_url: URL of the directory holding themes.json
            timeout: Total request timeout in seconds
        """
        base_url = base_url or Config.THEMES_URL
        if not base_url:
            raise ValueError("A base URL is required for the remote theme source")
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session: Optional[aiohttp.ClientSession] = None
        self._session_lock = asyncio.Lock()

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create a shared aiohttp session (connection pooling)."""
        async with self._session_lock:
            if self._session is None or self._session.closed:
                self._session = aiohttp.ClientSession(
                    timeout=aiohttp.ClientTimeout(total=self.timeout),
                    headers={"Accept": "application/json"},
                )
            return self._session

    async def close(self) -> None:
        """Close the aiohttp session. Call this when done with the source."""
        async with self._session_lock:
            if self._session and not self._session.closed:
                await self._session.close()
            self._session = None

    async def __aenter__(self) -> "RemoteThemeSource":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def _get_json(self, url: str, what: str) -> Optional[Any]:
        """GET ``url`` as JSON; None on 404, ThemeLoadError on any other failure."""
        session = await self._get_session()
        logger.debug("Fetching %s", url)
        try:
            async with session.get(url) as response:
                if response.status == 404:
                    return None
                if response.status != 200:
                    raise ThemeLoadError(f"Failed to load {what}: {response.status} {response.reason}")
                return await response.json(content_type=None)
        except asyncio.TimeoutError as e:
            raise ThemeLoadError(f"Failed to load {what}: request timed out") from e
        except aiohttp.ClientError as e:
            raise ThemeLoadError(f"Failed to load {what}: {e}") from e
        except ValueError as e:
            raise ThemeLoadError(f"Failed to load {what}: invalid JSON") from e

    async def list_themes(self) -> List[ThemeSummary]:
        """Load all available themes from the index."""
        data = await self._get_json(f"{self.base_url}/{Config.THEMES_INDEX}", "themes")
        entries = data.get("themes") if isinstance(data, dict) else None
        if not isinstance(entries, list):
            raise ThemeLoadError("Failed to load themes: index has no 'themes' list")

        themes = []
        for entry in entries:
            try:
                themes.append(ThemeSummary.from_dict(entry))
            except (KeyError, TypeError, ValueError) as e:
                logger.warning("Skipping malformed theme entry %r: %s", entry, e)
        return themes

    async def load_theme(self, theme_id: str) -> Optional[ThemeData]:
        """Load complete theme data by ID; None if the server has no such theme."""
        if not is_valid_theme_id(theme_id):
            logger.warning("Rejected theme id %r", theme_id)
            return None

        data = await self._get_json(f"{self.base_url}/themes/{theme_id}.json", f"theme {theme_id}")
        if data is None:
            return None
        if not isinstance(data, dict):
            raise ThemeLoadError(f"Failed to load theme {theme_id}: not a JSON object")

        data.setdefault("id", theme_id)
        return ThemeData.from_dict(data)
