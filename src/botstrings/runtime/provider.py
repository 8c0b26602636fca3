"""In-process storage of response templates.

Python 3.13+.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from botstrings.localization.loading import LoadSummary, load_directory

if TYPE_CHECKING:
    from botstrings.localization.types import LocaleCode, ResourceKey, ResourceSet, Template

__all__ = ["LocalStringsProvider"]

logger = logging.getLogger(__name__)


class LocalStringsProvider:
    """Serves response templates from memory.

    Templates come either from a ResourceSet passed in directly or from a
    directory of ``responses.<locale>.json`` files. With a directory,
    reload() re-reads it; without one, reload() keeps the current templates.

    Example:
        >>> provider = LocalStringsProvider(directory="data/strings/responses")
        >>> provider.get_text("en-US", "afk_set")
        'AFK set: {0}'
    """

    __slots__ = ("_directory", "_load_summary", "_resources")

    def __init__(
        self,
        resources: ResourceSet | None = None,
        *,
        directory: str | Path | None = None,
    ) -> None:
        """Initialize provider.

        Args:
            resources: Initial templates (ignored when directory is given)
            directory: Directory to load response files from

        Raises:
            ResourceDiscoveryError: If directory is given but does not exist
        """
        self._directory = Path(directory) if directory is not None else None
        self._resources: ResourceSet = {
            locale: dict(mapping) for locale, mapping in (resources or {}).items()
        }
        self._load_summary = LoadSummary(results=())
        if self._directory is not None:
            self.reload()

    @property
    def locales(self) -> tuple[LocaleCode, ...]:
        """Locales with loaded templates, sorted."""
        return tuple(sorted(self._resources))

    @property
    def load_summary(self) -> LoadSummary:
        """Summary of the most recent directory load (empty without a directory)."""
        return self._load_summary

    def get_text(self, locale: LocaleCode, key: ResourceKey) -> Template | None:
        """Return the raw template for key in locale, or None."""
        mapping = self._resources.get(locale)
        if mapping is None:
            return None
        return mapping.get(key)

    def reload(self) -> None:
        """Re-read the backing directory, replacing all templates.

        Raises:
            ResourceDiscoveryError: If the directory has disappeared
        """
        if self._directory is None:
            return
        resources, summary = load_directory(self._directory)
        self._resources = resources
        self._load_summary = summary
        logger.info(
            "Loaded response strings for %d locales from %s (%r)",
            len(resources),
            self._directory,
            summary,
        )
