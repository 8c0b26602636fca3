"""Collaborator contracts used by generated accessor classes.

These are Protocols (structural typing) rather than ABCs: any object with
the right methods can back a generated class, including test doubles.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from botstrings.localization.types import LocaleCode, ResourceKey, Template

__all__ = [
    "CultureResolver",
    "StringLookup",
    "StringsProvider",
]


class CultureResolver(Protocol):
    """Resolves the culture applicable to a guild."""

    def get_culture(self, guild_id: int | None = None) -> LocaleCode:
        """Return the guild's culture, or the default culture for None."""
        ...


class StringLookup(Protocol):
    """Looks up and formats a response in a culture, with fallback."""

    def get_text(self, key: ResourceKey, culture: LocaleCode, *data: object) -> str:
        """Return the formatted text for key in culture.

        Implementations fall back to the default culture when the key is
        missing in culture, and never raise for missing keys.
        """
        ...


class StringsProvider(Protocol):
    """Raw per-locale template storage."""

    def get_text(self, locale: LocaleCode, key: ResourceKey) -> Template | None:
        """Return the raw template, or None if locale lacks key."""
        ...

    def reload(self) -> None:
        """Re-read templates from the backing store."""
        ...
