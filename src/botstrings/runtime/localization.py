"""Guild culture resolution.

Tracks the bot-wide default culture and per-guild overrides. Culture tags
are validated when set: a tag is accepted if responses are loaded for it
verbatim (this admits non-CLDR tags such as "owo") or if Babel recognizes
it, in which case it is stored in canonical BCP-47 form.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING

from botstrings.constants import DEFAULT_LOCALE
from botstrings.errors import UnknownCultureError
from botstrings.locale_utils import is_known_locale, to_bcp47

if TYPE_CHECKING:
    from botstrings.localization.types import LocaleCode

__all__ = ["Localization"]

logger = logging.getLogger(__name__)


class Localization:
    """Resolves the culture for a guild.

    Implements the CultureResolver protocol.

    Example:
        >>> loc = Localization(known_locales=["en-US", "de-DE"])
        >>> loc.set_guild_culture(1234, "de-DE")
        'de-DE'
        >>> loc.get_culture(1234)
        'de-DE'
        >>> loc.get_culture(None)
        'en-US'
    """

    __slots__ = ("_default_culture", "_guild_cultures", "_known_locales")

    def __init__(
        self,
        default_culture: LocaleCode = DEFAULT_LOCALE,
        guild_cultures: Mapping[int, LocaleCode] | None = None,
        *,
        known_locales: Iterable[LocaleCode] = (),
    ) -> None:
        """Initialize Localization.

        Args:
            default_culture: Culture for guilds without an override
            guild_cultures: Initial per-guild cultures (e.g. from the database)
            known_locales: Locales with loaded responses, accepted as-is

        Raises:
            UnknownCultureError: If any culture fails validation
        """
        self._known_locales = frozenset(known_locales)
        self._default_culture = self._validate(default_culture)
        self._guild_cultures: dict[int, LocaleCode] = {
            guild_id: self._validate(culture)
            for guild_id, culture in (guild_cultures or {}).items()
        }

    def _validate(self, culture: LocaleCode) -> LocaleCode:
        """Return the stored form of culture, or raise UnknownCultureError."""
        if culture in self._known_locales:
            return culture
        if is_known_locale(culture):
            return to_bcp47(culture)
        msg = f"Unknown culture: '{culture}'"
        raise UnknownCultureError(msg, culture=culture)

    @property
    def default_culture(self) -> LocaleCode:
        """Culture used for guilds without an override and for DMs."""
        return self._default_culture

    @property
    def guild_cultures(self) -> dict[int, LocaleCode]:
        """Copy of the per-guild overrides."""
        return dict(self._guild_cultures)

    def get_culture(self, guild_id: int | None = None) -> LocaleCode:
        """Return the culture for guild_id, or the default culture."""
        if guild_id is None:
            return self._default_culture
        return self._guild_cultures.get(guild_id, self._default_culture)

    def set_guild_culture(self, guild_id: int, culture: LocaleCode) -> LocaleCode:
        """Override the culture for one guild.

        Returns:
            The culture as stored (canonicalized when Babel validated it)

        Raises:
            UnknownCultureError: If culture fails validation
        """
        stored = self._validate(culture)
        self._guild_cultures[guild_id] = stored
        logger.debug("Guild %d culture set to %s", guild_id, stored)
        return stored

    def remove_guild_culture(self, guild_id: int) -> None:
        """Drop a guild's override; unknown guilds are ignored."""
        if self._guild_cultures.pop(guild_id, None) is not None:
            logger.debug("Guild %d culture reset to default", guild_id)

    def set_default_culture(self, culture: LocaleCode) -> LocaleCode:
        """Change the bot-wide default culture.

        Raises:
            UnknownCultureError: If culture fails validation
        """
        self._default_culture = self._validate(culture)
        logger.info("Default culture set to %s", self._default_culture)
        return self._default_culture

    def reset_default_culture(self) -> None:
        """Restore the stock default culture."""
        self._default_culture = DEFAULT_LOCALE
        logger.info("Default culture reset to %s", DEFAULT_LOCALE)
