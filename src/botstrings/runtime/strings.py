"""Response lookup with default-culture fallback.

BotStrings is the string service generated accessor classes call. It never
raises for a missing key or a broken template: the caller always gets text
to send, and the problem is logged.

Fallback Order:
    1. Template in the requested culture
    2. Template in the default culture (missing or blank in requested)
    3. FALLBACK_MISSING_KEY message

A template that fails to format in the requested culture is retried in the
default culture; failing there too yields FALLBACK_BAD_FORMAT.

Python 3.13+.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from botstrings.constants import DEFAULT_LOCALE, FALLBACK_BAD_FORMAT, FALLBACK_MISSING_KEY

if TYPE_CHECKING:
    from botstrings.localization.types import LocaleCode, ResourceKey, Template
    from botstrings.runtime.protocols import CultureResolver, StringsProvider

__all__ = ["BotStrings"]

logger = logging.getLogger(__name__)

# Raised by str.format when a template does not match its arguments.
_FORMAT_ERRORS: tuple[type[Exception], ...] = (
    AttributeError,
    IndexError,
    KeyError,
    TypeError,
    ValueError,
)


class BotStrings:
    """Retrieves localized responses.

    Implements the StringLookup protocol.

    Example:
        >>> provider = LocalStringsProvider({"en-US": {"hello": "Hello {0}!"}})
        >>> strings = BotStrings(Localization(), provider)
        >>> strings.get_text("hello", "de-DE", "Mewdeko")
        'Hello Mewdeko!'
    """

    __slots__ = ("_default_culture", "_localization", "_provider")

    def __init__(
        self,
        localization: CultureResolver,
        provider: StringsProvider,
        *,
        default_culture: LocaleCode = DEFAULT_LOCALE,
    ) -> None:
        """Initialize BotStrings.

        Args:
            localization: Resolves guild cultures for get_text_for_guild
            provider: Raw template storage
            default_culture: Culture used as the fallback for missing keys
        """
        self._localization = localization
        self._provider = provider
        self._default_culture = default_culture

    def _lookup(self, key: ResourceKey, culture: LocaleCode) -> Template | None:
        """Find the template for key, falling back to the default culture."""
        text = self._provider.get_text(culture, key)
        if text is not None and text.strip():
            return text

        if culture == self._default_culture:
            logger.warning("'%s' key is missing from '%s' response strings", key, culture)
            return None

        logger.warning(
            "'%s' key is missing from '%s' response strings. You may ignore this message",
            key,
            culture,
        )
        text = self._provider.get_text(self._default_culture, key)
        if text is None or not text.strip():
            logger.warning(
                "'%s' key is missing from '%s' response strings", key, self._default_culture
            )
            return None
        return text

    def get_text(self, key: ResourceKey, culture: LocaleCode, *data: object) -> str:
        """Return the formatted response for key in culture.

        The template is always passed through str.format, so "{{" and "}}"
        render as literal braces even without arguments.

        Args:
            key: Response key
            culture: Culture to look the key up in
            *data: Positional format arguments for {0}, {1}, ...

        Returns:
            Formatted response, or a fallback message. Never raises for
            missing keys or malformed templates.
        """
        text = self._lookup(key, culture)
        if text is None:
            return FALLBACK_MISSING_KEY.format(key=key)

        try:
            return text.format(*data)
        except _FORMAT_ERRORS as e:
            logger.warning(
                "Key '%s' is not properly formatted in '%s' response strings: %s",
                key,
                culture,
                e,
            )
            if culture != self._default_culture:
                return self.get_text(key, self._default_culture, *data)
            return FALLBACK_BAD_FORMAT.format(key=key)

    def get_text_for_guild(
        self, key: ResourceKey, guild_id: int | None = None, *data: object
    ) -> str:
        """Resolve the guild's culture, then behave like get_text()."""
        return self.get_text(key, self._localization.get_culture(guild_id), *data)

    def reload(self) -> None:
        """Reload templates from the provider's backing store."""
        self._provider.reload()
