"""Locale utilities for culture tag validation.

Response files are named with BCP-47 tags (en-US) while Babel expects POSIX
identifiers (en_US). This module converts between the two and answers
whether a tag names a real locale.

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "clear_locale_cache",
    "get_babel_locale",
    "is_known_locale",
    "normalize_locale",
    "to_bcp47",
]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.strip().replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def clear_locale_cache() -> None:
    """Clear the get_babel_locale cache."""
    get_babel_locale.cache_clear()


def is_known_locale(locale_code: str) -> bool:
    """Check whether Babel recognizes a locale code.

    Example:
        >>> is_known_locale("de-DE")
        True
        >>> is_known_locale("owo")
        False
    """
    from babel import UnknownLocaleError  # noqa: PLC0415

    if not locale_code or locale_code.isspace():
        return False
    try:
        get_babel_locale(locale_code)
    except (UnknownLocaleError, ValueError, TypeError):
        return False
    return True


def to_bcp47(locale_code: str) -> str:
    """Canonicalize a locale code to BCP-47 form using Babel.

    Args:
        locale_code: Locale code in any case, BCP-47 or POSIX

    Returns:
        Canonical hyphenated form (e.g., "en-US", "zh-Hans-CN")

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> to_bcp47("en_us")
        'en-US'
    """
    return str(get_babel_locale(locale_code)).replace("_", "-")
