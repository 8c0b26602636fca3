"""Type aliases for the localization domain.

Provides semantic type aliases used throughout the package and by user code
when annotating call sites.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "LocaleCode",
    "ResourceKey",
    "ResourceSet",
    "Template",
]

type LocaleCode = str
"""BCP-47 locale code as it appears in the file name (e.g., 'en-US', 'owo')."""

type ResourceKey = str
"""Key of a response string (e.g., 'afk_set', '8ball_answer')."""

type Template = str
"""Locale-specific response text, may contain {0}-style placeholders."""

type ResourceSet = dict[LocaleCode, dict[ResourceKey, Template]]
"""Mapping from locale to that locale's key/template pairs."""
