"""Shared constants for botstrings.

This module provides centralized configuration constants used across the
codegen and runtime packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Resource files: naming convention for per-locale response files
- Identifiers: data tables for method name generation
- Generated output: class and file naming defaults
- Fallback strings: runtime messages for missing or broken templates

Python 3.13+. Zero external dependencies.
"""

import keyword
import re

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Resource files
    "DEFAULT_LOCALE",
    "RESPONSE_FILE_GLOB",
    "RESPONSE_FILE_PATTERN",
    # Identifiers
    "NUMBER_WORDS",
    "RESERVED_PREFIX",
    "RESERVED_IDENTIFIERS",
    # Generated output
    "DEFAULT_CLASS_NAME",
    "GENERATED_MEMBER_NAMES",
    # Fallback strings
    "FALLBACK_MISSING_KEY",
    "FALLBACK_BAD_FORMAT",
]

# ============================================================================
# RESOURCE FILES
# ============================================================================

# Locale whose templates drive parameter inference and serve as the runtime
# fallback when a guild's culture lacks a key.
DEFAULT_LOCALE: str = "en-US"

# Files are named "responses.<locale>.json"; the locale is everything between
# the first "responses." and the trailing ".json".
RESPONSE_FILE_PATTERN: re.Pattern[str] = re.compile(r"^responses\.(.+)\.json$")
RESPONSE_FILE_GLOB: str = "responses.*.json"

# ============================================================================
# IDENTIFIERS
# ============================================================================

NUMBER_WORDS: dict[str, str] = {
    "0": "Zero",
    "1": "One",
    "2": "Two",
    "3": "Three",
    "4": "Four",
    "5": "Five",
    "6": "Six",
    "7": "Seven",
    "8": "Eight",
    "9": "Nine",
}

# Prepended to names that are reserved or do not start with a letter.
RESERVED_PREFIX: str = "Response"

# Members defined on every generated class. A key mapping onto one of these
# would shadow the plumbing the accessors rely on.
GENERATED_MEMBER_NAMES: frozenset[str] = frozenset({
    "_get_culture",
    "_localization",
    "_strings",
})

# Compared ordinally: "True" is reserved, "true" is not.
RESERVED_IDENTIFIERS: frozenset[str] = frozenset(
    [*keyword.kwlist, *keyword.softkwlist, *GENERATED_MEMBER_NAMES]
)

# ============================================================================
# GENERATED OUTPUT
# ============================================================================

DEFAULT_CLASS_NAME: str = "GeneratedBotStrings"

# ============================================================================
# FALLBACK STRINGS
# ============================================================================

# Format strings - use .format(key=...)
FALLBACK_MISSING_KEY: str = "Error: key '{key}' not found!"
FALLBACK_BAD_FORMAT: str = (
    "I can't tell you if the command is executed, because there was an error "
    "printing out the response.\nKey '{key}' is not properly formatted. Please report this."
)
