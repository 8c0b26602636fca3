"""Enumerations for botstrings type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class ParameterShape(StrEnum):
    """Argument shape of a generated accessor.

    StrEnum provides automatic string conversion: str(ParameterShape.NONE) == "none"
    """

    NONE = "none"
    """No placeholders: accessor takes only the guild id."""

    POSITIONAL = "positional"
    """Placeholders are exactly {0}..{count-1}: one named parameter each."""

    VARIADIC = "variadic"
    """Gaps or non-zero start: accessor takes *data and passes it through."""


class LoadStatus(StrEnum):
    """Outcome of reading a single response file.

    StrEnum provides automatic string conversion: str(LoadStatus.SUCCESS) == "success"
    """

    SUCCESS = "success"
    """File read and parsed as a JSON object."""

    MALFORMED = "malformed"
    """File read but not a JSON object; contributes no keys."""

    ERROR = "error"
    """File could not be read; contributes no keys."""


__all__ = [
    "LoadStatus",
    "ParameterShape",
]
