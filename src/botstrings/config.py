"""Generator configuration.

Provides a single frozen dataclass holding the knobs of a generation run.
The command line maps its flags onto it; library callers construct it
directly.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import keyword
from dataclasses import dataclass

from botstrings.constants import DEFAULT_CLASS_NAME, DEFAULT_LOCALE

__all__ = ["GeneratorConfig"]


@dataclass(frozen=True, slots=True)
class GeneratorConfig:
    """Immutable configuration for source generation.

    All fields have defaults; ``GeneratorConfig()`` reproduces the stock
    output.

    Attributes:
        default_locale: Locale whose templates drive parameter inference and
            documentation defaults (default: "en-US").
        class_name: Name of the generated class (default: "GeneratedBotStrings").

    Example:
        >>> config = GeneratorConfig(default_locale="de-DE")
        >>> source = generate_source(resources, config)
    """

    default_locale: str = DEFAULT_LOCALE
    class_name: str = DEFAULT_CLASS_NAME

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If default_locale is empty or class_name is not a
                usable Python class name.
        """
        if not self.default_locale or self.default_locale.isspace():
            msg = "default_locale must be a non-empty locale code"
            raise ValueError(msg)
        if not self.class_name.isidentifier() or keyword.iskeyword(self.class_name):
            msg = f"class_name must be a valid Python identifier, got: {self.class_name!r}"
            raise ValueError(msg)
