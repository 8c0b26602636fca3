"""Placeholder analysis for response templates.

Determines how many formatting arguments a template expects and whether
they can be expressed as named positional parameters.

Only ``{N}`` tokens with a non-negative integer N count as placeholders.
Format specs (``{0:N2}``) and named fields (``{name}``) are not
recognized and leave the template's shape unchanged.

Python 3.13+.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from botstrings.enums import ParameterShape

__all__ = [
    "ParameterInfo",
    "analyze_parameters",
]

_PLACEHOLDER_PATTERN: re.Pattern[str] = re.compile(r"\{([0-9]+)\}")


@dataclass(frozen=True, slots=True)
class ParameterInfo:
    """Parameter shape of a template.

    Attributes:
        indices: Distinct placeholder indices in ascending order
    """

    indices: tuple[int, ...] = ()

    @property
    def count(self) -> int:
        """Number of distinct placeholders."""
        return len(self.indices)

    @property
    def sequential(self) -> bool:
        """True when indices are exactly 0..count-1."""
        return bool(self.indices) and self.indices == tuple(range(self.count))

    @property
    def shape(self) -> ParameterShape:
        """Accessor shape implied by the indices."""
        if not self.indices:
            return ParameterShape.NONE
        if self.sequential:
            return ParameterShape.POSITIONAL
        return ParameterShape.VARIADIC


def analyze_parameters(template: str) -> ParameterInfo:
    """Infer the parameter shape of a template.

    Args:
        template: Response text, possibly containing {N} placeholders

    Returns:
        ParameterInfo with the distinct indices found

    Example:
        >>> info = analyze_parameters("Hello {0}, you have {1} items")
        >>> info.shape, info.count
        (<ParameterShape.POSITIONAL: 'positional'>, 2)
        >>> analyze_parameters("Error code: {2}").shape
        <ParameterShape.VARIADIC: 'variadic'>
        >>> analyze_parameters("Static text").shape
        <ParameterShape.NONE: 'none'>
    """
    indices = {int(match) for match in _PLACEHOLDER_PATTERN.findall(template)}
    return ParameterInfo(indices=tuple(sorted(indices)))
