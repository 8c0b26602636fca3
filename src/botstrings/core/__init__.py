"""Core analysis utilities shared by the code generator.

This package holds the pure functions the generator is built from:
identifier conversion and placeholder analysis. Neither depends on file
I/O or on the runtime layer.

Exports:
    IdentifierAllocator: Per-run unique identifier allocation
    to_identifier: Key to PascalCase identifier conversion
    is_valid_identifier: Check a name is emittable
    ParameterInfo: Placeholder indices and derived shape
    analyze_parameters: Infer ParameterInfo from a template

Python 3.13+.
"""

from .identifiers import IdentifierAllocator, is_reserved, is_valid_identifier, to_identifier
from .placeholders import ParameterInfo, analyze_parameters

__all__ = [
    "IdentifierAllocator",
    "ParameterInfo",
    "analyze_parameters",
    "is_reserved",
    "is_valid_identifier",
    "to_identifier",
]
