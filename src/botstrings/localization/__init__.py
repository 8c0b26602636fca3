"""Response resource loading package.

Submodules:
    types   - PEP 695 type aliases (LocaleCode, ResourceKey, Template, ResourceSet)
    loading - Response file discovery, tolerant parsing, LoadSummary

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from botstrings.enums import LoadStatus
from botstrings.localization.loading import (
    LoadSummary,
    ResourceLoadResult,
    discover_resource_files,
    load_directory,
    locale_from_filename,
    merge_resources,
    parse_resource,
)
from botstrings.localization.types import LocaleCode, ResourceKey, ResourceSet, Template

__all__ = [
    # Parsing and aggregation
    "parse_resource",
    "locale_from_filename",
    "discover_resource_files",
    "merge_resources",
    "load_directory",
    # Load tracking
    "LoadStatus",
    "LoadSummary",
    "ResourceLoadResult",
    # Type aliases for user code type annotations
    "LocaleCode",
    "ResourceKey",
    "ResourceSet",
    "Template",
]
