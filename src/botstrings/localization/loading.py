"""Response file discovery and parsing.

Reads ``responses.<locale>.json`` files into a Locale Resource Set. Parsing
never fails the build: a file that is unreadable or is not a flat JSON
object contributes no keys and is recorded in the LoadSummary.

Components:
    parse_resource - Tolerant JSON object parser (never raises)
    locale_from_filename - Extract the locale code from a response file name
    discover_resource_files - Find response files in a directory
    merge_resources - Aggregate (locale, text) pairs into a ResourceSet
    load_directory - Discover, read and parse a directory in one step
    ResourceLoadResult - Immutable result of a single file load
    LoadSummary - Immutable aggregate of all load results

Python 3.13+.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from botstrings.constants import RESPONSE_FILE_GLOB, RESPONSE_FILE_PATTERN
from botstrings.enums import LoadStatus
from botstrings.errors import ResourceDiscoveryError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from botstrings.localization.types import LocaleCode, ResourceKey, ResourceSet, Template

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Parsing
    "parse_resource",
    "locale_from_filename",
    # Aggregation
    "discover_resource_files",
    "merge_resources",
    "load_directory",
    # Load result types
    "ResourceLoadResult",
    "LoadSummary",
]

logger = logging.getLogger(__name__)


def _parse_object(text: str) -> dict[ResourceKey, Template] | None:
    """Parse text as a flat JSON object, returning None when it is not one."""
    text = text.removeprefix("\ufeff")
    if not text or text.isspace():
        return None
    try:
        data = json.loads(text)
    except (ValueError, RecursionError):
        # JSONDecodeError subclasses ValueError; deep nesting exhausts the decoder stack
        return None
    if not isinstance(data, dict):
        return None
    return {
        key: value
        for key, value in data.items()
        if key and isinstance(value, str)
    }


def parse_resource(text: str) -> dict[ResourceKey, Template]:
    """Parse a response file's text into a key/template mapping.

    Only top-level string-to-string pairs are kept. Empty keys and
    non-string values are skipped. Standard JSON escapes (\\n, \\t, \\",
    \\/, \\uXXXX, ...) are decoded. A leading byte order mark is
    ignored.

    Args:
        text: Raw file content

    Returns:
        Mapping of keys to templates. Empty when the text is empty,
        malformed, or not a JSON object. Never raises.

    Example:
        >>> parse_resource('{"hello": "Hi {0}"}')
        {'hello': 'Hi {0}'}
        >>> parse_resource('{"hello": "Hi')
        {}
    """
    parsed = _parse_object(text)
    return parsed if parsed is not None else {}


def locale_from_filename(filename: str) -> LocaleCode | None:
    """Extract the locale code from a response file name.

    Args:
        filename: File name or path (only the final component is inspected)

    Returns:
        Locale code, or None if the name does not follow the
        ``responses.<locale>.json`` convention

    Example:
        >>> locale_from_filename("data/responses.en-US.json")
        'en-US'
        >>> locale_from_filename("commands.en-US.yml") is None
        True
    """
    match = RESPONSE_FILE_PATTERN.match(Path(filename).name)
    if match is None:
        return None
    return match.group(1)


def discover_resource_files(directory: str | Path) -> list[Path]:
    """Find response files directly inside a directory.

    Args:
        directory: Directory holding ``responses.<locale>.json`` files

    Returns:
        Matching paths sorted by file name

    Raises:
        ResourceDiscoveryError: If directory does not exist or is not a directory
    """
    root = Path(directory)
    if not root.is_dir():
        msg = f"Resource directory not found: '{root}'"
        raise ResourceDiscoveryError(msg, path=str(root))

    return sorted(
        (
            path
            for path in root.glob(RESPONSE_FILE_GLOB)
            if path.is_file() and locale_from_filename(path.name) is not None
        ),
        key=lambda p: p.name,
    )


def merge_resources(sources: Iterable[tuple[LocaleCode, str]]) -> ResourceSet:
    """Aggregate raw (locale, text) pairs into a ResourceSet.

    Malformed texts yield an empty mapping for their locale. A locale
    appearing more than once has its mappings merged, later pairs winning.

    Args:
        sources: (locale, raw JSON text) pairs, one per resource file

    Returns:
        ResourceSet keyed by locale
    """
    resources: ResourceSet = {}
    for locale, text in sources:
        resources.setdefault(locale, {}).update(parse_resource(text))
    return resources


def load_directory(directory: str | Path) -> tuple[ResourceSet, LoadSummary]:
    """Discover, read and parse every response file in a directory.

    Args:
        directory: Directory holding ``responses.<locale>.json`` files

    Returns:
        Tuple of (ResourceSet, LoadSummary). Files that could not be read or
        parsed still get an (empty) entry in the ResourceSet.

    Raises:
        ResourceDiscoveryError: If directory does not exist
    """
    resources: ResourceSet = {}
    results: list[ResourceLoadResult] = []

    for path in discover_resource_files(directory):
        # discover_resource_files only yields matching names
        locale = locale_from_filename(path.name) or ""
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Failed to read response file %s: %s", path, e)
            resources.setdefault(locale, {})
            results.append(
                ResourceLoadResult(
                    locale=locale,
                    source_path=str(path),
                    status=LoadStatus.ERROR,
                    error=e,
                )
            )
            continue

        parsed = _parse_object(text)
        if parsed is None:
            logger.warning("Response file %s is not a JSON object; no keys loaded", path)
            resources.setdefault(locale, {})
            results.append(
                ResourceLoadResult(
                    locale=locale,
                    source_path=str(path),
                    status=LoadStatus.MALFORMED,
                )
            )
            continue

        logger.debug("Loaded %d keys for locale %s from %s", len(parsed), locale, path)
        resources.setdefault(locale, {}).update(parsed)
        results.append(
            ResourceLoadResult(
                locale=locale,
                source_path=str(path),
                status=LoadStatus.SUCCESS,
                key_count=len(parsed),
            )
        )

    return resources, LoadSummary(results=tuple(results))


@dataclass(frozen=True, slots=True)
class ResourceLoadResult:
    """Result of loading a single response file.

    Attributes:
        locale: Locale code taken from the file name
        source_path: Path of the file
        status: Load status (success, malformed, error)
        key_count: Number of keys contributed (0 unless status is SUCCESS)
        error: Exception if status is ERROR, None otherwise
    """

    locale: LocaleCode
    source_path: str
    status: LoadStatus
    key_count: int = 0
    error: Exception | None = None

    @property
    def is_success(self) -> bool:
        """Check if the file loaded successfully."""
        return self.status == LoadStatus.SUCCESS

    @property
    def is_malformed(self) -> bool:
        """Check if the file was read but could not be parsed."""
        return self.status == LoadStatus.MALFORMED

    @property
    def is_error(self) -> bool:
        """Check if the file could not be read."""
        return self.status == LoadStatus.ERROR


@dataclass(frozen=True, slots=True)
class LoadSummary:
    """Immutable aggregate of response file load results.

    All statistics are computed properties derived from the ``results`` tuple.

    Attributes:
        results: All individual load results (immutable tuple)

    Example:
        >>> resources, summary = load_directory("data/strings/responses")
        >>> for result in summary.get_failed():
        ...     print(f"Skipped {result.source_path}: {result.status}")
    """

    results: tuple[ResourceLoadResult, ...]

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"LoadSummary(total={self.total_attempted}, "
            f"ok={self.successful}, "
            f"malformed={self.malformed}, "
            f"errors={self.errors})"
        )

    @property
    def total_attempted(self) -> int:
        """Total number of files attempted."""
        return len(self.results)

    @property
    def successful(self) -> int:
        """Number of files parsed successfully."""
        return sum(1 for r in self.results if r.is_success)

    @property
    def malformed(self) -> int:
        """Number of files that were not valid JSON objects."""
        return sum(1 for r in self.results if r.is_malformed)

    @property
    def errors(self) -> int:
        """Number of files that could not be read."""
        return sum(1 for r in self.results if r.is_error)

    @property
    def locales(self) -> tuple[LocaleCode, ...]:
        """Locales of all attempted files, in load order."""
        return tuple(r.locale for r in self.results)

    def get_failed(self) -> tuple[ResourceLoadResult, ...]:
        """Get all results that contributed no keys due to a problem."""
        return tuple(r for r in self.results if not r.is_success)

    def get_by_locale(self, locale: LocaleCode) -> tuple[ResourceLoadResult, ...]:
        """Get all results for a specific locale."""
        return tuple(r for r in self.results if r.locale == locale)

    @property
    def all_successful(self) -> bool:
        """Check if every file was read and parsed."""
        return self.malformed == 0 and self.errors == 0
