"""Emit Python source for the typed response accessor class.

Converts a Locale Resource Set into the text of one Python module defining
a class with one method per response key. Each method resolves the culture
for a guild and delegates lookup, fallback and formatting to a string
service:

    def AfkSet(self, guild_id: int | None, param0: object) -> str:
        return self._strings.get_text("afk_set", self._get_culture(guild_id), param0)

Output is a pure function of the input: identical resources and config
always give byte-identical source.

Python 3.13+.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from botstrings.config import GeneratorConfig
from botstrings.enums import ParameterShape

from .model import KeyDescriptor, build_descriptors

if TYPE_CHECKING:
    from botstrings.localization.types import ResourceSet

__all__ = [
    "generate_source",
    "render_accessor",
    "write_generated",
]

logger = logging.getLogger(__name__)

_INDENT: str = "    "


def _escape_doc(text: str) -> str:
    """Escape text for embedding inside a double-quoted docstring.

    The rendered docstring shows escapes ("\\n") instead of the raw
    characters, so multi-line templates stay on one documentation line.
    """
    out: list[str] = []
    for ch in text:
        if ch == "\\":
            out.append("\\\\")
        elif ch == '"':
            out.append('\\"')
        elif not ch.isprintable():
            out.append("\\" + ch.encode("unicode_escape").decode("ascii"))
        else:
            out.append(ch)
    return "".join(out)


def _signature(descriptor: KeyDescriptor) -> tuple[str, str]:
    """Build the parameter list and the forwarded argument list."""
    info = descriptor.parameters
    match info.shape:
        case ParameterShape.NONE:
            return "self, guild_id: int | None", ""
        case ParameterShape.POSITIONAL:
            names = [f"param{i}" for i in range(info.count)]
            params = ", ".join(f"{name}: object" for name in names)
            return f"self, guild_id: int | None, {params}", ", " + ", ".join(names)
        case _:
            return "self, guild_id: int | None, *data: object", ", *data"


def _docstring(descriptor: KeyDescriptor, default_locale: str) -> list[str]:
    """Docstring lines (unindented) for one accessor."""
    info = descriptor.parameters
    lines = [
        f'"""Localized text for key "{_escape_doc(descriptor.key)}".',
        "",
        f'Default ({_escape_doc(default_locale)}): "{_escape_doc(descriptor.default_value)}"',
        f"Available in locales: {_escape_doc(', '.join(descriptor.locales))}",
        f"Parameter count: {info.count}",
        "",
        "Args:",
        f"{_INDENT}guild_id: Guild for culture resolution, or None for the default culture",
    ]
    match info.shape:
        case ParameterShape.POSITIONAL:
            lines.extend(f"{_INDENT}param{i}: Format parameter {i}" for i in range(info.count))
        case ParameterShape.VARIADIC:
            lines.append(f"{_INDENT}*data: Format parameters, passed through unchanged")
        case _:
            pass
    lines.extend(["", "Returns:", f"{_INDENT}The localized string with formatting applied", '"""'])
    return lines


def render_accessor(descriptor: KeyDescriptor, default_locale: str) -> str:
    """Render one accessor method, indented for a class body.

    Args:
        descriptor: Key to render
        default_locale: Locale named in the documentation

    Returns:
        Method source ending with a newline
    """
    params, forwarded = _signature(descriptor)
    method = _INDENT
    body = _INDENT * 2

    output: list[str] = [f"{method}def {descriptor.identifier}({params}) -> str:\n"]
    output.extend(
        f"{body}{line}\n" if line else "\n"
        for line in _docstring(descriptor, default_locale)
    )
    output.append(
        f"{body}return self._strings.get_text("
        f"{descriptor.key!r}, self._get_culture(guild_id){forwarded})\n"
    )
    return "".join(output)


def _render_header(locales: list[str], config: GeneratorConfig) -> str:
    """Module preamble, imports and class prologue."""
    locale_list = ", ".join(locales) if locales else "(none)"
    return f'''\
# This file is generated by botstrings from responses.*.json files. Do not edit.
# Locales: {_escape_doc(locale_list)}
# ruff: noqa: N802, E501
"""Strongly-typed accessors for localized bot responses."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from botstrings.runtime.protocols import CultureResolver, StringLookup

__all__ = ["{config.class_name}"]


class {config.class_name}:
    """Provides strongly-typed access to localization strings.

    Wraps a string lookup service with one method per response key. Each
    method resolves the culture for a guild and falls back to the default
    locale ({_escape_doc(config.default_locale)}) through the lookup service.
    """

    __slots__ = ("_localization", "_strings")

    def __init__(self, strings: StringLookup, localization: CultureResolver) -> None:
        """Initialize the accessor wrapper.

        Args:
            strings: Service performing lookup, fallback and formatting
            localization: Service resolving a guild's culture
        """
        self._strings = strings
        self._localization = localization

    def _get_culture(self, guild_id: int | None = None) -> str:
        """Resolve the culture for a guild, or the default culture."""
        return self._localization.get_culture(guild_id)
'''


def generate_source(
    resources: ResourceSet,
    config: GeneratorConfig | None = None,
) -> str:
    """Generate the accessor module for a Locale Resource Set.

    Pure function: no I/O, deterministic for identical input.

    Args:
        resources: Locale Resource Set (locale -> key -> template)
        config: Generation settings (default: GeneratorConfig())

    Returns:
        Python module source ending with a single newline

    Example:
        >>> source = generate_source({"en-US": {"hello": "Hello {0}!"}})
        >>> "def Hello(self, guild_id: int | None, param0: object) -> str:" in source
        True
    """
    if config is None:
        config = GeneratorConfig()

    descriptors = build_descriptors(resources, default_locale=config.default_locale)

    output: list[str] = [_render_header(sorted(resources), config)]
    for descriptor in descriptors:
        output.append("\n")
        output.append(render_accessor(descriptor, config.default_locale))

    logger.debug(
        "Generated %s with %d accessors from %d locales",
        config.class_name,
        len(descriptors),
        len(resources),
    )
    return "".join(output)


def write_generated(path: str | Path, source: str) -> bool:
    """Write generated source, leaving an identical file untouched.

    Args:
        path: Output file path (parent directories are created)
        source: Generated module source

    Returns:
        True if the file was written, False if it already held source
    """
    target = Path(path)
    try:
        if target.read_text(encoding="utf-8") == source:
            logger.info("Generated file %s is up to date", target)
            return False
    except (FileNotFoundError, UnicodeDecodeError):
        pass

    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(source, encoding="utf-8", newline="\n")
    logger.info("Wrote generated file %s", target)
    return True
