"""Key descriptor derivation.

Reconciles the key sets of all locales and derives, for every key, the
information the emitter needs: its method name, which locales define it,
its default text and its parameter shape.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from botstrings.constants import DEFAULT_LOCALE
from botstrings.core.identifiers import IdentifierAllocator
from botstrings.core.placeholders import ParameterInfo, analyze_parameters

if TYPE_CHECKING:
    from botstrings.localization.types import LocaleCode, ResourceKey, ResourceSet, Template

__all__ = [
    "KeyDescriptor",
    "build_descriptors",
    "collect_keys",
]


@dataclass(frozen=True, slots=True)
class KeyDescriptor:
    """Everything the emitter needs to know about one response key.

    Attributes:
        key: Response key as it appears in the files
        identifier: Unique method name for the key
        locales: Locales defining the key, in sorted order
        default_value: Default-locale template, or "" if the default locale
            lacks the key
        parameters: Placeholder analysis of the default-locale template, or
            of the first locale defining the key when the default lacks it
    """

    key: ResourceKey
    identifier: str
    locales: tuple[LocaleCode, ...]
    default_value: Template
    parameters: ParameterInfo


def collect_keys(resources: ResourceSet) -> list[ResourceKey]:
    """Union of keys across all locales, sorted by code point.

    Example:
        >>> collect_keys({"en-US": {"b": "", "a": ""}, "de-DE": {"c": "", "a": ""}})
        ['a', 'b', 'c']
    """
    keys: set[ResourceKey] = set()
    for mapping in resources.values():
        keys.update(mapping)
    return sorted(keys)


def build_descriptors(
    resources: ResourceSet,
    *,
    default_locale: LocaleCode = DEFAULT_LOCALE,
) -> tuple[KeyDescriptor, ...]:
    """Derive one KeyDescriptor per distinct key.

    Keys are processed in sorted order, so when two keys convert to the same
    identifier the lexicographically-first key keeps the unsuffixed name.

    Args:
        resources: Locale Resource Set
        default_locale: Locale used for default values and shape inference

    Returns:
        Descriptors in sorted key order
    """
    locales = sorted(resources)
    default_mapping = resources.get(default_locale, {})
    allocator = IdentifierAllocator()
    descriptors: list[KeyDescriptor] = []

    for key in collect_keys(resources):
        defining = tuple(locale for locale in locales if key in resources[locale])

        if key in default_mapping:
            default_value = default_mapping[key]
            shape_source = default_value
        else:
            default_value = ""
            # collect_keys only yields keys some locale defines
            shape_source = resources[defining[0]][key]

        descriptors.append(
            KeyDescriptor(
                key=key,
                identifier=allocator.allocate(key),
                locales=defining,
                default_value=default_value,
                parameters=analyze_parameters(shape_source),
            )
        )

    return tuple(descriptors)
