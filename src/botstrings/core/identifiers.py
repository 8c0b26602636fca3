"""Method name generation for response keys.

Turns arbitrary response keys ("afk_set", "8ball", "level-up") into valid,
non-reserved PascalCase Python identifiers, and allocates them so that no
two keys share a name within one generation run.

Conversion Rules:
    1. Leading digits are spelled out ("8ball" -> "Eightball"), then every
       remaining digit is spelled out as well ("lvl2" -> "lvlTwo").
    2. Characters outside [A-Za-z0-9_] become underscores; the text is split
       on "_" and "-" and each segment is capitalized (first letter upper,
       rest lower).
    3. Names that are empty or do not start with a letter get the
       RESERVED_PREFIX, as do reserved words.

Thread Safety:
    to_identifier() and is_valid_identifier() are pure functions.
    IdentifierAllocator holds per-run state and is not shared across runs.

Python 3.13+.
"""

from __future__ import annotations

import logging
import re

from botstrings.constants import NUMBER_WORDS, RESERVED_IDENTIFIERS, RESERVED_PREFIX

__all__ = [
    "IdentifierAllocator",
    "is_reserved",
    "is_valid_identifier",
    "to_identifier",
]

logger = logging.getLogger(__name__)

_LEADING_DIGITS_PATTERN: re.Pattern[str] = re.compile(r"^[0-9]+")
_DIGIT_PATTERN: re.Pattern[str] = re.compile(r"[0-9]")
_INVALID_CHARS_PATTERN: re.Pattern[str] = re.compile(r"[^A-Za-z0-9_]")
_SEGMENT_SPLIT_PATTERN: re.Pattern[str] = re.compile(r"[_-]+")
_IDENTIFIER_PATTERN: re.Pattern[str] = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def _spell_digits(text: str) -> str:
    """Replace every ASCII digit with its English word."""
    text = _LEADING_DIGITS_PATTERN.sub(
        lambda m: "".join(NUMBER_WORDS[d] for d in m.group()), text
    )
    return _DIGIT_PATTERN.sub(lambda m: NUMBER_WORDS[m.group()], text)


def is_reserved(name: str) -> bool:
    """Check if name is a Python keyword or a generated-class member.

    Comparison is ordinal: "None" is reserved, "none" is not.
    """
    return name in RESERVED_IDENTIFIERS


def is_valid_identifier(name: str) -> bool:
    """Check if name can be emitted as a method name.

    Example:
        >>> is_valid_identifier("AfkSet")
        True
        >>> is_valid_identifier("8ball")
        False
        >>> is_valid_identifier("None")
        False
    """
    return _IDENTIFIER_PATTERN.match(name) is not None and not is_reserved(name)


def to_identifier(key: str) -> str:
    """Convert a response key to a PascalCase identifier.

    The result is always a valid identifier, but not necessarily unique;
    use IdentifierAllocator to resolve collisions between keys.

    Args:
        key: Response key

    Returns:
        PascalCase identifier starting with an ASCII letter

    Example:
        >>> to_identifier("afk_user_set")
        'AfkUserSet'
        >>> to_identifier("8ball")
        'Eightball'
        >>> to_identifier("level-2-up")
        'LevelTwoUp'
        >>> to_identifier("none")
        'ResponseNone'
    """
    spelled = _spell_digits(key)
    cleaned = _INVALID_CHARS_PATTERN.sub("_", spelled)
    words = [w for w in _SEGMENT_SPLIT_PATTERN.split(cleaned) if w]
    name = "".join(w[0].upper() + w[1:].lower() for w in words)

    if not name or not name[0].isalpha():
        name = RESERVED_PREFIX + name

    if is_reserved(name):
        name = RESERVED_PREFIX + name

    return name


class IdentifierAllocator:
    """Hands out unique identifiers for one generation run.

    The first key to claim a name keeps it; later keys that convert to the
    same name get a numeric suffix starting at 1. Callers feeding keys in
    sorted order therefore give the unsuffixed name to the
    lexicographically-first key.

    Example:
        >>> allocator = IdentifierAllocator()
        >>> allocator.allocate("user_name")
        'UserName'
        >>> allocator.allocate("user-name")
        'UserName1'
    """

    __slots__ = ("_assigned", "_used")

    def __init__(self) -> None:
        """Initialize an empty allocator."""
        self._used: set[str] = set()
        self._assigned: dict[str, str] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._used

    def __len__(self) -> int:
        return len(self._assigned)

    def allocate(self, key: str) -> str:
        """Return the identifier for key, allocating one on first use.

        Repeated calls with the same key return the same identifier.

        Args:
            key: Response key

        Returns:
            Identifier unique within this allocator
        """
        existing = self._assigned.get(key)
        if existing is not None:
            return existing

        base = to_identifier(key)
        name = base
        suffix = 1
        while name in self._used:
            name = f"{base}{suffix}"
            suffix += 1

        if name != base:
            logger.debug("Identifier collision for key %r: %s -> %s", key, base, name)

        self._used.add(name)
        self._assigned[key] = name
        return name

    @property
    def assignments(self) -> dict[str, str]:
        """Copy of the key-to-identifier mapping, in allocation order."""
        return dict(self._assigned)
