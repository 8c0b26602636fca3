"""Exception hierarchy for botstrings.

Build-time problems with individual resource files never raise; they are
recorded in a LoadSummary instead. Exceptions are reserved for conditions
that leave nothing to generate or for invalid calls into the runtime layer.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "BotStringsError",
    "ResourceDiscoveryError",
    "UnknownCultureError",
]


class BotStringsError(Exception):
    """Base exception for all botstrings errors."""


class ResourceDiscoveryError(BotStringsError):
    """Resource directory does not exist or is not a directory.

    Attributes:
        path: The path that was searched
    """

    def __init__(self, message: str, *, path: str = "") -> None:
        """Initialize ResourceDiscoveryError.

        Args:
            message: Error message
            path: The path that was searched
        """
        super().__init__(message)
        self.path = path


class UnknownCultureError(BotStringsError, ValueError):
    """Culture tag is neither a loaded locale nor recognized by Babel.

    Subclasses ValueError so callers validating user input can catch the
    builtin type.

    Attributes:
        culture: The rejected culture tag
    """

    def __init__(self, message: str, *, culture: str = "") -> None:
        """Initialize UnknownCultureError.

        Args:
            message: Error message
            culture: The rejected culture tag
        """
        super().__init__(message)
        self.culture = culture
