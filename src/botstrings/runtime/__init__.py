"""Runtime services backing generated accessor classes.

Provides culture resolution, template storage and response lookup with
default-culture fallback.

Python 3.13+.
"""

from .localization import Localization
from .protocols import CultureResolver, StringLookup, StringsProvider
from .provider import LocalStringsProvider
from .strings import BotStrings

__all__ = [
    "BotStrings",
    "CultureResolver",
    "LocalStringsProvider",
    "Localization",
    "StringLookup",
    "StringsProvider",
]
