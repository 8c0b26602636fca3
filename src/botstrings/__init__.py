"""botstrings - Typed accessors for localized bot responses.

Reads per-locale ``responses.<locale>.json`` files and generates a Python
class with one method per response key. Each method resolves the culture
of a guild and looks the response up with fallback to the default locale.

Public API:
    generate_source - Resource set to accessor module source
    write_generated - Write source, skipping identical output
    load_directory - Discover and parse response files
    GeneratorConfig - Generation settings
    BotStrings - Response lookup with default-culture fallback
    Localization - Guild culture resolution
    LocalStringsProvider - In-memory template storage

Exceptions:
    BotStringsError - Base exception class
    ResourceDiscoveryError - Resource directory missing
    UnknownCultureError - Culture tag rejected

Submodules:
    botstrings.core - Identifier generation and placeholder analysis
    botstrings.codegen - Key descriptors and source emission
    botstrings.localization - Response file loading
    botstrings.runtime - Services called by generated classes
"""

from .codegen import generate_source, write_generated
from .config import GeneratorConfig
from .errors import BotStringsError, ResourceDiscoveryError, UnknownCultureError
from .localization import load_directory
from .runtime import BotStrings, LocalStringsProvider, Localization

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("botstrings")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "BotStrings",
    "BotStringsError",
    "GeneratorConfig",
    "LocalStringsProvider",
    "Localization",
    "ResourceDiscoveryError",
    "UnknownCultureError",
    "__version__",
    "generate_source",
    "load_directory",
    "write_generated",
]
