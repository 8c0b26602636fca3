"""Source generation package.

Turns a Locale Resource Set into the source of a typed accessor class.

Submodules:
    model   - KeyDescriptor derivation and key-set reconciliation
    emitter - Python source emission and write-if-changed output

Python 3.13+.
"""

from .emitter import generate_source, render_accessor, write_generated
from .model import KeyDescriptor, build_descriptors, collect_keys

__all__ = [
    "KeyDescriptor",
    "build_descriptors",
    "collect_keys",
    "generate_source",
    "render_accessor",
    "write_generated",
]
