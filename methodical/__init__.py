"""methodical — runtime interface conformance for duck-typed objects.

Describe the methods an object is expected to provide, then check objects
against that description, fill in missing methods with no-ops, or call a
method only when it is there (or loudly when it is required and isn't).
"""

from methodical.declaration import FUNCTION, DeclarationKind, InterfaceDescriptor, build_interface, classify
from methodical.errors import (
    CompletionTypeError,
    ConformanceError,
    ConstructionTypeError,
    DeclarationFileError,
    InterfaceError,
)
from methodical.interface import Methodical, noop

__version__ = "0.3.0"

__all__ = [
    "FUNCTION",
    "CompletionTypeError",
    "ConformanceError",
    "ConstructionTypeError",
    "DeclarationFileError",
    "DeclarationKind",
    "InterfaceDescriptor",
    "InterfaceError",
    "Methodical",
    "build_interface",
    "classify",
    "noop",
]
