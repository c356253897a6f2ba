"""Methodical — check, complete and safely call duck-typed interfaces.

Members are looked up by key on mappings (falling back to the mapping's own
methods) and by attribute on everything else, so a dict of callables and
an instance of a class can satisfy the same interface.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Mapping, MutableMapping
from typing import Any, Iterable, Optional

from methodical.declaration import FUNCTION, InterfaceDescriptor, build_interface
from methodical.errors import CompletionTypeError, ConformanceError, ConstructionTypeError

logger = logging.getLogger(__name__)

# Values that have no members worth looking up. check() swaps them for an
# empty surrogate; complete() refuses them.
_SCALAR_TYPES = (bool, int, float, complex, str, bytes)


def noop(*args, **kwargs) -> None:
    """Stand-in for a missing method. Accepts anything, does nothing."""


class Methodical:
    """A runtime interface built from a declaration.

    Usage:
        storage = Methodical({"required": ["get", "put"], "optional": ["close"]})
        storage.name = "storage backend"
        storage.check(backend)          # raises ConformanceError if get/put missing
        storage.try_call(backend, "close")
    """

    FUNCTION = FUNCTION

    def __init__(self, declaration: Any = None, name: Optional[str] = None):
        self._interface = build_interface(declaration)
        self.name = name

    def __repr__(self) -> str:
        return f"Methodical(name={self.name!r}, interface={self._interface.as_dict()!r})"

    @classmethod
    def from_constructor(cls, constructor: Any) -> "Methodical":
        """Require every method the given class defines itself.

        Dunder methods are skipped, as are properties and data attributes.
        Inherited methods are not collected.
        """
        if not callable(constructor):
            raise ConstructionTypeError("A function must be passed")

        return cls(list(_own_method_names(constructor)))

    def get_interface(self) -> InterfaceDescriptor:
        return self._interface

    def missing_methods(self, obj: Any) -> list[str]:
        """Names of required methods that obj does not implement, in order."""
        if not _is_object_like(obj):
            obj = {}
        return [
            method_name
            for method_name in self._interface.required
            if not callable(_get_member(obj, method_name))
        ]

    def conforms(self, obj: Any) -> bool:
        return not self.missing_methods(obj)

    def check(self, obj: Any) -> None:
        """Raise ConformanceError naming every required method obj lacks."""
        missing = self.missing_methods(obj)
        if missing:
            raise ConformanceError(missing, self.name)

    def complete(self, obj: Any) -> None:
        """Fill each missing required method of obj with noop, in place."""
        if not callable(obj) and not _is_object_like(obj):
            raise CompletionTypeError("Cannot complete a non-object")

        missing = self.missing_methods(obj)
        if missing and not _is_writable(obj):
            raise CompletionTypeError("Cannot complete a non-object")

        for method_name in missing:
            logger.debug("Filling missing method %r with noop", method_name)
            try:
                _set_member(obj, method_name, noop)
            except (AttributeError, TypeError) as e:
                raise CompletionTypeError("Cannot complete a non-object") from e

    def try_call(self, obj: Any, method_name: str, *args) -> None:
        self.try_apply(obj, method_name, args)

    def try_apply(self, obj: Any, method_name: str, args: Iterable = ()) -> None:
        """Call obj's method if it has one, or if the interface requires it.

        A required method that is missing is still called, so the broken
        contract surfaces as Python's own "object is not callable" TypeError.
        Methods that are absent and not required are skipped quietly.
        """
        member = _get_member(obj, method_name)
        if callable(member) or self._interface.is_required(method_name):
            member(*args)


def _is_object_like(value: Any) -> bool:
    return value is not None and not isinstance(value, _SCALAR_TYPES)


def _get_member(obj: Any, name: str) -> Any:
    # Keys win on mappings; their own methods are still visible as attributes.
    if isinstance(obj, Mapping):
        member = obj.get(name)
        if callable(member):
            return member
    return getattr(obj, name, None)


def _is_writable(obj: Any) -> bool:
    return isinstance(obj, MutableMapping) or hasattr(obj, "__dict__")


def _set_member(obj: Any, name: str, value: Any) -> None:
    if isinstance(obj, MutableMapping):
        obj[name] = value
    else:
        setattr(obj, name, value)


def _own_method_names(constructor: Any) -> Iterable[str]:
    namespace = vars(constructor) if hasattr(constructor, "__dict__") else {}
    for key, raw in namespace.items():
        if key.startswith("__") and key.endswith("__"):
            continue
        # Resolve staticmethod/classmethod wrappers the way attribute access would.
        value = getattr(constructor, key, raw) if inspect.isclass(constructor) else raw
        if callable(value):
            yield key
