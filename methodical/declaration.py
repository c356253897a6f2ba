"""Declaration parser — normalize raw interface declarations.

A raw declaration comes in one of three shapes:

    None                                    -> nothing required
    ["open", "close"]                       -> flat list, all required
    {"required": [...] | {...},
     "optional": [...] | {...}}             -> structured blocks

Each block of a structured declaration can itself be a list of names or a
mapping whose keys are the names (the values are ignored). Anything that
doesn't fit is dropped, never raised: a half-broken declaration still yields
a usable descriptor.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Optional

logger = logging.getLogger(__name__)

FUNCTION = "function"

BLOCK_NAMES = ("required", "optional")


class DeclarationKind(Enum):
    ABSENT = "absent"
    SEQUENCE = "sequence"
    STRUCTURED = "structured"
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True)
class InterfaceDescriptor:
    """Canonical form of an interface declaration.

    Both mappings go from method name to the FUNCTION marker. ``optional``
    is None when the declaration had no usable optional block. Both are
    read-only copies of whatever was passed in.
    """

    required: Mapping[str, str] = field(default_factory=dict)
    optional: Optional[Mapping[str, str]] = None

    def __post_init__(self):
        object.__setattr__(self, "required", MappingProxyType(dict(self.required)))
        if self.optional is not None:
            object.__setattr__(self, "optional", MappingProxyType(dict(self.optional)))

    def __hash__(self) -> int:
        optional = frozenset(self.optional.items()) if self.optional is not None else None
        return hash((frozenset(self.required.items()), optional))

    def as_dict(self) -> dict[str, dict[str, str]]:
        result = {"required": dict(self.required)}
        if self.optional is not None:
            result["optional"] = dict(self.optional)
        return result

    def is_required(self, method_name: str) -> bool:
        return self.required.get(method_name) == FUNCTION

    def is_optional(self, method_name: str) -> bool:
        return self.optional is not None and self.optional.get(method_name) == FUNCTION


def classify(declaration: Any) -> DeclarationKind:
    """Tell which variant of raw declaration we've been given."""
    if declaration is None:
        return DeclarationKind.ABSENT
    if isinstance(declaration, (list, tuple)):
        return DeclarationKind.SEQUENCE
    if isinstance(declaration, Mapping):
        return DeclarationKind.STRUCTURED
    return DeclarationKind.UNSUPPORTED


def build_interface(declaration: Any = None) -> InterfaceDescriptor:
    """Normalize a raw declaration into an InterfaceDescriptor."""
    kind = classify(declaration)

    if kind is DeclarationKind.SEQUENCE:
        return InterfaceDescriptor(required=_names_from_sequence(declaration, "declaration"))

    if kind is DeclarationKind.STRUCTURED:
        blocks = {name: _parse_block(declaration, name) for name in BLOCK_NAMES}
        return InterfaceDescriptor(
            required=blocks["required"] or {},
            optional=blocks["optional"],
        )

    if kind is DeclarationKind.UNSUPPORTED:
        logger.debug("Ignoring declaration of unsupported type %s", type(declaration).__name__)
    return InterfaceDescriptor()


def _parse_block(declaration: Mapping, block_name: str) -> dict[str, str] | None:
    """Parse one structured block. None means the block was absent or unusable."""
    block = declaration.get(block_name)
    if block is None:
        return None
    if isinstance(block, (list, tuple)):
        return _names_from_sequence(block, block_name)
    if isinstance(block, Mapping):
        return _names_from_sequence(list(block.keys()), block_name)

    logger.debug("Ignoring %r block of type %s", block_name, type(block).__name__)
    return None


def _names_from_sequence(items, where: str) -> dict[str, str]:
    names: dict[str, str] = {}
    for item in items:
        if _is_method_name(item):
            names[item] = FUNCTION
        else:
            logger.debug("Dropping invalid method name %r in %s", item, where)
    return names


def _is_method_name(value: Any) -> bool:
    return isinstance(value, str) and value != ""
