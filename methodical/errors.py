"""Error types raised by methodical.

Everything derives from TypeError so callers written against plain
TypeError keep working.
"""

from __future__ import annotations


class InterfaceError(TypeError):
    """Base class for all methodical errors."""


class ConstructionTypeError(InterfaceError):
    """Raised by Methodical.from_constructor when given a non-callable."""


class CompletionTypeError(InterfaceError):
    """Raised by Methodical.complete when given something it cannot fill in."""


class ConformanceError(InterfaceError):
    """Raised by Methodical.check when required methods are missing.

    Attributes:
        missing: Every missing required method, in declaration order.
        interface_name: The descriptor's human-readable name, if any.
    """

    def __init__(self, missing: list[str], interface_name: str | None = None):
        self.missing = list(missing)
        self.interface_name = interface_name
        super().__init__(self._format())

    def _format(self) -> str:
        if self.interface_name:
            intro = f'The object does not conform to the "{self.interface_name}" interface: '
        else:
            intro = "The object does not conform to the interface: "
        return intro + "; ".join(
            f'The required method "{name}" is not implemented' for name in self.missing
        )


class DeclarationFileError(InterfaceError):
    """A declaration file could not be found, read or parsed."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")
