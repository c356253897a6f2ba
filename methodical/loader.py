"""Loader — read interface declarations from YAML or JSON files.

A declaration file holds either a list of method names or a mapping:

    name: storage backend
    required: [get, put]
    optional:
      close: function

The whole thing may also be nested under a top-level ``interface`` key.
yaml.safe_load reads JSON as well, so ``.json`` files go through the same path.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

import yaml

from methodical.errors import DeclarationFileError
from methodical.interface import Methodical

logger = logging.getLogger(__name__)


def load_declaration(path: str | Path) -> tuple[Any, Optional[str]]:
    """Read a declaration file.

    Returns:
        (declaration, name) where name is the file's ``name`` field if it
        has a usable one. The declaration itself is returned as parsed;
        malformed parts are dropped later by build_interface.

    Raises:
        DeclarationFileError: If the file is missing or isn't valid YAML/JSON.
    """
    path = Path(path)
    if not path.exists():
        raise DeclarationFileError(str(path), "file not found")

    logger.debug("Loading interface declaration from %s", path)
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise DeclarationFileError(str(path), f"invalid YAML: {e}") from e
    except OSError as e:
        raise DeclarationFileError(str(path), f"cannot read file: {e}") from e

    if isinstance(data, dict) and "interface" in data:
        data = data["interface"]

    name = None
    if isinstance(data, dict):
        raw_name = data.get("name")
        if isinstance(raw_name, str) and raw_name:
            name = raw_name

    return data, name


def load_interface(path: str | Path, name: Optional[str] = None) -> Methodical:
    """Build a Methodical from a declaration file. An explicit name wins."""
    declaration, file_name = load_declaration(path)
    return Methodical(declaration, name=name or file_name)


def dump_interface(interface: Methodical) -> str:
    """Render an interface back to declaration-file YAML."""
    data: dict[str, Any] = {}
    if interface.name:
        data["name"] = interface.name
    descriptor = interface.get_interface()
    data["required"] = list(descriptor.required)
    if descriptor.optional is not None:
        data["optional"] = list(descriptor.optional)
    return yaml.safe_dump(data, sort_keys=False, default_flow_style=False)
