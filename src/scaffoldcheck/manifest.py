"""Package manifest parsing and dotted-field lookup."""

from __future__ import annotations

import json
import tomllib
from pathlib import Path
from typing import Any

import yaml

_MISSING = object()


def load_manifest(path: Path) -> dict[str, Any]:
    """Parse a manifest by its suffix (.json, .toml, .yaml/.yml).

    Raises OSError if the file cannot be read and ValueError if it cannot be
    parsed or its root is not a mapping.
    """
    text = path.read_text(encoding="utf-8")
    suffix = path.suffix.lower()

    try:
        if suffix == ".toml":
            data = tomllib.loads(text)
        elif suffix in (".yaml", ".yml"):
            data = yaml.safe_load(text)
        else:
            data = json.loads(text)
    except (ValueError, yaml.YAMLError) as e:
        raise ValueError(f"{path.name} could not be parsed: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"{path.name} must contain a mapping at the top level")
    return data


def lookup_field(data: dict[str, Any], dotted: str) -> Any:
    """Return the value at a dotted path such as ``scripts.start``, or None."""
    node: Any = data
    for part in dotted.split("."):
        if not isinstance(node, dict):
            return None
        node = node.get(part, _MISSING)
        if node is _MISSING:
            return None
    return node


def has_field(data: dict[str, Any], dotted: str) -> bool:
    """True when the dotted path exists and holds a truthy value."""
    return bool(lookup_field(data, dotted))
