"""Loading declaration descriptors handed over by a host editor."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import yaml

from .models import (
    DECLARATION_KINDS,
    DIRECTION_TAGS,
    FUNCTION_KINDS,
    FUNCTION_ORDINARY,
    DeclarationDescriptor,
    Parameter,
)


class DescriptorError(ValueError):
    """Raised when a declaration descriptor is malformed."""


def descriptor_from_mapping(data: Optional[Mapping[str, Any]]) -> Optional[DeclarationDescriptor]:
    """Convert a plain mapping (e.g. decoded JSON) into a descriptor.

    ``None`` stands for "no declaration" and is passed through.
    """
    if data is None:
        return None
    if not isinstance(data, Mapping):
        raise DescriptorError("Declaration descriptor must be a mapping")

    kind = str(data.get("kind", "")).strip().lower()
    if kind not in DECLARATION_KINDS:
        raise DescriptorError(f"Unknown declaration kind '{kind}'")
    name = data.get("name")
    if not isinstance(name, str) or not name:
        raise DescriptorError("Declaration descriptor requires a name")

    function_kind = str(data.get("function_kind") or FUNCTION_ORDINARY).strip().lower()
    if function_kind not in FUNCTION_KINDS:
        raise DescriptorError(f"Unknown function kind '{function_kind}'")

    parent_class = data.get("parent_class")
    return DeclarationDescriptor(
        kind=kind,
        name=name,
        full_name=str(data.get("full_name") or ""),
        function_kind=function_kind,
        parameters=tuple(_parameters(data.get("parameters"))),
        return_type=str(data.get("return_type", "void")),
        parent_class=str(parent_class) if parent_class else None,
    )


def load_descriptor(path: Path) -> Optional[DeclarationDescriptor]:
    """Read a descriptor from a YAML or JSON file."""
    text = Path(path).read_text(encoding="utf-8")
    try:
        data = yaml.safe_load(text) if text.strip() else None
    except yaml.YAMLError as exc:
        raise DescriptorError(f"Failed to parse {Path(path).name}: {exc}") from exc
    return descriptor_from_mapping(data)


def _parameters(value: Any) -> List[Parameter]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise DescriptorError("parameters must be a list")
    parameters: List[Parameter] = []
    for item in value:
        if not isinstance(item, Mapping) or not item.get("name"):
            raise DescriptorError(f"Invalid parameter entry: {item!r}")
        parameters.append(
            Parameter(
                name=str(item["name"]),
                type=str(item.get("type") or ""),
                direction=_direction(item.get("direction")),
            )
        )
    return parameters


def _direction(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip().lower()
    aliases: Dict[str, str] = {tag: direction for direction, tag in DIRECTION_TAGS.items()}
    aliases["in,out"] = "inout"
    direction = aliases.get(text, text)
    if direction not in DIRECTION_TAGS:
        raise DescriptorError(f"Unknown parameter direction '{value}'")
    return direction


__all__ = ["DescriptorError", "descriptor_from_mapping", "load_descriptor"]
