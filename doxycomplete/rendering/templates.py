"""Template parameter extraction from qualified C++ names."""

from __future__ import annotations

from typing import List, Optional


def extract_template_params(qualified_name: str) -> List[str]:
    """Return the template parameters of the last ``<...>`` list in the name.

    ``Foo<T, U>::Bar`` yields ``["T", "U"]``; names without an argument list
    yield an empty list. Nested argument lists stay intact.
    """
    close = qualified_name.rfind(">")
    if close == -1:
        return []
    start = _matching_open(qualified_name, close)
    if start is None:
        return []
    interior = qualified_name[start + 1 : close].replace(" ", "")
    return [param for param in _split_top_level(interior) if param]


def _matching_open(name: str, close: int) -> Optional[int]:
    depth = 0
    for index in range(close, -1, -1):
        char = name[index]
        if char == ">":
            depth += 1
        elif char == "<":
            depth -= 1
            if depth == 0:
                return index
    return None


def _split_top_level(text: str) -> List[str]:
    parts: List[str] = []
    depth = 0
    current: List[str] = []
    for char in text:
        if char in "<([":
            depth += 1
        elif char in ">)]":
            depth -= 1
        if char == "," and depth == 0:
            parts.append("".join(current))
            current = []
            continue
        current.append(char)
    parts.append("".join(current))
    return parts


__all__ = ["extract_template_params"]
