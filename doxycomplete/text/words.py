"""Linguistic helpers for deriving prose from C++ identifiers."""

from __future__ import annotations

import re
from typing import List

from .abbreviations import AbbreviationTable

_UPPER_PATTERN = re.compile(r"([A-Z])")
_WORD_SEPARATORS = re.compile(r"[ _]+")
_SIBILANT_SUFFIXES = ("ch", "sh", "s", "x", "z")


def split_words(identifier: str) -> List[str]:
    """Split ``identifier`` into lower-case words at case changes and underscores.

    ``setUserName`` becomes ``["set", "user", "name"]`` and every capital
    starts a new word, so ``getMaxHP`` becomes ``["get", "max", "h", "p"]``.
    """
    spaced = _UPPER_PATTERN.sub(r" \1", identifier).lower()
    return [word for word in _WORD_SEPARATORS.split(spaced) if word]


def capitalize(text: str) -> str:
    """Upper-case the first character only."""
    if not text:
        return ""
    return text[0].upper() + text[1:]


def third_person(verb: str) -> str:
    """Conjugate ``verb`` for the third person singular (``fetch`` -> ``fetches``)."""
    if verb == "do":
        return "does"
    if verb.endswith("y"):
        return verb[:-1] + "ies"
    if verb.endswith(_SIBILANT_SUFFIXES):
        return verb + "es"
    return verb + "s"


def display_name(identifier: str, abbreviations: AbbreviationTable | None = None) -> str:
    """Return a readable, space separated name for a class or file identifier.

    Single letter segments are dropped so ``IRenderTarget`` reads as
    ``Render Target``.
    """
    table = abbreviations or AbbreviationTable()
    words = [word for word in split_words(identifier) if len(word) > 1]
    return " ".join(capitalize(table.expand(word)) for word in words)


__all__ = ["capitalize", "display_name", "split_words", "third_person"]
