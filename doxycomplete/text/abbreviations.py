"""Abbreviation lookup used when turning identifiers into prose."""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, Mapping, Tuple


class DuplicateKeyError(KeyError):
    """Raised when an abbreviation is registered twice."""

    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Abbreviation '{self.key}' is already defined"


class AbbreviationTable:
    """Maps abbreviated words (e.g. ``cfg``) to their expanded form."""

    def __init__(self, entries: Mapping[str, str] | Iterable[Tuple[str, str]] | None = None) -> None:
        self._values: Dict[str, str] = {}
        if entries is None:
            return
        pairs = entries.items() if isinstance(entries, Mapping) else entries
        for key, value in pairs:
            self.add(key, value)

    def add(self, key: str, value: str) -> None:
        """Register an abbreviation; an existing key raises ``DuplicateKeyError``."""
        if key in self._values:
            raise DuplicateKeyError(key)
        self._values[key] = value

    def contains(self, key: str) -> bool:
        return key in self._values

    def expand(self, key: str) -> str:
        """Return the expansion of ``key``, or ``key`` itself when unknown."""
        return self._values.get(key, key)

    def expand_all(self, words: Iterable[str]) -> str:
        """Expand every word and join the results with single spaces."""
        return " ".join(self.expand(word) for word in words)

    def as_dict(self) -> Dict[str, str]:
        return dict(self._values)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"AbbreviationTable({self._values!r})"


__all__ = ["AbbreviationTable", "DuplicateKeyError"]
