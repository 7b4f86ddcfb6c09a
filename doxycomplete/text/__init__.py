"""Identifier heuristics and abbreviation expansion."""

from .abbreviations import AbbreviationTable, DuplicateKeyError
from .words import capitalize, display_name, split_words, third_person

__all__ = [
    "AbbreviationTable",
    "DuplicateKeyError",
    "capitalize",
    "display_name",
    "split_words",
    "third_person",
]
