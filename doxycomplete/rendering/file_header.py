"""File level comment rendering from a placeholder template."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date
from pathlib import PurePath
from typing import Dict, List

from ..logging import get_logger
from ..style import StyleConfiguration
from ..text.words import display_name, split_words

_HEADER_EXTENSIONS = frozenset({".h", ".hpp"})
_SOURCE_EXTENSIONS = frozenset({".c", ".cpp", ".cxx"})
_INLINE_EXTENSIONS = frozenset({".inl"})

CURSOR_TOKEN = "CURSOR"
PLACEHOLDER_TOKENS = (
    "FILENAME",
    "PROJECTNAME",
    "AUTHOR",
    "YEAR",
    "MONTH",
    "DAY",
    "SMARTCOMMENT",
    CURSOR_TOKEN,
)
_PLACEHOLDER_PATTERN = re.compile(r"\{(" + "|".join(PLACEHOLDER_TOKENS) + r")\}")


@dataclass(frozen=True)
class FileContext:
    """Facts about the file receiving a header comment."""

    filename: str
    project_name: str = ""
    author: str = ""
    today: date = field(default_factory=date.today)


@dataclass(frozen=True)
class FileComment:
    """Rendered header plus the zero-based line where the caret belongs."""

    text: str
    cursor_line: int


class FileHeaderRenderer:
    """Fills the configured file template in a single substitution pass."""

    def __init__(self, style: StyleConfiguration | None = None) -> None:
        self.style = style or StyleConfiguration()
        self.logger = get_logger("file_header")

    def render(self, context: FileContext) -> FileComment:
        values = self._values(context)
        template = self.style.file_template
        output: List[str] = []
        cursor_line = -1
        position = 0
        for match in _PLACEHOLDER_PATTERN.finditer(template):
            output.append(template[position : match.start()])
            position = match.end()
            token = match.group(1)
            if token == CURSOR_TOKEN:
                if cursor_line < 0:
                    cursor_line = "".join(output).count("\n")
                continue
            output.append(values[token])
        output.append(template[position:])
        text = "".join(output)
        if cursor_line < 0:
            cursor_line = text.count("\n")
        self.logger.debug("Rendered file header for %s (cursor line %d)", context.filename, cursor_line)
        return FileComment(text=text, cursor_line=cursor_line)

    def describe(self, filename: str) -> str:
        """Derive a one sentence summary of a file from its name and extension."""
        if not self.style.smart_comments:
            return ""
        path = PurePath(filename)
        extension = path.suffix.lower()
        subject = display_name(path.stem, self.style.abbreviations)
        words = split_words(path.stem)
        if len(words) > 1 and words[0] == "i":
            subject += " interface"

        phrases = self.style.phrases
        if extension in _HEADER_EXTENSIONS:
            template = phrases.file_header
        elif extension in _SOURCE_EXTENSIONS:
            template = phrases.file_source
        elif extension in _INLINE_EXTENSIONS:
            template = phrases.file_inline
        else:
            return ""
        try:
            return template.format(subject)
        except (AttributeError, IndexError, KeyError, ValueError) as exc:
            self.logger.warning("Cannot format file phrase template %r: %s", template, exc)
            return ""

    def _values(self, context: FileContext) -> Dict[str, str]:
        today = context.today
        return {
            "FILENAME": PurePath(context.filename).name,
            "PROJECTNAME": context.project_name,
            "AUTHOR": context.author,
            "YEAR": today.strftime("%Y"),
            "MONTH": today.strftime("%m"),
            "DAY": today.strftime("%d"),
            "SMARTCOMMENT": self.describe(context.filename),
        }


__all__ = ["CURSOR_TOKEN", "FileComment", "FileContext", "FileHeaderRenderer", "PLACEHOLDER_TOKENS"]
