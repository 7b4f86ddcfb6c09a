"""Caret alignment helpers for typing inside comment blocks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from .logging import get_logger
from .style import SUPPORTED_OPENERS, StyleConfiguration


@dataclass(frozen=True)
class IndentResult:
    """Outcome of an indentation query."""

    success: bool
    column: int


class IndentationAdvisor:
    """Aligns continuation lines with the text of the preceding tag line.

    Columns are caret offsets within the line, counted from one.
    """

    def __init__(self, style: StyleConfiguration | None = None) -> None:
        self.style = style or StyleConfiguration()
        self.grammar = self.style.grammar
        self.logger = get_logger("indentation")

    def target_column(self, previous_line: str, current_column: int) -> Optional[int]:
        """Return the column where text starts on ``previous_line``, if it lies ahead."""
        grammar = self.grammar
        for pattern in (grammar.template_param, grammar.param, grammar.section):
            match = pattern.search(previous_line)
            if match is None:
                continue
            start = match.start("text")
            if start > current_column:
                return start + 1
            # The first matching pattern decides; never indent backwards.
            return None
        return None

    def suggest(self, previous_line: str, current_column: int) -> IndentResult:
        column = self.target_column(previous_line, current_column)
        if column is None:
            return IndentResult(success=False, column=current_column)
        self.logger.debug("Smart indent from column %d to %d", current_column, column)
        return IndentResult(success=True, column=column)

    def new_line_prefix(self, current_line: str, lines_above: Sequence[str] = ()) -> str:
        """Text to insert when a new line is started after ``current_line``.

        Lines below a tag with text get the configured tag indentation, so
        the new line starts under the tag rather than under the asterisk.
        """
        stripped = current_line.lstrip()
        leading = current_line[: len(current_line) - len(stripped)]
        extra = 0
        for line in [stripped, *(above.lstrip() for above in reversed(lines_above))]:
            match = self.grammar.section.search(line)
            if match is not None and match.group("text"):
                extra = self.style.tag_indentation
                break
            if line.startswith(SUPPORTED_OPENERS):
                break
        return "\n" + leading + "*  " + " " * extra


__all__ = ["IndentResult", "IndentationAdvisor"]
