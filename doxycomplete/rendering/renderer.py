"""Renders Doxygen comment blocks for declarations."""

from __future__ import annotations

from typing import List, Optional, Sequence

from ..logging import get_logger
from ..models import (
    KIND_VARIABLE,
    DeclarationDescriptor,
    ParsedComment,
    ParsedParam,
    direction_to_tag,
)
from ..style import StyleConfiguration
from .synthesis import DescriptionSynthesizer, resolve_direction
from .templates import extract_template_params

# ``None`` marks an empty separator line inside the block.
_Line = Optional[str]


class CommentRenderer:
    """Merges previously written comment text with generated scaffolding.

    Tags, alignment and parameter directions are always recomputed from the
    declaration and the style; text the user wrote is re-emitted verbatim and
    smart comments only fill slots that have no text yet.
    """

    NEWLINE = "\n"
    CLOSER = "*/"

    def __init__(self, style: StyleConfiguration | None = None) -> None:
        self.style = style or StyleConfiguration()
        self.synthesizer = DescriptionSynthesizer(self.style)
        self.logger = get_logger("renderer")

    def uses_single_line(self, declaration: Optional[DeclarationDescriptor]) -> bool:
        """Return True when the comment for ``declaration`` collapses to one line."""
        if not self.style.single_line:
            return False
        return declaration is None or declaration.kind == KIND_VARIABLE

    def render(
        self,
        declaration: Optional[DeclarationDescriptor],
        parsed: Optional[ParsedComment] = None,
        *,
        indent: str = "",
    ) -> str:
        parsed = parsed or ParsedComment()
        single_line = self.uses_single_line(declaration)
        lines: List[_Line] = []

        self._write_brief(lines, declaration, parsed, single_line)
        if declaration is not None:
            self._write_template_params(lines, declaration, parsed)
            if declaration.is_function:
                self._write_params(lines, declaration, parsed)
                self._write_return(lines, declaration, parsed)
        for section in parsed.sections:
            lines.append(None)
            self._append_text(lines, self.style.tag(section.tag), section.lines)

        if single_line:
            return self._join_single_line(lines)
        return self._join_block(lines, indent)

    def _write_brief(
        self,
        lines: List[_Line],
        declaration: Optional[DeclarationDescriptor],
        parsed: ParsedComment,
        single_line: bool,
    ) -> None:
        style = self.style
        if style.brief_tag and (not single_line or style.single_line_brief):
            tag = style.tag("brief")
        else:
            tag = ""

        if parsed.brief:
            if style.brief_tag:
                self._append_text(lines, tag, parsed.brief)
            else:
                lines.extend(parsed.brief)
            return

        description = self.synthesizer.brief(declaration) if style.smart_comments else ""
        lines.append(tag + description)

    def _write_template_params(
        self,
        lines: List[_Line],
        declaration: DeclarationDescriptor,
        parsed: ParsedComment,
    ) -> None:
        names = extract_template_params(declaration.qualified_name)
        if not names:
            return
        width = max(len(name) for name in names)
        lines.append(None)
        for name in names:
            padding = " " * (width - len(name) + 1)
            tag_line = self.style.tag("tparam") + name + padding
            previous = parsed.template_params.get(name)
            self._append_text(lines, tag_line, previous.lines if previous else ())

    def _write_params(
        self,
        lines: List[_Line],
        declaration: DeclarationDescriptor,
        parsed: ParsedComment,
    ) -> None:
        parameters = list(declaration.parameters)
        if not parameters:
            return

        previous: List[Optional[ParsedParam]] = [
            parsed.params.get(parameter.name) for parameter in parameters
        ]
        directions = [
            direction_to_tag(resolve_direction(declaration, parameter, prior))
            for parameter, prior in zip(parameters, previous)
        ]
        direction_width = max(len(direction) for direction in directions)
        name_width = max(len(parameter.name) for parameter in parameters)
        smart = self.style.smart_comments and len(parameters) == 1

        lines.append(None)
        for parameter, prior, direction in zip(parameters, previous, directions):
            tag_line = (
                self.style.tag("param")
                + direction
                + " " * (direction_width - len(direction) + 1)
                + parameter.name
                + " " * (name_width - len(parameter.name) + 1)
            )
            if prior is not None:
                self._append_text(lines, tag_line, prior.lines)
            elif smart:
                lines.append(tag_line + self.synthesizer.param(declaration, parameter))
            else:
                lines.append(tag_line)

    def _write_return(
        self,
        lines: List[_Line],
        declaration: DeclarationDescriptor,
        parsed: ParsedComment,
    ) -> None:
        if declaration.return_type == "void":
            return
        # Constructors and destructors have no value to document, whatever the host reports.
        if declaration.is_constructor or declaration.is_destructor:
            return
        tag_line = self.style.tag("return")
        lines.append(None)
        if parsed.returns is not None:
            self._append_text(lines, tag_line, parsed.returns.lines)
        elif self.style.smart_comments:
            lines.append(tag_line + self.synthesizer.returns(declaration))
        else:
            lines.append(tag_line)

    @staticmethod
    def _append_text(lines: List[_Line], tag_line: str, text: Sequence[str]) -> None:
        """Write ``text`` after ``tag_line``, aligning later lines under the first."""
        if not text:
            lines.append(tag_line)
            return
        lines.append(tag_line + text[0])
        alignment = " " * len(tag_line)
        lines.extend(alignment + line for line in text[1:])

    def _join_block(self, lines: Sequence[_Line], indent: str) -> str:
        parts = [self.style.opener]
        for line in lines:
            if line is None:
                parts.append(f"{indent} *")
            else:
                parts.append(f"{indent} *  {line}")
        parts.append(f"{indent} {self.CLOSER}")
        return self.NEWLINE.join(parts)

    def _join_single_line(self, lines: Sequence[_Line]) -> str:
        pieces = [line.strip() for line in lines if line is not None and line.strip()]
        if not pieces:
            return f"{self.style.opener} {self.CLOSER}"
        return f"{self.style.opener} {' '.join(pieces)} {self.CLOSER}"


__all__ = ["CommentRenderer"]
