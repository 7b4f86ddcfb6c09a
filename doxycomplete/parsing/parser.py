"""Parses existing Doxygen comment blocks into structured sections."""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from ..logging import get_logger
from ..models import ParsedComment, ParsedParam, ParsedSection, direction_from_tag
from ..style import SUPPORTED_OPENERS, StyleConfiguration, TagGrammar

_CLOSER = "*/"
_DELIMITERS = frozenset({"*", _CLOSER, *SUPPORTED_OPENERS})
_RETURN_TAGS = frozenset({"return", "returns"})
_BRIEF_TAG = "brief"
_MEMBER_MARKER = "<"


class CommentParser:
    """Splits a raw comment into brief text, parameters and tagged sections.

    Unrecognised lines are dropped rather than failing the parse; lines of
    free text outside any tag section become brief text.
    """

    def __init__(self, style: StyleConfiguration | None = None) -> None:
        self.style = style or StyleConfiguration()
        self.grammar: TagGrammar = self.style.grammar
        self.logger = get_logger("parser")

    def parse(self, comment: str) -> ParsedComment:
        parsed = ParsedComment()
        if not comment:
            return parsed

        lines = [normalise_line(raw) for raw in comment.splitlines()]
        grammar = self.grammar
        index = 0
        while index < len(lines):
            line = lines[index]
            index += 1
            if not line:
                continue

            match = grammar.template_param.match(line)
            if match:
                first = _group_text(match)
                if first:
                    body, index = self._read_body(first, lines, index)
                    name = match.group("name")
                    if name in parsed.template_params:
                        self.logger.debug("Ignoring repeated tparam '%s'", name)
                    else:
                        parsed.template_params[name] = ParsedParam(name=name, lines=body)
                continue

            match = grammar.param.match(line)
            if match:
                first = _group_text(match)
                if first:
                    body, index = self._read_body(first, lines, index)
                    name = match.group("name")
                    tag = match.group("direction")
                    if name in parsed.params:
                        self.logger.debug("Ignoring repeated param '%s'", name)
                    else:
                        parsed.params[name] = ParsedParam(
                            name=name,
                            lines=body,
                            direction=direction_from_tag(tag) if tag else None,
                        )
                continue

            match = grammar.section.match(line)
            if match:
                first = _group_text(match)
                if first:
                    body, index = self._read_body(first, lines, index)
                    self._store_section(parsed, ParsedSection(tag=match.group("tag"), lines=body))
                continue

            match = grammar.text.match(line)
            if match:
                parsed.brief.append(match.group("text").strip())

        self.logger.debug(
            "Parsed comment: %d brief lines, %d params, %d tparams, %d sections",
            len(parsed.brief),
            len(parsed.params),
            len(parsed.template_params),
            len(parsed.sections),
        )
        return parsed

    def _read_body(self, first: str, lines: Sequence[str], start: int) -> Tuple[List[str], int]:
        """Collect ``first`` plus the continuation lines that follow it.

        Returns the collected lines and the index of the first line that was
        not consumed.
        """
        body = [first]
        index = start
        while index < len(lines):
            line = lines[index]
            if not line or self.grammar.section.match(line):
                break
            match = self.grammar.text.match(line)
            if not match:
                break
            body.append(match.group("text").strip())
            index += 1
        return body, index

    @staticmethod
    def _store_section(parsed: ParsedComment, section: ParsedSection) -> None:
        if section.tag in _RETURN_TAGS:
            parsed.returns = section
        elif section.tag == _BRIEF_TAG:
            parsed.brief.extend(section.lines)
        else:
            parsed.sections.append(section)


def normalise_line(raw: str) -> str:
    """Trim a physical comment line down to its ``* text`` form.

    Delimiter-only lines become empty. Text sharing a line with the opener
    or the closer (``/** @brief Foo. */``) is kept as a ``*`` prefixed line,
    including the trailing member form ``/*!< Foo. */``. An opener glued to
    more text, such as a ``/*******`` banner, is not a comment line.
    """
    line = raw.strip()
    if line in _DELIMITERS:
        return ""
    opened = False
    for opener in SUPPORTED_OPENERS:
        if line.startswith(opener):
            line = line[len(opener):]
            if line.startswith(_MEMBER_MARKER):
                line = line[len(_MEMBER_MARKER):]
            elif line and not line[0].isspace():
                return ""
            opened = True
            break
    if line.endswith(_CLOSER):
        line = line[: -len(_CLOSER)]
    line = line.strip()
    if opened:
        return f"* {line}" if line else ""
    if line in _DELIMITERS:
        return ""
    return line


def _group_text(match) -> Optional[str]:
    text = match.group("text")
    return text.strip() if text else None


__all__ = ["CommentParser", "normalise_line"]
