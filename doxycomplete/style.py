"""Comment style configuration and the tag grammar derived from it."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Dict, Pattern, Tuple

from .text.abbreviations import AbbreviationTable

TAG_STYLES: Dict[str, str] = {
    "javadoc": "@",
    "qt": "\\",
}
SUPPORTED_TAG_CHARS: Tuple[str, ...] = tuple(TAG_STYLES.values())
SUPPORTED_OPENERS: Tuple[str, ...] = ("/**", "/*!")

DEFAULT_FILE_TEMPLATE = (
    "/**\n"
    " *  @file   {FILENAME}\n"
    " *  @brief  {SMARTCOMMENT}{CURSOR}\n"
    " *\n"
    " *  @author {AUTHOR}\n"
    " *  @date   {YEAR}-{MONTH}-{DAY}\n"
    " */\n"
)


@dataclass(frozen=True)
class PhraseTemplates:
    """``str.format`` templates used by smart comments.

    Positional placeholders: ``{0}`` is the described object, ``{1}`` the
    owner (class name) and ``{2}`` the accessor verb where applicable.
    """

    setter: str = "Sets the {1}{0}."
    getter: str = "Returns the {1}{0}."
    bool_getter: str = "Returns true if the {1}{2} {0}."
    setter_param: str = "{0} to set."
    returns: str = "The {0}."
    bool_return: str = "True if {0}. False if not."
    bool_param: str = "If true, {0}. Otherwise not {0}."
    file_header: str = "Declares the {0}."
    file_source: str = "Implements the {0}."
    file_inline: str = "Implements the {0}."


@dataclass(frozen=True)
class TagGrammar:
    """Line matchers for one tag marker character."""

    tag_char: str
    template_param: Pattern[str]
    param: Pattern[str]
    section: Pattern[str]
    text: Pattern[str]


@lru_cache(maxsize=None)
def build_grammar(tag_char: str) -> TagGrammar:
    """Compile the comment line patterns for ``tag_char``."""
    if tag_char not in SUPPORTED_TAG_CHARS:
        raise ValueError(f"Unsupported tag marker {tag_char!r}")
    marker = re.escape(tag_char)
    prefix = r"\s*\*\s+" + marker
    return TagGrammar(
        tag_char=tag_char,
        template_param=re.compile(prefix + r"tparam\s+(?P<name>\S+)(?:\s+(?P<text>.*))?$"),
        param=re.compile(
            prefix
            + r"param\s+(?:(?P<direction>\[[a-z,]+\])\s+)?(?P<name>\S+)(?:\s+(?P<text>.*))?$"
        ),
        section=re.compile(prefix + r"(?P<tag>[a-z]+)(?:\s+(?P<text>.*))?$"),
        text=re.compile(r"\s*\*\s+(?P<text>.+)$"),
    )


@dataclass(frozen=True)
class StyleConfiguration:
    """Everything that shapes a rendered comment block."""

    tag_char: str = "@"
    opener: str = "/**"
    tag_indentation: int = 0
    single_line: bool = True
    brief_tag: bool = True
    single_line_brief: bool = True
    smart_comments: bool = True
    smart_comments_all_functions: bool = True
    phrases: PhraseTemplates = field(default_factory=PhraseTemplates)
    abbreviations: AbbreviationTable = field(default_factory=AbbreviationTable)
    file_template: str = DEFAULT_FILE_TEMPLATE

    def __post_init__(self) -> None:
        if self.tag_char not in SUPPORTED_TAG_CHARS:
            raise ValueError(
                f"Unsupported tag marker {self.tag_char!r}; expected one of {SUPPORTED_TAG_CHARS}"
            )
        if self.opener not in SUPPORTED_OPENERS:
            raise ValueError(
                f"Unsupported comment opener {self.opener!r}; expected one of {SUPPORTED_OPENERS}"
            )
        if self.tag_indentation < 0:
            raise ValueError("Tag indentation must not be negative")

    @property
    def grammar(self) -> TagGrammar:
        return build_grammar(self.tag_char)

    def tag(self, name: str) -> str:
        """Render a tag marker including indentation and the trailing space."""
        return " " * self.tag_indentation + self.tag_char + name + " "


__all__ = [
    "DEFAULT_FILE_TEMPLATE",
    "PhraseTemplates",
    "StyleConfiguration",
    "SUPPORTED_OPENERS",
    "SUPPORTED_TAG_CHARS",
    "TAG_STYLES",
    "TagGrammar",
    "build_grammar",
]
