"""Data models shared across doxycomplete components."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

KIND_NAMESPACE = "namespace"
KIND_CLASS = "class"
KIND_STRUCT = "struct"
KIND_UNION = "union"
KIND_ENUM = "enum"
KIND_VARIABLE = "variable"
KIND_FUNCTION = "function"
DECLARATION_KINDS = (
    KIND_NAMESPACE,
    KIND_CLASS,
    KIND_STRUCT,
    KIND_UNION,
    KIND_ENUM,
    KIND_VARIABLE,
    KIND_FUNCTION,
)

FUNCTION_ORDINARY = "ordinary"
FUNCTION_CONSTRUCTOR = "constructor"
FUNCTION_DESTRUCTOR = "destructor"
FUNCTION_KINDS = (FUNCTION_ORDINARY, FUNCTION_CONSTRUCTOR, FUNCTION_DESTRUCTOR)

DIRECTION_IN = "in"
DIRECTION_OUT = "out"
DIRECTION_INOUT = "inout"
DIRECTION_TAGS: Dict[str, str] = {
    DIRECTION_IN: "[in]",
    DIRECTION_OUT: "[out]",
    DIRECTION_INOUT: "[in,out]",
}


def direction_to_tag(direction: str) -> str:
    """Return the bracketed Doxygen form of ``direction``."""
    return DIRECTION_TAGS.get(direction, DIRECTION_TAGS[DIRECTION_IN])


def direction_from_tag(tag: str) -> str:
    """Map a bracketed tag back to a direction; unknown brackets read as ``in``."""
    for direction, candidate in DIRECTION_TAGS.items():
        if candidate == tag:
            return direction
    return DIRECTION_IN


@dataclass(frozen=True)
class Parameter:
    """A function parameter as resolved by the host's code model."""

    name: str
    type: str = ""
    direction: Optional[str] = None


@dataclass(frozen=True)
class DeclarationDescriptor:
    """Structural facts about the declaration that follows a comment."""

    kind: str
    name: str
    full_name: str = ""
    function_kind: str = FUNCTION_ORDINARY
    parameters: Sequence[Parameter] = ()
    return_type: str = "void"
    parent_class: Optional[str] = None

    @property
    def is_function(self) -> bool:
        return self.kind == KIND_FUNCTION

    @property
    def is_constructor(self) -> bool:
        return self.is_function and self.function_kind == FUNCTION_CONSTRUCTOR

    @property
    def is_destructor(self) -> bool:
        return self.is_function and self.function_kind == FUNCTION_DESTRUCTOR

    @property
    def qualified_name(self) -> str:
        return self.full_name or self.name


@dataclass
class ParsedParam:
    """Previously written text for a parameter or template parameter."""

    name: str
    lines: List[str] = field(default_factory=list)
    direction: Optional[str] = None


@dataclass
class ParsedSection:
    """A tagged section such as ``@note`` or ``@return``."""

    tag: str
    lines: List[str] = field(default_factory=list)


@dataclass
class ParsedComment:
    """Structured view of an existing comment block."""

    brief: List[str] = field(default_factory=list)
    template_params: Dict[str, ParsedParam] = field(default_factory=dict)
    params: Dict[str, ParsedParam] = field(default_factory=dict)
    returns: Optional[ParsedSection] = None
    sections: List[ParsedSection] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not (
            self.brief
            or self.template_params
            or self.params
            or self.returns
            or self.sections
        )
