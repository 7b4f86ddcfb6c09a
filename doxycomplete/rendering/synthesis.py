"""Smart comment heuristics: descriptions derived from identifier names."""

from __future__ import annotations

from typing import Optional

from ..logging import get_logger
from ..models import (
    DIRECTION_IN,
    DIRECTION_INOUT,
    DeclarationDescriptor,
    Parameter,
    ParsedParam,
)
from ..style import StyleConfiguration
from ..text.words import capitalize, display_name, split_words, third_person

_SUCCESS_SUBJECT = "successful"
_BOOL_ACCESSORS = frozenset({"is", "has"})


def is_input_type(type_name: str) -> bool:
    """Return True when a parameter of ``type_name`` is only read by the callee.

    Const-qualified types and types passed by value are inputs; non-const
    references and pointers are not.
    """
    is_reference = False
    for token in type_name.split(" "):
        if token == "const":
            return True
        if token in ("&", "*"):
            is_reference = True
    if type_name.endswith(("&", "*")):
        is_reference = True
    return not is_reference


def resolve_direction(
    declaration: DeclarationDescriptor,
    parameter: Parameter,
    parsed: Optional[ParsedParam] = None,
) -> str:
    """Pick the direction shown for ``parameter``.

    A direction written in the existing comment wins, then one resolved by
    the host. Constructors only take inputs; everything else is classified
    by its type. Pure ``out`` is never inferred.
    """
    if parsed is not None and parsed.direction:
        return parsed.direction
    if parameter.direction:
        return parameter.direction
    if declaration.is_constructor or is_input_type(parameter.type):
        return DIRECTION_IN
    return DIRECTION_INOUT


class DescriptionSynthesizer:
    """Generates brief, parameter and return descriptions from names."""

    def __init__(self, style: StyleConfiguration) -> None:
        self.style = style
        self.phrases = style.phrases
        self.abbreviations = style.abbreviations
        self.logger = get_logger("synthesis")

    def class_name(self, declaration: DeclarationDescriptor) -> str:
        if not declaration.parent_class:
            return ""
        return display_name(declaration.parent_class, self.abbreviations)

    def brief(self, declaration: Optional[DeclarationDescriptor]) -> str:
        if declaration is None or not declaration.is_function:
            return ""
        if declaration.is_constructor:
            return "Constructor."
        if declaration.is_destructor:
            return "Destructor."

        words = split_words(declaration.name)
        if not words:
            return ""
        class_name = self.class_name(declaration)
        owner = f"{class_name}'s " if class_name else ""
        verb = words[0]

        if len(words) > 1:
            subject = self.abbreviations.expand_all(words[1:])
            if verb == "set":
                return self._format(self.phrases.setter, subject, owner)
            if verb == "get":
                return self._format(self.phrases.getter, subject, owner)
            if verb in _BOOL_ACCESSORS:
                owner_name = f"{class_name} " if class_name else ""
                return self._format(self.phrases.bool_getter, subject, owner_name, verb)

        if not self.style.smart_comments_all_functions:
            return ""
        # Single word names only describe something when the class supplies the object.
        if len(words) == 1 and not declaration.parent_class:
            return ""
        conjugated = third_person(self.abbreviations.expand(verb))
        if len(words) == 1:
            target = class_name
        else:
            target = self.abbreviations.expand_all(words[1:])
        if not target:
            return ""
        self.logger.debug("Using verb phrase '%s' for %s", conjugated, declaration.name)
        return capitalize(f"{conjugated} the {target}.")

    def param(self, declaration: DeclarationDescriptor, parameter: Parameter) -> str:
        words = self.abbreviations.expand_all(split_words(parameter.name))
        if parameter.type == "bool":
            return capitalize(self._format(self.phrases.bool_param, words))
        if declaration.name.startswith("set"):
            return capitalize(self._format(self.phrases.setter_param, words))
        if (
            declaration.name.startswith("get")
            and resolve_direction(declaration, parameter) != DIRECTION_IN
        ):
            # An output parameter of a getter carries the value being returned.
            return capitalize(self._format(self.phrases.returns, words))
        return ""

    def returns(self, declaration: DeclarationDescriptor) -> str:
        words = split_words(declaration.name)
        if len(words) < 2:
            return ""
        verb = words[0]
        subject = self.abbreviations.expand_all(words[1:])
        if verb == "get":
            has_outputs = any(
                resolve_direction(declaration, parameter) != DIRECTION_IN
                for parameter in declaration.parameters
            )
            if declaration.return_type == "bool" and has_outputs:
                return capitalize(self._format(self.phrases.bool_return, _SUCCESS_SUBJECT))
            return capitalize(self._format(self.phrases.returns, subject))
        if verb == "is":
            return capitalize(self._format(self.phrases.bool_return, subject))
        if verb == "has":
            return capitalize(self._format(self.phrases.bool_return, f"has {subject}"))
        return ""

    def _format(self, template: str, *args: str) -> str:
        try:
            return template.format(*args)
        except (AttributeError, IndexError, KeyError, ValueError) as exc:
            self.logger.warning("Cannot format phrase template %r: %s", template, exc)
            return ""


__all__ = ["DescriptionSynthesizer", "is_input_type", "resolve_direction"]
