"""Tests for comment block rendering."""

from __future__ import annotations

import re

from doxycomplete.models import (
    FUNCTION_CONSTRUCTOR,
    FUNCTION_DESTRUCTOR,
    DeclarationDescriptor,
    KIND_CLASS,
    ParsedComment,
    ParsedParam,
    ParsedSection,
)
from doxycomplete.parsing.parser import CommentParser
from doxycomplete.rendering.renderer import CommentRenderer
from doxycomplete.style import StyleConfiguration
from tests._fixtures.declarations import function, variable


def _block(*lines: str) -> str:
    return "\n".join(("/**",) + lines + (" */",))


def test_setter_renders_brief_and_single_parameter(style: StyleConfiguration) -> None:
    declaration = function("setUserName", ("name", "std::string"), parent_class="UserProfile")

    result = CommentRenderer(style).render(declaration)

    assert result == _block(
        " *  @brief Sets the User Profile's user name.",
        " *",
        " *  @param [in] name Name to set.",
    )


def test_boolean_accessor_renders_return_section(style: StyleConfiguration) -> None:
    declaration = function("isValid", return_type="bool", parent_class="Widget")

    result = CommentRenderer(style).render(declaration)

    assert result == _block(
        " *  @brief Returns true if the Widget is valid.",
        " *",
        " *  @return True if valid. False if not.",
    )


def test_parameter_columns_are_aligned(style: StyleConfiguration) -> None:
    declaration = function("copy", ("alpha", "const Foo&"), ("b", "Foo&"))

    result = CommentRenderer(style).render(declaration)

    assert result == _block(
        " *  @brief ",
        " *",
        " *  @param [in]     alpha ",
        " *  @param [in,out] b     ",
    )


def test_alignment_uses_directions_from_previous_comment(style: StyleConfiguration) -> None:
    declaration = function("copy", ("alpha", "const Foo&"), ("b", "Foo&"))
    parsed = ParsedComment(params={"b": ParsedParam(name="b", lines=["Result."], direction="out")})

    result = CommentRenderer(style).render(declaration, parsed)
    param_lines = [line for line in result.splitlines() if "@param" in line]

    assert param_lines == [
        " *  @param [in]  alpha ",
        " *  @param [out] b     Result.",
    ]
    name_columns = {re.search(r"\] +(\w+)", line).start(1) for line in param_lines}
    direction_columns = {line.index("[") for line in param_lines}
    assert len(name_columns) == 1
    assert len(direction_columns) == 1


def test_template_parameters_are_aligned(style: StyleConfiguration) -> None:
    declaration = function(
        "push",
        ("value", "const T&"),
        full_name="Container<T, Alloc>::push",
        parent_class="Container",
    )

    result = CommentRenderer(style).render(declaration)

    assert result == _block(
        " *  @brief Pushes the Container.",
        " *",
        " *  @tparam T     ",
        " *  @tparam Alloc ",
        " *",
        " *  @param [in] value ",
    )


def test_constructor_takes_inputs_and_has_no_return(style: StyleConfiguration) -> None:
    declaration = function(
        "Widget",
        ("size", "int&"),
        return_type="",
        parent_class="Widget",
        function_kind=FUNCTION_CONSTRUCTOR,
    )

    result = CommentRenderer(style).render(declaration)

    assert result == _block(
        " *  @brief Constructor.",
        " *",
        " *  @param [in] size ",
    )


def test_destructor_ignores_reported_return_type(style: StyleConfiguration) -> None:
    declaration = function("~Widget", return_type="Widget", function_kind=FUNCTION_DESTRUCTOR)

    assert CommentRenderer(style).render(declaration) == _block(" *  @brief Destructor.")


def test_previous_text_is_preserved_verbatim(style: StyleConfiguration) -> None:
    declaration = function("getValue", ("out", "int&"), return_type="bool")
    parsed = ParsedComment(
        brief=["Reads the value.", "Blocks until ready."],
        params={"out": ParsedParam(name="out", lines=["Receives", "the value."])},
        returns=ParsedSection(tag="returns", lines=["Whether it worked."]),
        sections=[ParsedSection(tag="note", lines=["Thread safe."])],
    )

    result = CommentRenderer(style).render(declaration, parsed)

    assert result == _block(
        " *  @brief Reads the value.",
        " *         Blocks until ready.",
        " *",
        " *  @param [in,out] out Receives",
        " *                      the value.",
        " *",
        " *  @return Whether it worked.",
        " *",
        " *  @note Thread safe.",
    )


def test_smart_comments_fill_getter_slots(style: StyleConfiguration) -> None:
    declaration = function("getValue", ("out", "int&"), return_type="bool")

    result = CommentRenderer(style).render(declaration)

    assert result == _block(
        " *  @brief Returns the value.",
        " *",
        " *  @param [in,out] out The out.",
        " *",
        " *  @return True if successful. False if not.",
    )


def test_smart_comments_disabled_leave_slots_empty() -> None:
    style = StyleConfiguration(smart_comments=False)
    declaration = function("setSize", ("size", "int"), return_type="int")

    result = CommentRenderer(style).render(declaration)

    assert result == _block(
        " *  @brief ",
        " *",
        " *  @param [in] size ",
        " *",
        " *  @return ",
    )


def test_block_without_brief_tag() -> None:
    style = StyleConfiguration(brief_tag=False)
    declaration = function("loadFile")
    parsed = ParsedComment(brief=["Loads it.", "Twice."])

    renderer = CommentRenderer(style)

    assert renderer.render(declaration) == _block(" *  Loads the file.")
    assert renderer.render(declaration, parsed) == _block(" *  Loads it.", " *  Twice.")


def test_indent_prefixes_every_continuation_line(style: StyleConfiguration) -> None:
    declaration = function("reset")

    result = CommentRenderer(style).render(declaration, indent="    ")

    assert result == "/**\n     *  @brief \n     */"


def test_tag_indentation_and_qt_markers() -> None:
    style = StyleConfiguration(tag_char="\\", opener="/*!", tag_indentation=2)
    declaration = function("setName", ("name", "const char*"))

    result = CommentRenderer(style).render(declaration)

    assert result == "\n".join(
        [
            "/*!",
            " *    \\brief Sets the name.",
            " *",
            " *    \\param [in] name Name to set.",
            " */",
        ]
    )


def test_other_sections_adopt_the_current_tag_marker() -> None:
    existing = "/**\n *  @brief Summary.\n *\n *  @warning Not reentrant.\n */"
    parsed = CommentParser(StyleConfiguration()).parse(existing)
    qt_renderer = CommentRenderer(StyleConfiguration(tag_char="\\"))

    result = qt_renderer.render(function("reset"), parsed)

    assert "\\warning Not reentrant." in result
    assert "@warning" not in result


def test_variable_collapses_to_single_line(style: StyleConfiguration) -> None:
    renderer = CommentRenderer(style)

    assert renderer.uses_single_line(variable("count"))
    assert renderer.render(variable("count")) == "/** @brief */"
    parsed = ParsedComment(brief=["Number of", "items."], sections=[ParsedSection("note", ["Atomic."])])
    result = renderer.render(variable("count"), parsed)
    assert "\n" not in result
    assert result == "/** @brief Number of items. @note Atomic. */"


def test_missing_declaration_uses_single_line(style: StyleConfiguration) -> None:
    renderer = CommentRenderer(style)

    assert renderer.uses_single_line(None)
    assert renderer.render(None, ParsedComment(brief=["File scope."])) == "/** @brief File scope. */"


def test_single_line_without_brief_tag() -> None:
    renderer = CommentRenderer(StyleConfiguration(single_line_brief=False))
    assert renderer.render(variable("count"), ParsedComment(brief=["Items."])) == "/** Items. */"


def test_single_line_flag_off_renders_block_for_variables() -> None:
    renderer = CommentRenderer(StyleConfiguration(single_line=False))

    assert not renderer.uses_single_line(variable("count"))
    assert renderer.render(variable("count")) == _block(" *  @brief ")


def test_non_function_declarations_skip_parameters_and_return(style: StyleConfiguration) -> None:
    declaration = DeclarationDescriptor(kind=KIND_CLASS, name="Pool", full_name="Pool<T>")

    result = CommentRenderer(style).render(declaration)

    assert result == _block(" *  @brief ", " *", " *  @tparam T ")
