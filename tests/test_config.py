"""Tests for doxycomplete.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from doxycomplete.config import ConfigError, load_config, style_from_mapping
from doxycomplete.style import DEFAULT_FILE_TEMPLATE, PhraseTemplates, StyleConfiguration
from doxycomplete.text.abbreviations import DuplicateKeyError


def _write_config(root: Path, text: str) -> Path:
    config_file = root / ".doxycomplete.yml"
    config_file.write_text(text, encoding="utf-8")
    return config_file


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    style = load_config(tmp_path)

    assert style == StyleConfiguration(abbreviations=style.abbreviations)
    assert style.tag_char == "@"
    assert style.opener == "/**"
    assert style.file_template == DEFAULT_FILE_TEMPLATE
    assert len(style.abbreviations) == 0


def test_load_config_parses_expected_fields(tmp_path: Path) -> None:
    _write_config(
        tmp_path,
        """
tag_style: qt
first_line: "/*!"
tag_indentation: 2
single_line: false
brief_tag: "no"
single_line_brief: true
smart_comments: yes
smart_comments_all_functions: false
file_template: |
  // {FILENAME}
abbreviations:
  cfg: configuration
  mgr: manager
phrases:
  setter: "Assigns the {1}{0}."
  return: "Current {0}."
""",
    )

    style = load_config(tmp_path)

    assert style.tag_char == "\\"
    assert style.opener == "/*!"
    assert style.tag_indentation == 2
    assert style.single_line is False
    assert style.brief_tag is False
    assert style.single_line_brief is True
    assert style.smart_comments is True
    assert style.smart_comments_all_functions is False
    assert style.file_template == "// {FILENAME}\n"
    assert style.abbreviations.as_dict() == {"cfg": "configuration", "mgr": "manager"}
    assert style.phrases.setter == "Assigns the {1}{0}."
    assert style.phrases.returns == "Current {0}."
    assert style.phrases.getter == PhraseTemplates().getter


def test_load_config_accepts_file_path(tmp_path: Path) -> None:
    config_file = _write_config(tmp_path, "tag_style: '@'\n")

    assert load_config(config_file).tag_char == "@"


def test_load_config_handles_empty_file(tmp_path: Path) -> None:
    _write_config(tmp_path, "\n")

    assert load_config(tmp_path).tag_char == "@"


def test_abbreviations_accept_list_of_pairs(tmp_path: Path) -> None:
    _write_config(
        tmp_path,
        """
abbreviations:
  - [calc, calculate]
  - pos: position
""",
    )

    style = load_config(tmp_path)

    assert style.abbreviations.expand("calc") == "calculate"
    assert style.abbreviations.expand("pos") == "position"


def test_duplicate_abbreviations_raise(tmp_path: Path) -> None:
    _write_config(
        tmp_path,
        """
abbreviations:
  - [mgr, manager]
  - [mgr, management]
""",
    )

    with pytest.raises(DuplicateKeyError) as excinfo:
        load_config(tmp_path)
    assert excinfo.value.key == "mgr"


@pytest.mark.parametrize(
    "text",
    [
        "- just\n- a list\n",
        "tag_style: latex\n",
        "first_line: '//'\n",
        "tag_indentation: two\n",
        "tag_indentation: -1\n",
        "tag_indentation: true\n",
        "single_line: maybe\n",
        "file_template: [a, b]\n",
        "abbreviations: cfg\n",
        "abbreviations:\n  - [a, b, c]\n",
        "phrases:\n  farewell: Bye\n",
        "phrases:\n  setter: 3\n",
        "tag_style: [unbalanced\n",
    ],
)
def test_invalid_configuration_raises(tmp_path: Path, text: str) -> None:
    _write_config(tmp_path, text)

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_style_from_mapping_accepts_tag_style_names() -> None:
    assert style_from_mapping({"tag_style": "Javadoc"}).tag_char == "@"
    assert style_from_mapping({"tag_style": "\\"}).tag_char == "\\"
    assert style_from_mapping({"tag_indentation": "3"}).tag_indentation == 3


def test_style_from_mapping_ignores_null_values() -> None:
    style = style_from_mapping({"single_line": None, "tag_style": None})

    assert style.single_line is True
    assert style.tag_char == "@"
