"""Configuration loading for doxycomplete (.doxycomplete.yml)."""

from __future__ import annotations

from dataclasses import fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

from .style import TAG_STYLES, PhraseTemplates, StyleConfiguration
from .text.abbreviations import AbbreviationTable

CONFIG_FILENAME = ".doxycomplete.yml"

_BOOLEAN_KEYS = (
    "single_line",
    "brief_tag",
    "single_line_brief",
    "smart_comments",
    "smart_comments_all_functions",
)
_PHRASE_ALIASES: Dict[str, str] = {"return": "returns"}
_PHRASE_FIELDS = frozenset(item.name for item in fields(PhraseTemplates))


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


def load_config(config_path: Path) -> StyleConfiguration:
    """Load the comment style from disk; a missing file yields the defaults."""
    config_file = _resolve_config_path(Path(config_path))
    if not config_file.exists():
        return StyleConfiguration()

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")
    return style_from_mapping(data)


def style_from_mapping(data: Dict[str, Any]) -> StyleConfiguration:
    """Build a ``StyleConfiguration`` from already parsed settings."""
    options: Dict[str, Any] = {}

    tag_style = data.get("tag_style")
    if tag_style is not None:
        options["tag_char"] = _tag_char(tag_style)

    first_line = data.get("first_line")
    if first_line is not None:
        options["opener"] = str(first_line).strip()

    indentation = data.get("tag_indentation")
    if indentation is not None:
        value = _as_int(indentation)
        if value is None:
            raise ConfigError("tag_indentation must be an integer")
        options["tag_indentation"] = value

    for key in _BOOLEAN_KEYS:
        if key not in data or data[key] is None:
            continue
        flag = _as_bool(data[key])
        if flag is None:
            raise ConfigError(f"{key} must be a boolean")
        options[key] = flag

    template = data.get("file_template")
    if template is not None:
        if not isinstance(template, str):
            raise ConfigError("file_template must be a string")
        options["file_template"] = template

    phrases = _as_dict(data.get("phrases"))
    if phrases:
        options["phrases"] = _phrases(phrases)

    abbreviations = data.get("abbreviations")
    if abbreviations is not None:
        options["abbreviations"] = AbbreviationTable(_abbreviation_pairs(abbreviations))

    try:
        return StyleConfiguration(**options)
    except ValueError as exc:
        raise ConfigError(str(exc)) from exc


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _tag_char(value: Any) -> str:
    text = str(value).strip()
    if text in TAG_STYLES.values():
        return text
    try:
        return TAG_STYLES[text.lower()]
    except KeyError:
        styles = ", ".join(sorted(TAG_STYLES))
        raise ConfigError(f"Unknown tag_style '{text}'; expected one of {styles}") from None


def _phrases(data: Dict[str, Any]) -> PhraseTemplates:
    values: Dict[str, str] = {}
    for key, value in data.items():
        name = _PHRASE_ALIASES.get(key, key)
        if name not in _PHRASE_FIELDS:
            raise ConfigError(f"Unknown phrase template '{key}'")
        if not isinstance(value, str):
            raise ConfigError(f"Phrase template '{key}' must be a string")
        values[name] = value
    return PhraseTemplates(**values)


def _abbreviation_pairs(value: Any) -> List[Tuple[str, str]]:
    """Normalise the abbreviation setting into ordered pairs.

    Accepts a mapping or a list whose items are ``[abbr, expansion]`` pairs
    or single-key mappings.
    """
    if isinstance(value, dict):
        return [(str(key), str(item)) for key, item in value.items()]
    if not isinstance(value, list):
        raise ConfigError("abbreviations must be a mapping or a list of pairs")
    pairs: List[Tuple[str, str]] = []
    for item in value:
        if isinstance(item, (list, tuple)) and len(item) == 2:
            pairs.append((str(item[0]), str(item[1])))
        elif isinstance(item, dict) and len(item) == 1:
            key, expansion = next(iter(item.items()))
            pairs.append((str(key), str(expansion)))
        else:
            raise ConfigError(f"Invalid abbreviation entry: {item!r}")
    return pairs


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


__all__ = ["CONFIG_FILENAME", "ConfigError", "load_config", "style_from_mapping"]
