from __future__ import annotations

import pytest

from doxycomplete.engine import CommentEngine
from doxycomplete.style import StyleConfiguration


@pytest.fixture
def style() -> StyleConfiguration:
    """Default style: javadoc tags, single line variables, smart comments on."""
    return StyleConfiguration()


@pytest.fixture
def engine(style: StyleConfiguration) -> CommentEngine:
    return CommentEngine(style)
