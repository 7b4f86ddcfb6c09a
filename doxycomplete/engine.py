"""Entry point tying parsing, rendering and indentation together."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

from .config import load_config
from .indentation import IndentationAdvisor, IndentResult
from .logging import get_logger
from .models import DeclarationDescriptor, ParsedComment
from .parsing.parser import CommentParser
from .rendering.file_header import FileComment, FileContext, FileHeaderRenderer
from .rendering.renderer import CommentRenderer
from .style import StyleConfiguration


class CommentEngine:
    """Regenerates Doxygen comments for one style configuration.

    Every call is independent: the engine keeps no state between requests
    besides the style and the collaborators built from it.
    """

    def __init__(
        self,
        style: StyleConfiguration | None = None,
        *,
        parser: CommentParser | None = None,
        renderer: CommentRenderer | None = None,
        file_renderer: FileHeaderRenderer | None = None,
        advisor: IndentationAdvisor | None = None,
    ) -> None:
        self.style = style or StyleConfiguration()
        self.parser = parser or CommentParser(self.style)
        self.renderer = renderer or CommentRenderer(self.style)
        self.file_renderer = file_renderer or FileHeaderRenderer(self.style)
        self.advisor = advisor or IndentationAdvisor(self.style)
        self.logger = get_logger("engine")

    @classmethod
    def from_config(cls, config_path: Path) -> "CommentEngine":
        """Build an engine from a ``.doxycomplete.yml`` file or its directory."""
        return cls(load_config(config_path))

    def parse(self, existing: str) -> ParsedComment:
        return self.parser.parse(existing)

    def generate_comment(
        self,
        declaration: Optional[DeclarationDescriptor],
        existing: str = "",
        *,
        indent: str = "",
    ) -> str:
        """Render the comment for ``declaration``, keeping text from ``existing``."""
        if declaration is None:
            self.logger.debug("Generating comment without a declaration")
        else:
            self.logger.debug("Generating comment for %s %s", declaration.kind, declaration.name)
        parsed = self.parser.parse(existing)
        return self.renderer.render(declaration, parsed, indent=indent)

    def uses_single_line(self, declaration: Optional[DeclarationDescriptor]) -> bool:
        return self.renderer.uses_single_line(declaration)

    def generate_file_comment(self, context: FileContext) -> FileComment:
        return self.file_renderer.render(context)

    def indentation(self, previous_line: str, current_column: int) -> IndentResult:
        return self.advisor.suggest(previous_line, current_column)

    def new_line_prefix(self, current_line: str, lines_above: Sequence[str] = ()) -> str:
        return self.advisor.new_line_prefix(current_line, lines_above)


__all__ = ["CommentEngine"]
