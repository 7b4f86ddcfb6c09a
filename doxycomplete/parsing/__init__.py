"""Comment parsing."""

from .parser import CommentParser, normalise_line

__all__ = ["CommentParser", "normalise_line"]
