"""Comment rendering and smart comment heuristics."""

from .file_header import FileComment, FileContext, FileHeaderRenderer
from .renderer import CommentRenderer
from .synthesis import DescriptionSynthesizer, is_input_type, resolve_direction
from .templates import extract_template_params

__all__ = [
    "CommentRenderer",
    "DescriptionSynthesizer",
    "FileComment",
    "FileContext",
    "FileHeaderRenderer",
    "extract_template_params",
    "is_input_type",
    "resolve_direction",
]
