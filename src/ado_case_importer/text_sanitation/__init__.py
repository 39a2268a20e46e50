"""Text sanitation exports."""

from .markup_sanitizer import (
    collapse_blank_lines,
    decode_entities,
    replace_block_ends,
    replace_line_breaks,
    sanitize_text,
    strip_tags,
)

__all__ = [
    "collapse_blank_lines",
    "decode_entities",
    "replace_block_ends",
    "replace_line_breaks",
    "sanitize_text",
    "strip_tags",
]
