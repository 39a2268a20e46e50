"""Markup stripping for rich-text export fields."""

from __future__ import annotations

import html
import re

_LINE_BREAK_TAG = re.compile(r"<br\s*/?>", re.IGNORECASE)
_BLOCK_END_TAG = re.compile(r"</(?:p|div)>", re.IGNORECASE)
_ANY_TAG = re.compile(r"<[^>]+>")
_BLANK_LINE_RUN = re.compile(r"\n\s*\n")
_NO_BREAK_SPACE_ENTITY = re.compile(r"&(?:nbsp|#160|#[xX][aA]0);")


def replace_line_breaks(text: str) -> str:
    return _LINE_BREAK_TAG.sub("\n", text)


def replace_block_ends(text: str) -> str:
    return _BLOCK_END_TAG.sub("\n", text)


def strip_tags(text: str) -> str:
    return _ANY_TAG.sub("", text)


def decode_entities(text: str) -> str:
    """Decode HTML character entities; ``&nbsp;`` becomes a plain space.

    Literal non-breaking space characters are left as they are.
    """
    if "&" not in text:
        return text
    return html.unescape(_NO_BREAK_SPACE_ENTITY.sub(" ", text))


def collapse_blank_lines(text: str) -> str:
    return _BLANK_LINE_RUN.sub("\n", text)


_SANITIZE_CHAIN = (
    replace_line_breaks,
    replace_block_ends,
    strip_tags,
    decode_entities,
    collapse_blank_lines,
    str.strip,
)


def sanitize_text(value: object) -> str:
    """Turn an HTML-polluted export value into plain text."""
    if value is None:
        return ""
    text = str(value)
    for transform in _SANITIZE_CHAIN:
        text = transform(text)
    return text
