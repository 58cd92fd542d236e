"""Text – emoji shortcode expansion."""
from __future__ import annotations

import re
from typing import Callable

import emoji

Expander = Callable[[str], str]

# Appended after every expanded glyph.
REPLACE_PADDING = " "

_SHORTCODE = re.compile(r":[\w\-&.'()!#*+,/]+:")


def _replace(match: re.Match[str]) -> str:
    code = match.group(0)
    glyph = emoji.emojize(code, language="alias")
    if glyph == code:
        return code
    return glyph + REPLACE_PADDING


def expand_emoji(text: str) -> str:
    """Replace ``:shortcode:`` aliases (``:thumbsup:``, ``:smile:``) with glyphs.

    Each glyph is followed by :data:`REPLACE_PADDING`. Unknown shortcodes are
    left untouched.
    """
    if ":" not in text:
        return text
    return _SHORTCODE.sub(_replace, text)


__all__ = ["REPLACE_PADDING", "Expander", "expand_emoji"]
