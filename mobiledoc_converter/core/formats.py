"""Inline formatting: Mobiledoc markup tags → Lexical text format bitmask.

WHY: Mobiledoc stores inline formatting as a stack of open markup tags
("strong", "em", ...). Lexical stores it on each text node as a single
integer with one bit per format. Every text leaf needs this conversion.

HOW: MARKUP_TO_FORMAT maps each recognized tag to its TextFormat flag.
format_bitmask() ORs the flags of all given tags together.

RULES:
- strong/b → bold (1), em/i → italic (2), s → strikethrough (4)
- code → 16, sub → 32, sup → 64
- Bit 3 (8) is Lexical's underline, never produced from Mobiledoc
- Unknown tags (including "a") contribute nothing
- Synonyms and duplicates collapse; tag order never matters
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import IntFlag
from types import MappingProxyType


class TextFormat(IntFlag):
    """Lexical text format bits."""

    BOLD = 1
    ITALIC = 1 << 1
    STRIKETHROUGH = 1 << 2
    UNDERLINE = 1 << 3  # reserved by Lexical, no Mobiledoc markup maps here
    CODE = 1 << 4
    SUBSCRIPT = 1 << 5
    SUPERSCRIPT = 1 << 6


MARKUP_TO_FORMAT = MappingProxyType({
    "strong": TextFormat.BOLD,
    "b": TextFormat.BOLD,
    "em": TextFormat.ITALIC,
    "i": TextFormat.ITALIC,
    "s": TextFormat.STRIKETHROUGH,
    "code": TextFormat.CODE,
    "sub": TextFormat.SUBSCRIPT,
    "sup": TextFormat.SUPERSCRIPT,
})


def format_bitmask(tags: Iterable[str]) -> int:
    """Return the Lexical format bitmask for a collection of open markup tags.

    Args:
        tags: Tag names of every markup currently open, in any order.

    Returns:
        Plain int suitable for a Lexical text node's ``format`` field.
    """
    fmt = TextFormat(0)
    for tag in tags:
        fmt |= MARKUP_TO_FORMAT.get(tag, TextFormat(0))
    return int(fmt)
