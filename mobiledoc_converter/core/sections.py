"""Markup section conversion: one Mobiledoc text section → one Lexical block.

WHY: A Mobiledoc markup section is a flat list of markers. Each marker
opens some markups, carries a run of text (or points at an atom), and
closes some markups. Lexical instead wants a tree: a block node holding
text nodes with a format bitmask, with linked text wrapped in a link node.
This module rebuilds that tree from the flat encoding.

HOW: Walk the markers in order while keeping three pieces of state:
  - a LIFO stack of currently open markups
  - the href of the open link markup, if any
  - the link node collecting text while that link is open (created lazily)
Atom markers become their Lexical node and go straight into the block.
Text markers push their openers, emit a text node formatted from the whole
stack, then pop their closers; closing a link flushes the link node into
the block.

RULES:
- Markups are assumed well nested (last opened, first closed)
- At most one link is open at a time
- Atoms are never placed inside a link, even while one is open
- Empty text runs produce no node but still open/close markups
- A link with no text produces no link node
- Closing more markups than are open raises MalformedNestingError
- Markups left open at section end only raise in strict mode; otherwise
  any pending link node is dropped with a warning
"""

from __future__ import annotations

import logging
from typing import List, Optional

from mobiledoc_converter.core.formats import format_bitmask
from mobiledoc_converter.core.mobiledoc import Markup, MarkupSection, Mobiledoc
from mobiledoc_converter.core.nodes import (
    ContainerNode,
    append,
    make_atom_node,
    make_container,
    make_text_leaf,
)
from mobiledoc_converter.exceptions import MalformedNestingError, UnsupportedSectionTagError

logger = logging.getLogger(__name__)

# Mobiledoc markup section tags this converter can turn into Lexical blocks
SECTION_TAGS = frozenset({"p", "h2", "h3", "blockquote"})

LINK_TAG = "a"


class MarkupStack:
    """Stack of markups open at the current marker."""

    def __init__(self) -> None:
        self._items: List[Markup] = []

    def push(self, markup: Markup) -> None:
        self._items.append(markup)

    def pop(self) -> Markup:
        if not self._items:
            raise MalformedNestingError("Marker closes a markup but none are open")
        return self._items.pop()

    def tags(self) -> List[str]:
        return [markup.tag for markup in self._items]

    def __len__(self) -> int:
        return len(self._items)


def convert_markup_section(
    section: MarkupSection,
    mobiledoc: Mobiledoc,
    strict_nesting: bool = False,
) -> ContainerNode:
    """Convert one markup section into a Lexical paragraph, heading or quote.

    Args:
        section: The parsed markup section.
        mobiledoc: The owning document, used to resolve markup and atom indexes.
        strict_nesting: Raise if markups are still open after the last marker.

    Returns:
        The fully built block node.

    Raises:
        UnsupportedSectionTagError: If the section tag has no Lexical block.
        IndexOutOfRangeError: If a marker references a missing markup or atom.
        UnsupportedAtomError: If an atom has no Lexical equivalent.
        MalformedNestingError: On closing more markups than are open, or on
            leftover open markups in strict mode.
    """
    if section.tag_name not in SECTION_TAGS:
        raise UnsupportedSectionTagError(section.tag_name)

    block = make_container(section.tag_name)

    open_markups = MarkupStack()
    link_href: Optional[str] = None
    link_node: Optional[ContainerNode] = None

    for marker in section.markers:
        if marker.is_atom:
            atom = mobiledoc.atom(marker.value)
            append(block, make_atom_node(atom.name))
            continue

        for index in marker.open_markup_indexes:
            markup = mobiledoc.markup(index)
            if markup.tag == LINK_TAG:
                link_href = markup.href
            open_markups.push(markup)

        if marker.value:
            text_node = make_text_leaf(marker.value, format_bitmask(open_markups.tags()))
            if link_href:
                if link_node is None:
                    link_node = make_container(LINK_TAG, {"url": link_href})
                append(link_node, text_node)
            else:
                append(block, text_node)

        for _ in range(marker.close_count):
            markup = open_markups.pop()
            if markup.tag == LINK_TAG:
                if link_node is not None:
                    append(block, link_node)
                link_href = None
                link_node = None

    if len(open_markups):
        if strict_nesting:
            raise MalformedNestingError(
                "{} markup(s) left open at end of <{}> section: {}".format(
                    len(open_markups), section.tag_name, ", ".join(open_markups.tags())
                )
            )
        if link_node is not None:
            logger.warning(
                "Dropping unclosed link to %s in <%s> section", link_href, section.tag_name
            )
        else:
            logger.debug(
                "%d markup(s) left open at end of <%s> section",
                len(open_markups), section.tag_name,
            )

    return block
