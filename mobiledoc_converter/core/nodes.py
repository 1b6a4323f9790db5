"""Lexical node dataclasses and the factory functions that build them.

WHY: The converter assembles a Lexical editor state node by node. Lexical
expects every node to carry a fixed set of fields (version, format,
direction, ...), and container kinds add their own (a heading's tag, a
link's url). Building nodes through one factory keeps those shapes in a
single place.

HOW: Three node types form a tagged union, told apart by ``kind``:
  ContainerNode — root, paragraph, heading, quote, link (has children)
  TextNode      — a run of text with a format bitmask
  LineBreakNode — a forced line break inside a block
make_container() layers universal defaults, the per-kind template, and
explicit overrides, in that order. append() attaches a child and
propagates text direction to the immediate parent.

RULES:
- Templates are read-only mappings; every call returns fresh nodes
- Later layers win on field collisions (defaults < template < overrides)
- direction becomes "ltr" only on the direct parent of a non-empty TextNode
- to_dict() produces the exact Lexical JSON shape
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Union

from mobiledoc_converter.exceptions import UnsupportedAtomError, UnsupportedSectionTagError

LEXICAL_VERSION = 1


@dataclass
class TextNode:
    """A run of text sharing one set of inline formats."""

    text: str
    format: int = 0
    detail: int = 0
    mode: str = "normal"
    style: str = ""
    version: int = LEXICAL_VERSION

    kind = "text"

    def to_dict(self) -> dict[str, Any]:
        return {
            "detail": self.detail,
            "format": self.format,
            "mode": self.mode,
            "style": self.style,
            "text": self.text,
            "type": "text",
            "version": self.version,
        }


@dataclass
class LineBreakNode:
    """A soft line break (Mobiledoc's "soft-return" atom)."""

    version: int = LEXICAL_VERSION

    kind = "linebreak"

    def to_dict(self) -> dict[str, Any]:
        return {"type": "linebreak", "version": self.version}


@dataclass
class ContainerNode:
    """A Lexical element node that owns an ordered list of children.

    ``attributes`` holds the kind-specific fields from the template and
    overrides (e.g. ``tag`` for headings, ``url``/``rel``/``target``/``title``
    for links). They are emitted between ``type`` and ``version``.
    """

    type: str
    children: List[LexicalNode] = field(default_factory=list)
    direction: Optional[str] = None
    format: str = ""
    indent: int = 0
    version: int = LEXICAL_VERSION
    attributes: Dict[str, Any] = field(default_factory=dict)

    kind = "container"

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "children": [child.to_dict() for child in self.children],
            "direction": self.direction,
            "format": self.format,
            "indent": self.indent,
            "type": self.type,
        }
        data.update(self.attributes)
        data["version"] = self.version
        return data


LexicalNode = Union[ContainerNode, TextNode, LineBreakNode]


# ---------------------------------------------------------------------------
# Templates
# ---------------------------------------------------------------------------

_CONTAINER_DEFAULTS = MappingProxyType({
    "children": (),
    "direction": None,
    "format": "",
    "indent": 0,
    "version": LEXICAL_VERSION,
})

# Mobiledoc tag name → Lexical container template
TAG_TO_NODE = MappingProxyType({
    "p": MappingProxyType({"type": "paragraph"}),
    "h2": MappingProxyType({"type": "heading", "tag": "h2"}),
    "h3": MappingProxyType({"type": "heading", "tag": "h3"}),
    "blockquote": MappingProxyType({"type": "quote"}),
    "a": MappingProxyType({
        "type": "link",
        "rel": None,
        "target": None,
        "title": None,
        "url": None,
    }),
})

_ROOT_TEMPLATE = MappingProxyType({"type": "root"})

# Mobiledoc atom name → Lexical node type
ATOM_TO_NODE = MappingProxyType({
    "soft-return": LineBreakNode,
})


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------


def make_container(
    kind: str,
    overrides: Optional[Mapping[str, Any]] = None,
) -> ContainerNode:
    """Build an empty container node for a Mobiledoc tag name (or "root").

    Args:
        kind: A key of TAG_TO_NODE, or "root" for the document root.
        overrides: Explicit field values applied last, e.g. ``{"url": href}``.

    Raises:
        UnsupportedSectionTagError: If ``kind`` has no template.
    """
    template = _ROOT_TEMPLATE if kind == "root" else TAG_TO_NODE.get(kind)
    if template is None:
        raise UnsupportedSectionTagError(kind)

    fields: dict[str, Any] = dict(_CONTAINER_DEFAULTS)
    fields.update(template)
    if overrides:
        fields.update(overrides)

    return ContainerNode(
        type=fields.pop("type"),
        children=list(fields.pop("children")),
        direction=fields.pop("direction"),
        format=fields.pop("format"),
        indent=fields.pop("indent"),
        version=fields.pop("version"),
        attributes=fields,
    )


def make_text_leaf(text: str, fmt: int) -> TextNode:
    """Build a text node with the given format bitmask."""
    return TextNode(text=text, format=fmt)


def make_atom_node(atom_name: str) -> LexicalNode:
    """Build the Lexical node that replaces a Mobiledoc atom.

    Raises:
        UnsupportedAtomError: If the atom name has no Lexical equivalent.
    """
    node_type = ATOM_TO_NODE.get(atom_name)
    if node_type is None:
        raise UnsupportedAtomError(atom_name)
    return node_type()


def append(parent: ContainerNode, child: LexicalNode) -> None:
    """Append ``child`` to ``parent`` and mark ``parent`` ltr if it gained text.

    Propagation is one level deep: ancestors of ``parent`` are untouched.
    """
    parent.children.append(child)
    if child.kind == "text" and child.text:
        parent.direction = "ltr"
