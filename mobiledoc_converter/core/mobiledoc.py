"""Typed views over the Mobiledoc source format.

WHY: Mobiledoc is array-encoded: a section is ``[1, "p", markers]``, a
marker is ``[0, [0, 1], 2, "text"]``, a markup is ``["a", ["href", url]]``.
Positional access scattered through the converter is hard to read and
easy to get wrong. These dataclasses give every position a name.

HOW: parse_mobiledoc() wraps the decoded JSON object in a Mobiledoc. The
section list stays raw (unknown section kinds are never inspected);
markup sections, markers, markups and atoms are parsed on demand by the
converter through the from_raw() constructors and the markup()/atom()
lookups.

RULES:
- Section kinds: 1 = markup, 2 = image, 3 = list, 10 = card
- Marker type 0 = text run, anything else = atom reference
- Markup attributes are a flat [name, value, name, value, ...] list
- Only an atom's name is used; text and payload are carried along
- Table lookups reject out-of-range and negative indexes
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence, Tuple

from mobiledoc_converter.exceptions import IndexOutOfRangeError, MalformedInputError

MARKUP_SECTION = 1
IMAGE_SECTION = 2
LIST_SECTION = 3
CARD_SECTION = 10

TEXT_MARKER = 0


def _as_sequence(raw: Any, what: str) -> Sequence[Any]:
    if not isinstance(raw, (list, tuple)):
        raise MalformedInputError("{} must be an array, got {!r}".format(what, raw))
    return raw


@dataclass(frozen=True)
class Markup:
    """An inline markup definition, e.g. ``["a", ["href", "https://..."]]``."""

    tag: str
    attributes: Tuple[Any, ...] = ()

    @classmethod
    def from_raw(cls, raw: Any) -> Markup:
        items = _as_sequence(raw, "Markup")
        if not items:
            raise MalformedInputError("Markup is empty")
        attributes = items[1] if len(items) > 1 and items[1] else ()
        return cls(tag=items[0], attributes=tuple(attributes))

    def attribute(self, name: str) -> Optional[Any]:
        """Return the value for ``name`` from the flat attribute pairs."""
        pairs = self.attributes
        for i in range(0, len(pairs) - 1, 2):
            if pairs[i] == name:
                return pairs[i + 1]
        return None

    @property
    def href(self) -> Optional[str]:
        return self.attribute("href")


@dataclass(frozen=True)
class Atom:
    """An inline non-text unit, e.g. ``["soft-return", "", {}]``."""

    name: str
    text: str = ""
    payload: Any = None

    @classmethod
    def from_raw(cls, raw: Any) -> Atom:
        items = _as_sequence(raw, "Atom")
        if not items:
            raise MalformedInputError("Atom is empty")
        return cls(
            name=items[0],
            text=items[1] if len(items) > 1 else "",
            payload=items[2] if len(items) > 2 else None,
        )


@dataclass(frozen=True)
class Marker:
    """One run inside a markup section.

    For text markers ``value`` is the literal text; for atom markers it is
    an index into the document's atoms.
    """

    marker_type: int
    open_markup_indexes: Tuple[int, ...]
    close_count: int
    value: Any

    @classmethod
    def from_raw(cls, raw: Any) -> Marker:
        items = _as_sequence(raw, "Marker")
        if len(items) != 4:
            raise MalformedInputError(
                "Marker must have 4 fields, got {}: {!r}".format(len(items), raw)
            )
        marker_type, opened, close_count, value = items
        return cls(
            marker_type=marker_type,
            open_markup_indexes=tuple(_as_sequence(opened, "Marker open markups")),
            close_count=close_count,
            value=value,
        )

    @property
    def is_atom(self) -> bool:
        return self.marker_type != TEXT_MARKER


@dataclass(frozen=True)
class MarkupSection:
    """A text section: ``[1, tagName, markers]``."""

    tag_name: str
    markers: Tuple[Marker, ...] = ()

    @classmethod
    def from_raw(cls, raw: Any) -> MarkupSection:
        items = _as_sequence(raw, "Section")
        if len(items) < 3:
            raise MalformedInputError(
                "Markup section must have 3 fields, got {}: {!r}".format(len(items), raw)
            )
        markers = _as_sequence(items[2], "Section markers")
        return cls(
            tag_name=items[1],
            markers=tuple(Marker.from_raw(m) for m in markers),
        )


def _lookup(table: Sequence[Any], index: Any, name: str) -> Any:
    if isinstance(index, bool) or not isinstance(index, int):
        raise MalformedInputError("{} index must be an integer, got {!r}".format(name, index))
    if index < 0 or index >= len(table):
        raise IndexOutOfRangeError(name, index, len(table))
    return table[index]


@dataclass(frozen=True)
class Mobiledoc:
    """A decoded Mobiledoc document.

    Attributes:
        sections: Raw section tuples in document order.
        markups: Raw markup tuples, referenced by index from markers.
        atoms: Raw atom tuples, referenced by index from atom markers.
        version: The Mobiledoc format version string, if present.
    """

    sections: List[Any] = field(default_factory=list)
    markups: List[Any] = field(default_factory=list)
    atoms: List[Any] = field(default_factory=list)
    version: Optional[str] = None

    def markup(self, index: int) -> Markup:
        return Markup.from_raw(_lookup(self.markups, index, "markup"))

    def atom(self, index: int) -> Atom:
        return Atom.from_raw(_lookup(self.atoms, index, "atom"))


def section_kind(raw_section: Any) -> Any:
    """Return the kind tag of a raw section, or None if it has no usable one.

    JSON booleans are rejected: in Python ``True == 1`` would otherwise
    turn ``[true, ...]`` into a markup section.
    """
    if not isinstance(raw_section, (list, tuple)) or not raw_section:
        return None
    kind = raw_section[0]
    if isinstance(kind, bool) or not isinstance(kind, (int, float, str)):
        return None
    return kind


def parse_mobiledoc(data: dict[str, Any]) -> Mobiledoc:
    """Wrap a decoded Mobiledoc JSON object.

    Args:
        data: The decoded object; must contain a truthy ``sections`` array.

    Raises:
        MalformedInputError: If sections, markups or atoms aren't arrays.
    """
    return Mobiledoc(
        sections=list(_as_sequence(data["sections"], "sections")),
        markups=list(_as_sequence(data.get("markups") or [], "markups")),
        atoms=list(_as_sequence(data.get("atoms") or [], "atoms")),
        version=data.get("version"),
    )
