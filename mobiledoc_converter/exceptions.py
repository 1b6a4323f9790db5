"""Exception hierarchy for Mobiledoc → Lexical conversion.

WHY: Callers (CLI, HTTP API, library users) need typed exceptions to tell
bad input apart from unsupported content, and to map each to a sensible
exit code or HTTP status.

HOW: Every failure derives from ConversionError. Errors that correspond to
a builtin category (bad value, bad index) also inherit from that builtin
so generic ``except ValueError`` / ``except IndexError`` handlers keep
working.

RULES:
- Conversion is deterministic: the same input always raises the same error
- Messages name the offending index, tag, or atom
- No partial output is ever returned alongside an error
"""

from __future__ import annotations


class ConversionError(Exception):
    """Base class for all conversion failures."""


class MalformedInputError(ConversionError, ValueError):
    """Raised when the serialized Mobiledoc cannot be parsed.

    WHY: Syntactically invalid JSON (or a section/marker tuple too short to
    unpack) leaves nothing to convert. The caller gets a clear error rather
    than an empty document that hides the problem.

    RULES:
    - Chained from the underlying decoder error when there is one
    """


class IndexOutOfRangeError(ConversionError, IndexError):
    """Raised when a marker references a markup or atom that doesn't exist.

    WHY: Markers refer to the document's markups and atoms by position. A
    self-inconsistent document must fail loudly instead of silently picking
    a wrong entry (Python's negative indexing would otherwise wrap around).

    RULES:
    - Message includes the table name, the index, and the table size
    """

    def __init__(self, table: str, index: int, size: int) -> None:
        self.table = table
        self.index = index
        self.size = size
        super().__init__(
            "{} index {} out of range (document has {})".format(table, index, size)
        )


class MalformedNestingError(ConversionError):
    """Raised when markup open/close bookkeeping is not well nested.

    WHY: Markers close markups in last-opened-first-closed order. Closing
    more markups than are open cannot be converted at all; markups left
    open at the end of a section are only reported in strict mode.
    """


class UnsupportedSectionTagError(ConversionError):
    """Raised when a markup section carries a tag with no Lexical node."""

    def __init__(self, tag_name: str) -> None:
        self.tag_name = tag_name
        super().__init__("Unsupported markup section tag: {!r}".format(tag_name))


class UnsupportedAtomError(ConversionError):
    """Raised when an atom name has no Lexical node template."""

    def __init__(self, atom_name: str) -> None:
        self.atom_name = atom_name
        super().__init__("Unsupported atom: {!r}".format(atom_name))
