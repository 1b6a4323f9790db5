"""Mobiledoc → Lexical document conversion: loading, section dispatch, output.

WHY: This is the public entry point. Callers hand over a serialized
Mobiledoc string and get back a Lexical editor state, either as a dict or
as a JSON string ready to store.

HOW: load_mobiledoc() decodes the input (or reports that there is nothing
to convert). build_lexical_root() walks the top-level sections, converts
each markup section with convert_markup_section(), and appends the result
to a fresh root node. convert() serializes the root, validates it against
the Lexical schema, and returns it.

RULES:
- None, "" and documents without sections convert to the blank document
- Invalid JSON raises MalformedInputError; nothing is returned
- Only markup sections (kind 1) produce output; image, list and card
  sections are skipped, unknown kinds are skipped with a warning
- Root direction rule "first_child" inspects root.children[0] after every
  markup section (legacy behavior); "appended" inspects the new section
- Every call builds new nodes; no state survives between calls
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Optional, Union

from mobiledoc_converter.config import (
    DEFAULT_ROOT_DIRECTION,
    DEFAULT_STRICT_NESTING,
    DEFAULT_VALIDATE_OUTPUT,
    ROOT_DIRECTION_FIRST_CHILD,
    ROOT_DIRECTION_RULES,
)
from mobiledoc_converter.core.mobiledoc import (
    CARD_SECTION,
    IMAGE_SECTION,
    LIST_SECTION,
    MARKUP_SECTION,
    MarkupSection,
    Mobiledoc,
    parse_mobiledoc,
    section_kind,
)
from mobiledoc_converter.core.nodes import ContainerNode, append, make_container
from mobiledoc_converter.core.schema import validate_lexical
from mobiledoc_converter.core.sections import convert_markup_section
from mobiledoc_converter.exceptions import MalformedInputError

logger = logging.getLogger(__name__)

# Section kinds that exist in Mobiledoc but have no Lexical conversion yet
_UNSUPPORTED_SECTION_KINDS = {
    IMAGE_SECTION: "image",
    LIST_SECTION: "list",
    CARD_SECTION: "card",
}


@dataclass(frozen=True)
class ConversionOptions:
    """Per-call conversion settings.

    Defaults come from mobiledoc_converter.config (and so from the
    environment / .env).

    Attributes:
        root_direction: "first_child" (legacy) or "appended".
        strict_nesting: Raise MalformedNestingError on markups left open
            at the end of a section.
        validate_output: Validate the result against the Lexical schema.
    """

    root_direction: str = DEFAULT_ROOT_DIRECTION
    strict_nesting: bool = DEFAULT_STRICT_NESTING
    validate_output: bool = DEFAULT_VALIDATE_OUTPUT

    def __post_init__(self) -> None:
        if self.root_direction not in ROOT_DIRECTION_RULES:
            raise ValueError(
                "Unknown root direction rule '{}'. Expected one of: {}".format(
                    self.root_direction, ", ".join(sorted(ROOT_DIRECTION_RULES))
                )
            )


def blank_document() -> ContainerNode:
    """Return a fresh, empty Lexical root node."""
    return make_container("root")


def load_mobiledoc(serialized: Optional[Union[str, bytes]]) -> Optional[Mobiledoc]:
    """Decode a serialized Mobiledoc.

    Returns:
        The decoded document, or None when there is nothing to convert
        (empty input, a non-object, or no sections).

    Raises:
        MalformedInputError: If the input is not valid JSON, or is bytes
            that are not valid UTF-8.
    """
    if not serialized:
        return None

    try:
        data = json.loads(serialized)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise MalformedInputError("Invalid Mobiledoc JSON: {}".format(exc)) from exc

    if not isinstance(data, dict) or not data.get("sections"):
        return None

    return parse_mobiledoc(data)


def build_lexical_root(
    mobiledoc: Mobiledoc,
    options: Optional[ConversionOptions] = None,
) -> ContainerNode:
    """Convert every supported top-level section and collect them under a root."""
    options = options or ConversionOptions()
    root = blank_document()

    for position, raw_section in enumerate(mobiledoc.sections):
        kind = section_kind(raw_section)

        if kind == MARKUP_SECTION:
            section = MarkupSection.from_raw(raw_section)
            block = convert_markup_section(
                section, mobiledoc, strict_nesting=options.strict_nesting
            )
            append(root, block)

            if options.root_direction == ROOT_DIRECTION_FIRST_CHILD:
                probe = root.children[0]
            else:
                probe = block
            if probe.children:
                root.direction = "ltr"
        elif kind in _UNSUPPORTED_SECTION_KINDS:
            logger.debug(
                "Skipping %s section at position %d (not supported)",
                _UNSUPPORTED_SECTION_KINDS[kind], position,
            )
        else:
            logger.warning("Skipping section at position %d with unknown kind %r", position, kind)

    logger.debug(
        "Converted %d section(s) into %d Lexical block(s)",
        len(mobiledoc.sections), len(root.children),
    )
    return root


def convert(
    serialized: Optional[Union[str, bytes]],
    options: Optional[ConversionOptions] = None,
) -> dict[str, Any]:
    """Convert a serialized Mobiledoc into a Lexical editor state dict.

    Args:
        serialized: Mobiledoc JSON text, or None / "" for an empty document.
        options: Conversion settings; defaults from config when omitted.

    Returns:
        ``{"root": {...}}`` in the Lexical serialized format.

    Raises:
        MalformedInputError: On invalid JSON or unusable section/marker tuples.
        IndexOutOfRangeError: On markup/atom references outside their tables.
        MalformedNestingError: On unbalanced markup closes (or leftovers in
            strict mode).
        UnsupportedSectionTagError: On markup sections with unknown tags.
        UnsupportedAtomError: On atoms with no Lexical equivalent.
        jsonschema.ValidationError: If output validation is on and fails.
    """
    options = options or ConversionOptions()

    mobiledoc = load_mobiledoc(serialized)
    if mobiledoc is None:
        root = blank_document()
    else:
        root = build_lexical_root(mobiledoc, options)

    state = {"root": root.to_dict()}
    if options.validate_output:
        validate_lexical(state)
    return state


def mobiledoc_to_lexical(
    serialized: Optional[Union[str, bytes]],
    options: Optional[ConversionOptions] = None,
) -> str:
    """Convert a serialized Mobiledoc into a serialized Lexical editor state."""
    return json.dumps(convert(serialized, options), ensure_ascii=False, separators=(",", ":"))
