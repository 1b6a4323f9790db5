"""Lexical output schema loading and validation.

WHY: The converted state is handed to an editor that rejects nodes with
missing or misnamed fields. Validating against a JSON schema before
returning catches shape regressions at the converter, not in the editor.

HOW: lexical_schema.json ships inside the package. It is loaded from disk
once and cached at module level; validate_lexical() runs jsonschema over
a state dict.

RULES:
- The schema covers exactly the node kinds this converter emits
- Validation failures raise jsonschema.ValidationError unchanged
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema

_SCHEMA_PATH = Path(__file__).resolve().parent.parent / "lexical_schema.json"


def _load_schema() -> dict[str, Any]:
    with open(_SCHEMA_PATH, encoding="utf-8") as f:
        return json.load(f)


_CACHED_SCHEMA: dict[str, Any] | None = None


def get_schema() -> dict[str, Any]:
    """Return the Lexical state schema, loading it on first use."""
    global _CACHED_SCHEMA
    if _CACHED_SCHEMA is None:
        _CACHED_SCHEMA = _load_schema()
    return _CACHED_SCHEMA


def validate_lexical(state: dict[str, Any]) -> None:
    """Validate a Lexical state dict against the bundled schema.

    Raises:
        jsonschema.ValidationError: If the state does not match the schema.
    """
    jsonschema.validate(instance=state, schema=get_schema())
