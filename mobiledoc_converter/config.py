"""Configuration defaults and .env loading.

WHY: A few conversion behaviors are deliberate choices between
compatibility with the legacy converter and stricter or corrected rules.
Keeping the defaults here, overridable from the environment, lets
deployments pick without code changes.

HOW: python-dotenv loads the .env file on import. Each setting is a
module-level constant read from the environment with a fallback.
ConversionOptions in core/converter.py uses them as its field defaults.

RULES:
- ROOT_DIRECTION_RULES lists the accepted root direction rules
- Boolean variables accept "true"/"false" (case-insensitive)
- Nothing here is mutated at runtime
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Load .env from the project root (where the script is run from)
load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() == "true"


# ---------------------------------------------------------------------------
# Conversion behavior
# ---------------------------------------------------------------------------

ROOT_DIRECTION_FIRST_CHILD = "first_child"
"""Root becomes ltr when the *first* root child has children (legacy rule)."""

ROOT_DIRECTION_APPENDED = "appended"
"""Root becomes ltr when the section just appended has children."""

ROOT_DIRECTION_RULES: frozenset[str] = frozenset({
    ROOT_DIRECTION_FIRST_CHILD,
    ROOT_DIRECTION_APPENDED,
})

DEFAULT_ROOT_DIRECTION = os.getenv("MOBILEDOC_ROOT_DIRECTION", ROOT_DIRECTION_FIRST_CHILD)
DEFAULT_STRICT_NESTING = _env_flag("MOBILEDOC_STRICT_NESTING", "false")
DEFAULT_VALIDATE_OUTPUT = _env_flag("MOBILEDOC_VALIDATE_OUTPUT", "true")

# ---------------------------------------------------------------------------
# HTTP API
# ---------------------------------------------------------------------------

API_HOST = os.getenv("MOBILEDOC_API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("MOBILEDOC_API_PORT", "8000"))
