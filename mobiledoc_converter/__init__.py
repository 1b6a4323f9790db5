"""Mobiledoc → Lexical converter.

WHY: Posts written with the legacy Mobiledoc editor are stored in a
compact, array-encoded format the Lexical editor cannot load. This
package rebuilds them as Lexical editor state so existing content opens
in the new editor unchanged.

HOW: Load (decode the Mobiledoc JSON) → dispatch (walk top-level sections)
→ convert (rebuild each markup section as a Lexical node tree) → validate
(check the result against the bundled Lexical schema). The CLI and HTTP
API both call the same convert() function.

RULES:
- Conversion is a pure function of its input
- Only markup sections (paragraphs, headings, quotes) are converted;
  image, list and card sections are skipped
- Output always validates against lexical_schema.json unless disabled
"""

from mobiledoc_converter.core.converter import (
    ConversionOptions,
    convert,
    mobiledoc_to_lexical,
)

__version__ = "0.1.0"

__all__ = ["ConversionOptions", "convert", "mobiledoc_to_lexical", "__version__"]
