"""Core conversion modules.

WHY: The core package holds the conversion itself: the Mobiledoc source
model, the Lexical node types, and the algorithm that turns one into the
other. The CLI and HTTP API are thin wrappers around it.

HOW: mobiledoc.py names the positions of the array-encoded source,
nodes.py builds Lexical nodes, formats.py computes text format bitmasks,
sections.py converts one markup section, converter.py dispatches sections
and exposes convert() / mobiledoc_to_lexical(), schema.py validates output.

RULES:
- Everything here is pure: no I/O besides reading the bundled schema
- No module-level mutable state besides the cached schema
"""
