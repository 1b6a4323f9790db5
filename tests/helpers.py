"""Document builders and expected node shapes shared by the test modules.

WHY: Most tests build small Mobiledoc documents and compare the converted
Lexical nodes. Spelling out every field of the expected nodes in one
place keeps each test focused on the behavior it checks, and catches
shape regressions everywhere at once.
"""

import json
from typing import Any, Dict, List, Optional


def make_mobiledoc(
    sections: List[Any],
    markups: Optional[List[Any]] = None,
    atoms: Optional[List[Any]] = None,
) -> str:
    """Serialize a Mobiledoc 0.3.1 document."""
    return json.dumps({
        "version": "0.3.1",
        "atoms": atoms or [],
        "cards": [],
        "markups": markups or [],
        "sections": sections,
    })


def text_node(text: str, fmt: int = 0) -> Dict[str, Any]:
    return {
        "detail": 0,
        "format": fmt,
        "mode": "normal",
        "style": "",
        "text": text,
        "type": "text",
        "version": 1,
    }


def link_node(url: str, children: List[Dict[str, Any]]) -> Dict[str, Any]:
    return {
        "children": children,
        "direction": "ltr",
        "format": "",
        "indent": 0,
        "type": "link",
        "rel": None,
        "target": None,
        "title": None,
        "url": url,
        "version": 1,
    }


def block_node(
    node_type: str,
    children: List[Dict[str, Any]],
    direction: Optional[str] = "ltr",
    **attributes: Any,
) -> Dict[str, Any]:
    data: Dict[str, Any] = {
        "children": children,
        "direction": direction,
        "format": "",
        "indent": 0,
        "type": node_type,
    }
    data.update(attributes)
    data["version"] = 1
    return data


LINEBREAK = {"type": "linebreak", "version": 1}

BLANK_STATE = {
    "root": {
        "children": [],
        "direction": None,
        "format": "",
        "indent": 0,
        "type": "root",
        "version": 1,
    }
}
