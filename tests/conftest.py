"""Shared test fixtures for the mobiledoc_converter test suite.

WHY: Several modules (converter, CLI, API) exercise the same realistic
post. Centralizing it here keeps the expected output in one place.

HOW: rich_mobiledoc is a serialized post mixing every supported construct
plus skipped sections; rich_lexical_root is its expected Lexical root.

RULES:
- Documents are always serialized to JSON strings, as real callers pass them
"""

import pytest

from helpers import LINEBREAK, block_node, link_node, make_mobiledoc, text_node


@pytest.fixture
def rich_mobiledoc():
    """A post with a heading, formatted text, a link, a soft return, a quote,
    and an image and a card section that are skipped."""
    return make_mobiledoc(
        sections=[
            [1, "h2", [[0, [], 0, "Release notes"]]],
            [1, "p", [
                [0, [], 0, "Read "],
                [0, [0], 0, "the "],
                [0, [1], 2, "docs"],
                [0, [], 0, " first."],
                [1, [], 0, 0],
                [0, [2], 1, "Then ship."],
            ]],
            [2, "https://example.com/cover.png"],
            [1, "blockquote", [[0, [3], 1, "Stay curious"]]],
            [10, 0],
        ],
        markups=[
            ["a", ["href", "https://example.com/docs"]],
            ["strong"],
            ["em"],
            ["i"],
        ],
        atoms=[["soft-return", "", {}]],
    )


@pytest.fixture
def rich_lexical_root():
    """Expected Lexical root for rich_mobiledoc."""
    return block_node("root", [
        block_node("heading", [text_node("Release notes")], tag="h2"),
        block_node("paragraph", [
            text_node("Read "),
            link_node("https://example.com/docs", [text_node("the "), text_node("docs", 1)]),
            text_node(" first."),
            LINEBREAK,
            text_node("Then ship.", 2),
        ]),
        block_node("quote", [text_node("Stay curious", 2)]),
    ])
