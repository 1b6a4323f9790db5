"""Unit tests for the markup tag → Lexical format bitmask encoder.

WHY: Every text node's format comes from this mapping. A wrong bit shows
up as the wrong styling in the editor for every converted post.

RULES:
- Bit values follow Lexical: bold 1, italic 2, strikethrough 4, code 16,
  subscript 32, superscript 64
"""

import pytest

from mobiledoc_converter.core.formats import MARKUP_TO_FORMAT, TextFormat, format_bitmask


class TestSingleTags:

    @pytest.mark.parametrize("tag, expected", [
        ("strong", 1),
        ("b", 1),
        ("em", 2),
        ("i", 2),
        ("s", 4),
        ("code", 16),
        ("sub", 32),
        ("sup", 64),
    ])
    def test_tag_bit(self, tag, expected):
        assert format_bitmask([tag]) == expected

    def test_no_tags_is_zero(self):
        assert format_bitmask([]) == 0

    def test_link_tag_contributes_nothing(self):
        assert format_bitmask(["a"]) == 0

    def test_unknown_tag_contributes_nothing(self):
        assert format_bitmask(["u", "mark", "span"]) == 0


class TestCombinations:

    def test_bold_and_italic(self):
        assert format_bitmask(["strong", "em"]) == 3

    def test_synonyms_collapse(self):
        assert format_bitmask(["strong", "b"]) == 1
        assert format_bitmask(["em", "i"]) == 2

    def test_duplicates_are_idempotent(self):
        assert format_bitmask(["code", "code", "code"]) == 16

    def test_order_does_not_matter(self):
        assert format_bitmask(["sup", "a", "s", "strong"]) == format_bitmask(
            ["strong", "s", "a", "sup"]
        ) == 69

    def test_every_tag_together_never_sets_underline(self):
        fmt = format_bitmask(list(MARKUP_TO_FORMAT))
        assert fmt == 1 | 2 | 4 | 16 | 32 | 64
        assert not fmt & TextFormat.UNDERLINE

    def test_returns_plain_int(self):
        assert type(format_bitmask(["strong"])) is int


class TestTable:

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            MARKUP_TO_FORMAT["u"] = TextFormat.UNDERLINE
