"""Unit tests for the typed Mobiledoc source model.

WHY: The converter never indexes raw tuples directly; it relies on these
constructors and lookups. They decide which inputs are malformed and
which references are out of range.
"""

import pytest

from mobiledoc_converter.core.mobiledoc import (
    Atom,
    Marker,
    Markup,
    MarkupSection,
    Mobiledoc,
    parse_mobiledoc,
    section_kind,
)
from mobiledoc_converter.exceptions import IndexOutOfRangeError, MalformedInputError


class TestMarkup:

    def test_tag_only(self):
        markup = Markup.from_raw(["strong"])
        assert markup.tag == "strong"
        assert markup.attributes == ()
        assert markup.href is None

    def test_href_from_flat_pairs(self):
        markup = Markup.from_raw(["a", ["href", "https://example.com"]])
        assert markup.href == "https://example.com"

    def test_href_not_first_pair(self):
        markup = Markup.from_raw(["a", ["rel", "nofollow", "href", "https://example.com"]])
        assert markup.href == "https://example.com"
        assert markup.attribute("rel") == "nofollow"

    def test_empty_markup_is_malformed(self):
        with pytest.raises(MalformedInputError):
            Markup.from_raw([])


class TestAtom:

    def test_name_only(self):
        atom = Atom.from_raw(["soft-return"])
        assert atom.name == "soft-return"
        assert atom.text == ""
        assert atom.payload is None

    def test_full_tuple(self):
        atom = Atom.from_raw(["mention", "@ada", {"id": 1}])
        assert atom.text == "@ada"
        assert atom.payload == {"id": 1}


class TestMarker:

    def test_text_marker(self):
        marker = Marker.from_raw([0, [0, 1], 2, "Hi"])
        assert not marker.is_atom
        assert marker.open_markup_indexes == (0, 1)
        assert marker.close_count == 2
        assert marker.value == "Hi"

    def test_atom_marker(self):
        assert Marker.from_raw([1, [], 0, 0]).is_atom

    def test_wrong_arity_is_malformed(self):
        with pytest.raises(MalformedInputError, match="4 fields"):
            Marker.from_raw([0, [], "Hi"])

    def test_non_array_is_malformed(self):
        with pytest.raises(MalformedInputError):
            Marker.from_raw("Hi")


class TestMarkupSection:

    def test_parses_markers(self):
        section = MarkupSection.from_raw([1, "p", [[0, [], 0, "a"], [0, [], 0, "b"]]])
        assert section.tag_name == "p"
        assert [m.value for m in section.markers] == ["a", "b"]

    def test_missing_markers_is_malformed(self):
        with pytest.raises(MalformedInputError):
            MarkupSection.from_raw([1, "p"])


class TestLookups:

    def _doc(self):
        return Mobiledoc(
            sections=[],
            markups=[["strong"], ["a", ["href", "https://example.com"]]],
            atoms=[["soft-return", "", {}]],
        )

    def test_markup_lookup(self):
        assert self._doc().markup(1).tag == "a"

    def test_atom_lookup(self):
        assert self._doc().atom(0).name == "soft-return"

    def test_markup_out_of_range(self):
        with pytest.raises(IndexOutOfRangeError) as excinfo:
            self._doc().markup(2)
        assert excinfo.value.table == "markup"
        assert excinfo.value.size == 2

    def test_negative_index_does_not_wrap(self):
        with pytest.raises(IndexOutOfRangeError):
            self._doc().markup(-1)

    def test_atom_out_of_range_is_index_error(self):
        with pytest.raises(IndexError):
            self._doc().atom(3)

    def test_non_integer_index_is_malformed(self):
        with pytest.raises(MalformedInputError):
            self._doc().atom("0")


class TestSectionKind:

    @pytest.mark.parametrize("raw, expected", [
        ([1, "p", []], 1),
        ([10, 0], 10),
        ([], None),
        ("p", None),
        ([True, "p", []], None),
        ([[1], "p", []], None),
    ])
    def test_kind(self, raw, expected):
        assert section_kind(raw) == expected


class TestParseMobiledoc:

    def test_missing_tables_default_to_empty(self):
        doc = parse_mobiledoc({"sections": [[1, "p", []]]})
        assert doc.markups == []
        assert doc.atoms == []
        assert doc.version is None

    def test_keeps_version(self):
        assert parse_mobiledoc({"version": "0.3.1", "sections": [[1, "p", []]]}).version == "0.3.1"

    def test_non_array_sections_is_malformed(self):
        with pytest.raises(MalformedInputError):
            parse_mobiledoc({"sections": {"0": [1, "p", []]}})
