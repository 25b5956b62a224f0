"""Tests for TextDocument addressing and atomic edits."""

from pathlib import Path

import pytest

from oklch_names.core.document import TextDocument
from oklch_names.core.span import Position, Span
from oklch_names.edit.ops import Delete, Insert, Replace
from oklch_names.errors import EditRejected


class TestAddressing:
    """Line and offset conversions."""

    def test_lines(self) -> None:
        doc = TextDocument("a {\r\n  color: red;\n}")
        lines = list(doc.lines())
        assert [l.text for l in lines] == ["a {", "  color: red;", "}"]
        assert [l.start for l in lines] == [0, 5, 19]
        assert doc.line_count == 3

    def test_trailing_newline_gives_empty_last_line(self) -> None:
        doc = TextDocument("a\n")
        assert doc.line_count == 2
        assert doc.line_at(1).text == ""

    def test_offset_and_position(self) -> None:
        doc = TextDocument("ab\ncde\nf")
        assert doc.offset_at(Position(1, 2)) == 5
        assert doc.position_at(5) == Position(1, 2)
        assert doc.position_at(3) == Position(1, 0)

    def test_offset_clamps_character(self) -> None:
        doc = TextDocument("ab\ncde")
        assert doc.offset_at(Position(0, 99)) == 2

    def test_line_out_of_range(self) -> None:
        with pytest.raises(IndexError):
            TextDocument("a").line_at(1)

    def test_get_text(self) -> None:
        doc = TextDocument("hello world")
        assert doc.get_text(Span(6, 11)) == "world"
        assert doc.get_text() == "hello world"


class TestApplyEdits:
    """All-or-nothing application."""

    def test_applies_all(self) -> None:
        doc = TextDocument("one two three")
        doc.apply_edits([Replace(Span(0, 3), "1"), Delete(Span(3, 7)), Insert(13, "!")])
        assert doc.text == "1 three!"
        assert doc.version == 1

    def test_insert_at_end_of_replace(self) -> None:
        doc = TextDocument("abc")
        doc.apply_edits([Insert(3, "+"), Replace(Span(0, 3), "xyz")])
        assert doc.text == "xyz+"

    def test_replace_starting_at_insert_point(self) -> None:
        doc = TextDocument("ab")
        doc.apply_edits([Insert(1, "-"), Replace(Span(1, 2), "B")])
        assert doc.text == "a-B"

    def test_overlap_rejected_and_unchanged(self) -> None:
        doc = TextDocument("abcdef")
        with pytest.raises(EditRejected):
            doc.apply_edits([Replace(Span(0, 3), "x"), Delete(Span(2, 4))])
        assert doc.text == "abcdef"
        assert doc.version == 0

    def test_two_inserts_at_same_point_rejected(self) -> None:
        doc = TextDocument("ab")
        with pytest.raises(EditRejected):
            doc.apply_edits([Insert(1, "x"), Insert(1, "y")])
        assert doc.text == "ab"

    def test_out_of_bounds_rejected(self) -> None:
        doc = TextDocument("ab")
        with pytest.raises(EditRejected):
            doc.apply_edits([Insert(0, "x"), Insert(5, "y")])
        assert doc.text == "ab"

    def test_lines_refresh_after_edit(self) -> None:
        doc = TextDocument("a\nb")
        doc.apply_edits([Insert(1, "\nnew")])
        assert [l.text for l in doc.lines()] == ["a", "new", "b"]


class TestFileIO:
    """Loading and saving keeps text byte-for-byte."""

    def test_roundtrip_preserves_crlf(self, tmp_path: Path) -> None:
        path = tmp_path / "style.css"
        path.write_bytes(b"a {\r\n  color: oklch(1 0 0);\r\n}\r\n")
        doc = TextDocument.load(path)
        assert doc.line_at(1).text == "  color: oklch(1 0 0);"
        out = doc.save(tmp_path / "out.css")
        assert out.read_bytes() == path.read_bytes()

    def test_save_without_path(self) -> None:
        with pytest.raises(ValueError):
            TextDocument("x").save()
