"""Unit tests for the byte-offset position index."""

import pytest

from ruby_ambiguity.core.position import DecodedInput, PositionLookupError
from ruby_ambiguity.models import SourceSpan


def test_splits_lines_with_trailing_newline() -> None:
    decoded = DecodedInput("a.rb", b"x =- y\n")

    assert [(line.start, line.end, line.ends_with_eof) for line in decoded.lines] == [
        (0, 7, False),
        (7, 7, True),
    ]


def test_empty_input_has_one_line() -> None:
    decoded = DecodedInput("empty.rb", b"")
    assert len(decoded.lines) == 1
    assert decoded.line_col_for_pos(0) == (0, 0)


def test_line_col_for_pos() -> None:
    decoded = DecodedInput("a.rb", b"y = 1\nx =- y\n")

    assert decoded.line_col_for_pos(0) == (0, 0)
    assert decoded.line_col_for_pos(5) == (0, 5)
    assert decoded.line_col_for_pos(6) == (1, 0)
    assert decoded.line_col_for_pos(9) == (1, 3)


def test_columns_count_bytes() -> None:
    decoded = DecodedInput("a.rb", "é =- y\n".encode())
    # "é" is two bytes in UTF-8
    assert decoded.line_col_for_pos(3) == (0, 3)


def test_out_of_range_offsets_resolve_to_none() -> None:
    decoded = DecodedInput("a.rb", b"abc")
    assert decoded.line_col_for_pos(3) == (0, 3)
    assert decoded.line_col_for_pos(4) is None
    assert decoded.line_col_for_pos(-1) is None


def test_line_for_pos_raises_on_out_of_range() -> None:
    decoded = DecodedInput("a.rb", b"abc")
    with pytest.raises(PositionLookupError, match="a.rb: offset 10"):
        decoded.line_for_pos(10)


def test_line_text_excludes_terminator() -> None:
    decoded = DecodedInput("a.rb", b"first\nsecond\nlast")
    assert decoded.line_text(0) == "first"
    assert decoded.line_text(1) == "second"
    assert decoded.line_text(2) == "last"


def test_source_extracts_span_text() -> None:
    decoded = DecodedInput("a.rb", b"x =- y\n")
    assert decoded.source(SourceSpan(begin=3, end=4)) == "-"
    assert decoded.source(SourceSpan(begin=3, end=40)) is None
