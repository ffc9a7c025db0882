from bisect import bisect_right

from ruby_ambiguity.models import SourceLine, SourceSpan


class PositionLookupError(LookupError):
    """An offset does not belong to the input it was resolved against."""


def _split_lines(source_bytes: bytes) -> list[SourceLine]:
    lines: list[SourceLine] = []
    start = 0
    while True:
        newline = source_bytes.find(b"\n", start)
        if newline == -1:
            lines.append(SourceLine(start=start, end=len(source_bytes), ends_with_eof=True))
            return lines
        lines.append(SourceLine(start=start, end=newline + 1, ends_with_eof=False))
        start = newline + 1


class DecodedInput:
    """Source text of one file plus its line index.

    Offsets and columns are byte based, matching the spans reported by the
    parser.
    """

    def __init__(self, name: str, source_bytes: bytes) -> None:
        self.name = name
        self.bytes = source_bytes
        self.lines = _split_lines(source_bytes)
        self._line_starts = [line.start for line in self.lines]

    def line_col_for_pos(self, offset: int) -> tuple[int, int] | None:
        if offset < 0 or offset > len(self.bytes):
            return None
        line_no = bisect_right(self._line_starts, offset) - 1
        return line_no, offset - self.lines[line_no].start

    def line_for_pos(self, offset: int) -> tuple[int, int]:
        position = self.line_col_for_pos(offset)
        if position is None:
            raise PositionLookupError(f"{self.name}: offset {offset} is outside the input ({len(self.bytes)} bytes)")
        return position

    def source(self, span: SourceSpan) -> str | None:
        if span.end > len(self.bytes):
            return None
        return self.bytes[span.begin : span.end].decode("utf-8", errors="replace")

    def line_text(self, line_no: int) -> str:
        line = self.lines[line_no]
        text = self.source(SourceSpan(begin=line.start, end=line.line_end))
        assert text is not None
        return text
