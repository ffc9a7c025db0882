from ruby_ambiguity.core.position import DecodedInput
from ruby_ambiguity.models import SourceSpan


def format_diagnostic(decoded: DecodedInput, span: SourceSpan, message: str) -> str:
    """Render a span as a message, a location line and an underlined excerpt.

    The excerpt is the whole line holding ``span.begin``; a span running past
    that line still gets one caret per byte.
    """
    line_no, column = decoded.line_for_pos(span.begin)
    line = decoded.line_text(line_no)
    prefix = f"{decoded.name}:{line_no + 1}:{column + 1}"
    highlight = " " * column + "^" * span.size()
    return f"{message}\n  --> {prefix}\n\n{line}\n{highlight}"

