from collections.abc import Iterator

from ruby_ambiguity.core.syntax import Assignment, Call, Sequence, SyntaxNode, VariableRef
from ruby_ambiguity.models import Finding

AMBIGUOUS_ASSIGNMENT = "warning: ambiguous assignment"
UNARY_MINUS = "-@"


def _check_statement(statement: SyntaxNode) -> Finding | None:
    if not isinstance(statement, Assignment):
        return None
    value, operator_span = statement.value, statement.operator_span
    if value is None or operator_span is None:
        return None

    if not isinstance(value, Call):
        return None
    selector_span, receiver = value.selector_span, value.receiver
    if selector_span is None or receiver is None:
        return None

    # `=` glued to the `-`
    if value.method_name != UNARY_MINUS or operator_span.end != selector_span.begin:
        return None

    if not isinstance(receiver, VariableRef):
        return None

    # whitespace between the `-` and its operand
    if selector_span.end >= receiver.expression_span.begin:
        return None

    return Finding(span=selector_span, message=AMBIGUOUS_ASSIGNMENT)


def detect_ambiguous_assignments(root: SyntaxNode) -> Iterator[Finding]:
    """Yield a finding for each top-level ``x =- y`` assignment, in source order.

    Only the statements of a top-level sequence are inspected; nested bodies
    are not descended into.
    """
    if not isinstance(root, Sequence):
        return
    for statement in root.statements:
        finding = _check_statement(statement)
        if finding is not None:
            yield finding
