"""Syntax node variants the ambiguity rule looks at.

Only the shapes the rule descends into are classified further; every other
construct becomes an ``Other`` leaf that keeps its kind and span but none of
its children.
"""

from __future__ import annotations

from dataclasses import dataclass

from tree_sitter import Node

from ruby_ambiguity.models import SourceSpan

# tree-sitter reports the bare operator token, Ruby names the method with an "@".
_UNARY_METHOD_NAMES = {
    "-": "-@",
    "-@": "-@",
    "+": "+@",
    "+@": "+@",
}


@dataclass(frozen=True)
class Sequence:
    statements: tuple[SyntaxNode, ...]


@dataclass(frozen=True)
class Assignment:
    target: str
    value: SyntaxNode | None
    operator_span: SourceSpan | None


@dataclass(frozen=True)
class Call:
    method_name: str
    selector_span: SourceSpan | None
    receiver: SyntaxNode | None


@dataclass(frozen=True)
class VariableRef:
    name: str
    expression_span: SourceSpan


@dataclass(frozen=True)
class Other:
    kind: str
    expression_span: SourceSpan


SyntaxNode = Sequence | Assignment | Call | VariableRef | Other


def _span(node: Node) -> SourceSpan:
    return SourceSpan(begin=node.start_byte, end=node.end_byte)


def _text(node: Node) -> str:
    return (node.text or b"").decode("utf-8", errors="replace")


def _anonymous_child(node: Node, token: str) -> Node | None:
    for child in node.children:
        if not child.is_named and child.type == token:
            return child
    return None


def _classify_assignment(node: Node) -> SyntaxNode:
    left = node.child_by_field_name("left")
    if left is None or left.type != "identifier":
        return Other(kind=node.type, expression_span=_span(node))
    right = node.child_by_field_name("right")
    operator = _anonymous_child(node, "=")
    return Assignment(
        target=_text(left),
        value=to_syntax_node(right) if right is not None else None,
        operator_span=_span(operator) if operator is not None else None,
    )


def _classify_unary(node: Node) -> SyntaxNode:
    operator = node.child_by_field_name("operator")
    operand = node.child_by_field_name("operand")
    if operator is None:
        return Other(kind=node.type, expression_span=_span(node))
    token = operator.type
    return Call(
        method_name=_UNARY_METHOD_NAMES.get(token, token),
        selector_span=_span(operator),
        receiver=to_syntax_node(operand) if operand is not None else None,
    )


def to_syntax_node(node: Node) -> SyntaxNode:
    """Classify a tree-sitter Ruby node into one of the rule's variants."""
    if node.type == "program":
        return Sequence(statements=tuple(to_syntax_node(child) for child in node.named_children))
    if node.type == "assignment":
        return _classify_assignment(node)
    if node.type == "unary":
        return _classify_unary(node)
    if node.type == "identifier":
        return VariableRef(name=_text(node), expression_span=_span(node))
    return Other(kind=node.type, expression_span=_span(node))
