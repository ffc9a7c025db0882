from dataclasses import dataclass
from typing import cast

from tree_sitter import Parser
from tree_sitter_language_pack import SupportedLanguage, get_parser

from ruby_ambiguity.core.position import DecodedInput
from ruby_ambiguity.core.syntax import SyntaxNode, to_syntax_node

LANGUAGE = "ruby"


@dataclass(frozen=True)
class ParseResult:
    tree: SyntaxNode | None
    input: DecodedInput


def get_ruby_parser() -> Parser:
    return get_parser(cast(SupportedLanguage, LANGUAGE))


def parse_source(source_bytes: bytes, name: str, parser: Parser | None = None) -> ParseResult:
    """Parse Ruby source into the rule's syntax variants.

    A tree that needed error recovery (``ERROR`` or ``MISSING`` nodes) is
    treated as a failed parse and yields no tree.
    """
    decoded = DecodedInput(name, source_bytes)
    tree = (parser or get_ruby_parser()).parse(source_bytes)
    root = tree.root_node
    if root.has_error:
        return ParseResult(tree=None, input=decoded)
    return ParseResult(tree=to_syntax_node(root), input=decoded)
