"""Shared fixtures and helpers for tests."""

from collections.abc import Callable
from pathlib import Path

import pytest
from tree_sitter import Parser

from ruby_ambiguity.core.frontend import get_ruby_parser
from ruby_ambiguity.core.syntax import SyntaxNode, to_syntax_node

_REPO_ROOT = Path(__file__).parent.parent


# ---------------------------------------------------------------------------
# Auto-marker: tag everything under tests/unit as "unit"
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        if rel.parts and rel.parts[0] == "unit":
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Shared unit-test fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def ruby_parser() -> Parser:
    """Return a tree-sitter parser for Ruby."""
    return get_ruby_parser()


@pytest.fixture
def parse_ruby(ruby_parser: Parser) -> Callable[[str], SyntaxNode]:
    """Parse Ruby source straight into syntax variants, without error checks."""

    def _parse(source: str) -> SyntaxNode:
        tree = ruby_parser.parse(source.encode("utf-8"))
        return to_syntax_node(tree.root_node)

    return _parse


@pytest.fixture
def write_ruby(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write a file under ``tmp_path``, creating parent directories."""

    def _write(rel_path: str, source: str) -> Path:
        path = tmp_path / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(source, encoding="utf-8")
        return path

    return _write
