import logging
from pathlib import Path

import typer
from tree_sitter import Parser

from ruby_ambiguity.core.detector import detect_ambiguous_assignments
from ruby_ambiguity.core.discovery import build_type_matcher, iter_source_files
from ruby_ambiguity.core.frontend import LANGUAGE, get_ruby_parser, parse_source
from ruby_ambiguity.core.position import PositionLookupError
from ruby_ambiguity.core.render import format_diagnostic

logger = logging.getLogger(__name__)


def scan_file(path: Path, display_name: str, parser: Parser | None = None) -> list[str]:
    """Return the rendered diagnostics for one file.

    Unreadable and unparseable files yield no diagnostics.
    """
    logger.debug("Parsing %s", display_name)
    try:
        source_bytes = path.read_bytes()
        source_bytes.decode("utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("Skipping unreadable file %s: %s", display_name, exc)
        return []

    result = parse_source(source_bytes, display_name, parser)
    if result.tree is None:
        logger.debug("Skipping %s: parse failed", display_name)
        return []

    return [
        format_diagnostic(result.input, finding.span, finding.message)
        for finding in detect_ambiguous_assignments(result.tree)
    ]


def run(root: str | Path = ".") -> int:
    """Scan every Ruby file under *root* and print its diagnostics.

    Returns the process exit status, which does not depend on findings.
    """
    root_path = Path(root)
    matcher = build_type_matcher(LANGUAGE)
    parser = get_ruby_parser()

    for rel_path in iter_source_files(root_path, matcher):
        display_name = rel_path.as_posix()
        try:
            diagnostics = scan_file(root_path / rel_path, display_name, parser)
        except PositionLookupError:
            logger.warning("Skipping %s: finding could not be mapped to a source position", display_name, exc_info=True)
            continue
        for diagnostic in diagnostics:
            typer.echo(diagnostic)
    return 0
