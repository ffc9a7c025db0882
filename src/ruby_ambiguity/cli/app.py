import logging
import os
from typing import Annotated

import typer

from ruby_ambiguity.core.scan import run

app = typer.Typer(
    name="ruby-ambiguity",
    help="Flag ambiguous `x =- y` assignments in Ruby sources.",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _configure_logging() -> None:
    level = os.getenv("RUBY_AMBIGUITY_LOG_LEVEL", "WARNING")
    logging.basicConfig(level=level.upper(), format="%(levelname)s %(name)s: %(message)s")


@app.command()
def scan(
    path: Annotated[str, typer.Argument(help="Directory to scan recursively.")] = ".",
) -> None:
    """Scan a directory tree for ambiguous assignments."""
    _configure_logging()
    raise typer.Exit(code=run(path))


def main() -> None:
    app()
