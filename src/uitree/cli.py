"""CLI for uitree (accessor dumps and tree outlines from debug descriptions)."""

import json
import sys
from pathlib import Path
from typing import Annotated

import typer
from loguru import logger

from uitree.config import DEFAULT_ROOT_EXPRESSION
from uitree.core.address.dump import tree_accessors
from uitree.core.tree.builder import build_tree_from_description
from uitree.core.tree.render import render_tree
from uitree.logging_config import configure_logging

app = typer.Typer(help="Rebuild UI element trees from debug descriptions and list accessors.")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only log errors"),
) -> None:
    configure_logging(verbose=verbose, quiet=quiet)


def _read_input(source: Path) -> str:
    """Read the debug description from a file, or stdin for '-'."""
    if str(source) == "-":
        return sys.stdin.read()
    if not source.exists():
        logger.error("Input file not found: {}", source)
        raise typer.Exit(1)
    try:
        return source.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Cannot read {}: {}", source, e)
        raise typer.Exit(1) from e


@app.command()
def dump(
    source: Path = typer.Argument(..., help="Debug description file ('-' for stdin)"),
    root: Annotated[
        str,
        typer.Option("--root", "-r", help="Variable name of the application in test code"),
    ] = DEFAULT_ROOT_EXPRESSION,
    output_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """Print an accessor expression for every addressable element."""
    tree_root = build_tree_from_description(_read_input(source))
    if tree_root is None:
        typer.echo("No element tree could be parsed from the input.")
        raise typer.Exit(1)

    accessors = tree_accessors(tree_root, root)
    if output_json:
        typer.echo(json.dumps({"accessors": accessors, "count": len(accessors)}, indent=2))
    else:
        for accessor in accessors:
            typer.echo(accessor)


@app.command()
def tree(
    source: Path = typer.Argument(..., help="Debug description file ('-' for stdin)"),
) -> None:
    """Print the parsed element tree as an indented outline."""
    root = build_tree_from_description(_read_input(source))
    if root is None:
        typer.echo("No element tree could be parsed from the input.")
        raise typer.Exit(1)
    typer.echo(render_tree(root), nl=False)
