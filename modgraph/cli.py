"""CLI entry point: modgraph.

Usage:
    modgraph                         # tree for the module in the current directory
    modgraph ~/src/project --json    # index-based JSON graph
    modgraph --max-depth 2 .         # stop two levels below the root
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

import click

from modgraph import __version__
from modgraph.config import load_settings
from modgraph.core.logging import setup_logging
from modgraph.exceptions import ModGraphError, ProjectRootError
from modgraph.resolver.locator import CacheLocator
from modgraph.resolver.models import UNLIMITED
from modgraph.resolver.render import GraphAccumulator, TreeWriter
from modgraph.resolver.walker import DependencyWalker


def resolve_project_dir(raw: str) -> Path:
    """Turn ``.``, ``~/...`` or a relative path into an absolute directory."""
    raw = raw.strip()
    if raw.startswith("~"):
        path = Path(raw).expanduser()
    else:
        path = Path(raw)
    if not path.is_absolute():
        path = Path(os.getcwd()) / path
    path = path.resolve()
    if not path.is_dir():
        raise ProjectRootError(f"{path} is not a directory")
    return path


def _validate_depth(ctx: click.Context, param: click.Parameter, value: int) -> int:
    if value != UNLIMITED and value < 1:
        raise click.BadParameter("must be -1 or an integer greater than 0")
    return value


@click.command()
@click.argument("module_path", required=False)
@click.option(
    "--module-path",
    "module_path_opt",
    default=None,
    help="Path to the module to scan, relative or absolute. Defaults to the current directory.",
)
@click.option(
    "--max-depth",
    type=int,
    default=UNLIMITED,
    show_default=True,
    callback=_validate_depth,
    help="Maximum recursion level, -1 for no limit.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["tree", "graph"]),
    default="tree",
    show_default=True,
    help="Indented text tree or index-based JSON graph.",
)
@click.option("--json", "as_json", is_flag=True, help="Shortcut for --format graph.")
@click.option(
    "--gopath",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Module cache root (default: $GOPATH or ~/go).",
)
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
@click.version_option(version=__version__)
def main(
    module_path: str | None,
    module_path_opt: str | None,
    max_depth: int,
    output_format: str,
    as_json: bool,
    gopath: Path | None,
    verbose: bool,
) -> None:
    """Print the dependency tree of a Go module using only the local module cache."""
    settings = load_settings()
    setup_logging(settings, verbose=verbose)

    sink = GraphAccumulator() if as_json or output_format == "graph" else TreeWriter()
    locator = CacheLocator(gopath or settings.gopath)

    try:
        project_dir = resolve_project_dir(module_path or module_path_opt or ".")
        DependencyWalker(locator, sink).walk(project_dir, max_depth)
    except ModGraphError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(sink.render(), nl=False)
    if isinstance(sink, GraphAccumulator):
        click.echo()


if __name__ == "__main__":
    main()
