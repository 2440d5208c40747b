"""Command line interface for pathfinder."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from pathfinder.config.parser import ConfigurationError, load_config
from pathfinder.tools.fs_walker import PathSearch
from pathfinder.tools.lister import RootError
from pathfinder.tools.sinks import make_sink


console = Console(emoji=False)
err_console = Console(stderr=True, emoji=False)
app = typer.Typer(help="pathfinder - parallel path substring search", add_completion=False)


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _fail(message: str) -> None:
    err_console.print(message, style="red", markup=False, highlight=False, emoji=False, soft_wrap=True)
    raise typer.Exit(code=1)


@app.command()
def main(
    query_arg: Optional[str] = typer.Argument(None, metavar="QUERY", help="Query, used when --query is empty"),
    root: Optional[str] = typer.Option(None, "--root", help="Root directory to search [default: .]"),
    query: str = typer.Option("", "--query", help="Query to search for"),
    as_json: bool = typer.Option(False, "--json", help="Stream results as JSON"),
    config_file: Optional[Path] = typer.Option(None, "--config", help="YAML file with default options"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Search for paths containing QUERY under the root directory."""
    _setup_logging(verbose)

    try:
        config = load_config(
            root=root,
            query=query,
            positional=query_arg,
            as_json=as_json,
            config_path=config_file,
        )
    except ConfigurationError as e:
        _fail(str(e))
        return

    console.print(
        f"-> Searching for `{config.query}` in `{config.root}`",
        style="blue", markup=False, highlight=False, emoji=False, soft_wrap=True,
    )

    path_search = PathSearch(config, sink=make_sink(config.as_json, console))
    try:
        results = path_search.run()
    except RootError as e:
        _fail(str(e))
        return
    except KeyboardInterrupt:
        path_search.cancel()
        err_console.print("Search cancelled", style="yellow")
        raise typer.Exit(code=130)

    console.print(results.summary(), style="cyan", markup=False, highlight=False, emoji=False, soft_wrap=True)


if __name__ == "__main__":
    app()
