"""Command line interface for fortuner."""

from __future__ import annotations

import logging
import re
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from fortuner import __version__
from fortuner.config import MAX_SEED, NO_FORTUNES_MESSAGE, AppConfig
from fortuner.ingestion.loader import load_fortunes
from fortuner.models import FortuneFileError
from fortuner.selection.picker import pick_fortune
from fortuner.selection.search import Searcher, compile_matcher
from fortuner.utils.files import resolve_paths


console = Console(stderr=True)
app = typer.Typer(help="fortuner - print a random fortune, or every fortune matching a pattern")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"fortuner {__version__}")
        raise typer.Exit()


@app.command()
def main(
    sources: List[str] = typer.Argument(
        ..., metavar="FILE...", help="Input files or directories"
    ),
    pattern: Optional[str] = typer.Option(
        None, "--pattern", "-m", help="Print every fortune matching this regular expression"
    ),
    insensitive: bool = typer.Option(
        False, "--insensitive", "-i", help="Case-insensitive pattern matching"
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed", "-s", min=0, max=MAX_SEED, help="Random seed"
    ),
    list_files: bool = typer.Option(
        False, "--list", "-l", help="Print the fortune files that would be read and exit"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Print a random fortune from FILE..., or all fortunes matching --pattern."""
    _setup_logging(verbose)
    config = AppConfig(sources=sources, pattern=pattern, insensitive=insensitive, seed=seed)

    searcher = None
    if config.search_mode:
        try:
            searcher = Searcher(compile_matcher(config.pattern, insensitive=config.insensitive))
        except re.error as exc:
            raise typer.BadParameter(f"Invalid pattern: {exc}", param_hint="--pattern") from exc

    try:
        files = resolve_paths(config.sources)
        if list_files:
            for path in files:
                typer.echo(str(path))
            return
        corpus = load_fortunes(files, encoding=config.encoding)
    except FortuneFileError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}", highlight=False, soft_wrap=True)
        raise typer.Exit(code=1) from exc

    if searcher is not None:
        for line in searcher.search(corpus):
            typer.echo(line.text, err=line.is_header)
        return

    fortune = pick_fortune(corpus, config.seed)
    if fortune is None:
        typer.echo(NO_FORTUNES_MESSAGE)
        return
    typer.echo(fortune)
