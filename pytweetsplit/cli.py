"""Command-line front end: split text files into posts and print them."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import NoReturn, Optional

import typer

from . import __version__
from .constants import MAX_POST_LENGTH, PROGRAM_NAME
from .errors import ConfigurationError
from .pipeline import ThreadPipeline
from .pipeline_config import NewlineMode, PipelineConfig

logger = logging.getLogger(__name__)

STDIN_NAME = "-"

app = typer.Typer(add_completion=False)


def _version_callback(value: bool) -> None:
    if not value:
        return
    typer.echo(f"{PROGRAM_NAME} {__version__}")
    raise typer.Exit(code=0)


def _raise_exit(message: str, *, cause: BaseException | None = None) -> NoReturn:
    typer.echo(message, err=True)
    if cause is not None:
        raise typer.Exit(code=2) from cause
    raise typer.Exit(code=2)


def _read_source(path: Path) -> str:
    if str(path) == STDIN_NAME:
        return sys.stdin.read()
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        _raise_exit(f"Cannot read {path}: {exc}", cause=exc)


@app.command()
def split(
    files: Optional[list[Path]] = typer.Argument(
        None, help="Text files to split; '-' or nothing reads stdin."
    ),
    limit: int = typer.Option(
        MAX_POST_LENGTH, "--limit", "-l", help="Maximum characters per post."
    ),
    newlines: NewlineMode = typer.Option(
        NewlineMode.strip, "--newlines", help="How to treat line breaks."
    ),
    show_length: bool = typer.Option(
        True, "--show-length/--no-show-length", help="Print each post's length."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Split each source into numbered posts of at most LIMIT characters."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )

    try:
        cfg = PipelineConfig(limit=limit, newlines=newlines)
    except ConfigurationError as exc:
        _raise_exit(str(exc), cause=exc)
    pipe = ThreadPipeline(cfg)

    for path in files or [Path(STDIN_NAME)]:
        typer.echo(f"Sourcing post text from file: {path}")
        text = _read_source(path)
        try:
            result = pipe.run(text)
        except ConfigurationError as exc:
            _raise_exit(str(exc), cause=exc)
        logger.debug("%s: %d posts", path, len(result))
        for post in result.posts:
            typer.echo(f">{post.text}")
            if show_length:
                typer.echo(f"{len(post.text)} chars")
        typer.echo("=====")


def main() -> None:
    """Entrypoint for CLI execution."""
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
