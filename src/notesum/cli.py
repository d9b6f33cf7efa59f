"""Command line interface for notesum."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from notesum.config import (
    DEFAULT_ENDPOINT,
    DEFAULT_MODEL,
    DEFAULT_NOTES_DIR,
    ENDPOINT_ENV,
    MODEL_ENV,
    NOTES_DIR_ENV,
    AppConfig,
)
from notesum.errors import NoteSummaryError, NotesDirectoryError
from notesum.summarizer import Summarizer
from notesum.utils.files import iter_note_paths

LOGGER = logging.getLogger(__name__)

# stdout carries only the summary.
console = Console(stderr=True)
app = typer.Typer(help="notesum - summarize markdown notes with a local LLM")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


@app.command()
def summarize(
    url: str = typer.Option(
        DEFAULT_ENDPOINT, "--url", envvar=ENDPOINT_ENV, help="Ollama generate endpoint"
    ),
    model: str = typer.Option(DEFAULT_MODEL, "--model", envvar=MODEL_ENV, help="Model name"),
    notes: Path = typer.Option(
        DEFAULT_NOTES_DIR, "--notes", envvar=NOTES_DIR_ENV, help="Directory with .md notes"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Summarize every note in the notes directory."""
    _setup_logging(verbose)
    config = AppConfig(endpoint=url, model=model, notes_dir=notes)
    notes_dir = config.resolve_notes_dir(Path.cwd())

    LOGGER.info("loading notes from: %s", notes_dir)
    try:
        paths = list(iter_note_paths(notes_dir, config.suffix))
    except NotesDirectoryError as exc:
        raise typer.BadParameter(str(exc)) from exc

    if not paths:
        console.print("[yellow]No notes found, sending an empty prompt.[/yellow]")

    try:
        result = Summarizer(config).summarize(paths)
    except NoteSummaryError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    typer.echo(result.text)
