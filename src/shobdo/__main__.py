"""CLI entry point for Shobdo."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from shobdo import __version__
from shobdo.config import Settings
from shobdo.lexicon.store import (
    BUNDLED_LEXICON_PATH,
    LexiconValidationError,
    load_lexicon,
)
from shobdo.logging_setup import configure_logging
from shobdo.normalize import contains_bangla
from shobdo.pipeline.orchestrator import WordChecker
from shobdo.pipeline.schemas import OriginType

console = Console()

TYPE_STYLES = {
    OriginType.PURE: "green",
    OriginType.FOREIGN: "red",
    OriginType.UNKNOWN: "yellow",
    OriginType.INVALID: "magenta",
}


@click.group()
@click.version_option(version=__version__)
@click.option("--log-level", default="warning", help="Log level")
def cli(log_level: str):
    """Shobdo - Bengali word-origin checker."""
    configure_logging(log_level)


@cli.command()
@click.argument("word")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
@click.option("--offline", is_flag=True, help="Use the local lexicon only")
@click.option(
    "--locale",
    type=click.Choice(["bn", "en"]),
    default=None,
    help="Language of the reason text",
)
def check(word: str, as_json: bool, offline: bool, locale: str | None):
    """Check whether WORD is a pure Bengali word.

    Example: shobdo check আকাশ

    Exits 0 for a pure word, 1 otherwise.
    """
    settings = Settings.from_env()
    if locale:
        settings.locale = locale

    try:
        checker = WordChecker(settings=settings)
    except (LexiconValidationError, FileNotFoundError) as e:
        console.print(f"[red]Error loading lexicon: {e}[/red]")
        sys.exit(1)

    if word.strip() and not contains_bangla(word):
        console.print("[dim]Note: input contains no Bengali characters[/dim]")

    result = checker.lookup(word, offline=offline)

    if as_json:
        click.echo(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    else:
        color = TYPE_STYLES[result.type]
        console.print(
            Panel(
                f"[bold {color}]{result.type.value.upper()}[/bold {color}]\n"
                f"{result.reason}",
                title=result.word or "(empty)",
            )
        )

    sys.exit(0 if result.valid else 1)


@cli.command()
@click.option(
    "--path",
    type=click.Path(path_type=Path),
    default=None,
    help="Lexicon YAML to validate (default: bundled lexicon)",
)
def lexicon(path: Path | None):
    """Load and validate a lexicon file."""
    try:
        loaded = load_lexicon(path)
    except (LexiconValidationError, FileNotFoundError) as e:
        console.print(f"[red]Invalid lexicon: {e}[/red]")
        sys.exit(1)

    table = Table(title="Lexicon")
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Path", str(path or BUNDLED_LEXICON_PATH))
    table.add_row("Pure words", str(len(loaded.pure_words)))
    table.add_row("Foreign words", str(len(loaded.foreign_words)))
    console.print(table)


@cli.command()
@click.option("--host", default="127.0.0.1", help="Bind host")
@click.option("--port", default=8000, help="Bind port")
@click.option("--reload", is_flag=True, help="Reload on code changes")
@click.pass_context
def serve(ctx: click.Context, host: str, port: int, reload: bool):
    """Start the API server."""
    import uvicorn

    log_level = ctx.parent.params.get("log_level", "info") if ctx.parent else "info"
    console.print(f"[bold blue]Starting Shobdo API at http://{host}:{port}[/bold blue]")
    uvicorn.run(
        "shobdo.api.main:app",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level.lower(),
    )


if __name__ == "__main__":
    cli()
