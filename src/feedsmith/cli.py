"""CLI entry point."""

from __future__ import annotations

from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from feedsmith.core.config import get_settings
from feedsmith.core.exceptions import FeedSmithError
from feedsmith.core.logging import setup_logging
from feedsmith.models.feed import Feed
from feedsmith.projectors import get_projector, list_formats
from feedsmith.writer import serialize

app = typer.Typer(
    name="feedsmith",
    help="Build Atom, RSS 2.0 and JSON Feed documents from one generic feed",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)


@app.command()
def version() -> None:
    """Show version."""
    from feedsmith import __version__

    console.print(f"feedsmith {__version__}")


@app.command()
def info() -> None:
    """Show system information."""
    import sys

    from feedsmith import __version__

    console.print(f"[bold]feedsmith[/bold] {__version__}")
    console.print(f"Python {sys.version}")
    console.print(f"Formats: {', '.join(list_formats())}")


@app.command()
def formats() -> None:
    """List the output formats."""
    table = Table(title="Feed formats")
    table.add_column("Name")
    table.add_column("Projector")
    for name in list_formats():
        projector = get_projector(name)
        table.add_row(name, f"{projector.__module__}.{projector.__name__}")
    console.print(table)


@app.command()
def render(
    source: Path = typer.Argument(
        ..., exists=True, dir_okay=False, readable=True, help="Generic feed as a JSON file"
    ),
    fmt: str | None = typer.Option(None, "--format", "-f", help="atom, rss or json"),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write here instead of stdout"),
    indent: int | None = typer.Option(None, "--indent", min=0, max=8, help="Spaces per level"),
) -> None:
    """Render a generic feed file as Atom, RSS or JSON Feed."""
    try:
        settings = get_settings()
    except ValidationError as e:
        err_console.print(f"[red]Invalid settings:[/red] {e}")
        raise typer.Exit(code=1) from e

    try:
        setup_logging(settings)
        fmt = fmt or settings.default_format
        projector = get_projector(fmt)
        feed = Feed.model_validate_json(source.read_text(encoding="utf-8"))
    except (ValidationError, UnicodeDecodeError) as e:
        err_console.print(f"[red]Invalid feed in {source}:[/red] {e}")
        raise typer.Exit(code=1) from e
    except FeedSmithError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1) from e

    if indent is None:
        indent = settings.json_indent if fmt.strip().lower() == "json" else settings.xml_indent
    document = serialize(projector(feed), indent=indent)

    if output is None:
        typer.echo(document)
        return
    output.write_text(document + "\n", encoding="utf-8")
    err_console.print(f"Wrote {len(feed.items)} items to {output}")


if __name__ == "__main__":
    app()
