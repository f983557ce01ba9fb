"""
CLI Interface - Presentation layer.
Lets developers check what a presenter hands to a template.
"""

import json
from pathlib import Path
from types import SimpleNamespace
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from presenter_kit.core import settings, configure_logging, get_logger, FieldPreview, PresenterError
from presenter_kit.application import Presenter
from presenter_kit.infrastructure import HtmlEscaper

logger = get_logger(__name__)

app = typer.Typer(
    name="presenter-kit",
    help="Inspect how presenters escape values for HTML views",
)

console = Console()


def _load_subject(path: Path) -> SimpleNamespace:
    """Load a JSON object and expose its keys as attributes."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise typer.BadParameter(f"Cannot read {path}: {e}") from e

    if not isinstance(data, dict):
        raise typer.BadParameter(f"{path} must contain a JSON object")

    return SimpleNamespace(**data)


def public_fields(subject: SimpleNamespace) -> List[str]:
    """Field names a presenter can forward, in file order."""
    return [name for name in vars(subject) if not name.startswith("_")]


def preview_fields(presenter: Presenter, names: List[str]) -> List[FieldPreview]:
    """Collect raw and escaped values for each requested field."""
    return [
        FieldPreview.capture(name, presenter._original(name), getattr(presenter, name))
        for name in names
    ]


@app.command()
def escape(
    text: str = typer.Argument(..., help="Text to escape"),
    apostrophe: Optional[str] = typer.Option(
        None,
        "--apostrophe",
        "-a",
        help="Entity used for apostrophes: &apos; or &#x27;",
    ),
) -> None:
    """
    Print the HTML-escaped form of TEXT.

    Examples:
        presenter-kit escape "<script>alert('xss')</script>"
        presenter-kit escape "it's" --apostrophe "&#x27;"
    """
    try:
        escaper = HtmlEscaper(apostrophe_entity=apostrophe)
    except PresenterError as e:
        console.print(f"[red]Error: {e}[/red]", soft_wrap=True)
        raise typer.Exit(1)

    # Markup is printed verbatim, rich markup parsing would eat brackets
    console.print(str(escaper.escape_html(text)), markup=False, highlight=False, soft_wrap=True)


@app.command()
def inspect(
    file: Path = typer.Argument(..., help="JSON file holding one subject object"),
    fields: Optional[List[str]] = typer.Option(
        None,
        "--field",
        "-f",
        help="Field to show, repeatable. Defaults to every public key in the file.",
    ),
) -> None:
    """
    Show raw and escaped values of a subject loaded from a JSON file.
    """
    try:
        subject = _load_subject(file)
        names = fields or public_fields(subject)
        previews = preview_fields(Presenter(subject), names)
    except (typer.BadParameter, PresenterError) as e:
        console.print(f"[red]Error: {e}[/red]", soft_wrap=True)
        raise typer.Exit(1)

    skipped = [] if fields else [name for name in vars(subject) if name.startswith("_")]
    if skipped:
        # Presenters never forward private names
        console.print(
            f"Skipped private fields: {', '.join(skipped)}",
            style="yellow", markup=False, highlight=False, soft_wrap=True,
        )

    logger.info(f"Inspected {len(previews)} fields from {file}")

    table = Table(title=f"Presenter view of {file.name}")
    table.add_column("Field", style="cyan")
    table.add_column("Raw", style="yellow")
    table.add_column("Escaped", style="green")
    table.add_column("Changed")

    for preview in previews:
        table.add_row(
            preview.name,
            Text(json.dumps(preview.raw, default=str)),
            Text(json.dumps(preview.escaped, default=str)),
            "✓" if preview.changed else "✗",
        )

    console.print(table)


@app.command()
def config() -> None:
    """Show the effective settings."""
    table = Table(title="Settings")
    table.add_column("Option", style="cyan")
    table.add_column("Value", style="green")

    for option, value in settings.model_dump().items():
        table.add_row(option, str(value))

    console.print(table)


def main() -> None:
    """Entry point for the CLI."""
    configure_logging()
    app()


if __name__ == "__main__":
    main()
