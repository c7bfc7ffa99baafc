# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape

from roadmap.repository.item import ITEM_REPO, ItemSourceError
from roadmap.service.timeline import layout_timeline
from roadmap.state import get_today
from roadmap.terminal.custom_typer import AliasedTyperGroup
from roadmap.terminal.source import load_normalized_items
from roadmap.view.item import items_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("list, ls")
def list_items(
    source: Annotated[
        Optional[Path],
        typer.Option("--source", "-src", help="Read items from this file instead"),
    ] = None,
    group: Annotated[
        Optional[list[str]],
        typer.Option("--group", "-g", help="Only show items of these groups"),
    ] = None,
) -> None:
    """List normalized roadmap items."""
    items, dropped_count = load_normalized_items(source, groups=group)
    timeline = layout_timeline(items, get_today(), dropped_count)
    items_view("items", timeline["rows"], timeline["dropped_count"])


@app.command("import, im")
def import_items(
    source: Annotated[
        Path,
        typer.Argument(help="YAML, JSON or CSV file to import"),
    ],
) -> None:
    """Replace the stored roadmap items with the contents of a file."""
    try:
        count = ITEM_REPO.import_items(source)
    except ItemSourceError as e:
        raise typer.BadParameter(str(e), param_hint="SOURCE")

    console = Console()
    console.print(
        f"Imported [bold]{count}[/bold] item(s) from {escape(str(source))}"
    )
