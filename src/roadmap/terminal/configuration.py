# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from roadmap import configuration
from roadmap.repository.configuration import CONFIGURATION_REPO
from roadmap.terminal.custom_typer import AliasedTyperGroup
from roadmap.terminal.validate import (
    validate_left_column_width,
    validate_log_level,
    validate_width,
)

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row(
        "show_header",
        "✓ Enabled" if config["show_header"] else "✗ Disabled",
    )
    table.add_row(
        "auto_scroll",
        "✓ Enabled" if config["auto_scroll"] else "✗ Disabled",
    )
    table.add_row(
        "timeline_width",
        str(config["timeline_width"]) if config["timeline_width"] else "terminal",
    )
    table.add_row("left_column_width", str(config["left_column_width"]))
    table.add_row("log_level", config["log_level"])
    table.add_row("data_path", escape(str(configuration.DATA_PATH)))
    table.add_row("config_path", escape(str(configuration.APP_CONFIG_PATH)))

    console.print(table)


@app.command("set, s")
def set(
    show_header: Annotated[
        Optional[bool],
        typer.Option(
            "--show-header/--no-show-header",
            help="Show the roadmap header above reports",
        ),
    ] = None,
    auto_scroll: Annotated[
        Optional[bool],
        typer.Option(
            "--auto-scroll/--no-auto-scroll",
            help="Center wide timelines on today",
        ),
    ] = None,
    timeline_width: Annotated[
        Optional[int],
        typer.Option(
            "--timeline-width",
            "-tw",
            callback=validate_width,
            help="Width of the full timeline in columns",
        ),
    ] = None,
    remove_timeline_width: Annotated[
        bool,
        typer.Option(
            "--remove-timeline-width",
            help="Fit the timeline to the terminal again",
        ),
    ] = False,
    left_column_width: Annotated[
        Optional[int],
        typer.Option(
            "--left-column-width",
            "-lw",
            callback=validate_left_column_width,
            help="Width of the item name column",
        ),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option(
            "--log-level",
            "-ll",
            callback=validate_log_level,
            help="Log level: DEBUG, INFO, WARNING, ERROR or CRITICAL",
        ),
    ] = None,
    data_path: Annotated[
        Optional[str],
        typer.Option("--data-path", help="Directory holding the stored items"),
    ] = None,
    remove_data_path: Annotated[
        bool,
        typer.Option("--remove-data-path", help="Use the default data directory"),
    ] = False,
) -> None:
    """Update configuration settings."""
    CONFIGURATION_REPO.update_config(
        show_header=show_header,
        auto_scroll=auto_scroll,
        timeline_width=timeline_width,
        remove_timeline_width=remove_timeline_width,
        left_column_width=left_column_width,
        log_level=log_level,
        data_path=data_path,
        remove_data_path=remove_data_path,
    )
    view()
