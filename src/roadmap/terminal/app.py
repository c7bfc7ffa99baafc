# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import pendulum
import typer

from roadmap import state as app_state
from roadmap.log import configure_logging
from roadmap.terminal import configuration, item
from roadmap.terminal.custom_typer import OrderedAliasedTyperGroup
from roadmap.terminal.parse import parse_date
from roadmap.terminal.view import gantt, summary
from roadmap.view import state as view_state

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="roadmap - Delivery roadmap timelines in the CLI",
    no_args_is_help=True,
)
app.command(name="gantt, g")(gantt)
app.command(name="summary, s")(summary)
app.add_typer(item.app, name="item, i")
app.add_typer(configuration.app, name="config, c")


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
    no_wrap: Annotated[
        bool,
        typer.Option(
            "--no-wrap",
            help="Do not wrap text in table columns",
        ),
    ] = False,
    today: Annotated[
        Optional[pendulum.Date],
        typer.Option(
            "--today",
            parser=parse_date,
            help="Treat this date as today (YYYY-MM-DD, DD/MM/YYYY, today, or day offset like -7)",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Log normalization and layout details",
        ),
    ] = False,
) -> None:
    """
    roadmap - Delivery roadmap timelines in the CLI

    Global options that apply to all commands.
    """
    if no_header:
        view_state.set_show_header(False)
    if no_wrap:
        view_state.set_no_wrap(True)
    if today is not None:
        app_state.set_today(today)
    if verbose:
        configure_logging("DEBUG")


def run() -> None:
    app()
