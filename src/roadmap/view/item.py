# SPDX-License-Identifier: MIT

from typing import Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from roadmap.color import GROUP_COLOR, bucket_color
from roadmap.model.render import RenderRow
from roadmap.view.header import header
from roadmap.view.state import get_no_wrap
from roadmap.view.util import print_dropped


def items_view(
    report_name: str,
    rows: list[RenderRow],
    dropped_count: int = 0,
    console: Optional[Console] = None,
) -> None:
    header(report_name)

    if console is None:
        console = Console()

    if not rows:
        console.print("\n[dim]No roadmap items to display[/dim]\n")
        print_dropped(console, dropped_count)
        return

    no_wrap = get_no_wrap()
    table = Table(box=box.SIMPLE)
    table.add_column("Name", no_wrap=no_wrap)
    table.add_column("Group", style=GROUP_COLOR, no_wrap=no_wrap)
    table.add_column("Start")
    table.add_column("End")
    table.add_column("Completion", justify="right")
    table.add_column("Status")
    table.add_column("SPI", justify="right")

    for row in rows:
        item = row["item"]
        tooltip = row["tooltip"]
        color = bucket_color(row["color_bucket"])

        completion = f"{item['completion_percent']:g}%"
        if item["raw_completion"] != item["completion_percent"]:
            completion += f" [dim]({item['raw_completion']:g})[/dim]"

        start = escape(item["start_raw"])
        end = escape(item["end_raw"])
        if not tooltip["has_valid_dates"]:
            start = f"[italic dim]{start}[/italic dim]"
            end = f"[italic dim]{end}[/italic dim]"

        table.add_row(
            escape(item["name"]),
            escape(item["group"]),
            start,
            end,
            f"[{color}]{completion}[/{color}]",
            f"[{color}]{row['color_bucket']}[/{color}] [dim]{item['status_category'].value}[/dim]",
            f"{item['spi']:g}",
        )

    console.print(table)
    print_dropped(console, dropped_count)
    console.print()
