# SPDX-License-Identifier: MIT

from typing import Optional

from rich import box
from rich.columns import Columns
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from roadmap.color import GROUP_COLOR, bucket_color
from roadmap.model.summary import RoadmapSummary
from roadmap.view.header import header


def _kpi_card(title: str, value: str, caption: str, color: str) -> Panel:
    return Panel(
        f"[bold {color}]{value}[/bold {color}]\n[dim]{caption}[/dim]",
        title=title,
        title_align="left",
        box=box.ROUNDED,
        padding=(0, 2),
    )


def summary_view(
    report_name: str,
    summary: RoadmapSummary,
    console: Optional[Console] = None,
) -> None:
    """
    Display roadmap KPI cards followed by bucket and group breakdowns.

    Args:
        report_name: The name of the report
        summary: Values computed by the summary service
        console: Console to print to (defaults to a new console)
    """
    header(report_name)

    if console is None:
        console = Console()

    console.print()
    console.print(
        Columns(
            [
                _kpi_card(
                    "Total Initiatives",
                    str(summary["total_items"]),
                    "Active projects",
                    "cyan",
                ),
                _kpi_card(
                    "Avg Completion",
                    f"{summary['average_completion']}%",
                    "Average progress",
                    "green",
                ),
                _kpi_card(
                    "Avg SPI",
                    f"{summary['average_spi']:.2f}",
                    "Schedule performance",
                    "blue",
                ),
                _kpi_card(
                    "Behind Schedule",
                    str(summary["behind_schedule"]),
                    "Items with SPI < 1",
                    "dark_orange",
                ),
            ]
        )
    )

    if summary["total_items"] == 0:
        console.print("\n[dim]No roadmap items to summarize[/dim]\n")
        return

    bucket_table = Table(box=box.SIMPLE_HEAD, title="By Status", title_justify="left")
    bucket_table.add_column("Bucket")
    bucket_table.add_column("Items", justify="right")
    for bucket, count in summary["by_bucket"].items():
        color = bucket_color(bucket)
        bucket_table.add_row(f"[{color}]{bucket}[/{color}]", str(count))

    group_table = Table(box=box.SIMPLE_HEAD, title="By Group", title_justify="left")
    group_table.add_column("Group", style=GROUP_COLOR)
    group_table.add_column("Items", justify="right")
    for group, count in summary["by_group"].items():
        group_table.add_row(escape(group), str(count))

    category_table = Table(
        box=box.SIMPLE_HEAD, title="By Status Source", title_justify="left"
    )
    category_table.add_column("Category")
    category_table.add_column("Items", justify="right")
    for category, count in summary["by_status_category"].items():
        category_table.add_row(category, str(count))

    console.print()
    console.print(Columns([bucket_table, group_table, category_table]))
    console.print()
