# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional

import typer

from roadmap.model.color_bucket import COLOR_BUCKETS
from roadmap.repository.configuration import CONFIGURATION_REPO
from roadmap.service.summary import summarize
from roadmap.service.timeline import layout_timeline
from roadmap.state import get_today
from roadmap.terminal.source import load_normalized_items
from roadmap.terminal.validate import validate_left_column_width, validate_width
from roadmap.view.gantt import gantt_view
from roadmap.view.summary import summary_view


def validate_buckets(buckets: Optional[list[str]]) -> Optional[list[str]]:
    if buckets is None:
        return None
    for bucket in buckets:
        if bucket not in COLOR_BUCKETS:
            raise typer.BadParameter(
                f"Bucket must be one of {', '.join(COLOR_BUCKETS)}, got '{bucket}'"
            )
    return buckets


def gantt(
    source: Annotated[
        Optional[Path],
        typer.Option("--source", "-src", help="Read items from this file instead"),
    ] = None,
    group: Annotated[
        Optional[list[str]],
        typer.Option("--group", "-g", help="Only show items of these groups"),
    ] = None,
    bucket: Annotated[
        Optional[list[str]],
        typer.Option(
            "--bucket",
            "-b",
            callback=validate_buckets,
            help="Only show items in these buckets: complete, on-track, at-risk, not-started",
        ),
    ] = None,
    width: Annotated[
        Optional[int],
        typer.Option(
            "--width",
            "-w",
            callback=validate_width,
            help="Width of the full timeline in columns",
        ),
    ] = None,
    left_width: Annotated[
        Optional[int],
        typer.Option(
            "--left-width",
            "-lw",
            callback=validate_left_column_width,
            help="Width of left column for item names",
        ),
    ] = None,
    scroll: Annotated[
        Optional[bool],
        typer.Option(
            "--scroll/--no-scroll",
            help="Center a timeline wider than the terminal on today",
        ),
    ] = None,
) -> None:
    """Display roadmap items on a gantt chart timeline."""
    config = CONFIGURATION_REPO.get_config()

    items, dropped_count = load_normalized_items(source, groups=group, buckets=bucket)
    timeline = layout_timeline(items, get_today(), dropped_count)

    gantt_view(
        "gantt",
        timeline,
        timeline_width=width if width is not None else config["timeline_width"],
        left_column_width=(
            left_width if left_width is not None else config["left_column_width"]
        ),
        auto_scroll=scroll if scroll is not None else config["auto_scroll"],
    )


def summary(
    source: Annotated[
        Optional[Path],
        typer.Option("--source", "-src", help="Read items from this file instead"),
    ] = None,
    group: Annotated[
        Optional[list[str]],
        typer.Option("--group", "-g", help="Only summarize items of these groups"),
    ] = None,
) -> None:
    """Display roadmap KPIs: totals, average completion and SPI, breakdowns."""
    items, _ = load_normalized_items(source, groups=group)
    summary_view("summary", summarize(items))
