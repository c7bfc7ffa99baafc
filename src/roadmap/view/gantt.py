# SPDX-License-Identifier: MIT

from typing import Optional

from rich.console import Console, Group
from rich.padding import Padding
from rich.text import Text

from roadmap import time
from roadmap.color import (
    GROUP_COLOR,
    INVALID_DATES_COLOR,
    MONTH_TICK_COLOR,
    TODAY_MARKER_COLOR,
    bucket_color,
)
from roadmap.model.color_bucket import COLOR_BUCKETS
from roadmap.model.render import MonthTick, RenderRow, TimelineRender
from roadmap.service.scroll import scroll_to_today
from roadmap.view.header import header
from roadmap.view.util import print_dropped

MIN_TIMELINE_WIDTH = 10
# Truncated names need "..." plus a separating space
MIN_LEFT_COLUMN_WIDTH = 4

BAR_FILLED_CHAR = "█"
BAR_EMPTY_CHAR = "░"
SINGLE_DAY_CHAR = "●"
TODAY_CHAR = "│"


class TerminalViewport:
    """Horizontal window onto a timeline that is wider than the terminal."""

    def __init__(self, content_width: int, viewport_width: int) -> None:
        self._content_width = content_width
        self._viewport_width = viewport_width
        self.offset = 0

    @property
    def content_width(self) -> int:
        return self._content_width

    @property
    def viewport_width(self) -> int:
        return self._viewport_width

    def scroll_to(self, offset: int) -> None:
        self.offset = offset

    def window(self, text: Text) -> Text:
        return text[self.offset : self.offset + self._viewport_width]


class _Canvas:
    """Fixed-width row of styled cells."""

    def __init__(self, width: int) -> None:
        self.width = width
        self._cells: list[tuple[str, str]] = [(" ", "")] * width

    def put(self, column: int, chars: str, style: str = "") -> None:
        for i, char in enumerate(chars):
            if 0 <= column + i < self.width:
                self._cells[column + i] = (char, style)

    def is_blank(self, column: int, length: int) -> bool:
        return all(
            self._cells[i][0] == " "
            for i in range(max(0, column), min(self.width, column + length))
        )

    def to_text(self) -> Text:
        text = Text()
        for char, style in self._cells:
            text.append(char, style=style)
        return text


def percent_to_column(percent: float, width: int) -> int:
    return min(width - 1, max(0, int(percent / 100 * width)))


def gantt_view(
    report_name: str,
    timeline: TimelineRender,
    timeline_width: Optional[int] = None,
    left_column_width: int = 32,
    auto_scroll: bool = True,
    console: Optional[Console] = None,
) -> None:
    """
    Display roadmap items on a gantt chart timeline.

    Bars are drawn from the precomputed layout, filled in proportion to each
    item's completion and colored by its color bucket. When the timeline is
    wider than the terminal the view is scrolled so that today is centered.

    Args:
        report_name: The name of the report
        timeline: Rows and axis produced by the timeline service
        timeline_width: Width of the full timeline in columns (defaults to
            the space left by the terminal)
        left_column_width: Width of left column for item names
        auto_scroll: Whether to center the view on today
        console: Console to print to (defaults to a new console)
    """
    header(report_name)

    if console is None:
        console = Console()

    rows = timeline["rows"]
    axis = timeline["axis"]

    if not rows or axis["total_days"] == 0:
        console.print("\n[dim]No roadmap items to display[/dim]\n")
        print_dropped(console, timeline["dropped_count"])
        return

    available_width = max(MIN_TIMELINE_WIDTH, console.width - left_column_width)
    content_width = max(MIN_TIMELINE_WIDTH, timeline_width or available_width)
    viewport = TerminalViewport(content_width, min(available_width, content_width))

    today_percent = axis["today_marker_percent"]
    if auto_scroll and content_width > viewport.viewport_width:
        scroll_to_today(viewport, today_percent)

    today_column: Optional[int] = None
    if today_percent is not None:
        today_column = percent_to_column(today_percent, content_width)

    date_range_str = (
        f"{time.date_to_iso_str(axis['axis_start'])} to "
        f"{time.date_to_iso_str(axis['axis_end'])}"
    )
    console.print(f"\n[bold]{date_range_str}[/bold] ({axis['total_days']} days)\n")

    chart_elements: list[Text] = []

    header_row = Text(" " * left_column_width)
    header_row.append_text(
        viewport.window(
            _build_month_header(axis["month_ticks"], content_width, today_column)
        )
    )
    chart_elements.append(header_row)

    separator = Text("─" * left_column_width, style="dim")
    separator.append("─" * viewport.viewport_width, style="dim")
    chart_elements.append(separator)

    for row in rows:
        item_row = Text(_format_left_column(row, left_column_width))
        item_row.stylize(GROUP_COLOR, len(row["item"]["name"]) + 1)
        item_row.append_text(
            viewport.window(_build_bar(row, content_width, today_column))
        )
        chart_elements.append(item_row)

    console.print(Padding(Group(*chart_elements), (0, 0, 1, 0)))
    _print_legend(console)
    print_dropped(console, timeline["dropped_count"])
    console.print()


def _format_left_column(row: RenderRow, left_column_width: int) -> str:
    left_col = f"{row['item']['name']} {row['item']['group']}"
    if len(left_col) > left_column_width - 1:
        if left_column_width < MIN_LEFT_COLUMN_WIDTH:
            return left_col[:left_column_width]
        left_col = left_col[: left_column_width - 4] + "..."
    return left_col.ljust(left_column_width)


def _build_month_header(
    ticks: list[MonthTick], width: int, today_column: Optional[int]
) -> Text:
    canvas = _Canvas(width)
    for tick in ticks:
        column = percent_to_column(tick["left_percent"], width)
        canvas.put(column, "┊", MONTH_TICK_COLOR)
        canvas.put(column + 1, tick["label"], MONTH_TICK_COLOR)
    if today_column is not None:
        canvas.put(today_column, "▼", f"bold {TODAY_MARKER_COLOR}")
    return canvas.to_text()


def _build_bar(row: RenderRow, width: int, today_column: Optional[int]) -> Text:
    canvas = _Canvas(width)
    tooltip = row["tooltip"]

    if not tooltip["has_valid_dates"]:
        canvas.put(0, f"({tooltip['label']})", f"italic {INVALID_DATES_COLOR}")
    else:
        bar = row["bar"]
        color = bucket_color(row["color_bucket"])
        start_column = percent_to_column(bar["left_percent"], width)
        end_column = percent_to_column(bar["left_percent"] + bar["width_percent"], width)
        length = end_column - start_column + 1

        if length <= 1:
            canvas.put(start_column, SINGLE_DAY_CHAR, color)
        else:
            filled = round(length * row["item"]["completion_percent"] / 100)
            canvas.put(start_column, BAR_FILLED_CHAR * filled, color)
            canvas.put(start_column + filled, BAR_EMPTY_CHAR * (length - filled), color)

        label = f" {tooltip['label']}"
        if end_column + 1 + len(label) <= width:
            canvas.put(end_column + 1, label, "dim")

    if today_column is not None and canvas.is_blank(today_column, 1):
        canvas.put(today_column, TODAY_CHAR, TODAY_MARKER_COLOR)
    return canvas.to_text()


def _print_legend(console: Console) -> None:
    legend = Text("Legend: ", style="dim")
    for bucket in COLOR_BUCKETS:
        legend.append(BAR_FILLED_CHAR, style=bucket_color(bucket))
        legend.append(f" {bucket}  ", style="dim")
    legend.append(TODAY_CHAR, style=TODAY_MARKER_COLOR)
    legend.append(" today", style="dim")
    console.print(legend)
