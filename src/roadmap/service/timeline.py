# SPDX-License-Identifier: MIT

import logging
from typing import Iterable

import pendulum

from roadmap.model.raw_item import RawItemLike
from roadmap.model.render import RenderBar, RenderRow, TimelineRender, TooltipData
from roadmap.model.timeline_item import NormalizedTimelineItem
from roadmap.service.layout import (
    color_bucket,
    compute_axis,
    item_dates,
    month_tick_positions,
    position_bar,
    today_marker_percent,
)
from roadmap.service.normalize import normalize_items

logger = logging.getLogger(__name__)

INVALID_DATES_LABEL = "invalid dates"


def tooltip_label(item: NormalizedTimelineItem) -> str:
    return f"{item['raw_completion']:g}% Complete • SPI: {item['spi']:g}"


def build_tooltip(item: NormalizedTimelineItem, has_valid_dates: bool) -> TooltipData:
    return {
        "name": item["name"],
        "group": item["group"],
        "completion_percent": item["completion_percent"],
        "raw_completion": item["raw_completion"],
        "spi": item["spi"],
        "start_raw": item["start_raw"],
        "end_raw": item["end_raw"],
        "has_valid_dates": has_valid_dates,
        "label": tooltip_label(item) if has_valid_dates else INVALID_DATES_LABEL,
    }


def build_rows(
    items: list[NormalizedTimelineItem], bars: list[RenderBar]
) -> list[RenderRow]:
    rows: list[RenderRow] = []
    for item, bar in zip(items, bars):
        start, end = item_dates(item)
        rows.append(
            {
                "item": item,
                "bar": bar,
                "color_bucket": color_bucket(item["completion_percent"]),
                "tooltip": build_tooltip(item, start is not None and end is not None),
            }
        )
    return rows


def layout_timeline(
    items: list[NormalizedTimelineItem], today: pendulum.Date, dropped_count: int = 0
) -> TimelineRender:
    """
    Lay out already normalized items.

    Args:
        items: Normalized items, in display order
        today: The current date
        dropped_count: How many raw items the normalizer rejected

    Returns:
        Per-item render rows plus the axis-level render record
    """
    axis = compute_axis(items, today)
    bars = [position_bar(item, axis) for item in items]

    return {
        "rows": build_rows(items, bars),
        "axis": {
            "axis_start": axis["axis_start"],
            "axis_end": axis["axis_end"],
            "total_days": axis["total_days"],
            "month_ticks": month_tick_positions(axis),
            "today_marker_percent": today_marker_percent(axis, today),
        },
        "dropped_count": dropped_count,
    }


def build_timeline(
    raw_items: Iterable[RawItemLike], today: pendulum.Date
) -> TimelineRender:
    """Normalize raw items and lay them out against a shared axis."""
    raw_list = list(raw_items)
    items = normalize_items(raw_list)
    dropped_count = len(raw_list) - len(items)

    logger.debug(
        "Laying out %d item(s) for %s (%d dropped)",
        len(items),
        today.format("YYYY-MM-DD"),
        dropped_count,
    )
    return layout_timeline(items, today, dropped_count)
