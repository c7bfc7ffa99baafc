# SPDX-License-Identifier: MIT

import logging
from typing import Iterable, Optional

import pendulum

from roadmap import time
from roadmap.model.color_bucket import ColorBucket
from roadmap.model.date_axis import DateAxis
from roadmap.model.render import MonthTick, RenderBar
from roadmap.model.timeline_item import NormalizedTimelineItem

logger = logging.getLogger(__name__)


def empty_bar() -> RenderBar:
    return {"left_percent": 0.0, "width_percent": 0.0}


def item_dates(
    item: NormalizedTimelineItem,
) -> tuple[Optional[pendulum.Date], Optional[pendulum.Date]]:
    return (
        time.parse_flexible_date(item["start_raw"]),
        time.parse_flexible_date(item["end_raw"]),
    )


def compute_axis(
    items: Iterable[NormalizedTimelineItem], today: pendulum.Date
) -> DateAxis:
    """
    Compute the shared date axis for a set of items.

    The axis spans whole months and always includes the month containing
    ``today``. Dates that fail to parse are left out of the range but their
    items are kept.

    Args:
        items: Normalized items to place on the axis
        today: The current date

    Returns:
        The axis; ``total_days`` is 0 when no date parsed at all
    """
    dates: list[pendulum.Date] = []
    for item in items:
        for date in item_dates(item):
            if date is not None:
                dates.append(date)

    if not dates:
        return {
            "axis_start": today,
            "axis_end": today,
            "total_days": 0,
            "month_ticks": [],
        }

    axis_start = min(time.start_of_month(min(dates)), time.start_of_month(today))
    axis_end = max(time.end_of_month(max(dates)), time.end_of_month(today))

    return {
        "axis_start": axis_start,
        "axis_end": axis_end,
        "total_days": time.days_between(axis_start, axis_end) + 1,
        "month_ticks": time.month_starts_between(axis_start, axis_end),
    }


def position_bar(item: NormalizedTimelineItem, axis: DateAxis) -> RenderBar:
    """
    Place an item's bar on the axis as percentages of the axis width.

    Items with an unparseable date, or an empty axis, get a zero bar.
    """
    total_days = axis["total_days"]
    if total_days == 0:
        return empty_bar()

    start, end = item_dates(item)
    if start is None or end is None:
        logger.debug(
            "Zero bar for %r: unparseable dates %r / %r",
            item["name"],
            item["start_raw"],
            item["end_raw"],
        )
        return empty_bar()

    offset_days = time.days_between(axis["axis_start"], start)
    duration_days = time.days_between(start, end)

    left_percent = min(100.0, max(0.0, offset_days / total_days * 100))
    width_percent = max(0.0, duration_days / total_days * 100)
    # Never let the bar run past the end of the axis
    width_percent = min(width_percent, 100.0 - left_percent)

    return {"left_percent": left_percent, "width_percent": width_percent}


def today_marker_percent(axis: DateAxis, today: pendulum.Date) -> Optional[float]:
    """
    Position of the "today" marker as a percentage of the axis width.

    Returns None for an empty axis. Dates outside the axis are pinned to
    the nearest edge.
    """
    total_days = axis["total_days"]
    if total_days == 0:
        return None
    if today < axis["axis_start"]:
        return 0.0
    if today > axis["axis_end"]:
        return 100.0
    percent = time.days_between(axis["axis_start"], today) / total_days * 100
    return min(100.0, max(0.0, percent))


def month_tick_positions(axis: DateAxis) -> list[MonthTick]:
    total_days = axis["total_days"]
    if total_days == 0:
        return []
    return [
        {
            "date": month,
            "label": time.date_to_month_label(month),
            "left_percent": time.days_between(axis["axis_start"], month)
            / total_days
            * 100,
        }
        for month in axis["month_ticks"]
    ]


def color_bucket(completion: float) -> ColorBucket:
    if completion >= 90:
        return "complete"
    if completion >= 50:
        return "on-track"
    if completion > 0:
        return "at-risk"
    return "not-started"
