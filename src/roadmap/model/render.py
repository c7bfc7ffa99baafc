# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from roadmap.model.color_bucket import ColorBucket
from roadmap.model.timeline_item import NormalizedTimelineItem


class RenderBar(TypedDict):
    left_percent: float
    width_percent: float


class TooltipData(TypedDict):
    name: str
    group: str
    completion_percent: float
    raw_completion: float
    spi: float
    start_raw: str
    end_raw: str
    has_valid_dates: bool
    label: str


class RenderRow(TypedDict):
    item: NormalizedTimelineItem
    bar: RenderBar
    color_bucket: ColorBucket
    tooltip: TooltipData


class MonthTick(TypedDict):
    date: pendulum.Date
    label: str
    left_percent: float


class AxisRender(TypedDict):
    axis_start: pendulum.Date
    axis_end: pendulum.Date
    total_days: int
    month_ticks: list[MonthTick]
    today_marker_percent: Optional[float]


class TimelineRender(TypedDict):
    rows: list[RenderRow]
    axis: AxisRender
    dropped_count: int
