# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum


class DateAxis(TypedDict):
    axis_start: pendulum.Date
    axis_end: pendulum.Date
    total_days: int
    month_ticks: list[pendulum.Date]
