# SPDX-License-Identifier: MIT

from typing import TypedDict


class RoadmapSummary(TypedDict):
    total_items: int
    average_completion: int
    average_spi: float
    behind_schedule: int
    by_bucket: dict[str, int]
    by_group: dict[str, int]
    by_status_category: dict[str, int]
