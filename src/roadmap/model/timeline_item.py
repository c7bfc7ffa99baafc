# SPDX-License-Identifier: MIT

from typing import TypedDict

from roadmap.model.status_category import StatusCategory


class NormalizedTimelineItem(TypedDict):
    name: str
    group: str
    start_raw: str
    end_raw: str
    completion_percent: float
    raw_completion: float
    status_category: StatusCategory
    spi: float
