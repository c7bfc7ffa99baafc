# SPDX-License-Identifier: MIT

from typing import Optional

from roadmap.model.timeline_item import NormalizedTimelineItem
from roadmap.service.layout import color_bucket

ALL_OPTION = "All"


def group_options(items: list[NormalizedTimelineItem]) -> list[str]:
    """Sorted unique groups, for building group selectors."""
    return sorted({item["group"] for item in items})


def _is_unfiltered(values: Optional[list[str]]) -> bool:
    return not values or ALL_OPTION in values


def filter_items(
    items: list[NormalizedTimelineItem],
    groups: Optional[list[str]] = None,
    buckets: Optional[list[str]] = None,
) -> list[NormalizedTimelineItem]:
    """
    Keep items whose group and color bucket are among the selected values.

    An empty selection, or one containing "All", does not filter.
    Group matching ignores case.
    """
    filtered = items
    if not _is_unfiltered(groups):
        assert groups is not None
        wanted_groups = {group.lower() for group in groups}
        filtered = [item for item in filtered if item["group"].lower() in wanted_groups]
    if not _is_unfiltered(buckets):
        assert buckets is not None
        filtered = [
            item
            for item in filtered
            if color_bucket(item["completion_percent"]) in buckets
        ]
    return filtered
