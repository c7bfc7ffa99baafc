# SPDX-License-Identifier: MIT

from collections import Counter

from roadmap.model.color_bucket import COLOR_BUCKETS
from roadmap.model.summary import RoadmapSummary
from roadmap.model.timeline_item import NormalizedTimelineItem
from roadmap.service.layout import color_bucket


def summarize(items: list[NormalizedTimelineItem]) -> RoadmapSummary:
    """
    Compute the KPI card values for a set of roadmap items.

    Averages are 0 for an empty set. Bucket counts always list every bucket
    so cards render in a stable order.

    Args:
        items: Normalized items, usually already filtered

    Returns:
        The roadmap summary
    """
    total_items = len(items)

    by_bucket: dict[str, int] = {bucket: 0 for bucket in COLOR_BUCKETS}
    for item in items:
        by_bucket[color_bucket(item["completion_percent"])] += 1

    by_group = Counter(item["group"] for item in items)
    by_status_category = Counter(item["status_category"].value for item in items)

    average_completion = 0
    average_spi = 0.0
    if total_items > 0:
        average_completion = round(
            sum(item["completion_percent"] for item in items) / total_items
        )
        average_spi = round(sum(item["spi"] for item in items) / total_items, 2)

    return {
        "total_items": total_items,
        "average_completion": average_completion,
        "average_spi": average_spi,
        "behind_schedule": sum(1 for item in items if item["spi"] < 1),
        "by_bucket": by_bucket,
        "by_group": dict(sorted(by_group.items())),
        "by_status_category": dict(sorted(by_status_category.items())),
    }
