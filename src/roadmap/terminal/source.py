# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional

import typer

from roadmap.model.timeline_item import NormalizedTimelineItem
from roadmap.repository.item import ITEM_REPO, ItemSourceError
from roadmap.service.filter import ALL_OPTION, filter_items, group_options
from roadmap.service.normalize import normalize_items


def load_normalized_items(
    source: Optional[Path],
    groups: Optional[list[str]] = None,
    buckets: Optional[list[str]] = None,
) -> tuple[list[NormalizedTimelineItem], int]:
    """
    Load, normalize and filter items for a command.

    Args:
        source: File to read instead of the stored dataset
        groups: Groups to keep (None keeps all)
        buckets: Color buckets to keep (None keeps all)

    Returns:
        The filtered items and the number of raw items dropped for missing dates

    Raises:
        typer.BadParameter: If the source cannot be read or a group is unknown
    """
    try:
        raw_items = ITEM_REPO.get_all_items(source)
    except ItemSourceError as e:
        raise typer.BadParameter(str(e), param_hint="--source")

    items = normalize_items(raw_items)
    dropped_count = len(raw_items) - len(items)

    if groups and ALL_OPTION not in groups:
        known = {group.lower() for group in group_options(items)}
        unknown = [group for group in groups if group.lower() not in known]
        if unknown:
            raise typer.BadParameter(
                f"Unknown group(s) {', '.join(unknown)}; "
                f"available: {', '.join(group_options(items)) or 'none'}",
                param_hint="--group",
            )

    return filter_items(items, groups=groups, buckets=buckets), dropped_count
