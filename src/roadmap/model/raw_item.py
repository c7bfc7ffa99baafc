# SPDX-License-Identifier: MIT

from typing import Any, Mapping, Optional, TypedDict, Union

RawValue = Optional[Union[str, int, float]]


class RawTimelineItem(TypedDict, total=False):
    """
    One roadmap row as delivered by an upstream export.

    Every logical attribute may arrive under several keys depending on which
    export produced the row; only the keys that export knows about are set.
    """

    initiative: RawValue
    name: RawValue
    title: RawValue
    squad: RawValue
    team: RawValue
    group: RawValue
    start: RawValue
    startDate: RawValue
    begin: RawValue
    delivery: RawValue
    endDate: RawValue
    expectedDate: RawValue
    end: RawValue
    dueDate: RawValue
    completion: RawValue
    status: RawValue
    spi: RawValue


# Sources are loosely typed; anything mapping-like is accepted.
RawItemLike = Union[RawTimelineItem, Mapping[str, Any]]
