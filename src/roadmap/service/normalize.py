# SPDX-License-Identifier: MIT

import logging
import math
from typing import Any, Iterable, NamedTuple, Optional

from roadmap.model.raw_item import RawItemLike
from roadmap.model.status_category import StatusCategory
from roadmap.model.timeline_item import NormalizedTimelineItem

logger = logging.getLogger(__name__)

DEFAULT_NAME = "Unknown"
DEFAULT_GROUP = "Unassigned"
DEFAULT_SPI = 1.0

# Field resolution policy: logical attribute -> raw keys, first non-empty wins
NAME_FIELDS: tuple[str, ...] = ("initiative", "name", "title")
GROUP_FIELDS: tuple[str, ...] = ("squad", "team", "group")
START_FIELDS: tuple[str, ...] = ("start", "startDate", "begin")
END_FIELDS: tuple[str, ...] = ("delivery", "endDate", "expectedDate", "end", "dueDate")


class StatusRule(NamedTuple):
    category: StatusCategory
    completion: float
    exact: tuple[str, ...] = ()
    contains: tuple[str, ...] = ()

    def matches(self, status: str) -> bool:
        return status in self.exact or any(word in status for word in self.contains)


# Checked in order; the first matching rule wins.
STATUS_VOCABULARY: tuple[StatusRule, ...] = (
    StatusRule(
        StatusCategory.COMPLETE,
        100.0,
        exact=("complete",),
        contains=("done", "completed"),
    ),
    StatusRule(StatusCategory.ON_TIME, 75.0, exact=("early", "on time")),
    StatusRule(StatusCategory.DELAYED, 50.0, exact=("delay", "delayed")),
    StatusRule(
        StatusCategory.IN_PROGRESS,
        25.0,
        exact=("incomplete",),
        contains=("progress",),
    ),
)


def resolve_field(item: RawItemLike, fields: Iterable[str]) -> Optional[str]:
    """
    Return the first non-empty value among the given keys, trimmed.

    Args:
        item: The raw item
        fields: Keys to try, in priority order

    Returns:
        The trimmed string value, or None if every key is missing or blank
    """
    for field in fields:
        value = item.get(field)
        if value is None:
            continue
        text = str(value).strip()
        if text:
            return text
    return None


def parse_finite_number(value: Optional[Any]) -> Optional[float]:
    """
    Read a numeric-like value as a finite float.

    Accepts ints, floats and strings such as "40", " 40.5 " or "40%".
    Booleans, NaN and infinities are rejected.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        text = str(value).strip()
        if text.endswith("%"):
            text = text[:-1].strip()
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    if not math.isfinite(number):
        return None
    return number


def resolve_status(status: Optional[Any]) -> tuple[float, StatusCategory]:
    """Map a status label or numeric-like status onto a completion percent."""
    if status is None:
        return 0.0, StatusCategory.UNRECOGNIZED

    normalized = str(status).strip().lower()
    for rule in STATUS_VOCABULARY:
        if rule.matches(normalized):
            return rule.completion, rule.category

    number = parse_finite_number(normalized)
    if number is not None:
        return number, StatusCategory.NUMERIC

    if normalized:
        logger.debug("Unrecognized status %r, defaulting to 0%%", status)
    return 0.0, StatusCategory.UNRECOGNIZED


def resolve_completion(item: RawItemLike) -> tuple[float, StatusCategory]:
    """
    Resolve an item's completion percent and status category.

    A numeric ``completion`` field always takes priority over ``status``;
    the two are never cross-checked.
    """
    completion = parse_finite_number(item.get("completion"))
    if completion is not None:
        return completion, StatusCategory.NUMERIC
    return resolve_status(item.get("status"))


def clamp_completion(completion: float) -> float:
    return min(100.0, max(0.0, completion))


def normalize_item(item: RawItemLike) -> Optional[NormalizedTimelineItem]:
    """
    Normalize one raw roadmap row.

    Args:
        item: The raw row from any supported export

    Returns:
        The normalized item, or None if the start or end date is missing
    """
    start_raw = resolve_field(item, START_FIELDS)
    end_raw = resolve_field(item, END_FIELDS)
    name = resolve_field(item, NAME_FIELDS) or DEFAULT_NAME

    if start_raw is None or end_raw is None:
        logger.debug("Dropping %r: missing start or end date", name)
        return None

    raw_completion, status_category = resolve_completion(item)
    spi = parse_finite_number(item.get("spi"))

    return {
        "name": name,
        "group": resolve_field(item, GROUP_FIELDS) or DEFAULT_GROUP,
        "start_raw": start_raw,
        "end_raw": end_raw,
        "completion_percent": clamp_completion(raw_completion),
        "raw_completion": raw_completion,
        "status_category": status_category,
        "spi": spi if spi is not None else DEFAULT_SPI,
    }


def normalize_items(items: Iterable[RawItemLike]) -> list[NormalizedTimelineItem]:
    normalized: list[NormalizedTimelineItem] = []
    dropped = 0
    for item in items:
        result = normalize_item(item)
        if result is None:
            dropped += 1
            continue
        normalized.append(result)

    if dropped:
        logger.debug("Dropped %d item(s) without usable dates", dropped)
    return normalized
