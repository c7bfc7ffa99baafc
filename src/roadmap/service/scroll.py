# SPDX-License-Identifier: MIT

import logging
import threading
from typing import Optional, Protocol

logger = logging.getLogger(__name__)

DEFAULT_RETRY_DELAY = 0.1


class ScrollContainer(Protocol):
    """Anything hosting the timeline that can scroll horizontally."""

    @property
    def content_width(self) -> int: ...

    @property
    def viewport_width(self) -> int: ...

    def scroll_to(self, offset: int) -> None: ...


def compute_scroll_offset(
    today_percent: float, content_width: int, viewport_width: int
) -> int:
    """
    Horizontal scroll offset that centers the today marker in the viewport.

    Args:
        today_percent: Today marker position, 0-100
        content_width: Full width of the rendered timeline
        viewport_width: Visible width of the hosting container

    Returns:
        The offset, clamped to the scrollable range
    """
    max_offset = max(0, content_width - viewport_width)
    offset = today_percent / 100 * content_width - viewport_width / 2
    return int(min(max_offset, max(0.0, offset)))


def _try_scroll(container: ScrollContainer, today_percent: float) -> bool:
    try:
        content_width = container.content_width
        viewport_width = container.viewport_width
        if content_width <= 0 or viewport_width <= 0:
            return False
        container.scroll_to(
            compute_scroll_offset(today_percent, content_width, viewport_width)
        )
    except Exception:
        logger.debug("Scroll to today failed", exc_info=True)
        return False
    return True


def scroll_to_today(
    container: ScrollContainer,
    today_percent: Optional[float],
    retry_delay: float = DEFAULT_RETRY_DELAY,
) -> bool:
    """
    Center the container on the today marker.

    If the container is not laid out yet (or scrolling fails) one more
    attempt is scheduled after ``retry_delay`` seconds. Nothing is raised
    either way.

    Returns:
        True if the container was scrolled immediately
    """
    if today_percent is None:
        return False
    if _try_scroll(container, today_percent):
        return True

    timer = threading.Timer(retry_delay, _try_scroll, args=(container, today_percent))
    timer.daemon = True
    timer.start()
    return False
