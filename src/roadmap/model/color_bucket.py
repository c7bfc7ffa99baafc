# SPDX-License-Identifier: MIT

from typing import Literal

ColorBucket = Literal["complete", "on-track", "at-risk", "not-started"]

COLOR_BUCKETS: tuple[ColorBucket, ...] = (
    "complete",
    "on-track",
    "at-risk",
    "not-started",
)
