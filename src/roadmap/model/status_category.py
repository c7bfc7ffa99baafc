# SPDX-License-Identifier: MIT

from enum import Enum


class StatusCategory(str, Enum):
    """Canonical category a raw status resolved to."""

    COMPLETE = "complete"
    ON_TIME = "on-time"
    DELAYED = "delayed"
    IN_PROGRESS = "in-progress"
    NUMERIC = "numeric"
    UNRECOGNIZED = "unrecognized"
