# SPDX-License-Identifier: MIT

BUCKET_COLORS: dict[str, str] = {
    "complete": "green",
    "on-track": "blue",
    "at-risk": "dark_orange",
    "not-started": "bright_black",
}

TODAY_MARKER_COLOR = "red"
MONTH_TICK_COLOR = "grey50"
GROUP_COLOR = "plum1"
INVALID_DATES_COLOR = "bright_black"


def bucket_color(bucket: str) -> str:
    return BUCKET_COLORS.get(bucket, "white")
