# SPDX-License-Identifier: MIT

from typing import Optional

import typer

from roadmap.log import LOG_LEVELS
from roadmap.view.gantt import MIN_LEFT_COLUMN_WIDTH


def validate_width(width: Optional[int]) -> Optional[int]:
    if width is None:
        return None
    if width < 1:
        raise typer.BadParameter("Width must be a positive number of columns")
    return width


def validate_left_column_width(width: Optional[int]) -> Optional[int]:
    if width is None:
        return None
    if width < MIN_LEFT_COLUMN_WIDTH:
        raise typer.BadParameter(
            f"Left column width must be at least {MIN_LEFT_COLUMN_WIDTH} columns"
        )
    return width


def validate_log_level(log_level: Optional[str]) -> Optional[str]:
    if log_level is None:
        return None
    if log_level.upper() not in LOG_LEVELS:
        raise typer.BadParameter(
            f"Log level must be one of {', '.join(LOG_LEVELS)}, got '{log_level}'"
        )
    return log_level.upper()
