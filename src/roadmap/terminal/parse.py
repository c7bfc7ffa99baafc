# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer

from roadmap.time import parse_flexible_date, today_local


def parse_date(date_param: Optional[str | int]) -> Optional[pendulum.Date]:
    """
    Parse a date given on the command line.

    Accepts anything the roadmap date parser understands (YYYY-MM-DD,
    DD/MM/YYYY, YYYY/MM/DD, ...), the shortcuts today/t, yesterday/y and
    tomorrow/o, and day offsets relative to today such as 1 or -7.

    Raises:
        typer.BadParameter: If the value cannot be read as a date
    """
    if date_param is None:
        return None

    date = str(date_param).strip()

    if re.match(r"^-?\d+$", date, re.ASCII):
        try:
            return today_local().add(days=int(date))
        except (OverflowError, ValueError):
            raise typer.BadParameter(f"Day offset out of range: '{date}'")

    if date == "today" or date == "t":
        return today_local()
    if date == "yesterday" or date == "y":
        return today_local().subtract(days=1)
    if date == "tomorrow" or date == "o":
        return today_local().add(days=1)

    parsed = parse_flexible_date(date)
    if parsed is None:
        raise typer.BadParameter(f"Incorrect date format: '{date}'")
    return parsed
