# SPDX-License-Identifier: MIT

from contextvars import ContextVar
from typing import Optional

import pendulum

from roadmap.time import today_local

# None means "use the local clock"
_today: ContextVar[Optional[pendulum.Date]] = ContextVar("today", default=None)


def set_today(value: Optional[pendulum.Date]) -> None:
    _today.set(value)


def get_today() -> pendulum.Date:
    override = _today.get()
    if override is not None:
        return override
    return today_local()
