# SPDX-License-Identifier: MIT

from contextvars import ContextVar

# Header above gantt/summary/item reports; config `show_header`, --no-header
_show_header: ContextVar[bool] = ContextVar("show_header", default=True)

# Keep item names and groups on one line in the item table; --no-wrap
_no_wrap: ContextVar[bool] = ContextVar("no_wrap", default=False)


def set_show_header(value: bool) -> None:
    _show_header.set(value)


def get_show_header() -> bool:
    """Whether reports print the roadmap header before their output."""
    return _show_header.get()


def set_no_wrap(value: bool) -> None:
    _no_wrap.set(value)


def get_no_wrap() -> bool:
    """Whether the item table should truncate names instead of wrapping.

    Returns:
        True when wrapping is disabled for the Name and Group columns
    """
    return _no_wrap.get()
