# SPDX-License-Identifier: MIT

from rich.console import Console


def print_dropped(console: Console, dropped_count: int) -> None:
    """Note how many items were left out for lacking a start or end date."""
    if dropped_count > 0:
        console.print(
            f"[dim]{dropped_count} item(s) not shown: missing start or end date[/dim]"
        )
