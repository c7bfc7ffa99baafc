# SPDX-License-Identifier: MIT

import re
from typing import Optional

import click
import typer.core

# Top-level commands as they appear in --help
COMMAND_ORDER: tuple[str, ...] = (
    "gantt, g",
    "summary, s",
    "item, i",
    "config, c",
)


class AliasedTyperGroup(typer.core.TyperGroup):
    """TyperGroup whose command names may list aliases, e.g. ``"gantt, g"``."""

    _ALIAS_SPLIT_P = re.compile(r" ?, ?")

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        return super().get_command(ctx, self._resolve_alias(cmd_name))

    def _resolve_alias(self, alias: str) -> str:
        """Registered name of the command that answers to ``alias``."""
        for registered in self.commands:
            if alias in self._ALIAS_SPLIT_P.split(registered):
                return registered
        return alias

    def add_command(self, cmd: click.Command, name: Optional[str] = None) -> None:
        name = name or cmd.name
        registered = self._resolve_alias(name or "")
        # Already reachable through another registered name
        if registered != name and registered in self.commands:
            return
        super().add_command(cmd, name)


class OrderedAliasedTyperGroup(AliasedTyperGroup):
    """Lists top-level commands in COMMAND_ORDER, then any others."""

    def list_commands(self, ctx: click.Context) -> list[str]:
        ordered = [name for name in COMMAND_ORDER if name in self.commands]
        return ordered + [name for name in self.commands if name not in ordered]
