"""
CLI Commands.

Closed registry of every command the shell can dispatch, keyed by the
name in each command's CommandInfo.
"""

from appctl.cli.command import Command
from appctl.cli.commands.apps import (
    AppCreate,
    AppGrant,
    AppList,
    AppLog,
    AppRemove,
    AppRevoke,
)

COMMANDS: dict[str, Command] = {
    command.info().name: command
    for command in (
        AppCreate(),
        AppRemove(),
        AppList(),
        AppGrant(),
        AppRevoke(),
        AppLog(),
    )
}


def get_command(name: str) -> Command:
    """Look up a registered command by name. Raises KeyError if unknown."""
    return COMMANDS[name]


__all__ = [
    "COMMANDS",
    "AppCreate",
    "AppGrant",
    "AppList",
    "AppLog",
    "AppRemove",
    "AppRevoke",
    "get_command",
]
