"""Logic commands – find, findany and filter."""
from callmemaybe.logic.commands.base import Command, CommandResult
from callmemaybe.logic.commands.filter import FilterCommand
from callmemaybe.logic.commands.find import MESSAGE_PERSONS_LISTED, FindAnyCommand, FindCommand

__all__ = [
    "Command",
    "CommandResult",
    "FilterCommand",
    "FindAnyCommand",
    "FindCommand",
    "MESSAGE_PERSONS_LISTED",
]
