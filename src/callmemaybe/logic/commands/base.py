"""Logic commands – Command base and CommandResult."""
from __future__ import annotations

import abc
import dataclasses

from callmemaybe.model.manager import ContactModel


@dataclasses.dataclass(frozen=True)
class CommandResult:
    """Feedback shown to the user after a command runs."""

    feedback: str


class Command(abc.ABC):
    """A parsed user command, executed against a :class:`ContactModel`."""

    COMMAND_WORD: str = ""

    @abc.abstractmethod
    def execute(self, model: ContactModel) -> CommandResult: ...


__all__ = ["Command", "CommandResult"]
