"""Logic commands – find (all fields match) and findany (any field matches)."""
from __future__ import annotations

import dataclasses
from typing import ClassVar, Mapping

from callmemaybe.kernel.errors.domain import InvalidArgumentError
from callmemaybe.logic.commands.base import Command, CommandResult
from callmemaybe.model.manager import ContactModel
from callmemaybe.model.person import PersonPredicate
from callmemaybe.observability.logging import get_logger
from callmemaybe.query import CombinationMode, FieldTag, build_query, resolve_field

logger = get_logger(__name__)

MESSAGE_PERSONS_LISTED = "{count} persons listed!"

_PARAMETERS = "[n/NAME] [p/PHONE] [e/EMAIL] [a/ADDRESS] [g/GENDER] [ag/AGE] [d/DONE] [i/INTEREST]"


@dataclasses.dataclass(frozen=True)
class _FieldQueryCommand(Command):
    """Shows the contacts matching field-tagged values under the class's ``MODE``.

    ``fields`` holds the ``(tag, raw value)`` pairs in the order they were
    typed; two commands with the same fields are equal. The values are
    validated and the predicate built when the command is created.
    """

    MODE: ClassVar[CombinationMode]
    MESSAGE_USAGE: ClassVar[str]

    fields: tuple[tuple[FieldTag, str], ...]
    _predicate: PersonPredicate = dataclasses.field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_predicate", self._build())

    def _build(self) -> PersonPredicate:
        try:
            return build_query(dict(self.fields), self.MODE)
        except InvalidArgumentError as exc:
            if exc.argument != "fields":
                raise
            raise InvalidArgumentError(
                f"Invalid command format!\n{self.MESSAGE_USAGE}",
                argument="fields",
                cause=exc,
            ) from exc

    @classmethod
    def from_values(cls, values: Mapping[FieldTag | str, str]) -> "_FieldQueryCommand":
        """Create the command from tokenizer output keyed by tag or prefix (``"n/"``)."""
        return cls(tuple((resolve_field(key), raw) for key, raw in values.items()))

    @property
    def predicate(self) -> PersonPredicate:
        return self._predicate

    def execute(self, model: ContactModel) -> CommandResult:
        model.update_filtered_list(self._predicate)
        shown = len(model.filtered_persons)
        logger.info("find_executed", command=self.COMMAND_WORD, fields=[tag.value for tag, _ in self.fields], shown=shown)
        return CommandResult(MESSAGE_PERSONS_LISTED.format(count=shown))


@dataclasses.dataclass(frozen=True)
class FindCommand(_FieldQueryCommand):
    """Show every contact matching all of the given fields."""

    COMMAND_WORD: ClassVar[str] = "find"
    MODE: ClassVar[CombinationMode] = CombinationMode.ALL
    MESSAGE_USAGE: ClassVar[str] = (
        "find: Finds all persons matching every given field. "
        "Keywords within one field match if any of them matches.\n"
        f"Parameters: {_PARAMETERS}\n"
        "Example: find n/alice bob d/f"
    )


@dataclasses.dataclass(frozen=True)
class FindAnyCommand(_FieldQueryCommand):
    """Show every contact matching at least one of the given fields."""

    COMMAND_WORD: ClassVar[str] = "findany"
    MODE: ClassVar[CombinationMode] = CombinationMode.ANY
    MESSAGE_USAGE: ClassVar[str] = (
        "findany: Finds all persons matching any of the given fields.\n"
        f"Parameters: {_PARAMETERS}\n"
        "Example: findany n/alice g/f ag/25"
    )


__all__ = ["FindAnyCommand", "FindCommand", "MESSAGE_PERSONS_LISTED"]
