"""Logic commands – filter: sort the displayed list by a category and cap its size."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from callmemaybe.kernel.errors.domain import InvalidArgumentError
from callmemaybe.logic.commands.base import Command, CommandResult
from callmemaybe.model.displayed import ensure_count
from callmemaybe.model.manager import ContactModel
from callmemaybe.observability.logging import get_logger
from callmemaybe.sorting import Category, sort_and_limit

logger = get_logger(__name__)


@dataclasses.dataclass(frozen=True)
class FilterCommand(Command):
    """Sort the displayed contacts ascending by ``category`` and keep the first ``count``."""

    COMMAND_WORD: ClassVar[str] = "filter"
    MESSAGE_USAGE: ClassVar[str] = (
        "filter: Filters the displayed list of people by the category given by the user. "
        "List will be shown in ascending order.\n"
        "Parameters: CATEGORY COUNT (must be a non-negative integer)\n"
        "Example: filter Age 5"
    )
    MESSAGE_SUCCESS: ClassVar[str] = "Filtered by: {category}"

    category: Category
    count: int

    def __post_init__(self) -> None:
        ensure_count(self.count)

    @classmethod
    def parse(cls, args: str) -> "FilterCommand":
        """Parse ``"CATEGORY COUNT"``, e.g. ``"Age 3"``."""
        parts = args.split()
        if len(parts) != 2:
            raise InvalidArgumentError(
                f"Invalid command format!\n{cls.MESSAGE_USAGE}",
                argument="args",
                value=args,
            )
        category = Category.parse(parts[0])
        try:
            count = int(parts[1])
        except ValueError as exc:
            raise InvalidArgumentError(
                f"Count must be a non-negative integer, got {parts[1]!r}",
                argument="count",
                value=parts[1],
            ) from exc
        return cls(category, count)

    def execute(self, model: ContactModel) -> CommandResult:
        sort_and_limit(model, self.category, self.count)
        logger.info("filter_executed", category=self.category.value, count=self.count)
        return CommandResult(self.MESSAGE_SUCCESS.format(category=self.category.value))


__all__ = ["FilterCommand"]
