"""ContactModel – the full contact collection plus its displayed view."""

from __future__ import annotations

from typing import Iterable

from callmemaybe.kernel.errors.domain import InvalidArgumentError
from callmemaybe.model.displayed import DisplayedList
from callmemaybe.model.person import Person, PersonComparator, PersonPredicate
from callmemaybe.observability.logging import get_logger

logger = get_logger(__name__)


class ContactModel:
    """In-memory model consumed by the commands.

    The full collection is kept in insertion order, and that order is the last
    tie-break whenever the displayed list is sorted. The displayed list starts
    out showing every contact and is rebuilt from the full collection by
    :meth:`update_filtered_list`, then reordered and truncated in place by
    :meth:`sort_filtered_list` and :meth:`limit_filtered_list`.
    """

    def __init__(self, persons: Iterable[Person] = ()) -> None:
        self._persons: list[Person] = []
        self._insertion: dict[Person, int] = {}
        for person in persons:
            self._append(person)
        self._displayed = DisplayedList(self._persons)

    @property
    def persons(self) -> tuple[Person, ...]:
        return tuple(self._persons)

    @property
    def filtered_persons(self) -> tuple[Person, ...]:
        return self._displayed.items

    def _append(self, person: Person) -> None:
        self._insertion.setdefault(person, len(self._persons))
        self._persons.append(person)

    def _insertion_rank(self, person: Person) -> int:
        return self._insertion.get(person, len(self._persons))

    def add_person(self, person: Person) -> None:
        """Append *person* to the collection and reset the view to show everyone."""
        self._append(person)
        self._displayed.replace(self._persons)

    def update_filtered_list(self, predicate: PersonPredicate | None) -> None:
        """Replace the displayed list with every contact satisfying *predicate*."""
        if predicate is None:
            self._displayed.replace(self._persons)
        else:
            self._displayed.replace(p for p in self._persons if predicate(p))
        logger.debug("filtered_list_updated", total=len(self._persons), shown=len(self._displayed))

    def sort_filtered_list(self, comparator: PersonComparator) -> None:
        self._displayed.sort(comparator, rank=self._insertion_rank)
        logger.debug("filtered_list_sorted", shown=len(self._displayed))

    def limit_filtered_list(self, count: int) -> None:
        before = len(self._displayed)
        self._displayed.limit(count)
        logger.debug("filtered_list_limited", count=count, before=before, after=len(self._displayed))

    def get_filtered_person(self, index: int) -> Person:
        """Return the displayed contact at zero-based *index*."""
        if index < 0 or index >= len(self._displayed):
            raise InvalidArgumentError(
                "The person index provided is invalid",
                argument="index",
                value=index,
            )
        return self._displayed[index]


__all__ = ["ContactModel"]
