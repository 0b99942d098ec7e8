"""DisplayedList – the mutable, ordered view of contacts shown to the user."""

from __future__ import annotations

import functools
from typing import Callable, Iterable, Iterator

from callmemaybe.kernel.errors.domain import InvalidArgumentError
from callmemaybe.model.person import Person, PersonComparator


def ensure_count(count: object) -> int:
    """Return *count* if it is a usable limit, else raise :class:`InvalidArgumentError`."""
    if isinstance(count, bool) or not isinstance(count, int):
        raise InvalidArgumentError(
            f"Count must be a non-negative integer, got {count!r}",
            argument="count",
            value=count,
        )
    if count < 0:
        raise InvalidArgumentError(
            f"Count must be a non-negative integer, got {count}",
            argument="count",
            value=count,
        )
    return count


class DisplayedList:
    """Ordered, finite sequence of :class:`Person` records.

    Mutated in place by :meth:`replace`, :meth:`sort` and :meth:`limit`;
    readers get an immutable snapshot through :attr:`items`.
    """

    def __init__(self, persons: Iterable[Person] = ()) -> None:
        self._items: list[Person] = list(persons)

    @property
    def items(self) -> tuple[Person, ...]:
        return tuple(self._items)

    def replace(self, persons: Iterable[Person]) -> None:
        self._items[:] = persons

    def sort(self, comparator: PersonComparator, rank: Callable[[Person], int] | None = None) -> None:
        """In-place sort by *comparator*.

        Records the comparator ties are ordered by *rank* when given, otherwise
        they keep their current relative order.
        """
        compare_key = functools.cmp_to_key(comparator)
        if rank is None:
            self._items.sort(key=compare_key)
        else:
            self._items.sort(key=lambda p: (compare_key(p), rank(p)))

    def limit(self, count: int) -> None:
        """Keep at most the first *count* records."""
        count = ensure_count(count)
        del self._items[count:]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Person]:
        return iter(tuple(self._items))

    def __getitem__(self, index: int) -> Person:
        return self._items[index]

    def __repr__(self) -> str:
        return f"DisplayedList(size={len(self._items)})"


__all__ = ["DisplayedList", "ensure_count"]
