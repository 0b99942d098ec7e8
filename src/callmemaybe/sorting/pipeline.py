"""Sorting – sort-and-limit pipeline over a model's displayed list."""
from __future__ import annotations

from typing import Protocol, runtime_checkable

from callmemaybe.model.displayed import ensure_count
from callmemaybe.model.person import PersonComparator
from callmemaybe.observability.logging import get_logger
from callmemaybe.sorting.categories import Category
from callmemaybe.sorting.comparators import get_comparator

logger = get_logger(__name__)


@runtime_checkable
class SortableModel(Protocol):
    def sort_filtered_list(self, comparator: PersonComparator) -> None: ...
    def limit_filtered_list(self, count: int) -> None: ...


def sort_and_limit(model: SortableModel, category: Category, count: int) -> None:
    """Order *model*'s displayed list by *category*, then keep the first *count*.

    The comparator and the count are both checked before the list is touched,
    so a rejected request leaves the displayed list exactly as it was.
    """
    count = ensure_count(count)
    comparator = get_comparator(category)
    model.sort_filtered_list(comparator)
    model.limit_filtered_list(count)
    logger.debug("sort_and_limit_applied", category=category.value, count=count)


__all__ = ["SortableModel", "sort_and_limit"]
