"""Sorting – comparator selection per category.

Every comparator orders ascending on its field, breaks ties on the
case-insensitive name, and returns 0 for records equal on both.
:class:`~callmemaybe.model.manager.ContactModel` orders those by insertion
into the address book.
"""
from __future__ import annotations

from typing import Any, Callable

from callmemaybe.kernel.errors.application import UnsupportedCategoryError
from callmemaybe.model.person import Person, PersonComparator
from callmemaybe.observability.logging import get_logger
from callmemaybe.sorting.categories import Category

logger = get_logger(__name__)

SortKey = Callable[[Person], Any]


def _cmp(left: Any, right: Any) -> int:
    return (left > right) - (left < right)


def _text(value: str) -> str:
    return value.casefold()


def _optional(value: Any) -> tuple[bool, Any]:
    # Unset values sort after every set value.
    return (value is None, value if value is not None else 0)


def _name_key(person: Person) -> str:
    return _text(person.name)


def _field_key(category: Category) -> SortKey:
    match category:
        case Category.NAME:
            return _name_key
        case Category.PHONE:
            return lambda p: _text(p.phone)
        case Category.EMAIL:
            return lambda p: _text(p.email)
        case Category.ADDRESS:
            return lambda p: _text(p.address)
        case Category.GENDER:
            return lambda p: (p.gender is None, p.gender.value if p.gender is not None else "")
        case Category.AGE:
            return lambda p: _optional(p.age)
        case Category.DONE:
            return lambda p: p.done
    raise UnsupportedCategoryError(category.value)


def _comparing(key: SortKey) -> PersonComparator:
    def _compare(left: Person, right: Person) -> int:
        return _cmp(key(left), key(right)) or _cmp(_name_key(left), _name_key(right))

    return _compare


def get_comparator(category: Category) -> PersonComparator:
    """Return the comparator ordering contacts by *category*.

    Raises
    ------
    UnsupportedCategoryError
        When *category* has no total order (``interest``).
    """
    comparator = _comparing(_field_key(category))
    logger.debug("comparator_selected", category=category.value)
    return comparator


__all__ = ["get_comparator"]
