"""Query combinator – fold single-field predicates into one."""
from __future__ import annotations

from enum import Enum
from typing import Iterable

from callmemaybe.kernel.errors.domain import InvalidArgumentError
from callmemaybe.model.person import Person, PersonPredicate


class CombinationMode(str, Enum):
    ALL = "all"  # conjunction
    ANY = "any"  # disjunction


def combine(predicates: Iterable[PersonPredicate], mode: CombinationMode) -> PersonPredicate:
    """Return one predicate over *predicates* according to *mode*.

    ``ALL`` over an empty set is always true and ``ANY`` over an empty set is
    always false. Members are evaluated in insertion order and evaluation
    stops once the outcome is decided.

    Raises
    ------
    InvalidArgumentError
        When *mode* is not a :class:`CombinationMode`.
    """
    members = tuple(predicates)

    match mode:
        case CombinationMode.ALL:
            def _all(person: Person) -> bool:
                return all(p(person) for p in members)

            return _all
        case CombinationMode.ANY:
            def _any(person: Person) -> bool:
                return any(p(person) for p in members)

            return _any
    raise InvalidArgumentError(f"Unknown combination mode: {mode!r}", argument="mode", value=mode)


__all__ = ["CombinationMode", "combine"]
