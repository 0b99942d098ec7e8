"""Person value object – an immutable contact record."""

from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Callable

from callmemaybe.kernel.errors.domain import ValidationError


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"


@dataclasses.dataclass(frozen=True, slots=True)
class Person:
    """A contact in the address book.

    Equality and hashing are structural. ``gender`` and ``age`` are optional
    (``None`` means unset, shown to users as ``N.A``); ``done`` records whether
    the contact has been called.
    """

    name: str
    phone: str = ""
    email: str = ""
    address: str = ""
    gender: Gender | None = None
    age: int | None = None
    done: bool = False
    interests: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Names should not be blank", field="name")
        if self.age is not None and self.age < 0:
            raise ValidationError(f"Age must be non-negative, got {self.age}", field="age")
        if not isinstance(self.interests, frozenset):
            object.__setattr__(self, "interests", frozenset(self.interests))

    def __str__(self) -> str:
        return self.name


PersonPredicate = Callable[[Person], bool]
PersonComparator = Callable[[Person, Person], int]


__all__ = ["Gender", "Person", "PersonComparator", "PersonPredicate"]
