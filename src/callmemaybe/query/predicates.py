"""Query predicates – one single-field predicate per field tag.

Every factory splits the raw value on whitespace and returns a closure that
is true for a :class:`Person` when *any* token matches. Factories never
inspect a record; the only failure at construction time is an ``age``
token that is not made of ASCII digits 0-9 alone.
"""
from __future__ import annotations

import re

from callmemaybe.kernel.errors.domain import InvalidArgumentError
from callmemaybe.model.person import Gender, Person, PersonPredicate
from callmemaybe.query.fields import FieldTag, tokenize

_GENDER_TOKENS: dict[str, Gender] = {
    "m": Gender.MALE,
    "male": Gender.MALE,
    "f": Gender.FEMALE,
    "female": Gender.FEMALE,
}
_UNSET_GENDER_TOKEN = "n.a"

_AGE_TOKEN = re.compile(r"[0-9]+")

_DONE_TOKENS: dict[str, bool] = {
    "t": True,
    "true": True,
    "f": False,
    "false": False,
}


def name_predicate(tokens: list[str]) -> PersonPredicate:
    keywords = frozenset(t.lower() for t in tokens)

    def _matches(person: Person) -> bool:
        return any(word in keywords for word in person.name.lower().split())

    return _matches


def phone_predicate(tokens: list[str]) -> PersonPredicate:
    numbers = tuple(tokens)

    def _matches(person: Person) -> bool:
        return any(number in person.phone for number in numbers)

    return _matches


def email_predicate(tokens: list[str]) -> PersonPredicate:
    keywords = tuple(t.lower() for t in tokens)

    def _matches(person: Person) -> bool:
        email = person.email.lower()
        return any(keyword in email for keyword in keywords)

    return _matches


def address_predicate(tokens: list[str]) -> PersonPredicate:
    keywords = tuple(t.lower() for t in tokens)

    def _matches(person: Person) -> bool:
        address = person.address.lower()
        return any(keyword in address for keyword in keywords)

    return _matches


def gender_predicate(tokens: list[str]) -> PersonPredicate:
    lowered = [t.lower() for t in tokens]
    genders = frozenset(_GENDER_TOKENS[t] for t in lowered if t in _GENDER_TOKENS)
    match_unset = _UNSET_GENDER_TOKEN in lowered

    def _matches(person: Person) -> bool:
        if person.gender is None:
            return match_unset
        return person.gender in genders

    return _matches


def age_predicate(tokens: list[str]) -> PersonPredicate:
    ages: set[int] = set()
    for token in tokens:
        if _AGE_TOKEN.fullmatch(token) is None:
            raise InvalidArgumentError(
                f"Age must be a whole number, got {token!r}",
                argument=FieldTag.AGE.value,
                value=token,
                expected="'ag/' can only be followed by whole numbers",
            )
        ages.add(int(token))
    frozen = frozenset(ages)

    def _matches(person: Person) -> bool:
        return person.age is not None and person.age in frozen

    return _matches


def done_predicate(tokens: list[str]) -> PersonPredicate:
    flags = frozenset(_DONE_TOKENS[t.lower()] for t in tokens if t.lower() in _DONE_TOKENS)

    def _matches(person: Person) -> bool:
        return person.done in flags

    return _matches


def interest_predicate(tokens: list[str]) -> PersonPredicate:
    keywords = frozenset(t.lower() for t in tokens)

    def _matches(person: Person) -> bool:
        return any(interest.lower() in keywords for interest in person.interests)

    return _matches


def build_predicate(tag: FieldTag, raw: str) -> PersonPredicate:
    """Return the single-field predicate for *tag* built from the raw value *raw*."""
    tokens = tokenize(raw)
    match tag:
        case FieldTag.NAME:
            return name_predicate(tokens)
        case FieldTag.PHONE:
            return phone_predicate(tokens)
        case FieldTag.EMAIL:
            return email_predicate(tokens)
        case FieldTag.ADDRESS:
            return address_predicate(tokens)
        case FieldTag.GENDER:
            return gender_predicate(tokens)
        case FieldTag.AGE:
            return age_predicate(tokens)
        case FieldTag.DONE:
            return done_predicate(tokens)
        case FieldTag.INTEREST:
            return interest_predicate(tokens)
    raise InvalidArgumentError(f"Unknown field: {tag!r}", argument="field", value=tag)


__all__ = [
    "address_predicate",
    "age_predicate",
    "build_predicate",
    "done_predicate",
    "email_predicate",
    "gender_predicate",
    "interest_predicate",
    "name_predicate",
    "phone_predicate",
]
