"""Query builder – validate raw field values, then build and combine predicates."""
from __future__ import annotations

from typing import Mapping

from callmemaybe.kernel.errors.domain import InvalidArgumentError
from callmemaybe.model.person import PersonPredicate
from callmemaybe.observability.logging import get_logger
from callmemaybe.query.combinator import CombinationMode, combine
from callmemaybe.query.fields import FieldTag
from callmemaybe.query.predicates import build_predicate
from callmemaybe.query.validation import validate_field

logger = get_logger(__name__)

NO_FIELD_MESSAGE = "At least one field prefix must be supplied"


def resolve_field(key: FieldTag | str) -> FieldTag:
    """Return *key* as a :class:`FieldTag`, resolving prefixes such as ``"n/"``."""
    if isinstance(key, FieldTag):
        return key
    return FieldTag.from_prefix(key)


def build_query(
    values: Mapping[FieldTag | str, str],
    mode: CombinationMode = CombinationMode.ALL,
) -> PersonPredicate:
    """Turn field-tagged raw values into a single predicate.

    *values* maps each present field (a :class:`FieldTag` or its prefix such as
    ``"n/"``) to its raw text, in the order the fields were typed. Every value
    is validated, and every predicate built, before the combined predicate is
    returned, so malformed input fails before any record is scanned.

    Raises
    ------
    InvalidArgumentError
        When no field is present, a prefix is unknown, or an ``age`` token is
        not a whole number.
    ValidationError
        When a value is empty or outside its field's vocabulary.
    """
    if not values:
        raise InvalidArgumentError(NO_FIELD_MESSAGE, argument="fields", value=None)

    resolved = [(resolve_field(key), raw) for key, raw in values.items()]
    for tag, raw in resolved:
        validate_field(tag, raw)

    predicates = [build_predicate(tag, raw) for tag, raw in resolved]
    combined = combine(predicates, mode)
    logger.debug("query_built", fields=[tag.value for tag, _ in resolved], mode=getattr(mode, "value", mode))
    return combined


__all__ = ["NO_FIELD_MESSAGE", "build_query", "resolve_field"]
