"""Query – field validation, predicate factories and combination."""
from callmemaybe.query.builder import build_query, resolve_field
from callmemaybe.query.combinator import CombinationMode, combine
from callmemaybe.query.fields import FieldTag, tokenize
from callmemaybe.query.predicates import build_predicate
from callmemaybe.query.validation import validate_field

__all__ = [
    "CombinationMode",
    "FieldTag",
    "build_predicate",
    "build_query",
    "combine",
    "resolve_field",
    "tokenize",
    "validate_field",
]
