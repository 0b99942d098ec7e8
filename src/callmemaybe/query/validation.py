"""Query validation – per-field checks applied before any predicate is built."""
from __future__ import annotations

from callmemaybe.kernel.errors.domain import ValidationError
from callmemaybe.query.fields import FieldTag, tokenize

EMPTY_FIELD_MESSAGE = (
    "Fields provided can be anything but cannot be an empty string. "
    "Found one violation at: {prefix}"
)

DONE_VALUES: frozenset[str] = frozenset({"t", "true", "f", "false"})
GENDER_VALUES: frozenset[str] = frozenset({"m", "male", "f", "female", "n.a"})

_VOCABULARIES: dict[FieldTag, tuple[frozenset[str], str]] = {
    FieldTag.DONE: (
        DONE_VALUES,
        "'d/' can only be followed by 't', 'f', 'true', or 'false'",
    ),
    FieldTag.GENDER: (
        GENDER_VALUES,
        "'g/' can only be followed by 'm', 'f', 'male', 'female' or 'N.A'",
    ),
}


def validate_field(tag: FieldTag, raw: str) -> None:
    """Raise :class:`ValidationError` if *raw* is not an acceptable value for *tag*.

    Every field rejects an empty (or blank) value. ``done`` and ``gender``
    additionally require each whitespace-separated token to belong to their
    closed vocabulary, compared case-insensitively.
    """
    if not raw or not raw.strip():
        message = EMPTY_FIELD_MESSAGE.format(prefix=tag.prefix)
        raise ValidationError(message, field=tag.value, expected=message)

    vocabulary = _VOCABULARIES.get(tag)
    if vocabulary is None:
        return
    allowed, expected = vocabulary
    for token in tokenize(raw):
        if token.lower() not in allowed:
            raise ValidationError(
                expected,
                field=tag.value,
                expected=expected,
                detail={"token": token},
            )


__all__ = ["DONE_VALUES", "EMPTY_FIELD_MESSAGE", "GENDER_VALUES", "validate_field"]
