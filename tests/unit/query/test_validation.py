"""Unit tests for field value validation."""

from __future__ import annotations

import pytest

from callmemaybe.kernel.errors import ValidationError
from callmemaybe.query import FieldTag, validate_field


class TestEmptyValues:
    @pytest.mark.parametrize("tag", list(FieldTag))
    @pytest.mark.parametrize("raw", ["", "   "])
    def test_empty_rejected_for_every_tag(self, tag: FieldTag, raw: str) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validate_field(tag, raw)
        assert exc_info.value.field == tag.value
        assert tag.prefix in exc_info.value.message

    @pytest.mark.parametrize(
        "tag", [FieldTag.NAME, FieldTag.PHONE, FieldTag.EMAIL, FieldTag.ADDRESS, FieldTag.AGE, FieldTag.INTEREST]
    )
    def test_open_vocabulary_accepts_anything(self, tag: FieldTag) -> None:
        validate_field(tag, "anything at all ?!")


class TestDoneVocabulary:
    @pytest.mark.parametrize("raw", ["t", "true", "f", "false", "T", "TRUE", "t F", "False true"])
    def test_accepts(self, raw: str) -> None:
        validate_field(FieldTag.DONE, raw)

    @pytest.mark.parametrize("raw", ["maybe", "yes", "t maybe", "1"])
    def test_rejects(self, raw: str) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validate_field(FieldTag.DONE, raw)
        assert exc_info.value.field == "done"
        assert "'d/'" in exc_info.value.expected


class TestGenderVocabulary:
    @pytest.mark.parametrize("raw", ["m", "male", "f", "female", "n.a", "N.A", "M Female"])
    def test_accepts(self, raw: str) -> None:
        validate_field(FieldTag.GENDER, raw)

    @pytest.mark.parametrize("raw", ["x", "na", "male other"])
    def test_rejects(self, raw: str) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validate_field(FieldTag.GENDER, raw)
        assert exc_info.value.field == "gender"
        assert "'g/'" in exc_info.value.expected
