"""Tests for alexa_ssml_builder.vocabulary and the exception hierarchy."""

from __future__ import annotations

import pytest

import alexa_ssml_builder
from alexa_ssml_builder import vocabulary
from alexa_ssml_builder.exceptions import (
    InvalidAttributeError,
    InvalidValueError,
    SSMLBuilderError,
    UnsupportedTagError,
)


class TestVocabulary:
    def test_default_sentinels_present(self) -> None:
        assert vocabulary.VOLUME_DEFAULT in vocabulary.VOLUMES
        assert vocabulary.PITCH_DEFAULT in vocabulary.PITCHES
        assert vocabulary.RATE_DEFAULT in vocabulary.RATES

    def test_vocabularies_are_immutable(self) -> None:
        with pytest.raises(TypeError):
            vocabulary.EMPHASISES[0] = "loud"  # type: ignore[index]

    def test_alexa_additions_not_in_base_sets(self) -> None:
        assert vocabulary.INTERPRET_AS_INTERJECTION not in vocabulary.INTERPRET_AS_VALUES
        assert vocabulary.ROLE_NOUN not in vocabulary.ROLES

    def test_no_duplicates(self) -> None:
        for values in (
            vocabulary.VOLUMES,
            vocabulary.PITCHES,
            vocabulary.RATES,
            vocabulary.INTERPRET_AS_VALUES,
            vocabulary.ROLES,
            vocabulary.BREAK_STRENGTHS,
            vocabulary.EMPHASISES,
        ):
            assert len(set(values)) == len(values)

    def test_role_tokens_are_vendor_prefixed(self) -> None:
        for role in (*vocabulary.ROLES, vocabulary.ROLE_NOUN):
            assert role.startswith("amazon:")


class TestExceptions:
    def test_hierarchy(self) -> None:
        assert issubclass(InvalidAttributeError, SSMLBuilderError)
        assert issubclass(InvalidAttributeError, TypeError)
        assert issubclass(InvalidValueError, SSMLBuilderError)
        assert issubclass(InvalidValueError, ValueError)
        assert issubclass(UnsupportedTagError, InvalidValueError)

    def test_unsupported_message(self) -> None:
        err = UnsupportedTagError("lang", "Alexa")
        assert str(err) == "Alexa does not support the <lang> tag"


class TestPublicAPI:
    def test_exports(self) -> None:
        for name in alexa_ssml_builder.__all__:
            assert hasattr(alexa_ssml_builder, name)

    def test_version(self) -> None:
        assert alexa_ssml_builder.__version__ == "0.1.0"
