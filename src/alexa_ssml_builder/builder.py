"""SSMLBuilder -- fluent, append-only builder for general SSML.

The builder owns an ordered buffer of markup fragments. Every operation
validates its arguments first and appends a complete, already-closed
fragment only once validation has passed, so the buffer is always a
well-formed prefix of the final document.

Attribute validation is delegated to an :class:`SSMLDialect`. The base
dialect accepts the general (Amazon Polly flavoured) vocabulary; other
dialects narrow it by overriding individual checks.

Text and attribute values are appended verbatim (no XML escaping), so
callers are expected to pass markup-safe text.
"""

from __future__ import annotations

import logging
import re
from typing import Any

from . import vocabulary
from .exceptions import InvalidAttributeError, InvalidValueError
from .vocabulary import (
    BREAK_STRENGTHS,
    INTERPRET_AS_VALUES,
    PHONETIC_ALPHABETS,
    PITCHES,
    RATES,
    ROLES,
    VOLUMES,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

# Longest pause a <break time="..."/> may request.
MAX_BREAK_MS = 10_000

# Document root element emitted by build().
ROOT_TAG = "speak"


_BREAK_TIME_RE = re.compile(r"([0-9]{1,5})(ms|s)")
_VOLUME_RE = re.compile(r"[+\-][0-9]+(\.[0-9]+)?dB")
_PITCH_RE = re.compile(r"[+\-][0-9]+(\.[0-9]+)?%")
_RATE_RE = re.compile(r"[0-9]+%")


def _require_text(value: object, name: str) -> None:
    if not isinstance(value, str):
        raise InvalidAttributeError(f"{name} should be a string, got {type(value).__name__}")


def _one_of(values: tuple[str, ...]) -> str:
    return ",".join(values)


# ---------------------------------------------------------------------------
# Dialect policy
# ---------------------------------------------------------------------------


class SSMLDialect:
    """Attribute rules for the general SSML vocabulary.

    Each ``check_*`` method raises
    :class:`~alexa_ssml_builder.exceptions.InvalidAttributeError` when the
    value is not acceptable and returns ``None`` otherwise.
    """

    name = "SSML"

    def check_volume(self, volume: object) -> None:
        if volume in VOLUMES:
            return
        if isinstance(volume, str) and _VOLUME_RE.fullmatch(volume):
            return
        raise InvalidAttributeError(
            "Volume should be a decibel change (ie. +6dB/-6dB) or one of: " + _one_of(VOLUMES)
        )

    def check_pitch(self, pitch: object) -> None:
        if pitch in PITCHES:
            return
        if isinstance(pitch, str) and _PITCH_RE.fullmatch(pitch):
            return
        raise InvalidAttributeError(
            "Pitch should be a percent change (ie. +10%/-10%) or one of: " + _one_of(PITCHES)
        )

    def is_valid_rate_string(self, rate: object) -> bool:
        return isinstance(rate, str) and _RATE_RE.fullmatch(rate) is not None

    def rate_error_message(self) -> str:
        return "Rate should be a percentage (ie. 150%) or one of: " + _one_of(RATES)

    def check_rate(self, rate: object) -> None:
        if rate in RATES or self.is_valid_rate_string(rate):
            return
        raise InvalidAttributeError(self.rate_error_message())

    def check_interpret_as(self, interpret_as: object) -> None:
        if interpret_as not in INTERPRET_AS_VALUES:
            raise InvalidAttributeError("Type should be one of: " + _one_of(INTERPRET_AS_VALUES))

    def check_role(self, role: object) -> None:
        if role not in ROLES:
            raise InvalidAttributeError("Role must be one of: " + _one_of(ROLES))


def _refuse_constant_write(owner: str, name: str) -> None:
    if name.isupper():
        raise AttributeError(f"{owner}.{name} is a read-only vocabulary constant")


class _ReadOnlyConstants(type):
    def __setattr__(cls, name: str, value: Any) -> None:
        _refuse_constant_write(cls.__name__, name)
        super().__setattr__(name, value)

    def __delattr__(cls, name: str) -> None:
        _refuse_constant_write(cls.__name__, name)
        super().__delattr__(name)


class VocabularyAccess(metaclass=_ReadOnlyConstants):
    """Expose :mod:`~alexa_ssml_builder.vocabulary` constants as class attributes.

    Subclasses name the constants they carry::

        class MyBuilder(VocabularyAccess, constants=BASE_VOCABULARY_NAMES): ...

    after which both ``MyBuilder.VOLUME_XTRA_LOUD`` and
    ``MyBuilder().VOLUME_XTRA_LOUD`` work. The constants cannot be
    reassigned on the class or on an instance.
    """

    def __init_subclass__(cls, constants: frozenset[str] = frozenset(), **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        for name in sorted(constants):
            type.__setattr__(cls, name, getattr(vocabulary, name))

    def __setattr__(self, name: str, value: Any) -> None:
        _refuse_constant_write(type(self).__name__, name)
        super().__setattr__(name, value)

    def __delattr__(self, name: str) -> None:
        _refuse_constant_write(type(self).__name__, name)
        super().__delattr__(name)


# ---------------------------------------------------------------------------
# Builder
# ---------------------------------------------------------------------------


class SSMLBuilder(VocabularyAccess, constants=vocabulary.BASE_VOCABULARY_NAMES):
    """Fluent SSML builder.

    Parameters
    ----------
    dialect:
        Validation rules to apply. Defaults to the general
        :class:`SSMLDialect`.
    """

    def __init__(self, dialect: SSMLDialect | None = None) -> None:
        self.dialect = dialect if dialect is not None else SSMLDialect()
        self._fragments: list[str] = []

    def _append(self, *fragments: str) -> SSMLBuilder:
        self._fragments.extend(fragments)
        return self

    # -- plain text and structure ------------------------------------------

    def speak(self, speech: str) -> SSMLBuilder:
        """Append *speech* as plain text."""
        _require_text(speech, "Speech")
        return self._append(speech)

    def paragraph(self, speech: str) -> SSMLBuilder:
        _require_text(speech, "Speech")
        return self._append("<p>", speech, "</p>")

    def sentence(self, speech: str) -> SSMLBuilder:
        _require_text(speech, "Speech")
        return self._append("<s>", speech, "</s>")

    def pause(self, time: str) -> SSMLBuilder:
        """Insert a ``<break>`` of the given duration (``"500ms"``, ``"2s"``)."""
        match = _BREAK_TIME_RE.fullmatch(time) if isinstance(time, str) else None
        if match is None:
            raise InvalidAttributeError("Time should be a duration in seconds or milliseconds (ie. 2s/500ms)")
        amount = int(match.group(1))
        millis = amount * 1000 if match.group(2) == "s" else amount
        if millis > MAX_BREAK_MS:
            raise InvalidValueError(f"Time must not exceed {MAX_BREAK_MS}ms, got {time}")
        return self._append('<break time="', time, '"/>')

    def pause_by_strength(self, strength: str) -> SSMLBuilder:
        if strength not in BREAK_STRENGTHS:
            raise InvalidAttributeError("Strength must be one of: " + _one_of(BREAK_STRENGTHS))
        return self._append('<break strength="', strength, '"/>')

    # -- interpretation ----------------------------------------------------

    def speak_as(self, speech: str, interpret_as: str) -> SSMLBuilder:
        """Wrap *speech* in ``<say-as>`` with the given interpretation."""
        self.dialect.check_interpret_as(interpret_as)
        _require_text(speech, "Speech")
        return self._append('<say-as interpret-as="', interpret_as, '">', speech, "</say-as>")

    def speak_with_role(self, speech: str, role: str) -> SSMLBuilder:
        """Wrap *speech* in a ``<w>`` element selecting a homograph reading."""
        self.dialect.check_role(role)
        _require_text(speech, "Speech")
        return self._append('<w role="', role, '">', speech, "</w>")

    def speak_with_substitution(self, speech: str, alias: str) -> SSMLBuilder:
        _require_text(alias, "Alias")
        _require_text(speech, "Speech")
        return self._append('<sub alias="', alias, '">', speech, "</sub>")

    def speak_with_phoneme(self, speech: str, alphabet: str, phoneme: str) -> SSMLBuilder:
        if alphabet not in PHONETIC_ALPHABETS:
            raise InvalidAttributeError("Alphabet must be one of: " + _one_of(PHONETIC_ALPHABETS))
        _require_text(phoneme, "Phoneme")
        _require_text(speech, "Speech")
        return self._append(
            '<phoneme alphabet="', alphabet, '" ph="', phoneme, '">', speech, "</phoneme>"
        )

    def whisper(self, speech: str) -> SSMLBuilder:
        _require_text(speech, "Speech")
        return self._append('<amazon:effect name="whispered">', speech, "</amazon:effect>")

    # -- prosody -----------------------------------------------------------

    def speak_with_volume(self, speech: str, volume: str) -> SSMLBuilder:
        self.dialect.check_volume(volume)
        return self._prosody(speech, volume=volume)

    def speak_with_pitch(self, speech: str, pitch: str) -> SSMLBuilder:
        self.dialect.check_pitch(pitch)
        return self._prosody(speech, pitch=pitch)

    def speak_with_rate(self, speech: str, rate: str) -> SSMLBuilder:
        self.dialect.check_rate(rate)
        return self._prosody(speech, rate=rate)

    def speak_with_prosody(
        self,
        speech: str,
        volume: str | None = None,
        pitch: str | None = None,
        rate: str | None = None,
    ) -> SSMLBuilder:
        """Wrap *speech* in a single ``<prosody>`` element.

        Only the attributes that are not ``None`` are emitted, always in
        the order volume, pitch, rate.
        """
        if volume is not None:
            self.dialect.check_volume(volume)
        if pitch is not None:
            self.dialect.check_pitch(pitch)
        if rate is not None:
            self.dialect.check_rate(rate)
        return self._prosody(speech, volume=volume, pitch=pitch, rate=rate)

    def _prosody(
        self,
        speech: str,
        volume: str | None = None,
        pitch: str | None = None,
        rate: str | None = None,
    ) -> SSMLBuilder:
        _require_text(speech, "Speech")
        attrs = "".join(
            f' {name}="{value}"'
            for name, value in (("volume", volume), ("pitch", pitch), ("rate", rate))
            if value is not None
        )
        return self._append(f"<prosody{attrs}>", speech, "</prosody>")

    # -- language and marks ------------------------------------------------

    def start_language(self, language: str) -> SSMLBuilder:
        _require_text(language, "Language")
        return self._append('<lang xml:lang="', language, '">')

    def end_language(self, language: str | None = None) -> SSMLBuilder:
        return self._append("</lang>")

    def speak_with_language(self, speech: str, language: str) -> SSMLBuilder:
        _require_text(language, "Language")
        _require_text(speech, "Speech")
        return self._append('<lang xml:lang="', language, '">', speech, "</lang>")

    def mark(self, tag_name: str) -> SSMLBuilder:
        _require_text(tag_name, "Mark name")
        return self._append('<mark name="', tag_name, '"/>')

    # -- output ------------------------------------------------------------

    def build(self) -> str:
        """Return the document built so far, wrapped in ``<speak>``.

        The builder stays usable; later calls append to the same buffer.
        """
        logger.debug("Building SSML document from %d fragments", len(self._fragments))
        return f"<{ROOT_TAG}>{''.join(self._fragments)}</{ROOT_TAG}>"
