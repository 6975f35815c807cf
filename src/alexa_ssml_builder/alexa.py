"""AlexaSSMLBuilder -- SSML restricted to the tag subset Alexa accepts.

Alexa speaks a narrower SSML dialect than Amazon Polly:

  Tag / attribute                 Alexa
  ─────────────────────────────   ──────────────────────────────────
  <lang>, <mark>                  unsupported (always rejected)
  prosody volume/pitch "default"  rejected
  prosody rate "N%"               any percentage with at least one digit
  <say-as interpret-as>           adds "interjection" (speechcons)
  <w role>                        adds "amazon:NN"
  <emphasis level>                strong, moderate, reduced
  <audio src>                     added; https:// URLs to .mp3 files only

The builder wraps an :class:`~alexa_ssml_builder.builder.SSMLBuilder`
configured with :class:`AlexaDialect`. Operations Alexa supports as-is are
forwarded to it; the others are narrowed, replaced or refused here.
"""

from __future__ import annotations

import logging

from .builder import SSMLBuilder, SSMLDialect, VocabularyAccess, _one_of, _require_text
from .exceptions import InvalidAttributeError, InvalidValueError, UnsupportedTagError
from .vocabulary import (
    ALEXA_VOCABULARY_NAMES,
    EMPHASISES,
    INTERPRET_AS_INTERJECTION,
    INTERPRET_AS_VALUES,
    PITCH_DEFAULT,
    RATES,
    ROLE_NOUN,
    ROLES,
    VOLUME_DEFAULT,
    EmphasisLevel,
)

logger = logging.getLogger(__name__)

_AUDIO_SCHEME = "https://"
_AUDIO_EXTENSION = ".mp3"


def _reject_default_volume(volume: object) -> None:
    if volume == VOLUME_DEFAULT:
        raise InvalidAttributeError("Alexa does not support 'default' for the volume")


def _reject_default_pitch(pitch: object) -> None:
    if pitch == PITCH_DEFAULT:
        raise InvalidAttributeError("Alexa does not support 'default' for the pitch")


class AlexaDialect(SSMLDialect):
    """Attribute rules for Alexa SSML."""

    name = "Alexa"

    def check_volume(self, volume: object) -> None:
        _reject_default_volume(volume)
        super().check_volume(volume)

    def check_pitch(self, pitch: object) -> None:
        _reject_default_pitch(pitch)
        super().check_pitch(pitch)

    def is_valid_rate_string(self, rate: object) -> bool:
        return isinstance(rate, str) and rate.endswith("%") and len(rate) > 2

    def rate_error_message(self) -> str:
        return "Rate should be a percent increase/decrease (ie. 150%/50%) or one of: " + _one_of(RATES)

    def check_interpret_as(self, interpret_as: object) -> None:
        if interpret_as != INTERPRET_AS_INTERJECTION and interpret_as not in INTERPRET_AS_VALUES:
            raise InvalidAttributeError(
                "Type should be one of: "
                + INTERPRET_AS_INTERJECTION
                + ","
                + _one_of(INTERPRET_AS_VALUES)
            )

    def check_role(self, role: object) -> None:
        if role != ROLE_NOUN and role not in ROLES:
            raise InvalidAttributeError("Role must be one of: " + _one_of((ROLE_NOUN, *ROLES)))


class AlexaSSMLBuilder(VocabularyAccess, constants=ALEXA_VOCABULARY_NAMES):
    """Fluent builder for Alexa SSML.

    Every mutating method returns the builder itself, so calls chain::

        ssml = (
            AlexaSSMLBuilder()
            .speak("Welcome back. ")
            .play_audio("https://example.com/chime.mp3")
            .speak_with_speechcon("bingo")
            .build()
        )

    A method that rejects its arguments leaves the document untouched.
    """

    def __init__(self) -> None:
        self.dialect = AlexaDialect()
        self._engine = SSMLBuilder(self.dialect)

    # -- Alexa-only tags ---------------------------------------------------

    def play_audio(self, url: str) -> AlexaSSMLBuilder:
        """Play the MP3 file at *url*.

        Raises :class:`~alexa_ssml_builder.exceptions.InvalidAttributeError`
        if *url* is not a string and
        :class:`~alexa_ssml_builder.exceptions.InvalidValueError` if it is
        not an ``https://`` URL ending in ``.mp3``.
        """
        if not isinstance(url, str):
            raise InvalidAttributeError("Url should be a string")
        if not url.lower().startswith(_AUDIO_SCHEME):
            raise InvalidValueError(f"Url must start with {_AUDIO_SCHEME}")
        if not url.endswith(_AUDIO_EXTENSION):
            raise InvalidValueError(f"Url must end with {_AUDIO_EXTENSION}")
        self._engine._append('<audio src="', url, '"/>')
        return self

    def speak_with_emphasis(self, speech: str, level: EmphasisLevel) -> AlexaSSMLBuilder:
        """Wrap *speech* in ``<emphasis>`` (see ``EMPHASISES`` for levels)."""
        if level not in EMPHASISES:
            raise InvalidAttributeError("Level must be one of: " + _one_of(EMPHASISES))
        _require_text(speech, "Speech")
        self._engine._append('<emphasis level="', level, '">', speech, "</emphasis>")
        return self

    def speak_with_speechcon(self, speechcon: str) -> AlexaSSMLBuilder:
        """Speak *speechcon* as one of Alexa's predefined interjections.

        See the Alexa Skills Kit speechcon reference for the phrases each
        locale supports.
        """
        return self.speak_as(speechcon, INTERPRET_AS_INTERJECTION)

    # -- narrowed ----------------------------------------------------------

    def speak_with_prosody(
        self,
        speech: str,
        volume: str | None = None,
        pitch: str | None = None,
        rate: str | None = None,
    ) -> AlexaSSMLBuilder:
        _reject_default_volume(volume)
        _reject_default_pitch(pitch)
        self._engine.speak_with_prosody(speech, volume, pitch, rate)
        return self

    # -- unsupported -------------------------------------------------------

    def _unsupported(self, tag: str) -> UnsupportedTagError:
        logger.debug("Refusing <%s> tag for the %s dialect", tag, self.dialect.name)
        return UnsupportedTagError(tag, self.dialect.name)

    def start_language(self, *args: object, **kwargs: object) -> AlexaSSMLBuilder:
        raise self._unsupported("lang")

    def end_language(self, *args: object, **kwargs: object) -> AlexaSSMLBuilder:
        raise self._unsupported("lang")

    def speak_with_language(self, *args: object, **kwargs: object) -> AlexaSSMLBuilder:
        raise self._unsupported("lang")

    def mark(self, *args: object, **kwargs: object) -> AlexaSSMLBuilder:
        raise self._unsupported("mark")

    # -- forwarded unchanged -----------------------------------------------

    def speak(self, speech: str) -> AlexaSSMLBuilder:
        self._engine.speak(speech)
        return self

    def paragraph(self, speech: str) -> AlexaSSMLBuilder:
        self._engine.paragraph(speech)
        return self

    def sentence(self, speech: str) -> AlexaSSMLBuilder:
        self._engine.sentence(speech)
        return self

    def pause(self, time: str) -> AlexaSSMLBuilder:
        self._engine.pause(time)
        return self

    def pause_by_strength(self, strength: str) -> AlexaSSMLBuilder:
        self._engine.pause_by_strength(strength)
        return self

    def speak_as(self, speech: str, interpret_as: str) -> AlexaSSMLBuilder:
        self._engine.speak_as(speech, interpret_as)
        return self

    def speak_with_role(self, speech: str, role: str) -> AlexaSSMLBuilder:
        self._engine.speak_with_role(speech, role)
        return self

    def speak_with_substitution(self, speech: str, alias: str) -> AlexaSSMLBuilder:
        self._engine.speak_with_substitution(speech, alias)
        return self

    def speak_with_phoneme(self, speech: str, alphabet: str, phoneme: str) -> AlexaSSMLBuilder:
        self._engine.speak_with_phoneme(speech, alphabet, phoneme)
        return self

    def whisper(self, speech: str) -> AlexaSSMLBuilder:
        self._engine.whisper(speech)
        return self

    def speak_with_volume(self, speech: str, volume: str) -> AlexaSSMLBuilder:
        self._engine.speak_with_volume(speech, volume)
        return self

    def speak_with_pitch(self, speech: str, pitch: str) -> AlexaSSMLBuilder:
        self._engine.speak_with_pitch(speech, pitch)
        return self

    def speak_with_rate(self, speech: str, rate: str) -> AlexaSSMLBuilder:
        self._engine.speak_with_rate(speech, rate)
        return self

    def build(self) -> str:
        return self._engine.build()
