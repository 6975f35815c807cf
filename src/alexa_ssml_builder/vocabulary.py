"""Closed SSML attribute vocabularies.

Each vocabulary is an ordered tuple of string constants shared by every
builder instance. Order is significant only for error messages, which
list the accepted values in the order given here.

The first block is the general (Amazon Polly flavoured) SSML vocabulary;
the last block holds the values the Alexa dialect adds on top of it.
"""

from __future__ import annotations

from typing import Literal

# ---------------------------------------------------------------------------
# Prosody
# ---------------------------------------------------------------------------

VOLUME_DEFAULT = "default"
VOLUME_SILENT = "silent"
VOLUME_XTRA_SOFT = "x-soft"
VOLUME_SOFT = "soft"
VOLUME_MEDIUM = "medium"
VOLUME_LOUD = "loud"
VOLUME_XTRA_LOUD = "x-loud"

VOLUMES: tuple[str, ...] = (
    VOLUME_DEFAULT,
    VOLUME_SILENT,
    VOLUME_XTRA_SOFT,
    VOLUME_SOFT,
    VOLUME_MEDIUM,
    VOLUME_LOUD,
    VOLUME_XTRA_LOUD,
)

PITCH_DEFAULT = "default"
PITCH_XTRA_LOW = "x-low"
PITCH_LOW = "low"
PITCH_MEDIUM = "medium"
PITCH_HIGH = "high"
PITCH_XTRA_HIGH = "x-high"

PITCHES: tuple[str, ...] = (
    PITCH_DEFAULT,
    PITCH_XTRA_LOW,
    PITCH_LOW,
    PITCH_MEDIUM,
    PITCH_HIGH,
    PITCH_XTRA_HIGH,
)

RATE_DEFAULT = "default"
RATE_XTRA_SLOW = "x-slow"
RATE_SLOW = "slow"
RATE_MEDIUM = "medium"
RATE_FAST = "fast"
RATE_XTRA_FAST = "x-fast"

RATES: tuple[str, ...] = (
    RATE_DEFAULT,
    RATE_XTRA_SLOW,
    RATE_SLOW,
    RATE_MEDIUM,
    RATE_FAST,
    RATE_XTRA_FAST,
)

# ---------------------------------------------------------------------------
# Breaks
# ---------------------------------------------------------------------------

BREAK_NONE = "none"
BREAK_XTRA_WEAK = "x-weak"
BREAK_WEAK = "weak"
BREAK_MEDIUM = "medium"
BREAK_STRONG = "strong"
BREAK_XTRA_STRONG = "x-strong"

BREAK_STRENGTHS: tuple[str, ...] = (
    BREAK_NONE,
    BREAK_XTRA_WEAK,
    BREAK_WEAK,
    BREAK_MEDIUM,
    BREAK_STRONG,
    BREAK_XTRA_STRONG,
)

# ---------------------------------------------------------------------------
# say-as
# ---------------------------------------------------------------------------

INTERPRET_AS_CHARACTERS = "characters"
INTERPRET_AS_SPELL_OUT = "spell-out"
INTERPRET_AS_CARDINAL = "cardinal"
INTERPRET_AS_NUMBER = "number"
INTERPRET_AS_ORDINAL = "ordinal"
INTERPRET_AS_DIGITS = "digits"
INTERPRET_AS_FRACTION = "fraction"
INTERPRET_AS_UNIT = "unit"
INTERPRET_AS_DATE = "date"
INTERPRET_AS_TIME = "time"
INTERPRET_AS_TELEPHONE = "telephone"
INTERPRET_AS_ADDRESS = "address"
INTERPRET_AS_EXPLETIVE = "expletive"

INTERPRET_AS_VALUES: tuple[str, ...] = (
    INTERPRET_AS_CHARACTERS,
    INTERPRET_AS_SPELL_OUT,
    INTERPRET_AS_CARDINAL,
    INTERPRET_AS_NUMBER,
    INTERPRET_AS_ORDINAL,
    INTERPRET_AS_DIGITS,
    INTERPRET_AS_FRACTION,
    INTERPRET_AS_UNIT,
    INTERPRET_AS_DATE,
    INTERPRET_AS_TIME,
    INTERPRET_AS_TELEPHONE,
    INTERPRET_AS_ADDRESS,
    INTERPRET_AS_EXPLETIVE,
)

# ---------------------------------------------------------------------------
# Word roles (homograph disambiguation)
# ---------------------------------------------------------------------------

ROLE_VERB = "amazon:VB"
ROLE_PAST_TENSE = "amazon:VBD"
ROLE_ALTERNATE_SENSE = "amazon:SENSE_1"

ROLES: tuple[str, ...] = (
    ROLE_VERB,
    ROLE_PAST_TENSE,
    ROLE_ALTERNATE_SENSE,
)

# ---------------------------------------------------------------------------
# Phonemes
# ---------------------------------------------------------------------------

ALPHABET_IPA = "ipa"
ALPHABET_X_SAMPA = "x-sampa"

PHONETIC_ALPHABETS: tuple[str, ...] = (ALPHABET_IPA, ALPHABET_X_SAMPA)

# ---------------------------------------------------------------------------
# Alexa additions
# ---------------------------------------------------------------------------

EMPHASIS_STRONG = "strong"
EMPHASIS_MODERATE = "moderate"
EMPHASIS_REDUCED = "reduced"

EMPHASISES: tuple[str, ...] = (
    EMPHASIS_STRONG,
    EMPHASIS_MODERATE,
    EMPHASIS_REDUCED,
)

EmphasisLevel = Literal["strong", "moderate", "reduced"]

INTERPRET_AS_INTERJECTION = "interjection"
ROLE_NOUN = "amazon:NN"

# ---------------------------------------------------------------------------
# Constant names exposed on each builder class
# ---------------------------------------------------------------------------

_ALEXA_ONLY = frozenset({
    "EMPHASIS_STRONG",
    "EMPHASIS_MODERATE",
    "EMPHASIS_REDUCED",
    "EMPHASISES",
    "INTERPRET_AS_INTERJECTION",
    "ROLE_NOUN",
})

BASE_VOCABULARY_NAMES: frozenset[str] = frozenset(
    name
    for name, value in globals().items()
    if name.isupper() and isinstance(value, (str, tuple)) and name not in _ALEXA_ONLY
)

ALEXA_VOCABULARY_NAMES: frozenset[str] = BASE_VOCABULARY_NAMES | _ALEXA_ONLY
