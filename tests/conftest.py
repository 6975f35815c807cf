"""Shared test fixtures for the alexa_ssml_builder test suite."""

from __future__ import annotations

import pytest

from alexa_ssml_builder import AlexaSSMLBuilder, SSMLBuilder


# ---------------------------------------------------------------------------
# Sample values
# ---------------------------------------------------------------------------

AUDIO_URL = "https://www.host.com/audio.mp3"


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def alexa() -> AlexaSSMLBuilder:
    return AlexaSSMLBuilder()


@pytest.fixture()
def ssml() -> SSMLBuilder:
    return SSMLBuilder()


@pytest.fixture()
def audio_url() -> str:
    return AUDIO_URL
