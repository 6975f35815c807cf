"""Alexa SSML Builder -- fluent construction of Alexa-compatible SSML.

Public API re-exports for convenient access::

    from alexa_ssml_builder import AlexaSSMLBuilder, vocabulary
"""

from . import vocabulary
from ._version import __version__
from .alexa import AlexaDialect, AlexaSSMLBuilder
from .builder import SSMLBuilder, SSMLDialect
from .exceptions import (
    InvalidAttributeError,
    InvalidValueError,
    SSMLBuilderError,
    UnsupportedTagError,
)

__all__ = [
    "__version__",
    # Builders
    "AlexaSSMLBuilder",
    "SSMLBuilder",
    # Dialects
    "AlexaDialect",
    "SSMLDialect",
    "vocabulary",
    # Exceptions
    "SSMLBuilderError",
    "InvalidAttributeError",
    "InvalidValueError",
    "UnsupportedTagError",
]
