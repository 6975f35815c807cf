"""Custom exception hierarchy for the alexa_ssml_builder package.

Each concrete error also derives from the built-in exception a caller
would expect (``TypeError`` for a bad attribute value, ``ValueError``
for a well-typed but disallowed one), so ``except TypeError`` keeps
working for code written against plain builders.
"""


class SSMLBuilderError(Exception):
    """Base exception for all alexa_ssml_builder errors."""


class InvalidAttributeError(SSMLBuilderError, TypeError):
    """Raised when an argument has the wrong type or is outside its vocabulary."""


class InvalidValueError(SSMLBuilderError, ValueError):
    """Raised when an argument is well-typed but not allowed (e.g. a URL scheme)."""


class UnsupportedTagError(InvalidValueError):
    """Raised when the target dialect cannot express a tag at all."""

    def __init__(self, tag: str, dialect: str) -> None:
        self.tag = tag
        self.dialect = dialect
        super().__init__(f"{dialect} does not support the <{tag}> tag")
