"""Exceptions raised while converting duration strings."""

from __future__ import annotations

from typing import Optional


class ErrorKind:
    FORMAT = "format"
    OVERFLOW = "overflow"
    INTEGER_PARSE = "integer parse"


class DurationError(ValueError):
    """Base class for every duration conversion failure."""

    kind = ""
    default_message = "invalid duration"

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class DurationFormatError(DurationError):
    """The text is not a sequence of ``<digits><unit>`` components."""

    kind = ErrorKind.FORMAT
    default_message = (
        "missing time duration format, must be multiples of "
        "`[0-9]+(ns|us|ms|[smhdwy])`"
    )


class DurationOverflowError(DurationError):
    """A well-formed duration does not fit in the representable range."""

    kind = ErrorKind.OVERFLOW
    default_message = "number is too large to fit in target type"


class IntegerParseError(DurationError):
    """A component's magnitude is not an unsigned 64-bit integer."""

    EMPTY = "cannot parse integer from empty string"
    INVALID_DIGIT = "invalid digit found in string"
    POS_OVERFLOW = "number too large to fit in target type"

    kind = ErrorKind.INTEGER_PARSE
    default_message = INVALID_DIGIT
