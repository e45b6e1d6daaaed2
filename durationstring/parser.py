"""Convert duration strings such as ``"1h30m"`` into nanosecond counts."""

import unicodedata
from typing import List, Tuple

from .errors import DurationFormatError, DurationOverflowError, IntegerParseError
from .units import MAX_NANOSECONDS, NANOS_PER_SECOND, U64_MAX, UNIT_NANOS, UNIT_SECONDS

# str.isspace() also accepts the ASCII file/group/record/unit separators,
# which are not Unicode White_Space.
_SEPARATORS = frozenset("\x1c\x1d\x1e\x1f")
_U64_MAX_DIGITS = len(str(U64_MAX))


def _is_whitespace(ch: str) -> bool:
    return ch.isspace() and ch not in _SEPARATORS


def _is_numeric(ch: str) -> bool:
    # Categories Nd, Nl and No. str.isnumeric() would also admit CJK
    # ideographs such as "一", which are letters.
    return unicodedata.category(ch)[0] == "N"


def split_components(text: str) -> List[Tuple[str, str]]:
    """Split ``text`` into ``(digits, suffix)`` groups.

    Whitespace is discarded wherever it appears. A new group begins whenever
    a digit follows a non-digit, so ``"1h 30m"`` yields ``[("1", "h"),
    ("30", "m")]`` and ``"ms"`` yields ``[("", "ms")]``. The groups are not
    validated here.
    """

    groups: List[Tuple[str, str]] = []
    digits: List[str] = []
    suffix: List[str] = []
    for ch in text:
        if _is_whitespace(ch):
            continue
        if _is_numeric(ch):
            if suffix:
                groups.append(("".join(digits), "".join(suffix)))
                digits, suffix = [], []
            digits.append(ch)
        else:
            suffix.append(ch)
    if digits or suffix:
        groups.append(("".join(digits), "".join(suffix)))
    return groups


def parse_magnitude(digits: str) -> int:
    """Read an unsigned 64-bit integer from a run of digits."""
    if not digits:
        raise IntegerParseError(IntegerParseError.EMPTY)
    # Numeric superscripts, fractions and other scripts are not decimal digits.
    if not (digits.isascii() and digits.isdigit()):
        raise IntegerParseError(IntegerParseError.INVALID_DIGIT)
    significant = digits.lstrip("0")
    # Checked before int() so arbitrarily long runs never hit the
    # interpreter's integer string conversion limit.
    if len(significant) > _U64_MAX_DIGITS:
        raise IntegerParseError(IntegerParseError.POS_OVERFLOW)
    value = int(significant) if significant else 0
    if value > U64_MAX:
        raise IntegerParseError(IntegerParseError.POS_OVERFLOW)
    return value


def scale_component(magnitude: int, suffix: str) -> int:
    """Return the nanoseconds in ``magnitude`` units of ``suffix``.

    Minutes and larger units are multiplied out in whole seconds first and
    must stay within 64 bits of seconds, so ``584554530873y`` overflows even
    though its nanosecond count is in range for a Python ``int``.
    """

    seconds_per_unit = UNIT_SECONDS.get(suffix)
    if seconds_per_unit is not None:
        seconds = magnitude * seconds_per_unit
        if seconds > U64_MAX:
            raise DurationOverflowError()
        return seconds * NANOS_PER_SECOND
    try:
        return magnitude * UNIT_NANOS[suffix]
    except KeyError:
        raise DurationFormatError() from None


def parse_nanoseconds(text: str) -> int:
    """Parse a duration string into a total count of nanoseconds.

    Raises
    ------
    DurationFormatError
        If the text is empty or a component has a missing or unknown unit.
    IntegerParseError
        If a component's magnitude is missing or not a 64-bit unsigned integer.
    DurationOverflowError
        If a component, or the running total, exceeds the largest duration.
    """

    groups = split_components(text)
    if not groups:
        raise DurationFormatError()

    total = 0
    for digits, suffix in groups:
        magnitude = parse_magnitude(digits)
        total += scale_component(magnitude, suffix)
        if total > MAX_NANOSECONDS:
            raise DurationOverflowError()
    return total
