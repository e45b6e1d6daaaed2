"""Render nanosecond counts as the largest exact single-unit string."""

from .units import UNITS

# Every unit except nanoseconds, largest first; nanoseconds is the fallback.
_LARGEST_FIRST = tuple((suffix, nanos) for suffix, nanos, _ in reversed(UNITS[1:]))


def format_nanoseconds(nanoseconds: int) -> str:
    """Format ``nanoseconds`` with the largest unit that divides it exactly.

    ``60_000_000_000`` becomes ``"1m"`` and ``61_000_000_000`` becomes
    ``"61s"``. Compound output such as ``"1m1s"`` is never produced, and
    zero is rendered as ``"0y"``.
    """

    for suffix, unit_nanos in _LARGEST_FIRST:
        if nanoseconds % unit_nanos == 0:
            return f"{nanoseconds // unit_nanos}{suffix}"
    return f"{nanoseconds}ns"
