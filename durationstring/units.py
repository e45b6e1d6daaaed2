"""Unit suffixes understood by the duration parser and formatter."""

from typing import Dict, Optional, Tuple

U64_MAX = 2**64 - 1
NANOS_PER_SECOND = 1_000_000_000
# Largest duration: u64 whole seconds plus a sub-second part.
MAX_NANOSECONDS = U64_MAX * NANOS_PER_SECOND + (NANOS_PER_SECOND - 1)

# (suffix, nanoseconds per unit, seconds per unit), smallest unit first.
# Units measured in whole seconds are scaled in seconds before nanoseconds.
UNITS: Tuple[Tuple[str, int, Optional[int]], ...] = (
    ("ns", 1, None),
    ("us", 1_000, None),
    ("ms", 1_000_000, None),
    ("s", NANOS_PER_SECOND, None),
    ("m", 60 * NANOS_PER_SECOND, 60),
    ("h", 3_600 * NANOS_PER_SECOND, 3_600),
    ("d", 86_400 * NANOS_PER_SECOND, 86_400),
    ("w", 604_800 * NANOS_PER_SECOND, 604_800),
    ("y", 31_556_926 * NANOS_PER_SECOND, 31_556_926),
)

UNIT_NANOS: Dict[str, int] = {suffix: nanos for suffix, nanos, _ in UNITS}
UNIT_SECONDS: Dict[str, int] = {
    suffix: seconds for suffix, _, seconds in UNITS if seconds is not None
}
