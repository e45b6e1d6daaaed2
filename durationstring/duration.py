"""The ``DurationString`` value type and the public conversion helpers."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Union

from .errors import DurationOverflowError
from .formatter import format_nanoseconds
from .parser import parse_nanoseconds
from .serde import duration_string_schema
from .units import MAX_NANOSECONDS, NANOS_PER_SECOND

_ONE_MICROSECOND = timedelta(microseconds=1)


@dataclass(frozen=True, order=True, repr=False)
class DurationString:
    """An immutable, non-negative elapsed time with nanosecond precision.

    Instances compare, order and hash by their nanosecond count. ``str()``
    gives the canonical text form, which :func:`parse` reads back to an
    equal value.
    """

    nanoseconds: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.nanoseconds, bool) or not isinstance(self.nanoseconds, int):
            raise TypeError(
                f"nanoseconds must be an int, not {type(self.nanoseconds).__name__}"
            )
        if self.nanoseconds < 0:
            raise ValueError("durations cannot be negative")
        if self.nanoseconds > MAX_NANOSECONDS:
            raise DurationOverflowError()

    @classmethod
    def from_string(cls, text: str) -> "DurationString":
        return cls(parse_nanoseconds(text))

    @classmethod
    def from_timedelta(cls, value: timedelta) -> "DurationString":
        return cls((value // _ONE_MICROSECOND) * 1_000)

    def to_timedelta(self) -> timedelta:
        """Return the value as a ``timedelta``, truncated to microseconds."""
        return timedelta(microseconds=self.nanoseconds // 1_000)

    @property
    def seconds(self) -> int:
        return self.nanoseconds // NANOS_PER_SECOND

    @property
    def subsec_nanos(self) -> int:
        return self.nanoseconds % NANOS_PER_SECOND

    def total_seconds(self) -> float:
        return self.nanoseconds / NANOS_PER_SECOND

    def __add__(self, other: Any) -> "DurationString":
        if not isinstance(other, DurationString):
            return NotImplemented
        return DurationString(self.nanoseconds + other.nanoseconds)

    def __str__(self) -> str:
        return format_nanoseconds(self.nanoseconds)

    def __repr__(self) -> str:
        return f"DurationString({str(self)!r})"

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any) -> Any:
        return duration_string_schema(cls)


def parse(text: str) -> DurationString:
    """Parse a duration string such as ``"1h30m"`` or ``"5m 30s"``."""
    return DurationString.from_string(text)


def format_duration(value: DurationString) -> str:
    return format_nanoseconds(value.nanoseconds)


def construct(value: Union[int, timedelta, DurationString]) -> DurationString:
    """Wrap a raw nanosecond count or a ``timedelta``."""
    if isinstance(value, DurationString):
        return value
    if isinstance(value, timedelta):
        return DurationString.from_timedelta(value)
    return DurationString(value)


def unwrap(value: DurationString) -> timedelta:
    return value.to_timedelta()
