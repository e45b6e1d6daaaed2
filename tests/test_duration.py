import json
from datetime import timedelta

import pytest
from pydantic import BaseModel, ValidationError

from durationstring.duration import (
    DurationString,
    construct,
    format_duration,
    parse,
    unwrap,
)
from durationstring.errors import (
    DurationError,
    DurationFormatError,
    DurationOverflowError,
    ErrorKind,
    IntegerParseError,
)
from durationstring.units import MAX_NANOSECONDS


class Record(BaseModel):
    d: DurationString


class TestDurationString:
    def test_parse_and_str(self):
        value = parse("100ms")
        assert str(value) == "100ms"
        assert format_duration(value) == "100ms"
        assert repr(value) == "DurationString('100ms')"

    def test_from_string_matches_parse(self):
        assert DurationString.from_string("1h30m") == parse("30m1h")

    def test_timedelta_interop(self):
        value = construct(timedelta(milliseconds=100))
        assert str(value) == "100ms"
        assert unwrap(value) == timedelta(milliseconds=100)
        assert parse("1h30m").to_timedelta() == timedelta(seconds=5_400)

    def test_to_timedelta_truncates_below_microseconds(self):
        assert parse("1500ns").to_timedelta() == timedelta(microseconds=1)

    def test_to_timedelta_beyond_host_range(self):
        with pytest.raises(OverflowError):
            parse("584554530872y").to_timedelta()

    def test_accessors(self):
        value = parse("61s 5ns")
        assert value.nanoseconds == 61_000_000_005
        assert value.seconds == 61
        assert value.subsec_nanos == 5
        assert value.total_seconds() == pytest.approx(61.000000005)

    def test_default_is_zero(self):
        assert DurationString() == construct(0)
        assert str(DurationString()) == "0y"

    def test_equality_ordering_and_hashing(self):
        assert parse("60s") == parse("1m")
        assert hash(parse("60s")) == hash(parse("1m"))
        assert parse("999ms") < parse("1s") < parse("1m")
        assert sorted([parse("1h"), parse("1ns"), parse("1m")]) == [
            parse("1ns"),
            parse("1m"),
            parse("1h"),
        ]
        assert len({parse("1m"), parse("60s"), parse("60000ms")}) == 1

    def test_is_immutable(self):
        value = parse("1s")
        with pytest.raises(AttributeError):
            value.nanoseconds = 5  # type: ignore[misc]

    def test_addition_returns_new_value(self):
        a, b = parse("1h"), parse("30m")
        assert a + b == parse("1h30m")
        assert a == parse("1h")

    def test_addition_overflow(self):
        with pytest.raises(DurationOverflowError):
            parse("584554530872y") + parse("29w")

    def test_construct_validates(self):
        assert construct(MAX_NANOSECONDS).nanoseconds == MAX_NANOSECONDS
        assert construct(parse("1s")) == parse("1s")
        with pytest.raises(DurationOverflowError):
            construct(MAX_NANOSECONDS + 1)
        with pytest.raises(ValueError):
            construct(-1)
        with pytest.raises(ValueError):
            construct(timedelta(seconds=-1))
        with pytest.raises(TypeError):
            construct(1.5)  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            construct(True)


class TestErrors:
    def test_kinds_are_value_errors(self):
        for text, cls, kind in [
            ("1234", DurationFormatError, ErrorKind.FORMAT),
            ("ms", IntegerParseError, ErrorKind.INTEGER_PARSE),
            ("584554530873y", DurationOverflowError, ErrorKind.OVERFLOW),
        ]:
            with pytest.raises(cls) as excinfo:
                parse(text)
            assert excinfo.value.kind == kind
            assert isinstance(excinfo.value, DurationError)
            assert isinstance(excinfo.value, ValueError)

    def test_messages(self):
        assert str(DurationFormatError()) == (
            "missing time duration format, must be multiples of "
            "`[0-9]+(ns|us|ms|[smhdwy])`"
        )
        assert str(DurationOverflowError()) == "number is too large to fit in target type"


class TestPydanticSupport:
    def test_serializes_as_string(self):
        record = Record(d=parse("1m"))
        assert record.model_dump_json() == '{"d":"1m"}'
        assert record.model_dump() == {"d": "1m"}

    def test_deserializes_from_string(self):
        record = Record.model_validate_json('{"d":"2m"}')
        assert str(record.d) == "2m"
        assert Record(d="1h 30m").d == parse("90m")

    def test_invalid_value_reports_parser_message(self):
        with pytest.raises(ValidationError) as excinfo:
            Record.model_validate_json('{"d":"1000x"}')
        (error,) = excinfo.value.errors()
        assert error["type"] == "duration_string"
        assert error["msg"] == f"invalid value: {DurationFormatError()}"

    def test_rejects_non_strings(self):
        with pytest.raises(ValidationError) as excinfo:
            Record.model_validate({"d": 60})
        (error,) = excinfo.value.errors()
        assert error["type"] == "duration_string_type"
        assert error["msg"] == "expected a duration string, got int"

    def test_python_mode_reports_parser_message(self):
        with pytest.raises(ValidationError) as excinfo:
            Record(d="ms")
        (error,) = excinfo.value.errors()
        assert error["msg"] == "invalid value: cannot parse integer from empty string"

    def test_json_schema_is_a_string(self):
        schema = Record.model_json_schema()
        assert schema["properties"]["d"]["type"] == "string"

    def test_round_trip_through_json(self):
        payload = json.dumps({"d": "1ms100us"})
        record = Record.model_validate_json(payload)
        assert json.loads(record.model_dump_json()) == {"d": "1100us"}
