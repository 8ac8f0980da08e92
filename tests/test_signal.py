"""Tests for decoding NITZ strings."""

import datetime

import pytest

from nitz.exceptions import NitzParseError
from nitz.signal import NitzSignal, parse_nitz

RECEIVED_AT = 1000
HOUR_MILLIS = 60 * 60 * 1000
QUARTER_HOUR_MILLIS = 15 * 60 * 1000


def _utc_millis(*args: int) -> int:
    """Return the millis since the epoch for a UTC date and time."""
    return int(datetime.datetime(*args, tzinfo=datetime.timezone.utc).timestamp()) * 1000


def test_parse_with_dst() -> None:
    """Test parsing a string with a DST adjustment."""
    signal = parse_nitz("15/06/20,01:02:03-1,0", RECEIVED_AT)
    assert signal
    assert signal.utc_millis == _utc_millis(2015, 6, 20, 1, 2, 3)
    assert signal.local_offset_millis == -QUARTER_HOUR_MILLIS
    assert signal.dst_adjustment_millis == 0
    assert not signal.is_dst
    assert signal.emulator_zone is None
    assert signal.received_at_monotonic_millis == RECEIVED_AT

    signal = parse_nitz("15/06/20,01:02:03+8,4", RECEIVED_AT)
    assert signal
    assert signal.local_offset_millis == 2 * HOUR_MILLIS
    assert signal.dst_adjustment_millis == HOUR_MILLIS
    assert signal.is_dst


@pytest.mark.parametrize(
    "value,expected_offset",
    [
        ("15/06/20,01:02:03+4", 4 * QUARTER_HOUR_MILLIS),
        ("15/06/20,01:02:03-4", -4 * QUARTER_HOUR_MILLIS),
        ("15/06/20,01:02:03-32", -8 * HOUR_MILLIS),
        ("15/06/20,01:02:03+0", 0),
        ("15/06/20,01:02:03+23", 23 * QUARTER_HOUR_MILLIS),
    ],
)
def test_parse_no_dst_field(value: str, expected_offset: int) -> None:
    """Test that a missing DST field is unknown, not zero."""
    signal = parse_nitz(value, RECEIVED_AT)
    assert signal
    assert signal.utc_millis == _utc_millis(2015, 6, 20, 1, 2, 3)
    assert signal.local_offset_millis == expected_offset
    assert signal.dst_adjustment_millis is None
    assert not signal.is_dst


@pytest.mark.parametrize(
    "value,expected_dst",
    [
        ("15/06/20,01:02:03+8,0", 0),
        ("15/06/20,01:02:03+8,2", 2 * QUARTER_HOUR_MILLIS),
        ("15/06/20,01:02:03+8,4", HOUR_MILLIS),
        ("15/06/20,01:02:03+8,8", 2 * HOUR_MILLIS),
        ("15/06/20,01:02:03+12,12", 3 * HOUR_MILLIS),
    ],
)
def test_parse_dst_quarter_hours(value: str, expected_dst: int) -> None:
    """Test the DST adjustment is a count of quarter hours."""
    signal = parse_nitz(value, RECEIVED_AT)
    assert signal
    assert signal.dst_adjustment_millis == expected_dst


def test_parse_emulator_zone() -> None:
    """Test the emulator extension that carries the host time zone."""
    signal = parse_nitz("15/06/20,01:02:03-28,4,America!Los_Angeles", RECEIVED_AT)
    assert signal
    assert signal.local_offset_millis == -7 * HOUR_MILLIS
    assert signal.dst_adjustment_millis == HOUR_MILLIS
    assert signal.emulator_zone == "America/Los_Angeles"

    signal = parse_nitz("15/06/20,01:02:03-32,4,America!Los_Angeles", RECEIVED_AT)
    assert signal
    assert signal.local_offset_millis == -8 * HOUR_MILLIS
    assert signal.dst_adjustment_millis == HOUR_MILLIS
    assert signal.emulator_zone == "America/Los_Angeles"


@pytest.mark.parametrize(
    "value",
    [
        "",
        "garbage",
        "38/06/20,00:00:00+0",  # Year out of range
        "15/06/20,00:00:00",  # No offset
        "15/13/20,00:00:00+0",  # Invalid month
        "15/02/30,00:00:00+0",  # Invalid day
        "15/06/20,24:00:00+0",  # Invalid hour
        "15/06/20,00:60:00+0",  # Invalid minute
        "15/06/20,00:00:00+96",  # Offset out of range
        "15/06/20,00:00:00+0,",  # Empty DST
        "15/06/20,00:00:00+0,100",  # DST out of range
        "15/06/20,00:00:00+0,4,Not!A!Zone",
        "15/06/20,00:00:00+0 ",  # Trailing data
    ],
)
def test_parse_invalid(value: str) -> None:
    """Test that invalid strings are discarded."""
    assert parse_nitz(value, RECEIVED_AT) is None


def test_from_string_error_details() -> None:
    """Test the strict parser reports why a string was rejected."""
    with pytest.raises(NitzParseError, match="not valid") as exc_info:
        NitzSignal.from_string("15/02/30,00:00:00+0", RECEIVED_AT)
    assert exc_info.value.detailed_error

    with pytest.raises(NitzParseError, match="NITZ pattern"):
        NitzSignal.from_string("15/02/30", RECEIVED_AT)


def test_equality_ignores_original_string() -> None:
    """Test that signals with the same values are equal."""
    signal = parse_nitz("15/06/20,01:02:03+4", RECEIVED_AT)
    assert signal
    assert signal.original == "15/06/20,01:02:03+4"
    same = NitzSignal(
        utc_millis=_utc_millis(2015, 6, 20, 1, 2, 3),
        local_offset_millis=HOUR_MILLIS,
        received_at_monotonic_millis=RECEIVED_AT,
    )
    assert signal == same

    later = parse_nitz("15/06/20,01:02:03+4", RECEIVED_AT + 1)
    assert signal != later


def test_time_properties() -> None:
    """Test the datetime views of the signal."""
    signal = parse_nitz("18/07/01,12:00:00-28,4", RECEIVED_AT)
    assert signal
    assert signal.utc_time == datetime.datetime(
        2018, 7, 1, 12, 0, 0, tzinfo=datetime.timezone.utc
    )
    assert signal.local_offset == datetime.timedelta(hours=-7)
