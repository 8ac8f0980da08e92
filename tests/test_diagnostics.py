"""Tests for diagnostics."""

from nitz.diagnostics import describe_signal, describe_suggestion, dump_state
from nitz.signal import NitzSignal
from nitz.state_machine import TimeSuggestionStateMachine
from nitz.suggestion import (
    MatchType,
    Quality,
    TimeSuggestion,
    TimeZoneSuggestion,
    UtcTime,
)

from conftest import FakeDeviceState, FakeSuggestionSink


def test_describe_signal() -> None:
    """Test the description of a signal."""
    assert describe_signal(None) == "None"

    signal = NitzSignal.from_string("15/06/20,01:02:03-28,4,America!Los_Angeles", 10)
    description = describe_signal(signal)
    assert "utc=2015-06-20T01:02:03+00:00" in description
    assert "offset=-1 day, 17:00:00" in description
    assert "dst=3600000" in description
    assert "received_at=10" in description
    assert "emulator_zone=America/Los_Angeles" in description
    assert "original='15/06/20,01:02:03-28,4,America!Los_Angeles'" in description


def test_describe_suggestion() -> None:
    """Test the description of time and time zone suggestions."""
    assert describe_suggestion(TimeSuggestion(0)) == "slot=0 time=None"
    assert describe_suggestion(TimeSuggestion(0, UtcTime(10, 20))) == (
        "slot=0 utc_millis=20 reference_time_millis=10"
    )
    assert describe_suggestion(TimeZoneSuggestion(1)) == "slot=1 zone=None"
    assert describe_suggestion(
        TimeZoneSuggestion(
            1, "Europe/London", MatchType.NETWORK_COUNTRY_ONLY, Quality.SINGLE_ZONE
        )
    ) == (
        "slot=1 zone=Europe/London match_type=NETWORK_COUNTRY_ONLY "
        "quality=SINGLE_ZONE"
    )


def test_dump_state(
    device_state: FakeDeviceState, sink: FakeSuggestionSink
) -> None:
    """Test dumping the cached state of a state machine."""
    machine = TimeSuggestionStateMachine(2, device_state, sink)
    assert list(dump_state(machine)) == [
        "TimeSuggestionStateMachine[2]",
        "  last_accepted_nitz: None",
        "  last_country_iso: None",
        "  network_available: False",
    ]

    machine.handle_network_available()
    machine.handle_country_detected("gb")
    lines = list(dump_state(machine))
    assert lines[2] == "  last_country_iso: 'gb'"
    assert lines[3] == "  network_available: True"
