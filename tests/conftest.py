"""Test fixtures."""

from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from nitz.suggestion import TimeSuggestion, TimeZoneSuggestion

ARBITRARY_REALTIME_MILLIS = 123456789
DEFAULT_SPACING_MILLIS = 10 * 60 * 1000
DEFAULT_DIFF_MILLIS = 2000


@dataclass
class FakeDeviceState:
    """A DeviceState with clocks and settings controlled by the test."""

    elapsed_realtime_millis: int = ARBITRARY_REALTIME_MILLIS
    current_time: int = 0
    ignore_nitz: bool = False
    nitz_update_spacing_millis: int = DEFAULT_SPACING_MILLIS
    nitz_update_diff_millis: int = DEFAULT_DIFF_MILLIS

    def elapsed_realtime(self) -> int:
        return self.elapsed_realtime_millis

    def current_time_millis(self) -> int:
        return self.current_time

    def get_ignore_nitz(self) -> bool:
        return self.ignore_nitz

    def get_nitz_update_spacing_millis(self) -> int:
        return self.nitz_update_spacing_millis

    def get_nitz_update_diff_millis(self) -> int:
        return self.nitz_update_diff_millis

    def simulate_time_increment(self, increment_millis: int) -> None:
        """Move both clocks forward."""
        assert increment_millis > 0, "elapsed realtime clock must go forwards"
        self.elapsed_realtime_millis += increment_millis
        self.current_time += increment_millis


@dataclass
class FakeSuggestionSink:
    """A SuggestionSink that records every suggestion it receives."""

    time_suggestions: list[TimeSuggestion] = field(default_factory=list)
    time_zone_suggestions: list[TimeZoneSuggestion] = field(default_factory=list)

    def suggest_device_time(self, suggestion: TimeSuggestion) -> None:
        self.time_suggestions.append(suggestion)

    def suggest_device_time_zone(self, suggestion: TimeZoneSuggestion) -> None:
        self.time_zone_suggestions.append(suggestion)

    def clear(self) -> None:
        """Forget all recorded suggestions."""
        self.time_suggestions.clear()
        self.time_zone_suggestions.clear()


@pytest.fixture(name="device_state")
def mock_device_state() -> FakeDeviceState:
    """Fixture to create a fake device state."""
    return FakeDeviceState()


@pytest.fixture(name="sink")
def mock_sink() -> FakeSuggestionSink:
    """Fixture to create a suggestion sink that records suggestions."""
    return FakeSuggestionSink()
