"""Tests for the device state backed by system clocks."""

from __future__ import annotations

import datetime

import pytest
from freezegun import freeze_time
from pydantic import ValidationError

from nitz.device_state import DetectionConfig, SystemDeviceState
from nitz.input_filter import SignalAcceptanceFilter
from nitz.signal import NitzSignal


def test_default_config() -> None:
    """Test the default detection settings."""
    device_state = SystemDeviceState()
    assert not device_state.get_ignore_nitz()
    assert device_state.get_nitz_update_spacing_millis() == 10 * 60 * 1000
    assert device_state.get_nitz_update_diff_millis() == 2000


def test_custom_config() -> None:
    """Test detection settings from a config."""
    config = DetectionConfig.model_validate(
        {
            "ignore_nitz": True,
            "nitz_update_spacing_millis": 1000,
            "nitz_update_diff_millis": 10,
        }
    )
    device_state = SystemDeviceState(config)
    assert device_state.config == config
    assert device_state.get_ignore_nitz()
    assert device_state.get_nitz_update_spacing_millis() == 1000
    assert device_state.get_nitz_update_diff_millis() == 10


def test_update_config() -> None:
    """Test settings changes are seen by the filter immediately."""
    device_state = SystemDeviceState()
    signal_filter = SignalAcceptanceFilter.create(device_state)
    signal = NitzSignal(
        utc_millis=0,
        local_offset_millis=0,
        received_at_monotonic_millis=0,
    )
    assert signal_filter.must_process(None, signal)

    device_state.config = DetectionConfig(ignore_nitz=True)
    assert not signal_filter.must_process(None, signal)


@pytest.mark.parametrize(
    "values",
    [
        {"nitz_update_spacing_millis": -1},
        {"nitz_update_diff_millis": -1},
        {"nitz_update_spacing_millis": "soon"},
    ],
)
def test_invalid_config(values: dict) -> None:
    """Test that invalid detection settings are rejected."""
    with pytest.raises(ValidationError):
        DetectionConfig.model_validate(values)


def test_config_frozen() -> None:
    """Test that the config can't be changed in place."""
    config = DetectionConfig()
    with pytest.raises(ValidationError):
        config.ignore_nitz = True  # type: ignore[misc]


def test_clocks() -> None:
    """Test the system clocks are reported in milliseconds."""
    with freeze_time("2018-07-01T12:00:00") as frozen:
        device_state = SystemDeviceState()
        assert device_state.current_time_millis() == 1530446400000
        start = device_state.elapsed_realtime()

        frozen.tick(delta=datetime.timedelta(seconds=5))
        assert device_state.current_time_millis() == 1530446405000
        assert device_state.elapsed_realtime() - start == 5000
