"""Access to device clocks and settings used during detection.

The detection code never reads clocks or settings directly. Instead it is
given a DeviceState so that the behavior can be tested with fake clocks.
"""

from __future__ import annotations

import logging
import time
from typing import Protocol

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "DeviceState",
    "DetectionConfig",
    "SystemDeviceState",
]

_LOGGER = logging.getLogger(__name__)

DEFAULT_NITZ_UPDATE_SPACING_MILLIS = 10 * 60 * 1000
DEFAULT_NITZ_UPDATE_DIFF_MILLIS = 2000


class DeviceState(Protocol):
    """Information about the device needed to make decisions about NITZ signals."""

    def elapsed_realtime(self) -> int:
        """Return the monotonic clock value in milliseconds."""

    def current_time_millis(self) -> int:
        """Return the wall clock time in milliseconds since the unix epoch."""

    def get_ignore_nitz(self) -> bool:
        """Return True if NITZ signals must be ignored."""

    def get_nitz_update_spacing_millis(self) -> int:
        """Return the minimum spacing between two processed NITZ signals."""

    def get_nitz_update_diff_millis(self) -> int:
        """Return the minimum time difference that makes a NITZ signal new."""


class DetectionConfig(BaseModel):
    """Settings that tune how NITZ signals are filtered."""

    model_config = ConfigDict(frozen=True)

    ignore_nitz: bool = False
    """Set when all NITZ signals must be ignored, e.g. on test builds."""

    nitz_update_spacing_millis: int = Field(
        default=DEFAULT_NITZ_UPDATE_SPACING_MILLIS, ge=0
    )
    """Signals received closer together than this are rate limited."""

    nitz_update_diff_millis: int = Field(default=DEFAULT_NITZ_UPDATE_DIFF_MILLIS, ge=0)
    """Signals whose UTC time differs by more than this are never rate limited."""


def elapsed_realtime_factory() -> int:
    """Factory method for the monotonic clock to facilitate mocking."""
    return int(time.monotonic() * 1000)


def current_time_millis_factory() -> int:
    """Factory method for the wall clock to facilitate mocking."""
    return int(time.time() * 1000)


class SystemDeviceState:
    """A DeviceState backed by the system clocks and a DetectionConfig."""

    def __init__(self, config: DetectionConfig | None = None) -> None:
        """Initialize SystemDeviceState."""
        self._config = config or DetectionConfig()
        _LOGGER.debug("Using detection config: %s", self._config)

    @property
    def config(self) -> DetectionConfig:
        """Return the current detection config."""
        return self._config

    @config.setter
    def config(self, config: DetectionConfig) -> None:
        """Replace the detection config, e.g. after a settings change."""
        _LOGGER.debug("Updating detection config: %s", config)
        self._config = config

    def elapsed_realtime(self) -> int:
        """Return the monotonic clock value in milliseconds."""
        return elapsed_realtime_factory()

    def current_time_millis(self) -> int:
        """Return the wall clock time in milliseconds since the unix epoch."""
        return current_time_millis_factory()

    def get_ignore_nitz(self) -> bool:
        """Return True if NITZ signals must be ignored."""
        return self._config.ignore_nitz

    def get_nitz_update_spacing_millis(self) -> int:
        """Return the minimum spacing between two processed NITZ signals."""
        return self._config.nitz_update_spacing_millis

    def get_nitz_update_diff_millis(self) -> int:
        """Return the minimum time difference that makes a NITZ signal new."""
        return self._config.nitz_update_diff_millis
