"""A state machine that turns radio events into time and time zone suggestions.

One state machine exists for each radio (slot). It remembers the latest
accepted NITZ signal and the latest network country and, whenever one of
them changes, works out new suggestions and passes them to a SuggestionSink.
The sink (typically a time detection service shared by all radios) decides
what to do with them.

The state machine is not thread safe. All of the event methods for a slot
must be called from a single thread, or serialized by the caller.
"""

from __future__ import annotations

import logging
from typing import Protocol

from .device_state import DeviceState
from .input_filter import SignalAcceptanceFilter
from .signal import NitzSignal
from .suggester import SuggestionEngine
from .suggestion import TimeSuggestion, TimeZoneSuggestion

__all__ = [
    "SuggestionSink",
    "TimeSuggestionStateMachine",
]

_LOGGER = logging.getLogger(__name__)


class SuggestionSink(Protocol):
    """Receives suggestions produced by a state machine."""

    def suggest_device_time(self, suggestion: TimeSuggestion) -> None:
        """Receive a new time suggestion."""

    def suggest_device_time_zone(self, suggestion: TimeZoneSuggestion) -> None:
        """Receive a new time zone suggestion."""


class TimeSuggestionStateMachine:
    """Tracks network state for a single radio and emits suggestions."""

    def __init__(
        self,
        slot_index: int,
        device_state: DeviceState,
        sink: SuggestionSink,
        *,
        signal_filter: SignalAcceptanceFilter | None = None,
        engine: SuggestionEngine | None = None,
    ) -> None:
        """Initialize TimeSuggestionStateMachine."""
        self._slot_index = slot_index
        self._sink = sink
        self._signal_filter = signal_filter or SignalAcceptanceFilter.create(
            device_state
        )
        self._engine = engine or SuggestionEngine(device_state)
        self._last_accepted_nitz: NitzSignal | None = None
        self._last_country_iso: str | None = None
        self._network_available = False

    @property
    def slot_index(self) -> int:
        """Return the radio this state machine is for."""
        return self._slot_index

    @property
    def country_iso(self) -> str | None:
        """Return the last known network country."""
        return self._last_country_iso

    @property
    def network_available(self) -> bool:
        """Return True if the network is available."""
        return self._network_available

    def get_cached_nitz(self) -> NitzSignal | None:
        """Return the last NITZ signal that was accepted."""
        return self._last_accepted_nitz

    def handle_network_available(self) -> None:
        """Handle the radio attaching to a network."""
        _LOGGER.debug("[%s] handle_network_available", self._slot_index)
        self._network_available = True

    def handle_network_unavailable(self) -> None:
        """Handle loss of the network, which invalidates any NITZ signal."""
        _LOGGER.debug("[%s] handle_network_unavailable", self._slot_index)
        self._last_accepted_nitz = None
        self._network_available = False
        reason = "handle_network_unavailable()"
        self._do_time_detection(reason)
        self._do_time_zone_detection(reason)

    def handle_country_detected(self, iso_code: str) -> None:
        """Handle the network country becoming known or changing.

        An empty string means the network is a test network with no country.
        """
        _LOGGER.debug("[%s] handle_country_detected: %r", self._slot_index, iso_code)
        self._last_country_iso = iso_code
        self._do_time_zone_detection(f"handle_country_detected({iso_code!r})")

    def handle_country_unavailable(self) -> None:
        """Handle the network country no longer being known."""
        _LOGGER.debug("[%s] handle_country_unavailable", self._slot_index)
        self._last_country_iso = None
        self._do_time_zone_detection("handle_country_unavailable()")

    def handle_nitz_received(self, signal: NitzSignal) -> None:
        """Handle a NITZ signal received from the network."""
        _LOGGER.debug("[%s] handle_nitz_received: %s", self._slot_index, signal)
        if signal is None:
            raise TypeError("signal must not be None")
        if not self._signal_filter.must_process(self._last_accepted_nitz, signal):
            _LOGGER.debug("[%s] NITZ signal filtered: %s", self._slot_index, signal)
            return
        self._last_accepted_nitz = signal
        reason = f"handle_nitz_received({signal})"
        self._do_time_detection(reason)
        self._do_time_zone_detection(reason)

    def handle_airplane_mode_changed(self, on: bool) -> None:
        """Handle airplane mode being turned on or off.

        Turning airplane mode on forgets everything and withdraws all
        suggestions. Turning it off does nothing: new events will follow
        as the radio reconnects.
        """
        _LOGGER.debug("[%s] handle_airplane_mode_changed: %s", self._slot_index, on)
        if not on:
            return
        self._last_accepted_nitz = None
        self._last_country_iso = None
        self._network_available = False
        reason = f"handle_airplane_mode_changed({on})"
        self._do_time_detection(reason)
        self._do_time_zone_detection(reason)

    def _do_time_zone_detection(self, reason: str) -> None:
        """Compute a time zone suggestion from the current state and send it."""
        suggestion = self._engine.get_time_zone_suggestion(
            self._slot_index, self._last_country_iso, self._last_accepted_nitz
        )
        suggestion.add_debug_info(f"Detection reason={reason}")
        _LOGGER.debug(
            "[%s] Suggesting time zone: %s (reason=%s)",
            self._slot_index,
            suggestion,
            reason,
        )
        self._sink.suggest_device_time_zone(suggestion)

    def _do_time_detection(self, reason: str) -> None:
        """Compute a time suggestion from the current state and send it."""
        suggestion = self._engine.get_time_suggestion(
            self._slot_index, self._last_accepted_nitz
        )
        suggestion.add_debug_info(f"Detection reason={reason}")
        _LOGGER.debug(
            "[%s] Suggesting time: %s (reason=%s)", self._slot_index, suggestion, reason
        )
        self._sink.suggest_device_time(suggestion)
