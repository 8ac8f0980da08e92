"""Library for deciding whether a received NITZ signal should be processed.

Networks can send NITZ signals frequently and radios can report the same
signal more than once. Processing every signal wastes work and can cause
the device time to jitter, so each new signal is compared against the last
signal that was processed before it is used.

The decision is made by an ordered list of independent checks. Each check
may insist that the signal is processed, insist that it is skipped, or have
no opinion and defer to the next check. When every check abstains the
signal is processed.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable, Sequence

from .device_state import DeviceState
from .signal import NitzSignal

__all__ = [
    "FilterResult",
    "SignalPredicate",
    "SignalAcceptanceFilter",
    "create_ignore_nitz_check",
    "create_bogus_elapsed_realtime_check",
    "create_no_old_signal_check",
    "create_rate_limit_check",
]

_LOGGER = logging.getLogger(__name__)


class FilterResult(enum.Enum):
    """The outcome of a single check in the filter chain."""

    MUST_PROCESS = "MUST_PROCESS"
    """The signal must be processed, later checks are not consulted."""

    MUST_SKIP = "MUST_SKIP"
    """The signal must be discarded, later checks are not consulted."""

    NO_OPINION = "NO_OPINION"
    """Defer the decision to the next check."""


SignalPredicate = Callable[[NitzSignal | None, NitzSignal], FilterResult]
"""A check given the previously processed signal (if any) and the new signal."""


def create_ignore_nitz_check(device_state: DeviceState) -> SignalPredicate:
    """Return a check that skips all signals when NITZ is disabled by policy."""

    def check(previous: NitzSignal | None, candidate: NitzSignal) -> FilterResult:
        if device_state.get_ignore_nitz():
            _LOGGER.debug("Skipping NITZ signal, ignore_nitz is set: %s", candidate)
            return FilterResult.MUST_SKIP
        return FilterResult.NO_OPINION

    return check


def create_bogus_elapsed_realtime_check(device_state: DeviceState) -> SignalPredicate:
    """Return a check that skips signals that claim to be received in the future."""

    def check(previous: NitzSignal | None, candidate: NitzSignal) -> FilterResult:
        elapsed_realtime = device_state.elapsed_realtime()
        if candidate.received_at_monotonic_millis > elapsed_realtime:
            _LOGGER.debug(
                "Skipping NITZ signal received in the future (elapsed_realtime=%s): %s",
                elapsed_realtime,
                candidate,
            )
            return FilterResult.MUST_SKIP
        return FilterResult.NO_OPINION

    return check


def create_no_old_signal_check() -> SignalPredicate:
    """Return a check that always processes the first signal."""

    def check(previous: NitzSignal | None, candidate: NitzSignal) -> FilterResult:
        if previous is None:
            return FilterResult.MUST_PROCESS
        return FilterResult.NO_OPINION

    return check


def _offset_info_differs(previous: NitzSignal, candidate: NitzSignal) -> bool:
    """Return True if the signals disagree about the local offset or DST state."""
    return (
        previous.local_offset_millis != candidate.local_offset_millis
        or previous.dst_adjustment_millis != candidate.dst_adjustment_millis
    )


def create_rate_limit_check(device_state: DeviceState) -> SignalPredicate:
    """Return a check that skips signals that arrive too soon with nothing new.

    A signal that arrives within the spacing threshold of the previous one is
    still processed if it carries different offset information, or if its UTC
    time disagrees with the previous signal (after allowing for the time
    that passed between the two) by more than the diff threshold.
    """

    def check(previous: NitzSignal | None, candidate: NitzSignal) -> FilterResult:
        if previous is None:
            return FilterResult.NO_OPINION

        spacing = (
            candidate.received_at_monotonic_millis
            - previous.received_at_monotonic_millis
        )
        if spacing >= device_state.get_nitz_update_spacing_millis():
            return FilterResult.MUST_PROCESS

        if _offset_info_differs(previous, candidate):
            _LOGGER.debug("Offset information changed, spacing=%s", spacing)
            return FilterResult.MUST_PROCESS

        utc_diff = abs((candidate.utc_millis - previous.utc_millis) - spacing)
        if utc_diff > device_state.get_nitz_update_diff_millis():
            _LOGGER.debug("UTC time changed by %sms, spacing=%s", utc_diff, spacing)
            return FilterResult.MUST_PROCESS

        _LOGGER.debug(
            "Rate limiting NITZ signal, spacing=%s utc_diff=%s", spacing, utc_diff
        )
        return FilterResult.MUST_SKIP

    return check


class SignalAcceptanceFilter:
    """Evaluates an ordered list of checks to decide if a signal is processed."""

    def __init__(self, predicates: Sequence[SignalPredicate]) -> None:
        """Initialize SignalAcceptanceFilter."""
        self._predicates = list(predicates)

    @classmethod
    def create(cls, device_state: DeviceState) -> SignalAcceptanceFilter:
        """Create the filter with the standard set of checks."""
        return cls(
            [
                create_ignore_nitz_check(device_state),
                create_bogus_elapsed_realtime_check(device_state),
                create_no_old_signal_check(),
                create_rate_limit_check(device_state),
            ]
        )

    def evaluate(
        self, previous: NitzSignal | None, candidate: NitzSignal
    ) -> FilterResult:
        """Return the first decisive result from the checks, or MUST_PROCESS."""
        if candidate is None:
            raise TypeError("candidate signal must not be None")
        for predicate in self._predicates:
            try:
                result = predicate(previous, candidate)
            except Exception:  # pylint: disable=broad-except
                _LOGGER.warning(
                    "NITZ signal check failed, ignoring: %s", predicate, exc_info=True
                )
                continue
            if result is not FilterResult.NO_OPINION:
                return result
        return FilterResult.MUST_PROCESS

    def must_process(self, previous: NitzSignal | None, candidate: NitzSignal) -> bool:
        """Return True if the candidate signal should replace the previous one."""
        return self.evaluate(previous, candidate) is FilterResult.MUST_PROCESS
