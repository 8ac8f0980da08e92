"""Library for diagnostics or debugging information about detection state."""

from __future__ import annotations

from collections.abc import Generator

from .signal import NitzSignal
from .state_machine import TimeSuggestionStateMachine
from .suggestion import TimeSuggestion, TimeZoneSuggestion

__all__ = [
    "describe_signal",
    "describe_suggestion",
    "dump_state",
]


def describe_signal(signal: NitzSignal | None) -> str:
    """Return a short readable description of a NITZ signal."""
    if signal is None:
        return "None"
    parts = [
        f"utc={signal.utc_time.isoformat()}",
        f"offset={signal.local_offset}",
        f"dst={signal.dst_adjustment_millis}",
        f"received_at={signal.received_at_monotonic_millis}",
    ]
    if signal.emulator_zone:
        parts.append(f"emulator_zone={signal.emulator_zone}")
    if signal.original:
        parts.append(f"original={signal.original!r}")
    return ", ".join(parts)


def describe_suggestion(suggestion: TimeZoneSuggestion | TimeSuggestion) -> str:
    """Return a short readable description of a suggestion."""
    if isinstance(suggestion, TimeSuggestion):
        if suggestion.utc_time is None:
            return f"slot={suggestion.slot_index} time=None"
        return (
            f"slot={suggestion.slot_index} "
            f"utc_millis={suggestion.utc_time.utc_millis} "
            f"reference_time_millis={suggestion.utc_time.reference_time_millis}"
        )
    if suggestion.zone_id is None:
        return f"slot={suggestion.slot_index} zone=None"
    match_type = suggestion.match_type.value if suggestion.match_type else None
    quality = suggestion.quality.value if suggestion.quality else None
    return (
        f"slot={suggestion.slot_index} zone={suggestion.zone_id} "
        f"match_type={match_type} quality={quality}"
    )


def dump_state(machine: TimeSuggestionStateMachine) -> Generator[str, None, None]:
    """Generate lines describing the cached state of a state machine."""
    yield f"TimeSuggestionStateMachine[{machine.slot_index}]"
    yield f"  last_accepted_nitz: {describe_signal(machine.get_cached_nitz())}"
    yield f"  last_country_iso: {machine.country_iso!r}"
    yield f"  network_available: {machine.network_available}"
