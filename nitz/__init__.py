"""
Library for detecting time and time zone from cellular network signals.

A radio reports the network country and NITZ (Network Identity and Time Zone)
messages. A `TimeSuggestionStateMachine` for each radio combines them into
time and time zone suggestions, which are passed on to a `SuggestionSink`.
"""

__all__ = [
    "device_state",
    "diagnostics",
    "exceptions",
    "input_filter",
    "signal",
    "state_machine",
    "suggester",
    "suggestion",
    "tzlookup",
]
