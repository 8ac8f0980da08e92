"""Data model for suggestions sent to the time and time zone detection services."""

from __future__ import annotations

import enum
from collections import namedtuple
from dataclasses import dataclass, field

__all__ = [
    "MatchType",
    "Quality",
    "TimeZoneSuggestion",
    "TimeSuggestion",
    "UtcTime",
]


class MatchType(enum.Enum):
    """The information that was used to find the suggested zone."""

    NETWORK_COUNTRY_ONLY = "NETWORK_COUNTRY_ONLY"
    """Only the network country was used."""

    NETWORK_COUNTRY_AND_OFFSET = "NETWORK_COUNTRY_AND_OFFSET"
    """The network country and the NITZ offset information were used."""

    TEST_NETWORK_OFFSET_ONLY = "TEST_NETWORK_OFFSET_ONLY"
    """The network has no real country so only the NITZ offset was used."""

    EMULATOR_ZONE_ID = "EMULATOR_ZONE_ID"
    """The zone id was provided by the emulator host."""


class Quality(enum.Enum):
    """How likely the suggested zone is to be the correct one."""

    SINGLE_ZONE = "SINGLE_ZONE"
    """Only one zone matched."""

    MULTIPLE_ZONES_WITH_SAME_OFFSET = "MULTIPLE_ZONES_WITH_SAME_OFFSET"
    """Several zones matched, but they share the same offset."""

    MULTIPLE_ZONES_WITH_DIFFERENT_OFFSETS = "MULTIPLE_ZONES_WITH_DIFFERENT_OFFSETS"
    """Several zones with different offsets matched, the offset may be wrong."""


@dataclass
class TimeZoneSuggestion:
    """A time zone suggestion from a single radio.

    A suggestion without a zone id withdraws any previous suggestion made for
    the slot. The debug info does not take part in comparisons, so all empty
    suggestions for a slot are equal.
    """

    slot_index: int
    """The radio that the suggestion is for."""

    zone_id: str | None = None
    """The suggested zone, or None when there is no opinion."""

    match_type: MatchType | None = None
    """The information used to find the zone."""

    quality: Quality | None = None
    """How good the suggestion is."""

    debug_info: list[str] = field(default_factory=list, compare=False)
    """Explains how the suggestion was made."""

    @classmethod
    def empty(cls, slot_index: int, *debug_info: str) -> TimeZoneSuggestion:
        """Create a suggestion that withdraws any opinion for the slot."""
        return cls(slot_index, debug_info=list(debug_info))

    @property
    def is_empty(self) -> bool:
        """Return True if the suggestion has no zone."""
        return self.zone_id is None

    def add_debug_info(self, *debug_info: str) -> None:
        """Record information explaining how the suggestion was made."""
        self.debug_info.extend(debug_info)


UtcTime = namedtuple("UtcTime", ["reference_time_millis", "utc_millis"])
"""A UTC time along with the elapsed realtime clock value when it was correct."""


@dataclass
class TimeSuggestion:
    """A time suggestion from a single radio."""

    slot_index: int
    """The radio that the suggestion is for."""

    utc_time: UtcTime | None = None
    """The suggested time, or None when there is no opinion."""

    debug_info: list[str] = field(default_factory=list, compare=False)
    """Explains how the suggestion was made."""

    @property
    def is_empty(self) -> bool:
        """Return True if the suggestion has no time."""
        return self.utc_time is None

    def add_debug_info(self, *debug_info: str) -> None:
        """Record information explaining how the suggestion was made."""
        self.debug_info.extend(debug_info)
