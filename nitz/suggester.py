"""Library for turning network country and NITZ information into suggestions.

The engine is stateless: it is given the latest country code and the latest
accepted NITZ signal and works out the best time zone it can from them.
When the information is insufficient or contradictory it returns an empty
suggestion rather than guessing.

The country code has three states:
  - None: The country is not known yet.
  - "": The network is a test network that is not in any real country.
  - A two letter ISO code.
"""

from __future__ import annotations

import logging

from .device_state import DeviceState
from .signal import NitzSignal
from .suggestion import MatchType, Quality, TimeSuggestion, TimeZoneSuggestion, UtcTime
from .tzlookup import (
    CountryQuality,
    country_uses_utc,
    lookup_by_country,
    lookup_by_nitz,
    lookup_by_nitz_country,
)

__all__ = [
    "SuggestionEngine",
]

_LOGGER = logging.getLogger(__name__)

_COUNTRY_QUALITY = {
    CountryQuality.SINGLE_ZONE: Quality.SINGLE_ZONE,
    CountryQuality.DEFAULT_BOOSTED: Quality.SINGLE_ZONE,
    CountryQuality.MULTIPLE_ZONES_SAME_OFFSET: Quality.MULTIPLE_ZONES_WITH_SAME_OFFSET,
    CountryQuality.MULTIPLE_ZONES_DIFFERENT_OFFSETS: Quality.MULTIPLE_ZONES_WITH_DIFFERENT_OFFSETS,
}

# Country results good enough to use when NITZ contradicts the country
_TRUSTED_COUNTRY_QUALITY = {CountryQuality.SINGLE_ZONE, CountryQuality.DEFAULT_BOOSTED}


class SuggestionEngine:
    """Creates time and time zone suggestions from network information."""

    def __init__(self, device_state: DeviceState) -> None:
        """Initialize SuggestionEngine."""
        self._device_state = device_state

    def get_time_zone_suggestion(
        self, slot_index: int, country_iso: str | None, nitz: NitzSignal | None
    ) -> TimeZoneSuggestion:
        """Return the best time zone suggestion for the information available.

        This never raises: an unexpected error results in an empty suggestion.
        """
        try:
            return self._get_time_zone_suggestion(slot_index, country_iso, nitz)
        except Exception as err:  # pylint: disable=broad-except
            message = (
                f"get_time_zone_suggestion: Error during lookup: "
                f"country_iso={country_iso!r}, nitz={nitz}, err={err}"
            )
            _LOGGER.warning("%s", message, exc_info=True)
            return TimeZoneSuggestion.empty(slot_index, message)

    def _get_time_zone_suggestion(
        self, slot_index: int, country_iso: str | None, nitz: NitzSignal | None
    ) -> TimeZoneSuggestion:
        if nitz is not None and nitz.emulator_zone is not None:
            return TimeZoneSuggestion(
                slot_index,
                zone_id=nitz.emulator_zone,
                match_type=MatchType.EMULATOR_ZONE_ID,
                quality=Quality.SINGLE_ZONE,
                debug_info=[f"Emulator time zone override: {nitz}"],
            )
        if country_iso is None:
            # NITZ alone is not enough, wait for the country
            return TimeZoneSuggestion.empty(
                slot_index, f"get_time_zone_suggestion: country_iso=None, nitz={nitz}"
            )
        if nitz is None:
            if not country_iso:
                return TimeZoneSuggestion.empty(
                    slot_index, 'get_time_zone_suggestion: country_iso="", nitz=None'
                )
            return self._from_country(
                slot_index, country_iso, self._device_state.current_time_millis()
            )
        if not country_iso:
            return self._for_test_network(slot_index, nitz)
        return self._from_country_and_nitz(slot_index, country_iso, nitz)

    def _for_test_network(self, slot_index: int, nitz: NitzSignal) -> TimeZoneSuggestion:
        """Return a suggestion using NITZ only, for networks with no real country.

        Without a country the zone is arbitrary, but it has the right offset.
        """
        suggestion = TimeZoneSuggestion(slot_index)
        suggestion.add_debug_info(f"_for_test_network: nitz={nitz}")
        if (result := lookup_by_nitz(nitz)) is None:
            suggestion.add_debug_info("_for_test_network: No zone found")
            return suggestion
        suggestion.zone_id = result.zone_id
        suggestion.match_type = MatchType.TEST_NETWORK_OFFSET_ONLY
        suggestion.quality = (
            Quality.SINGLE_ZONE
            if result.is_only_match
            else Quality.MULTIPLE_ZONES_WITH_SAME_OFFSET
        )
        suggestion.add_debug_info(f"_for_test_network: result={result}")
        return suggestion

    def _from_country_and_nitz(
        self, slot_index: int, country_iso: str, nitz: NitzSignal
    ) -> TimeZoneSuggestion:
        """Return a suggestion using the network country and NITZ."""
        suggestion = TimeZoneSuggestion(slot_index)
        suggestion.add_debug_info(
            f"_from_country_and_nitz: country_iso={country_iso}, nitz={nitz}"
        )
        if self._is_offset_info_bogus(country_iso, nitz):
            suggestion.add_debug_info("_from_country_and_nitz: NITZ signal looks bogus")
            return suggestion

        if (offset_result := lookup_by_nitz_country(nitz, country_iso)) is not None:
            suggestion.zone_id = offset_result.zone_id
            suggestion.match_type = MatchType.NETWORK_COUNTRY_AND_OFFSET
            suggestion.quality = (
                Quality.SINGLE_ZONE
                if offset_result.is_only_match
                else Quality.MULTIPLE_ZONES_WITH_SAME_OFFSET
            )
            suggestion.add_debug_info(f"_from_country_and_nitz: result={offset_result}")
            return suggestion

        # NITZ doesn't agree with any zone in the country. Only fall back to
        # the country if its default can be trusted on its own.
        country_result = lookup_by_country(country_iso, nitz.utc_millis)
        if country_result is None:
            suggestion.add_debug_info(
                "_from_country_and_nitz: lookup_by_country() country not recognized"
            )
            return suggestion
        if country_result.quality not in _TRUSTED_COUNTRY_QUALITY:
            suggestion.add_debug_info(
                "_from_country_and_nitz: country-only suggestion quality not high "
                f"enough: country_result={country_result}"
            )
            return suggestion
        suggestion.zone_id = country_result.default_zone_id
        suggestion.match_type = MatchType.NETWORK_COUNTRY_ONLY
        suggestion.quality = Quality.SINGLE_ZONE
        suggestion.add_debug_info(
            "_from_country_and_nitz: high quality country-only suggestion: "
            f"country_result={country_result}"
        )
        return suggestion

    @staticmethod
    def _is_offset_info_bogus(country_iso: str, nitz: NitzSignal) -> bool:
        """Return True for a zero offset in a country with no zone on UTC.

        Some networks send a zero offset when they don't know the local time.
        """
        if nitz.local_offset_millis != 0:
            return False
        return not country_uses_utc(country_iso, nitz.utc_millis)

    def _from_country(
        self, slot_index: int, country_iso: str, when_millis: int
    ) -> TimeZoneSuggestion:
        """Return a suggestion using only the network country."""
        suggestion = TimeZoneSuggestion(slot_index)
        suggestion.add_debug_info(
            f"_from_country: country_iso={country_iso}, when_millis={when_millis}"
        )
        if (country_result := lookup_by_country(country_iso, when_millis)) is None:
            suggestion.add_debug_info("_from_country: Country not recognized")
            return suggestion
        suggestion.zone_id = country_result.default_zone_id
        suggestion.match_type = MatchType.NETWORK_COUNTRY_ONLY
        suggestion.quality = _COUNTRY_QUALITY[country_result.quality]
        suggestion.add_debug_info(f"_from_country: country_result={country_result}")
        return suggestion

    def get_time_suggestion(
        self, slot_index: int, nitz: NitzSignal | None
    ) -> TimeSuggestion:
        """Return a time suggestion from the NITZ signal, if there is one."""
        if nitz is None:
            return TimeSuggestion(
                slot_index, debug_info=["get_time_suggestion: nitz=None"]
            )
        return TimeSuggestion(
            slot_index,
            utc_time=UtcTime(nitz.received_at_monotonic_millis, nitz.utc_millis),
            debug_info=[f"get_time_suggestion: NITZ signal used nitz={nitz}"],
        )
