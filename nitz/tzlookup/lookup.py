"""Library for finding time zones that match network country and NITZ information.

A country code alone is often enough to find a time zone, but many countries
span several zones. A NITZ signal carries the local offset (and sometimes
the DST state) which narrows down the candidates, but without a country many
zones share the same offset. These functions combine the two.

Every lookup is performed for a specific instant: zone rules change over
time and a country may have had more distinct zones in the past than it
has today.

When several zones match the same criteria the zone with the
lexicographically smallest id is returned and the result is marked as not
being the only match.
"""

from __future__ import annotations

import datetime
import enum
import logging
import zoneinfo
from collections.abc import Iterable
from dataclasses import dataclass, field
from functools import cache

from nitz.exceptions import ZoneLookupError
from nitz.signal import NitzSignal

from . import countries

__all__ = [
    "CountryQuality",
    "CountryResult",
    "OffsetLookupResult",
    "lookup_by_country",
    "lookup_by_nitz",
    "lookup_by_nitz_country",
    "country_uses_utc",
]

_LOGGER = logging.getLogger(__name__)

_ZERO = datetime.timedelta(0)

# Zone ids that are not tied to a geographic region, or are legacy aliases
_EXCLUDED_PREFIXES = (
    "Etc/",
    "SystemV/",
    "posix/",
    "right/",
    "US/",
    "Canada/",
    "Mexico/",
    "Brazil/",
    "Chile/",
)


class CountryQuality(enum.Enum):
    """How good a guess the country default zone is for the whole country."""

    SINGLE_ZONE = "SINGLE_ZONE"
    """The country has one effective zone."""

    DEFAULT_BOOSTED = "DEFAULT_BOOSTED"
    """The country has several zones but the default is used by most people."""

    MULTIPLE_ZONES_SAME_OFFSET = "MULTIPLE_ZONES_SAME_OFFSET"
    """The country has several zones that all have the same offset right now."""

    MULTIPLE_ZONES_DIFFERENT_OFFSETS = "MULTIPLE_ZONES_DIFFERENT_OFFSETS"
    """The country has several zones with different offsets."""


@dataclass(frozen=True)
class CountryResult:
    """The result of looking up a time zone using only a country."""

    default_zone_id: str
    """The zone to use for the country."""

    quality: CountryQuality
    """How well the default zone represents the whole country."""

    debug_info: str = field(default="", compare=False)
    """Explains how the result was found."""


@dataclass(frozen=True)
class OffsetLookupResult:
    """The result of looking up a time zone using offset information."""

    zone_id: str
    """A zone that matches the criteria."""

    is_only_match: bool
    """True if no other candidate zone matched the criteria."""


def _to_datetime(when_millis: int) -> datetime.datetime:
    """Convert milliseconds since the epoch to an aware UTC datetime."""
    return datetime.datetime.fromtimestamp(when_millis / 1000, tz=datetime.timezone.utc)


@cache
def _zone(zone_id: str) -> zoneinfo.ZoneInfo:
    """Load and cache a zone."""
    try:
        return zoneinfo.ZoneInfo(zone_id)
    except (zoneinfo.ZoneInfoNotFoundError, ValueError) as err:
        raise ZoneLookupError(f"Unable to load time zone: {zone_id}") from err


@cache
def _candidate_zone_ids() -> tuple[str, ...]:
    """Return all regional zone ids known to the system or tzdata package, sorted."""
    return tuple(
        sorted(
            key
            for key in zoneinfo.available_timezones()
            if "/" in key and not key.startswith(_EXCLUDED_PREFIXES)
        )
    )


def _offsets_at(
    zone_id: str, when: datetime.datetime
) -> tuple[datetime.timedelta, datetime.timedelta]:
    """Return the total offset and DST adjustment for the zone at the instant."""
    local = when.astimezone(_zone(zone_id))
    return (local.utcoffset() or _ZERO, local.dst() or _ZERO)


def _offset_matches(
    zone_id: str,
    when: datetime.datetime,
    total_offset: datetime.timedelta,
    is_dst: bool | None,
) -> bool:
    """Return True if the zone has the offset (and DST state, if known) at the instant."""
    utcoffset, dst = _offsets_at(zone_id, when)
    if utcoffset != total_offset:
        return False
    return is_dst is None or is_dst == bool(dst)


def _find_match(
    zone_ids: Iterable[str],
    when: datetime.datetime,
    total_offset: datetime.timedelta,
    is_dst: bool | None,
) -> OffsetLookupResult | None:
    """Return the first matching zone in the sorted candidates."""
    match: str | None = None
    for zone_id in sorted(zone_ids):
        if not _offset_matches(zone_id, when, total_offset, is_dst):
            continue
        if match is not None:
            return OffsetLookupResult(match, is_only_match=False)
        match = zone_id
    if match is None:
        return None
    return OffsetLookupResult(match, is_only_match=True)


def _is_dst(signal: NitzSignal) -> bool | None:
    """Return the DST state of the signal, or None when it is not known.

    Only the presence of DST is matched, not the amount, since zones such as
    Australia/Lord_Howe use a DST adjustment other than one hour.
    """
    if signal.dst_adjustment_millis is None:
        return None
    return signal.dst_adjustment_millis != 0


def lookup_by_country(iso_code: str, when_millis: int) -> CountryResult | None:
    """Return the default zone for the country and how good a guess it is.

    None is returned if the country code is not known.
    """
    if (country := countries.read(iso_code)) is None:
        return None
    when = _to_datetime(when_millis)
    effective_zone_ids = country.effective_zone_ids_at(when)
    debug_info = (
        f"lookup_by_country: iso_code={iso_code}, when={when.isoformat()}, "
        f"effective_zone_ids={effective_zone_ids}"
    )

    if len(effective_zone_ids) == 1:
        quality = CountryQuality.SINGLE_ZONE
    elif country.default_boost:
        quality = CountryQuality.DEFAULT_BOOSTED
    elif (
        len({_offsets_at(zone_id, when)[0] for zone_id in effective_zone_ids}) == 1
    ):
        quality = CountryQuality.MULTIPLE_ZONES_SAME_OFFSET
    else:
        quality = CountryQuality.MULTIPLE_ZONES_DIFFERENT_OFFSETS

    return CountryResult(country.default_zone_id, quality, debug_info)


def lookup_by_nitz(signal: NitzSignal) -> OffsetLookupResult | None:
    """Return a zone that matches the NITZ offset information, ignoring country.

    If the signal states the DST state but no zone matches it, the DST state
    is assumed to be wrong and the lookup is repeated with the offset alone.
    """
    when = _to_datetime(signal.utc_millis)
    is_dst = _is_dst(signal)
    result = _find_match(_candidate_zone_ids(), when, signal.local_offset, is_dst)
    if result is None and is_dst is not None:
        _LOGGER.debug("No zone matched DST state, retrying with offset only: %s", signal)
        result = _find_match(_candidate_zone_ids(), when, signal.local_offset, None)
    return result


def lookup_by_nitz_country(
    signal: NitzSignal, iso_code: str
) -> OffsetLookupResult | None:
    """Return a zone in the country that matches the NITZ offset information.

    Only zones that are effective at the time of the signal are considered.
    None is returned if the country is not known or no zone matches.
    """
    if (country := countries.read(iso_code)) is None:
        return None
    when = _to_datetime(signal.utc_millis)
    return _find_match(
        country.effective_zone_ids_at(when), when, signal.local_offset, _is_dst(signal)
    )


def country_uses_utc(iso_code: str, when_millis: int) -> bool:
    """Return True if a zone of the country has a zero offset from UTC at the instant."""
    if (country := countries.read(iso_code)) is None:
        return False
    when = _to_datetime(when_millis)
    return any(
        _offsets_at(zone_id, when)[0] == _ZERO
        for zone_id in country.effective_zone_ids_at(when)
    )
