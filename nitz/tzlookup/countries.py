"""Library for reading the country time zone table.

The table is validated when it is first read and then cached, so that
lookups performed while handling radio events never pay the cost of
loading zone data.
"""

from __future__ import annotations

import logging
from functools import cache

from pydantic import ValidationError

from nitz.exceptions import ZoneLookupError

from .country_data import COUNTRY_ZONES
from .model import CountryTimeZones

__all__ = [
    "read",
    "available_countries",
]

_LOGGER = logging.getLogger(__name__)


@cache
def _read_countries() -> dict[str, CountryTimeZones]:
    """Read, validate and cache the country table keyed by country code."""
    try:
        countries = [CountryTimeZones.model_validate(raw) for raw in COUNTRY_ZONES]
    except ValidationError as err:
        raise ZoneLookupError(f"Unable to load country time zone data: {err}") from err
    result: dict[str, CountryTimeZones] = {}
    for country in countries:
        if country.iso_code in result:
            raise ZoneLookupError(
                f"Country time zone data has a duplicate country: {country.iso_code}"
            )
        result[country.iso_code] = country
    _LOGGER.debug("Loaded time zones for %d countries", len(result))
    return result


def read(iso_code: str) -> CountryTimeZones | None:
    """Return the time zones for the country, or None if the country is not known."""
    if not iso_code:
        return None
    country = _read_countries().get(iso_code.lower())
    if country is None:
        _LOGGER.debug("No time zone information for country: %s", iso_code)
    return country


def available_countries() -> set[str]:
    """Return the set of country codes with time zone information."""
    return set(_read_countries())
