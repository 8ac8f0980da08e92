"""Library for mapping network country codes and NITZ offsets to time zones."""

from .lookup import (
    CountryQuality,
    CountryResult,
    OffsetLookupResult,
    country_uses_utc,
    lookup_by_country,
    lookup_by_nitz,
    lookup_by_nitz_country,
)

__all__ = [
    "CountryQuality",
    "CountryResult",
    "OffsetLookupResult",
    "country_uses_utc",
    "lookup_by_country",
    "lookup_by_nitz",
    "lookup_by_nitz_country",
]
