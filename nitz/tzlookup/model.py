"""Data model for the country time zone table."""

from __future__ import annotations

import datetime
import zoneinfo
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator, model_validator


class TimeZoneMapping(BaseModel):
    """A time zone used within a country."""

    model_config = ConfigDict(frozen=True)

    zone_id: str
    """The IANA time zone id."""

    not_after: datetime.datetime | None = None
    """After this instant the zone behaves like another zone in the country.

    A zone with this set is only useful for telling zones apart before this
    time, e.g. when a region of the country later changed its rules to match
    a neighbor. When not set the zone is always relevant.
    """

    @field_validator("zone_id")
    @classmethod
    def _check_zone_id(cls, value: str) -> str:
        """Verify the zone id is known to the system or tzdata package."""
        try:
            zoneinfo.ZoneInfo(value)
        except (zoneinfo.ZoneInfoNotFoundError, ValueError) as err:
            raise ValueError(f"Unknown time zone id: {value}") from err
        return value

    @field_validator("not_after")
    @classmethod
    def _check_not_after(
        cls, value: datetime.datetime | None
    ) -> datetime.datetime | None:
        """Require not_after to be an aware datetime."""
        if value is not None and value.tzinfo is None:
            raise ValueError(f"Expected not_after to have a timezone: {value}")
        return value

    def is_effective_at(self, when: datetime.datetime) -> bool:
        """Return True if the zone is still distinct from others at the instant."""
        return self.not_after is None or when < self.not_after


class CountryTimeZones(BaseModel):
    """The time zones used by a single country."""

    model_config = ConfigDict(frozen=True)

    iso_code: str
    """The lower case ISO 3166 alpha-2 country code."""

    default_zone_id: str
    """The zone to use when the country alone is known."""

    default_boost: bool = False
    """Set when the default zone is good enough even though there are others.

    This is used for countries where the vast majority of the population
    lives in the default zone.
    """

    zones: list[TimeZoneMapping]
    """All zones used in the country, in priority order."""

    @field_validator("iso_code")
    @classmethod
    def _normalize_iso_code(cls, value: str) -> str:
        """Store country codes in lower case."""
        if len(value) != 2 or not value.isalpha():
            raise ValueError(f"Expected a two letter country code: {value}")
        return value.lower()

    @field_validator("zones", mode="before")
    @classmethod
    def _parse_zones(cls, values: Any) -> Any:
        """Allow a zone to be specified with a plain zone id."""
        if not isinstance(values, list):
            return values
        return [{"zone_id": value} if isinstance(value, str) else value for value in values]

    @model_validator(mode="after")
    def _check_default_zone(self) -> CountryTimeZones:
        """Verify the default is one of the country zones and is always effective."""
        for mapping in self.zones:
            if mapping.zone_id != self.default_zone_id:
                continue
            if mapping.not_after is not None:
                raise ValueError(
                    f"Default zone for {self.iso_code} must not have not_after: {mapping}"
                )
            return self
        raise ValueError(
            f"Default zone for {self.iso_code} is not in its zones: {self.default_zone_id}"
        )

    def effective_zone_ids_at(self, when: datetime.datetime) -> list[str]:
        """Return the zone ids that are still distinct at the instant."""
        return [mapping.zone_id for mapping in self.zones if mapping.is_effective_at(when)]
