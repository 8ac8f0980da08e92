"""Library for decoding NITZ (Network Identity and Time Zone) strings.

A NITZ message is sent by a cellular network to tell a device the current
UTC time and the local offset of the network. The radio delivers it as a
string with the following format:

    yy/mm/dd,hh:mm:ss(+/-)tz[,dt[,zone]]

  - yy/mm/dd,hh:mm:ss: The current UTC date and time, with a two digit year
    that is relative to the year 2000.
  - tz: The total local offset (including any DST) from UTC as a signed number
    of quarter hours.
  - dt: Optional DST adjustment, already included in tz, as a number of
    quarter hours (e.g. 4 for one hour).
    When omitted the network has not said whether DST is in effect, which is
    different from saying DST is not in effect.
  - zone: An emulator only extension that carries the IANA zone id of the
    host computer with '!' used in place of '/', e.g. America!Los_Angeles.
"""

from __future__ import annotations

import datetime
import logging
import re
import zoneinfo
from dataclasses import dataclass, field

from .exceptions import NitzParseError

__all__ = [
    "NitzSignal",
    "parse_nitz",
]

_LOGGER = logging.getLogger(__name__)

_MILLIS_PER_QUARTER_HOUR = 15 * 60 * 1000

# The network only has two digits to express the year
_BASE_YEAR = 2000
_MAX_YEAR = 2037

# A total offset must be a valid datetime.timezone offset
_MAX_OFFSET_QUARTER_HOURS = 24 * 4 - 1

_NITZ_RE_PATTERN: re.Pattern[str] = re.compile(
    r"(?P<year>\d{2})/(?P<month>\d{1,2})/(?P<day>\d{1,2})"  # date
    r",(?P<hour>\d{1,2}):(?P<minute>\d{1,2}):(?P<second>\d{1,2})"  # time
    r"(?P<sign>[+-])(?P<offset>\d{1,3})"  # total offset in quarter hours
    r"(?:,(?P<dst>\d{1,2})"  # dst adjustment in quarter hours
    r"(?:,(?P<zone>[A-Za-z0-9_+\-!]+))?)?"  # emulator host zone
)


@dataclass(frozen=True)
class NitzSignal:
    """A decoded NITZ payload along with the time that it was received."""

    utc_millis: int
    """The current UTC time as milliseconds since the unix epoch."""

    local_offset_millis: int
    """The total offset to add to UTC time to get local time, including DST."""

    received_at_monotonic_millis: int
    """The elapsed realtime clock value at the moment the signal was received."""

    dst_adjustment_millis: int | None = None
    """The DST portion of the local offset, or None when the network did not say."""

    emulator_zone: str | None = None
    """The zone id of the host when running in an emulator."""

    original: str | None = field(default=None, compare=False)
    """The raw wire string, stored for debugging only."""

    @property
    def is_dst(self) -> bool:
        """Return True if the network says local time is in DST."""
        return bool(self.dst_adjustment_millis)

    @property
    def utc_time(self) -> datetime.datetime:
        """Return the UTC time of the signal as an aware datetime."""
        return datetime.datetime.fromtimestamp(
            self.utc_millis / 1000, tz=datetime.timezone.utc
        )

    @property
    def local_offset(self) -> datetime.timedelta:
        """Return the total local offset as a timedelta."""
        return datetime.timedelta(milliseconds=self.local_offset_millis)

    @classmethod
    def from_string(
        cls, value: str, received_at_monotonic_millis: int
    ) -> NitzSignal:
        """Decode a NITZ wire string, raising NitzParseError when it is invalid."""
        if not (match := _NITZ_RE_PATTERN.fullmatch(value)):
            raise NitzParseError(f"Expected value to match NITZ pattern: {value}")

        year = _BASE_YEAR + int(match.group("year"))
        if year > _MAX_YEAR:
            raise NitzParseError(
                f"NITZ year exceeds supported range: {value}",
                detailed_error=f"year={year}",
            )
        try:
            utc_time = datetime.datetime(
                year,
                int(match.group("month")),
                int(match.group("day")),
                int(match.group("hour")),
                int(match.group("minute")),
                int(match.group("second")),
                tzinfo=datetime.timezone.utc,
            )
        except ValueError as err:
            raise NitzParseError(
                f"NITZ date or time is not valid: {value}", detailed_error=str(err)
            ) from err

        quarter_hours = int(match.group("offset"))
        if quarter_hours > _MAX_OFFSET_QUARTER_HOURS:
            raise NitzParseError(
                f"NITZ offset is out of range: {value}",
                detailed_error=f"offset={quarter_hours}",
            )
        local_offset_millis = quarter_hours * _MILLIS_PER_QUARTER_HOUR
        if match.group("sign") == "-":
            local_offset_millis = -local_offset_millis

        dst_adjustment_millis = None
        if (dst := match.group("dst")) is not None:
            dst_adjustment_millis = int(dst) * _MILLIS_PER_QUARTER_HOUR

        emulator_zone = None
        if (zone := match.group("zone")) is not None:
            emulator_zone = zone.replace("!", "/")
            try:
                zoneinfo.ZoneInfo(emulator_zone)
            except (zoneinfo.ZoneInfoNotFoundError, ValueError) as err:
                raise NitzParseError(
                    f"NITZ emulator zone is not known: {value}",
                    detailed_error=str(err),
                ) from err

        return cls(
            utc_millis=int(utc_time.timestamp()) * 1000,
            local_offset_millis=local_offset_millis,
            received_at_monotonic_millis=received_at_monotonic_millis,
            dst_adjustment_millis=dst_adjustment_millis,
            emulator_zone=emulator_zone,
            original=value,
        )


def parse_nitz(value: str, received_at_monotonic_millis: int) -> NitzSignal | None:
    """Decode a NITZ wire string, returning None when it can't be used."""
    try:
        return NitzSignal.from_string(value, received_at_monotonic_millis)
    except NitzParseError as err:
        _LOGGER.debug("Discarding NITZ string: %s (%s)", err.message, err.detailed_error)
        return None
