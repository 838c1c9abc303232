"""Julian day conversion, calendar helpers, time zones, and date-string parsing.

Date strings typed by users are parsed with rms-julian; everything else is
plain calendar arithmetic on datetime values (Meeus, chapter 7).
"""

from __future__ import annotations

import logging
import math
import re
from datetime import date, datetime, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import julian

from astroalgo.config import get_default_zone
from astroalgo.constants import (
    DAYS_PER_JULIAN_CENTURY,
    DAYS_PER_JULIAN_MILLENNIUM,
    DELTA_T_EPOCH_JD,
    GREGORIAN_START,
    GREGORIAN_START_JD,
    J2000_JD,
    SECONDS_PER_DAY,
)
from astroalgo.errors import AstroAlgoError, InvalidTimeZoneError

logger = logging.getLogger(__name__)

# A datetime (naive = UTC) or a Julian day number.
Instant = datetime | float

MJD_OFFSET = 2400000.5

_UTC_NAMES = ('UTC', 'Z', 'GMT')
_OFFSET_RE = re.compile(r'^(?:UTC)?([+-])(\d{1,2})(?::?(\d{2}))?$')


def resolve_zone(name: str | None = None) -> tzinfo:
    """Resolve a time zone name to a tzinfo.

    Accepts IANA names (e.g. 'Asia/Shanghai'), 'UTC', and fixed offsets such
    as '+08:00' or 'UTC-5'. None or an empty string means the configured
    default zone.

    Parameters:
        name: Zone identifier.

    Returns:
        tzinfo instance.

    Raises:
        InvalidTimeZoneError: If the name cannot be resolved.
    """
    key = (name or '').strip() or get_default_zone()
    if key.upper() in _UTC_NAMES:
        return timezone.utc
    match = _OFFSET_RE.match(key.upper())
    if match is not None:
        sign, hours, minutes = match.groups()
        offset = timedelta(hours=int(hours), minutes=int(minutes or 0))
        if offset >= timedelta(hours=24):
            raise InvalidTimeZoneError(key)
        return timezone(-offset if sign == '-' else offset)
    try:
        return ZoneInfo(key)
    except (ZoneInfoNotFoundError, ValueError, OSError) as e:
        # Region directories such as "Asia" surface as IsADirectoryError
        raise InvalidTimeZoneError(key) from e


def utc_offset_hours(when: datetime) -> float:
    """Return the UTC offset of a datetime in hours (0 for naive values)."""
    offset = when.utcoffset()
    if offset is None:
        return 0.0
    return offset.total_seconds() / 3600.0


def _as_naive_utc(when: datetime) -> datetime:
    if when.tzinfo is None or when.utcoffset() is None:
        return when
    return when.astimezone(timezone.utc).replace(tzinfo=None)


def to_julian_day(when: datetime, modified: bool = False) -> float:
    """Convert a datetime to a Julian day (Meeus 7.1).

    Aware datetimes are converted to UTC first; naive ones are taken as UTC.
    Dates before 1582-10-15 are read in the Julian calendar.

    Parameters:
        when: Civil date and time.
        modified: If True, return the Modified Julian Day (JD - 2400000.5).

    Returns:
        Julian day as a float.
    """
    t = _as_naive_utc(when)
    year, month = t.year, t.month
    day = t.day + (t.hour + (t.minute + (t.second + t.microsecond / 1e6) / 60.0) / 60.0) / 24.0
    if month <= 2:
        year -= 1
        month += 12
    if (t.year, t.month, t.day) < GREGORIAN_START:
        b = 0
    else:
        a = math.floor(year / 100)
        b = 2 - a + math.floor(a / 4)
    jd = math.floor(365.25 * (year + 4716)) + math.floor(30.6001 * (month + 1)) + day + b - 1524.5
    if modified:
        return jd - MJD_OFFSET
    return jd


def to_calendar_day(jd: float, zone: tzinfo | None = None) -> datetime:
    """Convert a Julian day to a calendar datetime (Meeus chapter 7 inverse).

    Parameters:
        jd: Julian day (UT).
        zone: If given, return an aware datetime converted to this zone;
            otherwise a naive UTC datetime.

    Returns:
        datetime with microsecond resolution.

    Raises:
        AstroAlgoError: If the date falls outside the datetime range (years
            1 to 9999) or is a Julian-calendar leap day, such as 1500-02-29,
            that the proleptic Gregorian datetime cannot hold.
    """
    z = int(jd + 0.5)
    f = jd + 0.5 - z
    if z < GREGORIAN_START_JD:
        a = z
    else:
        alpha = int((z - 1867216.25) / 36524.25)
        a = z + 1 + alpha - int(alpha / 4)
    b = a + 1524
    c = int((b - 122.1) / 365.25)
    d = int(365.25 * c)
    e = int((b - d) / 30.6001)
    mday = b - d - int(30.6001 * e)
    month = e - 1 if e < 14 else e - 13
    year = c - 4716 if month > 2 else c - 4715
    try:
        midnight = datetime(year, month, mday)
    except ValueError as exc:
        raise AstroAlgoError(
            f'JD {jd} is {year:04d}-{month:02d}-{mday:02d}, which datetime cannot represent'
        ) from exc
    result = midnight + timedelta(days=f)
    if zone is not None:
        return result.replace(tzinfo=timezone.utc).astimezone(zone)
    return result


def julian_day_of(when: Instant) -> float:
    """Return the Julian day of a datetime, or pass a Julian day through."""
    if isinstance(when, datetime):
        return to_julian_day(when)
    return float(when)


def julian_centuries(jd: float) -> float:
    """Julian centuries since J2000.0."""
    return (jd - J2000_JD) / DAYS_PER_JULIAN_CENTURY


def julian_millennia(jd: float) -> float:
    """Julian millennia since J2000.0 (the VSOP87 time argument)."""
    return (jd - J2000_JD) / DAYS_PER_JULIAN_MILLENNIUM


def date_interval(first: datetime, second: datetime) -> float:
    """Return the absolute number of days between two datetimes."""
    return abs(to_julian_day(first) - to_julian_day(second))


def interval_to_date(start: datetime, days: float) -> datetime:
    """Return the naive UTC datetime `days` after `start` (negative goes back)."""
    return to_calendar_day(to_julian_day(start) + days)


def _civil_midnight(day: date) -> datetime:
    return datetime(day.year, day.month, day.day)


def day_of_week(day: date) -> int:
    """Return the weekday of a civil date, 0 = Sunday .. 6 = Saturday (Meeus 7.e).

    Parameters:
        day: date or datetime; only the calendar date is used.

    Returns:
        Weekday number.
    """
    jd = to_julian_day(_civil_midnight(day)) + 1.5
    return int(jd % 7)


def is_leap_year(year: int) -> bool:
    """Gregorian leap-year rule."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def day_of_year(day: date) -> int:
    """Return the ordinal day within the year (Meeus 7.f).

    Parameters:
        day: date or datetime.

    Returns:
        1 for January 1st, up to 365 or 366.
    """
    k = 1 if is_leap_year(day.year) else 2
    return int(275 * day.month / 9) - k * int((day.month + 9) / 12) + day.day - 30


def delta_t(when: Instant) -> float:
    """Approximate TT - UT in seconds from a parabolic fit centred on 1810.

    Parameters:
        when: Datetime or Julian day.

    Returns:
        Delta T in seconds.
    """
    jd = julian_day_of(when)
    return -15.0 + (jd - DELTA_T_EPOCH_JD) ** 2 / 41048480.0


def parse_datetime(string: str) -> datetime | None:
    """Parse a date/time string into a naive civil datetime using rms-julian.

    The result carries no zone; callers attach the zone the user meant.

    Parameters:
        string: Date/time string in any format rms-julian accepts
            (e.g. '2025-01-01 12:00', '2022-08-18T00:01:47').

    Returns:
        datetime, or None on parse failure.
    """
    stripped = string.strip()
    candidates = [stripped]
    if stripped.endswith(('Z', 'z')):
        # rms-julian does not accept the ISO "Z" suffix.
        candidates.append(stripped[:-1])
    for candidate in candidates:
        try:
            result = julian.day_sec_from_string(candidate)
            day, sec = int(result[0]), float(result[1])
            year, month, mday = julian.ymd_from_day(day)
        except (ValueError, TypeError, LookupError, OSError):
            continue
        # A leap second (sec >= 86400) is folded into the last microsecond.
        sec = min(sec, SECONDS_PER_DAY - 1e-6)
        return datetime(int(year), int(month), int(mday)) + timedelta(seconds=sec)
    logger.debug('Could not parse date/time %r', string)
    return None
