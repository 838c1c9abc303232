"""Mean sidereal time at Greenwich and at an observer, and its inverse (Meeus chapter 12)."""

from __future__ import annotations

from datetime import datetime

from astroalgo.angle_utils import normalize_angle
from astroalgo.constants import (
    DEGREES_PER_HOUR_RA,
    J2000_JD,
    SIDEREAL_RATE,
    ZONE_TIME_CORRECTION_DEG,
    ZONE_TIME_OFFSET_DEG,
)
from astroalgo.time_utils import (
    Instant,
    julian_centuries,
    julian_day_of,
    to_calendar_day,
    utc_offset_hours,
)


def greenwich_mean_sidereal_time(when: Instant) -> float:
    """Mean sidereal time at Greenwich in degrees (Meeus 12.4).

    Parameters:
        when: Datetime (naive = UT) or Julian day.

    Returns:
        Sidereal time in [0, 360].
    """
    jd = julian_day_of(when)
    t = julian_centuries(jd)
    theta = (
        280.46061837
        + 360.98564736629 * (jd - J2000_JD)
        + 0.000387933 * t * t
        - t * t * t / 38710000.0
    )
    return normalize_angle(theta)


def _gmst_at_date(day: datetime) -> float:
    # Sidereal time at 0h UT of the civil (local) calendar date.
    return greenwich_mean_sidereal_time(datetime(day.year, day.month, day.day))


def _as_datetime(when: Instant) -> datetime:
    if isinstance(when, datetime):
        return when
    return to_calendar_day(float(when))


def local_mean_sidereal_time(when: Instant, longitude: float) -> float:
    """Local mean sidereal time in degrees.

    Parameters:
        when: Local civil time; an aware datetime supplies its UTC offset, a
            naive datetime or Julian day is taken as UT.
        longitude: Observer's east longitude in degrees.

    Returns:
        Sidereal time in [0, 360].
    """
    local = _as_datetime(when)
    hours = local.hour + (local.minute + (local.second + local.microsecond / 1e6) / 60.0) / 60.0
    offset = utc_offset_hours(local)
    elapsed = (hours * DEGREES_PER_HOUR_RA - offset * DEGREES_PER_HOUR_RA) * SIDEREAL_RATE
    return normalize_angle(_gmst_at_date(local) + elapsed + longitude)


def sidereal_to_zone_time(local_sidereal_time: float, date: datetime, longitude: float) -> float:
    """Convert a local sidereal time on a date to zone time, in degrees of time.

    The result carries the fixed correction constants for the mismatch
    between mean solar and sidereal rates; it may fall slightly below zero
    for times just after local midnight.

    Parameters:
        local_sidereal_time: Local sidereal time in degrees.
        date: Local date; an aware datetime supplies the zone offset.
        longitude: Observer's east longitude in degrees.

    Returns:
        Zone time in degrees (divide by 15 for hours).
    """
    t0 = _gmst_at_date(date)
    offset = utc_offset_hours(date)
    zone_time = (
        (local_sidereal_time - longitude - t0) / SIDEREAL_RATE
        + offset * DEGREES_PER_HOUR_RA
        + ZONE_TIME_OFFSET_DEG
    )
    return normalize_angle(zone_time) - ZONE_TIME_CORRECTION_DEG
