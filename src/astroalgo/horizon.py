"""Horizon observables and rise/transit/set times for an observer.

All angles are degrees. Times of day are local civil times in the
observer's zone. Rise and set come from one closed-form solution with the
body's coordinates taken at local noon, so fast movers (the Moon) are only
approximate.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import date, datetime, time, tzinfo
from typing import NamedTuple

from astroalgo.angle_utils import clamp_unit
from astroalgo.bodies.base import CelestialBody
from astroalgo.config import get_default_latitude, get_default_longitude, get_default_zone
from astroalgo.constants import (
    DEGREES_PER_CIRCLE,
    DEGREES_PER_HOUR_RA,
    HALF_CIRCLE_DEGREES,
    HOURS_PER_DAY,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
)
from astroalgo.coordinates import Equatorial
from astroalgo.sidereal import local_mean_sidereal_time, sidereal_to_zone_time
from astroalgo.time_utils import Instant, resolve_zone

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Observer:
    """An observing site.

    Attributes:
        latitude: Geographic latitude in degrees, north positive.
        longitude: Longitude in degrees, east positive.
        zone: Time zone of the site's civil clock.
    """

    latitude: float
    longitude: float
    zone: tzinfo

    def __post_init__(self) -> None:
        if not -90.0 <= self.latitude <= 90.0:
            raise ValueError(f'Latitude must be in [-90, 90], got {self.latitude}')

    @classmethod
    def default(cls) -> Observer:
        """Observer from ASTROALGO_LATITUDE, ASTROALGO_LONGITUDE and ASTROALGO_ZONE."""
        return cls(
            latitude=get_default_latitude(),
            longitude=get_default_longitude(),
            zone=resolve_zone(get_default_zone()),
        )

    def local_noon(self, day: date) -> datetime:
        """Return 12:00 local time on a date, aware in the observer's zone."""
        return datetime(day.year, day.month, day.day, 12, tzinfo=self.zone)


class HorizonCrossing(NamedTuple):
    """Zone times of a rise and a set, in degrees of time (15 degrees = 1 hour)."""

    rise: float
    set: float


# Returned when the body never reaches the target altitude on that date.
NO_CROSSING = HorizonCrossing(0.0, 0.0)


def hour_angle(when: Instant, right_ascension: float, longitude: float) -> float:
    """Local hour angle, LMST - RA, in degrees (not reduced)."""
    return local_mean_sidereal_time(when, longitude) - right_ascension


def elevation_angle(when: Instant, equatorial: Equatorial, observer: Observer) -> float:
    """Altitude above the horizon in degrees.

    Parameters:
        when: Local civil time (aware datetime) or Julian day (UT).
        equatorial: Position of the body.
        observer: Observing site.

    Returns:
        Elevation in [-90, 90].
    """
    phi = math.radians(observer.latitude)
    delta = math.radians(equatorial.declination)
    h = math.radians(hour_angle(when, equatorial.right_ascension, observer.longitude))
    sin_h = math.sin(phi) * math.sin(delta) + math.cos(phi) * math.cos(delta) * math.cos(h)
    return math.degrees(math.asin(clamp_unit(sin_h)))


def azimuth(when: Instant, equatorial: Equatorial, observer: Observer) -> float:
    """Azimuth measured from north through east, in degrees.

    Parameters:
        when: Local civil time (aware datetime) or Julian day (UT).
        equatorial: Position of the body.
        observer: Observing site.

    Returns:
        Azimuth in [0, 360].
    """
    altitude = math.radians(elevation_angle(when, equatorial, observer))
    phi = math.radians(observer.latitude)
    delta = math.radians(equatorial.declination)
    denominator = math.cos(altitude) * math.cos(phi)
    if denominator == 0.0:
        # Zenith or pole: azimuth is undefined
        return 0.0
    cos_a = (math.sin(delta) - math.sin(altitude) * math.sin(phi)) / denominator
    a = math.degrees(math.acos(clamp_unit(cos_a)))
    h = hour_angle(when, equatorial.right_ascension, observer.longitude)
    reduced = (h + HALF_CIRCLE_DEGREES) % DEGREES_PER_CIRCLE - HALF_CIRCLE_DEGREES
    if reduced >= 0.0:
        return DEGREES_PER_CIRCLE - a
    return a


def culmination_angle(declination: float, latitude: float) -> float:
    """Altitude of a body at upper culmination, in degrees."""
    phi = math.radians(latitude)
    delta = math.radians(declination)
    sin_h = math.sin(phi) * math.sin(delta) + math.cos(phi) * math.cos(delta)
    return math.degrees(math.asin(clamp_unit(sin_h)))


def parallactic_angle(when: Instant, equatorial: Equatorial, observer: Observer) -> float:
    """Parallactic angle in degrees (Meeus 14.1); undefined at the pole."""
    h = math.radians(hour_angle(when, equatorial.right_ascension, observer.longitude))
    phi = math.radians(observer.latitude)
    delta = math.radians(equatorial.declination)
    return math.degrees(
        math.atan2(
            math.sin(h),
            math.tan(phi) * math.cos(delta) - math.sin(delta) * math.cos(h),
        )
    )


def elevation_angle_to_time(
    equatorial: Equatorial,
    target: float,
    observer: Observer,
    day: datetime,
) -> HorizonCrossing:
    """Zone times at which a body passes a given altitude.

    Parameters:
        equatorial: Position of the body, assumed fixed over the day.
        target: Altitude in degrees (for example -0.5667 for the Sun).
        observer: Observing site.
        day: Local date; an aware datetime in the observer's zone.

    Returns:
        HorizonCrossing of rise and set zone times in degrees, or
        NO_CROSSING if the body stays above or below the target all day.
    """
    phi = math.radians(observer.latitude)
    delta = math.radians(equatorial.declination)
    cos_h = (math.sin(math.radians(target)) - math.sin(phi) * math.sin(delta)) / (
        math.cos(phi) * math.cos(delta)
    )
    if abs(cos_h) > 1.0:
        logger.debug('No crossing of %.4f deg at latitude %.4f', target, observer.latitude)
        return NO_CROSSING
    h = math.degrees(math.acos(cos_h))
    rising = DEGREES_PER_CIRCLE - h + equatorial.right_ascension
    setting = h + equatorial.right_ascension
    return HorizonCrossing(
        sidereal_to_zone_time(rising, day, observer.longitude),
        sidereal_to_zone_time(setting, day, observer.longitude),
    )


def _wrap_hours(hours: float) -> float:
    return hours % HOURS_PER_DAY


def zone_time_to_time(zone_time: float) -> time:
    """Convert a zone time in degrees to a time of day, truncated to the second."""
    seconds = int(_wrap_hours(zone_time / DEGREES_PER_HOUR_RA) * SECONDS_PER_HOUR)
    seconds %= int(SECONDS_PER_DAY)
    return time(seconds // 3600, seconds // 60 % 60, seconds % 60)


def culmination_time(crossing: HorizonCrossing) -> float:
    """Transit time in hours, midway between rise and set.

    When the set falls on the next civil day (rise > set) the midpoint is
    shifted by half a day.
    """
    hours = (crossing.rise + crossing.set) / (2.0 * DEGREES_PER_HOUR_RA)
    if crossing.rise > crossing.set:
        hours = hours - 12.0 if hours >= 12.0 else hours + 12.0
    return _wrap_hours(hours)


@dataclass(frozen=True)
class RiseTransitSet:
    """Local times of rise, transit and set; None when the body does not cross."""

    rise: time | None
    transit: time | None
    setting: time | None


def rise_transit_set(body: CelestialBody, observer: Observer, day: date) -> RiseTransitSet:
    """Rise, transit and set of a body on a local date.

    Parameters:
        body: Any CelestialBody; its horizon_altitude is the target.
        observer: Observing site.
        day: Local calendar date.

    Returns:
        RiseTransitSet; all three are None if the body is circumpolar or
        never rises.
    """
    noon = observer.local_noon(day)
    equatorial = body.equatorial(noon, apparent=True)
    crossing = elevation_angle_to_time(equatorial, body.horizon_altitude, observer, noon)
    if crossing == NO_CROSSING:
        return RiseTransitSet(None, None, None)
    return RiseTransitSet(
        rise=zone_time_to_time(crossing.rise),
        transit=zone_time_to_time(culmination_time(crossing) * DEGREES_PER_HOUR_RA),
        setting=zone_time_to_time(crossing.set),
    )


def body_elevation(body: CelestialBody, observer: Observer, when: datetime) -> float:
    """Apparent elevation of a body at a local time, in degrees."""
    return elevation_angle(when, body.equatorial(when, apparent=True), observer)


def body_azimuth(body: CelestialBody, observer: Observer, when: datetime) -> float:
    """Apparent azimuth of a body at a local time, in degrees from north."""
    return azimuth(when, body.equatorial(when, apparent=True), observer)
