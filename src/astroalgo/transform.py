"""Heliocentric to geocentric transformation of VSOP87 positions (Meeus chapter 33).

The light-time correction is a single pass: the target is re-evaluated once
at t - tau, with tau from the geometric distance, and Earth stays at t.
Annual aberration is not applied.
"""

from __future__ import annotations

import math

import numpy as np

from astroalgo.constants import DEGREES_PER_CIRCLE, LIGHT_TIME_DAYS_PER_AU
from astroalgo.coordinates import Ecliptic
from astroalgo.nutation import get_nutation
from astroalgo.time_utils import Instant, julian_day_of
from astroalgo.vsop87 import HeliocentricPosition, Vsop87Theory


def rectangular(position: HeliocentricPosition) -> np.ndarray:
    """Return the (x, y, z) ecliptic rectangular vector of a position, in AU."""
    lon = math.radians(position.longitude)
    lat = math.radians(position.latitude)
    r = position.radius
    return np.array(
        [
            r * math.cos(lat) * math.cos(lon),
            r * math.cos(lat) * math.sin(lon),
            r * math.sin(lat),
        ]
    )


def _spherical(vector: np.ndarray) -> tuple[float, float]:
    x, y, z = (float(c) for c in vector)
    longitude = math.degrees(math.atan2(y, x))
    latitude = math.degrees(math.atan2(z, math.hypot(x, y)))
    return longitude, latitude


def geocentric_vector(target: Vsop87Theory, earth: Vsop87Theory, when: Instant) -> np.ndarray:
    """Geometric Earth-to-target vector in AU at one instant."""
    jd = julian_day_of(when)
    return rectangular(target.position(jd)) - rectangular(earth.position(jd))


def geocentric_distance(target: Vsop87Theory, earth: Vsop87Theory, when: Instant) -> float:
    """Geometric distance from Earth's centre to the target in AU."""
    return float(np.linalg.norm(geocentric_vector(target, earth, when)))


def light_time(distance_au: float) -> float:
    """Light travel time in days over a distance in AU."""
    return LIGHT_TIME_DAYS_PER_AU * distance_au


def geocentric_ecliptic(
    target: Vsop87Theory,
    earth: Vsop87Theory,
    when: Instant,
    apparent: bool = True,
) -> Ecliptic:
    """Geocentric ecliptic longitude and latitude of a VSOP87 body.

    Parameters:
        target: Theory of the observed body.
        earth: Earth's theory.
        when: Datetime or Julian day.
        apparent: If True, correct the target for light-time (one pass) and
            add the nutation in longitude; otherwise return geometric values.

    Returns:
        Ecliptic with longitude in [0, 360).
    """
    jd = julian_day_of(when)
    earth_vector = rectangular(earth.position(jd))
    vector = rectangular(target.position(jd)) - earth_vector
    if apparent:
        tau = light_time(float(np.linalg.norm(vector)))
        vector = rectangular(target.position(jd, light_time=tau)) - earth_vector
    longitude, latitude = _spherical(vector)
    if apparent:
        longitude += get_nutation(jd).longitude
    if longitude < 0.0:
        longitude += DEGREES_PER_CIRCLE
    return Ecliptic(longitude, latitude)
