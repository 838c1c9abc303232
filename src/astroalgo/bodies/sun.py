"""The Sun from Earth, low-precision theory (Meeus chapter 25).

Accuracy is about 0.01 degree, enough for rise/set and solar-term searches.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from astroalgo.angle_utils import clamp_unit, normalize_angle
from astroalgo.constants import DEGREES_PER_CIRCLE, HORIZON_ALTITUDE_PLANET
from astroalgo.coordinates import Ecliptic, Equatorial, ObliquityMode, ecliptic_to_equatorial
from astroalgo.nutation import mean_obliquity
from astroalgo.time_utils import Instant, julian_centuries, julian_day_of


@dataclass(frozen=True)
class SolarElements:
    """Intermediate quantities of the solar theory at one instant (degrees, AU)."""

    mean_longitude: float
    mean_anomaly: float
    eccentricity: float
    equation_of_center: float
    true_longitude: float
    true_anomaly: float
    radius: float
    omega: float

    @property
    def apparent_longitude(self) -> float:
        """True longitude corrected for nutation and aberration."""
        return normalize_angle(
            self.true_longitude - 0.00569 - 0.00478 * math.sin(math.radians(self.omega))
        )


def solar_elements(when: Instant) -> SolarElements:
    """Evaluate the low-precision solar theory.

    Parameters:
        when: Datetime or Julian day.

    Returns:
        SolarElements at that instant.
    """
    t = julian_centuries(julian_day_of(when))
    l0 = normalize_angle(280.46645 + 36000.76983 * t + 0.0003030 * t * t)
    m = normalize_angle(
        357.52910 + 35999.05030 * t - 0.0001559 * t * t - 0.00000048 * t * t * t
    )
    e = 0.016708617 - 0.000042037 * t - 0.0000001236 * t * t
    m_rad = math.radians(m)
    c = (
        (1.914600 - 0.004817 * t - 0.000014 * t * t) * math.sin(m_rad)
        + (0.019993 - 0.000101 * t) * math.sin(2.0 * m_rad)
        + 0.000290 * math.sin(3.0 * m_rad)
    )
    true_longitude = normalize_angle(l0 + c)
    true_anomaly = normalize_angle(m + c)
    radius = 1.000001018 * (1.0 - e * e) / (1.0 + e * math.cos(math.radians(true_anomaly)))
    omega = 125.04 - 1934.136 * t
    return SolarElements(
        mean_longitude=l0,
        mean_anomaly=m,
        eccentricity=e,
        equation_of_center=c,
        true_longitude=true_longitude,
        true_anomaly=true_anomaly,
        radius=radius,
        omega=omega,
    )


def apparent_solar_longitude(when: Instant) -> float:
    """Apparent geocentric longitude of the Sun in degrees."""
    return solar_elements(when).apparent_longitude


@dataclass(frozen=True)
class Sun:
    """The Sun as seen from Earth."""

    name: str = 'sun'
    horizon_altitude: float = HORIZON_ALTITUDE_PLANET

    def ecliptic(self, when: Instant, apparent: bool = True) -> Ecliptic:
        """Geocentric ecliptic coordinates.

        Parameters:
            when: Datetime or Julian day.
            apparent: If True, the apparent longitude of date; otherwise the
                true longitude reduced to the J2000.0 equinox.

        Returns:
            Ecliptic with latitude 0.
        """
        jd = julian_day_of(when)
        elements = solar_elements(jd)
        if apparent:
            return Ecliptic(elements.apparent_longitude, 0.0)
        years = julian_centuries(jd) * 100.0
        longitude = normalize_angle(elements.true_longitude - 0.01397 * years)
        if longitude == DEGREES_PER_CIRCLE:
            longitude = 0.0
        return Ecliptic(longitude, 0.0)

    def equatorial(self, when: Instant, apparent: bool = True) -> Equatorial:
        """Geocentric right ascension and declination.

        The apparent position uses the mean obliquity plus the theory's own
        nutation correction (Meeus 25.8); the geometric position is rotated by
        the fixed J2000.0 obliquity.
        """
        jd = julian_day_of(when)
        if not apparent:
            return ecliptic_to_equatorial(self.ecliptic(jd, False), ObliquityMode.FIXED_J2000)
        elements = solar_elements(jd)
        eps = math.radians(
            mean_obliquity(jd) + 0.00256 * math.cos(math.radians(elements.omega))
        )
        lam = math.radians(elements.apparent_longitude)
        ra = math.degrees(math.atan2(math.cos(eps) * math.sin(lam), math.cos(lam)))
        dec = math.degrees(math.asin(clamp_unit(math.sin(eps) * math.sin(lam))))
        if ra < 0.0:
            ra += DEGREES_PER_CIRCLE
        return Equatorial(ra, dec)

    def distance_to_earth(self, when: Instant) -> float:
        """Sun-Earth distance in AU."""
        return solar_elements(when).radius
