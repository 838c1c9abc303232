"""The Moon from Earth, abridged ELP-2000/82 theory (Meeus chapter 47).

Longitude accuracy is about 10 arcseconds, distance about 1 km.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from astroalgo.angle_utils import normalize_angle
from astroalgo.constants import AU_KM, DEGREES_PER_CIRCLE, HORIZON_ALTITUDE_MOON
from astroalgo.coordinates import Ecliptic, Equatorial, ObliquityMode, ecliptic_to_equatorial
from astroalgo.nutation import get_nutation
from astroalgo.series import Trig
from astroalgo.time_utils import Instant, julian_centuries, julian_day_of

MEAN_DISTANCE_KM = 385000.56

# Periodic terms for longitude and distance (Meeus table 47.A):
# multipliers of D, M, M', F; then sigma-l (1e-6 deg, sine) and sigma-r (1e-3 km, cosine).
_LONGITUDE_DISTANCE_TERMS = np.array(
    [
    (0, 0, 1, 0, 6288744, -20905355),
    (2, 0, -1, 0, 1274027, -3699111),
    (2, 0, 0, 0, 658314, -2955968),
    (0, 0, 2, 0, 213618, -569925),
    (0, 1, 0, 0, -185116, 48888),
    (0, 0, 0, 2, -114332, -3149),
    (2, 0, -2, 0, 58793, 246158),
    (2, -1, -1, 0, 57066, -152138),
    (2, 0, 1, 0, 53322, -170733),
    (2, -1, 0, 0, 45758, -204586),
    (0, 1, -1, 0, -40923, -129620),
    (1, 0, 0, 0, -34720, 108743),
    (0, 1, 1, 0, -30383, 104755),
    (2, 0, 0, -2, 15327, 10321),
    (0, 0, 1, 2, -12528, 0),
    (0, 0, 1, -2, 10980, 79661),
    (4, 0, -1, 0, 10675, -34782),
    (0, 0, 3, 0, 10034, -23210),
    (4, 0, -2, 0, 8548, -21636),
    (2, 1, -1, 0, -7888, 24208),
    (2, 1, 0, 0, -6766, 30824),
    (1, 0, -1, 0, -5163, -8379),
    (1, 1, 0, 0, 4987, -16675),
    (2, -1, 1, 0, 4036, -12831),
    (2, 0, 2, 0, 3994, -10445),
    (4, 0, 0, 0, 3861, -11650),
    (2, 0, -3, 0, 3665, 14403),
    (0, 1, -2, 0, -2689, -7003),
    (2, 0, -1, 2, -2602, 0),
    (2, -1, -2, 0, 2390, 10056),
    (1, 0, 1, 0, -2348, 6322),
    (2, -2, 0, 0, 2236, -9884),
    (0, 1, 2, 0, -2120, 5751),
    (0, 2, 0, 0, -2069, 0),
    (2, -2, -1, 0, 2048, -4950),
    (2, 0, 1, -2, -1773, 4130),
    (2, 0, 0, 2, -1595, 0),
    (4, -1, -1, 0, 1215, -3958),
    (0, 0, 2, 2, -1110, 0),
    (3, 0, -1, 0, -892, 3258),
    (2, 1, 1, 0, -810, 2616),
    (4, -1, -2, 0, 759, -1897),
    (0, 2, -1, 0, -713, -2117),
    (2, 2, -1, 0, -700, 2354),
    (2, 1, -2, 0, 691, 0),
    (2, -1, 0, -2, 596, 0),
    (4, 0, 1, 0, 549, -1423),
    (0, 0, 4, 0, 537, -1117),
    (4, -1, 0, 0, 520, -1571),
    (1, 0, -2, 0, -487, -1739),
    (2, 1, 0, -2, -399, 0),
    (0, 0, 2, -2, -381, -4421),
    (1, 1, 1, 0, 351, 0),
    (3, 0, -2, 0, -340, 0),
    (4, 0, -3, 0, 330, 0),
    (2, -1, 2, 0, 327, 0),
    (0, 2, 1, 0, -323, 1165),
    (1, 1, -1, 0, 299, 0),
    (2, 0, 3, 0, 294, 0),
    (2, 0, -1, -2, 0, 8752),
    ]
)

# Periodic terms for latitude (Meeus table 47.B):
# multipliers of D, M, M', F; then sigma-b (1e-6 deg, sine).
_LATITUDE_TERMS = np.array(
    [
    (0, 0, 0, 1, 5128122),
    (0, 0, 1, 1, 280602),
    (0, 0, 1, -1, 277693),
    (2, 0, 0, -1, 173237),
    (2, 0, -1, 1, 55413),
    (2, 0, -1, -1, 46271),
    (2, 0, 0, 1, 32573),
    (0, 0, 2, 1, 17198),
    (2, 0, 1, -1, 9266),
    (0, 0, 2, -1, 8822),
    (2, -1, 0, -1, 8216),
    (2, 0, -2, -1, 4324),
    (2, 0, 1, 1, 4200),
    (2, 1, 0, -1, -3359),
    (2, -1, -1, 1, 2463),
    (2, -1, 0, 1, 2211),
    (2, -1, -1, -1, 2065),
    (0, 1, -1, -1, -1870),
    (4, 0, -1, -1, 1828),
    (0, 1, 0, 1, -1794),
    (0, 0, 0, 3, -1749),
    (0, 1, -1, 1, -1565),
    (1, 0, 0, 1, -1491),
    (0, 1, 1, 1, -1475),
    (0, 1, 1, -1, -1410),
    (0, 1, 0, -1, -1344),
    (1, 0, 0, -1, -1335),
    (0, 0, 3, 1, 1107),
    (4, 0, 0, -1, 1021),
    (4, 0, -1, 1, 833),
    (0, 0, 1, -3, 777),
    (4, 0, -2, 1, 671),
    (2, 0, 0, -3, 607),
    (2, 0, 2, -1, 596),
    (2, -1, 1, -1, 491),
    (2, 0, -2, 1, -451),
    (0, 0, 3, -1, 439),
    (2, 0, 2, 1, 422),
    (2, 0, -3, -1, 421),
    (2, 1, -1, 1, -366),
    (2, 1, 0, 1, -351),
    (4, 0, 0, 1, 331),
    (2, -1, 1, 1, 315),
    (2, -2, 0, -1, 302),
    (0, 0, 1, 3, -283),
    (2, 1, 1, -1, -229),
    (1, 1, 0, -1, 223),
    (1, 1, 0, 1, 223),
    (0, 1, -2, -1, -220),
    (2, 1, -1, -1, -220),
    (1, 0, 1, 1, -185),
    (2, -1, -2, -1, 181),
    (0, 1, 2, 1, -177),
    (4, 0, -2, -1, 176),
    (4, -1, -1, -1, 166),
    (1, 0, 1, -1, -164),
    (4, 0, 1, -1, 132),
    (1, 0, -1, -1, -119),
    (4, -1, 0, -1, 115),
    (2, -2, 0, 1, 107),
    ]
)


@dataclass(frozen=True)
class LunarArguments:
    """Mean longitude, fundamental arguments and eccentricity factor (degrees)."""

    mean_longitude: float
    elongation: float
    sun_anomaly: float
    moon_anomaly: float
    latitude_argument: float
    a1: float
    a2: float
    a3: float
    eccentricity_factor: float

    @property
    def fundamentals(self) -> np.ndarray:
        """(D, M, M', F) in radians."""
        return np.radians(
            [self.elongation, self.sun_anomaly, self.moon_anomaly, self.latitude_argument]
        )


def lunar_arguments(t: float) -> LunarArguments:
    """Evaluate the lunar mean elements at T Julian centuries from J2000.0."""
    t2 = t * t
    t3 = t2 * t
    t4 = t3 * t
    return LunarArguments(
        mean_longitude=normalize_angle(
            218.3164591 + 481267.88134236 * t - 0.0013268 * t2 + t3 / 538841.0 - t4 / 65194000.0
        ),
        elongation=normalize_angle(
            297.8502042 + 445267.1115168 * t - 0.0016300 * t2 + t3 / 545868.0 - t4 / 113065000.0
        ),
        sun_anomaly=normalize_angle(
            357.5291092 + 35999.0502909 * t - 0.0001536 * t2 + t3 / 24490000.0
        ),
        moon_anomaly=normalize_angle(
            134.9634114 + 477198.8676313 * t + 0.0089970 * t2 + t3 / 69699.0 - t4 / 14712000.0
        ),
        latitude_argument=normalize_angle(
            93.2720993 + 483202.0175273 * t - 0.0034029 * t2 - t3 / 3526000.0 + t4 / 863310000.0
        ),
        a1=normalize_angle(119.75 + 131.849 * t),
        a2=normalize_angle(53.09 + 479264.290 * t),
        a3=normalize_angle(313.45 + 481266.484 * t),
        eccentricity_factor=1.0 - 0.002516 * t - 0.0000074 * t2,
    )


def _periodic_sum(terms: np.ndarray, column: int, args: LunarArguments, trig: Trig) -> float:
    multipliers = terms[:, 0:4]
    # Terms containing M shrink with Earth's orbital eccentricity.
    factor = args.eccentricity_factor ** np.abs(multipliers[:, 1])
    arguments = multipliers @ args.fundamentals
    return float(np.sum(terms[:, column] * factor * trig(arguments)))


@dataclass(frozen=True)
class LunarPosition:
    """Geometric geocentric longitude and latitude (degrees) and distance (km)."""

    longitude: float
    latitude: float
    distance_km: float


def lunar_position(when: Instant) -> LunarPosition:
    """Geometric position of the Moon referred to the mean equinox of date.

    Parameters:
        when: Datetime or Julian day.

    Returns:
        LunarPosition.
    """
    args = lunar_arguments(julian_centuries(julian_day_of(when)))
    lp = math.radians(args.mean_longitude)
    mp = math.radians(args.moon_anomaly)
    f = math.radians(args.latitude_argument)
    a1 = math.radians(args.a1)
    a2 = math.radians(args.a2)
    a3 = math.radians(args.a3)

    sigma_l = _periodic_sum(_LONGITUDE_DISTANCE_TERMS, 4, args, np.sin)
    sigma_l += 3958.0 * math.sin(a1) + 1962.0 * math.sin(lp - f) + 318.0 * math.sin(a2)

    sigma_r = _periodic_sum(_LONGITUDE_DISTANCE_TERMS, 5, args, np.cos)

    sigma_b = _periodic_sum(_LATITUDE_TERMS, 4, args, np.sin)
    sigma_b += (
        -2235.0 * math.sin(lp)
        + 382.0 * math.sin(a3)
        + 175.0 * math.sin(a1 - f)
        + 175.0 * math.sin(a1 + f)
        + 127.0 * math.sin(lp - mp)
        - 115.0 * math.sin(lp + mp)
    )

    return LunarPosition(
        longitude=args.mean_longitude + sigma_l / 1e6,
        latitude=sigma_b / 1e6,
        distance_km=MEAN_DISTANCE_KM + sigma_r / 1000.0,
    )


@dataclass(frozen=True)
class Moon:
    """The Moon as seen from Earth's centre."""

    name: str = 'moon'
    horizon_altitude: float = HORIZON_ALTITUDE_MOON

    def ecliptic(self, when: Instant, apparent: bool = True) -> Ecliptic:
        """Geocentric ecliptic coordinates.

        Parameters:
            when: Datetime or Julian day.
            apparent: If True, add the nutation in longitude.

        Returns:
            Ecliptic with longitude in [0, 360).
        """
        jd = julian_day_of(when)
        position = lunar_position(jd)
        longitude = position.longitude
        if apparent:
            longitude += get_nutation(jd).longitude
        longitude = longitude % DEGREES_PER_CIRCLE
        return Ecliptic(longitude, position.latitude)

    def equatorial(self, when: Instant, apparent: bool = True) -> Equatorial:
        """Geocentric right ascension and declination (true or mean obliquity of date)."""
        jd = julian_day_of(when)
        mode = ObliquityMode.TRUE_AT_TIME if apparent else ObliquityMode.MEAN_AT_TIME
        return ecliptic_to_equatorial(self.ecliptic(jd, apparent), mode, jd)

    def distance_km(self, when: Instant) -> float:
        """Centre-to-centre Earth-Moon distance in km."""
        return lunar_position(when).distance_km

    def distance_to_earth(self, when: Instant) -> float:
        """Earth-Moon distance in AU."""
        return self.distance_km(when) / AU_KM
