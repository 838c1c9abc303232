"""Nutation in longitude and obliquity (IAU 1980, Meeus chapter 22) and ecliptic obliquity."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from astroalgo.angle_utils import normalize_angle
from astroalgo.constants import ARCSEC_PER_DEGREE
from astroalgo.series import evaluate_argument_series
from astroalgo.time_utils import Instant, julian_centuries, julian_day_of

# Fundamental arguments as polynomials in T (degrees), lowest power first:
# mean elongation of the Moon (D), mean anomaly of the Sun (M) and of the
# Moon (M'), Moon's argument of latitude (F), longitude of the Moon's
# ascending node (Omega).
FUNDAMENTAL_POLYNOMIALS = np.array(
    [
        (297.8502042, 445267.1115168, -0.0016300, 1.0 / 545868.0, -1.0 / 113065000.0),
        (357.52772, 35999.050340, -0.0001603, -1.0 / 300000.0, 0.0),
        (134.96298, 477198.867398, 0.0086972, 1.0 / 56250.0, 0.0),
        (93.27191, 483202.017538, -0.0036825, 1.0 / 327270.0, 0.0),
        (125.04452, -1934.136261, 0.0020708, 1.0 / 450000.0, 0.0),
    ]
)

# Periodic terms: multipliers of (D, M, M', F, Omega), then the sine
# coefficients of delta-psi and cosine coefficients of delta-epsilon
# (constant, T), in units of 0.0001".
_NUTATION_TERMS = np.array(
    [
    (0, 0, 0, 0, 1, -171996, -174.2, 92025, 8.9),
    (-2, 0, 0, 2, 2, -13187, -1.6, 5736, -3.1),
    (0, 0, 0, 2, 2, -2274, -0.2, 977, -0.5),
    (0, 0, 0, 0, 2, 2062, 0.2, -895, 0.5),
    (0, 1, 0, 0, 0, 1426, -3.4, 54, -0.1),
    (0, 0, 1, 0, 0, 712, 0.1, -7, 0),
    (-2, 1, 0, 2, 2, -517, 1.2, 224, -0.6),
    (0, 0, 0, 2, 1, -386, -0.4, 200, 0),
    (0, 0, 1, 2, 2, -301, 0, 129, -0.1),
    (-2, -1, 0, 2, 2, 217, -0.5, -95, 0.3),
    (-2, 0, 1, 0, 0, -158, 0, 0, 0),
    (-2, 0, 0, 2, 1, 129, 0.1, -70, 0),
    (0, 0, -1, 2, 2, 123, 0, -53, 0),
    (2, 0, 0, 0, 0, 63, 0, 0, 0),
    (0, 0, 1, 0, 1, 63, 0.1, -33, 0),
    (2, 0, -1, 2, 2, -59, 0, 26, 0),
    (0, 0, -1, 0, 1, -58, -0.1, 32, 0),
    (0, 0, 1, 2, 1, -51, 0, 27, 0),
    (-2, 0, 2, 0, 0, 48, 0, 0, 0),
    (0, 0, -2, 2, 1, 46, 0, -24, 0),
    (2, 0, 0, 2, 2, -38, 0, 16, 0),
    (0, 0, 2, 2, 2, -31, 0, 13, 0),
    (0, 0, 2, 0, 0, 29, 0, 0, 0),
    (-2, 0, 1, 2, 2, 29, 0, -12, 0),
    (0, 0, 0, 2, 0, 26, 0, 0, 0),
    (-2, 0, 0, 2, 0, -22, 0, 0, 0),
    (0, 0, -1, 2, 1, 21, 0, -10, 0),
    (0, 2, 0, 0, 0, 17, -0.1, 0, 0),
    (2, 0, -1, 0, 1, 16, 0, -8, 0),
    (-2, 2, 0, 2, 2, -16, 0.1, 7, 0),
    (0, 1, 0, 0, 1, -15, 0, 9, 0),
    (-2, 0, 1, 0, 1, -13, 0, 7, 0),
    (0, -1, 0, 0, 1, -12, 0, 6, 0),
    (0, 0, 2, -2, 0, 11, 0, 0, 0),
    (2, 0, -1, 2, 1, -10, 0, 5, 0),
    (2, 0, 1, 2, 2, -8, 0, 3, 0),
    (0, 1, 0, 2, 2, 7, 0, -3, 0),
    (-2, 1, 1, 0, 0, -7, 0, 0, 0),
    (0, -1, 0, 2, 2, -7, 0, 3, 0),
    (2, 0, 0, 2, 1, -7, 0, 3, 0),
    (2, 0, 1, 0, 0, 6, 0, 0, 0),
    (-2, 0, 2, 2, 2, 6, 0, -3, 0),
    (-2, 0, 1, 2, 1, 6, 0, -3, 0),
    (2, 0, -2, 0, 1, -6, 0, 3, 0),
    (2, 0, 0, 0, 1, -6, 0, 3, 0),
    (0, -1, 1, 0, 0, 5, 0, 0, 0),
    (-2, -1, 0, 2, 1, -5, 0, 3, 0),
    (-2, 0, 0, 0, 1, -5, 0, 3, 0),
    (0, 0, 2, 2, 1, -5, 0, 3, 0),
    (-2, 0, 2, 0, 1, 4, 0, 0, 0),
    (-2, 1, 0, 2, 1, 4, 0, 0, 0),
    (0, 0, 1, -2, 0, 4, 0, 0, 0),
    (-1, 0, 1, 0, 0, -4, 0, 0, 0),
    (-2, 1, 0, 0, 0, -4, 0, 0, 0),
    (1, 0, 0, 0, 0, -4, 0, 0, 0),
    (0, 0, 1, 2, 0, 3, 0, 0, 0),
    (0, 0, -2, 2, 2, -3, 0, 0, 0),
    (-1, -1, 1, 0, 0, -3, 0, 0, 0),
    (0, 1, 1, 0, 0, -3, 0, 0, 0),
    (0, -1, 1, 2, 2, -3, 0, 0, 0),
    (2, -1, -1, 2, 2, -3, 0, 0, 0),
    (0, 0, 3, 2, 2, -3, 0, 0, 0),
    (2, -1, 0, 2, 2, -3, 0, 0, 0),
    ]
)
NUTATION_MULTIPLIERS = _NUTATION_TERMS[:, 0:5]
NUTATION_PSI = _NUTATION_TERMS[:, 5:7]
NUTATION_EPSILON = _NUTATION_TERMS[:, 7:9]

# Units of the nutation coefficients, in degrees.
_NUTATION_UNIT_DEG = 0.0001 / ARCSEC_PER_DEGREE

# Mean obliquity (Laskar), arcseconds, as a polynomial in U = T/100 with the
# highest power first.
_MEAN_OBLIQUITY_ARCSEC = (
    2.45,
    5.79,
    27.87,
    7.12,
    -39.05,
    -249.67,
    -51.38,
    1999.25,
    -1.55,
    -4680.93,
    84381.448,
)


@dataclass(frozen=True)
class Nutation:
    """Nutation in longitude (delta-psi) and in obliquity (delta-epsilon), degrees."""

    longitude: float
    obliquity: float


def fundamental_arguments(t: float) -> np.ndarray:
    """Return (D, M, M', F, Omega) in radians at T Julian centuries from J2000.

    Each angle is reduced with normalize_angle before conversion.
    """
    powers = t ** np.arange(FUNDAMENTAL_POLYNOMIALS.shape[1])
    degrees = FUNDAMENTAL_POLYNOMIALS @ powers
    return np.radians([normalize_angle(float(d)) for d in degrees])


def get_nutation(when: Instant) -> Nutation:
    """Return the nutation in longitude and obliquity.

    Parameters:
        when: Datetime or Julian day.

    Returns:
        Nutation with both components in degrees.
    """
    t = julian_centuries(julian_day_of(when))
    args = fundamental_arguments(t)
    psi = evaluate_argument_series(NUTATION_MULTIPLIERS, NUTATION_PSI, args, t, np.sin)
    eps = evaluate_argument_series(NUTATION_MULTIPLIERS, NUTATION_EPSILON, args, t, np.cos)
    return Nutation(psi * _NUTATION_UNIT_DEG, eps * _NUTATION_UNIT_DEG)


def mean_obliquity(when: Instant) -> float:
    """Mean obliquity of the ecliptic in degrees (valid for +-10000 years from J2000)."""
    u = julian_centuries(julian_day_of(when)) / 100.0
    return float(np.polyval(_MEAN_OBLIQUITY_ARCSEC, u)) / ARCSEC_PER_DEGREE


def ecliptic_obliquity(when: Instant, true: bool = True) -> float:
    """Obliquity of the ecliptic.

    Parameters:
        when: Datetime or Julian day.
        true: If True add the nutation in obliquity (true obliquity);
            otherwise return the mean obliquity.

    Returns:
        Obliquity in degrees.
    """
    epsilon = mean_obliquity(when)
    if true:
        epsilon += get_nutation(when).obliquity
    return epsilon

