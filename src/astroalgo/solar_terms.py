"""Equinoxes, solstices and the 24 solar terms.

A solar term is the instant the Sun's apparent ecliptic longitude reaches a
multiple of 15 degrees. Equinoxes and solstices have a closed form (Meeus
chapter 27); every term can also be found by bracketed search on the solar
longitude, starting from a calendar window known to contain it.
"""

from __future__ import annotations

import enum
import logging
import math
from datetime import datetime, timezone, tzinfo

import numpy as np

from astroalgo.bodies.sun import apparent_solar_longitude
from astroalgo.constants import (
    DEGREES_PER_CIRCLE,
    GOLDEN_RATIO_STEP,
    MINUTES_PER_DAY,
    SOLAR_TERM_CORRECTION_MINUTES,
    SOLAR_TERM_TOLERANCE_DAYS,
    SOLAR_TERM_WRAP_DEG,
)
from astroalgo.series import TermSeries
from astroalgo.time_utils import julian_centuries, to_calendar_day, to_julian_day

logger = logging.getLogger(__name__)


class SolarTerm(enum.IntEnum):
    """The 24 solar terms, valued by the solar longitude they mark."""

    SPRING_EQUINOX = 0
    PURE_BRIGHTNESS = 15
    GRAIN_RAIN = 30
    BEGINNING_OF_SUMMER = 45
    LESSER_FULLNESS = 60
    GRAIN_IN_EAR = 75
    SUMMER_SOLSTICE = 90
    LESSER_HEAT = 105
    GREATER_HEAT = 120
    BEGINNING_OF_AUTUMN = 135
    END_OF_HEAT = 150
    WHITE_DEW = 165
    AUTUMNAL_EQUINOX = 180
    COLD_DEW = 195
    FIRST_FROST = 210
    BEGINNING_OF_WINTER = 225
    LESSER_SNOW = 240
    GREATER_SNOW = 255
    WINTER_SOLSTICE = 270
    LESSER_COLD = 285
    GREATER_COLD = 300
    BEGINNING_OF_SPRING = 315
    RAIN_WATER = 330
    WAKING_OF_INSECTS = 345

    @property
    def label(self) -> str:
        """Human-readable name, e.g. 'Grain In Ear'."""
        return self.name.replace('_', ' ').title()


def _build_windows() -> dict[SolarTerm, tuple[int, int, int]]:
    # Two terms per month: the first between days 4 and 9, the second
    # between days 16 and 24. February opens with Beginning of Spring.
    windows: dict[SolarTerm, tuple[int, int, int]] = {}
    longitude = int(SolarTerm.BEGINNING_OF_SPRING)
    for month_offset in range(12):
        month = (month_offset + 1) % 12 + 1
        windows[SolarTerm(longitude)] = (month, 4, 9)
        longitude = (longitude + 15) % 360
        windows[SolarTerm(longitude)] = (month, 16, 24)
        longitude = (longitude + 15) % 360
    return windows


# Term -> (month, first day, last day), UT calendar days bracketing the term
SOLAR_TERM_WINDOWS: dict[SolarTerm, tuple[int, int, int]] = _build_windows()

# Widening beyond this many days per side means the windows are wrong
_MAX_WIDEN_DAYS = 10

# Periodic terms for the equinox and solstice correction (Meeus table 27.C):
# amplitude, phase and rate in degrees, converted to radians
_EQUINOX_CORRECTION = TermSeries.from_terms(
    (
        (a, math.radians(b), math.radians(c))
        for a, b, c in (
            (485, 324.96, 1934.136),
            (203, 337.23, 32964.467),
            (199, 342.08, 20.186),
            (182, 27.85, 445267.112),
            (156, 73.14, 45036.886),
            (136, 171.52, 22518.443),
            (77, 222.54, 65928.934),
            (74, 296.72, 3034.906),
            (70, 243.58, 9037.513),
            (58, 119.81, 33718.147),
            (52, 297.17, 150.678),
            (50, 21.02, 2281.226),
            (45, 247.54, 29929.562),
            (44, 325.15, 31555.956),
            (29, 60.93, 4443.417),
            (18, 155.12, 67555.328),
            (17, 288.79, 4562.452),
            (16, 198.04, 62894.029),
            (14, 199.76, 31436.921),
            (12, 95.39, 14577.848),
            (12, 287.11, 31931.756),
            (12, 320.81, 34777.259),
            (9, 227.73, 1222.114),
            (8, 15.45, 16859.074),
        )
    ),
    power=0,
)

# Mean instants (JDE) for years 1000..3000 as polynomials in Y = (year - 2000) / 1000,
# highest power first (Meeus table 27.B): March equinox, June solstice,
# September equinox, December solstice
_MEAN_EQUINOX_POLYNOMIALS = (
    (-0.00057, -0.00411, 0.05169, 365242.37404, 2451623.80984),
    (-0.00030, 0.00888, 0.00325, 365241.62603, 2451716.56767),
    (0.00078, 0.00337, -0.11575, 365242.01767, 2451810.21715),
    (0.00032, -0.00823, -0.06223, 365242.74049, 2451900.05952),
)


def equinox_julian_day(year: int, index: int) -> float:
    """Julian day of an equinox or solstice from the closed form.

    Parameters:
        year: Gregorian year.
        index: 0 March equinox, 1 June solstice, 2 September equinox,
            3 December solstice.

    Returns:
        Julian day (no Delta T applied).
    """
    y = (year - 2000) / 1000.0
    jde0 = float(np.polyval(_MEAN_EQUINOX_POLYNOMIALS[index], y))
    t = julian_centuries(jde0)
    w = math.radians(35999.373 * t - 2.47)
    dlambda = 1.0 + 0.0334 * math.cos(w) + 0.0007 * math.cos(2.0 * w)
    s = _EQUINOX_CORRECTION.evaluate(t)
    return jde0 + 0.00001 * s / dlambda


def get_equinox_and_solstice(year: int, zone: tzinfo = timezone.utc) -> list[datetime]:
    """Return the March equinox, June solstice, September equinox and
    December solstice of a year, as aware datetimes in `zone`."""
    return [to_calendar_day(equinox_julian_day(year, i), zone) for i in range(4)]


def _comparable_longitude(target: float, jd: float) -> float:
    longitude = apparent_solar_longitude(jd)
    if target == 0.0 and longitude > SOLAR_TERM_WRAP_DEG:
        longitude -= DEGREES_PER_CIRCLE
    return longitude


def search_solar_longitude(target: float, left_jd: float, right_jd: float) -> tuple[float, int]:
    """Find when the apparent solar longitude reaches `target` within a bracket.

    Each step places a candidate 0.618 of the way across the bracket and
    keeps the side containing the crossing, until the bracket is no wider
    than SOLAR_TERM_TOLERANCE_DAYS.

    Parameters:
        target: Longitude in degrees, a multiple of 15 in [0, 345].
        left_jd: Julian day before the crossing.
        right_jd: Julian day after the crossing.

    Returns:
        Tuple of (Julian day of the last candidate, number of iterations).
    """
    candidate = left_jd
    iterations = 0
    while True:
        candidate = left_jd + GOLDEN_RATIO_STEP * (right_jd - left_jd)
        iterations += 1
        if _comparable_longitude(target, candidate) > target:
            right_jd = candidate
        else:
            left_jd = candidate
        if right_jd - left_jd <= SOLAR_TERM_TOLERANCE_DAYS:
            break
    logger.debug(
        'Solar longitude %.1f reached at JD %.6f after %d iterations',
        target,
        candidate,
        iterations,
    )
    return candidate, iterations


def _seed_bracket(year: int, term: SolarTerm) -> tuple[float, float]:
    month, first, last = SOLAR_TERM_WINDOWS[term]
    target = float(term)
    left = to_julian_day(datetime(year, month, first))
    right = to_julian_day(datetime(year, month, last))
    widened = 0
    while _comparable_longitude(target, left) > target:
        left -= 1.0
        widened += 1
        logger.warning('Window for %s %d widened to start at JD %.1f', term.label, year, left)
        if widened > _MAX_WIDEN_DAYS:
            raise RuntimeError(f'No bracket found for {term.label} {year}')
    widened = 0
    while _comparable_longitude(target, right) <= target:
        right += 1.0
        widened += 1
        logger.warning('Window for %s %d widened to end at JD %.1f', term.label, year, right)
        if widened > _MAX_WIDEN_DAYS:
            raise RuntimeError(f'No bracket found for {term.label} {year}')
    return left, right


def get_solar_term(year: int, term: SolarTerm, zone: tzinfo = timezone.utc) -> datetime:
    """Instant of a solar term in a year.

    Parameters:
        year: Gregorian year.
        term: SolarTerm (or its longitude as an int).
        zone: Zone of the returned datetime.

    Returns:
        Aware datetime, including the fixed +2 minute correction.
    """
    term = SolarTerm(term)
    left, right = _seed_bracket(year, term)
    jd, _ = search_solar_longitude(float(term), left, right)
    return to_calendar_day(jd + SOLAR_TERM_CORRECTION_MINUTES / MINUTES_PER_DAY, zone)


def get_solar_terms(year: int, zone: tzinfo = timezone.utc) -> list[tuple[SolarTerm, datetime]]:
    """All 24 solar terms of a year, in date order."""
    terms = [(term, get_solar_term(year, term, zone)) for term in SolarTerm]
    return sorted(terms, key=lambda item: item[1])
