"""Ecliptic and equatorial coordinates and the rotation between them (Meeus chapter 13)."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass

from astroalgo.angle_utils import clamp_unit, normalize_angle
from astroalgo.constants import DEGREES_PER_CIRCLE, J2000_OBLIQUITY_DEG
from astroalgo.nutation import ecliptic_obliquity
from astroalgo.time_utils import Instant


@dataclass(frozen=True)
class Ecliptic:
    """Ecliptic longitude and latitude in degrees."""

    longitude: float
    latitude: float


@dataclass(frozen=True)
class Equatorial:
    """Right ascension and declination in degrees."""

    right_ascension: float
    declination: float


class ObliquityMode(enum.Enum):
    """Which obliquity of the ecliptic a frame rotation uses."""

    FIXED_J2000 = 'fixed-j2000'
    MEAN_AT_TIME = 'mean'
    TRUE_AT_TIME = 'true'


def obliquity_for(mode: ObliquityMode, when: Instant | None = None) -> float:
    """Return the obliquity in degrees for a mode.

    Parameters:
        mode: ObliquityMode.
        when: Required for MEAN_AT_TIME and TRUE_AT_TIME.

    Returns:
        Obliquity in degrees.

    Raises:
        ValueError: If a time-dependent mode is given no time.
    """
    if mode is ObliquityMode.FIXED_J2000:
        return J2000_OBLIQUITY_DEG
    if when is None:
        raise ValueError(f'Obliquity mode {mode.value!r} needs an instant')
    return ecliptic_obliquity(when, true=mode is ObliquityMode.TRUE_AT_TIME)


def _wrap_360(angle: float) -> float:
    # Right ascension and longitude live in [0, 360).
    angle = normalize_angle(angle)
    return 0.0 if angle == DEGREES_PER_CIRCLE else angle


def ecliptic_to_equatorial(
    ecliptic: Ecliptic,
    mode: ObliquityMode = ObliquityMode.FIXED_J2000,
    when: Instant | None = None,
) -> Equatorial:
    """Rotate ecliptic coordinates to equatorial (Meeus 13.3, 13.4).

    Parameters:
        ecliptic: Longitude and latitude in degrees.
        mode: Obliquity to rotate by; FIXED_J2000 needs no time.
        when: Instant for the time-dependent modes.

    Returns:
        Equatorial with right ascension in [0, 360).
    """
    eps = math.radians(obliquity_for(mode, when))
    lam = math.radians(ecliptic.longitude)
    beta = math.radians(ecliptic.latitude)
    ra = math.atan2(
        math.sin(lam) * math.cos(eps) - math.tan(beta) * math.sin(eps),
        math.cos(lam),
    )
    dec = math.asin(
        clamp_unit(
            math.sin(beta) * math.cos(eps)
            + math.cos(beta) * math.sin(eps) * math.sin(lam)
        )
    )
    return Equatorial(_wrap_360(math.degrees(ra)), math.degrees(dec))


def equatorial_to_ecliptic(
    equatorial: Equatorial,
    mode: ObliquityMode = ObliquityMode.FIXED_J2000,
    when: Instant | None = None,
) -> Ecliptic:
    """Rotate equatorial coordinates to ecliptic (Meeus 13.1, 13.2).

    Parameters:
        equatorial: Right ascension and declination in degrees.
        mode: Obliquity to rotate by; FIXED_J2000 needs no time.
        when: Instant for the time-dependent modes.

    Returns:
        Ecliptic with longitude in [0, 360).
    """
    eps = math.radians(obliquity_for(mode, when))
    alpha = math.radians(equatorial.right_ascension)
    delta = math.radians(equatorial.declination)
    lam = math.atan2(
        math.sin(alpha) * math.cos(eps) + math.tan(delta) * math.sin(eps),
        math.cos(alpha),
    )
    beta = math.asin(
        clamp_unit(
            math.sin(delta) * math.cos(eps)
            - math.cos(delta) * math.sin(eps) * math.sin(alpha)
        )
    )
    return Ecliptic(_wrap_360(math.degrees(lam)), math.degrees(beta))


def angular_separation(first: Equatorial, second: Equatorial) -> float:
    """Great-circle distance between two positions in degrees (haversine form)."""
    d1 = math.radians(first.declination)
    d2 = math.radians(second.declination)
    dra = math.radians(second.right_ascension - first.right_ascension)
    h = math.sin((d2 - d1) / 2.0) ** 2 + math.cos(d1) * math.cos(d2) * math.sin(dra / 2.0) ** 2
    return math.degrees(2.0 * math.asin(math.sqrt(clamp_unit(h))))
