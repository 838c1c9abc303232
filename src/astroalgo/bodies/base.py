"""Celestial body interface and orbital element types shared by all bodies."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from astroalgo.angle_utils import normalize_angle
from astroalgo.coordinates import Ecliptic, Equatorial
from astroalgo.time_utils import Instant


class CelestialBody(Protocol):
    """Anything that can be placed on the sky at an instant.

    Positions are geocentric. `apparent` selects light-time and nutation
    corrected values (true equator and equinox of date); otherwise geometric
    values referred to the mean equinox are returned.
    """

    name: str
    horizon_altitude: float

    def ecliptic(self, when: Instant, apparent: bool = True) -> Ecliptic: ...

    def equatorial(self, when: Instant, apparent: bool = True) -> Equatorial: ...

    def distance_to_earth(self, when: Instant) -> float: ...


@dataclass(frozen=True)
class OrbitalElements:
    """Mean orbital elements of a planet (degrees, AU)."""

    mean_longitude: float
    semimajor_axis: float
    eccentricity: float
    inclination: float
    ascending_node: float
    perihelion_longitude: float

    @property
    def argument_of_perihelion(self) -> float:
        return normalize_angle(self.perihelion_longitude - self.ascending_node)

    @property
    def mean_anomaly(self) -> float:
        return normalize_angle(self.mean_longitude - self.perihelion_longitude)


def _polynomial(coefficients: tuple[float, ...], t: float) -> float:
    total = 0.0
    for c in reversed(coefficients):
        total = total * t + c
    return total


@dataclass(frozen=True)
class ElementPolynomials:
    """Orbital elements as cubic polynomials in T, lowest power first (Meeus table 31.A)."""

    mean_longitude: tuple[float, ...]
    semimajor_axis: tuple[float, ...]
    eccentricity: tuple[float, ...]
    inclination: tuple[float, ...]
    ascending_node: tuple[float, ...]
    perihelion_longitude: tuple[float, ...]

    def at(self, t: float) -> OrbitalElements:
        """Evaluate the elements at T Julian centuries from J2000.0.

        Angles are reduced into [0, 360].
        """
        return OrbitalElements(
            mean_longitude=normalize_angle(_polynomial(self.mean_longitude, t)),
            semimajor_axis=_polynomial(self.semimajor_axis, t),
            eccentricity=_polynomial(self.eccentricity, t),
            inclination=_polynomial(self.inclination, t),
            ascending_node=normalize_angle(_polynomial(self.ascending_node, t)),
            perihelion_longitude=normalize_angle(_polynomial(self.perihelion_longitude, t)),
        )
