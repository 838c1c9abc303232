"""Planets computed from VSOP87D theory tables."""

from __future__ import annotations

from dataclasses import dataclass

from astroalgo.bodies.base import ElementPolynomials, OrbitalElements
from astroalgo.constants import HORIZON_ALTITUDE_PLANET
from astroalgo.coordinates import Ecliptic, Equatorial, ObliquityMode, ecliptic_to_equatorial
from astroalgo.time_utils import Instant, julian_centuries, julian_day_of
from astroalgo.transform import geocentric_distance, geocentric_ecliptic
from astroalgo.vsop87 import Vsop87Theory


@dataclass(frozen=True)
class Planet:
    """A planet: its own theory table plus Earth's, used for geocentric positions."""

    name: str
    theory: Vsop87Theory
    earth: Vsop87Theory
    elements: ElementPolynomials | None = None
    horizon_altitude: float = HORIZON_ALTITUDE_PLANET

    def heliocentric_ecliptic(self, when: Instant, light_time: float = 0.0) -> Ecliptic:
        """Heliocentric ecliptic longitude and latitude in degrees.

        Parameters:
            when: Datetime or Julian day.
            light_time: Days to subtract from the instant (light-time correction).

        Returns:
            Ecliptic, longitude in [0, 360].
        """
        position = self.theory.position(when, light_time)
        return Ecliptic(position.longitude, position.latitude)

    def distance_to_sun(self, when: Instant, light_time: float = 0.0) -> float:
        """Radius vector in AU."""
        return self.theory.position(when, light_time).radius

    def ecliptic(self, when: Instant, apparent: bool = True) -> Ecliptic:
        """Geocentric ecliptic coordinates (see transform.geocentric_ecliptic)."""
        return geocentric_ecliptic(self.theory, self.earth, when, apparent)

    def equatorial(self, when: Instant, apparent: bool = True) -> Equatorial:
        """Geocentric right ascension and declination.

        Apparent positions use the true obliquity of date, geometric ones the
        mean obliquity.
        """
        jd = julian_day_of(when)
        mode = ObliquityMode.TRUE_AT_TIME if apparent else ObliquityMode.MEAN_AT_TIME
        return ecliptic_to_equatorial(self.ecliptic(jd, apparent), mode, jd)

    def distance_to_earth(self, when: Instant) -> float:
        """Geometric distance from Earth in AU."""
        return geocentric_distance(self.theory, self.earth, when)

    def orbital_elements(self, when: Instant) -> OrbitalElements:
        """Mean orbital elements at an instant.

        Raises:
            ValueError: If no element polynomials are known for this planet.
        """
        if self.elements is None:
            raise ValueError(f'No orbital elements for {self.name}')
        return self.elements.at(julian_centuries(julian_day_of(when)))
