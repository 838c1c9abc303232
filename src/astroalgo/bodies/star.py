"""Fixed stars given by catalogue right ascension and declination."""

from __future__ import annotations

import math
from dataclasses import dataclass

from astroalgo.constants import HORIZON_ALTITUDE_STAR
from astroalgo.coordinates import (
    Ecliptic,
    Equatorial,
    ObliquityMode,
    equatorial_to_ecliptic,
)
from astroalgo.time_utils import Instant


@dataclass(frozen=True)
class FixedStar:
    """A star at a fixed J2000.0 position; proper motion and precession are ignored."""

    name: str
    position: Equatorial
    horizon_altitude: float = HORIZON_ALTITUDE_STAR

    def ecliptic(self, when: Instant, apparent: bool = True) -> Ecliptic:
        return equatorial_to_ecliptic(self.position, ObliquityMode.FIXED_J2000)

    def equatorial(self, when: Instant, apparent: bool = True) -> Equatorial:
        return self.position

    def distance_to_earth(self, when: Instant) -> float:
        return math.inf
