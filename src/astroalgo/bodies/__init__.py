"""Celestial bodies and the name-based body registry.

Planets are built on demand from VSOP87 tables; Sun and Moon use their own
analytic theories.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from astroalgo.bodies.base import CelestialBody
from astroalgo.bodies.elements import ELEMENTS_BY_PLANET
from astroalgo.bodies.moon import Moon
from astroalgo.bodies.planet import Planet
from astroalgo.bodies.star import FixedStar
from astroalgo.bodies.sun import Sun
from astroalgo.errors import TheoryTableNotFoundError
from astroalgo.vsop87 import earth_theory, load_theory

logger = logging.getLogger(__name__)

__all__ = [
    'CelestialBody',
    'DISPLAY_BODIES',
    'FixedStar',
    'Moon',
    'PLANET_NAMES',
    'Planet',
    'Sun',
    'available_bodies',
    'get_body',
    'get_planet',
]

PLANET_NAMES = (
    'mercury',
    'venus',
    'mars',
    'jupiter',
    'saturn',
    'uranus',
    'neptune',
)

# Rows of the observation table, in display order
DISPLAY_BODIES = ('sun', 'moon') + PLANET_NAMES


def get_planet(name: str) -> Planet:
    """Build a planet from its VSOP87 table.

    Parameters:
        name: Planet name (case-insensitive).

    Returns:
        Planet bound to its own and Earth's theories.

    Raises:
        ValueError: If the name is not a planet other than Earth.
        TheoryTableNotFoundError: If its table is not installed.
    """
    key = name.strip().lower()
    if key == 'earth':
        raise ValueError('Earth is the observer; it cannot be observed')
    if key not in PLANET_NAMES:
        raise ValueError(f'Unknown planet: {name!r}')
    return Planet(
        name=key,
        theory=load_theory(key),
        earth=earth_theory(),
        elements=ELEMENTS_BY_PLANET.get(key),
    )


def get_body(name: str) -> CelestialBody:
    """Look up a Sun, Moon or planet by name.

    Raises:
        ValueError: For unknown names or Earth.
    """
    key = name.strip().lower()
    if key == 'sun':
        return Sun()
    if key == 'moon':
        return Moon()
    return get_planet(key)


def available_bodies(names: Iterable[str] = DISPLAY_BODIES) -> list[CelestialBody]:
    """Return the bodies whose theories can be loaded, skipping the rest.

    Parameters:
        names: Body names in the desired order.

    Returns:
        Loaded bodies; a body with no installed table is logged and skipped.
    """
    bodies: list[CelestialBody] = []
    for name in names:
        try:
            bodies.append(get_body(name))
        except TheoryTableNotFoundError as e:
            logger.warning('Skipping %s: %s', name, e)
    return bodies
