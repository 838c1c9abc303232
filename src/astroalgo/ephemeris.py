"""Observation rows for a set of bodies and a fixed-width table writer."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import datetime, time
from typing import TextIO

from astroalgo.angle_utils import degrees_to_hours, dms_string
from astroalgo.bodies import DISPLAY_BODIES, CelestialBody, Planet, available_bodies
from astroalgo.coordinates import Equatorial
from astroalgo.horizon import Observer, RiseTransitSet, azimuth, elevation_angle, rise_transit_set
from astroalgo.record import Record

logger = logging.getLogger(__name__)

# (heading, width) of each table column
COLUMNS = (
    ('body', 8),
    ('ra', 14),
    ('dec', 14),
    ('rise', 8),
    ('transit', 8),
    ('set', 8),
    ('earth_au', 12),
    ('sun_au', 10),
    ('elev', 8),
    ('azim', 8),
)

_NO_TIME = '--:--:--'


@dataclass(frozen=True)
class Observation:
    """Everything shown for one body at one instant."""

    name: str
    when: datetime
    equatorial: Equatorial
    events: RiseTransitSet
    distance_to_earth: float
    distance_to_sun: float | None
    elevation: float
    azimuth: float


def _local(when: datetime, observer: Observer) -> datetime:
    # Naive times are wall-clock times at the observer.
    if when.tzinfo is None:
        return when.replace(tzinfo=observer.zone)
    return when.astimezone(observer.zone)


def observe(body: CelestialBody, observer: Observer, when: datetime) -> Observation:
    """Compute the observation row of one body.

    Parameters:
        body: Body to observe.
        observer: Observing site.
        when: Local time; a naive datetime is taken in the observer's zone.

    Returns:
        Observation with apparent coordinates and horizon data.
    """
    local = _local(when, observer)
    equatorial = body.equatorial(local, apparent=True)
    distance_to_sun = body.distance_to_sun(local) if isinstance(body, Planet) else None
    return Observation(
        name=body.name,
        when=local,
        equatorial=equatorial,
        events=rise_transit_set(body, observer, local.date()),
        distance_to_earth=body.distance_to_earth(local),
        distance_to_sun=distance_to_sun,
        elevation=elevation_angle(local, equatorial, observer),
        azimuth=azimuth(local, equatorial, observer),
    )


def observe_all(
    observer: Observer,
    when: datetime,
    names: Iterable[str] = DISPLAY_BODIES,
) -> list[Observation]:
    """Observation rows for every named body whose theory is available."""
    bodies = available_bodies(names)
    logger.debug('Observing %d bodies at %s', len(bodies), when.isoformat())
    return [observe(body, observer, when) for body in bodies]


def _format_time(value: time | None) -> str:
    return _NO_TIME if value is None else value.strftime('%H:%M:%S')


def write_table(observations: Sequence[Observation], stream: TextIO) -> None:
    """Write observations as a fixed-width text table with a heading line.

    Right ascension is in hours, minutes, seconds; declination in degrees.
    Times of day are local; '--:--:--' marks an event that does not occur.
    """
    rec = Record()
    for heading, width in COLUMNS:
        rec.append(heading, width)
    rec.write(stream)
    for obs in observations:
        sun_au = '' if obs.distance_to_sun is None else f'{obs.distance_to_sun:.6f}'
        fields = (
            obs.name.capitalize(),
            dms_string(degrees_to_hours(obs.equatorial.right_ascension), 'hms'),
            dms_string(obs.equatorial.declination, 'dms'),
            _format_time(obs.events.rise),
            _format_time(obs.events.transit),
            _format_time(obs.events.setting),
            f'{obs.distance_to_earth:.6f}',
            sun_au,
            f'{obs.elevation:.3f}',
            f'{obs.azimuth:.3f}',
        )
        for field, (_, width) in zip(fields, COLUMNS):
            rec.append(field, width)
        rec.write(stream)
