"""VSOP87D planetary theory: table files, loading, and heliocentric positions.

A table file holds one body. Section headers L0..L5, B0..B5 and R0..R5 start
the series of each coordinate and power of t; every other non-comment line
is an `amplitude phase frequency` triple. Files are looked up by body name
in the directories returned by config.get_table_paths().
"""

from __future__ import annotations

import functools
import logging
import math
import re
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import NamedTuple

from astroalgo.angle_utils import normalize_angle
from astroalgo.config import get_table_paths
from astroalgo.errors import TheoryTableFormatError, TheoryTableNotFoundError
from astroalgo.series import TermSeries, TheoryTable, evaluate_table
from astroalgo.time_utils import Instant, julian_day_of, julian_millennia

logger = logging.getLogger(__name__)

TABLE_SUFFIX = '.txt'
_SECTION_RE = re.compile(r'^([LBR])([0-5])$')


class HeliocentricPosition(NamedTuple):
    """Heliocentric ecliptic longitude and latitude (degrees) and radius vector (AU)."""

    longitude: float
    latitude: float
    radius: float


@dataclass(frozen=True)
class Vsop87Theory:
    """Longitude, latitude and radius tables of one body."""

    name: str
    longitude: TheoryTable
    latitude: TheoryTable
    radius: TheoryTable
    source: str = ''

    def position(self, when: Instant, light_time: float = 0.0) -> HeliocentricPosition:
        """Evaluate the heliocentric position.

        Parameters:
            when: Datetime or Julian day.
            light_time: Days subtracted from the instant before evaluation.

        Returns:
            HeliocentricPosition with longitude in [0, 360].
        """
        t = julian_millennia(julian_day_of(when) - light_time)
        longitude = normalize_angle(math.degrees(evaluate_table(self.longitude, t)))
        latitude = math.degrees(evaluate_table(self.latitude, t))
        radius = evaluate_table(self.radius, t)
        return HeliocentricPosition(longitude, latitude, radius)

    @property
    def term_count(self) -> int:
        return sum(len(s) for table in (self.longitude, self.latitude, self.radius) for s in table)


def parse_table(lines: Iterable[str], name: str, source: str = '<string>') -> Vsop87Theory:
    """Parse VSOP87 table text into a theory.

    Parameters:
        lines: Lines of the table file.
        name: Body name stored on the result.
        source: File name used in error messages.

    Returns:
        Vsop87Theory.

    Raises:
        TheoryTableFormatError: On unknown lines, bad numbers, duplicate or
            missing sections.
    """
    sections: dict[str, dict[int, list[tuple[float, float, float]]]] = {
        'L': {},
        'B': {},
        'R': {},
    }
    current: list[tuple[float, float, float]] | None = None
    lineno = 0
    for lineno, raw in enumerate(lines, start=1):
        line = raw.split('#', 1)[0].strip()
        if not line:
            continue
        header = _SECTION_RE.match(line)
        if header is not None:
            coord, order = header.group(1), int(header.group(2))
            if order in sections[coord]:
                raise TheoryTableFormatError(source, lineno, f'duplicate section {line}')
            current = sections[coord][order] = []
            continue
        if current is None:
            raise TheoryTableFormatError(source, lineno, 'term before first section header')
        fields = line.split()
        if len(fields) != 3:
            raise TheoryTableFormatError(
                source, lineno, f'expected amplitude, phase, frequency; got {line!r}'
            )
        try:
            amplitude, phase, frequency = (float(f) for f in fields)
        except ValueError as e:
            raise TheoryTableFormatError(source, lineno, str(e)) from e
        current.append((amplitude, phase, frequency))

    tables: dict[str, TheoryTable] = {}
    for coord, orders in sections.items():
        if not orders:
            raise TheoryTableFormatError(source, lineno, f'no {coord} sections')
        tables[coord] = tuple(
            TermSeries.from_terms(orders[k], power=k) for k in sorted(orders)
        )
    return Vsop87Theory(
        name=name,
        longitude=tables['L'],
        latitude=tables['B'],
        radius=tables['R'],
        source=source,
    )


def find_table(name: str) -> Path:
    """Return the table file for a body, searching the configured directories.

    Parameters:
        name: Body name (case-insensitive, e.g. 'venus').

    Returns:
        Path of the first matching file.

    Raises:
        TheoryTableNotFoundError: If no directory has the table.
    """
    filename = name.strip().lower() + TABLE_SUFFIX
    searched: list[str] = []
    for directory in get_table_paths():
        path = directory / filename
        searched.append(str(path))
        if path.is_file():
            return path
    raise TheoryTableNotFoundError(name, searched)


@functools.lru_cache(maxsize=None)
def _load_table_file(path: Path, name: str) -> Vsop87Theory:
    with path.open(encoding='utf-8') as f:
        theory = parse_table(f, name, str(path))
    logger.debug('Loaded VSOP87 table for %s from %s (%d terms)', name, path, theory.term_count)
    return theory


def load_theory(name: str) -> Vsop87Theory:
    """Load (once per file) the VSOP87 theory of a body.

    Parameters:
        name: Body name, e.g. 'earth', 'venus', 'neptune'.

    Returns:
        Vsop87Theory shared by all callers.
    """
    return _load_table_file(find_table(name), name.strip().lower())


def has_theory(name: str) -> bool:
    """Return True if a table file for the body can be found."""
    try:
        find_table(name)
    except TheoryTableNotFoundError:
        return False
    return True


def earth_theory() -> Vsop87Theory:
    """Return Earth's theory, the reference for every geocentric transform."""
    return load_theory('earth')
