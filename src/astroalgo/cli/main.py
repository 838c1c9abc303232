"""CLI entry point: astroalgo julian|body|sky|terms|equinox subcommands."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from datetime import datetime, tzinfo
from typing import NoReturn, cast

from astroalgo.angle_utils import degrees_to_hours, dms_string, parse_angle
from astroalgo.bodies import CelestialBody, FixedStar, Planet, get_body
from astroalgo.config import get_default_latitude, get_default_longitude
from astroalgo.constants import DEGREES_PER_HOUR_RA
from astroalgo.coordinates import Equatorial
from astroalgo.ephemeris import observe, observe_all, write_table
from astroalgo.horizon import Observer
from astroalgo.solar_terms import SolarTerm, get_equinox_and_solstice, get_solar_term, get_solar_terms
from astroalgo.time_utils import (
    MJD_OFFSET,
    day_of_week,
    day_of_year,
    delta_t,
    parse_datetime,
    resolve_zone,
    to_calendar_day,
    to_julian_day,
)

logger = logging.getLogger(__name__)

_WEEKDAYS = ('Sunday', 'Monday', 'Tuesday', 'Wednesday', 'Thursday', 'Friday', 'Saturday')
_EQUINOX_NAMES = ('March equinox', 'June solstice', 'September equinox', 'December solstice')


def _configure_logging(verbose: bool = False) -> None:
    """Configure logging for CLI (stderr, level from --verbose or ASTROALGO_LOG)."""
    level = logging.DEBUG if verbose else logging.WARNING
    env_level = os.environ.get('ASTROALGO_LOG', '').upper()
    if env_level in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
        level = getattr(logging, env_level)
    logging.basicConfig(
        level=level,
        format='%(levelname)s: %(name)s: %(message)s',
        stream=sys.stderr,
    )


def _angle_arg(value: str) -> float:
    """argparse type for angles given as 'd', 'd m' or 'd m s'."""
    angle = parse_angle(value)
    if angle is None:
        raise argparse.ArgumentTypeError(f'invalid angle: {value!r}')
    return angle


def _local_time(value: str | None, zone: tzinfo) -> datetime:
    """Parse a wall-clock time in `zone`; None means now."""
    if not value:
        return datetime.now(zone)
    parsed = parse_datetime(value)
    if parsed is None:
        raise ValueError(f'Invalid date/time: {value!r}')
    return parsed.replace(tzinfo=zone)


def _observer_from_args(args: argparse.Namespace) -> Observer:
    latitude = args.latitude if args.latitude is not None else get_default_latitude()
    longitude = args.longitude if args.longitude is not None else get_default_longitude()
    return Observer(latitude, longitude, resolve_zone(args.zone))


def _julian_cmd(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    """Convert between calendar dates and Julian days (julian subcommand).

    Parameters:
        parser: Argument parser (unused).
        args: Parsed args; date or jd, zone.

    Returns:
        Exit code 0 on success, 1 on error.
    """
    try:
        zone = resolve_zone(args.zone)
        if args.jd is not None:
            jd = args.jd
            when = to_calendar_day(jd, zone)
        else:
            when = _local_time(args.date, zone)
            jd = to_julian_day(when)
    except (ValueError, RuntimeError) as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1
    print(f'Date:         {when.isoformat(sep=" ", timespec="seconds")}')
    print(f'Julian day:   {jd:.6f}')
    print(f'Modified JD:  {jd - MJD_OFFSET:.6f}')
    print(f'Day of week:  {_WEEKDAYS[day_of_week(when)]}')
    print(f'Day of year:  {day_of_year(when)}')
    print(f'Delta T:      {delta_t(jd):.1f} s')
    return 0


def _body_from_args(args: argparse.Namespace) -> CelestialBody:
    if args.ra is not None or args.dec is not None:
        if args.ra is None or args.dec is None:
            raise ValueError('A fixed star needs both --ra and --dec')
        return FixedStar(args.name, Equatorial(args.ra * DEGREES_PER_HOUR_RA, args.dec))
    return get_body(args.name)


def _body_cmd(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    """Print one body's position, distances and horizon data (body subcommand).

    Returns:
        Exit code 0 on success, 1 on error.
    """
    try:
        body = _body_from_args(args)
        observer = _observer_from_args(args)
        when = _local_time(args.time, observer.zone)
        obs = observe(body, observer, when)
        ecliptic = body.ecliptic(when, apparent=not args.geometric)
        equatorial = body.equatorial(when, apparent=not args.geometric)
    except (ValueError, RuntimeError) as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1

    kind = 'geometric' if args.geometric else 'apparent'
    print(f'{obs.name.capitalize()} at {obs.when.isoformat(sep=" ", timespec="seconds")}')
    print(f'Ecliptic ({kind}):   lon {ecliptic.longitude:11.6f}  lat {ecliptic.latitude:10.6f}')
    print(
        f'Equatorial ({kind}): RA {dms_string(degrees_to_hours(equatorial.right_ascension), "hms")}'
        f'  Dec {dms_string(equatorial.declination, "dms")}'
    )
    print(f'Distance to Earth:  {obs.distance_to_earth:.6f} AU')
    if isinstance(body, Planet):
        print(f'Distance to Sun:    {obs.distance_to_sun:.6f} AU')
    for label, value in (
        ('Rise', obs.events.rise),
        ('Transit', obs.events.transit),
        ('Set', obs.events.setting),
    ):
        print(f'{label + ":":<20}{value.strftime("%H:%M:%S") if value else "none"}')
    print(f'Elevation:          {obs.elevation:.3f}')
    print(f'Azimuth:            {obs.azimuth:.3f}')
    return 0


def _sky_cmd(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    """Print the observation table of all available bodies (sky subcommand).

    Returns:
        Exit code 0 on success, 1 on error.
    """
    try:
        observer = _observer_from_args(args)
        when = _local_time(args.time, observer.zone)
        observations = observe_all(observer, when)
    except (ValueError, RuntimeError) as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1
    print(
        f'Observer: lat {observer.latitude:.4f}  lon {observer.longitude:.4f}  '
        f'time {when.isoformat(sep=" ", timespec="seconds")}'
    )
    write_table(observations, sys.stdout)
    return 0


def _parse_term(value: str) -> SolarTerm:
    """argparse type: a solar term by name ('winter_solstice') or longitude ('270')."""
    key = value.strip().upper().replace('-', '_').replace(' ', '_')
    if key.isdigit():
        try:
            return SolarTerm(int(key))
        except ValueError:
            raise argparse.ArgumentTypeError(f'no solar term at longitude {value}') from None
    try:
        return SolarTerm[key]
    except KeyError:
        raise argparse.ArgumentTypeError(f'unknown solar term: {value!r}') from None


def _terms_cmd(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    """Print the solar terms of a year, or a single term (terms subcommand).

    Returns:
        Exit code 0 on success, 1 on error.
    """
    try:
        zone = resolve_zone(args.zone)
        if args.term is not None:
            terms = [(args.term, get_solar_term(args.year, args.term, zone))]
        else:
            terms = get_solar_terms(args.year, zone)
    except (ValueError, RuntimeError) as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1
    for term, when in terms:
        print(f'{int(term):3d}  {term.label:<22}{when.isoformat(sep=" ", timespec="minutes")}')
    return 0


def _equinox_cmd(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    """Print the equinoxes and solstices of a year (equinox subcommand).

    Returns:
        Exit code 0 on success, 1 on error.
    """
    try:
        zone = resolve_zone(args.zone)
        moments = get_equinox_and_solstice(args.year, zone)
    except (ValueError, RuntimeError) as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1
    for name, when in zip(_EQUINOX_NAMES, moments):
        print(f'{name:<20}{when.isoformat(sep=" ", timespec="minutes")}')
    return 0


def _add_observer_args(sub: argparse.ArgumentParser) -> None:
    sub.add_argument(
        '--time', type=str, default=None, help='Local date/time (default: now)'
    )
    sub.add_argument(
        '--latitude',
        type=_angle_arg,
        default=None,
        help='Latitude, "d m s" (default: env ASTROALGO_LATITUDE)',
    )
    sub.add_argument(
        '--longitude',
        type=_angle_arg,
        default=None,
        help='East longitude, "d m s" (default: env ASTROALGO_LONGITUDE)',
    )
    sub.add_argument(
        '--zone', type=str, default=None, help='Time zone (default: env ASTROALGO_ZONE)'
    )


def main() -> int:
    """Entry point for the astroalgo CLI (julian | body | sky | terms | equinox).

    Returns:
        Exit code 0 on success, 1 on failure.
    """
    parser = argparse.ArgumentParser(
        prog='astroalgo',
        description='Positions, rise/set times and solar terms of Solar System bodies.',
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Show DEBUG logs')
    subparsers = parser.add_subparsers(dest='command', required=True)

    julian_parser = subparsers.add_parser('julian', help='Calendar date <-> Julian day')
    group = julian_parser.add_mutually_exclusive_group()
    group.add_argument('--date', type=str, default=None, help='Local date/time (default: now)')
    group.add_argument('--jd', type=float, default=None, help='Julian day')
    julian_parser.add_argument(
        '--zone', type=str, default='UTC', help='Time zone of the date (default: UTC)'
    )
    julian_parser.set_defaults(func=_julian_cmd)

    body_parser = subparsers.add_parser('body', help='Position and horizon data of one body')
    body_parser.add_argument('name', type=str, help='sun, moon, a planet, or a star name')
    body_parser.add_argument(
        '--ra', type=_angle_arg, default=None, help='Fixed star right ascension, "h m s"'
    )
    body_parser.add_argument(
        '--dec', type=_angle_arg, default=None, help='Fixed star declination, "d m s"'
    )
    body_parser.add_argument(
        '--geometric', action='store_true', help='Geometric instead of apparent coordinates'
    )
    _add_observer_args(body_parser)
    body_parser.set_defaults(func=_body_cmd)

    sky_parser = subparsers.add_parser('sky', help='Observation table of the Sun, Moon and planets')
    _add_observer_args(sky_parser)
    sky_parser.set_defaults(func=_sky_cmd)

    terms_parser = subparsers.add_parser('terms', help='The 24 solar terms of a year')
    terms_parser.add_argument('year', type=int)
    terms_parser.add_argument(
        '--term', type=_parse_term, default=None, help='One term, by name or longitude'
    )
    terms_parser.add_argument(
        '--zone', type=str, default=None, help='Time zone (default: env ASTROALGO_ZONE)'
    )
    terms_parser.set_defaults(func=_terms_cmd)

    equinox_parser = subparsers.add_parser('equinox', help='Equinoxes and solstices of a year')
    equinox_parser.add_argument('year', type=int)
    equinox_parser.add_argument(
        '--zone', type=str, default=None, help='Time zone (default: env ASTROALGO_ZONE)'
    )
    equinox_parser.set_defaults(func=_equinox_cmd)

    args = parser.parse_args()
    _configure_logging(verbose=args.verbose)
    return cast(int, args.func(parser, args))


def cli_main() -> NoReturn:
    """Entry point for console_scripts; calls main() and exits with its return code."""
    sys.exit(main())


if __name__ == '__main__':
    sys.exit(main())
