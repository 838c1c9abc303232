"""Angle normalization, sexagesimal decomposition, parsing and formatting."""

from __future__ import annotations

import math
import re

from astroalgo.constants import (
    ARCSEC_PER_DEGREE,
    DEGREES_PER_CIRCLE,
    DEGREES_PER_HOUR_RA,
)
from astroalgo.errors import NonFiniteAngleError


def normalize_angle(angle: float) -> float:
    """Reduce an angle into [0, 360] degrees.

    Values already inside [0, 360] are returned unchanged, so 360 stays 360.
    Negative input is raised by whole turns, positive input is lowered by
    whole turns; a positive multiple of 360 therefore reduces to 360 and a
    negative multiple to 0. Whole turns are removed with math.fmod, which is
    exact, so very large angles (e.g. sidereal rates over millennia) do not
    accumulate rounding error.

    Parameters:
        angle: Angle in degrees.

    Returns:
        Equivalent angle in [0, 360].

    Raises:
        NonFiniteAngleError: If angle is NaN or infinite.
    """
    if not math.isfinite(angle):
        raise NonFiniteAngleError(angle)
    if 0.0 <= angle <= DEGREES_PER_CIRCLE:
        return angle + 0.0
    reduced = math.fmod(angle, DEGREES_PER_CIRCLE)
    if angle < 0.0:
        if reduced < 0.0:
            reduced += DEGREES_PER_CIRCLE
        return reduced + 0.0
    if reduced == 0.0:
        return DEGREES_PER_CIRCLE
    return reduced


def clamp_unit(value: float) -> float:
    """Clamp a sine/cosine value into [-1, 1] before asin/acos."""
    return max(-1.0, min(1.0, value))


def _truncate_sexagesimal(value: float) -> tuple[int, int, float]:
    whole = math.trunc(value)
    minutes_total = (value - whole) * 60.0
    minutes = math.trunc(minutes_total)
    seconds = (minutes_total - minutes) * 60.0
    return whole, minutes, seconds


def angle_to_dms(angle: float) -> tuple[int, int, float]:
    """Split degrees into (degrees, arcminutes, arcseconds).

    Truncates toward zero; every component carries the sign of the input, so
    -0.5 gives (0, -30, -0.0).

    Parameters:
        angle: Angle in degrees.

    Returns:
        (degrees, minutes, seconds).
    """
    return _truncate_sexagesimal(angle)


def angle_to_hms(angle: float) -> tuple[int, int, float]:
    """Split an angle in degrees into (hours, minutes, seconds) at 15°/h.

    Parameters:
        angle: Angle in degrees (e.g. right ascension).

    Returns:
        (hours, minutes, seconds), truncated toward zero like angle_to_dms.
    """
    return _truncate_sexagesimal(angle / DEGREES_PER_HOUR_RA)


def degrees_to_hours(angle: float) -> float:
    """Convert degrees to hours of time (15° per hour)."""
    return angle / DEGREES_PER_HOUR_RA


def parse_angle(string: str) -> float | None:
    """Parse an angle given as degrees (or hours), minutes, and seconds.

    Accepts three numbers (d, m, s), two (d, m), or one (d). Minutes and
    seconds must be non-negative; a leading minus makes the result negative.
    The result is in the units of the first number.

    Parameters:
        string: Whitespace-separated numbers (e.g. "39 33 36" or "-5 30").

    Returns:
        Angle as a float, or None on parse failure.
    """
    s = string.strip()
    if not s:
        return None
    parts = re.split(r'\s+', s)
    if len(parts) > 3:
        return None
    try:
        values = [float(p) for p in parts]
    except ValueError:
        return None
    if any(v < 0 for v in values[1:]):
        return None
    angle = abs(values[0])
    for scale, v in zip((60.0, 3600.0), values[1:]):
        angle += v / scale
    if s.startswith('-'):
        angle = -angle
    return angle


def dms_string(
    value: float,
    separator: str = 'dms',
    ndecimal: int = 1,
) -> str:
    """Format an angle as degrees (or hours), minutes, and rounded seconds.

    Parameters:
        value: Angle in degrees, or hours when formatting right ascension.
        separator: 3-character string of unit markers (e.g. 'hms' or 'dms');
            anything shorter uses blanks.
        ndecimal: Decimal places for seconds.

    Returns:
        Formatted string (e.g. " 39d 33m 36.0s"). A negative value whose
        whole part is zero keeps its minus sign ("-0d 30m 00.0s").
    """
    if len(separator) < 3:
        sep1 = sep2 = sep3 = ' '
    else:
        sep1, sep2, sep3 = separator[0], separator[1], separator[2]
    isign = 1 if value >= 0 else -1
    ntens = 10**ndecimal
    units = round(abs(value) * ARCSEC_PER_DEGREE * ntens)
    isec, frac_units = divmod(units, ntens)
    imin, isec = divmod(isec, 60)
    ideg, imin = divmod(imin, 60)
    frac = f'.{frac_units:0{ndecimal}d}' if ndecimal > 0 else ''
    out = f'{ideg * isign:3d}{sep1} {imin:02d}{sep2} {isec:02d}{frac}{sep3}'
    if isign < 0 and ideg == 0:
        out = out[0:1] + '-' + out[2:]
    return out
