"""Positional astronomy: ephemerides, horizon events, and solar terms.

This package provides:
- Time and angle utilities: Julian day conversion, angle normalization, sidereal time
- Series evaluation for VSOP87D planetary theory and IAU 1980 nutation
- Heliocentric to geocentric transformation and ecliptic/equatorial conversion
- Rise, transit, and set solver for an observer at a given latitude and longitude
- Equinoxes, solstices, and the 24 solar terms

Planetary tables are read from the bundled VSOP87D data files; rms-julian is
used to parse user date strings.
"""

__all__: list[str] = []
