"""Fixed constants: epochs, time units, angle units, horizon altitudes.

Values follow Meeus, Astronomical Algorithms (2nd ed.) unless noted.
"""

# Epochs (Julian days)
J2000_JD = 2451545.0
GREGORIAN_START = (1582, 10, 15)  # first day of the Gregorian calendar
GREGORIAN_START_JD = 2299161  # integer day number of the same date (Meeus 7.2)
DELTA_T_EPOCH_JD = 2382148.0  # 1810 epoch of the parabolic Delta T fit

# Time: seconds per unit and Julian calendar lengths
SECONDS_PER_MINUTE = 60.0
SECONDS_PER_HOUR = 3600.0
SECONDS_PER_DAY = 86400.0
MINUTES_PER_DAY = 1440.0
HOURS_PER_DAY = 24.0
DAYS_PER_JULIAN_CENTURY = 36525.0
DAYS_PER_JULIAN_MILLENNIUM = 365250.0

# Angle: degrees per circle and sexagesimal (DMS/arcmin/arcsec)
DEGREES_PER_CIRCLE = 360.0
HALF_CIRCLE_DEGREES = 180.0
ARCMIN_PER_DEGREE = 60.0
ARCSEC_PER_DEGREE = 3600.0
DEGREES_PER_HOUR_RA = 15.0  # right ascension: 360° / 24 h

# Earth orientation
J2000_OBLIQUITY_DEG = 23.439291  # mean obliquity at J2000.0
SIDEREAL_RATE = 1.0 + 1.0 / 365.2422  # sidereal days per solar day

# Sidereal-to-zone time corrections (degrees)
ZONE_TIME_OFFSET_DEG = 0.06527778
ZONE_TIME_CORRECTION_DEG = 1.04166667

# Light-time for 1 AU, in days
LIGHT_TIME_DAYS_PER_AU = 0.0057755183

# Astronomical unit in km
AU_KM = 149597870.7

# Standard altitudes (degrees) for rise/set of each body class
HORIZON_ALTITUDE_PLANET = -0.5667  # Sun and planets, refraction-corrected
HORIZON_ALTITUDE_STAR = -0.8333  # fixed stars
HORIZON_ALTITUDE_MOON = 0.125  # Moon, parallax-adjusted

# Solar-term search
GOLDEN_RATIO_STEP = 0.618
SOLAR_TERM_TOLERANCE_DAYS = 0.0001  # bracket width (about 8.6 s)
SOLAR_TERM_CORRECTION_MINUTES = 2.0
SOLAR_TERM_WRAP_DEG = 345.0  # longitudes above this compare as negative for the 0° target

# Default observer (Beijing) for the CLI and observation tables
DEFAULT_LATITUDE = 39.56
DEFAULT_LONGITUDE = 116.23
DEFAULT_ZONE = 'Asia/Shanghai'
