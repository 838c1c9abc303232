"""Mean orbital elements referred to the mean equinox of date (Meeus table 31.A)."""

from astroalgo.bodies.base import ElementPolynomials

VENUS_ELEMENTS = ElementPolynomials(
    mean_longitude=(181.979801, 58519.2130303, 0.00031060, 0.000000015),
    semimajor_axis=(0.723329820,),
    eccentricity=(0.00677188, -0.000047766, 0.0000000975, 0.00000000044),
    inclination=(3.394662, 0.0010037, -0.00000088, -0.000000007),
    ascending_node=(76.679920, 0.9011190, 0.00040664, -0.000000080),
    perihelion_longitude=(131.563707, 1.4022188, -0.00107337, -0.000005315),
)

NEPTUNE_ELEMENTS = ElementPolynomials(
    mean_longitude=(304.348665, 219.8833092, 0.00030926, 0.000000018),
    semimajor_axis=(30.110386869, -0.0000001663, 0.00000000069),
    eccentricity=(0.00898809, 0.000006408, -0.0000000008, -0.00000000005),
    inclination=(1.769952, -0.0093082, -0.00000708, 0.000000028),
    ascending_node=(131.784057, 1.1022057, 0.00026006, -0.000000636),
    perihelion_longitude=(48.123691, 1.4262677, 0.00037918, -0.000000003),
)

# Planet name (lowercase) -> element polynomials
ELEMENTS_BY_PLANET: dict[str, ElementPolynomials] = {
    'venus': VENUS_ELEMENTS,
    'neptune': NEPTUNE_ELEMENTS,
}
