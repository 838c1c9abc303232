"""Tests for nutation and the obliquity of the ecliptic."""

from __future__ import annotations

import pytest

from astroalgo.nutation import (
    NUTATION_MULTIPLIERS,
    ecliptic_obliquity,
    fundamental_arguments,
    get_nutation,
    mean_obliquity,
)

# Meeus example 22.a: 1987 April 10, 0h TD
JDE = 2446895.5


def test_table_has_63_terms() -> None:
    """The IAU 1980 series as abridged by Meeus."""
    assert NUTATION_MULTIPLIERS.shape == (63, 5)


def test_fundamental_arguments_in_radians() -> None:
    """D, M, M', F and Omega are reduced to one turn."""
    args = fundamental_arguments(-0.127296372348)
    assert args.shape == (5,)
    assert all(0.0 <= a <= 6.2832 for a in args)


def test_nutation_example() -> None:
    """Delta-psi = -3.788 arcsec, delta-epsilon = +9.443 arcsec."""
    nutation = get_nutation(JDE)
    assert nutation.longitude * 3600.0 == pytest.approx(-3.788, abs=0.01)
    assert nutation.obliquity * 3600.0 == pytest.approx(9.443, abs=0.01)


def test_mean_obliquity_example() -> None:
    """Mean obliquity 23 26' 27.407"."""
    assert mean_obliquity(JDE) == pytest.approx(23.4409464, abs=1e-6)
    assert ecliptic_obliquity(JDE, true=False) == mean_obliquity(JDE)


def test_true_obliquity_example() -> None:
    """True obliquity 23 26' 36.850"."""
    assert ecliptic_obliquity(JDE) == pytest.approx(23.4435694, abs=1e-5)


def test_obliquity_at_j2000() -> None:
    """The Laskar polynomial gives 23 26' 21.448" at J2000.0."""
    assert mean_obliquity(2451545.0) == pytest.approx(23.4392911, abs=1e-7)
