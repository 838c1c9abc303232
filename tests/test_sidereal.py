"""Tests for Greenwich and local mean sidereal time."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from astroalgo.constants import ZONE_TIME_CORRECTION_DEG, ZONE_TIME_OFFSET_DEG
from astroalgo.sidereal import (
    greenwich_mean_sidereal_time,
    local_mean_sidereal_time,
    sidereal_to_zone_time,
)


def test_gmst_at_zero_hours() -> None:
    """Meeus example 12.a: 1987 April 10, 0h UT."""
    assert greenwich_mean_sidereal_time(datetime(1987, 4, 10)) == pytest.approx(
        197.693195, abs=1e-6
    )


def test_gmst_at_any_instant() -> None:
    """Meeus example 12.b: 1987 April 10, 19h21m UT."""
    assert greenwich_mean_sidereal_time(datetime(1987, 4, 10, 19, 21)) == pytest.approx(
        128.7378734, abs=1e-6
    )


def test_gmst_accepts_julian_day() -> None:
    """A Julian day gives the same value as the equivalent datetime."""
    assert greenwich_mean_sidereal_time(2446895.5) == pytest.approx(
        greenwich_mean_sidereal_time(datetime(1987, 4, 10)), abs=1e-9
    )


def test_gmst_is_monotonic_over_small_steps() -> None:
    """Sidereal time advances about 0.36 degrees per 0.001 day."""
    jd = 2451545.0
    previous = greenwich_mean_sidereal_time(jd)
    for _ in range(200):
        jd += 0.001
        current = greenwich_mean_sidereal_time(jd)
        step = (current - previous) % 360.0
        assert step == pytest.approx(0.36098565, abs=1e-6)
        previous = current


def test_lmst_matches_gmst_at_greenwich() -> None:
    """At longitude 0 in UTC the local value follows the rate formula."""
    lmst = local_mean_sidereal_time(datetime(1987, 4, 10, 19, 21, tzinfo=timezone.utc), 0.0)
    assert lmst == pytest.approx(128.7378734, abs=1e-3)


def test_lmst_longitude_and_offset() -> None:
    """East longitude adds directly; the zone offset is removed before scaling."""
    utc = local_mean_sidereal_time(datetime(2000, 1, 1, 4, tzinfo=timezone.utc), 0.0)
    east = local_mean_sidereal_time(datetime(2000, 1, 1, 4, tzinfo=timezone.utc), 30.0)
    assert east == pytest.approx((utc + 30.0) % 360.0, abs=1e-9)

    plus8 = timezone(timedelta(hours=8))
    local = local_mean_sidereal_time(datetime(2000, 1, 1, 12, tzinfo=plus8), 0.0)
    assert local == pytest.approx(utc, abs=1e-9)


def test_sidereal_to_zone_time_inverts_lmst() -> None:
    """Without a wrap the inverse returns the hour angle minus the fixed corrections."""
    when = datetime(2000, 1, 1, 6, tzinfo=timezone.utc)
    lst = local_mean_sidereal_time(when, 0.0)
    zone_time = sidereal_to_zone_time(lst, datetime(2000, 1, 1, tzinfo=timezone.utc), 0.0)
    expected = 90.0 + ZONE_TIME_OFFSET_DEG - ZONE_TIME_CORRECTION_DEG
    assert zone_time == pytest.approx(expected, abs=1e-6)
    assert expected == pytest.approx(90.0 - 0.97638889, abs=1e-8)
