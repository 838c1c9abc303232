"""Tests for horizon observables and rise/transit/set times."""

from __future__ import annotations

from datetime import date, datetime, time, timezone
from zoneinfo import ZoneInfo

import pytest

from astroalgo.bodies import Sun
from astroalgo.coordinates import Equatorial
from astroalgo.horizon import (
    NO_CROSSING,
    HorizonCrossing,
    Observer,
    azimuth,
    body_azimuth,
    body_elevation,
    culmination_angle,
    culmination_time,
    elevation_angle,
    elevation_angle_to_time,
    hour_angle,
    parallactic_angle,
    rise_transit_set,
    zone_time_to_time,
)
from astroalgo.sidereal import local_mean_sidereal_time

BEIJING = Observer(39.9, 116.4, ZoneInfo('Asia/Shanghai'))
GREENWICH_40N = Observer(40.0, 0.0, timezone.utc)
WHEN = datetime(2000, 1, 1, tzinfo=timezone.utc)


def _minutes(value: time | None) -> float:
    assert value is not None
    return value.hour * 60 + value.minute + value.second / 60.0


def test_observer_validates_latitude() -> None:
    """Latitudes outside [-90, 90] are rejected."""
    with pytest.raises(ValueError):
        Observer(91.0, 0.0, timezone.utc)
    assert Observer(-90.0, 0.0, timezone.utc).latitude == -90.0


def test_observer_default_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """The default observer comes from the environment."""
    monkeypatch.setenv('ASTROALGO_LATITUDE', '51.48')
    monkeypatch.setenv('ASTROALGO_LONGITUDE', '0')
    monkeypatch.setenv('ASTROALGO_ZONE', 'UTC')
    observer = Observer.default()
    assert observer == Observer(51.48, 0.0, timezone.utc)


def test_body_on_meridian() -> None:
    """At hour angle 0 a body culminates due south."""
    lst = local_mean_sidereal_time(WHEN, 0.0)
    eq = Equatorial(lst, 10.0)
    assert hour_angle(WHEN, eq.right_ascension, 0.0) == 0.0
    assert elevation_angle(WHEN, eq, GREENWICH_40N) == pytest.approx(60.0, abs=1e-9)
    assert elevation_angle(WHEN, eq, GREENWICH_40N) == pytest.approx(
        culmination_angle(10.0, 40.0), abs=1e-9
    )
    assert azimuth(WHEN, eq, GREENWICH_40N) == pytest.approx(180.0, abs=1e-4)
    assert parallactic_angle(WHEN, eq, GREENWICH_40N) == pytest.approx(0.0, abs=1e-9)


def test_azimuth_east_and_west() -> None:
    """Negative hour angles are in the east, positive in the west."""
    lst = local_mean_sidereal_time(WHEN, 0.0)
    rising = Equatorial((lst + 30.0) % 360.0, 10.0)
    setting = Equatorial((lst - 30.0) % 360.0, 10.0)
    assert 0.0 < azimuth(WHEN, rising, GREENWICH_40N) < 180.0
    assert 180.0 < azimuth(WHEN, setting, GREENWICH_40N) < 360.0
    assert parallactic_angle(WHEN, rising, GREENWICH_40N) < 0.0
    assert parallactic_angle(WHEN, setting, GREENWICH_40N) > 0.0


def test_azimuth_uses_reduced_hour_angle() -> None:
    """An unreduced hour angle of about -300 degrees is west of the meridian."""
    observer = Observer(40.0, -60.0, timezone.utc)
    lst = local_mean_sidereal_time(WHEN, observer.longitude)
    assert lst < 60.0
    eq = Equatorial(lst + 300.0, 10.0)
    assert hour_angle(WHEN, eq.right_ascension, observer.longitude) < -180.0
    assert 180.0 < azimuth(WHEN, eq, observer) < 360.0


def test_culmination_angle() -> None:
    """Upper culmination altitude is 90 - |latitude - declination|."""
    assert culmination_angle(0.0, 0.0) == pytest.approx(90.0)
    assert culmination_angle(23.44, 39.9) == pytest.approx(73.54)
    assert culmination_angle(-60.0, 40.0) == pytest.approx(-10.0)


def test_polar_day_has_no_crossing() -> None:
    """At 80 N in June the Sun never sets."""
    arctic = Observer(80.0, 0.0, timezone.utc)
    noon = arctic.local_noon(date(2020, 6, 21))
    eq = Sun().equatorial(noon)
    assert elevation_angle_to_time(eq, -0.5667, arctic, noon) == NO_CROSSING
    assert NO_CROSSING == HorizonCrossing(0.0, 0.0)
    events = rise_transit_set(Sun(), arctic, date(2020, 6, 21))
    assert (events.rise, events.transit, events.setting) == (None, None, None)


def test_sun_rise_transit_set_beijing() -> None:
    """Midsummer in Beijing: rise near 04:46, transit 12:15, set 19:46."""
    events = rise_transit_set(Sun(), BEIJING, date(2020, 6, 21))
    assert _minutes(events.rise) == pytest.approx(4 * 60 + 46, abs=10)
    assert _minutes(events.transit) == pytest.approx(12 * 60 + 15, abs=10)
    assert _minutes(events.setting) == pytest.approx(19 * 60 + 46, abs=10)


def test_culmination_time_midpoint() -> None:
    """Transit is the rise/set midpoint, shifted half a day when set < rise."""
    assert culmination_time(HorizonCrossing(60.0, 300.0)) == pytest.approx(12.0)
    assert culmination_time(HorizonCrossing(300.0, 60.0)) == pytest.approx(0.0)
    assert culmination_time(HorizonCrossing(330.0, 90.0)) == pytest.approx(2.0)
    assert culmination_time(HorizonCrossing(210.0, 30.0)) == pytest.approx(20.0)


def test_zone_time_to_time() -> None:
    """Degrees of time become a time of day, wrapped into one day."""
    assert zone_time_to_time(90.0) == time(6, 0, 0)
    assert zone_time_to_time(187.5) == time(12, 30, 0)
    assert zone_time_to_time(-15.0) == time(23, 0, 0)
    assert zone_time_to_time(375.0) == time(1, 0, 0)


def test_body_elevation_and_azimuth() -> None:
    """The midsummer Sun is high at noon and in the east in the morning."""
    noon = datetime(2020, 6, 21, 12, 15, tzinfo=BEIJING.zone)
    assert body_elevation(Sun(), BEIJING, noon) == pytest.approx(73.5, abs=0.5)
    morning = datetime(2020, 6, 21, 8, 0, tzinfo=BEIJING.zone)
    assert 0.0 < body_azimuth(Sun(), BEIJING, morning) < 180.0
    evening = datetime(2020, 6, 21, 17, 0, tzinfo=BEIJING.zone)
    assert 180.0 < body_azimuth(Sun(), BEIJING, evening) < 360.0
    midnight = datetime(2020, 6, 21, 0, 0, tzinfo=BEIJING.zone)
    assert body_elevation(Sun(), BEIJING, midnight) < -20.0
