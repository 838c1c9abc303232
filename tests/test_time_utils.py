"""Tests for Julian day conversion, calendar helpers, zones and date parsing."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from astroalgo import time_utils
from astroalgo.errors import AstroAlgoError, InvalidTimeZoneError


def test_j2000_epoch() -> None:
    """2000-01-01 12:00 UTC is JD 2451545.0 exactly."""
    assert time_utils.to_julian_day(datetime(2000, 1, 1, 12)) == 2451545.0
    aware = datetime(2000, 1, 1, 12, tzinfo=timezone.utc)
    assert time_utils.to_julian_day(aware) == 2451545.0


def test_aware_datetime_is_converted_to_utc() -> None:
    """20:00 at UTC+8 is noon UTC."""
    beijing = datetime(2000, 1, 1, 20, tzinfo=timezone(timedelta(hours=8)))
    assert time_utils.to_julian_day(beijing) == pytest.approx(2451545.0, abs=1e-9)


@pytest.mark.parametrize(
    ('when', 'expected'),
    [
        (datetime(1957, 10, 4, 19, 26, 24), 2436116.31),
        (datetime(333, 1, 27, 12), 1842713.0),
        (datetime(1987, 6, 19, 12), 2446966.0),
        (datetime(1988, 1, 27), 2447187.5),
        (datetime(1600, 1, 1), 2305447.5),
    ],
)
def test_meeus_julian_days(when: datetime, expected: float) -> None:
    """Meeus examples 7.a, 7.b and table 7.A; 333 is in the Julian calendar."""
    assert time_utils.to_julian_day(when) == pytest.approx(expected, abs=1e-6)


def test_modified_julian_day() -> None:
    """MJD 0 is 1858-11-17 00:00."""
    assert time_utils.to_julian_day(datetime(1858, 11, 17), modified=True) == 0.0


def test_calendar_round_trip_within_one_second() -> None:
    """Calendar -> JD -> calendar is stable after 1582-10-15."""
    for when in (
        datetime(1582, 10, 15, 0, 0, 1),
        datetime(1900, 2, 28, 23, 59, 59),
        datetime(2024, 2, 29, 6, 30, 15),
        datetime(2100, 12, 31, 18),
    ):
        back = time_utils.to_calendar_day(time_utils.to_julian_day(when))
        assert abs((back - when).total_seconds()) < 1.0


def test_to_calendar_day_with_zone() -> None:
    """A zone returns an aware datetime converted from UT."""
    noon = time_utils.to_calendar_day(2451545.0, timezone.utc)
    assert noon == datetime(2000, 1, 1, 12, tzinfo=timezone.utc)
    shanghai = time_utils.to_calendar_day(2451545.0, ZoneInfo('Asia/Shanghai'))
    assert shanghai.hour == 20
    assert shanghai.utcoffset() == timedelta(hours=8)


def test_julian_day_of_passes_floats_through() -> None:
    """Instants may be datetimes or Julian days."""
    assert time_utils.julian_day_of(2451545.25) == 2451545.25
    assert time_utils.julian_day_of(datetime(2000, 1, 1, 12)) == 2451545.0


def test_julian_centuries_and_millennia() -> None:
    """T and t are measured from J2000.0."""
    assert time_utils.julian_centuries(2451545.0 + 36525.0) == 1.0
    assert time_utils.julian_millennia(2451545.0 - 365250.0) == -1.0


def test_day_of_week() -> None:
    """1954-06-30 was a Wednesday (Meeus 7.e); 0 is Sunday."""
    assert time_utils.day_of_week(date(1954, 6, 30)) == 3
    assert time_utils.day_of_week(datetime(2000, 1, 1, 23, 59)) == 6


def test_day_of_year() -> None:
    """Meeus 7.f and 7.g."""
    assert time_utils.day_of_year(date(1978, 11, 14)) == 318
    assert time_utils.day_of_year(date(1988, 4, 22)) == 113
    assert time_utils.day_of_year(date(2023, 1, 1)) == 1
    assert time_utils.day_of_year(date(2024, 12, 31)) == 366


def test_is_leap_year() -> None:
    """Gregorian century rule."""
    assert time_utils.is_leap_year(2000)
    assert time_utils.is_leap_year(2024)
    assert not time_utils.is_leap_year(1900)
    assert not time_utils.is_leap_year(2023)


def test_date_interval_and_shift() -> None:
    """Intervals are absolute; shifting works in both directions."""
    a = datetime(2000, 1, 1, 12)
    b = datetime(2000, 1, 3)
    assert time_utils.date_interval(a, b) == pytest.approx(1.5)
    assert time_utils.date_interval(b, a) == pytest.approx(1.5)
    shifted = time_utils.interval_to_date(a, 1.5)
    assert abs((shifted - b).total_seconds()) < 1.0
    back = time_utils.interval_to_date(b, -1.5)
    assert abs((back - a).total_seconds()) < 1.0


def test_delta_t_parabola() -> None:
    """Delta T is -15 s at the 1810 vertex and grows on both sides."""
    assert time_utils.delta_t(2382148.0) == pytest.approx(-15.0)
    assert time_utils.delta_t(2451545.0) > time_utils.delta_t(2420000.0)


def test_resolve_zone_names_and_offsets() -> None:
    """UTC aliases, fixed offsets and IANA names resolve."""
    assert time_utils.resolve_zone('UTC') is timezone.utc
    assert time_utils.resolve_zone('z') is timezone.utc
    assert time_utils.resolve_zone('+08:00') == timezone(timedelta(hours=8))
    assert time_utils.resolve_zone('UTC-5') == timezone(timedelta(hours=-5))
    assert time_utils.resolve_zone('+0530') == timezone(timedelta(hours=5, minutes=30))
    assert time_utils.resolve_zone('Asia/Shanghai') == ZoneInfo('Asia/Shanghai')


def test_resolve_zone_default_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """An empty name falls back to ASTROALGO_ZONE."""
    monkeypatch.setenv('ASTROALGO_ZONE', 'UTC')
    assert time_utils.resolve_zone(None) is timezone.utc
    monkeypatch.delenv('ASTROALGO_ZONE')
    assert time_utils.resolve_zone('') == ZoneInfo('Asia/Shanghai')


@pytest.mark.parametrize('bad', ['Not/AZone', '+25:00', '../etc', 'Asia', 'America'])
def test_resolve_zone_rejects_unknown(bad: str) -> None:
    """Unknown zones raise InvalidTimeZoneError, which is a ValueError."""
    with pytest.raises(InvalidTimeZoneError) as excinfo:
        time_utils.resolve_zone(bad)
    assert isinstance(excinfo.value, ValueError)


def test_utc_offset_hours() -> None:
    """Naive datetimes have no offset."""
    assert time_utils.utc_offset_hours(datetime(2020, 1, 1)) == 0.0
    ny = datetime(2020, 7, 1, tzinfo=ZoneInfo('America/New_York'))
    assert time_utils.utc_offset_hours(ny) == -4.0


def test_parse_datetime_forms() -> None:
    """Common date/time strings parse to naive wall-clock datetimes."""
    assert time_utils.parse_datetime('2000-01-01 12:00') == datetime(2000, 1, 1, 12)
    assert time_utils.parse_datetime('2022-08-18T00:01:47') == datetime(2022, 8, 18, 0, 1, 47)


def test_parse_datetime_accepts_iso_z_suffix() -> None:
    """A trailing Z parses like the same timestamp without it."""
    with_z = time_utils.parse_datetime('2022-08-18T00:01:47Z')
    without_z = time_utils.parse_datetime('2022-08-18T00:01:47')
    assert with_z is not None
    assert with_z == without_z


def test_parse_datetime_rejects_garbage() -> None:
    """Unparseable strings return None."""
    assert time_utils.parse_datetime('not a date') is None


def test_to_calendar_day_julian_leap_day_out_of_range() -> None:
    """1500-02-29 exists in the Julian calendar but not as a datetime."""
    jd = time_utils.to_julian_day(datetime(1500, 3, 1)) - 1.0
    with pytest.raises(AstroAlgoError, match='1500-02-29'):
        time_utils.to_calendar_day(jd)
    assert time_utils.to_calendar_day(jd + 1.0) == datetime(1500, 3, 1)
