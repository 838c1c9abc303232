"""Tests for VSOP87 table parsing, lookup and heliocentric positions."""

from __future__ import annotations

from pathlib import Path

import pytest

from astroalgo import vsop87
from astroalgo.config import BUNDLED_TABLE_PATH, get_table_paths
from astroalgo.errors import TheoryTableFormatError, TheoryTableNotFoundError

MINIMAL_TABLE = """\
# Toy table: constant longitude, zero latitude, unit radius
L0
1.0 0.0 0.0
L1
0.5 0.0 0.0
B0
0.0 0.0 0.0
R0
1.0 0.0 0.0
"""


@pytest.fixture(autouse=True)
def _no_user_tables(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv('ASTROALGO_TABLE_PATH', raising=False)


def test_parse_minimal_table() -> None:
    """Sections become term series of increasing power."""
    theory = vsop87.parse_table(MINIMAL_TABLE.splitlines(), 'toy')
    assert theory.name == 'toy'
    assert len(theory.longitude) == 2
    assert theory.longitude[1].power == 1
    assert theory.term_count == 4
    position = theory.position(2451545.0)
    assert position.longitude == pytest.approx(57.29577951, abs=1e-6)
    assert position.latitude == 0.0
    assert position.radius == pytest.approx(1.0)


@pytest.mark.parametrize(
    ('text', 'line'),
    [
        ('1.0 0.0 0.0\n', 1),
        ('L0\n1.0 0.0\n', 2),
        ('L0\n1.0 x 0.0\n', 2),
        ('L0\n1 0 0\nL0\n', 3),
        ('L0\n1 0 0\nB0\n0 0 0\n', 4),
    ],
)
def test_parse_errors_name_the_line(text: str, line: int) -> None:
    """Malformed tables raise TheoryTableFormatError with file and line."""
    with pytest.raises(TheoryTableFormatError) as excinfo:
        vsop87.parse_table(text.splitlines(), 'bad', 'bad.txt')
    assert excinfo.value.line_number == line
    assert str(excinfo.value).startswith(f'bad.txt:{line}:')


def test_bundled_tables_are_found() -> None:
    """Earth, Venus and Neptune ship with the package."""
    assert get_table_paths() == [BUNDLED_TABLE_PATH]
    for name in ('earth', 'venus', 'Neptune'):
        assert vsop87.has_theory(name)
    assert not vsop87.has_theory('mars')


def test_missing_table_lists_search_path() -> None:
    """The error names every place that was searched."""
    with pytest.raises(TheoryTableNotFoundError) as excinfo:
        vsop87.find_table('mars')
    assert excinfo.value.body == 'mars'
    assert str(BUNDLED_TABLE_PATH / 'mars.txt') in excinfo.value.searched


def test_user_table_directory(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """ASTROALGO_TABLE_PATH is searched before the bundled tables."""
    (tmp_path / 'mars.txt').write_text(MINIMAL_TABLE, encoding='utf-8')
    monkeypatch.setenv('ASTROALGO_TABLE_PATH', str(tmp_path))
    assert vsop87.find_table('mars') == tmp_path / 'mars.txt'
    theory = vsop87.load_theory('mars')
    assert theory.source == str(tmp_path / 'mars.txt')
    assert vsop87.load_theory('MARS') is theory


def test_load_theory_is_cached() -> None:
    """Repeated loads share one theory object."""
    assert vsop87.earth_theory() is vsop87.load_theory('earth')


def test_earth_position() -> None:
    """Meeus example 25.b: Earth on 1992 October 13.0 TD."""
    position = vsop87.earth_theory().position(2448908.5)
    assert position.longitude == pytest.approx(19.907372, abs=2e-5)
    assert position.latitude == pytest.approx(-0.000179, abs=5e-6)
    assert position.radius == pytest.approx(0.99760775, abs=1e-6)


def test_venus_position() -> None:
    """Meeus example 32.a: Venus on 1992 December 20.0 TD."""
    position = vsop87.load_theory('venus').position(2448976.5)
    assert position.longitude == pytest.approx(26.11428, abs=2e-3)
    assert position.latitude == pytest.approx(-2.62070, abs=2e-3)
    assert position.radius == pytest.approx(0.724603, abs=2e-5)


def test_light_time_shifts_the_instant() -> None:
    """A light-time of one day equals evaluating one day earlier."""
    venus = vsop87.load_theory('venus')
    assert venus.position(2448976.5, light_time=1.0) == venus.position(2448975.5)
