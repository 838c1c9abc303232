"""Tests for environment-driven configuration."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import pytest

from astroalgo import config
from astroalgo.constants import DEFAULT_LATITUDE, DEFAULT_LONGITUDE, DEFAULT_ZONE


def test_table_paths_default(monkeypatch: pytest.MonkeyPatch) -> None:
    """Without ASTROALGO_TABLE_PATH only the bundled tables are searched."""
    monkeypatch.delenv('ASTROALGO_TABLE_PATH', raising=False)
    assert config.get_table_paths() == [config.BUNDLED_TABLE_PATH]
    assert (config.BUNDLED_TABLE_PATH / 'earth.txt').is_file()


def test_table_paths_from_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """User directories come first, in the order given."""
    first = tmp_path / 'a'
    second = tmp_path / 'b'
    monkeypatch.setenv('ASTROALGO_TABLE_PATH', f'{first}{os.pathsep}{os.pathsep}{second}')
    assert config.get_table_paths() == [first, second, config.BUNDLED_TABLE_PATH]


def test_default_observer_values(monkeypatch: pytest.MonkeyPatch) -> None:
    """Unset variables give the built-in defaults."""
    for name in ('ASTROALGO_LATITUDE', 'ASTROALGO_LONGITUDE', 'ASTROALGO_ZONE'):
        monkeypatch.delenv(name, raising=False)
    assert config.get_default_latitude() == DEFAULT_LATITUDE
    assert config.get_default_longitude() == DEFAULT_LONGITUDE
    assert config.get_default_zone() == DEFAULT_ZONE


def test_default_observer_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Variables override the defaults; blanks are trimmed."""
    monkeypatch.setenv('ASTROALGO_LATITUDE', ' -33.86 ')
    monkeypatch.setenv('ASTROALGO_LONGITUDE', '151.21')
    monkeypatch.setenv('ASTROALGO_ZONE', 'Australia/Sydney')
    assert config.get_default_latitude() == -33.86
    assert config.get_default_longitude() == 151.21
    assert config.get_default_zone() == 'Australia/Sydney'


def test_invalid_latitude_warns(monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture) -> None:
    """A non-numeric value is logged and the default used."""
    monkeypatch.setenv('ASTROALGO_LATITUDE', 'north')
    with caplog.at_level(logging.WARNING, logger='astroalgo.config'):
        assert config.get_default_latitude() == DEFAULT_LATITUDE
    assert 'ASTROALGO_LATITUDE' in caplog.text
