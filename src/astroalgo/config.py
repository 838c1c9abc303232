"""Configuration: table search path and default observer from environment."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from astroalgo.constants import DEFAULT_LATITUDE, DEFAULT_LONGITUDE, DEFAULT_ZONE

logger = logging.getLogger(__name__)

# Bundled VSOP87D tables live next to the package sources.
BUNDLED_TABLE_PATH = Path(__file__).resolve().parent / 'data' / 'vsop87'


def get_table_paths() -> list[Path]:
    """Return directories searched for VSOP87 table files, in order.

    ASTROALGO_TABLE_PATH may hold one or more directories separated by
    os.pathsep; they are searched before the bundled tables.

    Returns:
        List of directories (user directories first, bundled last).
    """
    paths: list[Path] = []
    raw = os.environ.get('ASTROALGO_TABLE_PATH', '').strip()
    if raw:
        paths.extend(Path(p).expanduser() for p in raw.split(os.pathsep) if p.strip())
    paths.append(BUNDLED_TABLE_PATH)
    return paths


def _float_from_env(name: str, default: float) -> float:
    raw = os.environ.get(name, '').strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning('Ignoring invalid %s=%r; using %s', name, raw, default)
        return default


def get_default_latitude() -> float:
    """Return default observer latitude in degrees (ASTROALGO_LATITUDE or default)."""
    return _float_from_env('ASTROALGO_LATITUDE', DEFAULT_LATITUDE)


def get_default_longitude() -> float:
    """Return default observer east longitude in degrees (ASTROALGO_LONGITUDE or default)."""
    return _float_from_env('ASTROALGO_LONGITUDE', DEFAULT_LONGITUDE)


def get_default_zone() -> str:
    """Return default IANA time zone name (ASTROALGO_ZONE env var or default).

    Returns:
        Zone name string; validated later by time_utils.resolve_zone.
    """
    return os.environ.get('ASTROALGO_ZONE', '').strip() or DEFAULT_ZONE
