"""Ephemeris adapters: the only place planetary positions enter the engine."""

from __future__ import annotations

import logging
import math
import os
from datetime import datetime
from typing import Optional, Protocol

import swisseph as swe

from .errors import EphemerisUnavailable
from .houses import julian_day
from .models import BODY_NAMES, House, HouseGeometry, RawPosition

LOG = logging.getLogger(__name__)

EPHE_PATH = os.environ.get("SWISSEPH_EPHE")
PLANETS: list[tuple[str, int]] = [
    ("Sun", swe.SUN),
    ("Moon", swe.MOON),
    ("Mercury", swe.MERCURY),
    ("Venus", swe.VENUS),
    ("Mars", swe.MARS),
    ("Jupiter", swe.JUPITER),
    ("Saturn", swe.SATURN),
    ("Uranus", swe.URANUS),
    ("Neptune", swe.NEPTUNE),
    ("Pluto", swe.PLUTO),
]


class EphemerisAdapter(Protocol):
    """Source of raw astronomical data.

    Implementations either return complete data or raise
    ``EphemerisUnavailable``. Partial results are never returned.
    """

    def body_positions(self, instant: datetime) -> dict[str, RawPosition]:
        ...

    def house_geometry(self, instant: datetime, latitude: float, longitude: float, system: str) -> HouseGeometry:
        ...


def set_ephe_path(path: Optional[str]) -> None:
    """Override the ephemeris directory used for all Swiss Ephemeris calls."""

    global EPHE_PATH
    EPHE_PATH = path


class SwissEphemerisAdapter:
    """pyswisseph-backed adapter.

    Uses the Swiss ephemeris files when a path is configured (argument,
    ``set_ephe_path`` or ``SWISSEPH_EPHE``) and the built-in Moshier
    ephemeris otherwise.
    """

    def __init__(self, ephe_path: Optional[str] = None, prefer_moshier: bool = False) -> None:
        self.ephe_path = ephe_path or EPHE_PATH
        self.prefer_moshier = prefer_moshier or not self.ephe_path
        if self.ephe_path and not self.prefer_moshier:
            swe.set_ephe_path(self.ephe_path)
            self.flags = swe.FLG_SWIEPH | swe.FLG_SPEED
        else:
            self.flags = swe.FLG_MOSEPH | swe.FLG_SPEED
        LOG.debug("ephemeris adapter ready path=%s moshier=%s", self.ephe_path, self.prefer_moshier)

    def body_positions(self, instant: datetime) -> dict[str, RawPosition]:
        jd_ut = julian_day(instant)
        positions: dict[str, RawPosition] = {}
        for name, swe_id in PLANETS:
            positions[name] = self._body_position(jd_ut, name, swe_id)
        LOG.debug("computed %d bodies at jd=%.5f", len(positions), jd_ut)
        return positions

    def house_geometry(self, instant: datetime, latitude: float, longitude: float, system: str) -> HouseGeometry:
        jd_ut = julian_day(instant)
        code = system.upper().encode("ascii")
        try:
            cusps, ascmc = swe.houses_ex(jd_ut, latitude, longitude, code)
        except swe.Error as exc:
            raise EphemerisUnavailable(f"house calculation failed for system {system!r}: {exc}") from exc

        if len(cusps) < 12 or len(ascmc) < 2:
            raise EphemerisUnavailable(f"house calculation returned {len(cusps)} cusps for system {system!r}")
        values = [float(c) for c in cusps[:12]] + [float(ascmc[0]), float(ascmc[1])]
        if not all(math.isfinite(v) for v in values):
            raise EphemerisUnavailable(f"house calculation returned non-finite values for system {system!r}")

        return HouseGeometry(
            ascendant=float(ascmc[0]) % 360.0,
            midheaven=float(ascmc[1]) % 360.0,
            houses=tuple(House(number=i + 1, cusp=float(c) % 360.0) for i, c in enumerate(cusps[:12])),
            system=system.upper(),
        )

    def _body_position(self, jd_ut: float, name: str, swe_id: int) -> RawPosition:
        try:
            result = swe.calc_ut(jd_ut, swe_id, self.flags)
        except swe.Error as exc:
            raise EphemerisUnavailable(f"{name}: {exc}") from exc

        # pyswisseph returns either a flat tuple of floats or (position_tuple, retflag).
        if len(result) == 2 and isinstance(result[0], (tuple, list)):
            position = result[0]
        else:
            position = result
        if len(position) < 4:
            raise EphemerisUnavailable(f"{name}: malformed ephemeris result {result!r}")

        lon, lat, dist, speed = (float(v) for v in position[:4])
        if not all(math.isfinite(v) for v in (lon, lat, dist, speed)):
            raise EphemerisUnavailable(f"{name}: non-finite ephemeris result")
        return RawPosition(longitude=lon % 360.0, latitude=lat, distance=dist, speed=speed)


def require_complete(positions: dict[str, RawPosition]) -> dict[str, RawPosition]:
    """Raise ``EphemerisUnavailable`` unless all ten bodies are present."""

    missing = [name for name in BODY_NAMES if name not in positions]
    if missing:
        raise EphemerisUnavailable(f"ephemeris returned no data for {', '.join(missing)}")
    return positions
