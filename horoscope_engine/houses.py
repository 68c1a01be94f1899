"""Ascendant, midheaven and house cusps from sidereal time.

The calculator implements two house systems:

- ``"E"`` Equal houses: cusp n = ascendant + 30 * (n - 1). Default.
- ``"O"`` Porphyry: each quadrant between ASC, IC, DSC and MC is trisected.

Both put house 1 on the ascendant. Other systems (Placidus and friends) come
from the ephemeris adapter; see ``AstrologyService``.
"""

from __future__ import annotations

import logging
import math
import os
from datetime import datetime, timezone

from .errors import InvalidBirthData, UndefinedAscendant
from .models import House, HouseGeometry
from .zodiac import normalize_longitude

LOG = logging.getLogger(__name__)

J2000 = 2451545.0
UNIX_EPOCH_JD = 2440587.5

HOUSE_SYSTEMS = {
    "E": "Equal",
    "O": "Porphyry",
}
DEFAULT_HOUSE_SYSTEM = os.environ.get("HOROSCOPE_HOUSE_SYSTEM", "E").upper()


def julian_day(instant: datetime) -> float:
    """Julian day (UT) for an aware datetime; naive values are read as UTC."""

    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    seconds = instant.astimezone(timezone.utc).timestamp()
    return UNIX_EPOCH_JD + seconds / 86400.0


def julian_centuries(jd: float) -> float:
    return (jd - J2000) / 36525.0


def greenwich_sidereal_time(jd: float) -> float:
    """Greenwich mean sidereal time in degrees (IAU 1982 expression)."""

    t = julian_centuries(jd)
    theta = (
        280.46061837
        + 360.98564736629 * (jd - J2000)
        + 0.000387933 * t * t
        - t * t * t / 38710000.0
    )
    return normalize_longitude(theta)


def local_sidereal_time(jd: float, longitude: float) -> float:
    """Right ascension of the meridian (RAMC) for an east-positive longitude."""

    return normalize_longitude(greenwich_sidereal_time(jd) + longitude)


def mean_obliquity(jd: float) -> float:
    """Mean obliquity of the ecliptic in degrees (IAU 1980)."""

    t = julian_centuries(jd)
    arcsec = 21.448 - t * (46.8150 + t * (0.00059 - t * 0.001813))
    return 23.0 + (26.0 + arcsec / 60.0) / 60.0


def polar_limit(obliquity: float) -> float:
    """Latitude beyond which the ecliptic can fail to cross the horizon."""

    return 90.0 - obliquity


def midheaven_longitude(ramc: float, obliquity: float) -> float:
    r = math.radians(ramc)
    e = math.radians(obliquity)
    return normalize_longitude(math.degrees(math.atan2(math.sin(r), math.cos(r) * math.cos(e))))


def ascendant_longitude(ramc: float, obliquity: float, latitude: float) -> float:
    r = math.radians(ramc)
    e = math.radians(obliquity)
    phi = math.radians(latitude)
    y = math.cos(r)
    x = -(math.sin(r) * math.cos(e) + math.tan(phi) * math.sin(e))
    return normalize_longitude(math.degrees(math.atan2(y, x)))


def equal_cusps(ascendant: float) -> list[float]:
    return [normalize_longitude(ascendant + 30.0 * i) for i in range(12)]


def porphyry_cusps(ascendant: float, midheaven: float) -> list[float]:
    """Trisect the four quadrants between the angles."""

    ic = normalize_longitude(midheaven + 180.0)
    dsc = normalize_longitude(ascendant + 180.0)
    cusps = [0.0] * 12
    # (start cusp index, start angle, end angle) for houses 1, 4, 7 and 10.
    quadrants = [(0, ascendant, ic), (3, ic, dsc), (6, dsc, midheaven), (9, midheaven, ascendant)]
    for start_index, start, end in quadrants:
        span = (end - start) % 360.0
        for step in range(3):
            cusps[start_index + step] = normalize_longitude(start + span * step / 3.0)
    return cusps


class HouseCalculator:
    """Computes angles and cusps for one fixed house system."""

    def __init__(self, system: str = DEFAULT_HOUSE_SYSTEM) -> None:
        system = system.upper()
        if system not in HOUSE_SYSTEMS:
            raise ValueError(f"unsupported house system {system!r}; expected one of {sorted(HOUSE_SYSTEMS)}")
        self.system = system

    def houses(self, instant: datetime, latitude: float, longitude: float) -> HouseGeometry:
        _check_coordinates(latitude, longitude)
        jd = julian_day(instant)
        obliquity = mean_obliquity(jd)
        check_polar(latitude, obliquity)

        ramc = local_sidereal_time(jd, longitude)
        mc = midheaven_longitude(ramc, obliquity)
        asc = ascendant_longitude(ramc, obliquity, latitude)
        if not (math.isfinite(asc) and math.isfinite(mc)):
            raise UndefinedAscendant(latitude, polar_limit(obliquity))

        if self.system == "O":
            cusps = porphyry_cusps(asc, mc)
        else:
            cusps = equal_cusps(asc)
        LOG.debug("houses jd=%.5f ramc=%.4f asc=%.4f mc=%.4f system=%s", jd, ramc, asc, mc, self.system)

        return HouseGeometry(
            ascendant=asc,
            midheaven=mc,
            houses=tuple(House(number=i + 1, cusp=c) for i, c in enumerate(cusps)),
            system=self.system,
        )


def check_polar(latitude: float, obliquity: float) -> None:
    """Raise ``UndefinedAscendant`` inside the polar circles."""

    limit = polar_limit(obliquity)
    if abs(latitude) >= limit:
        raise UndefinedAscendant(latitude, limit)


def _check_coordinates(latitude: float, longitude: float) -> None:
    if not (math.isfinite(latitude) and -90.0 <= latitude <= 90.0):
        raise InvalidBirthData(f"latitude must be within [-90, 90], got {latitude!r}")
    if not (math.isfinite(longitude) and -180.0 <= longitude <= 180.0):
        raise InvalidBirthData(f"longitude must be within [-180, 180], got {longitude!r}")
