"""Assemble a BirthChart from raw ephemeris output."""

from __future__ import annotations

import logging
import math
from typing import Mapping
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .errors import IncompleteEphemerisData, InvalidBirthData
from .models import BODY_NAMES, BODY_SYMBOLS, BirthChart, BirthData, CelestialBody, House, HouseGeometry, RawPosition
from .zodiac import normalize_longitude

LOG = logging.getLogger(__name__)

MIN_YEAR = 1800
MAX_YEAR = 2399


def validate_birth_data(birth_data: BirthData) -> None:
    """Reject birth data outside the supported domain with ``InvalidBirthData``."""

    lat, lon = birth_data.latitude, birth_data.longitude
    if not isinstance(lat, (int, float)) or not math.isfinite(lat) or not -90.0 <= lat <= 90.0:
        raise InvalidBirthData(f"latitude must be within [-90, 90], got {lat!r}")
    if not isinstance(lon, (int, float)) or not math.isfinite(lon) or not -180.0 <= lon <= 180.0:
        raise InvalidBirthData(f"longitude must be within [-180, 180], got {lon!r}")

    try:
        ZoneInfo(birth_data.timezone)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise InvalidBirthData(f"unknown timezone {birth_data.timezone!r}") from exc

    year = birth_data.utc_instant.year
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise InvalidBirthData(f"birth year {year} is outside the supported range {MIN_YEAR}-{MAX_YEAR}")


def bodies_from_positions(positions: Mapping[str, RawPosition]) -> tuple[CelestialBody, ...]:
    """Turn adapter output into the ten bodies in canonical order."""

    missing = [name for name in BODY_NAMES if name not in positions]
    unknown = sorted(set(positions) - set(BODY_NAMES))
    if missing or unknown:
        details = []
        if missing:
            details.append(f"missing {', '.join(missing)}")
        if unknown:
            details.append(f"unexpected {', '.join(unknown)}")
        raise IncompleteEphemerisData("expected the ten chart bodies: " + "; ".join(details))

    return tuple(
        CelestialBody(
            name=name,
            symbol=BODY_SYMBOLS[name],
            longitude=normalize_longitude(positions[name].longitude),
            latitude=positions[name].latitude,
            distance=positions[name].distance,
            speed=positions[name].speed,
        )
        for name in BODY_NAMES
    )


class ChartBuilder:
    def build(self, birth_data: BirthData, bodies: Mapping[str, RawPosition], houses: HouseGeometry) -> BirthChart:
        chart_bodies = bodies_from_positions(bodies)

        numbers = sorted(h.number for h in houses.houses)
        if numbers != list(range(1, 13)):
            raise IncompleteEphemerisData(f"expected houses 1-12, got {numbers}")
        ordered = tuple(
            House(number=h.number, cusp=normalize_longitude(h.cusp))
            for h in sorted(houses.houses, key=lambda h: h.number)
        )

        chart = BirthChart(
            birth_data=birth_data,
            bodies=chart_bodies,
            ascendant=normalize_longitude(houses.ascendant),
            midheaven=normalize_longitude(houses.midheaven),
            houses=ordered,
            house_system=houses.system,
        )
        LOG.debug(
            "built chart sun=%s moon=%s asc=%s system=%s",
            chart.sun_sign.value,
            chart.moon_sign.value,
            chart.ascendant_sign.value,
            chart.house_system,
        )
        return chart
