"""Planetary positions for a target date."""

from __future__ import annotations

import logging
from datetime import date, datetime, time, timezone
from typing import Optional, Sequence, Union

from .astro_engine import EphemerisAdapter, require_complete
from .chart import bodies_from_positions
from .models import BODY_NAMES, CelestialBody

LOG = logging.getLogger(__name__)

NO_MOON_LABEL = "COSMIC ALIGNMENT IN PROGRESS"
TRANSIT_HOUR = time(12, 0, tzinfo=timezone.utc)


def transit_instant(at: Union[date, datetime]) -> datetime:
    """A calendar date maps to 12:00 UTC; a naive datetime is read as UTC."""

    if isinstance(at, datetime):
        if at.tzinfo is None:
            return at.replace(tzinfo=timezone.utc)
        return at
    return datetime.combine(at, TRANSIT_HOUR)


def find_body(bodies: Sequence[CelestialBody], name: str) -> Optional[CelestialBody]:
    for body in bodies:
        if body.name == name:
            return body
    return None


def moon_label(bodies: Sequence[CelestialBody]) -> str:
    """``"MOON IN PISCES"`` for the transit set, or the fallback headline."""

    moon = find_body(bodies, "Moon")
    if moon is None:
        return NO_MOON_LABEL
    return f"MOON IN {moon.sign.value.upper()}"


def transit_summary(bodies: Sequence[CelestialBody]) -> str:
    """One line per body, e.g. ``"Mars ♈ 12°04' R"``."""

    lines = []
    for body in bodies:
        flag = " R" if body.retrograde else ""
        lines.append(f"{body.name} {body.formatted_position}{flag}")
    return "\n".join(lines)


class TransitCalculator:
    def __init__(self, adapter: EphemerisAdapter) -> None:
        self.adapter = adapter

    def positions_at(self, at: Union[date, datetime]) -> list[CelestialBody]:
        instant = transit_instant(at)
        positions = require_complete(self.adapter.body_positions(instant))
        bodies = bodies_from_positions({name: positions[name] for name in BODY_NAMES})
        LOG.debug("transits at %s: %s", instant.isoformat(), ", ".join(f"{b.name}={b.longitude:.2f}" for b in bodies))
        return list(bodies)

    def body(self, at: Union[date, datetime], name: str) -> CelestialBody:
        body = find_body(self.positions_at(at), name)
        if body is None:
            raise KeyError(name)
        return body
