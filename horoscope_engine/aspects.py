"""Major aspects between two sets of bodies."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from .models import Aspect, AspectType, CelestialBody

# Checked in this order; ties on deviation keep the earlier type.
ASPECT_TYPES: list[AspectType] = list(AspectType)


def _shortest_distance(a: float, b: float) -> float:
    diff = abs(a - b) % 360.0
    return 360.0 - diff if diff > 180.0 else diff


def angular_separation(a: CelestialBody, b: CelestialBody) -> float:
    """Separation between two bodies folded into [0, 180]."""

    return _shortest_distance(a.longitude, b.longitude)


def is_applying(aspect: Aspect) -> bool:
    """True when the bodies' daily motion brings the aspect closer to exact."""

    step = 0.01  # days
    p1, p2 = aspect.first, aspect.second
    later = _shortest_distance(p1.longitude + p1.speed * step, p2.longitude + p2.speed * step)
    return abs(later - aspect.type.angle) < aspect.orb


class AspectEngine:
    """Detects conjunction, sextile, square, trine and opposition.

    ``max_orb`` tightens every orb (the daily Moon reading uses 3 degrees).
    """

    def __init__(self, max_orb: Optional[float] = None) -> None:
        self.max_orb = max_orb

    def orb_for(self, aspect_type: AspectType) -> float:
        if self.max_orb is None:
            return aspect_type.orb
        return min(aspect_type.orb, self.max_orb)

    def aspect_between(self, a: CelestialBody, b: CelestialBody) -> Optional[Aspect]:
        separation = angular_separation(a, b)
        best: Optional[Aspect] = None
        for aspect_type in ASPECT_TYPES:
            deviation = abs(separation - aspect_type.angle)
            if deviation > self.orb_for(aspect_type):
                continue
            if best is None or deviation < best.orb:
                best = Aspect(first=a, second=b, type=aspect_type, orb=deviation)
        return best

    def aspects_between(
        self,
        bodies_a: Sequence[CelestialBody],
        bodies_b: Optional[Sequence[CelestialBody]] = None,
    ) -> list[Aspect]:
        """All aspects, tightest first.

        One set (or the same set passed twice) compares every unordered pair
        of distinct bodies once. Two sets compare every (a, b) pair.
        """

        found: list[Aspect] = []
        if bodies_b is None or bodies_b is bodies_a:
            for i, a in enumerate(bodies_a):
                for b in bodies_a[i + 1:]:
                    aspect = self.aspect_between(a, b)
                    if aspect is not None:
                        found.append(aspect)
        else:
            for a in bodies_a:
                for b in bodies_b:
                    aspect = self.aspect_between(a, b)
                    if aspect is not None:
                        found.append(aspect)
        # sorted() is stable, so equal deviations keep pair order.
        return sorted(found, key=lambda asp: asp.orb)


def dominant_aspect(aspects: Iterable[Aspect]) -> Optional[Aspect]:
    """The tightest aspect, or None for an empty input."""

    best: Optional[Aspect] = None
    for aspect in aspects:
        if best is None or aspect.orb < best.orb:
            best = aspect
    return best
