"""Dataclasses that capture the chart data used throughout the project."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date as date_type
from datetime import datetime, timezone
from enum import Enum
from typing import Optional
from zoneinfo import ZoneInfo

from .zodiac import ZodiacPosition, ZodiacSign, format_position, normalize_longitude, sign_of

BODY_NAMES: list[str] = [
    "Sun",
    "Moon",
    "Mercury",
    "Venus",
    "Mars",
    "Jupiter",
    "Saturn",
    "Uranus",
    "Neptune",
    "Pluto",
]

BODY_SYMBOLS = {
    "Sun": "☉",
    "Moon": "☽",
    "Mercury": "☿",
    "Venus": "♀",
    "Mars": "♂",
    "Jupiter": "♃",
    "Saturn": "♄",
    "Uranus": "♅",
    "Neptune": "♆",
    "Pluto": "♇",
}

PERSONAL_BODIES = ["Sun", "Moon", "Mercury", "Venus", "Mars"]
OUTER_BODIES = ["Uranus", "Neptune", "Pluto"]


@dataclass(frozen=True)
class BirthData:
    """Birth moment and place.

    ``instant`` may be naive, in which case it is read as local civil time in
    ``timezone``.
    """

    instant: datetime
    latitude: float
    longitude: float
    timezone: str = "UTC"
    label: Optional[str] = None

    @property
    def utc_instant(self) -> datetime:
        if self.instant.tzinfo is None:
            local = self.instant.replace(tzinfo=ZoneInfo(self.timezone))
        else:
            local = self.instant
        return local.astimezone(timezone.utc)


@dataclass(frozen=True)
class RawPosition:
    """One body as reported by an ephemeris backend."""

    longitude: float
    latitude: float
    distance: float
    speed: float


@dataclass(frozen=True)
class CelestialBody:
    """Computed placement for a single body."""

    name: str
    symbol: str
    longitude: float
    latitude: float
    distance: float
    speed: float

    @property
    def position(self) -> ZodiacPosition:
        return sign_of(self.longitude)

    @property
    def sign(self) -> ZodiacSign:
        return self.position.sign

    @property
    def retrograde(self) -> bool:
        return self.speed < 0

    @property
    def formatted_position(self) -> str:
        return format_position(self.longitude)


@dataclass(frozen=True)
class House:
    number: int
    cusp: float

    @property
    def sign(self) -> ZodiacSign:
        return sign_of(self.cusp).sign


@dataclass(frozen=True)
class HouseGeometry:
    """Ascendant, midheaven and the twelve cusps for one house system."""

    ascendant: float
    midheaven: float
    houses: tuple[House, ...]
    system: str = "E"

    @property
    def cusps(self) -> list[float]:
        return [h.cusp for h in self.houses]


@dataclass(frozen=True)
class BirthChart:
    """Natal chart. Derived from BirthData on demand, never mutated."""

    birth_data: BirthData
    bodies: tuple[CelestialBody, ...]
    ascendant: float
    midheaven: float
    houses: tuple[House, ...]
    house_system: str = "E"

    def body(self, name: str) -> CelestialBody:
        for b in self.bodies:
            if b.name == name:
                return b
        raise KeyError(name)

    @property
    def sun(self) -> CelestialBody:
        return self.body("Sun")

    @property
    def moon(self) -> CelestialBody:
        return self.body("Moon")

    @property
    def mercury(self) -> CelestialBody:
        return self.body("Mercury")

    @property
    def venus(self) -> CelestialBody:
        return self.body("Venus")

    @property
    def mars(self) -> CelestialBody:
        return self.body("Mars")

    @property
    def jupiter(self) -> CelestialBody:
        return self.body("Jupiter")

    @property
    def saturn(self) -> CelestialBody:
        return self.body("Saturn")

    @property
    def sun_sign(self) -> ZodiacSign:
        return self.sun.sign

    @property
    def moon_sign(self) -> ZodiacSign:
        return self.moon.sign

    @property
    def ascendant_sign(self) -> ZodiacSign:
        return sign_of(self.ascendant).sign

    @property
    def rising_sign(self) -> ZodiacSign:
        return self.ascendant_sign

    def house_of(self, longitude: float) -> int:
        """Return the house number whose cusp span contains ``longitude``."""

        lon = normalize_longitude(longitude)
        cusps = [h.cusp for h in self.houses]
        for i, start in enumerate(cusps):
            end = cusps[(i + 1) % 12]
            span = (end - start) % 360.0
            if (lon - start) % 360.0 < span:
                return self.houses[i].number
        return self.houses[0].number


class AspectType(Enum):
    CONJUNCTION = "Conjunction"
    SEXTILE = "Sextile"
    SQUARE = "Square"
    TRINE = "Trine"
    OPPOSITION = "Opposition"

    @property
    def angle(self) -> float:
        return ASPECT_ANGLES[self]

    @property
    def orb(self) -> float:
        return ASPECT_ORBS[self]

    @property
    def symbol(self) -> str:
        return ASPECT_SYMBOLS[self]

    @property
    def is_hard(self) -> bool:
        return self in (AspectType.SQUARE, AspectType.OPPOSITION)

    @property
    def is_soft(self) -> bool:
        return self in (AspectType.TRINE, AspectType.SEXTILE)


ASPECT_ANGLES = {
    AspectType.CONJUNCTION: 0.0,
    AspectType.SEXTILE: 60.0,
    AspectType.SQUARE: 90.0,
    AspectType.TRINE: 120.0,
    AspectType.OPPOSITION: 180.0,
}

ASPECT_ORBS = {
    AspectType.CONJUNCTION: 8.0,
    AspectType.SEXTILE: 6.0,
    AspectType.SQUARE: 8.0,
    AspectType.TRINE: 8.0,
    AspectType.OPPOSITION: 8.0,
}

ASPECT_SYMBOLS = {
    AspectType.CONJUNCTION: "☌",
    AspectType.SEXTILE: "⚹",
    AspectType.SQUARE: "□",
    AspectType.TRINE: "△",
    AspectType.OPPOSITION: "☍",
}


@dataclass(frozen=True)
class Aspect:
    """Aspect between two bodies. ``orb`` is the deviation from the exact angle."""

    first: CelestialBody
    second: CelestialBody
    type: AspectType
    orb: float

    @property
    def description(self) -> str:
        return f"{self.first.name} {self.type.symbol} {self.second.name}"

    @property
    def label(self) -> str:
        """Human label such as ``"Venus opposite Mercury"``."""

        verb = {
            AspectType.CONJUNCTION: "conjunct",
            AspectType.SEXTILE: "sextile",
            AspectType.SQUARE: "square",
            AspectType.TRINE: "trine",
            AspectType.OPPOSITION: "opposite",
        }[self.type]
        return f"{self.first.name} {verb} {self.second.name}"


def _clamp_score(value: int) -> int:
    return max(0, min(100, int(value)))


@dataclass(frozen=True)
class HoroscopeScores:
    """Four category scores for one date, each clamped to [0, 100]."""

    overall: int
    love: int
    career: int
    wealth: int
    date: date_type

    def __post_init__(self) -> None:
        for name in ("overall", "love", "career", "wealth"):
            object.__setattr__(self, name, _clamp_score(getattr(self, name)))


class CycleInfluence(Enum):
    POSITIVE = "positive"
    CHALLENGING = "challenging"
    TRANSFORMATIVE = "transformative"
    NEUTRAL = "neutral"


@dataclass(frozen=True)
class AstrologicalCycle:
    title: str
    planetary_aspect: str
    duration: str
    description: str
    influence: CycleInfluence


@dataclass(frozen=True)
class TextTag:
    """Icon/category tag assigned to a piece of generated text."""

    category: str
    icon: str
