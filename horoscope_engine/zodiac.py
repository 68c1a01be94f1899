"""Ecliptic longitude to zodiac sign mapping."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from .errors import InvalidLongitude

SIGN_SPAN = 30.0
MINUTES_PER_SIGN = 30 * 60
MINUTES_PER_CIRCLE = 12 * MINUTES_PER_SIGN
MINUTE_SNAP_DIGITS = 6


class Element(Enum):
    FIRE = "Fire"
    EARTH = "Earth"
    AIR = "Air"
    WATER = "Water"


class ZodiacSign(Enum):
    ARIES = "Aries"
    TAURUS = "Taurus"
    GEMINI = "Gemini"
    CANCER = "Cancer"
    LEO = "Leo"
    VIRGO = "Virgo"
    LIBRA = "Libra"
    SCORPIO = "Scorpio"
    SAGITTARIUS = "Sagittarius"
    CAPRICORN = "Capricorn"
    AQUARIUS = "Aquarius"
    PISCES = "Pisces"

    @property
    def index(self) -> int:
        return SIGN_ORDER.index(self)

    @property
    def symbol(self) -> str:
        return SIGN_SYMBOLS[self.index]

    @property
    def element(self) -> Element:
        # Fire, Earth, Air, Water repeat around the wheel starting at Aries.
        return ELEMENT_ORDER[self.index % 4]

    @classmethod
    def from_index(cls, index: int) -> "ZodiacSign":
        return SIGN_ORDER[index % 12]


SIGN_ORDER: list[ZodiacSign] = list(ZodiacSign)
SIGNS: list[str] = [sign.value for sign in SIGN_ORDER]
SIGN_SYMBOLS = ["♈", "♉", "♊", "♋", "♌", "♍", "♎", "♏", "♐", "♑", "♒", "♓"]
ELEMENT_ORDER = [Element.FIRE, Element.EARTH, Element.AIR, Element.WATER]


@dataclass(frozen=True)
class ZodiacPosition:
    """A longitude expressed as sign, whole degree and arc minute."""

    sign: ZodiacSign
    degree: int
    minute: int

    def to_longitude(self) -> float:
        return self.sign.index * SIGN_SPAN + self.degree + self.minute / 60.0


def normalize_longitude(longitude: float) -> float:
    """Return ``longitude`` folded into [0, 360).

    Raises ``InvalidLongitude`` for NaN or infinite input.
    """

    if isinstance(longitude, bool) or not isinstance(longitude, (int, float)):
        raise InvalidLongitude(longitude)
    if not math.isfinite(longitude):
        raise InvalidLongitude(longitude)
    # Python's % already lands in [0, 360) for a positive divisor.
    normalized = longitude % 360.0
    # -1e-17 % 360 rounds up to exactly 360.0
    if normalized >= 360.0:
        normalized = 0.0
    return normalized


def sign_index(longitude: float) -> int:
    return sign_of(longitude).sign.index


def sign_of(longitude: float) -> ZodiacPosition:
    """Map an ecliptic longitude to (sign, degree, minute)."""

    # Whole arc minutes; snap float noise just below a minute boundary, then floor.
    total = math.floor(round(normalize_longitude(longitude) * 60.0, MINUTE_SNAP_DIGITS))
    total %= MINUTES_PER_CIRCLE
    index, within = divmod(total, MINUTES_PER_SIGN)
    degree, minute = divmod(within, 60)
    return ZodiacPosition(sign=SIGN_ORDER[index], degree=degree, minute=minute)


def format_degree(longitude: float) -> str:
    pos = sign_of(longitude)
    return f"{pos.degree}°{pos.minute:02d}'"


def format_position(longitude: float, use_symbol: bool = True) -> str:
    """Render ``331.5`` as ``"♓ 1°30'"`` (or ``"Pisces 1°30'"``)."""

    pos = sign_of(longitude)
    label = pos.sign.symbol if use_symbol else pos.sign.value
    return f"{label} {pos.degree}°{pos.minute:02d}'"
