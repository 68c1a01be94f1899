"""Deterministic natal charts, transits, scores and insights."""

from .astro_engine import EphemerisAdapter, SwissEphemerisAdapter, set_ephe_path
from .errors import (
    EphemerisUnavailable,
    HoroscopeEngineError,
    IncompleteEphemerisData,
    InvalidBirthData,
    InvalidLongitude,
    UndefinedAscendant,
)
from .models import BirthChart, BirthData, HoroscopeScores
from .service import AstrologyService

__all__ = [
    "AstrologyService",
    "BirthChart",
    "BirthData",
    "EphemerisAdapter",
    "EphemerisUnavailable",
    "HoroscopeEngineError",
    "HoroscopeScores",
    "IncompleteEphemerisData",
    "InvalidBirthData",
    "InvalidLongitude",
    "SwissEphemerisAdapter",
    "UndefinedAscendant",
    "set_ephe_path",
]
