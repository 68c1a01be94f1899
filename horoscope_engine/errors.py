"""Typed failures raised by the engine.

Every error is raised at the boundary closest to its cause. Nothing in the
engine converts one of these into a placeholder value.
"""

from __future__ import annotations


class HoroscopeEngineError(Exception):
    """Base class for every failure the engine reports."""


class InvalidLongitude(HoroscopeEngineError, ValueError):
    """A non-finite angle reached the zodiac mapper."""

    def __init__(self, value: object) -> None:
        super().__init__(f"longitude must be a finite number, got {value!r}")
        self.value = value


class InvalidBirthData(HoroscopeEngineError, ValueError):
    """Birth coordinates, timezone or date are outside the supported domain."""


class UndefinedAscendant(HoroscopeEngineError, ValueError):
    """House geometry cannot be computed for this latitude."""

    def __init__(self, latitude: float, limit: float) -> None:
        super().__init__(
            f"ascendant is undefined at latitude {latitude:.4f} (|latitude| must stay below {limit:.2f})"
        )
        self.latitude = latitude
        self.limit = limit


class IncompleteEphemerisData(HoroscopeEngineError, ValueError):
    """Fewer than ten bodies or twelve houses were supplied."""


class EphemerisUnavailable(HoroscopeEngineError, RuntimeError):
    """The ephemeris backend failed or returned partial data."""
