"""Deterministic daily horoscope scores.

A score never depends on the wall clock or on system randomness. The same
chart and date produce the same numbers in every process, on every machine.
"""

from __future__ import annotations

import hashlib
from datetime import date
from datetime import datetime as datetime_type
from typing import Sequence

from .models import BirthChart, HoroscopeScores
from .zodiac import Element

BASE_LOW = 35
BASE_HIGH = 95

# Body whose placement colours each category.
SCORE_RULERS = {
    "overall": "Moon",
    "love": "Venus",
    "career": "Saturn",
    "wealth": "Jupiter",
}

_COMPATIBLE = {
    frozenset((Element.FIRE, Element.AIR)),
    frozenset((Element.EARTH, Element.WATER)),
}


def seed_for(chart: BirthChart, day: date, salt: str = "") -> int:
    """SHA-256 seed over the chart identity, the date and a salt."""

    iso_year, iso_week, _ = day.isocalendar()
    parts = [
        str(chart.sun_sign.index),
        str(chart.moon_sign.index),
        str(day.year),
        str(day.timetuple().tm_yday),
        f"{iso_year}W{iso_week:02d}",
        salt,
    ]
    return seed_from_parts(parts)


def seed_from_parts(parts: Sequence[str]) -> int:
    digest = hashlib.sha256("|".join(parts).encode("utf-8")).hexdigest()
    return int(digest, 16)


def index_for(seed: int, count: int) -> int:
    """Pick a stable index into a collection of ``count`` entries."""

    if count <= 0:
        raise ValueError("cannot pick from an empty collection")
    return seed % count


def element_harmony(first: Element, second: Element) -> int:
    """+4 for the same element, +2 for a supportive pair, -2 otherwise."""

    if first == second:
        return 4
    if frozenset((first, second)) in _COMPATIBLE:
        return 2
    return -2


class ScoringEngine:
    def natal_modifier(self, chart: BirthChart, category: str) -> int:
        ruler = chart.body(SCORE_RULERS[category])
        return element_harmony(chart.sun_sign.element, ruler.sign.element) + element_harmony(
            chart.moon_sign.element, ruler.sign.element
        ) // 2

    def category_score(self, chart: BirthChart, day: date, category: str) -> int:
        seed = seed_for(chart, day, salt=category)
        base = BASE_LOW + index_for(seed, BASE_HIGH - BASE_LOW + 1)
        return base + self.natal_modifier(chart, category)

    def scores(self, chart: BirthChart, day: date) -> HoroscopeScores:
        if isinstance(day, datetime_type):
            day = day.date()
        return HoroscopeScores(
            overall=self.category_score(chart, day, "overall"),
            love=self.category_score(chart, day, "love"),
            career=self.category_score(chart, day, "career"),
            wealth=self.category_score(chart, day, "wealth"),
            date=day,
        )
