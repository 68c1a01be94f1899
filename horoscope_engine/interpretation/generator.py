"""Deterministic insight text for a chart and a set of transits.

Every selection is a seeded index (see ``scoring.seed_for``), so the same
chart, transits and date always give the same text.
"""

from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..aspects import AspectEngine
from ..models import (
    OUTER_BODIES,
    PERSONAL_BODIES,
    AspectType,
    AstrologicalCycle,
    BirthChart,
    CelestialBody,
    CycleInfluence,
)
from ..scoring import index_for, seed_for
from ..transits import find_body
from . import corpus, lookups
from .themes import ThemeGenerator

CATEGORIES = ("love", "career", "money", "future", "general")

# Checked in order; the first category with a matching keyword wins.
QUESTION_KEYWORDS = [
    ("love", ("love", "relationship", "partner", "crush", "dating")),
    ("career", ("career", "work", "job", "boss", "promotion")),
    ("money", ("money", "finance", "salary", "invest", "debt")),
    ("future", ("future", "what will", "next year", "destiny")),
]

DAILY_MOON_ORB = 3.0
MAX_CYCLES = 3


def category_for_question(text: str) -> str:
    """Keyword intent classifier for a free-form question."""

    lowered = text.lower()
    for category, keywords in QUESTION_KEYWORDS:
        if any(word in lowered for word in keywords):
            return category
    return "general"


def duration_label(speed: float, orb: float) -> str:
    """How long a contact with this orb stays active at ``speed`` deg/day."""

    if speed == 0:
        return "> 30 days"
    days = 2.0 * orb / abs(speed)
    if days < 3:
        return "< 3 days"
    if days < 7:
        return "3-7 days"
    if days <= 30:
        return "1-4 weeks"
    return "> 30 days"


def cycle_influence(first: str, second: str, aspect_type: AspectType) -> CycleInfluence:
    if aspect_type.is_soft:
        return CycleInfluence.POSITIVE
    if aspect_type.is_hard:
        return CycleInfluence.CHALLENGING
    if first in OUTER_BODIES or second in OUTER_BODIES:
        return CycleInfluence.TRANSFORMATIVE
    return CycleInfluence.NEUTRAL


class InsightGenerator:
    def __init__(self) -> None:
        self.theme_generator = ThemeGenerator()

    # daily

    def daily_insight(
        self,
        chart: BirthChart,
        transit_bodies: Sequence[CelestialBody],
        day: date,
        category: Optional[str] = None,
    ) -> str:
        if category is not None:
            return self.category_insight(chart, transit_bodies, day, category)

        moon = find_body(transit_bodies, "Moon")
        if moon is None:
            return corpus.STEADY_DAY

        natal = [chart.body(name) for name in PERSONAL_BODIES]
        for aspect in AspectEngine(max_orb=DAILY_MOON_ORB).aspects_between([moon], natal):
            text = corpus.MOON_ASPECT_TEXTS.get((aspect.second.name, aspect.type))
            if text is not None:
                return text

        variations = corpus.MOON_SIGN_VARIATIONS[moon.sign]
        return variations[index_for(seed_for(chart, day, "daily-moon"), len(variations))]

    def category_insight(
        self,
        chart: BirthChart,
        transit_bodies: Sequence[CelestialBody],
        day: date,
        category: str,
    ) -> str:
        if category not in CATEGORIES:
            raise ValueError(f"unknown insight category {category!r}; expected one of {', '.join(CATEGORIES)}")

        moon = find_body(transit_bodies, "Moon")
        if category == "love":
            venus = chart.venus.sign
            need = lookups.VENUS_NEED[venus]
            if moon is not None:
                body = (
                    f"With Venus in {venus.value} in your chart and the Moon now in {moon.sign.value}, "
                    f"love moves through {moon.sign.element.value.lower()} energy today. "
                    f"Your {venus.value} Venus seeks {need}."
                )
            else:
                body = f"Your Venus in {venus.value} shows how you love: {need}."
        elif category == "career":
            sun, mars = chart.sun_sign, chart.mars.sign
            body = (
                f"Your {sun.value} Sun drives you toward {lookups.SUN_PURPOSE[sun]}, "
                f"while Mars in {mars.value} gives you {lookups.MARS_ENERGY[mars]}."
            )
        elif category == "money":
            sun = chart.sun_sign
            body = f"As a {sun.value}, your relationship with resources reflects {lookups.MONEY_MINDSET[sun]}."
        elif category == "future":
            jupiter = find_body(transit_bodies, "Jupiter")
            if jupiter is not None:
                body = (
                    f"Jupiter in {jupiter.sign.value} widens opportunities in "
                    f"{lookups.JUPITER_GROWTH[jupiter.sign]}."
                )
            else:
                body = "The future is written in your choices. Your chart shows potential; your actions shape it."
        else:
            sun, natal_moon = chart.sun_sign, chart.moon_sign
            if moon is not None:
                body = (
                    f"Your {sun.value} essence and {natal_moon.value} emotional nature meet today's Moon in "
                    f"{moon.sign.value}, bringing {lookups.mood_influence(natal_moon, moon.sign)}."
                )
            else:
                body = f"Your {sun.value} Sun and {natal_moon.value} Moon give you a lens all your own."

        closings = corpus.CATEGORY_CLOSINGS[category]
        closing = closings[index_for(seed_for(chart, day, f"category-{category}"), len(closings))]
        return f"{body} {closing}"

    # week / month / year

    def weekly_insight(self, chart: BirthChart, transit_bodies: Sequence[CelestialBody], day: date) -> str:
        sun = chart.sun_sign
        moon = find_body(transit_bodies, "Moon")
        if moon is not None:
            opening = corpus.WEEKLY_TEMPLATE.format(
                moon_sign=moon.sign.value,
                moon_focus=lookups.MOON_FOCUS[moon.sign],
                sun_sign=sun.value,
                weekly_call=lookups.WEEKLY_CALL[sun],
            )
        else:
            opening = corpus.WEEKLY_NO_MOON_TEMPLATE.format(sun_sign=sun.value)

        templates = corpus.WEEKLY_ENERGY_TEMPLATES
        template = templates[index_for(seed_for(chart, day, "weekly-energy"), len(templates))]
        return f"{opening} {template.format(pattern=self.weekly_energy_pattern(chart, transit_bodies))}"

    def monthly_insight(self, chart: BirthChart, transit_bodies: Sequence[CelestialBody], day: date) -> str:
        return corpus.MONTHLY_TEMPLATE.format(
            theme=self.monthly_theme(chart, transit_bodies),
            traits=self.personality_traits(chart),
            approach=lookups.LIFE_APPROACH[chart.ascendant_sign],
        )

    def yearly_insight(self, chart: BirthChart, transit_bodies: Sequence[CelestialBody], day: date) -> str:
        return corpus.YEARLY_TEMPLATE.format(
            theme=self.yearly_theme(chart, transit_bodies),
            traits=self.personality_traits(chart),
            approach=lookups.LIFE_APPROACH[chart.ascendant_sign],
        )

    # building blocks

    def personality_traits(self, chart: BirthChart) -> str:
        return f"{lookups.SUN_TRAITS[chart.sun_sign]}, {lookups.MOON_TRAITS[chart.moon_sign]}"

    def personality_core(self, chart: BirthChart) -> str:
        return f"{self.personality_traits(chart)}, with a {lookups.LIFE_APPROACH[chart.ascendant_sign]}"

    def energy_pattern(self, chart: BirthChart, transit_bodies: Sequence[CelestialBody]) -> str:
        matches = []
        for name in corpus.DAILY_ENERGY_ORDER:
            aspect_type = self._sun_contact(chart, transit_bodies, name)
            entry = corpus.DAILY_ENERGY.get((name, aspect_type))
            if entry is not None:
                matches.append(entry)

        if not matches:
            aspect_type = self._sun_contact(chart, transit_bodies, "Moon")
            return corpus.LUNAR_PHASE_ENERGY.get(aspect_type, corpus.BALANCED_ENERGY)
        if len(matches) == 1:
            return matches[0][1]
        return "complex energy involving " + ", plus ".join(desc for desc, _, _ in matches[:2])

    def weekly_energy_pattern(self, chart: BirthChart, transit_bodies: Sequence[CelestialBody]) -> str:
        themes: list[str] = []
        focus = None
        strongest = -1
        for name in corpus.WEEKLY_ENERGY_ORDER:
            entry = corpus.WEEKLY_ENERGY.get((name, self._sun_contact(chart, transit_bodies, name)))
            if entry is not None:
                theme, weekly_focus, intensity = entry
                themes.append(theme)
                if intensity > strongest:
                    focus, strongest = weekly_focus, intensity
            if name == "Venus":
                venus_moon = self._natal_contact(chart, transit_bodies, "Venus", "Moon")
                if venus_moon in (AspectType.CONJUNCTION, AspectType.TRINE):
                    themes.append(corpus.VENUS_MOON_THEME)

        if not themes:
            return self.energy_pattern(chart, transit_bodies) + corpus.WEEKLY_STEADY_SUFFIX
        if len(themes) == 1:
            return focus or themes[0]
        return "multifaceted energy involving " + " combined with ".join(themes[:2])

    def monthly_theme(self, chart: BirthChart, transit_bodies: Sequence[CelestialBody]) -> str:
        themes = []
        for name in corpus.MONTHLY_ORDER:
            theme = corpus.MONTHLY_THEMES.get((name, self._sun_contact(chart, transit_bodies, name)))
            if theme is not None:
                themes.append(theme)
        venus_theme = corpus.MONTHLY_VENUS_THEMES.get(self._natal_contact(chart, transit_bodies, "Venus", "Venus"))
        if venus_theme is not None:
            themes.append(venus_theme)

        if not themes:
            return corpus.MONTHLY_DEFAULT
        if len(themes) == 1:
            return themes[0]
        return f"{themes[0]}, alongside {themes[1]}"

    def yearly_theme(self, chart: BirthChart, transit_bodies: Sequence[CelestialBody]) -> str:
        themes = []
        for name in corpus.YEARLY_ORDER:
            theme = corpus.YEARLY_THEMES.get((name, self._sun_contact(chart, transit_bodies, name)))
            if theme is not None:
                themes.append(theme)

        if not themes:
            return corpus.YEARLY_DEFAULT
        if len(themes) == 1:
            return themes[0]
        return f"{themes[0]}, while {themes[1]}"

    # cycles and themes

    def cycles(
        self,
        chart: BirthChart,
        day: date,
        transit_bodies: Optional[Sequence[CelestialBody]] = None,
    ) -> list[AstrologicalCycle]:
        engine = AspectEngine()
        if transit_bodies:
            aspects = engine.aspects_between(list(transit_bodies), list(chart.bodies))
        else:
            aspects = engine.aspects_between(list(chart.bodies))

        cycles: list[AstrologicalCycle] = []
        used_titles: set[str] = set()
        for aspect in aspects[:MAX_CYCLES]:
            influence = cycle_influence(aspect.first.name, aspect.second.name, aspect.type)
            pool = corpus.CYCLE_POOLS[influence]
            start = index_for(seed_for(chart, day, f"cycle-{aspect.label}"), len(pool))
            for step in range(len(pool)):
                title, description = pool[(start + step) % len(pool)]
                if title not in used_titles:
                    break
            used_titles.add(title)

            if transit_bodies:
                speed = aspect.first.speed
            else:
                speed = min(aspect.first.speed, aspect.second.speed, key=abs)
            cycles.append(
                AstrologicalCycle(
                    title=title,
                    planetary_aspect=aspect.label,
                    duration=duration_label(speed, aspect.type.orb),
                    description=description,
                    influence=influence,
                )
            )
        return cycles

    def themes(self, chart: BirthChart, transit_bodies: Sequence[CelestialBody], count: int = 3) -> list[str]:
        return self.theme_generator.daily_themes(chart, transit_bodies, count)

    def weekly_themes(self, chart: BirthChart, transit_bodies: Sequence[CelestialBody], count: int = 3) -> list[str]:
        return self.theme_generator.weekly_themes(chart, transit_bodies, count)

    def affirmations(self, day: date, count: int = 3) -> list[tuple[str, str]]:
        """(text, icon) pairs for the day, stepping seven entries apart."""

        items = corpus.AFFIRMATIONS
        day_of_year = day.timetuple().tm_yday
        return [items[(day_of_year + i * 7) % len(items)] for i in range(count)]

    def category_for_question(self, text: str) -> str:
        return category_for_question(text)

    # helpers

    def _natal_contact(
        self,
        chart: BirthChart,
        transit_bodies: Sequence[CelestialBody],
        transit_name: str,
        natal_name: str,
    ) -> Optional[AspectType]:
        body = find_body(transit_bodies, transit_name)
        if body is None:
            return None
        aspect = AspectEngine().aspect_between(body, chart.body(natal_name))
        return aspect.type if aspect is not None else None

    def _sun_contact(
        self, chart: BirthChart, transit_bodies: Sequence[CelestialBody], transit_name: str
    ) -> Optional[AspectType]:
        return self._natal_contact(chart, transit_bodies, transit_name, "Sun")
