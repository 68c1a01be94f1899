"""Service object wiring the adapter, chart builder and generators together."""

from __future__ import annotations

import logging
from datetime import date, datetime, time
from typing import Optional, Union
from zoneinfo import ZoneInfo

from .aspects import AspectEngine
from .astro_engine import EphemerisAdapter, require_complete
from .chart import ChartBuilder, validate_birth_data
from .houses import DEFAULT_HOUSE_SYSTEM, HOUSE_SYSTEMS, HouseCalculator, check_polar, julian_day, mean_obliquity
from .interpretation import InsightGenerator
from .models import BODY_NAMES, Aspect, AstrologicalCycle, BirthChart, BirthData, CelestialBody, HoroscopeScores
from .scoring import ScoringEngine
from .transits import TransitCalculator

LOG = logging.getLogger(__name__)

LOCAL_NOON = time(12, 0)


class AstrologyService:
    """Entry point for chart, score and insight calculations.

    The adapter is injected; the service holds no per-call state, so one
    instance can be shared freely.
    """

    def __init__(self, adapter: EphemerisAdapter, house_system: str = DEFAULT_HOUSE_SYSTEM) -> None:
        self.adapter = adapter
        self.house_system = house_system.upper()
        self.builder = ChartBuilder()
        self.transit_calculator = TransitCalculator(adapter)
        self.aspect_engine = AspectEngine()
        self.scoring = ScoringEngine()
        self.insights = InsightGenerator()

    # charts

    def birth_chart(self, birth_data: BirthData) -> BirthChart:
        validate_birth_data(birth_data)
        instant = birth_data.utc_instant
        LOG.debug("building chart for %s at %s", birth_data.label or "birth data", instant.isoformat())

        positions = require_complete(self.adapter.body_positions(instant))
        positions = {name: positions[name] for name in BODY_NAMES}
        geometry = self._house_geometry(instant, birth_data.latitude, birth_data.longitude)
        return self.builder.build(birth_data, positions, geometry)

    def _house_geometry(self, instant: datetime, latitude: float, longitude: float):
        if self.house_system in HOUSE_SYSTEMS:
            return HouseCalculator(self.house_system).houses(instant, latitude, longitude)
        check_polar(latitude, mean_obliquity(julian_day(instant)))
        return self.adapter.house_geometry(instant, latitude, longitude, self.house_system)

    # transits

    def transits(self, at: Union[date, datetime]) -> list[CelestialBody]:
        return self.transit_calculator.positions_at(at)

    def transit_instant(self, chart: BirthChart, day: date) -> datetime:
        """Local noon of ``day`` in the birth timezone."""

        return datetime.combine(day, LOCAL_NOON, tzinfo=ZoneInfo(chart.birth_data.timezone))

    def day_transits(self, chart: BirthChart, day: date) -> list[CelestialBody]:
        return self.transits(self.transit_instant(chart, day))

    # aspects

    def natal_aspects(self, chart: BirthChart) -> list[Aspect]:
        return self.aspect_engine.aspects_between(list(chart.bodies))

    def transit_aspects(self, chart: BirthChart, at: Union[date, datetime]) -> list[Aspect]:
        if isinstance(at, datetime):
            transits = self.transits(at)
        else:
            transits = self.day_transits(chart, at)
        return self.aspect_engine.aspects_between(transits, list(chart.bodies))

    # scores and text

    def daily_scores(self, chart: BirthChart, day: date) -> HoroscopeScores:
        return self.scoring.scores(chart, day)

    def daily_insight(self, chart: BirthChart, day: date, category: Optional[str] = None) -> str:
        return self.insights.daily_insight(chart, self.day_transits(chart, day), day, category)

    def weekly_insight(self, chart: BirthChart, day: date) -> str:
        return self.insights.weekly_insight(chart, self.day_transits(chart, day), day)

    def monthly_insight(self, chart: BirthChart, day: date) -> str:
        return self.insights.monthly_insight(chart, self.day_transits(chart, day), day)

    def yearly_insight(self, chart: BirthChart, day: date) -> str:
        return self.insights.yearly_insight(chart, self.day_transits(chart, day), day)

    def cycles(self, chart: BirthChart, day: date) -> list[AstrologicalCycle]:
        return self.insights.cycles(chart, day, self.day_transits(chart, day))

    def daily_themes(self, chart: BirthChart, day: date, count: int = 3) -> list[str]:
        return self.insights.themes(chart, self.day_transits(chart, day), count)

    def weekly_themes(self, chart: BirthChart, day: date, count: int = 3) -> list[str]:
        return self.insights.weekly_themes(chart, self.day_transits(chart, day), count)

    def answer(self, chart: BirthChart, question: str, day: date) -> str:
        """Category insight for a free-form question."""

        category = self.insights.category_for_question(question)
        return self.daily_insight(chart, day, category=category)
