from datetime import datetime, timezone

import pytest

from horoscope_engine.chart import ChartBuilder
from horoscope_engine.houses import equal_cusps
from horoscope_engine.models import BODY_NAMES, BirthData, House, HouseGeometry, RawPosition

# Natal longitudes for the sample chart: Sun Taurus, Moon Pisces, Libra rising.
NATAL_LONGITUDES = {
    "Sun": 54.5,
    "Moon": 331.5,
    "Mercury": 40.0,
    "Venus": 20.0,
    "Mars": 300.0,
    "Jupiter": 100.0,
    "Saturn": 295.0,
    "Uranus": 278.0,
    "Neptune": 284.0,
    "Pluto": 226.0,
}
NATAL_SPEEDS = {
    "Sun": 0.96,
    "Moon": 13.2,
    "Mercury": 1.4,
    "Venus": 1.2,
    "Mars": 0.7,
    "Jupiter": 0.23,
    "Saturn": -0.05,
    "Uranus": 0.03,
    "Neptune": 0.02,
    "Pluto": -0.01,
}
SAMPLE_ASCENDANT = 200.0


def raw_positions(longitudes: dict[str, float], speeds: dict[str, float] | None = None) -> dict[str, RawPosition]:
    speeds = speeds or NATAL_SPEEDS
    return {
        name: RawPosition(longitude=lon, latitude=0.0, distance=1.0, speed=speeds.get(name, 1.0))
        for name, lon in longitudes.items()
    }


def equal_geometry(ascendant: float, midheaven: float | None = None, system: str = "E") -> HouseGeometry:
    cusps = equal_cusps(ascendant)
    return HouseGeometry(
        ascendant=ascendant,
        midheaven=midheaven if midheaven is not None else (ascendant - 90.0) % 360.0,
        houses=tuple(House(number=i + 1, cusp=c) for i, c in enumerate(cusps)),
        system=system,
    )


class FakeAdapter:
    """Ephemeris stand-in: bodies sit on the sample longitudes at the sample birth
    instant and move linearly from there."""

    epoch = datetime(1990, 5, 15, 18, 30, tzinfo=timezone.utc)

    def __init__(self, drop: tuple[str, ...] = ()):
        self.drop = drop
        self.calls: list[datetime] = []
        self.house_calls: list[tuple[float, float, str]] = []

    def body_positions(self, instant: datetime) -> dict[str, RawPosition]:
        self.calls.append(instant)
        days = (instant - self.epoch).total_seconds() / 86400.0
        positions = {}
        for name in BODY_NAMES:
            if name in self.drop:
                continue
            speed = NATAL_SPEEDS[name]
            positions[name] = RawPosition(
                longitude=(NATAL_LONGITUDES[name] + speed * days) % 360.0,
                latitude=0.0,
                distance=1.0,
                speed=speed,
            )
        return positions

    def house_geometry(self, instant: datetime, latitude: float, longitude: float, system: str) -> HouseGeometry:
        self.house_calls.append((latitude, longitude, system))
        return equal_geometry(SAMPLE_ASCENDANT, system=system)


@pytest.fixture
def birth_data() -> BirthData:
    return BirthData(
        instant=datetime(1990, 5, 15, 14, 30),
        latitude=40.7128,
        longitude=-74.006,
        timezone="America/New_York",
        label="Sample",
    )


@pytest.fixture
def sample_chart(birth_data):
    return ChartBuilder().build(birth_data, raw_positions(NATAL_LONGITUDES), equal_geometry(SAMPLE_ASCENDANT))


@pytest.fixture
def fake_adapter() -> FakeAdapter:
    return FakeAdapter()
