from datetime import date, datetime, timedelta, timezone

import pytest

from horoscope_engine.errors import EphemerisUnavailable
from horoscope_engine.models import BODY_NAMES, CelestialBody, RawPosition
from horoscope_engine.transits import (
    NO_MOON_LABEL,
    TransitCalculator,
    moon_label,
    transit_instant,
    transit_summary,
)

from conftest import FakeAdapter


def make_body(name, longitude, speed=1.0):
    return CelestialBody(name=name, symbol="", longitude=longitude, latitude=0.0, distance=1.0, speed=speed)


def test_date_maps_to_noon_utc():
    assert transit_instant(date(2024, 3, 15)) == datetime(2024, 3, 15, 12, 0, tzinfo=timezone.utc)


def test_naive_datetime_is_read_as_utc():
    assert transit_instant(datetime(2024, 3, 15, 6, 0)).tzinfo is timezone.utc
    aware = datetime(2024, 3, 15, 6, 0, tzinfo=timezone(timedelta(hours=2)))
    assert transit_instant(aware) is aware


def test_moon_label():
    assert moon_label([make_body("Sun", 10.0), make_body("Moon", 331.5)]) == "MOON IN PISCES"
    assert moon_label([make_body("Sun", 10.0)]) == NO_MOON_LABEL


def test_transit_summary_flags_retrograde():
    lines = transit_summary([make_body("Mars", 12.07, speed=-0.2), make_body("Venus", 45.0)]).splitlines()
    assert lines == ["Mars ♈ 12°04' R", "Venus ♉ 15°00'"]


def test_positions_at_a_date_use_noon(fake_adapter):
    bodies = TransitCalculator(fake_adapter).positions_at(date(2024, 3, 15))
    assert [b.name for b in bodies] == BODY_NAMES
    assert fake_adapter.calls == [datetime(2024, 3, 15, 12, 0, tzinfo=timezone.utc)]


def test_extra_adapter_bodies_are_ignored():
    class WithChiron(FakeAdapter):
        def body_positions(self, instant):
            positions = super().body_positions(instant)
            positions["Chiron"] = RawPosition(longitude=10.0, latitude=0.0, distance=1.0, speed=0.1)
            return positions

    bodies = TransitCalculator(WithChiron()).positions_at(date(2024, 3, 15))
    assert len(bodies) == 10


def test_missing_body_means_ephemeris_unavailable():
    with pytest.raises(EphemerisUnavailable, match="Moon"):
        TransitCalculator(FakeAdapter(drop=("Moon",))).positions_at(date(2024, 3, 15))


def test_single_body_lookup(fake_adapter):
    calculator = TransitCalculator(fake_adapter)
    assert calculator.body(date(2024, 3, 15), "Mars").name == "Mars"
    with pytest.raises(KeyError):
        calculator.body(date(2024, 3, 15), "Chiron")


def test_same_instant_gives_same_positions(fake_adapter):
    calculator = TransitCalculator(fake_adapter)
    assert calculator.positions_at(date(2024, 3, 15)) == calculator.positions_at(date(2024, 3, 15))
