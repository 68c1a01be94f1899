from datetime import datetime, timezone

import pytest

from horoscope_engine.errors import InvalidBirthData, UndefinedAscendant
from horoscope_engine.houses import (
    HouseCalculator,
    ascendant_longitude,
    greenwich_sidereal_time,
    julian_day,
    mean_obliquity,
    midheaven_longitude,
    polar_limit,
    porphyry_cusps,
)

INSTANT = datetime(2024, 3, 15, 12, 0, tzinfo=timezone.utc)


def circular_walk(cusps):
    """Sum of forward steps 1 -> 2 -> ... -> 12 -> 1."""

    return sum((cusps[(i + 1) % 12] - cusps[i]) % 360.0 for i in range(12))


def test_julian_day_at_j2000():
    assert julian_day(datetime(2000, 1, 1, 12, 0, tzinfo=timezone.utc)) == pytest.approx(2451545.0)


def test_sidereal_time_and_obliquity_at_j2000():
    assert greenwich_sidereal_time(2451545.0) == pytest.approx(280.46061837)
    assert mean_obliquity(2451545.0) == pytest.approx(23.4392911, abs=1e-6)
    assert polar_limit(23.44) == pytest.approx(66.56)


@pytest.mark.parametrize(
    "ramc, expected_mc, expected_asc",
    [(0.0, 0.0, 90.0), (90.0, 90.0, 180.0), (180.0, 180.0, 270.0), (270.0, 270.0, 0.0)],
)
def test_angles_on_the_equator(ramc, expected_mc, expected_asc):
    assert midheaven_longitude(ramc, 23.44) == pytest.approx(expected_mc, abs=1e-9)
    asc = ascendant_longitude(ramc, 23.44, 0.0)
    assert min(abs(asc - expected_asc), 360.0 - abs(asc - expected_asc)) < 1e-9


@pytest.mark.parametrize("system", ["E", "O"])
@pytest.mark.parametrize("latitude", [-50.0, -12.5, 0.0, 40.7128, 60.0])
def test_cusps_walk_forward_once_around(system, latitude):
    geometry = HouseCalculator(system).houses(INSTANT, latitude, -74.006)
    assert len(geometry.houses) == 12
    assert [h.number for h in geometry.houses] == list(range(1, 13))
    assert circular_walk(geometry.cusps) == pytest.approx(360.0)
    assert geometry.houses[0].cusp == pytest.approx(geometry.ascendant)
    assert geometry.system == system


@pytest.mark.parametrize("latitude", [-60.0, 0.0, 51.5, 64.0])
def test_midheaven_sits_in_the_quadrant_before_ascendant(latitude):
    geometry = HouseCalculator("E").houses(INSTANT, latitude, 10.0)
    assert 0.0 < (geometry.ascendant - geometry.midheaven) % 360.0 < 180.0


def test_equal_houses_are_thirty_degrees_apart():
    geometry = HouseCalculator("E").houses(INSTANT, 40.7128, -74.006)
    for house, nxt in zip(geometry.houses, geometry.houses[1:]):
        assert (nxt.cusp - house.cusp) % 360.0 == pytest.approx(30.0)


def test_porphyry_puts_angles_on_cardinal_houses():
    geometry = HouseCalculator("O").houses(INSTANT, 40.7128, -74.006)
    assert geometry.houses[9].cusp == pytest.approx(geometry.midheaven)
    assert geometry.houses[3].cusp == pytest.approx((geometry.midheaven + 180.0) % 360.0)
    assert geometry.houses[6].cusp == pytest.approx((geometry.ascendant + 180.0) % 360.0)


def test_porphyry_trisects_quadrants():
    cusps = porphyry_cusps(100.0, 10.0)
    # ASC 100 -> IC 190 is a 90 degree quadrant.
    assert cusps[:4] == pytest.approx([100.0, 130.0, 160.0, 190.0])


@pytest.mark.parametrize("latitude", [70.0, -70.0, 89.9])
def test_polar_latitude_raises_undefined_ascendant(latitude):
    with pytest.raises(UndefinedAscendant):
        HouseCalculator("E").houses(INSTANT, latitude, 0.0)


@pytest.mark.parametrize("lat, lon", [(91.0, 0.0), (0.0, 181.0), (float("nan"), 0.0)])
def test_out_of_range_coordinates_raise(lat, lon):
    with pytest.raises(InvalidBirthData):
        HouseCalculator("E").houses(INSTANT, lat, lon)


def test_unsupported_system_raises():
    with pytest.raises(ValueError):
        HouseCalculator("P")


def test_system_code_is_case_insensitive():
    assert HouseCalculator("o").system == "O"
